"""Argon2 input parameters, the default profile and floor normalization.

See https://www.rfc-editor.org/rfc/rfc9106 for what each parameter controls.
"""

from __future__ import annotations

import dataclasses
import logging
from dataclasses import dataclass
from typing import Dict

logger = logging.getLogger(__name__)

# Minimum iterations (or passes) over the memory.
MIN_ITERATIONS = 1
# Minimum number of threads (or lanes) used by the algorithm.
MIN_PARALLELISM = 1
# Minimum length of the random salt.
MIN_SALT_LENGTH = 16
# Minimum length of the derived key (the password hash).
MIN_KEY_LENGTH = 16

UINT8_MAX = 0xFF
UINT32_MAX = 0xFFFFFFFF


@dataclass(frozen=True)
class Params:
    """Inputs to the argon2 key derivation function."""

    # amount of memory used by the algorithm, in kibibytes
    memory_cost: int
    iterations: int
    parallelism: int
    salt_length: int
    key_length: int

    def __post_init__(self) -> None:
        for field in dataclasses.fields(self):
            value = getattr(self, field.name)
            if isinstance(value, bool) or not isinstance(value, int):
                raise ValueError(f"{field.name} must be an integer, got {value!r}")
            if not 0 <= value <= UINT32_MAX:
                raise ValueError(f"{field.name} must be an unsigned 32-bit integer, got {value}")
        # lanes are a single byte in the encoded form other implementations read
        if self.parallelism > UINT8_MAX:
            raise ValueError(f"parallelism must be an unsigned 8-bit integer, got {self.parallelism}")

    def replace(self, **changes) -> Params:
        return dataclasses.replace(self, **changes)

    def to_dict(self) -> Dict[str, int]:
        return dataclasses.asdict(self)


# Sensible default inputs into the argon2 function.
DEFAULT = Params(
    memory_cost=64 * 1024,
    iterations=3,
    parallelism=2,
    salt_length=16,
    key_length=32,
)


def normalize(p: Params) -> Params:
    """
    Return a copy of p where every guarded field below its minimum is set to
    the DEFAULT value. Sub-floor input is substituted, never rejected.

    memory_cost is not guarded and passes through unchanged, 0 included.
    """
    changes = {}
    if p.iterations < MIN_ITERATIONS:
        changes["iterations"] = DEFAULT.iterations
    if p.parallelism < MIN_PARALLELISM:
        changes["parallelism"] = DEFAULT.parallelism
    if p.salt_length < MIN_SALT_LENGTH:
        changes["salt_length"] = DEFAULT.salt_length
    if p.key_length < MIN_KEY_LENGTH:
        changes["key_length"] = DEFAULT.key_length

    if not changes:
        return p
    logger.debug("Substituting default values for %s", ", ".join(sorted(changes)))
    return p.replace(**changes)
