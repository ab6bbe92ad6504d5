"""Text encoding of argon2 hashes.

Layout (fields separated by "$", the leading field is empty):

    $<algorithm>$v=<version>$m=<memory_cost>,t=<iterations>,p=<parallelism>$<salt>$<key>

salt and key are standard-alphabet base64 without padding. The layout is shared
with other argon2 implementations, so it must stay byte-for-byte stable.
"""

from __future__ import annotations

import base64
import binascii
import re
from dataclasses import dataclass, field
from typing import Union

from .exceptions import IncompatibleVersionError, InvalidHashError
from .params import Params, UINT8_MAX, UINT32_MAX
from ..security.kdf import ALGORITHM, VERSION

SEPARATOR = "$"
FIELD_COUNT = 6

_VERSION_RE = re.compile(r"v=([0-9]+)")
_PARAMS_RE = re.compile(r"m=([0-9]+),t=([0-9]+),p=([0-9]+)")


@dataclass(frozen=True)
class Hash:
    """A derived key together with everything needed to recompute it."""

    params: Params
    salt: bytes = field(repr=False)
    key: bytes = field(repr=False)
    algorithm: str = ALGORITHM
    version: int = VERSION

    def __post_init__(self) -> None:
        if len(self.salt) != self.params.salt_length:
            raise ValueError("salt length does not match params.salt_length")
        if len(self.key) != self.params.key_length:
            raise ValueError("key length does not match params.key_length")


def _b64encode(data: bytes) -> str:
    return base64.b64encode(data).decode("ascii").rstrip("=")


def _b64decode(segment: str, name: str) -> bytes:
    # Padding is never emitted, so it is not accepted either.
    if not segment.isascii() or "=" in segment or len(segment) % 4 == 1:
        raise InvalidHashError(f"malformed base64 in {name}")
    try:
        return base64.b64decode(segment + "=" * (-len(segment) % 4), validate=True)
    except binascii.Error as err:
        raise InvalidHashError(f"malformed base64 in {name}") from err


def encode(h: Hash) -> str:
    """Serialize h into its "$"-delimited text form."""
    p = h.params
    return (
        f"${h.algorithm}$v={h.version}"
        f"$m={p.memory_cost},t={p.iterations},p={p.parallelism}"
        f"${_b64encode(h.salt)}${_b64encode(h.key)}"
    )


def decode(encoded: Union[str, bytes]) -> Hash:
    """
    Parse an encoded hash.

    Raises InvalidHashError for anything not in the expected layout and
    IncompatibleVersionError when the version is not the one in use. The
    salt and key lengths are taken from the decoded bytes and are not checked
    against the minimums, so every previously encoded hash decodes.
    """
    if isinstance(encoded, (bytes, bytearray)):
        try:
            encoded = bytes(encoded).decode("ascii")
        except UnicodeDecodeError as err:
            raise InvalidHashError("the encoded hash is not ASCII") from err

    parts = encoded.split(SEPARATOR)
    if len(parts) != FIELD_COUNT:
        raise InvalidHashError(
            f"the encoded hash is not in the correct format: expected {FIELD_COUNT} fields, got {len(parts)}"
        )

    m = _VERSION_RE.fullmatch(parts[2])
    if m is None:
        raise InvalidHashError(f"malformed version field {parts[2]!r}")
    version = int(m.group(1))
    if version != VERSION:
        raise IncompatibleVersionError(f"incompatible version {version}, expected {VERSION}")

    m = _PARAMS_RE.fullmatch(parts[3])
    if m is None:
        raise InvalidHashError(f"malformed parameters field {parts[3]!r}")
    memory_cost, iterations, parallelism = (int(g) for g in m.groups())
    if max(memory_cost, iterations, parallelism) > UINT32_MAX:
        raise InvalidHashError(f"parameter out of range in {parts[3]!r}")
    if parallelism > UINT8_MAX:
        raise InvalidHashError(f"parallelism out of range in {parts[3]!r}")

    salt = _b64decode(parts[4], "salt")
    key = _b64decode(parts[5], "key")

    params = Params(
        memory_cost=memory_cost,
        iterations=iterations,
        parallelism=parallelism,
        salt_length=len(salt),
        key_length=len(key),
    )
    return Hash(params=params, salt=salt, key=key, algorithm=parts[1], version=version)
