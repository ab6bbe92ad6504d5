"""Argon2id key derivation and secure random bytes for argonhash."""
import logging
import os

from argon2.exceptions import HashingError
from argon2.low_level import ARGON2_VERSION, Type, hash_secret_raw

from ..core.exceptions import DerivationError, RandomSourceError

logger = logging.getLogger(__name__)

ALGORITHM = "argon2id"
VERSION = ARGON2_VERSION

# argon2 needs at least 8 KiB of memory per lane
_MIN_MEMORY_PER_LANE = 8


def generate_random_bytes(n: int) -> bytes:
    """
    Return n cryptographically secure random bytes.

    Raises RandomSourceError if the system random source fails or returns
    fewer bytes than requested, in which case the caller should not continue.
    """
    try:
        data = os.urandom(n)
    except (OSError, NotImplementedError) as err:
        logger.warning("System random source failed: %s", err)
        raise RandomSourceError(f"system random source failed: {err}") from err

    if len(data) != n:
        logger.warning("System random source returned %d of %d bytes", len(data), n)
        raise RandomSourceError(f"system random source returned {len(data)} of {n} bytes")
    return data


def derive_key(
    password: bytes,
    salt: bytes,
    iterations: int,
    memory_cost: int,
    parallelism: int,
    key_length: int,
) -> bytes:
    """
    Derive a key from a password using Argon2id.
    Returns raw derived key bytes.
    """
    if isinstance(password, str):
        password = password.encode("utf-8")

    # Raise memory_cost to the per-lane minimum instead of failing on it, so
    # hashes encoded with a small (or zero) memory_cost stay verifiable.
    memory = max(memory_cost, _MIN_MEMORY_PER_LANE * parallelism)
    logger.debug(
        "Deriving key: t=%d m=%d p=%d len=%d", iterations, memory, parallelism, key_length
    )

    try:
        return hash_secret_raw(
            secret=password,
            salt=salt,
            time_cost=iterations,
            memory_cost=memory,
            parallelism=parallelism,
            hash_len=key_length,
            type=Type.ID,
            version=VERSION,
        )
    except (HashingError, OverflowError) as err:
        raise DerivationError(f"argon2 rejected the derivation parameters: {err}") from err
