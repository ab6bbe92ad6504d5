"""Password hash generation and comparison.

Hashes are argon2id derived keys with their parameters and salt prepended,
separated by the "$" character (see argonhash.core.codec for the layout).
"""

from __future__ import annotations

import logging
from typing import Union

from .core.codec import Hash, decode, encode
from .core.exceptions import MismatchedHashAndPasswordError
from .core.params import DEFAULT, Params, normalize
from .security.compare import constant_time_compare
from .security.kdf import derive_key, generate_random_bytes

logger = logging.getLogger(__name__)


def _new_from_password(password: bytes, p: Params) -> Hash:
    salt = generate_random_bytes(p.salt_length)
    key = derive_key(password, salt, p.iterations, p.memory_cost, p.parallelism, p.key_length)
    return Hash(params=p, salt=salt, key=key)


def generate_from_password(password: Union[bytes, str], params: Params = DEFAULT) -> bytes:
    """
    Return the encoded hash of password using the given parameters.

    If a parameter is below its minimum acceptable value it is set to the
    DEFAULT value; memory_cost is used as given.
    """
    if isinstance(password, str):
        password = password.encode("utf-8")

    h = _new_from_password(password, normalize(params))
    return encode(h).encode("ascii")


def generate_from_password_string(password: str, params: Params = DEFAULT) -> str:
    return generate_from_password(password.encode("utf-8"), params).decode("ascii")


def compare_hash_and_password(hashed_password: Union[bytes, str], password: Union[bytes, str]) -> None:
    """
    Compare an encoded hash with its possible plaintext equivalent.

    The parameters and salt stored in the hash are used for the derivation.
    Returns None on success and raises MismatchedHashAndPasswordError if the
    derived keys do not match. Decoding errors propagate unchanged.
    """
    if isinstance(password, str):
        password = password.encode("utf-8")

    h = decode(hashed_password)
    p = h.params
    candidate = derive_key(password, h.salt, p.iterations, p.memory_cost, p.parallelism, p.key_length)

    if constant_time_compare(h.key, candidate):
        return None

    logger.debug("Password does not match the given hash")
    raise MismatchedHashAndPasswordError(
        "the hashed password does not match the hash of the given password"
    )


def compare_hash_and_password_string(hashed_password: str, password: str) -> None:
    compare_hash_and_password(hashed_password, password.encode("utf-8"))
