"""argonhash: argon2id password hashing with a self-describing text encoding.

Typical use:

    hashed = generate_from_password(b"secret")
    compare_hash_and_password(hashed, b"secret")  # raises on mismatch
"""

import logging

from .core.exceptions import (
    ArgonHashError,
    InvalidHashError,
    IncompatibleVersionError,
    RandomSourceError,
    DerivationError,
    MismatchedHashAndPasswordError,
)
from .core.params import (
    DEFAULT,
    MIN_ITERATIONS,
    MIN_PARALLELISM,
    MIN_SALT_LENGTH,
    MIN_KEY_LENGTH,
    Params,
    normalize,
)
from .core.codec import Hash, encode, decode
from .security import ALGORITHM, VERSION, generate_random_bytes
from .passwords import (
    generate_from_password,
    generate_from_password_string,
    compare_hash_and_password,
    compare_hash_and_password_string,
)
from .logging_config import configure_logging

# silent unless the application configures logging
logging.getLogger(__name__).addHandler(logging.NullHandler())

__all__ = [
    "ArgonHashError",
    "InvalidHashError",
    "IncompatibleVersionError",
    "RandomSourceError",
    "DerivationError",
    "MismatchedHashAndPasswordError",
    "DEFAULT",
    "MIN_ITERATIONS",
    "MIN_PARALLELISM",
    "MIN_SALT_LENGTH",
    "MIN_KEY_LENGTH",
    "Params",
    "normalize",
    "Hash",
    "encode",
    "decode",
    "ALGORITHM",
    "VERSION",
    "generate_random_bytes",
    "generate_from_password",
    "generate_from_password_string",
    "compare_hash_and_password",
    "compare_hash_and_password_string",
    "configure_logging",
]
