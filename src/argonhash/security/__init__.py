"""Security helpers: Argon2id derivation, random bytes and constant-time comparison.

The argon2 algorithm itself comes from argon2-cffi; this package only wraps it
with the parameters and error types argonhash uses.
"""

from .kdf import ALGORITHM, VERSION, generate_random_bytes, derive_key
from .compare import constant_time_compare

__all__ = [
    "ALGORITHM",
    "VERSION",
    "generate_random_bytes",
    "derive_key",
    "constant_time_compare",
]
