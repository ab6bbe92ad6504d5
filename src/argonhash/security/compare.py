"""Constant-time byte comparison."""
from cryptography.hazmat.primitives import constant_time


def constant_time_compare(expected: bytes, actual: bytes) -> bool:
    """Return True if both byte strings are equal, in time independent of their content."""
    # Lengths are public (the key length is part of the encoded hash); only
    # the content must not leak through timing.
    if len(expected) != len(actual):
        return False
    return constant_time.bytes_eq(bytes(expected), bytes(actual))
