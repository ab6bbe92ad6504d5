"""
Exceptions for the argonhash package
Everything derives from ArgonHashError so callers have one general error catcher
"""


class ArgonHashError(Exception):
    # general container for errors
    pass


class InvalidHashError(ArgonHashError):
    # raised when an encoded hash is not in the correct format
    # (field count, v=/m=,t=,p= text, or base64 segments)
    pass


class IncompatibleVersionError(ArgonHashError):
    # raised when the encoded version differs from the argon2 version in use
    pass


class RandomSourceError(ArgonHashError):
    # raised when the system random source fails or returns a short read
    pass


class DerivationError(ArgonHashError):
    # raised when the argon2 primitive rejects its inputs
    pass


class MismatchedHashAndPasswordError(ArgonHashError):
    # raised when a password does not match the given hash
    pass
