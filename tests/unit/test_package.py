"""Smoke tests for the public package surface."""

import argonhash


def test_public_api_exports():
    for name in argonhash.__all__:
        assert hasattr(argonhash, name), name


def test_errors_share_a_base_class():
    for exc in (
        argonhash.InvalidHashError,
        argonhash.IncompatibleVersionError,
        argonhash.RandomSourceError,
        argonhash.DerivationError,
        argonhash.MismatchedHashAndPasswordError,
    ):
        assert issubclass(exc, argonhash.ArgonHashError)
