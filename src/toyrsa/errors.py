"""Error kinds raised by the toy RSA core and its command line shell.

Every error shares the `ToyRSAError` base so the shell can report them uniformly, while still subclassing the
builtin exception that best describes the failure.
"""
# Copyright (c) 2025-present Tech. TTGames
# SPDX-License-Identifier: EPL-2.0


class ToyRSAError(Exception):
    """Base class for all toyrsa errors."""


class NoCandidate(ToyRSAError, RuntimeError):
    """No public exponent coprime to phi exists in [2, phi)."""


class NoModularInverse(ToyRSAError, ValueError):
    """The public exponent has no inverse modulo phi, so it was never coprime to phi."""


class InsufficientPrimes(ToyRSAError, ValueError):
    """Fewer than two primes are available in the key space."""


class InvalidCodePoint(ToyRSAError, ValueError):
    """A decrypted value is not a valid Unicode character."""


class ModulusNotFactorable(ToyRSAError, ValueError):
    """The modulus is not a product of two distinct primes."""


class InvalidArgument(ToyRSAError, ValueError):
    """A value was supplied that the requested operation cannot use."""


class MalformedInput(ToyRSAError, ValueError):
    """Text could not be parsed where an integer was expected."""
