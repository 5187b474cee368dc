"""Recovers a toy private key from its public half by factoring the modulus.

Factoring is plain trial division from 2 up to and including the integer square root of the modulus. It is
O(sqrt(n)) and only practical because the key space is tiny.

Typical usage example:

    p, q = factorize(55)
    res = crack(55, 3)
"""
# Copyright (c) 2025-present Tech. TTGames
# SPDX-License-Identifier: EPL-2.0
import math
import typing

from toyrsa import numtheory
from toyrsa.errors import ModulusNotFactorable
from toyrsa.keygen import is_prime


class CrackResult(typing.NamedTuple):
    """The private values recovered from a public key.

    Attributes:
        d: The private exponent.
        phi: The totient, (p - 1) * (q - 1).
        p: The smaller prime factor.
        q: The larger prime factor.
    """
    d: int
    phi: int
    p: int
    q: int


def factorize(n: int) -> tuple[int, int]:
    """Split a modulus into its two prime factors.

    The first divisor found is always the smallest prime factor. The cofactor is checked so a modulus with more
    than two prime factors, or a square of a prime, is refused instead of yielding a wrong totient.

    Args:
        n: The modulus to factor.

    Returns:
        Tuple of (p, q) with p < q and p * q == n.

    Raises:
        ModulusNotFactorable: If `n` is not the product of two distinct primes.
    """
    for x in range(2, math.isqrt(max(n, 0)) + 1):
        y, rem = divmod(n, x)
        if rem == 0:
            break
    else:
        raise ModulusNotFactorable(f"Modulus {n} has no proper factor")
    if x == y:
        raise ModulusNotFactorable(f"Modulus {n} is the square of {x}, not a product of distinct primes")
    if not is_prime(y):
        raise ModulusNotFactorable(f"Modulus {n} has more than two prime factors")
    return x, y


def crack(n: int, e: int) -> CrackResult:
    """Derive the private key for the public key (n, e).

    Args:
        n: The public modulus.
        e: The public exponent.

    Returns:
        The recovered private exponent, totient and primes.

    Raises:
        ModulusNotFactorable: If `n` is not the product of two distinct primes.
        NoModularInverse: If `e` is not coprime to the recovered totient.
    """
    p, q = factorize(n)
    phi = (p - 1) * (q - 1)
    d = numtheory.derive_private_exponent(phi, e)
    return CrackResult(d, phi, p, q)
