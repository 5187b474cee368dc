"""Number theory primitives behind toy RSA: gcd, modular exponentiation and exponent derivation.

Exponent derivation is a deliberate brute-force linear scan. Phi is bounded by the square of the key space, so
scanning every candidate stays cheap and keeps each step easy to follow by hand.

Typical usage example:

    e = derive_public_exponent(40)
    d = derive_private_exponent(40, e)
    c = mod_pow(33, e, 55)
"""
# Copyright (c) 2025-present Tech. TTGames
# SPDX-License-Identifier: EPL-2.0
import math
import random
import secrets

from toyrsa.errors import NoCandidate
from toyrsa.errors import NoModularInverse


def gcd(a: int, b: int) -> int:
    """Greatest common divisor via `math.gcd`, restricted to natural numbers.

    Args:
        a: The first natural number.
        b: The second natural number.

    Returns:
        Greatest common divisor of the two integers.

    Raises:
        ValueError: If either number is negative.
    """
    if a < 0 or b < 0:
        raise ValueError("gcd is only defined here for non-negative integers")
    return math.gcd(a, b)


def mod_pow(base: int, exponent: int, modulus: int) -> int:
    """Computes `base**exponent % modulus` with the three-argument `pow`.

    The full power is never materialized, so large exponents stay cheap.

    Args:
        base: The number to raise.
        exponent: The power to raise it to. Must be >= 0.
        modulus: The modulus. Must be >= 1.

    Returns:
        The reduced power, in range [0, modulus - 1].

    Raises:
        ValueError: If the exponent is negative or the modulus is not positive.
    """
    if modulus < 1:
        raise ValueError("modulus must be >= 1")
    if exponent < 0:
        raise ValueError("exponent must be >= 0")
    return pow(base, exponent, modulus)


def derive_public_exponent(phi: int, rng: random.Random | None = None) -> int:
    """Pick a random public exponent for the given totient.

    Collects every e in [2, phi) coprime to `phi` and draws one uniformly.

    Args:
        phi: The totient of the modulus.
        rng: Source of randomness. Defaults to a `secrets.SystemRandom` instance.

    Returns:
        A public exponent `e` with gcd(e, phi) == 1.

    Raises:
        NoCandidate: If no coprime exponent exists in range.
    """
    rng = rng or secrets.SystemRandom()
    candidates = [e for e in range(2, phi) if gcd(e, phi) == 1]
    if not candidates:
        raise NoCandidate(f"No public exponent in [2, {phi}) is coprime to {phi}")
    return rng.choice(candidates)


def derive_private_exponent(phi: int, e: int) -> int:
    """Find the private exponent matching `e`.

    Scans upwards from 2 and returns the first d such that `e * d % phi == 1`.

    Args:
        phi: The totient of the modulus.
        e: The public exponent.

    Returns:
        The smallest private exponent `d` in [2, phi).

    Raises:
        NoModularInverse: If `e` has no inverse modulo `phi`.
    """
    for d in range(2, phi):
        if e * d % phi == 1:
            return d
    raise NoModularInverse(f"Public exponent {e} has no inverse modulo {phi}")
