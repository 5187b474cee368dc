"""Toy key generation utility, mainly focusing on the small primes keys are drawn from.

Primes come from a textbook Sieve of Eratosthenes bounded by the key space. Two distinct primes are sampled
without replacement and the key pair is derived from them with the brute-force searches in `numtheory`.

Typical usage example:

    primes_up_to(100)
    is_prime(97)
    kp = generate()
    kp = generate(50, random.Random(1234))
"""
# Copyright (c) 2025-present Tech. TTGames
# SPDX-License-Identifier: EPL-2.0
import math
import random
import secrets
import typing

from toyrsa import numtheory
from toyrsa.errors import InsufficientPrimes

KEY_SPACE: int = 100


class KeyPair(typing.NamedTuple):
    """A complete toy key pair, including the internal values it was derived from.

    Attributes:
        n: The modulus, p * q.
        e: The public exponent.
        d: The private exponent.
        phi: The totient, (p - 1) * (q - 1).
        p: Prime 1.
        q: Prime 2.
    """
    n: int
    e: int
    d: int
    phi: int
    p: int
    q: int


def _sieve(n: int = KEY_SPACE) -> list[int]:
    """Implements the Sieve of Eratosthenes.

    Uses the textbook Sieve of Eratosthenes to generate a set of primes up to `n`.
    Includes memory space optimization and sieving until root.

    Args:
        n: The number up to which to generate primes. Defaults to `KEY_SPACE`. Must be >= 0.

    Returns:
        A list of primes up to `n`.
    """
    if n < 2:
        return []
    i_size = (n - 1) // 2
    candidate: list[bool] = [True] * i_size
    for i in range(math.isqrt(n) // 2):
        if candidate[i]:
            r = 2 * i + 3
            for j in range((r * r - 3) // 2, i_size, r):
                candidate[j] = False
    return [2] + [(no * 2 + 3) for no, ele in enumerate(candidate) if ele]


def primes_up_to(bound: int) -> list[int]:
    """Get every prime less than or equal to `bound`, in ascending order.

    Args:
        bound: Inclusive upper limit. Must be >= 0.

    Returns:
        List of primes in ascending order, a fresh list on every call.

    Raises:
        ValueError: If `bound` is negative.
    """
    if bound < 0:
        raise ValueError("bound must be >= 0")
    return _sieve(bound)


def is_prime(n: int) -> bool:
    """Trial division primality test.

    Args:
        n: The candidate.

    Returns:
        True if `n` is prime, False otherwise.
    """
    if n < 2:
        return False
    for x in range(2, math.isqrt(n) + 1):
        if n % x == 0:
            return False
    return True


def generate(key_space: int = KEY_SPACE, rng: random.Random | None = None) -> KeyPair:
    """Generates a toy RSA key pair.

    Samples two distinct primes from the key space and derives the totient, modulus and both exponents from
    them. Nothing is retried: any failure aborts generation.

    Args:
        key_space: Upper bound for the primes. Defaults to `KEY_SPACE`.
        rng: Source of randomness for the prime and public exponent draws.
            Defaults to a `secrets.SystemRandom` instance.

    Returns:
        The generated key pair.

    Raises:
        InsufficientPrimes: If fewer than two primes lie in [2, key_space].
        NoCandidate: If the sampled primes leave no usable public exponent (only for p, q = 2, 3).
    """
    rng = rng or secrets.SystemRandom()
    primes = primes_up_to(max(key_space, 0))
    if len(primes) < 2:
        raise InsufficientPrimes(f"Key space {key_space} holds {len(primes)} prime(s), at least 2 are needed")
    p, q = rng.sample(primes, 2)
    # Euler's totient for a product of two distinct primes.
    phi = (p - 1) * (q - 1)
    n = p * q
    e = numtheory.derive_public_exponent(phi, rng)
    d = numtheory.derive_private_exponent(phi, e)
    return KeyPair(n, e, d, phi, p, q)
