"""Toy RSA in an Academic Sense.

Demonstrates RSA on small integers: key generation from two small primes, per-character encryption and
decryption, and recovering the private key by factoring the modulus. Insecure by design.

Typical usage example:

    kp = generate()
    c = encrypt(kp.n, kp.e, "Hi there!")
    r = decrypt(kp.n, kp.d, c)
    res = crack(kp.n, kp.e)
"""
# Copyright (c) 2025-present Tech. TTGames
# SPDX-License-Identifier: EPL-2.0
from toyrsa.cracker import crack
from toyrsa.cracker import CrackResult
from toyrsa.keygen import generate
from toyrsa.keygen import is_prime
from toyrsa.keygen import KEY_SPACE
from toyrsa.keygen import KeyPair
from toyrsa.keygen import primes_up_to
from toyrsa.rsa import decrypt
from toyrsa.rsa import encrypt
from toyrsa.rsa import RSAPrivKey
from toyrsa.rsa import RSAPubKey

__version__ = "0.0.1"
__all__ = [
    "KEY_SPACE",
    "KeyPair",
    "CrackResult",
    "RSAPrivKey",
    "RSAPubKey",
    "primes_up_to",
    "is_prime",
    "generate",
    "encrypt",
    "decrypt",
    "crack",
]
