"""Provides the toy RSA cipher: per-character encryption and decryption.

Every character of a message is encrypted on its own by raising its code point to the public exponent. There
is no padding and no blocking, which is exactly what makes the scheme trivially breakable and easy to follow.

Typical usage example:

    c = encrypt(55, 3, "!")
    r = decrypt(55, 27, c)
"""
# Copyright (c) 2025-present Tech. TTGames
# SPDX-License-Identifier: EPL-2.0
from typing import Iterable
import warnings

from toyrsa import numtheory
from toyrsa.errors import InvalidCodePoint

MAX_CODE_POINT = 0x10FFFF
SURROGATES = range(0xD800, 0xE000)


class RSAKey:
    """The overall RSA key class implementation.

    Holds the two components shared by both halves of a key pair.

    Attributes:
        mod: The modulus of the keypair.
        expo: The exponent of the key, whether private or public.
    """

    def __init__(self, mod: int, expo: int) -> None:
        self.mod = mod
        self.expo = expo

    def __repr__(self) -> str:
        return f"{type(self).__name__}(mod={self.mod}, expo={self.expo})"

    def c_rsa(self, message: int) -> int:
        """Performs core RSA operation. (Encrypt/Decrypt).

        Representatives at or above the modulus are reduced rather than rejected.

        Args:
            message: The int-marshalled message.

        Returns:
            The transformed message.

        Raises:
            ValueError: If the message is negative.
        """
        if message < 0:
            raise ValueError("Message representative must be non-negative")
        return numtheory.mod_pow(message, self.expo, self.mod)


class RSAPubKey(RSAKey):
    """Public half of a toy key pair, (modulus, public exponent)."""

    def encrypt(self, message: str) -> list[int]:
        """Use the public key to encrypt the message, one character at a time.

        Args:
            message: The message to encrypt. May be empty.

        Returns:
            One ciphertext integer per character, in order.
        """
        codes = [ord(char) for char in message]
        if any(code >= self.mod for code in codes):
            warnings.warn(f"Message holds code points >= modulus {self.mod}, they will not decrypt back!",
                          RuntimeWarning)
        return [self.c_rsa(code) for code in codes]


class RSAPrivKey(RSAKey):
    """Private half of a toy key pair, (modulus, private exponent)."""

    def decrypt(self, ciphertext: Iterable[int]) -> str:
        """Decrypt a sequence of ciphertext integers back into text.

        Args:
            ciphertext: Ordered, already parsed ciphertext integers.

        Returns:
            The cleartext.

        Raises:
            InvalidCodePoint: If a decrypted value is not a valid character.
        """
        chars = []
        for token in ciphertext:
            code = self.c_rsa(token)
            if code > MAX_CODE_POINT or code in SURROGATES:
                raise InvalidCodePoint(f"Token {token} decrypts to {code}, which is not a valid character")
            chars.append(chr(code))
        return "".join(chars)


def encrypt(n: int, e: int, message: str) -> list[int]:
    """Encrypt `message` with the public key (n, e)."""
    return RSAPubKey(n, e).encrypt(message)


def decrypt(n: int, d: int, ciphertext: Iterable[int]) -> str:
    """Decrypt `ciphertext` with the private key (n, d)."""
    return RSAPrivKey(n, d).decrypt(ciphertext)
