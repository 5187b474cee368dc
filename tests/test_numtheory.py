# pylint: disable=missing-module-docstring
# Copyright (c) 2025-present Tech. TTGames
# SPDX-License-Identifier: EPL-2.0
import math
import random

import pytest
import sympy

from toyrsa import numtheory
from toyrsa.errors import NoCandidate
from toyrsa.errors import NoModularInverse

gcd_cases = [(0, 0), (0, 7), (7, 0), (1, 1), (12, 18), (18, 12), (17, 40), (40, 17), (270, 192), (2**61 - 1, 2**31 - 1)]


@pytest.mark.parametrize("a,b", gcd_cases)
def test_gcd(a, b):
    assert numtheory.gcd(a, b) == math.gcd(a, b)


@pytest.mark.parametrize("a,b", [(-1, 2), (2, -1), (-4, -6)])
def test_gcd_validates(a, b):
    with pytest.raises(ValueError):
        numtheory.gcd(a, b)


@pytest.mark.parametrize("base", [0, 1, 2, 33, 65, 12345])
@pytest.mark.parametrize("exponent", [0, 1, 3, 27, 65537])
@pytest.mark.parametrize("modulus", [1, 2, 55, 3233, 2**127 - 1])
def test_mod_pow(base, exponent, modulus):
    assert numtheory.mod_pow(base, exponent, modulus) == pow(base, exponent, modulus)


@pytest.mark.parametrize("base,modulus", [(0, 1), (5, 1), (0, 7), (9, 7), (123456789, 55)])
def test_mod_pow_zero_exponent(base, modulus):
    assert numtheory.mod_pow(base, 0, modulus) == 1 % modulus


def test_mod_pow_modulus_one():
    assert numtheory.mod_pow(33, 3, 1) == 0


def test_mod_pow_concrete():
    assert numtheory.mod_pow(33, 3, 55) == 22
    assert numtheory.mod_pow(22, 27, 55) == 33


def test_mod_pow_large_exponent():
    # Would never finish if the full power was computed.
    assert numtheory.mod_pow(7, 10**30, 3233) == pow(7, 10**30, 3233)


@pytest.mark.parametrize("exponent,modulus", [(-1, 55), (3, 0), (3, -55)])
def test_mod_pow_validates(exponent, modulus):
    with pytest.raises(ValueError):
        numtheory.mod_pow(2, exponent, modulus)


def test_derive_public_exponent_candidates(mocker):
    rng = mocker.Mock()
    rng.choice.side_effect = lambda candidates: candidates[-1]
    e = numtheory.derive_public_exponent(40, rng)
    rng.choice.assert_called_once_with([3, 7, 9, 11, 13, 17, 19, 21, 23, 27, 29, 31, 33, 37, 39])
    assert e == 39


@pytest.mark.parametrize("phi", [3, 4, 8, 40, 60, 96, 3120, 9792])
@pytest.mark.parametrize("seed", range(5))
def test_derive_public_exponent_coprime(phi, seed):
    e = numtheory.derive_public_exponent(phi, random.Random(seed))
    assert 2 <= e < phi
    assert math.gcd(e, phi) == 1


def test_derive_public_exponent_default_rng():
    e = numtheory.derive_public_exponent(3120)
    assert math.gcd(e, 3120) == 1


@pytest.mark.parametrize("phi", [0, 1, 2])
def test_derive_public_exponent_no_candidate(phi):
    with pytest.raises(NoCandidate):
        numtheory.derive_public_exponent(phi, random.Random(0))


def test_derive_private_exponent_concrete():
    assert numtheory.derive_private_exponent(40, 3) == 27
    assert numtheory.derive_private_exponent(3120, 17) == 2753


@pytest.mark.parametrize("phi", [4, 8, 40, 60, 96, 440, 3120])
def test_derive_private_exponent_is_inverse(phi):
    for e in range(2, phi):
        if math.gcd(e, phi) != 1:
            continue
        d = numtheory.derive_private_exponent(phi, e)
        assert d == sympy.mod_inverse(e, phi)
        assert 1 < d < phi
        assert e * d % phi == 1


@pytest.mark.parametrize("phi,e", [(40, 4), (40, 5), (3120, 26), (2, 3), (0, 3)])
def test_derive_private_exponent_no_inverse(phi, e):
    with pytest.raises(NoModularInverse):
        numtheory.derive_private_exponent(phi, e)


def test_errors_are_builtin_kinds():
    with pytest.raises(ValueError):
        numtheory.derive_private_exponent(40, 4)
    with pytest.raises(RuntimeError):
        numtheory.derive_public_exponent(2)


def test_gcd_uses_math(mocker):
    fake = mocker.patch("toyrsa.numtheory.math.gcd", return_value=7)
    assert numtheory.gcd(12, 18) == 7
    fake.assert_called_once_with(12, 18)


def test_mod_pow_uses_builtin_pow(mocker):
    fake = mocker.patch("toyrsa.numtheory.pow", create=True, return_value=5)
    assert numtheory.mod_pow(33, 3, 55) == 5
    fake.assert_called_once_with(33, 3, 55)
