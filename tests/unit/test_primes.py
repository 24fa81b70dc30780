"""
Copyright (c) 2020, the Decred developers
See LICENSE for details
"""

import pytest

from primefield import PrimeFieldError
from primefield.primes import MAX_DETERMINISTIC, isPrime


def sieve(n):
    isP = [True] * n
    isP[0] = isP[1] = False
    for i in range(2, int(n ** 0.5) + 1):
        if isP[i]:
            for j in range(i * i, n, i):
                isP[j] = False
    return isP


def test_small():
    for n, want in enumerate(sieve(5000)):
        assert isPrime(n) == want, n
    assert not isPrime(-7)


def test_large():
    for p in (65521, 65537, 2147483647, 4294967291):
        assert isPrime(p), p
    composites = (
        # Carmichael numbers.
        561,
        41041,
        # Strong pseudoprimes to base 2, to bases 2 and 3, to bases 2, 3 and
        # 5, and to bases 2, 3, 5 and 7.
        2047,
        1373653,
        25326001,
        3215031751,
        # 2^32 - 1 and the fifth Fermat number.
        4294967295,
        4294967297,
    )
    for n in composites:
        assert not isPrime(n), n


def test_range():
    assert not isPrime(MAX_DETERMINISTIC)
    with pytest.raises(PrimeFieldError):
        isPrime(MAX_DETERMINISTIC + 1)
