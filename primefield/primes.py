"""
Copyright (c) 2020, the Decred developers
See LICENSE for details

Primality testing for field moduli.

References:
  [JAESCHKE]: On strong pseudoprimes to several bases (G. Jaeschke, 1993)
    Math. Comp. 61, 915-926
"""

from functools import lru_cache

from primefield import PrimeFieldError
from primefield.util import helpers


# Miller-Rabin with the witnesses 2, 7 and 61 has no false positives below
# 4759123141 [JAESCHKE], which covers every unsigned 32-bit integer.
WITNESSES = (2, 7, 61)
MAX_DETERMINISTIC = 4759123140

SMALL_PRIMES = (2, 3, 5, 7, 11, 13, 17, 19, 23, 29, 31, 37, 41, 43, 47, 53, 59, 61)

log = helpers.getLogger("PRIMES")


def _isStrongProbablePrime(n, a, d, s):
    """
    Whether n is a strong probable prime to base a, with n - 1 = d * 2^s and
    d odd.
    """
    x = pow(a, d, n)
    if x == 1 or x == n - 1:
        return True
    for _ in range(s - 1):
        x = x * x % n
        if x == n - 1:
            return True
    return False


@lru_cache(maxsize=1024)
def isPrime(n):
    """
    Deterministic Miller-Rabin primality test.

    Args:
        n (int): The integer to test. Must be no larger than
            MAX_DETERMINISTIC.

    Returns:
        bool: True if n is prime.
    """
    if n > MAX_DETERMINISTIC:
        raise PrimeFieldError(
            f"{n} is beyond the deterministic primality range {MAX_DETERMINISTIC}"
        )
    if n < 2:
        return False
    for p in SMALL_PRIMES:
        if n % p == 0:
            return n == p
    d, s = n - 1, 0
    while d % 2 == 0:
        d //= 2
        s += 1
    prime = all(_isStrongProbablePrime(n, a, d, s) for a in WITNESSES)
    log.debug(f"{n} is {'prime' if prime else 'composite'}")
    return prime
