"""
Copyright (c) 2020, the Decred developers
See LICENSE for details
"""

import random

import pytest

from primefield import config, field


# Primes spanning the unsigned 32-bit range, from the smallest field to the
# largest 32-bit prime.
PRIMES = (2, 3, 19, 31, 65521, 2147483647, 4294967291)


@pytest.fixture(autouse=True)
def defaultConfig(monkeypatch, tmp_path):
    """
    Keep the user's configuration file out of the tests, and restore the
    primality checking default that config.load sets.
    """
    cfg = config.FieldConfig(str(tmp_path / config.CONFIG_NAME))
    monkeypatch.setattr(config, "fieldConfig", cfg)
    monkeypatch.setattr(field, "checkPrimes", False)
    return cfg


@pytest.fixture
def rng():
    return random.Random(0)


@pytest.fixture(params=PRIMES)
def prime(request):
    return request.param
