"""
Copyright (c) 2020, the Decred developers
See LICENSE for details
"""


class PrimeFieldError(Exception):
    pass
