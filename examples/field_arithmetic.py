"""
Copyright (c) 2020, The Decred developers

This example script walks through arithmetic in a small prime field and
shows how invalid input is reported.
"""

from primefield import PrimeFieldError, config
from primefield.field import FieldElement, add, div, mul, sub
from primefield.util import helpers


log = helpers.getLogger("EXAMPLE")


def main():
    config.load().prepareLogging()

    a = FieldElement.new(2, 31)
    b = FieldElement.new(15, 31)
    print(f"{a} + {b} = {add(a, b)}")
    print(f"{a} - {b} = {sub(a, b)}")
    print(f"{a} * {b} = {mul(a, b)}")
    print(f"{a} / {b} = {div(a, b)}")
    print(f"{FieldElement(17, 31)} ^ 3 = {FieldElement(17, 31).pow(3)}")
    print(f"{a} ^ -1 = {a.pow(-1)}")

    # Invalid input raises instead of aborting.
    invalid = (
        lambda: FieldElement.new(31, 31),
        lambda: add(a, FieldElement(1, 19)),
        lambda: div(a, FieldElement.zero(31)),
    )
    for bad in invalid:
        try:
            bad()
        except PrimeFieldError as e:
            log.info(f"rejected: {e}")
            log.debug(helpers.formatTraceback(e))


if __name__ == "__main__":
    main()
