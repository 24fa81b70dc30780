"""
Copyright (c) 2020, the Decred developers
See LICENSE for details

Arithmetic over the prime field GF(p) for an unsigned 32-bit prime p.

Every element holds a residue, value, and the modulus it is defined over, with
0 <= value < modulus. Elements are immutable. Arithmetic only combines
elements of the same field and always produces a new, fully reduced element.

The modulus is assumed to be prime. Division and inversion rely on Fermat's
little theorem, a^(p-2) * a = 1 (mod p), which does not hold for composite
moduli. Pass checkPrime=True to FieldElement.new, or set the module-level
checkPrimes (config.load does so from the checkprimes setting), to have the
modulus verified at construction. Construction itself never reads the
configuration file.
"""

from primefield import PrimeFieldError, primes


# Elements are confined to the unsigned 32-bit range.
UINT_BITS = 32
MAX_UINT = (1 << UINT_BITS) - 1

# Default for the checkPrime argument of FieldElement. Applications switch it
# on explicitly, or through config.load.
checkPrimes = False


class OutOfRangeError(PrimeFieldError):
    """
    A value or modulus outside of its allowed range.
    """

    pass


class ModulusMismatchError(PrimeFieldError):
    """
    An operation between elements of different fields.
    """

    pass


class DivisionByZeroError(PrimeFieldError, ZeroDivisionError):
    """
    Division by, or inversion of, the zero element.
    """

    pass


class NotPrimeError(PrimeFieldError):
    """
    A composite modulus, raised only when primality checking is on.
    """

    pass


def _checkInt(name, n):
    # bool is an int subclass but never a sensible field value.
    if not isinstance(n, int) or isinstance(n, bool):
        raise TypeError(f"{name} must be an int, not {type(n).__name__}")


def _checkModulus(modulus):
    _checkInt("modulus", modulus)
    if modulus < 2 or modulus > MAX_UINT:
        raise OutOfRangeError(f"modulus {modulus} not in range 2 to {MAX_UINT}")


def modPow(base, exponent, modulus):
    """
    Modular exponentiation by square-and-multiply. Every intermediate product
    is reduced modulo the modulus, so no intermediate exceeds modulus^2.

    Args:
        base (int): The base.
        exponent (int): The non-negative exponent.
        modulus (int): The modulus.

    Returns:
        int: base^exponent mod modulus, in [0, modulus). 0^0 is 1.
    """
    if exponent < 0:
        raise OutOfRangeError(f"negative exponent {exponent}")
    result = 1 % modulus
    base %= modulus
    while exponent > 0:
        if exponent & 1:
            result = result * base % modulus
        base = base * base % modulus
        exponent >>= 1
    return result


class FieldElement:
    """
    FieldElement is an element of the prime field GF(modulus).
    """

    __slots__ = ("_value", "_modulus")

    def __init__(self, value, modulus, checkPrime=None):
        """
        Args:
            value (int): The residue, 0 <= value < modulus.
            modulus (int): The prime modulus, 2 <= modulus <= MAX_UINT.
            checkPrime (bool): optional. Verify that the modulus is prime.
                Defaults to the module-level checkPrimes.
        """
        _checkModulus(modulus)
        _checkInt("value", value)
        if value < 0 or value >= modulus:
            raise OutOfRangeError(
                f"num {value} not in field range 0 to {modulus - 1}"
            )
        if checkPrime is None:
            checkPrime = checkPrimes
        if checkPrime and not primes.isPrime(modulus):
            raise NotPrimeError(f"modulus {modulus} is not prime")
        self._value = value
        self._modulus = modulus

    @classmethod
    def new(cls, value, modulus, checkPrime=None):
        """
        Validating factory. Identical to the constructor.

        Raises:
            OutOfRangeError: value or modulus out of range.
            NotPrimeError: primality checking is on and the modulus is
                composite.
        """
        return cls(value, modulus, checkPrime)

    @classmethod
    def fromInt(cls, n, modulus, checkPrime=None):
        """
        Reduce an arbitrary integer into the field.

        Args:
            n (int): Any integer, including negatives.
            modulus (int): The prime modulus.
            checkPrime (bool): optional. See FieldElement.

        Returns:
            FieldElement: n mod modulus.
        """
        _checkModulus(modulus)
        _checkInt("n", n)
        return cls(n % modulus, modulus, checkPrime)

    @classmethod
    def zero(cls, modulus):
        """
        The additive identity of GF(modulus).
        """
        return cls(0, modulus)

    @classmethod
    def one(cls, modulus):
        """
        The multiplicative identity of GF(modulus).
        """
        return cls(1, modulus)

    @property
    def value(self):
        return self._value

    @property
    def modulus(self):
        return self._modulus

    def _sibling(self, value):
        # The modulus was validated when self was built.
        return FieldElement(value, self._modulus, checkPrime=False)

    def isZero(self):
        return self._value == 0

    def isOne(self):
        return self._value == 1

    def equals(self, other):
        """
        Whether other is the same element of the same field.

        Args:
            other (FieldElement): The element to compare to.

        Returns:
            bool: True if both value and modulus are equal.
        """
        return self._value == other._value and self._modulus == other._modulus

    def pow(self, exponent):
        """
        Raise the element to an integer power. A negative exponent raises the
        multiplicative inverse to the absolute value of the exponent.

        Args:
            exponent (int): The exponent.

        Returns:
            FieldElement: self^exponent.

        Raises:
            DivisionByZeroError: zero raised to a negative exponent.
        """
        _checkInt("exponent", exponent)
        if exponent < 0:
            return self.inverse().pow(-exponent)
        return self._sibling(modPow(self._value, exponent, self._modulus))

    def inverse(self):
        """
        The multiplicative inverse, self^(p-2) by Fermat's little theorem.

        Returns:
            FieldElement: The inverse.

        Raises:
            DivisionByZeroError: self is zero.
        """
        if self._value == 0:
            raise DivisionByZeroError(
                f"zero has no inverse in field of {self._modulus}"
            )
        return self._sibling(modPow(self._value, self._modulus - 2, self._modulus))

    def negate(self):
        """
        The additive inverse.
        """
        return self._sibling((self._modulus - self._value) % self._modulus)

    def square(self):
        return mul(self, self)

    def __add__(self, other):
        if not isinstance(other, FieldElement):
            return NotImplemented
        return add(self, other)

    def __sub__(self, other):
        if not isinstance(other, FieldElement):
            return NotImplemented
        return sub(self, other)

    def __mul__(self, other):
        if not isinstance(other, FieldElement):
            return NotImplemented
        return mul(self, other)

    def __truediv__(self, other):
        if not isinstance(other, FieldElement):
            return NotImplemented
        return div(self, other)

    def __pow__(self, exponent, modulo=None):
        # Three-argument pow has no meaning, the modulus is fixed.
        if modulo is not None:
            return NotImplemented
        if not isinstance(exponent, int) or isinstance(exponent, bool):
            return NotImplemented
        return self.pow(exponent)

    def __neg__(self):
        return self.negate()

    def __eq__(self, other):
        if not isinstance(other, FieldElement):
            return NotImplemented
        return self.equals(other)

    def __hash__(self):
        return hash((self._value, self._modulus))

    def __int__(self):
        return self._value

    def __repr__(self):
        return f"FieldElement({self._value}, {self._modulus})"


def _checkSameField(a, b, verb):
    if not isinstance(a, FieldElement) or not isinstance(b, FieldElement):
        raise TypeError(
            f"cannot {verb} {type(a).__name__} and {type(b).__name__}"
        )
    if a.modulus != b.modulus:
        raise ModulusMismatchError(
            f"cannot {verb} two numbers in different fields"
            f" ({a.modulus} and {b.modulus})"
        )


def add(a, b):
    """
    Field addition.

    Args:
        a (FieldElement): The augend.
        b (FieldElement): The addend. Must share a's modulus.

    Returns:
        FieldElement: (a + b) mod p.

    Raises:
        ModulusMismatchError: The moduli differ.
    """
    _checkSameField(a, b, "add")
    return a._sibling((a.value + b.value) % a.modulus)


def sub(a, b):
    """
    Field subtraction. The modulus is added before subtracting so that the
    difference is never negative.

    Args:
        a (FieldElement): The minuend.
        b (FieldElement): The subtrahend. Must share a's modulus.

    Returns:
        FieldElement: (a - b) mod p.

    Raises:
        ModulusMismatchError: The moduli differ.
    """
    _checkSameField(a, b, "subtract")
    return a._sibling((a.value + a.modulus - b.value) % a.modulus)


def mul(a, b):
    """
    Field multiplication.

    Raises:
        ModulusMismatchError: The moduli differ.
    """
    _checkSameField(a, b, "multiply")
    return a._sibling(a.value * b.value % a.modulus)


def div(a, b):
    """
    Field division, a * b^(p-2) mod p. The product with the inverse is reduced
    before the result is built.

    Args:
        a (FieldElement): The dividend.
        b (FieldElement): The nonzero divisor. Must share a's modulus.

    Returns:
        FieldElement: a / b.

    Raises:
        ModulusMismatchError: The moduli differ.
        DivisionByZeroError: b is zero.
    """
    _checkSameField(a, b, "divide")
    if b.isZero():
        raise DivisionByZeroError(f"division by zero in field of {a.modulus}")
    inv = modPow(b.value, b.modulus - 2, b.modulus)
    return a._sibling(a.value * inv % a.modulus)
