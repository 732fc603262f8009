"""
Bounded exact fractions in sign-magnitude form.

A BoundedFraction stores a rational number as an unsigned numerator, an
unsigned denominator and a separate sign bit. Both magnitudes are limited to
the unsigned 32-bit range, which gives one more bit of magnitude than a
signed encoding would. Zero has exactly one representation, the sentinel
(0, 0, 0); a non-zero numerator over a zero denominator never occurs.

Arithmetic on these values lives in bounded_fraction_operations, where every
operation returns an ArithmeticResult instead of raising on overflow.
"""

from fractions import Fraction
from typing import NamedTuple
import operator

from sympy import Rational


class BoundedFraction(NamedTuple):
    """
    Signed rational number in lowest terms.

    Equality is field-wise: two values are equal only when numerator,
    denominator and sign all match. Values produced by the arithmetic
    operations are always reduced, so this is exact rational equality.
    """
    numerator: int
    denominator: int
    sign: int = 0

    @classmethod
    def from_int(cls, value: int) -> 'BoundedFraction':
        """Create a whole number; zero becomes the sentinel."""
        value = operator.index(value)
        if value == 0:
            return ZERO
        return cls(abs(value), 1, 1 if value < 0 else 0)

    @classmethod
    def from_ratio(cls, numerator: int, denominator: int) -> 'BoundedFraction':
        """
        Create a reduced fraction from a signed integer ratio.

        A zero denominator yields the zero sentinel regardless of the numerator.
        The sign is negative when exactly one of the two integers is negative.
        """
        numerator = operator.index(numerator)
        denominator = operator.index(denominator)
        if denominator == 0:
            return ZERO
        sign = 1 if (numerator < 0) != (denominator < 0) else 0
        # local import, the operations module depends on this one
        from .bounded_fraction_operations import reduce
        return reduce(cls(abs(numerator), abs(denominator), sign))

    def is_zero(self) -> bool:
        return self.numerator == 0 and self.denominator == 0

    def is_one(self) -> bool:
        """True only for exactly +1"""
        return self.numerator == 1 and self.denominator == 1 and self.sign == 0

    def negated(self) -> 'BoundedFraction':
        """Flip the sign bit; the zero sentinel is left as it is."""
        if self.is_zero():
            return self
        return self._replace(sign=1 - self.sign)

    def signed_numerator(self) -> int:
        return -self.numerator if self.sign else self.numerator

    def to_fraction(self) -> Fraction:
        if self.is_zero():
            return Fraction(0)
        return Fraction(self.signed_numerator(), self.denominator)

    def to_sympy(self) -> Rational:
        if self.is_zero():
            return Rational(0)
        return Rational(self.signed_numerator(), self.denominator)

    def __str__(self) -> str:
        if self.is_zero():
            return "0"
        sign = "-" if self.sign else ""
        if self.denominator == 1:
            return f"{sign}{self.numerator}"
        return f"{sign}{self.numerator}/{self.denominator}"


ZERO = BoundedFraction(0, 0, 0)
ONE = BoundedFraction(1, 1, 0)


class ArithmeticResult(NamedTuple):
    """Value of a fraction operation together with its overflow indication."""
    value: BoundedFraction
    overflow: bool = False


OVERFLOWED = ArithmeticResult(ZERO, True)
