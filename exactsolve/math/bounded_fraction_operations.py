"""
Overflow-checked arithmetic on BoundedFraction values.

Every binary operation computes its intermediate products at full precision
and compares them against the 32-bit bounds before they are stored. The
first bound violation aborts the operation and returns OVERFLOWED, an
ArithmeticResult holding the zero sentinel with overflow set. Callers check
`result.overflow` at each call site and stop.

Results are always passed through reduce(), so equal rationals compare equal
field by field.
"""

import math

from exactsolve.names import UINT32_MAX, INT32_MAX, INT32_MIN
from .bounded_fraction import BoundedFraction, ArithmeticResult, ZERO, OVERFLOWED


def _fits_unsigned(value: int) -> bool:
    return value <= UINT32_MAX


def _fits_signed(value: int) -> bool:
    return INT32_MIN <= value <= INT32_MAX


def reduce(fraction: BoundedFraction) -> BoundedFraction:
    """
    Reduce a fraction to lowest terms.

    Zero (numerator or denominator 0) collapses to the sentinel and a
    numerator equal to its denominator collapses to one with the sign kept;
    neither needs a GCD. Otherwise both magnitudes are divided by their
    greatest common divisor.

    Args:
        fraction: possibly unreduced fraction

    Returns:
        The canonical representation of the same value
    """
    numerator, denominator, sign = fraction
    if numerator == 0 or denominator == 0:
        return ZERO
    if numerator == denominator:
        return BoundedFraction(1, 1, sign)
    divisor = math.gcd(numerator, denominator)
    return BoundedFraction(numerator // divisor, denominator // divisor, sign)


def multiply(fraction1: BoundedFraction, fraction2: BoundedFraction) -> ArithmeticResult:
    """Multiply two fractions, numerator by numerator and denominator by denominator."""
    numerator = fraction1.numerator * fraction2.numerator
    if not _fits_unsigned(numerator):
        return OVERFLOWED
    denominator = fraction1.denominator * fraction2.denominator
    if not _fits_unsigned(denominator):
        return OVERFLOWED
    if numerator != 0 and denominator == 0:
        return ArithmeticResult(fraction1)
    sign = fraction1.sign ^ fraction2.sign
    return ArithmeticResult(reduce(BoundedFraction(numerator, denominator, sign)))


def divide(dividend: BoundedFraction, divisor: BoundedFraction) -> ArithmeticResult:
    """
    Divide by multiplying with the reciprocal of the divisor.

    Dividing a non-zero value by the zero sentinel returns the dividend
    unaltered and without overflow. The engine never pivots on zero, so this
    only guards misuse through the public row operations.
    """
    if divisor.is_zero():
        return ArithmeticResult(dividend)
    numerator = dividend.numerator * divisor.denominator
    if not _fits_unsigned(numerator):
        return OVERFLOWED
    denominator = dividend.denominator * divisor.numerator
    if not _fits_unsigned(denominator):
        return OVERFLOWED
    if numerator != 0 and denominator == 0:
        return ArithmeticResult(dividend)
    sign = dividend.sign ^ divisor.sign
    return ArithmeticResult(reduce(BoundedFraction(numerator, denominator, sign)))


def add(fraction1: BoundedFraction, fraction2: BoundedFraction) -> ArithmeticResult:
    """
    Add two fractions over the product of their denominators.

    Operands of the same sign are summed as unsigned magnitudes and keep that
    sign. Operands of different sign are combined as signed 32-bit values:
    each signed numerator, each cross product and the final sum must stay
    inside [INT32_MIN, INT32_MAX], and the sign of the result is taken from
    the sum.

    Args:
        fraction1: first summand
        fraction2: second summand

    Returns:
        ArithmeticResult with the reduced sum, or OVERFLOWED
    """
    if fraction1.is_zero():
        return ArithmeticResult(fraction2)
    if fraction2.is_zero():
        return ArithmeticResult(fraction1)

    if fraction1.sign == fraction2.sign:
        numerator = fraction1.numerator * fraction2.denominator + fraction2.numerator * fraction1.denominator
        if not _fits_unsigned(numerator):
            return OVERFLOWED
        sign = fraction1.sign
    else:
        signed1 = fraction1.signed_numerator()
        signed2 = fraction2.signed_numerator()
        if not (_fits_signed(signed1) and _fits_signed(signed2)):
            return OVERFLOWED
        product1 = signed1 * fraction2.denominator
        if not _fits_signed(product1):
            return OVERFLOWED
        product2 = signed2 * fraction1.denominator
        if not _fits_signed(product2):
            return OVERFLOWED
        total = product1 + product2
        if not _fits_signed(total):
            return OVERFLOWED
        sign = 1 if total < 0 else 0
        numerator = abs(total)

    denominator = fraction1.denominator * fraction2.denominator
    if not _fits_unsigned(denominator):
        return OVERFLOWED
    if numerator != 0 and denominator == 0:
        return ArithmeticResult(fraction1)
    return ArithmeticResult(reduce(BoundedFraction(numerator, denominator, sign)))

