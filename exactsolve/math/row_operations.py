"""
Elementary row operations on an AugmentedMatrix.

Rows are 0-based. An index outside [0, N) makes the operation a silent no-op.
The arithmetic operations return True when a fraction operation overflowed;
they stop at that entry and leave the remaining entries of the row as they
were, so a row may be partially updated when True is returned.
"""

from typing import Callable

from .augmented_matrix import AugmentedMatrix
from .bounded_fraction import BoundedFraction, ArithmeticResult
from .bounded_fraction_operations import add, multiply, divide


def _in_bounds(matrix: AugmentedMatrix, *rows: int) -> bool:
    count = matrix.get_equation_count()
    return all(0 <= row < count for row in rows)


def swap_rows(matrix: AugmentedMatrix, row1: int, row2: int):
    if not _in_bounds(matrix, row1, row2):
        return
    matrix.swap_rows(row1, row2)


def _apply_to_row(matrix: AugmentedMatrix, row: int, operand: BoundedFraction,
                  operation: Callable[[BoundedFraction, BoundedFraction], ArithmeticResult]) -> bool:
    if not _in_bounds(matrix, row):
        return False
    values = matrix.get_row(row)
    for col in range(matrix.get_column_count()):
        result = operation(values[col], operand)
        if result.overflow:
            return True
        values[col] = result.value
    return False


def multiply_row(matrix: AugmentedMatrix, row: int, multiplier: BoundedFraction) -> bool:
    """Multiply every entry of `row` by `multiplier`."""
    return _apply_to_row(matrix, row, multiplier, multiply)


def divide_row(matrix: AugmentedMatrix, row: int, divisor: BoundedFraction) -> bool:
    """Divide every entry of `row` by `divisor`."""
    return _apply_to_row(matrix, row, divisor, divide)


def add_rows(matrix: AugmentedMatrix, row: int, row_to_add: int) -> bool:
    """Add `row_to_add` entry-wise into `row`."""
    if not _in_bounds(matrix, row, row_to_add):
        return False
    target = matrix.get_row(row)
    source = matrix.get_row(row_to_add)
    for col in range(matrix.get_column_count()):
        result = add(target[col], source[col])
        if result.overflow:
            return True
        target[col] = result.value
    return False


def negate_row(matrix: AugmentedMatrix, row: int):
    """Flip the sign of every non-zero entry of `row`."""
    if not _in_bounds(matrix, row):
        return
    values = matrix.get_row(row)
    for col, value in enumerate(values):
        values[col] = value.negated()
