"""
Re-substitution check for a reduced system.

Reaching reduced row echelon form does not by itself prove the candidate
solution satisfies the original equations, so every original row is
evaluated with the candidate values and compared exactly against its
constant term.
"""

import logging
from typing import List, Optional, Tuple

from exactsolve.names import SolveStatus, SOLVED, NO_SOLUTIONS, OVERFLOW
from .augmented_matrix import AugmentedMatrix
from .bounded_fraction import BoundedFraction, ZERO
from .bounded_fraction_operations import add, multiply

LOG = logging.getLogger(__name__)


def candidate_solution(reduced: AugmentedMatrix) -> List[BoundedFraction]:
    """The constant column of the reduced matrix, one value per unknown."""
    count = reduced.get_equation_count()
    return [reduced.get_value_at(row, count) for row in range(count)]


def evaluate_row(original: AugmentedMatrix, row: int, values: List[BoundedFraction]) -> Optional[BoundedFraction]:
    """
    Left-hand side of equation `row` at the given values.

    Returns:
        The exact sum, or None if an operation overflowed
    """
    total = ZERO
    for col, value in enumerate(values):
        product = multiply(original.get_value_at(row, col), value)
        if product.overflow:
            return None
        total_result = add(total, product.value)
        if total_result.overflow:
            return None
        total = total_result.value
    return total


def verify_solution(original: AugmentedMatrix, reduced: AugmentedMatrix) -> Tuple[SolveStatus, Tuple[BoundedFraction, ...]]:
    """
    Check the candidate solution of `reduced` against `original`.

    Args:
        original: The unreduced system as set by the caller
        reduced: The working copy after elimination

    Returns:
        (SOLVED, solution) when every equation holds exactly, otherwise
        (NO_SOLUTIONS, ()) or (OVERFLOW, ())
    """
    count = original.get_equation_count()
    values = candidate_solution(reduced)
    for row in range(count):
        total = evaluate_row(original, row, values)
        if total is None:
            LOG.warning(f"Overflow while verifying equation {row}.")
            return OVERFLOW, ()
        expected = original.get_value_at(row, count)
        if total != expected:
            LOG.debug(f"Equation {row} evaluates to {total}, expected {expected}.")
            return NO_SOLUTIONS, ()
    return SOLVED, tuple(values)
