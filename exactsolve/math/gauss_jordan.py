"""
Gauss-Jordan elimination on bounded exact fractions.

The engine reduces the working copy of an augmented matrix to reduced row
echelon form one pivot column at a time. A zero pivot cell is replaced by the
first non-zero entry found below it in the same column; a column without any
usable entry is skipped without consuming a pivot row. Running out of columns
this way means the system has no unique solution and is classified as either
INFINITE_SOLUTIONS or NO_SOLUTIONS.

Column clearing only uses multiply, add and divide. The pivot row is first
normalized so that its pivot is +1 and then negated, so that adding the
pivot row scaled by a target row's entry m cancels that entry exactly
(m + (-1) * m = 0). Dividing the pivot row by m afterwards restores it, and
the final negation returns it to its normalized orientation.

Any overflow reported by the fraction operations aborts the reduction with
OVERFLOW.
"""

import logging
from typing import Optional

from exactsolve.names import SolveStatus, INFINITE_SOLUTIONS, NO_SOLUTIONS, OVERFLOW
from .augmented_matrix import AugmentedMatrix
from .row_operations import swap_rows, multiply_row, divide_row, add_rows, negate_row

LOG = logging.getLogger(__name__)


class GaussJordan:
    """
    Gauss-Jordan elimination with row pivoting and degeneracy classification.

    The engine keeps no state between calls; one instance can reduce any
    number of matrices in sequence.
    """

    def reduce(self, matrix: AugmentedMatrix) -> Optional[SolveStatus]:
        """
        Reduce `matrix` in place.

        Args:
            matrix: Working copy to reduce (modified in-place)

        Returns:
            None if the matrix reached reduced row echelon form with a
            non-zero last diagonal entry and needs verification, otherwise
            the terminal status (INFINITE_SOLUTIONS, NO_SOLUTIONS or OVERFLOW)
        """
        count = matrix.get_equation_count()
        row = 0
        col = 0
        while col < count:
            col = self._find_pivot(matrix, row, col)
            if col == count:
                return self._classify(matrix, row)

            if self._eliminate_column(matrix, row, col):
                LOG.warning(f"Overflow while clearing column {col} with pivot row {row}.")
                return OVERFLOW

            row += 1
            col += 1

        # Unreachable once every column produced a pivot; kept as the documented final check.
        if count and matrix.get_value_at(count - 1, count - 1).is_zero():
            return self._classify_by_constant(matrix, count - 1)
        return None

    def _find_pivot(self, matrix: AugmentedMatrix, row: int, col: int) -> int:
        """
        Make (row, col) non-zero, skipping columns that have no usable entry.

        Returns:
            The pivot column, or N when every remaining column is exhausted
        """
        count = matrix.get_equation_count()
        while col < count:
            if not matrix.get_value_at(row, col).is_zero():
                return col
            for candidate in range(row + 1, count):
                if not matrix.get_value_at(candidate, col).is_zero():
                    LOG.debug(f"Pivot column {col}: swapping rows {row} and {candidate}.")
                    swap_rows(matrix, row, candidate)
                    return col
            LOG.debug(f"Pivot column {col}: no non-zero entry at or below row {row}, skipping.")
            col += 1
        return col

    def _classify(self, matrix: AugmentedMatrix, row: int) -> SolveStatus:
        """Classify a system whose pivot columns ran out at pivot row `row`."""
        count = matrix.get_equation_count()
        if matrix.get_value_at(row, count).is_zero():
            LOG.debug(f"No pivot left for row {row} and its constant is zero.")
            return INFINITE_SOLUTIONS
        for candidate in range(count):
            if matrix.is_zero_row(candidate):
                LOG.debug(f"Row {candidate} is entirely zero, dependent equation.")
                return INFINITE_SOLUTIONS
        LOG.debug(f"No pivot left for row {row} and its constant is non-zero.")
        return NO_SOLUTIONS

    def _classify_by_constant(self, matrix: AugmentedMatrix, row: int) -> SolveStatus:
        if matrix.get_value_at(row, matrix.get_equation_count()).is_zero():
            return INFINITE_SOLUTIONS
        return NO_SOLUTIONS

    def _eliminate_column(self, matrix: AugmentedMatrix, pivot_row: int, col: int) -> bool:
        """
        Normalize the pivot at (pivot_row, col) to one and clear its column.

        Returns:
            True if an overflow occurred
        """
        pivot = matrix.get_value_at(pivot_row, col)
        if not pivot.is_one():
            if divide_row(matrix, pivot_row, pivot):
                return True

        negate_row(matrix, pivot_row)

        others = list(range(pivot_row - 1, -1, -1)) + list(range(pivot_row + 1, matrix.get_equation_count()))
        for row in others:
            multiplier = matrix.get_value_at(row, col)
            if multiplier.is_zero():
                continue
            if multiply_row(matrix, pivot_row, multiplier):
                return True
            if add_rows(matrix, row, pivot_row):
                return True
            if divide_row(matrix, pivot_row, multiplier):
                return True

        negate_row(matrix, pivot_row)
        return False
