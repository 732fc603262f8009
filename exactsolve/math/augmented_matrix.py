"""
AugmentedMatrix - N x (N+1) grid of BoundedFraction values.

Rows are kept in an arena (a list of row lists) and addressed through a
logical-to-arena permutation. Swapping two rows only exchanges two entries of
that permutation, so a swap costs O(1) regardless of the row width. Indices
at this level are 0-based and unchecked; bounds checking happens in
row_operations and in the LinearSystem accessors.
"""

from typing import Iterator, List

from .bounded_fraction import BoundedFraction, ZERO


class AugmentedMatrix:
    """
    Augmented coefficient matrix of a square linear system.

    Column N (the last one) holds the constant term of each equation. A fresh
    matrix is filled with the zero sentinel.
    """

    def __init__(self, equation_count: int):
        """
        Allocate a zero-filled matrix.

        Args:
            equation_count: Number of equations N; the matrix has N rows and N+1 columns
        """
        if equation_count < 0:
            raise ValueError(f"negative equation count: {equation_count}")
        self._equation_count = equation_count
        self._rows: List[List[BoundedFraction]] = [[ZERO] * (equation_count + 1) for _ in range(equation_count)]
        self._order: List[int] = list(range(equation_count))

    @classmethod
    def from_rows(cls, rows: List[List[BoundedFraction]]) -> 'AugmentedMatrix':
        """Build a matrix from N rows of N+1 fractions each."""
        matrix = cls(len(rows))
        for index, row in enumerate(rows):
            if len(row) != matrix.get_column_count():
                raise ValueError(f"row {index} has {len(row)} entries, expected {matrix.get_column_count()}")
            matrix._rows[index] = list(row)
        return matrix

    def get_equation_count(self) -> int:
        return self._equation_count

    def get_row_count(self) -> int:
        return self._equation_count

    def get_column_count(self) -> int:
        return self._equation_count + 1

    def get_value_at(self, row: int, col: int) -> BoundedFraction:
        return self._rows[self._order[row]][col]

    def set_value_at(self, row: int, col: int, value: BoundedFraction):
        self._rows[self._order[row]][col] = value

    def get_row(self, row: int) -> List[BoundedFraction]:
        """Return the live row list behind logical row `row` (not a copy)."""
        return self._rows[self._order[row]]

    def swap_rows(self, row1: int, row2: int):
        """Exchange two logical rows by permuting their arena indices."""
        self._order[row1], self._order[row2] = self._order[row2], self._order[row1]

    def is_zero_row(self, row: int) -> bool:
        """True if all N+1 entries of the row are the zero sentinel."""
        return all(value.is_zero() for value in self.get_row(row))

    def copy(self) -> 'AugmentedMatrix':
        """Deep copy in logical row order; the copy starts with the identity permutation."""
        clone = AugmentedMatrix(0)
        clone._equation_count = self._equation_count
        clone._rows = [list(self._rows[index]) for index in self._order]
        clone._order = list(range(self._equation_count))
        return clone

    def iter_rows(self) -> Iterator[List[BoundedFraction]]:
        for index in self._order:
            yield self._rows[index]

    def to_list(self) -> List[List[BoundedFraction]]:
        return [list(row) for row in self.iter_rows()]

    def __eq__(self, other) -> bool:
        if isinstance(other, AugmentedMatrix):
            return self.to_list() == other.to_list()
        return False

    def __str__(self) -> str:
        lines = []
        for row in self.iter_rows():
            coefficients = " ".join(str(value) for value in row[:-1])
            lines.append(f"[{coefficients} | {row[-1]}]")
        return "\n".join(lines)

    def __repr__(self) -> str:
        return f"AugmentedMatrix({self._equation_count}x{self._equation_count + 1})"
