#!/usr/bin/env python3
#
# Copyright 2022 Max Planck Insitute Magdeburg
#
# Licensed under the Apache License, Version 2.0 (the "License");
# you may not use this file except in compliance with the License.
# You may obtain a copy of the License at
#
#     http://www.apache.org/licenses/LICENSE-2.0
#
# Unless required by applicable law or agreed to in writing, software
# distributed under the License is distributed on an "AS IS" BASIS,
# WITHOUT WARRANTIES OR CONDITIONS OF ANY KIND, either express or implied.
# See the License for the specific language governing permissions and
# limitations under the License.
#
#
#
"""Square linear systems with exact bounded-fraction solutions"""

from fractions import Fraction
from typing import List, Optional, Tuple
import logging
import operator

from psutil import virtual_memory

from exactsolve.names import *
from exactsolve.math import BoundedFraction, AugmentedMatrix, GaussJordan, verify_solution
from exactsolve.math import row_operations

__all__ = ["LinearSystem"]

LOG = logging.getLogger(__name__)


def _memory_available(cell_count: int) -> bool:
    required = cell_count * CELL_BYTES
    available = virtual_memory().available
    if required > available:
        LOG.error(f"Storage for {cell_count} fractions needs about {required} bytes, only {available} available.")
        return False
    return True


class LinearSystem:
    """Square system of N linear equations in N unknowns

    Coefficients are addressed 1-based as (row, column) with columns 1..N
    holding the coefficients of the unknowns and column N+1 the constant
    term. Out-of-range positions are ignored by every setter and read back
    as zero (or the given default).

    Two matrices are kept: the original system as set by the caller and a
    working copy. solve() always starts from a fresh copy of the original, so
    repeated calls give identical results. After solve() the working copy
    holds the reduced matrix.

    Example:
        system = LinearSystem()
        system.set_equation_count(2)
        system.set_coefficient(1, 1, 2)
        ...
        if system.solve() == SOLVED:
            print(system.solution)

    Args:
        check_memory (bool): (Default: True)
            Compare the storage a system needs against the available memory
            before allocating it.
    """

    def __init__(self, check_memory: bool = True):
        self.check_memory = check_memory
        self._engine = GaussJordan()
        self._init_empty()

    def _init_empty(self):
        self._equation_count = 0
        self._original = AugmentedMatrix(0)
        self._working = AugmentedMatrix(0)
        self._solution: Tuple[BoundedFraction, ...] = ()
        self._memory_failed = False

    @property
    def equation_count(self) -> int:
        return self._equation_count

    @property
    def solution(self) -> Tuple[BoundedFraction, ...]:
        """Solution of the last solve() if it returned SOLVED, otherwise empty."""
        return self._solution

    def solution_as_fractions(self) -> List[Fraction]:
        return [value.to_fraction() for value in self._solution]

    # Lifecycle
    def set_equation_count(self, count: int) -> bool:
        """(Re)allocate zero-filled storage for `count` equations

        Any previous coefficients and solution are discarded. A count of 0 is
        equivalent to reset().

        Returns:
            (bool): False if the storage could not be allocated. The system
            then reports MEMORY_ERROR from solve() until it is reset or
            successfully resized.
        """
        count = operator.index(count)
        if not 0 <= count <= MAX_EQUATIONS:
            raise ValueError(f"Equation count must be between 0 and {MAX_EQUATIONS}, got {count}.")
        self._init_empty()
        if count == 0:
            return True
        # original, working copy and the copy made by solve()
        if self.check_memory and not _memory_available(3 * count * (count + 1)):
            self._memory_failed = True
            return False
        try:
            original = AugmentedMatrix(count)
            working = AugmentedMatrix(count)
        except MemoryError:
            LOG.error(f"Allocating storage for {count} equations failed.")
            self._memory_failed = True
            return False
        self._equation_count = count
        self._original = original
        self._working = working
        LOG.debug(f"Allocated storage for {count} equations.")
        return True

    def reset(self):
        """Release all storage and return to the empty system"""
        self._init_empty()

    # Coefficient access
    def _in_bounds(self, row: int, column: int) -> bool:
        return 1 <= row <= self._equation_count and 1 <= column <= self._equation_count + 1

    def _store(self, row: int, column: int, value: BoundedFraction):
        self._original.set_value_at(row - 1, column - 1, value)
        self._working.set_value_at(row - 1, column - 1, value)

    def set_coefficient(self, row: int, column: int, value: int):
        """Set the coefficient at (row, column) to an integer value"""
        value = operator.index(value)
        if not self._in_bounds(row, column):
            return
        if abs(value) > UINT32_MAX:
            raise ValueError(f"Coefficient {value} exceeds the magnitude limit {UINT32_MAX}.")
        self._store(row, column, BoundedFraction.from_int(value))

    def set_coefficient_fraction(self, row: int, column: int, numerator: int, denominator: int):
        """Set the coefficient at (row, column) to numerator/denominator

        A zero denominator stores zero, whatever the numerator. The value is
        stored in lowest terms.
        """
        numerator = operator.index(numerator)
        denominator = operator.index(denominator)
        if not self._in_bounds(row, column):
            return
        if abs(numerator) > UINT32_MAX or abs(denominator) > UINT32_MAX:
            raise ValueError(f"Coefficient {numerator}/{denominator} exceeds the magnitude limit {UINT32_MAX}.")
        self._store(row, column, BoundedFraction.from_ratio(numerator, denominator))

    def get_original_coefficient(self, row: int, column: int) -> int:
        """Signed numerator of the original coefficient, 0 if out of range"""
        if not self._in_bounds(row, column):
            return 0
        return self._original.get_value_at(row - 1, column - 1).signed_numerator()

    def get_original_coefficient_fraction(self, row: int, column: int) -> Tuple[int, int]:
        """(signed numerator, denominator) of the original coefficient, (0, 0) if out of range"""
        if not self._in_bounds(row, column):
            return 0, 0
        value = self._original.get_value_at(row - 1, column - 1)
        return value.signed_numerator(), value.denominator

    def get_working_coefficient(self, row: int, column: int,
                                default: Optional[BoundedFraction] = None) -> Optional[BoundedFraction]:
        """Coefficient of the working matrix, `default` if out of range"""
        if not self._in_bounds(row, column):
            return default
        return self._working.get_value_at(row - 1, column - 1)

    # Row operations on the working matrix
    def swap_rows(self, row1: int, row2: int):
        row_operations.swap_rows(self._working, row1 - 1, row2 - 1)

    def multiply_row(self, row: int, multiplier: BoundedFraction) -> bool:
        """Multiply a working row by `multiplier`; returns True on overflow"""
        return row_operations.multiply_row(self._working, row - 1, multiplier)

    def divide_row(self, row: int, divisor: BoundedFraction) -> bool:
        """Divide a working row by `divisor`; returns True on overflow"""
        return row_operations.divide_row(self._working, row - 1, divisor)

    def add_rows(self, row: int, row_to_add: int) -> bool:
        """Add working row `row_to_add` into `row`; returns True on overflow"""
        return row_operations.add_rows(self._working, row - 1, row_to_add - 1)

    # Solving
    def solve(self) -> SolveStatus:
        """Solve the system held in the original matrix

        Returns:
            (SolveStatus): SOLVED, NO_SOLUTIONS, INFINITE_SOLUTIONS,
            MEMORY_ERROR or OVERFLOW. Only SOLVED leaves a solution in
            `solution`; every other status clears it.
        """
        self._solution = ()
        count = self._equation_count
        LOG.info(f"Solving system of {count} equations.")
        if self._memory_failed:
            LOG.error("Storage of this system could not be allocated.")
            return MEMORY_ERROR
        if self.check_memory and not _memory_available(count * (count + 1)):
            return MEMORY_ERROR
        try:
            working = self._original.copy()
        except MemoryError:
            LOG.error(f"Allocating the working copy of {count} equations failed.")
            return MEMORY_ERROR
        self._working = working

        status = self._engine.reduce(working)
        if status is None:
            status, solution = verify_solution(self._original, working)
            self._solution = solution
        LOG.info(f"Finished solving: {STATUS_NAMES[status]}.")
        return status
