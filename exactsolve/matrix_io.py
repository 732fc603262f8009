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
"""Loading linear systems from arrays and exporting their solutions"""

from typing import Union
import logging
import numbers

import numpy as np
from scipy import sparse
from sympy import Matrix

from exactsolve.names import *
from exactsolve.linear_system import LinearSystem

__all__ = ["load_system", "solution_to_numpy", "solution_to_sympy"]

LOG = logging.getLogger(__name__)

ArrayLike = Union[list, np.ndarray, sparse.spmatrix]


def _to_dense(array: ArrayLike) -> np.ndarray:
    if sparse.issparse(array):
        return array.toarray()
    return np.asarray(array, dtype=object)


def _to_integer(value) -> int:
    """Convert an array entry to int, rejecting anything non-integral."""
    if isinstance(value, (bool, np.bool_)):
        raise TypeError(f"Boolean coefficient {value!r} is not an integer.")
    if isinstance(value, numbers.Integral):
        return int(value)
    if isinstance(value, numbers.Real) and float(value).is_integer():
        return int(value)
    raise TypeError(f"Coefficient {value!r} is not integral.")


def load_system(coefficients: ArrayLike, constants: ArrayLike = None, **kwargs) -> LinearSystem:
    """Create a LinearSystem from array data

    Example:
        system = load_system([[2, 1], [1, -1]], [5, 1])

    Args:
        coefficients (list or numpy.ndarray or scipy.sparse matrix):
            Either the N x (N+1) augmented matrix, or the N x N coefficient
            matrix when `constants` is given.

        constants (list or numpy.ndarray or scipy.sparse matrix): (Default: None)
            Constant terms, one per equation.

        check_memory (bool): (Default: True)
            Passed on to LinearSystem.

    Returns:
        (LinearSystem): A populated system, not yet solved.
    """
    dense = _to_dense(coefficients)
    if dense.ndim != 2:
        raise ValueError(f"Coefficients must be two-dimensional, got shape {dense.shape}.")
    if constants is not None:
        rhs = _to_dense(constants).reshape(-1)
        if rhs.shape[0] != dense.shape[0]:
            raise ValueError(f"Expected {dense.shape[0]} constants, got {rhs.shape[0]}.")
        dense = np.column_stack([dense.astype(object), rhs.astype(object)])
    rows, cols = dense.shape
    if cols != rows + 1:
        raise ValueError(f"Augmented matrix must be N x (N+1), got {rows} x {cols}.")

    system = LinearSystem(check_memory=kwargs.get(CHECK_MEMORY, True))
    if not system.set_equation_count(rows):
        LOG.error(f"Could not allocate a system of {rows} equations.")
        return system
    for i in range(rows):
        for j in range(cols):
            value = _to_integer(dense[i, j])
            if value != 0:
                system.set_coefficient(i + 1, j + 1, value)
    LOG.debug(f"Loaded system of {rows} equations.")
    return system


def _require_solved(system: LinearSystem):
    if len(system.solution) != system.equation_count:
        raise ValueError("The system holds no solution; solve() did not return SOLVED.")


def solution_to_numpy(system: LinearSystem) -> np.ndarray:
    """Solution as a numpy object array of fractions.Fraction"""
    _require_solved(system)
    result = np.empty(system.equation_count, dtype=object)
    for index, value in enumerate(system.solution):
        result[index] = value.to_fraction()
    return result


def solution_to_sympy(system: LinearSystem) -> Matrix:
    """Solution as a sympy column vector of Rationals"""
    _require_solved(system)
    return Matrix([value.to_sympy() for value in system.solution])
