"""
Exact arithmetic core

This module provides the mathematical foundation of the equation solver:
- Bounded sign-magnitude fractions with overflow-checked arithmetic
- Augmented matrices with O(1) row swaps
- Gauss-Jordan elimination and re-substitution checks

All operations are exact; an operation that would leave the 32-bit bounds
reports overflow instead of rounding or wrapping.
"""

from .bounded_fraction import BoundedFraction, ArithmeticResult, ZERO, ONE
from .bounded_fraction_operations import reduce, add, multiply, divide
from .augmented_matrix import AugmentedMatrix
from .gauss_jordan import GaussJordan
from .verification import verify_solution

__all__ = [
    'BoundedFraction',
    'ArithmeticResult',
    'ZERO',
    'ONE',
    'reduce',
    'add',
    'multiply',
    'divide',
    'AugmentedMatrix',
    'GaussJordan',
    'verify_solution',
]
