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
"""Static values used in the exactsolve package

    Numeric bounds

        UINT32_MAX = 4294967295

        INT32_MAX = 2147483647

        INT32_MIN = -2147483648

        MAX_EQUATIONS = 65535

    Memory estimate

        CELL_BYTES = 120

    Solve status codes

        SOLVED = 1

        NO_SOLUTIONS = 2

        INFINITE_SOLUTIONS = 3

        MEMORY_ERROR = 4

        OVERFLOW = 5

    Options

        CHECK_MEMORY = 'check_memory'
"""
from enum import IntEnum

# Numeric bounds
UINT32_MAX = 2**32 - 1
INT32_MAX = 2**31 - 1
INT32_MIN = -2**31
MAX_EQUATIONS = 2**16 - 1
# Memory estimate: one tuple of three small ints plus its list slot
CELL_BYTES = 120


# Solve status codes
class SolveStatus(IntEnum):
    """Outcome of LinearSystem.solve()"""
    SOLVED = 1
    NO_SOLUTIONS = 2
    INFINITE_SOLUTIONS = 3
    MEMORY_ERROR = 4
    OVERFLOW = 5


SOLVED = SolveStatus.SOLVED
NO_SOLUTIONS = SolveStatus.NO_SOLUTIONS
INFINITE_SOLUTIONS = SolveStatus.INFINITE_SOLUTIONS
MEMORY_ERROR = SolveStatus.MEMORY_ERROR
OVERFLOW = SolveStatus.OVERFLOW

STATUS_NAMES = {
    SOLVED: 'solved',
    NO_SOLUTIONS: 'no_solutions',
    INFINITE_SOLUTIONS: 'infinite_solutions',
    MEMORY_ERROR: 'memory_error',
    OVERFLOW: 'overflow',
}

# Options
CHECK_MEMORY = 'check_memory'
