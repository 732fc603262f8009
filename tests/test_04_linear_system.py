"""LinearSystem: lifecycle, coefficient access, solving and memory handling."""
import logging
from fractions import Fraction
from types import SimpleNamespace
import pytest
import exactsolve
import exactsolve.linear_system as linear_system_module
from exactsolve import LinearSystem, DisableLogger, ZERO, ONE
from exactsolve.names import *
from conftest import frac

# =============================================================================
# Lifecycle
# =============================================================================


class TestLifecycle:

    def test_new_system_is_empty(self, empty_system):
        assert empty_system.equation_count == 0
        assert empty_system.solution == ()

    def test_resize_zero_fills(self, empty_system):
        assert empty_system.set_equation_count(3)
        assert empty_system.equation_count == 3
        for row in range(1, 4):
            for col in range(1, 5):
                assert empty_system.get_original_coefficient_fraction(row, col) == (0, 0)
                assert empty_system.get_working_coefficient(row, col) == ZERO

    def test_resize_reset_resize_leaves_no_residue(self, make_system):
        system = make_system([[2, 1, 5], [1, -1, 1]])
        system.reset()
        assert system.equation_count == 0
        assert system.get_original_coefficient(1, 1) == 0
        assert system.set_equation_count(2)
        for row in range(1, 3):
            for col in range(1, 4):
                assert system.get_original_coefficient_fraction(row, col) == (0, 0)

    def test_resize_discards_previous_coefficients(self, make_system):
        system = make_system([[2, 1, 5], [1, -1, 1]])
        assert system.solve() == SOLVED
        assert system.set_equation_count(2)
        assert system.get_original_coefficient(1, 1) == 0
        assert system.solution == ()

    def test_resize_to_zero_resets(self, make_system):
        system = make_system([[2, 1, 5], [1, -1, 1]])
        assert system.set_equation_count(0)
        assert system.equation_count == 0

    @pytest.mark.parametrize("count", [-1, MAX_EQUATIONS + 1])
    def test_count_out_of_range(self, empty_system, count):
        with pytest.raises(ValueError):
            empty_system.set_equation_count(count)

    def test_empty_system_solves_trivially(self, empty_system):
        assert empty_system.solve() == SOLVED
        assert empty_system.solution == ()


# =============================================================================
# Coefficient access
# =============================================================================


class TestCoefficients:

    def test_set_and_read_integer(self, make_system):
        system = make_system([[-7, 3, 0], [0, 1, 1]])
        assert system.get_original_coefficient(1, 1) == -7
        assert system.get_original_coefficient_fraction(1, 2) == (3, 1)
        assert system.get_original_coefficient_fraction(1, 3) == (0, 0)

    def test_fraction_is_stored_reduced(self, make_system):
        system = make_system([[(2, -4), 1, 0], [0, 1, 1]])
        assert system.get_original_coefficient_fraction(1, 1) == (-1, 2)
        assert system.get_working_coefficient(1, 1) == frac(-1, 2)

    @pytest.mark.parametrize("numerator", [3, -3, 0])
    def test_zero_denominator_stores_zero(self, make_system, numerator):
        system = make_system([[1, 1, 1], [1, 1, 1]])
        system.set_coefficient_fraction(1, 1, numerator, 0)
        assert system.get_working_coefficient(1, 1) == ZERO
        assert system.get_original_coefficient_fraction(1, 1) == (0, 0)

    @pytest.mark.parametrize("row,col", [(0, 1), (1, 0), (3, 1), (1, 4)])
    def test_out_of_range_is_ignored(self, make_system, row, col):
        system = make_system([[1, 2, 3], [4, 5, 6]])
        system.set_coefficient(row, col, 9)
        system.set_coefficient_fraction(row, col, 9, 2)
        assert system.get_original_coefficient(row, col) == 0
        assert system.get_original_coefficient_fraction(row, col) == (0, 0)
        assert system.get_working_coefficient(row, col) is None
        assert system.get_working_coefficient(row, col, default=ONE) == ONE
        assert [system.get_original_coefficient(i, j) for i in (1, 2) for j in (1, 2, 3)] == [1, 2, 3, 4, 5, 6]

    def test_non_integer_rejected(self, make_system):
        system = make_system([[1, 1, 1], [1, 1, 1]])
        with pytest.raises(TypeError):
            system.set_coefficient(1, 1, 0.5)

    def test_magnitude_limit(self, make_system):
        system = make_system([[1, 1, 1], [1, 1, 1]])
        system.set_coefficient(1, 1, -UINT32_MAX)
        assert system.get_original_coefficient(1, 1) == -UINT32_MAX
        with pytest.raises(ValueError):
            system.set_coefficient(1, 1, UINT32_MAX + 1)

    def test_out_of_range_ignored_before_magnitude_check(self, make_system):
        system = make_system([[1, 1, 1], [1, 1, 1]])
        system.set_coefficient(3, 1, UINT32_MAX + 1)
        system.set_coefficient_fraction(1, 5, 1, UINT32_MAX + 1)
        assert [system.get_original_coefficient(i, j) for i in (1, 2) for j in (1, 2, 3)] == [1] * 6


class TestRowOperations:

    def test_swap_changes_working_matrix_only(self, make_system):
        system = make_system([[2, 1, 5], [1, -1, 1]])
        system.swap_rows(1, 2)
        assert system.get_working_coefficient(1, 1) == ONE
        assert system.get_original_coefficient(1, 1) == 2

    def test_arithmetic_row_operations(self, make_system):
        system = make_system([[2, 1, 5], [1, -1, 1]])
        assert not system.divide_row(1, frac(2))
        assert system.get_working_coefficient(1, 3) == frac(5, 2)
        assert not system.multiply_row(2, frac(-3))
        assert system.get_working_coefficient(2, 2) == frac(3)
        assert not system.add_rows(2, 1)
        assert system.get_working_coefficient(2, 1) == frac(-2)

    def test_out_of_range_rows_are_ignored(self, make_system):
        system = make_system([[2, 1, 5], [1, -1, 1]])
        system.swap_rows(0, 1)
        assert not system.multiply_row(3, frac(2))
        assert not system.add_rows(1, 0)
        assert system.get_working_coefficient(1, 1) == frac(2)

    def test_overflow_reported(self, make_system):
        system = make_system([[70000, 1, 1], [1, 1, 1]])
        assert system.multiply_row(1, frac(70000))

    def test_divide_by_zero_leaves_row_unchanged(self, make_system):
        system = make_system([[2, 0, 5], [1, -1, 1]])
        assert not system.divide_row(1, ZERO)
        assert [system.get_working_coefficient(1, col) for col in (1, 2, 3)] == [frac(2), ZERO, frac(5)]


# =============================================================================
# Solving
# =============================================================================


class TestSolve:

    def test_unique_solution(self, make_system):
        system = make_system([[2, 1, 5], [1, -1, 1]])
        assert system.solve() == SOLVED
        assert system.solution == (frac(2), frac(1))
        assert system.solution_as_fractions() == [Fraction(2), Fraction(1)]

    def test_dependent_rows(self, make_system):
        system = make_system([[1, 1, 2], [2, 2, 4]])
        assert system.solve() == INFINITE_SOLUTIONS
        assert system.solution == ()

    def test_contradictory_rows(self, make_system):
        system = make_system([[1, 1, 2], [1, 1, 5]])
        assert system.solve() == NO_SOLUTIONS
        assert system.solution == ()

    def test_fractional_coefficients(self, make_system):
        # x/2 + y = 2, x - y/3 = 1/3
        system = make_system([[(1, 2), 1, 2], [1, (-1, 3), (1, 3)]])
        assert system.solve() == SOLVED
        assert system.solution_as_fractions() == [Fraction(6, 7), Fraction(11, 7)]

    def test_solution_satisfies_original(self, make_system):
        rows = [[3, -1, 2, 7], [1, 4, -1, -2], [2, 1, 5, 11]]
        system = make_system(rows)
        assert system.solve() == SOLVED
        x = system.solution_as_fractions()
        for row in rows:
            assert sum(Fraction(a) * b for a, b in zip(row[:-1], x)) == row[-1]

    def test_solve_is_idempotent(self, make_system):
        system = make_system([[4, -2, 1, 3], [1, 3, -2, 0], [2, 2, 2, 7]])
        first = system.solve()
        first_solution = system.solution
        assert system.solve() == first == SOLVED
        assert system.solution == first_solution

    def test_solve_ignores_manual_row_operations(self, make_system):
        system = make_system([[2, 1, 5], [1, -1, 1]])
        system.multiply_row(1, frac(7))
        system.swap_rows(1, 2)
        assert system.solve() == SOLVED
        assert system.solution == (frac(2), frac(1))

    def test_working_matrix_holds_reduced_form(self, make_system):
        system = make_system([[0, 1, 2], [1, 0, 3]])
        assert system.solve() == SOLVED
        assert system.get_working_coefficient(1, 1) == ONE
        assert system.get_working_coefficient(1, 2) == ZERO
        assert system.get_working_coefficient(2, 3) == frac(2)
        assert system.solution == (frac(3), frac(2))

    def test_overflow(self, make_system):
        system = make_system([[4000000000, 1, 1], [1, 4000000000, 1]])
        assert system.solve() == OVERFLOW
        assert system.solution == ()
        assert system.solve() == OVERFLOW

    def test_overflow_then_fixed_system(self, make_system):
        system = make_system([[4000000000, 1, 1], [1, 4000000000, 1]])
        assert system.solve() == OVERFLOW
        system.set_coefficient(1, 1, 2)
        system.set_coefficient(2, 2, -1)
        system.set_coefficient(1, 3, 5)
        assert system.solve() == SOLVED
        assert system.solution == (frac(2), frac(1))

    def test_failed_solve_clears_previous_solution(self, make_system):
        system = make_system([[2, 1, 5], [1, -1, 1]])
        assert system.solve() == SOLVED
        system.set_coefficient(2, 1, 2)
        system.set_coefficient(2, 2, 1)
        assert system.solve() == NO_SOLUTIONS
        assert system.solution == ()

    def test_status_values(self):
        assert [int(s) for s in (SOLVED, NO_SOLUTIONS, INFINITE_SOLUTIONS, MEMORY_ERROR, OVERFLOW)] == [1, 2, 3, 4, 5]
        assert STATUS_NAMES[OVERFLOW] == 'overflow'


# =============================================================================
# Memory handling and logging
# =============================================================================


class TestMemory:

    def test_insufficient_memory(self, monkeypatch):
        monkeypatch.setattr(linear_system_module, "virtual_memory", lambda: SimpleNamespace(available=0))
        system = LinearSystem()
        assert not system.set_equation_count(3)
        assert system.equation_count == 0
        assert system.solve() == MEMORY_ERROR

    def test_reset_recovers_after_failure(self, monkeypatch):
        monkeypatch.setattr(linear_system_module, "virtual_memory", lambda: SimpleNamespace(available=0))
        system = LinearSystem()
        assert not system.set_equation_count(3)
        system.reset()
        assert system.solve() == SOLVED

    def test_check_can_be_disabled(self, monkeypatch):
        monkeypatch.setattr(linear_system_module, "virtual_memory", lambda: SimpleNamespace(available=0))
        system = LinearSystem(check_memory=False)
        assert system.set_equation_count(3)

    def test_allocation_error(self, monkeypatch):
        original_class = linear_system_module.AugmentedMatrix

        def failing_matrix(count):
            if count > 0:
                raise MemoryError()
            return original_class(count)

        monkeypatch.setattr(linear_system_module, "AugmentedMatrix", failing_matrix)
        system = LinearSystem(check_memory=False)
        assert not system.set_equation_count(2)
        assert system.solve() == MEMORY_ERROR

    def test_check_passes_with_memory(self, monkeypatch):
        monkeypatch.setattr(linear_system_module, "virtual_memory", lambda: SimpleNamespace(available=2**40))
        system = LinearSystem()
        assert system.set_equation_count(2)
        system.set_coefficient(1, 1, 1)
        system.set_coefficient(2, 2, 1)
        assert system.solve() == SOLVED


class TestLogging:

    def test_status_logged(self, make_system, caplog):
        system = make_system([[1, 1, 2], [1, 1, 5]])
        with caplog.at_level(logging.INFO, logger="exactsolve"):
            system.solve()
        assert "no_solutions" in caplog.text

    def test_overflow_warning(self, make_system, caplog):
        system = make_system([[4000000000, 1, 1], [1, 4000000000, 1]])
        with caplog.at_level(logging.WARNING, logger="exactsolve"):
            system.solve()
        assert any(record.levelno == logging.WARNING for record in caplog.records)

    def test_disable_logger(self, make_system, caplog):
        system = make_system([[2, 1, 5], [1, -1, 1]])
        with caplog.at_level(logging.INFO, logger="exactsolve"):
            with DisableLogger():
                system.solve()
        assert caplog.text == ""

    def test_package_exports(self):
        assert exactsolve.SOLVED == SOLVED
        assert callable(exactsolve.load_system)
