import pytest
from exactsolve import LinearSystem, BoundedFraction


def build_system(rows, check_memory=False) -> LinearSystem:
    """Populate a LinearSystem from an augmented matrix given as nested lists.

    Integer entries are set with set_coefficient, (numerator, denominator)
    tuples with set_coefficient_fraction.
    """
    system = LinearSystem(check_memory=check_memory)
    assert system.set_equation_count(len(rows))
    for i, row in enumerate(rows, start=1):
        for j, value in enumerate(row, start=1):
            if isinstance(value, tuple):
                system.set_coefficient_fraction(i, j, *value)
            else:
                system.set_coefficient(i, j, value)
    return system


def frac(numerator: int, denominator: int = 1) -> BoundedFraction:
    return BoundedFraction.from_ratio(numerator, denominator)


@pytest.fixture
def make_system():
    """Provide a factory building populated systems from nested lists."""
    return build_system


@pytest.fixture
def empty_system() -> LinearSystem:
    """Provide a fresh system without storage."""
    return LinearSystem(check_memory=False)
