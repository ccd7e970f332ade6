"""
Тесты для Combinatorics — Power & Factorial

Проверяемые инварианты:
1. power делегирует ** и сохраняет точность int
2. 0! = 1, n! = n * (n - 1)!
3. Отрицательный/нецелый аргумент факториала → InvalidArgument
"""

import math

import pytest

from src.core.math.combinatorics import factorial, power
from src.core.math.numerical_safeguards import InvalidArgument


# =============================================================================
# ТЕСТЫ: Power
# =============================================================================


class TestPower:
    """Тесты power."""

    def test_integer_power(self):
        """Целые степени остаются точными int."""
        assert power(3, 2) == 9
        assert isinstance(power(3, 2), int)
        assert power(2, 64) == 18446744073709551616

    def test_sign_alternation(self):
        """(-1)^k чередует знак."""
        assert [power(-1, k) for k in range(5)] == [1, -1, 1, -1, 1]

    def test_zero_exponent(self):
        """x^0 = 1, включая 0^0."""
        assert power(0, 0) == 1
        assert power(2.5, 0) == 1.0

    def test_negative_and_fractional_exponent(self):
        """Отрицательные и дробные показатели."""
        assert power(2, -1) == 0.5
        assert power(4.0, 0.5) == pytest.approx(2.0)

    def test_float_base(self):
        """Вещественное основание."""
        assert power(0.5, 2) == 0.25

    def test_zero_to_negative_propagates(self):
        """0 ** -1 пробрасывает ZeroDivisionError без обёртки."""
        with pytest.raises(ZeroDivisionError):
            power(0, -1)

    def test_float_overflow_propagates(self):
        """Переполнение float пробрасывается как OverflowError."""
        with pytest.raises(OverflowError):
            power(10.0, 400)


# =============================================================================
# ТЕСТЫ: Factorial
# =============================================================================


class TestFactorial:
    """Тесты factorial."""

    def test_base_cases(self):
        """0! = 1, 1! = 1."""
        assert factorial(0) == 1
        assert factorial(1) == 1

    def test_known_values(self):
        """Известные значения."""
        assert factorial(3) == 6
        assert factorial(5) == 120
        assert factorial(10) == 3628800

    def test_matches_stdlib(self):
        """Совпадение с math.factorial на больших n."""
        assert factorial(32) == math.factorial(32)
        assert factorial(100) == math.factorial(100)

    def test_recurrence(self):
        """Инвариант: n! = n * (n - 1)! для n > 0."""
        for n in range(1, 40):
            assert factorial(n) == n * factorial(n - 1)

    def test_negative_raises(self):
        """Отрицательный n → InvalidArgument."""
        with pytest.raises(InvalidArgument, match="must be non-negative"):
            factorial(-1)
        with pytest.raises(InvalidArgument):
            factorial(-10)

    def test_non_integer_raises(self):
        """Нецелый n → InvalidArgument."""
        with pytest.raises(InvalidArgument, match="must be an integer"):
            factorial(2.5)
        with pytest.raises(InvalidArgument, match="must be an integer"):
            factorial(3.0)
