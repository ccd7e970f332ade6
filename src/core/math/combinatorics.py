"""
Combinatorics — Power & Factorial

Строительные блоки для членов степенных рядов:
- power(base, exponent): общая операция возведения в степень
- factorial(n): n! для неотрицательных целых

int ** int (неотрицательная степень) остаётся точным int, что важно
для знакового множителя (-1)^k в рядах Тейлора.
"""

from typing import Union

from src.core.math.numerical_safeguards import validate_non_negative_integer

Number = Union[int, float]


def power(base: Number, exponent: Number) -> Number:
    """
    Возвращает base в степени exponent.

    Делегирует встроенному оператору **. Ошибки области определения
    (0 ** -1 → ZeroDivisionError, переполнение float → OverflowError)
    пробрасываются без изменений.

    Args:
        base: Основание
        exponent: Показатель степени

    Returns:
        base ** exponent

    Examples:
        >>> power(3, 2)
        9
        >>> power(-1, 3)
        -1
        >>> power(2, -1)
        0.5
    """
    return base**exponent


def factorial(n: int) -> int:
    """
    Факториал неотрицательного целого n.

    0! = 1, n! = n * (n - 1)!

    Args:
        n: Неотрицательное целое

    Returns:
        n!

    Raises:
        InvalidArgument: Если n отрицательное или не int

    Examples:
        >>> factorial(0)
        1
        >>> factorial(3)
        6
    """
    validate_non_negative_integer(n, "n")

    acc = 1
    while n > 0:
        acc *= n
        n -= 1

    return acc
