"""
Numerical Safeguards — Approximate Equality & Argument Guards

Модуль содержит базовые численные примитивы, на которые опираются
остальные модули пакета:
- Epsilon-сравнение float с учётом ошибок округления (approximately_equal)
- Проверка валидности float (не NaN, не Inf)
- Валидация целочисленных аргументов (индексы рядов, факториалы)
- Единое исключение InvalidArgument для некорректных входов

КРИТИЧЕСКИЕ ИНВАРИАНТЫ:
1. approximately_equal(x, x) == True для любого конечного x
2. Нормирующий знаменатель не превышает MAX_FLOAT_PRACTICAL (нет overflow)
3. Некорректный аргумент → InvalidArgument, никогда не бесконечный цикл
4. Все операции детерминированы и не имеют побочных эффектов
"""

import math
from typing import Final

# =============================================================================
# EPSILON-ПАРАМЕТРЫ
# =============================================================================

# Порог приближённого равенства float
# Два числа считаются равными, если их (относительная) разница меньше порога
EPS_APPROX_EQUAL: Final[float] = 1.0e-15

# Практический максимум модуля float
# Ограничивает сумму abs(x) + abs(y) в знаменателе, чтобы избежать inf
MAX_FLOAT_PRACTICAL: Final[float] = 1.7976931348623157e308


# =============================================================================
# EXCEPTIONS
# =============================================================================


class InvalidArgument(ValueError):
    """
    Аргумент вне области определения операции.

    Примеры: отрицательный факториал, пустой диапазон суммирования (k < k0),
    нецелый индекс, точность округления вне допустимого диапазона.
    """

    pass


# =============================================================================
# EPSILON-СРАВНЕНИЯ FLOAT
# =============================================================================


def is_valid_float(value: float) -> bool:
    """
    Проверка, является ли значение конечным числом (не NaN, не Inf).

    Args:
        value: Проверяемое значение

    Returns:
        True если значение конечное, False если NaN или Inf
    """
    return math.isfinite(value)


def approximately_equal(x: float, y: float) -> bool:
    """
    Проверка, что x и y _почти_ равны.

    Полезно для float, где арифметика вносит малые ошибки округления.

    Алгоритм:
        - x == y                      → True
        - x == 0 или y == 0           → abs(x - y) < EPS_APPROX_EQUAL
        - иначе                       → abs(x - y) / min(abs(x) + abs(y), MAX_FLOAT_PRACTICAL)
                                         < EPS_APPROX_EQUAL

    Поведение для NaN/Inf не определено и не поддерживается.

    Args:
        x: Первое значение
        y: Второе значение

    Returns:
        True если значения равны с учётом EPS_APPROX_EQUAL

    Examples:
        >>> 2.3 - 0.3 == 2.0
        False
        >>> approximately_equal(2.3 - 0.3, 2.0)
        True
        >>> approximately_equal(0.0, 1e-16)
        True
        >>> approximately_equal(1.0, 1.0 + 1e-12)
        False
    """
    if x == y:
        return True

    diff = abs(x - y)

    # Один из операндов ноль: относительная разница не определена
    if x == 0 or y == 0:
        return diff < EPS_APPROX_EQUAL

    return diff / min(abs(x) + abs(y), MAX_FLOAT_PRACTICAL) < EPS_APPROX_EQUAL


# =============================================================================
# ВАЛИДАЦИЯ АРГУМЕНТОВ
# =============================================================================


def validate_integer(value: int, name: str) -> None:
    """
    Валидация, что значение является целым числом.

    bool формально подкласс int, но как индекс не принимается.

    Args:
        value: Проверяемое значение
        name: Имя параметра (для сообщения об ошибке)

    Raises:
        InvalidArgument: Если value не int
    """
    if isinstance(value, bool) or not isinstance(value, int):
        raise InvalidArgument(f"{name} must be an integer, got {value!r}")


def validate_non_negative_integer(value: int, name: str) -> None:
    """
    Валидация, что значение — неотрицательное целое.

    Args:
        value: Проверяемое значение
        name: Имя параметра (для сообщения об ошибке)

    Raises:
        InvalidArgument: Если value не int или value < 0
    """
    validate_integer(value, name)

    if value < 0:
        raise InvalidArgument(f"{name} must be non-negative, got {value}")
