"""
Summation — Generic Series Combinator

Суммирование значений term-функции по замкнутому диапазону индексов [k0, k]:
- summation(k0, k, term): Σ term(i)
- summation_at(k0, k, x0, term): Σ term(x0, i), разложение в точке x0

КРИТИЧЕСКИЕ ИНВАРИАНТЫ:
1. Каждый индекс из [k0, k] вычисляется ровно один раз
2. k == k0 → результат ровно term(k0), без сложения
3. k < k0 → InvalidArgument (никаких бесконечных циклов)
4. Итеративная реализация: глубина стека не зависит от k - k0
"""

import logging
from typing import Callable, Union

from src.core.math.numerical_safeguards import InvalidArgument, validate_integer

logger = logging.getLogger(__name__)

Number = Union[int, float]

# Член ряда как функция индекса k
Term = Callable[[int], Number]

# Член ряда как функция точки x и индекса k
PointTerm = Callable[[Number, int], Number]


def _validate_range(k0: int, k: int) -> None:
    validate_integer(k0, "k0")
    validate_integer(k, "k")

    if k < k0:
        raise InvalidArgument(f"k must be >= k0, got k={k}, k0={k0}")


def summation(k0: int, k: int, term: Term) -> Number:
    """
    Сумма всех членов term(i) для i от k0 до k включительно.

    Члены накапливаются по возрастанию индекса: acc = term(i) + acc.
    Для целочисленных членов результат — точный int.

    Args:
        k0: Нижняя граница диапазона (включительно)
        k: Верхняя граница диапазона (включительно)
        term: Функция индекса i → значение члена

    Returns:
        Σ term(i), i = k0..k

    Raises:
        InvalidArgument: Если k < k0 или границы не int

    Examples:
        >>> summation(1, 100, lambda j: j ** 2)
        338350
        >>> summation(5, 5, lambda j: j * 10)
        50
    """
    _validate_range(k0, k)
    logger.debug("summation over [%d, %d]", k0, k)

    acc = term(k0)
    for i in range(k0 + 1, k + 1):
        acc = term(i) + acc

    return acc


def summation_at(k0: int, k: int, x0: Number, term: PointTerm) -> Number:
    """
    Сумма членов разложения в точке x0 для индексов от k0 до k включительно.

    Используется для степенных рядов, где каждый член — функция точки x
    и индекса k (например, ряд Тейлора вокруг x0).

    Args:
        k0: Нижняя граница диапазона (включительно)
        k: Верхняя граница диапазона (включительно)
        x0: Точка, в которой вычисляются члены
        term: Функция (x, i) → значение члена

    Returns:
        Σ term(x0, i), i = k0..k

    Raises:
        InvalidArgument: Если k < k0 или границы не int
    """
    _validate_range(k0, k)
    logger.debug("summation at x0=%r over [%d, %d]", x0, k0, k)

    acc = term(x0, k0)
    for i in range(k0 + 1, k + 1):
        acc = term(x0, i) + acc

    return acc
