"""
Series — Cosine via Truncated Taylor Expansion

Модуль вычисляет cos(x) усечённым рядом Маклорена:

    cos(x) ≈ Σ_{k=0}^{N} (-1)^k * x^(2k) / (2k)!

где N = NUMBER_OF_TERMS (16 → 17 членов, k = 0..16).

КРИТИЧЕСКИЕ ИНВАРИАНТЫ:
1. Число членов фиксировано и не зависит от запрошенной точности округления
2. Проверка сходимости не выполняется: точность падает вне [-2π, 2π]
3. Все операции детерминированы и не имеют побочных эффектов
"""

import logging
from typing import Final, Optional, Union

from pydantic import BaseModel, Field, ValidationError

from src.core.math.combinatorics import factorial, power
from src.core.math.numerical_safeguards import InvalidArgument
from src.core.math.summation import summation_at

logger = logging.getLogger(__name__)

Number = Union[int, float]

# =============================================================================
# ПАРАМЕТРЫ РЯДОВ
# =============================================================================

# Порядок разложения по умолчанию для любого ряда
NUMBER_OF_TERMS: Final[int] = 16

# Максимальное число десятичных знаков при округлении результата
MAX_ROUND_PRECISION: Final[int] = 15


# =============================================================================
# MODELS
# =============================================================================


class ExpansionSettings(BaseModel):
    """Параметры вычисления ряда.

    Содержит:
    - order: порядок разложения (индекс последнего члена)
    - precision: число десятичных знаков округления (None — без округления)
    """

    order: int = Field(NUMBER_OF_TERMS, ge=0, description="Series order (last k)")
    precision: Optional[int] = Field(
        None, ge=0, le=MAX_ROUND_PRECISION, description="Decimal digits to round to"
    )

    model_config = {"frozen": True, "strict": True}


def _build_settings(order: int, precision: Optional[int]) -> ExpansionSettings:
    try:
        return ExpansionSettings(order=order, precision=precision)
    except ValidationError as e:
        raise InvalidArgument(f"Invalid expansion settings: {e}") from e


# =============================================================================
# TAYLOR EXPANSION
# =============================================================================


def taylor_cosine_term(x: Number, k: int) -> float:
    """
    k-й член ряда Маклорена для cos(x): (-1)^k * x^(2k) / (2k)!
    """
    return power(-1, k) * power(x, 2 * k) / factorial(2 * k)


def cosine_taylor_expansion(x: Number, order: int = NUMBER_OF_TERMS) -> float:
    """
    Усечённый ряд Тейлора для cos(x) вокруг нуля.

    Args:
        x: Аргумент (радианы)
        order: Индекс последнего члена (order + 1 членов)

    Returns:
        Σ taylor_cosine_term(x, k), k = 0..order

    Raises:
        InvalidArgument: Если order отрицательный или не int
    """
    settings = _build_settings(order, None)
    return summation_at(0, settings.order, x, taylor_cosine_term)


def cosine(x: Number, precision: Optional[int] = None) -> float:
    """
    Косинус x через ряд Тейлора из NUMBER_OF_TERMS + 1 членов.

    Если задан precision, результат округляется до precision десятичных
    знаков встроенным round(). Число членов ряда от precision не зависит.

    Args:
        x: Аргумент (радианы)
        precision: Число десятичных знаков (0..MAX_ROUND_PRECISION) или None

    Returns:
        Приближённое значение cos(x)

    Raises:
        InvalidArgument: Если precision вне диапазона или не int

    Examples:
        >>> cosine(0)
        1.0
        >>> cosine(0.5, 4)
        0.8776
    """
    settings = _build_settings(NUMBER_OF_TERMS, precision)
    logger.debug("cosine(%r): order=%d precision=%s", x, settings.order, settings.precision)

    value = summation_at(0, settings.order, x, taylor_cosine_term)

    if settings.precision is None:
        return value

    return round(value, settings.precision)
