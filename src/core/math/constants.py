"""
Mathematical constants.
"""

import math


def pi() -> float:
    """
    Константа π: отношение длины окружности к её диаметру.

    Возвращается float-приближение (π иррационально).
    """
    return math.pi


def e() -> float:
    """Константа ℯ (основание натурального логарифма)."""
    return 2.718281828459045
