"""
Core math modules

Численные примитивы и разложения в ряды: приближённое сравнение float,
суммирование рядов, степень, факториал, косинус через ряд Тейлора.
"""

# Numerical Safeguards
from src.core.math.numerical_safeguards import (
    # Epsilon constants
    EPS_APPROX_EQUAL,
    MAX_FLOAT_PRACTICAL,
    # Exceptions
    InvalidArgument,
    # Epsilon comparisons
    approximately_equal,
    is_valid_float,
    # Validation
    validate_integer,
    validate_non_negative_integer,
)

# Constants
from src.core.math.constants import e, pi

# Combinatorics
from src.core.math.combinatorics import factorial, power

# Summation
from src.core.math.summation import PointTerm, Term, summation, summation_at

# Series
from src.core.math.series import (
    MAX_ROUND_PRECISION,
    NUMBER_OF_TERMS,
    ExpansionSettings,
    cosine,
    cosine_taylor_expansion,
    taylor_cosine_term,
)

__all__ = [
    # Numerical Safeguards — Epsilon constants
    "EPS_APPROX_EQUAL",
    "MAX_FLOAT_PRACTICAL",
    # Numerical Safeguards — Exceptions
    "InvalidArgument",
    # Numerical Safeguards — Epsilon comparisons
    "approximately_equal",
    "is_valid_float",
    # Numerical Safeguards — Validation
    "validate_integer",
    "validate_non_negative_integer",
    # Constants
    "e",
    "pi",
    # Combinatorics
    "factorial",
    "power",
    # Summation — Types
    "PointTerm",
    "Term",
    # Summation — Functions
    "summation",
    "summation_at",
    # Series — Constants
    "MAX_ROUND_PRECISION",
    "NUMBER_OF_TERMS",
    # Series — Types
    "ExpansionSettings",
    # Series — Functions
    "cosine",
    "cosine_taylor_expansion",
    "taylor_cosine_term",
]
