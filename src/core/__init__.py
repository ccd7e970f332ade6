"""
Core numeric primitives.

This package contains the mathematical building blocks (tolerance checks,
series summation, combinatorics, series expansions) that are independent
of any external system.
"""
