"""
Core math modules

Алгоритмы в столбик над десятичными magnitude-строками.
"""

from src.core.math.digits import (
    DECIMAL_BASE,
    DIGIT_CHARS,
    ZERO_DIGITS,
    add_magnitudes,
    compare_magnitudes,
    is_canonical,
    is_digit_string,
    multiply_magnitudes,
    strip_leading_zeros,
    subtract_magnitudes,
)

__all__ = [
    # Constants
    "DECIMAL_BASE",
    "DIGIT_CHARS",
    "ZERO_DIGITS",
    # Validation
    "is_canonical",
    "is_digit_string",
    "strip_leading_zeros",
    # Arithmetic
    "add_magnitudes",
    "compare_magnitudes",
    "multiply_magnitudes",
    "subtract_magnitudes",
]
