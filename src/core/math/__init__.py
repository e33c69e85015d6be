"""
Core math modules для восстановления секрета

Точная рациональная арифметика, разбор чисел в системах счисления 2..36
и интерполяция Ньютона методом разделённых разностей.
"""

# Rational
from src.core.math.rational import (
    Rational,
    RationalLike,
    to_rational,
)

# Base Decoding
from src.core.math.base_decoding import (
    DIGIT_ALPHABET,
    MAX_BASE,
    MIN_BASE,
    decode_in_base,
    digit_value,
    encode_in_base,
    validate_base,
)

# Divided Differences
from src.core.math.divided_differences import (
    divided_difference_table,
    newton_coefficients,
)

# Newton Form
from src.core.math.newton_form import (
    evaluate_at_zero,
    evaluate_newton,
    evaluate_standard,
    to_standard_coefficients,
)

__all__ = [
    # Rational
    "Rational",
    "RationalLike",
    "to_rational",
    # Base Decoding: Constants
    "DIGIT_ALPHABET",
    "MAX_BASE",
    "MIN_BASE",
    # Base Decoding: Functions
    "decode_in_base",
    "digit_value",
    "encode_in_base",
    "validate_base",
    # Divided Differences
    "divided_difference_table",
    "newton_coefficients",
    # Newton Form
    "evaluate_at_zero",
    "evaluate_newton",
    "evaluate_standard",
    "to_standard_coefficients",
]
