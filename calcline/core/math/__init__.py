"""
Core math modules для calcline

Числовые примитивы: безопасное деление, проверки float, форматирование.
"""

from calcline.core.math.numerical_safeguards import (
    # Constants
    EPS_DIVISION,
    ERROR_TEXT,
    FRACTION_DIGITS,
    # Safe division
    safe_divide,
    # NaN/Inf checks
    is_negative_zero,
    is_valid_float,
    # Parsing and formatting
    format_number,
    parse_number,
)

__all__ = [
    # Constants
    "EPS_DIVISION",
    "ERROR_TEXT",
    "FRACTION_DIGITS",
    # Safe division
    "safe_divide",
    # NaN/Inf checks
    "is_negative_zero",
    "is_valid_float",
    # Parsing and formatting
    "format_number",
    "parse_number",
]
