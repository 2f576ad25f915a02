"""
Domain models and value objects.

Contains the expression alphabet, tokens and the calculator state snapshot.
"""

from calcline.core.domain.calculator_state import CalculatorPhase, CalculatorState
from calcline.core.domain.symbols import (
    DISPLAY_OPERATORS,
    DIVIDE,
    DOT,
    KEY_BACKSPACE,
    KEY_CLEAR,
    KEY_EQUALS,
    KEY_PERCENT,
    KEY_TOGGLE_SIGN,
    KEYPAD_LAYOUT,
    MINUS,
    PLUS,
    PRECEDENCE,
    TIMES,
    UNARY_MINUS,
    is_compute_operator,
    is_digit,
    is_display_operator,
    to_compute_symbols,
)
from calcline.core.domain.token import Token, TokenKind

__all__ = [
    # Symbols
    "PLUS",
    "MINUS",
    "TIMES",
    "DIVIDE",
    "UNARY_MINUS",
    "DOT",
    "DISPLAY_OPERATORS",
    "PRECEDENCE",
    "KEY_CLEAR",
    "KEY_BACKSPACE",
    "KEY_TOGGLE_SIGN",
    "KEY_PERCENT",
    "KEY_EQUALS",
    "KEYPAD_LAYOUT",
    "is_digit",
    "is_display_operator",
    "is_compute_operator",
    "to_compute_symbols",
    # Tokens
    "Token",
    "TokenKind",
    # State
    "CalculatorState",
    "CalculatorPhase",
]
