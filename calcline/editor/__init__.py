"""Editor — пошаговая правка выражения калькулятора.

Чистые функции вида (выражение, действие) → выражение.
"""

from .expression_editor import (
    INITIAL_EXPRESSION,
    append_digit_or_dot,
    append_operator,
    apply_percent,
    backspace,
    last_number,
    last_number_bounds,
    prepare_for_eval,
    toggle_sign,
)

__all__ = [
    "INITIAL_EXPRESSION",
    "append_digit_or_dot",
    "append_operator",
    "apply_percent",
    "backspace",
    "last_number",
    "last_number_bounds",
    "prepare_for_eval",
    "toggle_sign",
]
