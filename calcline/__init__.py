"""
calcline — expression editor and evaluator for a calculator input line.

Contains:
- calcline.editor     : single-character edits of the expression
- calcline.evaluator  : tokenizer, shunting-yard, postfix evaluation
- calcline.session    : key dispatch state machine (EDITING / JUST_EVALUATED)
- calcline.core       : symbols, tokens, state model, numeric safeguards
"""

from calcline.config import DEFAULT_CONFIG, EngineConfig
from calcline.core.domain import CalculatorPhase, CalculatorState
from calcline.editor import (
    append_digit_or_dot,
    append_operator,
    apply_percent,
    backspace,
    prepare_for_eval,
    toggle_sign,
)
from calcline.evaluator import evaluate_to_string
from calcline.session import CalculatorStateMachine, TransitionResult

__version__ = "0.1.0"

__all__ = [
    "DEFAULT_CONFIG",
    "EngineConfig",
    "CalculatorPhase",
    "CalculatorState",
    "CalculatorStateMachine",
    "TransitionResult",
    "append_digit_or_dot",
    "append_operator",
    "apply_percent",
    "backspace",
    "prepare_for_eval",
    "toggle_sign",
    "evaluate_to_string",
]
