"""Session — обработка клавиш строки ввода калькулятора.

- Фазы EDITING / JUST_EVALUATED
- Начало нового выражения после "="
- Ограничение длины выражения
"""

from .state_machine import (
    CalculatorStateMachine,
    Key,
    KeyKind,
    TransitionResult,
)

__all__ = [
    "CalculatorStateMachine",
    "Key",
    "KeyKind",
    "TransitionResult",
]
