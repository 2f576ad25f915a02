"""Calculator State Machine — обработка нажатий клавиш строки ввода.

Фазы:
- EDITING: правка выражения
- JUST_EVALUATED: на дисплее результат "="

Переходы:
- JUST_EVALUATED + цифра/точка → новое выражение ("5" или "0."), EDITING
- JUST_EVALUATED + оператор → результат становится левым операндом, EDITING
- "=" → вычисление prepare_for_eval(expr); успех → JUST_EVALUATED,
  "Error" → EDITING (следующая цифра не очищает дисплей)
- Любая другая клавиша → EDITING

Каждое новое выражение обрезается до max_expression_length символов.
"""

from dataclasses import dataclass
from enum import Enum
from typing import Iterable, Optional

import structlog

from calcline.config import DEFAULT_CONFIG, EngineConfig
from calcline.core.domain.calculator_state import CalculatorPhase, CalculatorState
from calcline.core.domain.symbols import (
    DOT,
    KEY_BACKSPACE,
    KEY_CLEAR,
    KEY_EQUALS,
    KEY_PERCENT,
    KEY_TOGGLE_SIGN,
    is_digit,
    is_display_operator,
)
from calcline.editor.expression_editor import (
    INITIAL_EXPRESSION,
    append_digit_or_dot,
    append_operator,
    apply_percent,
    backspace,
    prepare_for_eval,
    toggle_sign,
)
from calcline.evaluator.evaluator import evaluate_to_string

logger = structlog.get_logger()


class KeyKind(str, Enum):
    """Вид клавиши калькулятора."""
    DIGIT = "DIGIT"
    DOT = "DOT"
    OPERATOR = "OPERATOR"
    CLEAR = "CLEAR"
    BACKSPACE = "BACKSPACE"
    TOGGLE_SIGN = "TOGGLE_SIGN"
    PERCENT = "PERCENT"
    EQUALS = "EQUALS"
    UNKNOWN = "UNKNOWN"


_ACTION_KEYS = {
    KEY_CLEAR: KeyKind.CLEAR,
    KEY_BACKSPACE: KeyKind.BACKSPACE,
    KEY_TOGGLE_SIGN: KeyKind.TOGGLE_SIGN,
    KEY_PERCENT: KeyKind.PERCENT,
    KEY_EQUALS: KeyKind.EQUALS,
}


@dataclass(frozen=True)
class Key:
    """Нажатая клавиша: подпись на кнопке и её вид."""

    label: str
    kind: KeyKind

    @classmethod
    def from_label(cls, label: str) -> "Key":
        if is_digit(label):
            return cls(label, KeyKind.DIGIT)
        if label == DOT:
            return cls(label, KeyKind.DOT)
        if is_display_operator(label):
            return cls(label, KeyKind.OPERATOR)
        return cls(label, _ACTION_KEYS.get(label, KeyKind.UNKNOWN))

    @property
    def starts_number(self) -> bool:
        return self.kind in (KeyKind.DIGIT, KeyKind.DOT)


@dataclass(frozen=True)
class TransitionResult:
    """Результат обработки клавиши."""

    new_state: CalculatorState
    previous_phase: CalculatorPhase
    key: Key

    # Диагностика
    expression_changed: bool
    transition_reason: str

    @property
    def new_phase(self) -> CalculatorPhase:
        return self.new_state.phase

    @property
    def expression(self) -> str:
        return self.new_state.expression


class CalculatorStateMachine:
    """Диспетчер клавиш: редактор для правок, вычислитель для "=".

    Экземпляр хранит только конфигурацию; состояние строки ввода
    передаётся в apply и возвращается в TransitionResult.
    """

    def __init__(self, config: Optional[EngineConfig] = None):
        """
        Args:
            config: параметры движка (default: DEFAULT_CONFIG)
        """
        self.config = config or DEFAULT_CONFIG

    def apply(self, state: CalculatorState, label: str) -> TransitionResult:
        """Обработка одной клавиши.

        Args:
            state: текущее состояние строки ввода
            label: подпись клавиши ("7", ".", "×", "C", "⌫", "±", "%", "=")

        Returns:
            TransitionResult с новым состоянием
        """
        key = Key.from_label(label)
        expression = state.expression
        just_evaluated = False

        if state.just_evaluated and key.starts_number:
            new_expression = "0." if key.kind == KeyKind.DOT else key.label
            reason = "new_expression_after_result"
        elif key.kind == KeyKind.EQUALS:
            new_expression = evaluate_to_string(prepare_for_eval(expression), self.config)
            just_evaluated = new_expression != self.config.error_text
            reason = "evaluated" if just_evaluated else "evaluation_error"
        elif key.starts_number:
            new_expression = append_digit_or_dot(expression, key.label)
            reason = "append_digit" if key.kind == KeyKind.DIGIT else "append_dot"
        elif key.kind == KeyKind.OPERATOR:
            new_expression = append_operator(expression, key.label)
            reason = (
                "continue_from_result" if state.just_evaluated else "append_operator"
            )
        elif key.kind == KeyKind.CLEAR:
            new_expression = INITIAL_EXPRESSION
            reason = "clear"
        elif key.kind == KeyKind.BACKSPACE:
            new_expression = backspace(expression)
            reason = "backspace"
        elif key.kind == KeyKind.TOGGLE_SIGN:
            new_expression = toggle_sign(expression)
            reason = "toggle_sign"
        elif key.kind == KeyKind.PERCENT:
            new_expression = apply_percent(expression)
            reason = "percent"
        else:
            new_expression = expression
            reason = "unknown_key"

        new_expression = self._truncate(new_expression)
        new_state = CalculatorState(
            expression=new_expression, just_evaluated=just_evaluated
        )

        logger.debug(
            "Key applied",
            key=key.label,
            reason=reason,
            previous_phase=state.phase.value,
            new_phase=new_state.phase.value,
            expression=new_expression,
        )

        return TransitionResult(
            new_state=new_state,
            previous_phase=state.phase,
            key=key,
            expression_changed=new_expression != expression,
            transition_reason=reason,
        )

    def apply_sequence(
        self,
        state: CalculatorState,
        labels: Iterable[str],
    ) -> CalculatorState:
        """Последовательная обработка клавиш, возвращает итоговое состояние."""
        for label in labels:
            state = self.apply(state, label).new_state
        return state

    def _truncate(self, expression: str) -> str:
        """Обрезка до max_expression_length; пустое выражение заменяется на "0"."""
        truncated = expression[: self.config.max_expression_length]
        return truncated or INITIAL_EXPRESSION
