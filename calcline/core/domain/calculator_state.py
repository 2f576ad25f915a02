"""
CalculatorState — состояние строки ввода калькулятора

Immutable Pydantic модель: текущее выражение и флаг "только что вычислено".
Владеет ею вызывающая сторона (UI); ядро получает состояние по значению и
возвращает новое.
"""

from enum import Enum

from pydantic import BaseModel, Field, field_validator


# =============================================================================
# ENUMS
# =============================================================================


class CalculatorPhase(str, Enum):
    """
    Фаза строки ввода.

    - EDITING: пользователь набирает выражение
    - JUST_EVALUATED: на дисплее результат "=", следующая цифра начнёт новое выражение
    """

    EDITING = "EDITING"
    JUST_EVALUATED = "JUST_EVALUATED"


# =============================================================================
# STATE MODEL
# =============================================================================


class CalculatorState(BaseModel):
    """
    Снапшот строки ввода.

    Immutable модель (frozen=True). Новое состояние создаётся на каждое действие.
    """

    expression: str = Field(
        default="0",
        min_length=1,
        description="Выражение на дисплее",
    )
    just_evaluated: bool = Field(
        default=False, description="True сразу после успешного '='"
    )

    model_config = {"frozen": True}

    @field_validator("expression")
    @classmethod
    def validate_no_whitespace(cls, v: str) -> str:
        """Выражение, собранное редактором, никогда не содержит пробелов."""
        if any(ch.isspace() for ch in v):
            raise ValueError(f"expression must not contain whitespace, got {v!r}")
        return v

    @property
    def phase(self) -> CalculatorPhase:
        if self.just_evaluated:
            return CalculatorPhase.JUST_EVALUATED
        return CalculatorPhase.EDITING

    @classmethod
    def initial(cls) -> "CalculatorState":
        """Состояние после запуска и после "C"."""
        return cls()
