"""Конфигурация движка калькулятора.

Значения по умолчанию воспроизводят поведение строки ввода калькулятора:
16 символов на дисплее, 10 знаков после точки, epsilon деления 1e-12.
"""

from dataclasses import dataclass
from typing import Final

from calcline.core.math.numerical_safeguards import (
    EPS_DIVISION,
    ERROR_TEXT,
    FRACTION_DIGITS,
)

# Ограничение длины выражения, которое применяет вызывающая сторона
MAX_EXPRESSION_LENGTH: Final[int] = 16


@dataclass(frozen=True)
class EngineConfig:
    """Параметры движка.

    - max_expression_length: выражение обрезается до этой длины перед сохранением
    - fraction_digits: знаков после точки при форматировании результата
    - division_eps: знаменатель с меньшим модулем считается нулём
    - error_text: строка, которую показывает дисплей при ошибке вычисления
    """
    max_expression_length: int = MAX_EXPRESSION_LENGTH
    fraction_digits: int = FRACTION_DIGITS
    division_eps: float = EPS_DIVISION
    error_text: str = ERROR_TEXT

    def __post_init__(self):
        if self.max_expression_length < 1:
            raise ValueError(
                f"max_expression_length must be >= 1, got {self.max_expression_length}"
            )
        if self.fraction_digits < 0:
            raise ValueError(f"fraction_digits must be >= 0, got {self.fraction_digits}")
        if self.division_eps <= 0:
            raise ValueError(f"division_eps must be positive, got {self.division_eps}")


DEFAULT_CONFIG = EngineConfig()
