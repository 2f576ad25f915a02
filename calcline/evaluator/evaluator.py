"""
Evaluator — вычисление выражения дисплея

Конвейер: символы дисплея → символы вычисления → лексемы → ОПЗ → float →
строка дисплея.

Все виды ошибок сводятся к одной строке ERROR_TEXT:
- Деление на |b| < 1e-12
- Неполная постфиксная запись (не хватает операндов, на стеке не одно значение)
- Нефинитный результат (переполнение до Inf, NaN)
"""

from typing import Optional

import structlog

from calcline.config import DEFAULT_CONFIG, EngineConfig
from calcline.core.domain.symbols import to_compute_symbols
from calcline.core.math.numerical_safeguards import (
    EPS_DIVISION,
    format_number,
    is_valid_float,
)
from calcline.evaluator.postfix import evaluate_postfix, to_postfix
from calcline.evaluator.tokenizer import tokenize

logger = structlog.get_logger()


def evaluate(expr: str, eps: float = EPS_DIVISION) -> float:
    """
    Вычисление выражения в символах вычисления.

    Args:
        expr: Выражение, например "10/4+1"
        eps: Порог знаменателя для деления

    Returns:
        Результат, NaN при ошибке
    """
    return evaluate_postfix(to_postfix(tokenize(expr)), eps=eps)


def evaluate_to_string(expr: str, config: Optional[EngineConfig] = None) -> str:
    """
    Вычисление выражения дисплея в строку дисплея.

    Никогда не бросает исключений: любая ошибка даёт config.error_text.

    Args:
        expr: Выражение дисплея, например "10÷4"
        config: Параметры движка (default: DEFAULT_CONFIG)

    Returns:
        Отформатированный результат или "Error"

    Examples:
        >>> evaluate_to_string("2+3")
        '5'
        >>> evaluate_to_string("10÷4")
        '2.5'
        >>> evaluate_to_string("5÷0")
        'Error'
    """
    config = config or DEFAULT_CONFIG
    normalized = to_compute_symbols(expr)

    try:
        result = evaluate(normalized, eps=config.division_eps)
    except (ValueError, ArithmeticError, IndexError, KeyError) as e:
        logger.warning("Evaluation failed", expression=expr, error=str(e))
        return config.error_text

    if not is_valid_float(result):
        logger.debug("Non-finite result", expression=expr, result=result)
        return config.error_text

    return format_number(
        result,
        fraction_digits=config.fraction_digits,
        error_text=config.error_text,
    )
