"""
Numerical Safeguards — числовые примитивы калькулятора

Модуль отвечает за численную устойчивость вычислений и за то, как число
выглядит на дисплее:
- Безопасное деление с epsilon-защитой знаменателя
- Проверка валидности float (NaN/Inf)
- Разбор числовых литералов без исключений
- Форматирование результата в строку дисплея

КРИТИЧЕСКИЕ ИНВАРИАНТЫ:
1. Деление на |b| < EPS_DIVISION даёт NaN, а не огромное число
2. NaN/Inf никогда не попадают на дисплей (вместо них ERROR_TEXT)
3. Отрицательный ноль отображается как "0"
4. Дисплей никогда не содержит экспоненциальной записи
"""

import math
from typing import Final, Optional

# =============================================================================
# КОНСТАНТЫ
# =============================================================================

# Epsilon для знаменателя: всё, что ближе к нулю, считается делением на ноль
EPS_DIVISION: Final[float] = 1e-12

# Количество знаков после точки при форматировании результата
FRACTION_DIGITS: Final[int] = 10

# Единственный вид ошибки, который видит пользователь
ERROR_TEXT: Final[str] = "Error"


# =============================================================================
# БЕЗОПАСНОЕ ДЕЛЕНИЕ
# =============================================================================


def safe_divide(
    numerator: float,
    denominator: float,
    eps: float = EPS_DIVISION,
) -> float:
    """
    Деление с защитой от деления на ноль.

    В отличие от fallback-подхода, возвращает NaN: калькулятор должен
    показать ошибку, а не подменить результат.

    Args:
        numerator: Числитель
        denominator: Знаменатель
        eps: Минимальный абсолютный порог знаменателя (default: EPS_DIVISION)

    Returns:
        numerator / denominator, либо NaN если abs(denominator) < eps

    Raises:
        ValueError: Если eps <= 0

    Examples:
        >>> safe_divide(10.0, 4.0)
        2.5
        >>> safe_divide(5.0, 0.0)
        nan
        >>> safe_divide(1.0, 1e-13)
        nan
    """
    if eps <= 0:
        raise ValueError(f"eps must be positive, got {eps}")

    if abs(denominator) < eps:
        return math.nan

    return numerator / denominator


# =============================================================================
# NaN/Inf ПРОВЕРКИ
# =============================================================================


def is_valid_float(value: float) -> bool:
    """
    Проверка, является ли float валидным (не NaN, не Inf).

    Args:
        value: Проверяемое значение

    Returns:
        True если значение конечное
    """
    return math.isfinite(value)


def is_negative_zero(value: float) -> bool:
    """True для -0.0 (знак сохраняется в IEEE 754)."""
    return value == 0.0 and math.copysign(1.0, value) < 0


# =============================================================================
# РАЗБОР И ФОРМАТИРОВАНИЕ
# =============================================================================


def parse_number(text: str) -> Optional[float]:
    """
    Разбор числового литерала без исключений.

    Принимает только то, что может породить редактор: необязательный знак
    "-", цифры и не более одной точки. "inf", "nan", "1e5" и "1_000",
    которые понимает float(), здесь отвергаются.

    Args:
        text: Литерал, например "12.5", "-3", "7."

    Returns:
        Значение float, либо None если литерал не разбирается

    Examples:
        >>> parse_number("-0.5")
        -0.5
        >>> parse_number("-")
        >>> parse_number(".")
    """
    body = text[1:] if text.startswith("-") else text
    if not body or body.count(".") > 1:
        return None
    if not all(ch.isdigit() or ch == "." for ch in body):
        return None
    if body == ".":
        return None

    try:
        return float(text)
    except ValueError:
        return None


def format_number(
    value: float,
    fraction_digits: int = FRACTION_DIGITS,
    error_text: str = ERROR_TEXT,
) -> str:
    """
    Форматирование числа для дисплея.

    Алгоритм:
        1. NaN/Inf → ERROR_TEXT
        2. Фиксированная запись с fraction_digits знаками после точки
        3. Удаление хвостовых нулей и хвостовой точки
        4. "-0" → "0"

    Args:
        value: Значение для отображения
        fraction_digits: Знаков после точки до обрезки (default: 10)
        error_text: Строка для NaN/Inf (default: ERROR_TEXT)

    Returns:
        Строка дисплея

    Examples:
        >>> format_number(2.5)
        '2.5'
        >>> format_number(5.0)
        '5'
        >>> format_number(-0.0)
        '0'
        >>> format_number(1 / 3)
        '0.3333333333'
        >>> format_number(float('inf'))
        'Error'
    """
    if not is_valid_float(value):
        return error_text

    if is_negative_zero(value):
        return "0"

    raw = f"{value:.{fraction_digits}f}"
    if "." in raw:
        raw = raw.rstrip("0").rstrip(".")

    # Очень малые отрицательные значения округляются до "-0"
    return "0" if raw == "-0" else raw
