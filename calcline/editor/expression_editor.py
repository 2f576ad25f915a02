"""
Expression Editor — правка выражения по одному символу

Каждая операция — чистая функция (выражение, действие) → новое выражение.
Все операции тотальны: недопустимая правка возвращает выражение без изменений.

Кодировка знака:
- Бинарный минус на дисплее: "−"
- Знак числа (унарный минус): "-" в начале выражения или после "×"/"÷"
- Отрицательный операнд после "+" записывается заменой оператора:
  "a+b" ⇄ "a−b" (a−b == a+(−b))

ИНВАРИАНТЫ:
1. Не более одной точки в числовом сегменте
2. Выражение не начинается с бинарного оператора
3. Не более одного ожидающего оператора в конце
4. toggle_sign(toggle_sign(e)) == e
"""

import structlog

from calcline.core.domain.symbols import (
    DIVIDE,
    DOT,
    MINUS,
    PLUS,
    TIMES,
    UNARY_MINUS,
    is_digit,
    is_display_operator,
)
from calcline.core.math.numerical_safeguards import format_number, parse_number

logger = structlog.get_logger()

INITIAL_EXPRESSION = "0"
NEGATIVE_ZERO_EXPRESSION = UNARY_MINUS + "0"


# =============================================================================
# ЧИСЛОВОЙ СЕГМЕНТ
# =============================================================================


def last_number_bounds(expr: str) -> tuple[int, int]:
    """
    Полуоткрытый диапазон [start, end) последнего числового сегмента.

    Сканирование с конца по цифрам и точкам, затем поглощается один маркер
    унарного минуса, если он стоит в позиции 0 или после бинарного оператора.

    Examples:
        >>> last_number_bounds("12+3.5")
        (3, 6)
        >>> last_number_bounds("5×-3")
        (2, 4)
        >>> last_number_bounds("-7")
        (0, 2)
        >>> last_number_bounds("5+")
        (2, 2)
    """
    end = len(expr)
    if not expr or is_display_operator(expr[-1]):
        return end, end

    i = end - 1
    while i >= 0 and (is_digit(expr[i]) or expr[i] == DOT):
        i -= 1

    if i >= 0 and expr[i] == UNARY_MINUS and (i == 0 or is_display_operator(expr[i - 1])):
        i -= 1

    return i + 1, end


def last_number(expr: str) -> str:
    """Текст последнего числового сегмента (возможно пустой)."""
    start, end = last_number_bounds(expr)
    return expr[start:end]


# =============================================================================
# ВВОД
# =============================================================================


def append_digit_or_dot(expr: str, ch: str) -> str:
    """
    Добавление цифры или точки в конец выражения.

    - "0" и "-0": цифра заменяет ноль, точка даёт "0." / "-0."
    - Знак "-" на "0" начинает отрицательное число: "-"
    - Вторая точка в сегменте отвергается
    - Точка в начале сегмента (после оператора или знака) даёт "0."
    - Любой другой символ отвергается

    Args:
        expr: Текущее выражение
        ch: Цифра 0-9, "." или знак "-" на начальном "0"

    Returns:
        Новое выражение, либо expr без изменений если ch отвергнут

    Examples:
        >>> append_digit_or_dot("0", "-")
        '-'
        >>> append_digit_or_dot("5", "+")
        '5'
    """
    if ch == UNARY_MINUS and expr == INITIAL_EXPRESSION:
        return UNARY_MINUS

    if not (is_digit(ch) or ch == DOT):
        logger.debug("Rejected character", expression=expr, char=ch)
        return expr

    if expr == INITIAL_EXPRESSION:
        return "0." if ch == DOT else ch
    if expr == NEGATIVE_ZERO_EXPRESSION:
        return NEGATIVE_ZERO_EXPRESSION + DOT if ch == DOT else UNARY_MINUS + ch

    if ch == DOT:
        segment = last_number(expr)
        if DOT in segment:
            return expr
        if segment in ("", UNARY_MINUS):
            return expr + "0."

    return expr + ch


def append_operator(expr: str, op: str) -> str:
    """
    Добавление бинарного оператора.

    Хвостовая точка и висящий знак числа отбрасываются. Ожидающий оператор
    в конце заменяется новым: операторы не накапливаются.

    Args:
        expr: Текущее выражение
        op: Оператор дисплея (+, −, ×, ÷)

    Returns:
        Новое выражение, либо expr без изменений если op не оператор дисплея

    Examples:
        >>> append_operator("5+", "×")
        '5×'
        >>> append_operator("5.", "+")
        '5+'
        >>> append_operator("5", "*")
        '5'
    """
    if not is_display_operator(op):
        logger.debug("Rejected operator", expression=expr, operator=op)
        return expr

    s = expr
    if s.endswith(DOT):
        s = s[:-1]
    if s.endswith(UNARY_MINUS):
        s = s[:-1]

    if not s:
        s = INITIAL_EXPRESSION

    if is_display_operator(s[-1]):
        return s[:-1] + op
    return s + op


# =============================================================================
# ПРАВКА
# =============================================================================


def backspace(expr: str) -> str:
    """Удаление последнего символа; из одного символа получается "0"."""
    if len(expr) <= 1:
        return INITIAL_EXPRESSION
    return expr[:-1]


def toggle_sign(expr: str) -> str:
    """
    Смена знака последнего числового сегмента (не всего выражения).

    - Сегмент в начале выражения: добавляется/снимается префикс "-"
    - Сегмент со знаком "-": знак снимается
    - Перед сегментом "+" или "−": оператор меняется на противоположный
    - Перед сегментом "×" или "÷": после оператора вставляется знак "-"

    Пустой сегмент в конце ("5×", "5+") обрабатывается так же, знак
    относится к следующему числу. Если операнд не найден, выражение
    возвращается без изменений.

    Повторная смена знака возвращает исходное выражение, кроме одиночного
    "-" (остаётся после backspace на "-5"): он даёт "0", а "0" даёт "-0".

    Examples:
        >>> toggle_sign("12")
        '-12'
        >>> toggle_sign("5+3")
        '5−3'
        >>> toggle_sign("5×3")
        '5×-3'
    """
    start, end = last_number_bounds(expr)
    segment = expr[start:end]

    if start == 0:
        if expr.startswith(UNARY_MINUS):
            return expr[1:] or INITIAL_EXPRESSION
        return UNARY_MINUS + expr

    before = expr[:start]

    if segment.startswith(UNARY_MINUS):
        return before + segment[1:]

    preceding = before[-1]
    if preceding == PLUS:
        return before[:-1] + MINUS + segment
    if preceding == MINUS:
        return before[:-1] + PLUS + segment
    if preceding in (TIMES, DIVIDE):
        return before + UNARY_MINUS + segment

    return expr


def apply_percent(expr: str) -> str:
    """
    Деление последнего числового сегмента на 100.

    Остальная часть выражения не меняется. Нет сегмента или он не
    разбирается как число: выражение без изменений.

    Examples:
        >>> apply_percent("50")
        '0.5'
        >>> apply_percent("10+200")
        '10+2'
    """
    start, end = last_number_bounds(expr)
    if start == end:
        return expr

    value = parse_number(expr[start:end])
    if value is None:
        return expr

    return expr[:start] + format_number(value / 100.0)


def prepare_for_eval(expr: str) -> str:
    """
    Подготовка к вычислению: снятие висящих операторов, точек и знаков.

    Examples:
        >>> prepare_for_eval("5+")
        '5'
        >>> prepare_for_eval("")
        '0'
    """
    s = expr
    while s and (is_display_operator(s[-1]) or s[-1] in (DOT, UNARY_MINUS)):
        s = s[:-1]
    return s or INITIAL_EXPRESSION
