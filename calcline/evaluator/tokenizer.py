"""Tokenizer — разбор выражения (в символах вычисления) на лексемы.

"-" начинает отрицательный литерал, если стоит первым или сразу после
другого оператора; иначе это бинарный минус. Неизвестные символы
пропускаются: вход всегда собран редактором.
"""

import structlog

from calcline.core.domain.symbols import DOT, is_compute_operator, is_digit
from calcline.core.domain.token import Token

logger = structlog.get_logger()


def _is_unary_position(expr: str, i: int) -> bool:
    return i == 0 or is_compute_operator(expr[i - 1])


def _scan_number(expr: str, i: int) -> int:
    """Конец литерала, начатого в позиции i: цифры и не более одной точки."""
    has_dot = expr[i] == DOT
    j = i + 1
    while j < len(expr):
        ch = expr[j]
        if is_digit(ch):
            j += 1
        elif ch == DOT and not has_dot:
            has_dot = True
            j += 1
        else:
            break
    return j


def tokenize(expr: str) -> list[Token]:
    """
    Разбор выражения на лексемы слева направо.

    Args:
        expr: Выражение в символах вычисления (+, -, *, /)

    Returns:
        Список лексем в порядке появления

    Examples:
        >>> [t.text for t in tokenize("-2*-3-1")]
        ['-2', '*', '-3', '-', '1']
    """
    tokens: list[Token] = []
    i = 0

    while i < len(expr):
        ch = expr[i]

        if is_digit(ch) or ch == DOT or (ch == "-" and _is_unary_position(expr, i)):
            j = _scan_number(expr, i)
            tokens.append(Token.number(expr[i:j]))
            i = j
        elif is_compute_operator(ch):
            tokens.append(Token.operator(ch))
            i += 1
        else:
            logger.debug("Skipping unknown character", char=ch, position=i)
            i += 1

    return tokens
