"""Postfix — перевод лексем в обратную польскую запись и её вычисление.

Алгоритм сортировочной станции без скобок: "*" и "/" (приоритет 2) связывают
сильнее "+" и "-" (приоритет 1), все операторы левоассоциативны.
"""

import math

import structlog

from calcline.core.domain.symbols import PRECEDENCE
from calcline.core.domain.token import Token
from calcline.core.math.numerical_safeguards import EPS_DIVISION, safe_divide

logger = structlog.get_logger()


def to_postfix(tokens: list[Token]) -> list[Token]:
    """
    Перевод инфиксной последовательности лексем в постфиксную.

    Числовой литерал, который не разбирается ("-" или "." без цифр),
    отбрасывается.

    Args:
        tokens: Лексемы в инфиксном порядке

    Returns:
        Лексемы в постфиксном порядке
    """
    output: list[Token] = []
    pending: list[Token] = []

    for token in tokens:
        if token.is_number:
            if token.value is None:
                logger.debug("Dropping unparseable literal", literal=token.text)
                continue
            output.append(token)
            continue

        precedence = PRECEDENCE[token.text]
        while pending and PRECEDENCE[pending[-1].text] >= precedence:
            output.append(pending.pop())
        pending.append(token)

    while pending:
        output.append(pending.pop())

    return output


def _apply_operator(op: str, a: float, b: float, eps: float) -> float:
    if op == "+":
        return a + b
    if op == "-":
        return a - b
    if op == "*":
        return a * b
    if op == "/":
        return safe_divide(a, b, eps=eps)
    return math.nan


def evaluate_postfix(tokens: list[Token], eps: float = EPS_DIVISION) -> float:
    """
    Вычисление постфиксной записи на одном стеке значений.

    Оператор снимает два операнда (верхний — правый) и кладёт результат.

    Args:
        tokens: Лексемы в постфиксном порядке
        eps: Порог знаменателя для деления

    Returns:
        Результат, либо NaN если операндов не хватает или на стеке
        в конце не ровно одно значение
    """
    stack: list[float] = []

    for token in tokens:
        if token.is_number:
            value = token.value
            if value is None:
                return math.nan
            stack.append(value)
            continue

        if len(stack) < 2:
            logger.debug("Operator without operands", operator=token.text, depth=len(stack))
            return math.nan

        b = stack.pop()
        a = stack.pop()
        stack.append(_apply_operator(token.text, a, b, eps))

    if len(stack) != 1:
        return math.nan
    return stack[0]
