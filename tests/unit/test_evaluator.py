"""
Тесты для Evaluator

Проверяет:
1. Лексический разбор (унарный и бинарный минус, точки, неизвестные символы)
2. Перевод в ОПЗ (приоритеты, левая ассоциативность)
3. Вычисление ОПЗ (нехватка операндов, лишние значения)
4. evaluate_to_string (форматирование, "Error")
"""

import math

import pytest

from calcline.config import EngineConfig
from calcline.core.domain.token import Token, TokenKind
from calcline.editor.expression_editor import append_digit_or_dot
from calcline.evaluator import (
    evaluate,
    evaluate_postfix,
    evaluate_to_string,
    to_postfix,
    tokenize,
)


def _texts(tokens: list[Token]) -> list[str]:
    return [t.text for t in tokens]


# =============================================================================
# TOKENIZER
# =============================================================================


class TestTokenize:
    """Тесты для tokenize"""

    def test_simple_expression(self) -> None:
        tokens = tokenize("12+3.5")
        assert _texts(tokens) == ["12", "+", "3.5"]
        assert [t.kind for t in tokens] == [
            TokenKind.NUMBER,
            TokenKind.OPERATOR,
            TokenKind.NUMBER,
        ]

    def test_leading_minus_is_unary(self) -> None:
        assert _texts(tokenize("-2+3")) == ["-2", "+", "3"]

    def test_minus_after_operator_is_unary(self) -> None:
        assert _texts(tokenize("2*-3")) == ["2", "*", "-3"]
        assert _texts(tokenize("2--3")) == ["2", "-", "-3"]

    def test_minus_after_number_is_binary(self) -> None:
        assert _texts(tokenize("5-3")) == ["5", "-", "3"]

    def test_one_dot_per_literal(self) -> None:
        """Вторая точка начинает новый литерал"""
        assert _texts(tokenize("1.2.3")) == ["1.2", ".3"]

    def test_leading_dot_literal(self) -> None:
        assert _texts(tokenize(".5*2")) == [".5", "*", "2"]

    def test_unknown_characters_skipped(self) -> None:
        """Неизвестные символы пропускаются без ошибки"""
        assert _texts(tokenize("2 + x3")) == ["2", "+", "3"]
        assert tokenize("Error") == []

    def test_empty(self) -> None:
        assert tokenize("") == []


# =============================================================================
# POSTFIX
# =============================================================================


class TestToPostfix:
    """Тесты для to_postfix"""

    def test_precedence(self) -> None:
        """* связывает сильнее +"""
        assert _texts(to_postfix(tokenize("1+2*3"))) == ["1", "2", "3", "*", "+"]
        assert _texts(to_postfix(tokenize("1*2+3"))) == ["1", "2", "*", "3", "+"]

    def test_left_associative(self) -> None:
        """Равный приоритет: вычисление слева направо"""
        assert _texts(to_postfix(tokenize("8-3-2"))) == ["8", "3", "-", "2", "-"]
        assert _texts(to_postfix(tokenize("8/4/2"))) == ["8", "4", "/", "2", "/"]

    def test_unparseable_literal_dropped(self) -> None:
        """Литерал "-" без цифр отбрасывается"""
        tokens = [Token.number("5"), Token.operator("*"), Token.number("-")]
        assert _texts(to_postfix(tokens)) == ["5", "*"]


class TestEvaluatePostfix:
    """Тесты для evaluate_postfix"""

    def test_basic(self) -> None:
        tokens = [Token.number("2"), Token.number("3"), Token.operator("+")]
        assert evaluate_postfix(tokens) == 5.0

    def test_operand_order(self) -> None:
        """Верхний элемент стека — правый операнд"""
        tokens = [Token.number("10"), Token.number("4"), Token.operator("-")]
        assert evaluate_postfix(tokens) == 6.0

    def test_insufficient_operands_is_nan(self) -> None:
        tokens = [Token.number("5"), Token.operator("*")]
        assert math.isnan(evaluate_postfix(tokens))

    def test_leftover_values_is_nan(self) -> None:
        tokens = [Token.number("5"), Token.number("3")]
        assert math.isnan(evaluate_postfix(tokens))

    def test_empty_is_nan(self) -> None:
        assert math.isnan(evaluate_postfix([]))

    def test_division_below_eps_is_nan(self) -> None:
        tokens = [Token.number("1"), Token.number("0.0000000000001"), Token.operator("/")]
        assert math.isnan(evaluate_postfix(tokens))


class TestEvaluate:
    """Тесты для evaluate (символы вычисления)"""

    @pytest.mark.parametrize(
        "expr,expected",
        [
            ("2+3", 5.0),
            ("1+2*3", 7.0),
            ("10/4", 2.5),
            ("8-3-2", 3.0),
            ("-2*-3", 6.0),
            ("2--3", 5.0),
            ("7", 7.0),
        ],
    )
    def test_values(self, expr: str, expected: float) -> None:
        assert evaluate(expr) == pytest.approx(expected)

    def test_dangling_operator_is_nan(self) -> None:
        assert math.isnan(evaluate("5+"))


# =============================================================================
# evaluate_to_string
# =============================================================================


class TestEvaluateToString:
    """Тесты для evaluate_to_string"""

    def test_addition(self) -> None:
        assert evaluate_to_string("2+3") == "5"

    def test_division(self) -> None:
        assert evaluate_to_string("10÷4") == "2.5"

    def test_division_by_zero(self) -> None:
        assert evaluate_to_string("5÷0") == "Error"

    def test_display_operators(self) -> None:
        assert evaluate_to_string("2×3−1") == "5"
        assert evaluate_to_string("1+2×3") == "7"

    def test_unary_minus_marker(self) -> None:
        assert evaluate_to_string("5×-3") == "-15"
        assert evaluate_to_string("-5+2") == "-3"

    def test_negative_zero_result(self) -> None:
        assert evaluate_to_string("-0×5") == "0"

    def test_precision(self) -> None:
        assert evaluate_to_string("1÷3") == "0.3333333333"
        assert evaluate_to_string("0.1+0.2") == "0.3"

    def test_overflow_is_error(self) -> None:
        assert evaluate_to_string("9" * 200 + "×" + "9" * 200) == "Error"

    def test_malformed_is_error(self) -> None:
        assert evaluate_to_string("5+") == "Error"
        assert evaluate_to_string("Error") == "Error"
        assert evaluate_to_string("") == "Error"

    def test_custom_config(self) -> None:
        config = EngineConfig(fraction_digits=2, error_text="ERR")
        assert evaluate_to_string("1÷3", config) == "0.33"
        assert evaluate_to_string("1÷0", config) == "ERR"

    @pytest.mark.parametrize(
        "expr", ["2+3", "10÷4", "7×8", "1÷8", "100−0.25", "2−5", "1−3.5", "-4×2"]
    )
    def test_result_is_fixed_point(self, expr: str) -> None:
        """Результат, набранный заново, вычисляется сам в себя"""
        result = evaluate_to_string(expr)
        rebuilt = "0"
        for ch in result:
            rebuilt = append_digit_or_dot(rebuilt, ch)
        assert rebuilt == result
        assert evaluate_to_string(rebuilt) == result
