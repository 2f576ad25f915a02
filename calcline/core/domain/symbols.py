"""
Symbols — алфавит выражения калькулятора

Дисплей и вычислитель используют разные наборы символов операторов:
- Дисплей: +, − (U+2212), ×, ÷
- Вычисление: +, -, *, /

Унарный минус (знак отрицательного числа) кодируется ASCII "-", чтобы не
путаться с бинарным "−" на дисплее: "5×-3" это 5 × (−3), а "5−3" это вычитание.
"""

from typing import Final


# =============================================================================
# ОПЕРАТОРЫ
# =============================================================================

PLUS: Final[str] = "+"
MINUS: Final[str] = "\u2212"
TIMES: Final[str] = "\u00d7"
DIVIDE: Final[str] = "\u00f7"

# Маркер унарного минуса (знак числа)
UNARY_MINUS: Final[str] = "-"

DOT: Final[str] = "."
DIGITS: Final[str] = "0123456789"

DISPLAY_OPERATORS: Final[frozenset[str]] = frozenset({PLUS, MINUS, TIMES, DIVIDE})
COMPUTE_OPERATORS: Final[frozenset[str]] = frozenset({"+", "-", "*", "/"})

# Дисплей → вычисление
DISPLAY_TO_COMPUTE: Final[dict[str, str]] = {
    PLUS: "+",
    MINUS: "-",
    TIMES: "*",
    DIVIDE: "/",
}

# Приоритеты операторов вычисления (левая ассоциативность)
PRECEDENCE: Final[dict[str, int]] = {
    "+": 1,
    "-": 1,
    "*": 2,
    "/": 2,
}


# =============================================================================
# КЛАВИШИ
# =============================================================================

KEY_CLEAR: Final[str] = "C"
KEY_BACKSPACE: Final[str] = "\u232b"
KEY_TOGGLE_SIGN: Final[str] = "\u00b1"
KEY_PERCENT: Final[str] = "%"
KEY_EQUALS: Final[str] = "="

# Раскладка кнопок калькулятора (строки сверху вниз)
KEYPAD_LAYOUT: Final[tuple[tuple[str, ...], ...]] = (
    (KEY_CLEAR, KEY_TOGGLE_SIGN, KEY_PERCENT, DIVIDE),
    ("7", "8", "9", TIMES),
    ("4", "5", "6", MINUS),
    ("1", "2", "3", PLUS),
    ("0", DOT, KEY_EQUALS),
)


def is_digit(ch: str) -> bool:
    """ASCII-цифра 0-9 (str.isdigit принимает и "²", и арабские цифры)."""
    return len(ch) == 1 and ch in DIGITS


def is_display_operator(ch: str) -> bool:
    return ch in DISPLAY_OPERATORS


def is_compute_operator(ch: str) -> bool:
    return ch in COMPUTE_OPERATORS


def to_compute_symbols(expression: str) -> str:
    """
    Замена символов дисплея на символы вычисления.

    Маркер унарного минуса уже совпадает с "-" вычисления.

    Examples:
        >>> to_compute_symbols("10÷4×2−1")
        '10/4*2-1'
    """
    return "".join(DISPLAY_TO_COMPUTE.get(ch, ch) for ch in expression)
