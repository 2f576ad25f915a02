"""Token — лексема выражения для вычислителя."""

from dataclasses import dataclass
from enum import Enum
from typing import Optional

from calcline.core.math.numerical_safeguards import parse_number


class TokenKind(str, Enum):
    """Вид лексемы."""

    NUMBER = "NUMBER"
    OPERATOR = "OPERATOR"


@dataclass(frozen=True)
class Token:
    """Лексема: числовой литерал (возможно со знаком) или бинарный оператор.

    Текст литерала хранится как есть; разбор в float откладывается до
    построения постфиксной записи, где неразбираемые литералы отбрасываются.
    """

    kind: TokenKind
    text: str

    @classmethod
    def number(cls, text: str) -> "Token":
        return cls(kind=TokenKind.NUMBER, text=text)

    @classmethod
    def operator(cls, text: str) -> "Token":
        return cls(kind=TokenKind.OPERATOR, text=text)

    @property
    def is_number(self) -> bool:
        return self.kind == TokenKind.NUMBER

    @property
    def is_operator(self) -> bool:
        return self.kind == TokenKind.OPERATOR

    @property
    def value(self) -> Optional[float]:
        """Значение литерала, None для операторов и неразбираемых литералов."""
        if not self.is_number:
            return None
        return parse_number(self.text)

    def __str__(self) -> str:
        return self.text
