"""
Digit — Одиночная римская цифра

Семь канонических символов {I, V, X, L, C, D, M} и их номиналы
{1, 5, 10, 50, 100, 500, 1000}.

Immutable value type: значение enum-члена совпадает с номиналом, поэтому
полный порядок по номиналу и int(digit) даёт mixin `int`.
"""

from enum import Enum
from typing import Final

from septem.core.domain.errors import InvalidDigit, InvalidMagnitude


# =============================================================================
# ENUMS
# =============================================================================


class Digit(int, Enum):
    """Римская цифра, значение = номинал"""

    I = 1
    V = 5
    X = 10
    L = 50
    C = 100
    D = 500
    M = 1000

    @classmethod
    def from_magnitude(cls, n: int) -> "Digit":
        """
        Цифра по номиналу.

        Args:
            n: Номинал (1, 5, 10, 50, 100, 500 или 1000)

        Returns:
            Соответствующая цифра

        Raises:
            InvalidMagnitude: Если n не является номиналом одной цифры
        """
        # bool является int, но True не номинал I
        if isinstance(n, bool) or not isinstance(n, int):
            raise InvalidMagnitude(n)
        digit = _BY_MAGNITUDE.get(n)
        if digit is None:
            raise InvalidMagnitude(n)
        return digit

    @classmethod
    def from_char(cls, c: str) -> "Digit":
        """
        Цифра по символу, без учёта регистра.

        Принимаются только 14 ASCII-букв (i/I, v/V, ..., m/M). Символы, чей
        upper-case совпадает с римской цифрой (например, 'ı'), отвергаются.

        Raises:
            InvalidDigit: Для любого другого символа, включая пробелы
        """
        digit = _BY_CHAR.get(c) if isinstance(c, str) else None
        if digit is None:
            raise InvalidDigit(c)
        return digit

    def magnitude(self) -> int:
        return int(self.value)

    def to_upper_char(self) -> str:
        return self.name

    def to_lower_char(self) -> str:
        return self.name.lower()

    def __str__(self) -> str:
        return self.name


# =============================================================================
# LOOKUP TABLES
# =============================================================================

_BY_MAGNITUDE: Final[dict[int, Digit]] = {digit.value: digit for digit in Digit}

_BY_CHAR: Final[dict[str, Digit]] = {
    **{digit.name: digit for digit in Digit},
    **{digit.name.lower(): digit for digit in Digit},
}
