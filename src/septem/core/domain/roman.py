"""
RomanNumeral — Римское число как value object

Immutable Pydantic модель, единственное поле которой — целое значение.
Последовательность цифр не хранится: она вычисляется из значения при
каждом обращении, поэтому текст всегда соответствует числу.

Способы создания:
- from_checked(n): 1 ≤ n ≤ 3999, иначе OutOfRange
- from_unchecked(n): любое n ≥ 0 (0 → пустая запись, 5032 → MMMMMXXXII)
- parse(text): permissive декодирование, InvalidDigit на первом чужом символе

Равенство, порядок и hash определяются только значением: "IIII" и "IV"
дают равные объекты.
"""

from collections.abc import Iterator
from functools import total_ordering
from typing import Any, Final

from pydantic import BaseModel, Field

from septem.core.contracts import validate_roman_numeral
from septem.core.domain.digit import Digit
from septem.core.domain.errors import OutOfRange
from septem.core.math.decoder import decode
from septem.core.math.encoder import encode, encode_to_str


# =============================================================================
# RANGE
# =============================================================================

# Границы классической записи (checked-конструктор)
MIN_CLASSICAL_VALUE: Final[int] = 1
MAX_CLASSICAL_VALUE: Final[int] = 3999


# =============================================================================
# ROMAN NUMERAL MODEL
# =============================================================================


@total_ordering
class RomanNumeral(BaseModel):
    """
    Римское число.

    Immutable модель (frozen=True). Прямой вызов RomanNumeral(value=n)
    эквивалентен from_unchecked(n); отрицательные и нецелые значения
    отклоняет Pydantic (ValidationError).
    """

    value: int = Field(..., ge=0, strict=True, description="Значение (каноническое представление)")

    model_config = {"frozen": True}

    # -------------------------------------------------------------------------
    # Construction
    # -------------------------------------------------------------------------

    @classmethod
    def from_checked(cls, n: int) -> "RomanNumeral":
        """
        Создание с проверкой диапазона.

        Raises:
            OutOfRange: Если n == 0 или n > 3999 (а также n < 0)
        """
        if isinstance(n, bool) or not isinstance(n, int):
            raise TypeError(f"n must be int, got {type(n).__name__}")
        if n < MIN_CLASSICAL_VALUE or n > MAX_CLASSICAL_VALUE:
            raise OutOfRange(n)
        return cls(value=n)

    @classmethod
    def from_unchecked(cls, n: int) -> "RomanNumeral":
        """Создание без проверки верхней границы; 0 допустим."""
        return cls(value=n)

    @classmethod
    def parse(cls, text: str) -> "RomanNumeral":
        """
        Разбор строки римских цифр (регистр не важен).

        Raises:
            InvalidDigit: На первом нераспознанном символе
        """
        return cls(value=decode(text))

    # -------------------------------------------------------------------------
    # Conversion
    # -------------------------------------------------------------------------

    def magnitude(self) -> int:
        return self.value

    def to_digits(self) -> tuple[Digit, ...]:
        """Каноническая последовательность цифр (пустая для 0)."""
        return encode(self.value)

    def to_upper_string(self) -> str:
        return encode_to_str(self.value)

    def to_lower_string(self) -> str:
        return encode_to_str(self.value, lowercase=True)

    def is_classical(self) -> bool:
        """Прошло бы значение checked-конструирование."""
        return MIN_CLASSICAL_VALUE <= self.value <= MAX_CLASSICAL_VALUE

    # -------------------------------------------------------------------------
    # Serialization
    # -------------------------------------------------------------------------

    def to_dict(self) -> dict[str, Any]:
        """
        Сериализация по контракту roman_numeral.

        Returns:
            {"value": int, "numeral": str, "classical": bool}
        """
        return {
            "value": self.value,
            "numeral": self.to_upper_string(),
            "classical": self.is_classical(),
        }

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "RomanNumeral":
        """
        Десериализация с проверкой контракта и согласованности полей.

        Raises:
            jsonschema.ValidationError: Если data не соответствует схеме
            ValueError: Если numeral не декодируется в value
        """
        validate_roman_numeral(data)

        # JSON "integer" допускает 4.0; схема уже гарантирует целочисленность
        numeral = cls.from_unchecked(int(data["value"]))
        decoded = decode(data["numeral"])
        if decoded != numeral.value:
            raise ValueError(
                f"numeral {data['numeral']!r} decodes to {decoded}, "
                f"expected {numeral.value}"
            )
        if data["classical"] != numeral.is_classical():
            raise ValueError(
                f"classical={data['classical']} inconsistent with value {numeral.value}"
            )
        return numeral

    # -------------------------------------------------------------------------
    # Python protocols
    # -------------------------------------------------------------------------

    def __lt__(self, other: object) -> bool:
        if not isinstance(other, RomanNumeral):
            return NotImplemented
        return self.value < other.value

    def __int__(self) -> int:
        return self.value

    def __index__(self) -> int:
        return self.value

    def __iter__(self) -> Iterator[Digit]:  # type: ignore[override]
        return iter(self.to_digits())

    def __len__(self) -> int:
        return len(self.to_digits())

    def __str__(self) -> str:
        return self.to_upper_string()
