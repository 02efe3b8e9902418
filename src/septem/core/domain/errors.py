"""
Errors — Таксономия ошибок конвертации римских чисел

Ровно три вида ошибок:
- InvalidDigit: символ не является одной из семи римских цифр
- InvalidMagnitude: целое не равно номиналу одной римской цифры
- OutOfRange: значение вне диапазона checked-конструктора [1, 3999]

Все ошибки возвращаются вызывающему коду как есть: ядро их не
перехватывает, не логирует и не повторяет операцию. Частичный результат
вместе с ошибкой никогда не возвращается.
"""

from typing import Any


class RomanError(ValueError):
    """Базовый класс ошибок конвертации."""

    description: str = "Roman numeral error"

    def __init__(self, payload: Any):
        super().__init__(f"{self.description}: {payload}")
        self._payload = payload

    def __eq__(self, other: object) -> bool:
        if type(self) is not type(other):
            return NotImplemented
        return self._payload == other._payload  # type: ignore[attr-defined]

    def __hash__(self) -> int:
        return hash((type(self).__name__, self._payload))

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self._payload!r})"


class InvalidDigit(RomanError):
    """
    Символ не распознан как римская цифра.

    Attributes:
        digit: Отвергнутый символ (как был передан, без нормализации регистра)
    """

    description = "Encountered an invalid digit"

    @property
    def digit(self) -> str:
        return self._payload


class InvalidMagnitude(RomanError):
    """
    Целое не является номиналом одной римской цифры (1, 5, 10, ..., 1000).

    Используется только при поиске одиночной цифры, не кодировщиком.
    """

    description = "Cannot convert number to single roman digit"

    @property
    def value(self) -> Any:
        return self._payload


class OutOfRange(RomanError):
    """Значение вне диапазона [1, 3999] при checked-конструировании."""

    description = "Roman numeral is out of range"

    @property
    def value(self) -> Any:
        return self._payload
