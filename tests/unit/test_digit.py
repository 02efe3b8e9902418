"""
Тесты для Digit

Проверяет:
1. Соответствие символ ↔ номинал для всех семи цифр
2. Регистронезависимый разбор символа
3. Отказ на чужих номиналах и символах
4. Порядок по номиналу
"""

import pytest

from septem.core.domain import Digit, InvalidDigit, InvalidMagnitude


ALL_DIGITS = [
    (Digit.I, 1, "I", "i"),
    (Digit.V, 5, "V", "v"),
    (Digit.X, 10, "X", "x"),
    (Digit.L, 50, "L", "l"),
    (Digit.C, 100, "C", "c"),
    (Digit.D, 500, "D", "d"),
    (Digit.M, 1000, "M", "m"),
]


class TestFromMagnitude:
    """Тесты для Digit.from_magnitude"""

    @pytest.mark.parametrize("digit,magnitude,upper,lower", ALL_DIGITS)
    def test_valid_magnitudes(self, digit, magnitude, upper, lower) -> None:
        """Каждый номинал даёт свою цифру"""
        assert Digit.from_magnitude(magnitude) is digit

    @pytest.mark.parametrize("n", [0, 2, 4, 9, 11, 999, 1001, 5000, -1])
    def test_invalid_magnitude(self, n: int) -> None:
        """Не-номинал отклоняется с InvalidMagnitude(n)"""
        with pytest.raises(InvalidMagnitude) as exc_info:
            Digit.from_magnitude(n)
        assert exc_info.value.value == n

    def test_bool_rejected(self) -> None:
        """True не считается номиналом 1"""
        with pytest.raises(InvalidMagnitude):
            Digit.from_magnitude(True)

    def test_float_rejected(self) -> None:
        with pytest.raises(InvalidMagnitude):
            Digit.from_magnitude(5.0)  # type: ignore[arg-type]


class TestFromChar:
    """Тесты для Digit.from_char"""

    @pytest.mark.parametrize("digit,magnitude,upper,lower", ALL_DIGITS)
    def test_upper_and_lower(self, digit, magnitude, upper, lower) -> None:
        """Регистр не важен"""
        assert Digit.from_char(upper) is digit
        assert Digit.from_char(lower) is digit

    @pytest.mark.parametrize("c", ["S", "s", "A", "0", " ", "\t", "\n", "Ⅻ", "ı", "Ｍ", "-"])
    def test_invalid_char(self, c: str) -> None:
        """Пробелы, цифры, не-латинские символы отклоняются"""
        with pytest.raises(InvalidDigit) as exc_info:
            Digit.from_char(c)
        assert exc_info.value.digit == c

    @pytest.mark.parametrize("c", ["", "II", "iv"])
    def test_not_single_char(self, c: str) -> None:
        """Строка не из одного символа отклоняется"""
        with pytest.raises(InvalidDigit):
            Digit.from_char(c)


class TestMappings:
    """Тесты для to_upper_char / to_lower_char / magnitude"""

    @pytest.mark.parametrize("digit,magnitude,upper,lower", ALL_DIGITS)
    def test_mappings(self, digit, magnitude, upper, lower) -> None:
        assert digit.magnitude() == magnitude
        assert digit.to_upper_char() == upper
        assert digit.to_lower_char() == lower
        assert str(digit) == upper
        assert int(digit) == magnitude

    def test_magnitude_is_plain_int(self) -> None:
        """magnitude() возвращает int, а не enum-член"""
        assert type(Digit.M.magnitude()) is int


class TestOrdering:
    """Полный порядок по номиналу"""

    def test_sorted_by_magnitude(self) -> None:
        shuffled = [Digit.D, Digit.I, Digit.M, Digit.X, Digit.C, Digit.V, Digit.L]
        assert sorted(shuffled) == [
            Digit.I, Digit.V, Digit.X, Digit.L, Digit.C, Digit.D, Digit.M,
        ]

    def test_comparisons(self) -> None:
        assert Digit.I < Digit.V
        assert Digit.M > Digit.D
        assert Digit.X == Digit.from_char("x")
        assert max(Digit) is Digit.M
