"""
Тесты для Encoder (целое → римские цифры)

Проверяет:
1. Конкретные векторы и все вычитательные пары
2. Ноль и значения ≥ 4000 (unchecked-путь)
3. Инвариант: decode(encode(n)) == n на всём классическом диапазоне
4. Эквивалентность классическому жадному алгоритму
"""

import pytest

from septem.core.domain import Digit, OutOfRange
from septem.core.math import DENOMINATIONS, decode, encode, encode_to_str


def classical_greedy(n: int) -> str:
    """Эталон: вычитание номинала по одному разу за итерацию."""
    table = [
        (1000, "M"), (900, "CM"), (500, "D"), (400, "CD"), (100, "C"), (90, "XC"),
        (50, "L"), (40, "XL"), (10, "X"), (9, "IX"), (5, "V"), (4, "IV"), (1, "I"),
    ]
    out = ""
    for value, symbol in table:
        while n >= value:
            out += symbol
            n -= value
    return out


class TestDenominations:
    """Таблица номиналов"""

    def test_thirteen_descending(self) -> None:
        values = [value for value, _ in DENOMINATIONS]
        assert len(values) == 13
        assert values == sorted(values, reverse=True)

    def test_symbols_sum_to_value(self) -> None:
        """Символы каждого номинала декодируются в сам номинал"""
        for value, symbols in DENOMINATIONS:
            assert decode("".join(str(d) for d in symbols)) == value


class TestEncodeVectors:
    """Конкретные векторы"""

    @pytest.mark.parametrize(
        "n,expected",
        [
            (1, "I"),
            (4, "IV"),
            (9, "IX"),
            (14, "XIV"),
            (40, "XL"),
            (90, "XC"),
            (400, "CD"),
            (900, "CM"),
            (529, "DXXIX"),
            (532, "DXXXII"),
            (1994, "MCMXCIV"),
            (2024, "MMXXIV"),
            (3888, "MMMDCCCLXXXVIII"),
            (3999, "MMMCMXCIX"),
        ],
    )
    def test_vectors(self, n: int, expected: str) -> None:
        assert encode_to_str(n) == expected

    def test_digit_sequence(self) -> None:
        assert encode(532) == (Digit.D, Digit.X, Digit.X, Digit.X, Digit.I, Digit.I)

    def test_lowercase(self) -> None:
        assert encode_to_str(3999, lowercase=True) == "mmmcmxcix"


class TestEncodeEdgeCases:
    """Ноль, большие значения, отрицательные"""

    def test_zero_is_empty(self) -> None:
        assert encode(0) == ()
        assert encode_to_str(0) == ""

    def test_above_classical_range_repeats_m(self) -> None:
        """5032 → пять M"""
        assert encode_to_str(5032) == "MMMMMXXXII"
        assert encode_to_str(4000) == "MMMM"

    def test_large_value(self) -> None:
        """Большие значения не переполняются"""
        n = 10_000_007
        digits = encode(n)
        assert digits.count(Digit.M) == n // 1000
        assert digits[-3:] == (Digit.V, Digit.I, Digit.I)
        assert decode("".join(str(d) for d in digits)) == n

    def test_negative_rejected(self) -> None:
        with pytest.raises(OutOfRange) as exc_info:
            encode(-1)
        assert exc_info.value.value == -1

    @pytest.mark.parametrize("bad", [1.0, "12", True, None])
    def test_non_int_rejected(self, bad) -> None:
        with pytest.raises(TypeError):
            encode(bad)


class TestEncodeInvariants:
    """Инварианты на всём классическом диапазоне"""

    def test_round_trip_classical_range(self) -> None:
        """decode(encode(n)) == n для n в [1, 3999]"""
        for n in range(1, 4000):
            assert decode(encode_to_str(n)) == n

    def test_only_uppercase_symbols(self) -> None:
        allowed = set("IVXLCDM")
        for n in range(1, 4000):
            assert set(encode_to_str(n)) <= allowed

    def test_matches_classical_greedy(self) -> None:
        for n in range(0, 6000):
            assert encode_to_str(n) == classical_greedy(n)

    def test_round_trip_unchecked_range(self) -> None:
        for n in range(4000, 12000, 7):
            assert decode(encode_to_str(n)) == n
