"""
Encoder — Целое → последовательность римских цифр

Жадное разложение по 13 номиналам в порядке убывания:

    1000(M) 900(CM) 500(D) 400(CD) 100(C) 90(XC) 50(L)
    40(XL) 10(X) 9(IX) 5(V) 4(IV) 1(I)

Пока остаток ≥ номинала, дописываем его символы и вычитаем номинал.

ИНВАРИАНТЫ:
1. encode(0) → пустая последовательность
2. n ≥ 4000 → повторяющиеся M (5032 → MMMMMXXXII), верхней границы нет
3. decode(encode(n)) == n для любого n ≥ 0
4. Выход для 1..3999 совпадает с классической записью
"""

from typing import Final

from septem.core.domain.digit import Digit
from septem.core.domain.errors import OutOfRange


# =============================================================================
# DENOMINATION TABLE
# =============================================================================

DENOMINATIONS: Final[tuple[tuple[int, tuple[Digit, ...]], ...]] = (
    (1000, (Digit.M,)),
    (900, (Digit.C, Digit.M)),
    (500, (Digit.D,)),
    (400, (Digit.C, Digit.D)),
    (100, (Digit.C,)),
    (90, (Digit.X, Digit.C)),
    (50, (Digit.L,)),
    (40, (Digit.X, Digit.L)),
    (10, (Digit.X,)),
    (9, (Digit.I, Digit.X)),
    (5, (Digit.V,)),
    (4, (Digit.I, Digit.V)),
    (1, (Digit.I,)),
)


# =============================================================================
# ENCODING
# =============================================================================


def encode(n: int) -> tuple[Digit, ...]:
    """
    Каноническая последовательность цифр для неотрицательного целого.

    Args:
        n: Значение (0 допустим, верхней границы нет)

    Returns:
        Кортеж цифр, старшие первыми

    Raises:
        OutOfRange: Если n отрицательное
        TypeError: Если n не int

    Examples:
        >>> "".join(str(d) for d in encode(532))
        'DXXXII'
        >>> encode(0)
        ()
    """
    if isinstance(n, bool) or not isinstance(n, int):
        raise TypeError(f"n must be int, got {type(n).__name__}")
    if n < 0:
        raise OutOfRange(n)

    digits: list[Digit] = []
    remainder = n
    for value, symbols in DENOMINATIONS:
        # Эквивалентно "while remainder >= value: ..." за один шаг
        count, remainder = divmod(remainder, value)
        digits.extend(symbols * count)
        if remainder == 0:
            break

    return tuple(digits)


def encode_to_str(n: int, lowercase: bool = False) -> str:
    """
    Римская запись целого строкой.

    Args:
        n: Значение (см. encode)
        lowercase: Вернуть строчные символы

    Returns:
        Например, 'MMMCMXCIX' или 'mmmcmxcix'
    """
    if lowercase:
        return "".join(digit.to_lower_char() for digit in encode(n))
    return "".join(digit.to_upper_char() for digit in encode(n))
