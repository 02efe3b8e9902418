"""
Decoder — Строка римских цифр → целое

Один проход слева направо с одной отложенной (pending) величиной:

    total = 0, pending = None
    для каждого символа c (→ Digit или InvalidDigit):
        pending is None   → pending = m
        m == pending      → total += pending            (серия: III)
        m <  pending      → total += pending; pending = m  (VI)
        m >  pending      → total += m - pending; pending = None  (IV)
    в конце: total += pending (если есть)

Декодер намеренно permissive: он не проверяет каноничность записи.
"IIII" → 4, "IM" → 999. Это наблюдаемое поведение, а не ошибка.
Пустая строка → 0.
"""

from collections.abc import Iterable
from typing import Optional

from septem.core.domain.digit import Digit


def decode(text: Iterable[str]) -> int:
    """
    Значение строки римских цифр.

    Args:
        text: Символы (обычно str), регистр не важен

    Returns:
        Неотрицательное целое

    Raises:
        InvalidDigit: На первом нераспознанном символе; частичный результат
            не возвращается

    Examples:
        >>> decode("VII")
        7
        >>> decode("IM")
        999
    """
    total = 0
    pending: Optional[int] = None

    for c in text:
        current = Digit.from_char(c).magnitude()

        if pending is None:
            pending = current
        elif current == pending:
            total += pending
        elif current < pending:
            total += pending
            pending = current
        else:
            # Вычитательная пара: предыдущая цифра уже не ждёт
            total += current - pending
            pending = None

    if pending is not None:
        total += pending

    return total


def decode_digits(text: Iterable[str]) -> tuple[Digit, ...]:
    """
    Проверка всех символов и возврат последовательности цифр как есть.

    Raises:
        InvalidDigit: На первом нераспознанном символе
    """
    return tuple(Digit.from_char(c) for c in text)
