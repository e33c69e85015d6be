"""
Base Decoding — Разбор целых чисел в системах счисления 2..36

Цифры '0'..'9' соответствуют значениям 0..9, буквы 'a'..'z' (без учёта
регистра) — значениям 10..35. Разбор позиционный, слева направо:
value = value * base + digit.

КРИТИЧЕСКИЕ ИНВАРИАНТЫ:
1. Результат — int произвольной точности (без переполнения)
2. Символ вне [0-9a-zA-Z] → InvalidDigit
3. Цифра со значением >= base → DigitOutOfRange
4. Пустая строка после trim → 0
"""

from typing import Final

from src.core.errors import DigitOutOfRange, InvalidBase, InvalidDigit

# =============================================================================
# КОНСТАНТЫ
# =============================================================================

MIN_BASE: Final[int] = 2
MAX_BASE: Final[int] = 36

DIGIT_ALPHABET: Final[str] = "0123456789abcdefghijklmnopqrstuvwxyz"


# =============================================================================
# ВАЛИДАЦИЯ
# =============================================================================


def validate_base(base: int) -> int:
    """
    Проверка основания системы счисления.

    Args:
        base: Основание

    Returns:
        base без изменений

    Raises:
        InvalidBase: если base не int или вне [MIN_BASE, MAX_BASE]
    """
    if isinstance(base, bool) or not isinstance(base, int):
        raise InvalidBase(f"Base must be an integer, got {type(base).__name__}")
    if not MIN_BASE <= base <= MAX_BASE:
        raise InvalidBase(f"Base {base} outside [{MIN_BASE}, {MAX_BASE}]")
    return base


def digit_value(ch: str) -> int:
    """
    Значение одного символа-цифры (без проверки основания).

    Raises:
        InvalidDigit: если символ не ASCII-цифра и не латинская буква
    """
    if not ch.isascii():
        raise InvalidDigit(f"Invalid digit {ch!r}")
    lowered = ch.lower()
    if "0" <= lowered <= "9":
        return ord(lowered) - ord("0")
    if "a" <= lowered <= "z":
        return ord(lowered) - ord("a") + 10
    raise InvalidDigit(f"Invalid digit {ch!r}")


# =============================================================================
# РАЗБОР / ФОРМАТИРОВАНИЕ
# =============================================================================


def decode_in_base(digits: str, base: int) -> int:
    """
    Разбор строки цифр в заданной системе счисления.

    Args:
        digits: Строка цифр (пробелы по краям игнорируются)
        base: Основание в диапазоне [2, 36]

    Returns:
        Неотрицательное целое значение

    Raises:
        InvalidBase: некорректное основание
        InvalidDigit: символ не является цифрой/буквой
        DigitOutOfRange: значение цифры >= base

    Examples:
        >>> decode_in_base("213", 4)
        39
        >>> decode_in_base("  FF ", 16)
        255
        >>> decode_in_base("", 10)
        0
    """
    validate_base(base)

    value = 0
    for ch in digits.strip():
        d = digit_value(ch)
        if d >= base:
            raise DigitOutOfRange(f"Digit {ch!r} out of range for base {base}")
        value = value * base + d
    return value


def encode_in_base(value: int, base: int) -> str:
    """
    Каноническое представление неотрицательного целого в системе base.

    Обратная операция к decode_in_base: цифры в нижнем регистре,
    без ведущих нулей, ноль → "0".

    Raises:
        InvalidBase: некорректное основание
        ValueError: если value < 0
    """
    validate_base(base)
    if value < 0:
        raise ValueError(f"Cannot encode negative value {value}")
    if value == 0:
        return "0"

    chunks = []
    while value:
        value, d = divmod(value, base)
        chunks.append(DIGIT_ALPHABET[d])
    return "".join(reversed(chunks))
