"""
Тесты для Base Decoding — разбор чисел в системах счисления 2..36

Проверяет:
1. Позиционный разбор слева направо
2. Нечувствительность к регистру и обрезку пробелов
3. InvalidDigit / DigitOutOfRange / InvalidBase
4. Round-trip encode → decode
5. Пустую строку (→ 0)
"""

import random

import pytest

from src.core.errors import DigitOutOfRange, InvalidBase, InvalidDigit
from src.core.math.base_decoding import (
    MAX_BASE,
    MIN_BASE,
    decode_in_base,
    digit_value,
    encode_in_base,
    validate_base,
)


class TestDecodeInBase:
    """Тесты decode_in_base."""

    def test_reference_share_value(self):
        """'213' в base 4 → 2*16 + 1*4 + 3 = 39."""
        assert decode_in_base("213", 4) == 39

    def test_binary(self):
        assert decode_in_base("111", 2) == 7

    def test_decimal(self):
        assert decode_in_base("12", 10) == 12

    def test_case_insensitive(self):
        assert decode_in_base("ff", 16) == 255
        assert decode_in_base("FF", 16) == 255
        assert decode_in_base("Zz", 36) == 35 * 36 + 35

    def test_whitespace_trimmed(self):
        assert decode_in_base("  101\n", 2) == 5

    def test_empty_string_is_zero(self):
        """Пустая строка (в том числе после trim) → 0."""
        assert decode_in_base("", 10) == 0
        assert decode_in_base("   ", 7) == 0

    def test_leading_zeros(self):
        assert decode_in_base("000123", 10) == 123

    def test_big_value_exact(self):
        """Значения за пределами 64 бит не усекаются."""
        digits = "f" * 40
        assert decode_in_base(digits, 16) == 16**40 - 1

    @pytest.mark.parametrize("digits,base", [("2", 2), ("102", 2), ("9", 8), ("g", 16), ("a", 10)])
    def test_digit_out_of_range(self, digits, base):
        """Цифра >= base → DigitOutOfRange."""
        with pytest.raises(DigitOutOfRange):
            decode_in_base(digits, base)

    @pytest.mark.parametrize("digits", ["12-3", "1.5", "12 34", "é", "+1"])
    def test_invalid_digit(self, digits):
        """Не буквенно-цифровой символ → InvalidDigit."""
        with pytest.raises(InvalidDigit):
            decode_in_base(digits, 16)

    @pytest.mark.parametrize("base", [0, 1, 37, -10])
    def test_invalid_base(self, base):
        with pytest.raises(InvalidBase):
            decode_in_base("1", base)

    def test_errors_are_value_errors(self):
        with pytest.raises(ValueError):
            decode_in_base("2", 2)
        with pytest.raises(ValueError):
            decode_in_base("?", 10)


class TestEncodeRoundtrip:
    """Round-trip: decode(encode(v, b), b) == v."""

    @pytest.mark.parametrize("base", [2, 10, 16, 36])
    def test_roundtrip(self, base):
        rng = random.Random(base)
        values = [0, 1, base - 1, base, base**5 + 3, 2**130 + 17]
        values += [rng.randrange(10**40) for _ in range(50)]
        for v in values:
            assert decode_in_base(encode_in_base(v, base), base) == v

    def test_encode_matches_builtin_int(self):
        """Кодирование согласовано с int(s, base)."""
        for base in (2, 8, 16, 36):
            s = encode_in_base(123456789, base)
            assert int(s, base) == 123456789

    def test_encode_zero(self):
        assert encode_in_base(0, 16) == "0"

    def test_encode_negative_rejected(self):
        with pytest.raises(ValueError):
            encode_in_base(-1, 10)


class TestHelpers:
    """Тесты digit_value и validate_base."""

    def test_digit_value(self):
        assert digit_value("0") == 0
        assert digit_value("9") == 9
        assert digit_value("a") == 10
        assert digit_value("Z") == 35

    def test_validate_base_bounds(self):
        assert validate_base(MIN_BASE) == MIN_BASE
        assert validate_base(MAX_BASE) == MAX_BASE

    def test_validate_base_rejects_non_int(self):
        with pytest.raises(InvalidBase):
            validate_base("10")
        with pytest.raises(InvalidBase):
            validate_base(True)
