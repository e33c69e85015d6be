"""
Тесты для Rational — Точная рациональная арифметика

Проверяемые инварианты:
1. denominator > 0 после любой операции
2. Полное сокращение (gcd == 1), каноничный ноль (0, 1)
3. DivisionByZero при нулевом знаменателе и делении на ноль
4. a.div(b).mul(b) == a
5. Строковое представление: "n" или "n/d"
"""

import math
import random

import pytest

from src.core.errors import DivisionByZero, SecretRecoveryError
from src.core.math.rational import Rational, to_rational


def _assert_normalized(r: Rational) -> None:
    assert r.denominator > 0
    assert math.gcd(abs(r.numerator), r.denominator) == 1
    if r.numerator == 0:
        assert r.denominator == 1


# =============================================================================
# ТЕСТЫ: Конструирование и нормализация
# =============================================================================


class TestConstruction:
    """Тесты конструктора и нормализации."""

    def test_reduces_by_gcd(self):
        """6/8 → 3/4."""
        r = Rational(6, 8)
        assert (r.numerator, r.denominator) == (3, 4)

    def test_negative_denominator_moves_sign(self):
        """3/-4 → -3/4."""
        r = Rational(3, -4)
        assert (r.numerator, r.denominator) == (-3, 4)

    def test_double_negative_is_positive(self):
        """-3/-6 → 1/2."""
        r = Rational(-3, -6)
        assert (r.numerator, r.denominator) == (1, 2)

    def test_zero_is_canonical(self):
        """0/-5 и 0/7 → (0, 1)."""
        for d in (-5, 7, 10**30):
            r = Rational(0, d)
            assert (r.numerator, r.denominator) == (0, 1)

    def test_default_denominator(self):
        """Rational(5) == 5/1."""
        r = Rational(5)
        assert (r.numerator, r.denominator) == (5, 1)
        assert r.is_integer()

    def test_zero_denominator_raises(self):
        """Нулевой знаменатель → DivisionByZero."""
        with pytest.raises(DivisionByZero):
            Rational(1, 0)

    def test_division_by_zero_is_catchable_as_base_errors(self):
        """DivisionByZero — и SecretRecoveryError, и ZeroDivisionError."""
        with pytest.raises(SecretRecoveryError):
            Rational(1, 0)
        with pytest.raises(ZeroDivisionError):
            Rational(1, 0)

    def test_big_integers_are_not_truncated(self):
        """Разрядность > 64 бит сохраняется."""
        big = 2**200 + 1
        r = Rational(big * 3, 3)
        assert r.numerator == big
        assert r.denominator == 1

    def test_immutable(self):
        """Атрибуты не изменяются после создания."""
        r = Rational(1, 2)
        with pytest.raises(AttributeError):
            r.numerator = 5
        with pytest.raises(AttributeError):
            r._denominator = 5

    def test_factories(self):
        assert Rational.zero() == 0
        assert Rational.one() == 1
        assert Rational.from_int(-7) == Rational(-7, 1)


# =============================================================================
# ТЕСТЫ: Арифметика
# =============================================================================


class TestArithmetic:
    """Тесты операций + - * / и отрицания."""

    def test_add(self):
        assert Rational(1, 3) + Rational(1, 6) == Rational(1, 2)
        assert Rational(1, 3).add(Rational(2, 3)) == 1

    def test_sub(self):
        assert Rational(1, 2) - Rational(3, 4) == Rational(-1, 4)
        assert Rational(1, 2).sub(Rational(1, 2)) == Rational.zero()

    def test_mul(self):
        assert Rational(2, 3) * Rational(9, 4) == Rational(3, 2)
        assert Rational(-2, 3).mul(Rational(0, 5)) == 0

    def test_div(self):
        assert Rational(1, 2) / Rational(1, 4) == 2
        assert Rational(3, 5).div(Rational(-3, 10)) == -2

    def test_div_by_zero_raises(self):
        with pytest.raises(DivisionByZero):
            Rational(1, 2) / Rational.zero()
        with pytest.raises(DivisionByZero):
            Rational(1, 2).div(0)

    def test_negate(self):
        assert -Rational(3, 4) == Rational(-3, 4)
        assert Rational(-3, 4).negate() == Rational(3, 4)
        assert -Rational.zero() == Rational.zero()

    def test_int_operands(self):
        """Смешанная арифметика с int в обе стороны."""
        assert Rational(1, 2) + 1 == Rational(3, 2)
        assert 1 + Rational(1, 2) == Rational(3, 2)
        assert 1 - Rational(1, 2) == Rational(1, 2)
        assert 3 * Rational(1, 3) == 1
        assert 1 / Rational(1, 4) == 4

    def test_float_operand_rejected(self):
        """float не участвует в точной арифметике."""
        with pytest.raises(TypeError):
            Rational(1, 2) + 0.5
        with pytest.raises(TypeError):
            to_rational(0.5)

    @pytest.mark.parametrize("flag", [True, False])
    def test_bool_operand_rejected_everywhere(self, flag):
        """bool не считается int ни в арифметике, ни в сравнении."""
        r = Rational(1)
        for op in (
            lambda: r + flag,
            lambda: flag + r,
            lambda: r - flag,
            lambda: flag - r,
            lambda: r * flag,
            lambda: flag * r,
            lambda: r / flag,
            lambda: flag / r,
            lambda: r < flag,
        ):
            with pytest.raises(TypeError):
                op()
        assert r != flag
        assert Rational.zero() != flag
        with pytest.raises(TypeError):
            to_rational(flag)

    def test_results_always_normalized(self):
        """Результат каждой операции нормализован."""
        rng = random.Random(7)
        for _ in range(200):
            a = Rational(rng.randint(-50, 50), rng.choice([-1, 1]) * rng.randint(1, 50))
            b = Rational(rng.randint(-50, 50), rng.choice([-1, 1]) * rng.randint(1, 50))
            for r in (a, b, a + b, a - b, a * b, -a):
                _assert_normalized(r)
            if not b.is_zero():
                _assert_normalized(a / b)

    def test_div_mul_roundtrip(self):
        """a.div(b).mul(b) == a для b != 0."""
        rng = random.Random(11)
        for _ in range(200):
            a = Rational(rng.randint(-10**12, 10**12), rng.randint(1, 10**6))
            b = Rational(rng.randint(1, 10**12) * rng.choice([-1, 1]), rng.randint(1, 10**6))
            assert a.div(b).mul(b) == a


# =============================================================================
# ТЕСТЫ: Сравнение и представление
# =============================================================================


class TestComparisonAndFormatting:
    """Тесты сравнения, hash и строкового вида."""

    def test_equality_with_int(self):
        assert Rational(4, 2) == 2
        assert Rational(1, 2) != 0

    def test_ordering(self):
        assert Rational(1, 3) < Rational(1, 2)
        assert Rational(-1, 2) < 0
        assert Rational(5, 2) >= 2
        assert sorted([Rational(1, 2), Rational(-3), Rational(1, 3)]) == [
            Rational(-3),
            Rational(1, 3),
            Rational(1, 2),
        ]

    def test_hash_consistent_with_eq(self):
        assert hash(Rational(4, 2)) == hash(2)
        assert len({Rational(1, 2), Rational(2, 4), Rational(3, 6)}) == 1

    def test_bool(self):
        assert not Rational.zero()
        assert Rational(1, 7)

    def test_str_integer(self):
        assert str(Rational(10, 5)) == "2"
        assert str(Rational(-6, 3)) == "-2"
        assert str(Rational(0, -3)) == "0"

    def test_str_fraction(self):
        assert str(Rational(6, -4)) == "-3/2"
        assert str(Rational(2, 6)) == "1/3"

    def test_repr(self):
        assert repr(Rational(6, -4)) == "Rational(-3, 2)"
