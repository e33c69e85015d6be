"""
Rational — Точная рациональная арифметика

Модуль предоставляет неизменяемый тип дроби поверх int (произвольная точность):
- Нормализация знака (знаменатель всегда > 0)
- Полное сокращение по НОД после каждой операции
- Каноничный ноль (0, 1)
- Операторы + - * / и унарный минус, совместимость с int

КРИТИЧЕСКИЕ ИНВАРИАНТЫ:
1. denominator > 0
2. gcd(|numerator|, denominator) == 1, в том числе для нуля
3. Экземпляр никогда не мутирует после создания
4. Никакого float: разрядность числителя/знаменателя не усекается
"""

import math
from functools import total_ordering
from typing import Union

from src.core.errors import DivisionByZero

RationalLike = Union["Rational", int]


def _is_plain_int(value) -> bool:
    # bool является подклассом int, но как операнд дроби бессмыслен
    return isinstance(value, int) and not isinstance(value, bool)


def _is_operand(value) -> bool:
    return isinstance(value, Rational) or _is_plain_int(value)


@total_ordering
class Rational:
    """
    Нормализованная дробь numerator/denominator.

    Examples:
        >>> Rational(6, -4)
        Rational(-3, 2)
        >>> str(Rational(10, 5))
        '2'
        >>> str(Rational(1, 3) + Rational(1, 6))
        '1/2'
    """

    __slots__ = ("_numerator", "_denominator")

    def __init__(self, numerator: int, denominator: int = 1):
        """
        Args:
            numerator: Числитель (любой знак)
            denominator: Знаменатель (не ноль, любой знак)

        Raises:
            DivisionByZero: если denominator == 0
        """
        if denominator == 0:
            raise DivisionByZero(f"Rational denominator cannot be zero (numerator={numerator})")

        if denominator < 0:
            numerator = -numerator
            denominator = -denominator

        if numerator == 0:
            denominator = 1
        else:
            g = math.gcd(numerator, denominator)
            numerator //= g
            denominator //= g

        object.__setattr__(self, "_numerator", numerator)
        object.__setattr__(self, "_denominator", denominator)

    def __setattr__(self, name, value):
        raise AttributeError("Rational is immutable")

    # -------------------------------------------------------------------------
    # Конструкторы
    # -------------------------------------------------------------------------

    @classmethod
    def from_int(cls, value: int) -> "Rational":
        return cls(value, 1)

    @classmethod
    def zero(cls) -> "Rational":
        return cls(0, 1)

    @classmethod
    def one(cls) -> "Rational":
        return cls(1, 1)

    @staticmethod
    def _coerce(value: RationalLike) -> "Rational":
        if isinstance(value, Rational):
            return value
        if _is_plain_int(value):
            return Rational(value, 1)
        raise TypeError(f"Cannot convert {type(value).__name__} to Rational")

    # -------------------------------------------------------------------------
    # Доступ к компонентам
    # -------------------------------------------------------------------------

    @property
    def numerator(self) -> int:
        return self._numerator

    @property
    def denominator(self) -> int:
        return self._denominator

    def is_integer(self) -> bool:
        """True если сокращённый знаменатель равен 1."""
        return self._denominator == 1

    def is_zero(self) -> bool:
        return self._numerator == 0

    # -------------------------------------------------------------------------
    # Арифметика
    # -------------------------------------------------------------------------

    def add(self, other: RationalLike) -> "Rational":
        other = self._coerce(other)
        return Rational(
            self._numerator * other._denominator + other._numerator * self._denominator,
            self._denominator * other._denominator,
        )

    def sub(self, other: RationalLike) -> "Rational":
        other = self._coerce(other)
        return Rational(
            self._numerator * other._denominator - other._numerator * self._denominator,
            self._denominator * other._denominator,
        )

    def mul(self, other: RationalLike) -> "Rational":
        other = self._coerce(other)
        return Rational(
            self._numerator * other._numerator,
            self._denominator * other._denominator,
        )

    def div(self, other: RationalLike) -> "Rational":
        """
        Деление дробей.

        Raises:
            DivisionByZero: если делитель равен нулю
        """
        other = self._coerce(other)
        if other._numerator == 0:
            raise DivisionByZero(f"Division of {self} by zero")
        return Rational(
            self._numerator * other._denominator,
            self._denominator * other._numerator,
        )

    def negate(self) -> "Rational":
        return Rational(-self._numerator, self._denominator)

    def __add__(self, other):
        if not _is_operand(other):
            return NotImplemented
        return self.add(other)

    def __radd__(self, other):
        if not _is_plain_int(other):
            return NotImplemented
        return self._coerce(other).add(self)

    def __sub__(self, other):
        if not _is_operand(other):
            return NotImplemented
        return self.sub(other)

    def __rsub__(self, other):
        if not _is_plain_int(other):
            return NotImplemented
        return self._coerce(other).sub(self)

    def __mul__(self, other):
        if not _is_operand(other):
            return NotImplemented
        return self.mul(other)

    def __rmul__(self, other):
        if not _is_plain_int(other):
            return NotImplemented
        return self._coerce(other).mul(self)

    def __truediv__(self, other):
        if not _is_operand(other):
            return NotImplemented
        return self.div(other)

    def __rtruediv__(self, other):
        if not _is_plain_int(other):
            return NotImplemented
        return self._coerce(other).div(self)

    def __neg__(self) -> "Rational":
        return self.negate()

    def __pos__(self) -> "Rational":
        return self

    def __abs__(self) -> "Rational":
        return Rational(abs(self._numerator), self._denominator)

    # -------------------------------------------------------------------------
    # Сравнение
    # -------------------------------------------------------------------------

    def __eq__(self, other):
        if isinstance(other, Rational):
            return (
                self._numerator == other._numerator
                and self._denominator == other._denominator
            )
        if _is_plain_int(other):
            return self._denominator == 1 and self._numerator == other
        return NotImplemented

    def __lt__(self, other):
        if not _is_operand(other):
            return NotImplemented
        other = self._coerce(other)
        return self._numerator * other._denominator < other._numerator * self._denominator

    def __hash__(self):
        if self._denominator == 1:
            return hash(self._numerator)
        return hash((self._numerator, self._denominator))

    def __bool__(self):
        return self._numerator != 0

    # -------------------------------------------------------------------------
    # Представление
    # -------------------------------------------------------------------------

    def __str__(self) -> str:
        if self.is_integer():
            return str(self._numerator)
        return f"{self._numerator}/{self._denominator}"

    def __repr__(self) -> str:
        return f"Rational({self._numerator}, {self._denominator})"


def to_rational(value: RationalLike) -> Rational:
    """Приведение int/Rational к Rational; прочие типы → TypeError."""
    return Rational._coerce(value)
