"""
Divided Differences — Таблица разделённых разностей Ньютона

Построение коэффициентов интерполяционного многочлена в форме Ньютона:
    P(x) = c0 + c1(x - x0) + c2(x - x0)(x - x1) + ...

Рекуррентность (столбец j — порядок разности):
    dd[i][0] = y_i
    dd[i][j] = (dd[i+1][j-1] - dd[i][j-1]) / (x_{i+j} - x_i)

Коэффициенты Ньютона — верхняя строка таблицы dd[0][0..k-1].

КРИТИЧЕСКИЕ ИНВАРИАНТЫ:
1. Вся арифметика точная (Rational), разрядность не усекается
2. c0 == y0 точно
3. Совпадающие x → DivisionByZero с указанием координаты
4. Порядок xs фиксирует x_i, используемые при вычислении многочлена

Сложность: O(k^2) рациональных операций.
"""

from typing import List, Sequence

from src.core.errors import DivisionByZero
from src.core.math.rational import Rational


def _validate_samples(xs: Sequence[Rational], ys: Sequence[Rational]) -> None:
    if len(xs) != len(ys):
        raise ValueError(f"xs and ys length mismatch: {len(xs)} != {len(ys)}")
    if len(xs) == 0:
        raise ValueError("At least one sample point is required")


def _difference_quotient(
    upper: Rational, lower: Rational, x_far: Rational, x_near: Rational
) -> Rational:
    """(upper - lower) / (x_far - x_near) с явной проверкой совпадения x."""
    span = x_far - x_near
    if span.is_zero():
        raise DivisionByZero(f"Duplicate x-coordinate {x_near} in divided differences")
    return (upper - lower) / span


def divided_difference_table(
    xs: Sequence[Rational], ys: Sequence[Rational]
) -> List[List[Rational]]:
    """
    Полная треугольная таблица разделённых разностей.

    Строка i содержит k - i элементов: dd[i][0..k-1-i].

    Args:
        xs: Попарно различные x-координаты (Rational)
        ys: Значения в этих точках (Rational), той же длины

    Returns:
        Треугольная таблица; dd[0] — коэффициенты Ньютона

    Raises:
        ValueError: пустой вход или разные длины
        DivisionByZero: совпадающие x-координаты
    """
    _validate_samples(xs, ys)

    k = len(xs)
    dd: List[List[Rational]] = [[y] for y in ys]
    for j in range(1, k):
        for i in range(k - j):
            dd[i].append(
                _difference_quotient(dd[i + 1][j - 1], dd[i][j - 1], xs[i + j], xs[i])
            )
    return dd


def newton_coefficients(
    xs: Sequence[Rational], ys: Sequence[Rational]
) -> List[Rational]:
    """
    Коэффициенты Ньютона c0..c(k-1).

    Та же рекуррентность, что и в divided_difference_table, но хранится
    только предыдущий столбец: память O(k).

    Args:
        xs: Попарно различные x-координаты (Rational)
        ys: Значения в этих точках (Rational), той же длины

    Returns:
        Список из k коэффициентов, coeffs[0] == ys[0]

    Raises:
        ValueError: пустой вход или разные длины
        DivisionByZero: совпадающие x-координаты

    Examples:
        >>> xs = [Rational(1), Rational(2), Rational(3)]
        >>> ys = [Rational(4), Rational(7), Rational(12)]
        >>> [str(c) for c in newton_coefficients(xs, ys)]
        ['4', '3', '1']
    """
    _validate_samples(xs, ys)

    k = len(xs)
    column = list(ys)
    coeffs = [column[0]]
    for j in range(1, k):
        column = [
            _difference_quotient(column[i + 1], column[i], xs[i + j], xs[i])
            for i in range(k - j)
        ]
        coeffs.append(column[0])
    return coeffs
