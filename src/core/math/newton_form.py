"""
Newton Form — Вычисление многочлена в форме Ньютона

Многочлен задан узлами xs и коэффициентами Ньютона coeffs:
    P(x) = c0 + c1(x - x0) + c2(x - x0)(x - x1) + ... + c(k-1)(x - x0)...(x - x(k-2))

Операции:
- evaluate_at_zero: P(0) без раскрытия в стандартную форму (секрет)
- evaluate_newton: P(x) для произвольного x (вложенная схема)
- to_standard_coefficients: перевод в a0 + a1 x + ... + a(k-1) x^(k-1)
- evaluate_standard: схема Горнера для стандартной формы

КРИТИЧЕСКИЕ ИНВАРИАНТЫ:
1. evaluate_at_zero(xs, c) == to_standard_coefficients(xs, c)[0]
2. evaluate_standard(to_standard_coefficients(xs, c), x_m) == y_m для каждого узла
3. Вся арифметика точная (Rational)
"""

from typing import List, Sequence

from src.core.math.rational import Rational, RationalLike, to_rational


def _validate_newton(xs: Sequence[Rational], coeffs: Sequence[Rational]) -> None:
    if len(coeffs) == 0:
        raise ValueError("Newton form requires at least one coefficient")
    # Последний узел в форме Ньютона не используется, поэтому допускается len(xs) >= k - 1
    if len(xs) < len(coeffs) - 1:
        raise ValueError(
            f"Newton form with {len(coeffs)} coefficients needs at least "
            f"{len(coeffs) - 1} nodes, got {len(xs)}"
        )


def evaluate_at_zero(xs: Sequence[Rational], coeffs: Sequence[Rational]) -> Rational:
    """
    Значение многочлена Ньютона в точке x = 0.

    f(0) = c0 + c1(0 - x0) + c2(0 - x0)(0 - x1) + ...

    Накопительное произведение prod начинается с Rational(1) и на шаге j
    домножается на (0 - x_{j-1}).

    Args:
        xs: Узлы интерполяции
        coeffs: Коэффициенты Ньютона c0..c(k-1)

    Returns:
        Точное значение f(0)
    """
    _validate_newton(xs, coeffs)

    result = coeffs[0]
    prod = Rational.one()
    for j in range(1, len(coeffs)):
        prod = prod * (Rational.zero() - xs[j - 1])
        result = result + coeffs[j] * prod
    return result


def evaluate_newton(
    xs: Sequence[Rational], coeffs: Sequence[Rational], x: RationalLike
) -> Rational:
    """
    Значение многочлена Ньютона в произвольной точке x.

    Вложенная схема: P = c(k-1); P = c_i + (x - x_i) * P для i = k-2..0.
    """
    _validate_newton(xs, coeffs)

    x = to_rational(x)
    result = coeffs[-1]
    for i in range(len(coeffs) - 2, -1, -1):
        result = coeffs[i] + (x - xs[i]) * result
    return result


def to_standard_coefficients(
    xs: Sequence[Rational], coeffs: Sequence[Rational]
) -> List[Rational]:
    """
    Перевод формы Ньютона в стандартную форму a0..a(k-1).

    Синтетическое раскрытие: начинаем с poly = [c(k-1)] (степень 0), затем
    для i = k-2..0:
        next[j+1] += poly[j]          (умножение на x, сдвиг степеней)
        next[j]   -= x_i * poly[j]    (вычитание x_i * poly до сдвига)
        next[0]   += c_i

    Args:
        xs: Узлы интерполяции
        coeffs: Коэффициенты Ньютона

    Returns:
        Коэффициенты по возрастанию степени, длина len(coeffs)

    Examples:
        >>> xs = [Rational(1), Rational(2), Rational(3)]
        >>> coeffs = [Rational(4), Rational(3), Rational(1)]
        >>> [str(a) for a in to_standard_coefficients(xs, coeffs)]
        ['3', '0', '1']
    """
    _validate_newton(xs, coeffs)

    poly = [coeffs[-1]]
    for i in range(len(coeffs) - 2, -1, -1):
        xi = xs[i]
        nxt = [Rational.zero() for _ in range(len(poly) + 1)]
        for j, a in enumerate(poly):
            nxt[j + 1] = nxt[j + 1] + a
        for j, a in enumerate(poly):
            nxt[j] = nxt[j] - xi * a
        nxt[0] = nxt[0] + coeffs[i]
        poly = nxt
    return poly


def evaluate_standard(coefficients: Sequence[Rational], x: RationalLike) -> Rational:
    """Схема Горнера для a0 + a1 x + ... ; пустой список даёт 0."""
    x = to_rational(x)
    result = Rational.zero()
    for a in reversed(coefficients):
        result = result * x + a
    return result
