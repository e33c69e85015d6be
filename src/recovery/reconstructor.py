"""Secret Reconstructor — восстановление f(0) по k точкам.

Граница ядра:
- reconstruct(points, k) -> Rational: секрет f(0)
- to_standard(points, k) -> list[Rational]: коэффициенты a0..a(k-1)
- SecretReconstructor: конфигурируемый прогон с отчётом ReconstructionReport

Точки принимаются как SharePoint или как пары (x, y) целых чисел.
Все ошибки ядра пробрасываются вызывающему коду без частичных результатов.
"""

import logging
from dataclasses import dataclass
from typing import Iterable, List, Optional, Tuple, Union

from src.core.domain.report import ReconstructionReport
from src.core.domain.shares import SharePoint
from src.core.math.divided_differences import newton_coefficients
from src.core.math.newton_form import evaluate_at_zero, to_standard_coefficients
from src.core.math.rational import Rational
from src.recovery.selection import SelectionPolicy, select_points, validate_threshold

logger = logging.getLogger(__name__)

PointLike = Union[SharePoint, Tuple[int, int]]


@dataclass(frozen=True)
class ReconstructionConfig:
    """Конфигурация восстановления.

    - selection_policy: как выбрать k точек из n
    - include_coefficients: считать ли стандартную форму
    - max_threshold: верхняя граница k (None — без ограничения)
    """
    selection_policy: SelectionPolicy = SelectionPolicy.ASCENDING_X
    include_coefficients: bool = False
    max_threshold: Optional[int] = None


def as_share_points(points: Iterable[PointLike]) -> List[SharePoint]:
    """Приведение пар (x, y) к SharePoint."""
    result = []
    for p in points:
        if isinstance(p, SharePoint):
            result.append(p)
        else:
            x, y = p
            result.append(SharePoint(x=x, y=y))
    return result


def _newton_form(chosen: List[SharePoint]) -> Tuple[List[Rational], List[Rational]]:
    xs = [Rational.from_int(p.x) for p in chosen]
    ys = [Rational.from_int(p.y) for p in chosen]
    return xs, newton_coefficients(xs, ys)


def reconstruct(
    points: Iterable[PointLike],
    k: int,
    policy: SelectionPolicy = SelectionPolicy.ASCENDING_X,
) -> Rational:
    """Секрет f(0) по k выбранным точкам.

    Raises:
        ValueError: k < 1
        InsufficientPoints: точек меньше k
        DivisionByZero: совпадающие x среди выбранных точек
    """
    chosen = select_points(as_share_points(points), k, policy)
    xs, coeffs = _newton_form(chosen)
    return evaluate_at_zero(xs, coeffs)


def to_standard(
    points: Iterable[PointLike],
    k: int,
    policy: SelectionPolicy = SelectionPolicy.ASCENDING_X,
) -> List[Rational]:
    """Коэффициенты a0..a(k-1) интерполяционного многочлена.

    Ошибки те же, что у reconstruct.
    """
    chosen = select_points(as_share_points(points), k, policy)
    xs, coeffs = _newton_form(chosen)
    return to_standard_coefficients(xs, coeffs)


class SecretReconstructor:
    """Восстановление секрета с отчётом.

    Порядок:
    1. Проверка порога (k >= 1, k <= max_threshold)
    2. Выбор k точек согласно политике
    3. Коэффициенты Ньютона по выбранным точкам
    4. f(0) без раскрытия в стандартную форму
    5. Опционально: стандартная форма
    """

    def __init__(self, config: Optional[ReconstructionConfig] = None):
        self.config = config or ReconstructionConfig()

    def _check_threshold(self, k: int) -> None:
        validate_threshold(k)
        cap = self.config.max_threshold
        if cap is not None and k > cap:
            raise ValueError(f"Threshold k={k} exceeds configured maximum {cap}")

    def run(self, points: Iterable[PointLike], k: int) -> ReconstructionReport:
        """Полный прогон восстановления.

        Returns:
            ReconstructionReport с секретом и (опционально) коэффициентами
        """
        self._check_threshold(k)

        chosen = select_points(as_share_points(points), k, self.config.selection_policy)
        logger.debug(
            "Using %d points (policy=%s): %s",
            k,
            self.config.selection_policy.value,
            ", ".join(f"{p.x}:{p.y}" for p in chosen),
        )

        xs, coeffs = _newton_form(chosen)
        secret = evaluate_at_zero(xs, coeffs)
        logger.info("Recovered secret f(0) = %s (k=%d, degree=%d)", secret, k, k - 1)

        standard = None
        if self.config.include_coefficients:
            standard = to_standard_coefficients(xs, coeffs)
            logger.debug("Standard coefficients: %s", ", ".join(str(a) for a in standard))

        return ReconstructionReport.build(chosen, secret, standard)
