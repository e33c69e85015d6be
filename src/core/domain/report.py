"""
ReconstructionReport — Результат восстановления секрета

Immutable Pydantic модель для внешнего вывода (консоль, JSON).
Рациональные значения хранятся в строковом виде: целое — "n",
дробное — "numerator/denominator".
"""

from typing import List, Optional, Sequence

from pydantic import BaseModel, Field

from src.core.domain.shares import SharePoint
from src.core.math.rational import Rational


class ReconstructionReport(BaseModel):
    """
    Отчёт о восстановлении.

    Содержит:
    - Порог k и степень многочлена k - 1
    - Выбранные точки (в порядке использования)
    - Секрет f(0)
    - Опционально: коэффициенты стандартной формы a0..a(k-1)
    """

    k: int = Field(..., ge=1, description="Порог восстановления")
    degree: int = Field(..., ge=0, description="Степень многочлена (k - 1)")
    points: List[SharePoint] = Field(..., description="Использованные точки")
    secret: str = Field(..., min_length=1, description="f(0) в каноническом виде")
    coefficients: Optional[List[str]] = Field(
        None, description="a0..a(k-1) по возрастанию степени"
    )

    model_config = {"frozen": True}

    @classmethod
    def build(
        cls,
        points: Sequence[SharePoint],
        secret: Rational,
        coefficients: Optional[Sequence[Rational]] = None,
    ) -> "ReconstructionReport":
        return cls(
            k=len(points),
            degree=len(points) - 1,
            points=list(points),
            secret=str(secret),
            coefficients=None if coefficients is None else [str(c) for c in coefficients],
        )

    @property
    def secret_is_integer(self) -> bool:
        return "/" not in self.secret
