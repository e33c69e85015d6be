"""Point Selection — выбор ровно k точек для интерполяции.

Политики:
- ASCENDING_X: стабильная сортировка по возрастанию x, первые k точек
- AS_GIVEN: первые k точек в исходном порядке

Дубликаты x здесь не удаляются: если они попали в выборку, рекуррентность
разделённых разностей завершится DivisionByZero.
"""

from enum import Enum
from typing import List, Sequence

from src.core.domain.shares import SharePoint
from src.core.errors import InsufficientPoints


class SelectionPolicy(str, Enum):
    """Политика выбора k точек из n доступных."""

    ASCENDING_X = "ascending-x"
    AS_GIVEN = "as-given"


def validate_threshold(k: int) -> int:
    """
    Проверка порога k.

    Raises:
        ValueError: если k не int или k < 1
    """
    if isinstance(k, bool) or not isinstance(k, int):
        raise ValueError(f"Threshold k must be an integer, got {type(k).__name__}")
    if k < 1:
        raise ValueError(f"Threshold k must be >= 1, got {k}")
    return k


def select_points(
    points: Sequence[SharePoint],
    k: int,
    policy: SelectionPolicy = SelectionPolicy.ASCENDING_X,
) -> List[SharePoint]:
    """Выбор ровно k точек согласно политике.

    Args:
        points: Все доступные точки
        k: Порог восстановления
        policy: Политика выбора

    Returns:
        Список из k точек

    Raises:
        ValueError: некорректный k
        InsufficientPoints: len(points) < k
    """
    validate_threshold(k)
    if len(points) < k:
        raise InsufficientPoints(f"Need {k} points, only {len(points)} available")

    if policy == SelectionPolicy.ASCENDING_X:
        ordered = sorted(points, key=lambda p: p.x)
    else:
        ordered = list(points)
    return ordered[:k]
