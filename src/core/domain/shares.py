"""
Shares — Модели долей секрета

Immutable Pydantic модели входных данных восстановления:
- EncodedShare: доля в исходном виде (ключ x, основание, строка цифр)
- SharePoint: декодированная точка (x, y) с целыми координатами
- ShareKeys: параметры схемы (n долей, порог k)
- ShareSet: полный набор долей из JSON файла

Полная совместимость с JSON Schema (src/core/contracts/schema/share_set.json).
"""

from typing import Any, Dict, List

from pydantic import BaseModel, Field

from src.core.math.base_decoding import MAX_BASE, MIN_BASE, decode_in_base


# =============================================================================
# POINT MODEL
# =============================================================================


class SharePoint(BaseModel):
    """
    Точка (x, y) интерполяции до перевода в Rational.

    Координаты — int произвольной точности.
    """

    x: int = Field(..., description="x-координата (ключ доли)")
    y: int = Field(..., description="Декодированное значение доли")

    model_config = {"frozen": True}


# =============================================================================
# ENCODED SHARE MODEL
# =============================================================================


class EncodedShare(BaseModel):
    """
    Доля в том виде, в котором она хранится в файле.

    Ключ — десятичная запись x (допускается знак), value — цифры
    в системе счисления base.
    """

    key: str = Field(..., pattern=r"^-?[0-9]+$", description="x-координата в десятичной записи")
    base: int = Field(..., ge=MIN_BASE, le=MAX_BASE, description="Основание системы счисления")
    value: str = Field(..., min_length=1, description="Цифры значения в системе base")

    model_config = {"frozen": True}

    @property
    def x(self) -> int:
        return int(self.key)

    def decode(self) -> SharePoint:
        """
        Декодирование доли в точку.

        Raises:
            InvalidDigit: символ значения не является цифрой/буквой
            DigitOutOfRange: цифра >= base
        """
        return SharePoint(x=self.x, y=decode_in_base(self.value, self.base))


# =============================================================================
# SHARE SET MODEL
# =============================================================================


class ShareKeys(BaseModel):
    """Параметры схемы: n — число выданных долей, k — порог восстановления."""

    n: int = Field(..., ge=1, description="Количество долей")
    k: int = Field(..., ge=1, description="Порог восстановления (степень многочлена k - 1)")

    model_config = {"frozen": True}


class ShareSet(BaseModel):
    """
    Набор долей из одного JSON файла.

    Формат файла:
        {"keys": {"n": 4, "k": 3}, "1": {"base": "10", "value": "4"}, ...}
    """

    keys: ShareKeys = Field(..., description="Параметры схемы")
    shares: List[EncodedShare] = Field(default_factory=list, description="Доли в порядке файла")

    model_config = {"frozen": True}

    @classmethod
    def from_json_dict(cls, data: Dict[str, Any]) -> "ShareSet":
        """
        Сборка из словаря JSON файла.

        Все ключи верхнего уровня, кроме "keys", считаются долями.
        """
        shares = [
            EncodedShare(key=key, base=entry["base"], value=entry["value"])
            for key, entry in data.items()
            if key != "keys"
        ]
        return cls(keys=ShareKeys(**data["keys"]), shares=shares)

    def decode_points(self) -> List[SharePoint]:
        """Декодирование всех долей в порядке файла."""
        return [share.decode() for share in self.shares]
