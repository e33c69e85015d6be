"""
Contract Validation Module

Модуль для валидации JSON контрактов (файлы с долями секрета).
"""

from .validators import (
    ContractValidator,
    SchemaLoader,
    ShareSetValidator,
    validate_share_set,
)

__all__ = [
    # Classes
    "SchemaLoader",
    "ContractValidator",
    "ShareSetValidator",
    # Functions
    "validate_share_set",
]
