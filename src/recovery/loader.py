"""Share File Loader — чтение JSON файла с долями.

Этапы:
1. Чтение и разбор JSON
2. Валидация против share_set.json (jsonschema)
3. Сборка ShareSet (pydantic)
4. Декодирование значений в точки (x, y)
"""

import json
import logging
from pathlib import Path
from typing import Any, Dict, List, Union

from jsonschema import ValidationError as SchemaValidationError
from pydantic import ValidationError as ModelValidationError

from src.core.contracts import validate_share_set
from src.core.domain.shares import SharePoint, ShareSet
from src.core.errors import ShareFileError

logger = logging.getLogger(__name__)


def parse_share_set(data: Dict[str, Any]) -> ShareSet:
    """
    Валидация и сборка ShareSet из содержимого файла.

    Raises:
        ShareFileError: данные не соответствуют схеме или модели
    """
    try:
        validate_share_set(data)
    except SchemaValidationError as e:
        location = "/".join(str(part) for part in e.absolute_path) or "<root>"
        raise ShareFileError(f"Share file violates schema at {location}: {e.message}") from e

    try:
        share_set = ShareSet.from_json_dict(data)
    except ModelValidationError as e:
        raise ShareFileError(f"Share file is not a valid share set: {e}") from e

    if share_set.keys.n != len(share_set.shares):
        logger.warning(
            "keys.n=%d does not match number of shares in file (%d)",
            share_set.keys.n,
            len(share_set.shares),
        )
    return share_set


def load_share_set(path: Union[str, Path]) -> ShareSet:
    """
    Загрузка ShareSet из JSON файла.

    Raises:
        ShareFileError: файл не читается, не JSON или не проходит валидацию
    """
    path = Path(path)
    try:
        with open(path, "r", encoding="utf-8") as f:
            data = json.load(f)
    except OSError as e:
        raise ShareFileError(f"Cannot read share file {path}: {e}") from e
    except json.JSONDecodeError as e:
        raise ShareFileError(f"Share file {path} is not valid JSON: {e}") from e

    if not isinstance(data, dict):
        raise ShareFileError(f"Share file {path} must contain a JSON object")

    logger.debug("Loaded share file %s", path)
    return parse_share_set(data)


def decode_points(share_set: ShareSet) -> List[SharePoint]:
    """
    Декодирование всех долей набора.

    Raises:
        InvalidDigit: символ значения не является цифрой/буквой
        DigitOutOfRange: цифра >= base
    """
    points = share_set.decode_points()
    for p in points:
        logger.debug("Decoded share x=%d -> y=%d", p.x, p.y)
    return points
