from __future__ import annotations

from dataclasses import asdict, is_dataclass
from datetime import date, datetime
from enum import Enum
from typing import Any, cast

from pydantic import BaseModel

JsonLike = dict[str, Any] | list[Any] | str | int | float | bool | None


def to_plain_data(value: Any) -> JsonLike:
    """Convert pydantic/dataclass/native objects into plain JSON-serializable structures."""

    if isinstance(value, BaseModel):
        return value.model_dump(mode="json", by_alias=True, exclude_none=True)
    if is_dataclass(value) and not isinstance(value, type):
        return asdict(value)
    if isinstance(value, dict):
        return {str(key): to_plain_data(item) for key, item in value.items()}
    if isinstance(value, (list, tuple)):
        return [to_plain_data(item) for item in value]
    if isinstance(value, (datetime, date)):
        return value.isoformat()
    if isinstance(value, Enum):
        return cast(JsonLike, value.value)
    return cast(JsonLike, value)
