from __future__ import annotations

from typing import Any, TypeVar

from pydantic import BaseModel, ValidationError

from mollie_sdk.errors import DecodeError

ModelT = TypeVar("ModelT", bound=BaseModel)


class ServiceBase:
    """Base type for service classes bound to a MollieClient instance."""

    def __init__(self, client: Any) -> None:
        self._client = client

    @staticmethod
    def _decode(model: type[ModelT], data: dict[str, Any]) -> ModelT:
        try:
            return model.model_validate(data)
        except ValidationError as exc:
            raise DecodeError(f"response did not match {model.__name__}: {exc}") from exc
