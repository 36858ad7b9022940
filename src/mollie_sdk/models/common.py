from __future__ import annotations

from typing import Any

from pydantic import BaseModel, ConfigDict


class MollieModel(BaseModel):
    """Base model with permissive extra handling for upstream compatibility."""

    model_config = ConfigDict(extra="allow", populate_by_name=True)

    def to_api(self) -> dict[str, Any]:
        """Encode using wire names, omitting fields the server did not send."""

        return self.model_dump(mode="json", by_alias=True, exclude_none=True)


class Link(MollieModel):
    href: str
    type: str | None = None


class Address(MollieModel):
    streetAndNumber: str | None = None
    streetAdditional: str | None = None
    postalCode: str | None = None
    city: str | None = None
    region: str | None = None
    country: str | None = None
