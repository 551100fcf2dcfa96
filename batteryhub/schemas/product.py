from datetime import UTC, datetime
from typing import Any

from pydantic import BaseModel, Field, field_validator


class Product(BaseModel):
    slug: str = Field(min_length=1)
    name: str
    description: str = ""
    short_description: str | None = Field(default=None, alias="shortDescription")
    category: str
    brand: str
    capacity: str | None = None  # e.g. "50Ah - 100Ah", absent for chargers
    price: float = Field(ge=0)
    rating: float = Field(default=0, ge=0, le=5)
    created_at: datetime | None = Field(default=None, alias="createdAt")
    tags: list[str] = []
    stock: int = Field(default=0, ge=0)
    image: str | None = None
    meta_title: str | None = Field(default=None, alias="metaTitle")
    meta_description: str | None = Field(default=None, alias="metaDescription")
    structured_data: dict[str, Any] | None = Field(default=None, alias="structuredData")

    # unknown catalog keys (images, specs, ...) ride along to the frontend
    model_config = {"populate_by_name": True, "extra": "allow", "frozen": True}

    @field_validator("description", mode="before")
    @classmethod
    def _null_description(cls, value: Any) -> Any:
        return "" if value is None else value

    @field_validator("created_at")
    @classmethod
    def _assume_utc(cls, value: datetime | None) -> datetime | None:
        if value is not None and value.tzinfo is None:
            return value.replace(tzinfo=UTC)
        return value

    def to_wire(self) -> dict[str, Any]:
        """Catalog record as the frontend expects it: camelCase, only keys the source had."""
        unset = set(type(self).model_fields) - self.model_fields_set
        return self.model_dump(mode="json", by_alias=True, exclude=unset)
