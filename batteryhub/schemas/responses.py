from typing import Any

from pydantic import BaseModel, Field


class Pagination(BaseModel):
    total: int
    page: int
    pages: int
    limit: int


class SeoMeta(BaseModel):
    title: str
    description: str
    canonical_url: str = Field(alias="canonicalUrl")
    structured_data: dict[str, Any] = Field(alias="structuredData")

    model_config = {"populate_by_name": True}


class CatalogPageResponse(BaseModel):
    success: bool = True
    data: list[dict[str, Any]]
    pagination: Pagination
    applied_filters: dict[str, Any] = Field(alias="appliedFilters")
    seo: SeoMeta

    model_config = {"populate_by_name": True}


class ProductDetailResponse(BaseModel):
    success: bool = True
    data: dict[str, Any]
    seo: SeoMeta


class FacetResponse(BaseModel):
    success: bool = True
    data: list[str]


class ErrorResponse(BaseModel):
    success: bool = False
    message: str
    error: str | None = None
