import math
from collections.abc import Mapping
from enum import StrEnum
from typing import Any

from pydantic import BaseModel, Field

from batteryhub.schemas.product import Product

DEFAULT_PAGE = 1
DEFAULT_PAGE_SIZE = 10


class SortKey(StrEnum):
    PRICE_ASC = "priceAsc"
    PRICE_DESC = "priceDesc"
    RATING_DESC = "ratingDesc"
    NEWEST = "newest"


def _text(value: Any) -> str | None:
    if value is None:
        return None
    value = str(value).strip()
    return value or None


def _number(value: Any) -> float | None:
    """Parse a price bound; anything unusable means "unbounded"."""
    text = _text(value)
    if text is None:
        return None
    try:
        number = float(text)
    except ValueError:
        return None
    if not math.isfinite(number):
        return None
    return number


def _exact(value: Any) -> str | None:
    """Facet values are matched verbatim; blank only counts as absent."""
    if value is None or not str(value).strip():
        return None
    return str(value)


def _positive_int(value: Any, default: int) -> int:
    text = _text(value)
    if text is None:
        return default
    try:
        number = int(text)
    except ValueError:
        return default
    return number if number >= 1 else default


def _sort_key(value: Any) -> SortKey:
    try:
        return SortKey(_text(value))
    except ValueError:
        return SortKey.NEWEST


class AppliedFilters(BaseModel):
    search_query: str | None = Field(default=None, alias="searchQuery")
    category: str | None = None
    brand: str | None = None
    capacity: str | None = None
    price_range: tuple[float | None, float | None] | None = Field(default=None, alias="priceRange")
    sort_by: SortKey = Field(default=SortKey.NEWEST, alias="sortBy")

    model_config = {"populate_by_name": True}


class QuerySpec(BaseModel):
    """Normalized filter, sort and pagination parameters for one catalog query."""

    term: str | None = None
    category: str | None = None
    brand: str | None = None
    capacity: str | None = None
    min_price: float | None = None
    max_price: float | None = None
    sort_by: SortKey = SortKey.NEWEST
    page: int = Field(default=DEFAULT_PAGE, ge=1)
    page_size: int = Field(default=DEFAULT_PAGE_SIZE, ge=1)

    model_config = {"frozen": True}

    @classmethod
    def from_params(
        cls,
        params: Mapping[str, Any],
        default_page_size: int = DEFAULT_PAGE_SIZE,
        include_term: bool = True,
    ) -> "QuerySpec":
        """Build a spec from raw request parameters.

        Never rejects input. Empty values count as absent, unparseable price
        bounds become unbounded, an unknown ``sortBy`` falls back to newest and
        a non-positive or non-numeric ``page``/``pageSize`` takes its default.
        ``q`` and ``limit`` are accepted as aliases of ``term`` and ``pageSize``.
        """
        term = None
        if include_term:
            term = _text(params.get("term")) or _text(params.get("q"))

        page_size = params.get("pageSize")
        if _text(page_size) is None:
            page_size = params.get("limit")

        return cls(
            term=term,
            category=_exact(params.get("category")),
            brand=_exact(params.get("brand")),
            capacity=_exact(params.get("capacity")),
            min_price=_number(params.get("minPrice")),
            max_price=_number(params.get("maxPrice")),
            sort_by=_sort_key(params.get("sortBy")),
            page=_positive_int(params.get("page"), DEFAULT_PAGE),
            page_size=_positive_int(page_size, max(default_page_size, 1)),
        )

    @property
    def has_price_range(self) -> bool:
        return self.min_price is not None or self.max_price is not None

    def applied_filters(self) -> AppliedFilters:
        return AppliedFilters(
            search_query=self.term,
            category=self.category,
            brand=self.brand,
            capacity=self.capacity,
            price_range=(self.min_price, self.max_price) if self.has_price_range else None,
            sort_by=self.sort_by,
        )


class QueryResult(BaseModel):
    items: list[Product]
    total: int
    page: int
    page_size: int
    page_count: int
    applied_filters: AppliedFilters
