import logging
import math
from collections.abc import Callable, Sequence
from typing import Any

from batteryhub.schemas.product import Product
from batteryhub.schemas.query import QueryResult, QuerySpec, SortKey

logger = logging.getLogger(__name__)

_EXACT_FILTERS = ("category", "brand", "capacity")


def _created_timestamp(product: Product) -> float:
    # undated products go to the end of "newest"
    if product.created_at is None:
        return -math.inf
    return product.created_at.timestamp()


# (sort key, descending)
_SORTS: dict[SortKey, tuple[Callable[[Product], Any], bool]] = {
    SortKey.PRICE_ASC: (lambda p: p.price, False),
    SortKey.PRICE_DESC: (lambda p: p.price, True),
    SortKey.RATING_DESC: (lambda p: p.rating, True),
    SortKey.NEWEST: (_created_timestamp, True),
}


class CatalogQueryEngine:
    """Filter, sort and paginate an in-memory product snapshot."""

    def query(self, collection: Sequence[Product], spec: QuerySpec) -> QueryResult:
        """Run the fixed pipeline: text, exact facets, price, sort, page.

        Pure over ``collection``; never raises for any ``spec``.
        """
        products = list(collection)

        if spec.term:
            needle = spec.term.lower()
            products = [p for p in products if self.matches_term(p, needle)]

        for field in _EXACT_FILTERS:
            wanted = getattr(spec, field)
            if wanted:
                products = [p for p in products if getattr(p, field) == wanted]

        if spec.has_price_range:
            low = spec.min_price if spec.min_price is not None else -math.inf
            high = spec.max_price if spec.max_price is not None else math.inf
            products = [p for p in products if low <= p.price <= high]

        # sorted() is stable, including with reverse=True
        key, descending = _SORTS[spec.sort_by]
        products = sorted(products, key=key, reverse=descending)

        total = len(products)
        skip = (spec.page - 1) * spec.page_size
        page_items = products[skip:skip + spec.page_size]

        logger.debug(
            "Catalog query matched %d of %d products, page %d returned %d",
            total, len(collection), spec.page, len(page_items),
        )

        return QueryResult(
            items=page_items,
            total=total,
            page=spec.page,
            page_size=spec.page_size,
            page_count=math.ceil(total / spec.page_size),
            applied_filters=spec.applied_filters(),
        )

    @staticmethod
    def matches_term(product: Product, needle: str) -> bool:
        """Case-insensitive substring match on name, description and tags. ``needle`` must be lowercase."""
        if needle in product.name.lower():
            return True
        if needle in product.description.lower():
            return True
        return any(needle in tag.lower() for tag in product.tags)

    def find_by_slug(self, collection: Sequence[Product], slug: str) -> Product | None:
        return next((p for p in collection if p.slug == slug), None)
