from collections.abc import Sequence
from enum import StrEnum

from batteryhub.schemas.product import Product


class Facet(StrEnum):
    CATEGORY = "category"
    BRAND = "brand"
    CAPACITY = "capacity"


SENTINELS = {
    Facet.CATEGORY: "All Types",
    Facet.BRAND: "All Brands",
    Facet.CAPACITY: "All Capacities",
}


class FacetExtractor:
    def distinct_values(self, collection: Sequence[Product], field: Facet | str) -> list[str]:
        """Distinct values of a facet in first-seen order, headed by its "All ..." sentinel.

        Products without a value for the facet are skipped. Raises
        ``ValueError`` for a field that is not a facet.
        """
        facet = Facet(field)
        seen = dict.fromkeys(
            value for p in collection if (value := getattr(p, facet.value)) is not None
        )
        return [SENTINELS[facet], *seen]
