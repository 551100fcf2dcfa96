from urllib.parse import quote

from batteryhub.config import settings
from batteryhub.schemas.product import Product
from batteryhub.schemas.responses import SeoMeta

SCHEMA_CONTEXT = "https://schema.org"


class SeoService:
    """Page titles, canonical URLs and schema.org data for catalog responses."""

    def __init__(self, site_name: str | None = None, currency: str | None = None):
        self.site_name = site_name or settings.site_name
        self.currency = currency or settings.currency

    def listing(self, base_url: str) -> SeoMeta:
        return SeoMeta(
            title=f"{self.site_name} - Shop High-Quality Batteries",
            description=(
                "Explore our wide range of batteries for cars, bikes, inverters, and home UPS "
                "systems. Find top brands like Amaron, Exide, and Livguard."
            ),
            canonical_url=f"{base_url}/batteries",
            structured_data={
                "@context": SCHEMA_CONTEXT,
                "@type": "CollectionPage",
                "name": f"{self.site_name} Batteries",
                "description": "Browse our collection of high-quality batteries for various applications.",
            },
        )

    def search(self, base_url: str, term: str | None) -> SeoMeta:
        if term:
            title = f'Search Results for "{term}" - {self.site_name}'
            description = (
                f'Find the best batteries matching your search for "{term}". '
                "Filter by category, brand, and price to get the perfect battery."
            )
            canonical_url = f"{base_url}/search?q={quote(term, safe='')}"
            name = f"Battery Search for {term}"
            summary = f'Search results for batteries matching "{term}" on {self.site_name}.'
        else:
            title = f"Search Batteries - {self.site_name}"
            description = (
                "Find the best batteries matching your search. "
                "Filter by category, brand, and price to get the perfect battery."
            )
            canonical_url = f"{base_url}/search"
            name = "Battery Search"
            summary = f"Search results for batteries on {self.site_name}."

        return SeoMeta(
            title=title,
            description=description,
            canonical_url=canonical_url,
            structured_data={
                "@context": SCHEMA_CONTEXT,
                "@type": "SearchResultsPage",
                "name": name,
                "description": summary,
            },
        )

    def product(self, base_url: str, product: Product) -> SeoMeta:
        return SeoMeta(
            title=product.meta_title or f"{product.name} - {self.site_name}",
            description=product.meta_description or (
                f"Buy {product.name} from {self.site_name}. "
                f"High-quality {product.category} battery from {product.brand}."
            ),
            canonical_url=f"{base_url}/product/{product.slug}",
            structured_data=product.structured_data or self._product_structured_data(product),
        )

    def _product_structured_data(self, product: Product) -> dict:
        availability = "InStock" if product.stock > 0 else "OutOfStock"
        data = {
            "@context": SCHEMA_CONTEXT,
            "@type": "Product",
            "name": product.name,
            "image": product.image,
            "brand": {"@type": "Brand", "name": product.brand},
            "offers": {
                "@type": "Offer",
                "price": product.price,
                "priceCurrency": self.currency,
                "availability": f"{SCHEMA_CONTEXT}/{availability}",
            },
        }
        if product.description:
            data["description"] = product.description
        if product.rating > 0:
            data["aggregateRating"] = {
                "@type": "AggregateRating",
                "ratingValue": product.rating,
                "reviewCount": 1,
            }
        return data
