from dataclasses import dataclass, field
from typing import Any

from batteryhub.repositories.catalog_repo import CatalogRepository
from batteryhub.schemas.product import Product
from batteryhub.schemas.query import QueryResult, QuerySpec
from batteryhub.schemas.responses import (
    CatalogPageResponse,
    FacetResponse,
    Pagination,
    ProductDetailResponse,
    SeoMeta,
)
from batteryhub.services.catalog_query import CatalogQueryEngine
from batteryhub.services.facets import Facet, FacetExtractor
from batteryhub.services.seo import SeoService


@dataclass
class CatalogPageViewModel:
    result: QueryResult
    seo: SeoMeta
    is_search: bool = False

    @classmethod
    def load(cls, repo: CatalogRepository, spec: QuerySpec, base_url: str) -> "CatalogPageViewModel":
        products = repo.load_all()
        result = CatalogQueryEngine().query(products, spec)
        return cls(result=result, seo=SeoService().listing(base_url))

    @classmethod
    def search(cls, repo: CatalogRepository, spec: QuerySpec, base_url: str) -> "CatalogPageViewModel":
        products = repo.load_all()
        result = CatalogQueryEngine().query(products, spec)
        return cls(result=result, seo=SeoService().search(base_url, spec.term), is_search=True)

    def to_response(self) -> dict[str, Any]:
        # the plain listing never echoes a search term
        exclude = None if self.is_search else {"search_query"}
        envelope = CatalogPageResponse(
            data=[p.to_wire() for p in self.result.items],
            pagination=Pagination(
                total=self.result.total,
                page=self.result.page,
                pages=self.result.page_count,
                limit=self.result.page_size,
            ),
            applied_filters=self.result.applied_filters.model_dump(
                mode="json", by_alias=True, exclude=exclude
            ),
            seo=self.seo,
        )
        return envelope.model_dump(mode="json", by_alias=True)


@dataclass
class ProductDetailViewModel:
    product: Product | None = None
    seo: SeoMeta | None = None

    @classmethod
    def load(cls, repo: CatalogRepository, slug: str, base_url: str) -> "ProductDetailViewModel":
        product = CatalogQueryEngine().find_by_slug(repo.load_all(), slug)
        if product is None:
            return cls()
        return cls(product=product, seo=SeoService().product(base_url, product))

    def to_response(self) -> dict[str, Any]:
        envelope = ProductDetailResponse(data=self.product.to_wire(), seo=self.seo)
        return envelope.model_dump(mode="json", by_alias=True)


@dataclass
class FacetViewModel:
    facet: Facet
    values: list[str] = field(default_factory=list)

    @classmethod
    def load(cls, repo: CatalogRepository, facet: Facet) -> "FacetViewModel":
        values = FacetExtractor().distinct_values(repo.load_all(), facet)
        return cls(facet=facet, values=values)

    def to_response(self) -> dict[str, Any]:
        return FacetResponse(data=self.values).model_dump(mode="json")
