from fastapi import APIRouter, Depends, Request
from fastapi.responses import JSONResponse

from batteryhub.config import settings
from batteryhub.repositories.catalog_repo import CatalogRepository, get_catalog_repository
from batteryhub.schemas.query import QuerySpec
from batteryhub.schemas.responses import ErrorResponse
from batteryhub.services.facets import Facet
from batteryhub.viewmodels.catalog_vm import (
    CatalogPageViewModel,
    FacetViewModel,
    ProductDetailViewModel,
)

router = APIRouter(prefix="/api")


def _base_url(request: Request) -> str:
    return str(request.base_url).rstrip("/")


@router.get("/batteries")
def list_batteries(request: Request, repo: CatalogRepository = Depends(get_catalog_repository)):
    """Catalog listing. Recognises category, brand, capacity, minPrice, maxPrice, sortBy, page, pageSize/limit."""
    spec = QuerySpec.from_params(
        request.query_params,
        default_page_size=settings.default_page_size,
        include_term=False,
    )
    vm = CatalogPageViewModel.load(repo, spec, _base_url(request))
    return vm.to_response()


@router.get("/search")
def search_batteries(request: Request, repo: CatalogRepository = Depends(get_catalog_repository)):
    """Listing plus free-text ``q`` (or ``term``) over name, description and tags."""
    spec = QuerySpec.from_params(request.query_params, default_page_size=settings.default_page_size)
    vm = CatalogPageViewModel.search(repo, spec, _base_url(request))
    return vm.to_response()


@router.get("/product/{slug}")
def product_detail(slug: str, request: Request, repo: CatalogRepository = Depends(get_catalog_repository)):
    vm = ProductDetailViewModel.load(repo, slug, _base_url(request))
    if not vm.product:
        return JSONResponse(ErrorResponse(message="Battery not found").model_dump(exclude_none=True), status_code=404)
    return vm.to_response()


@router.get("/categories")
def list_categories(repo: CatalogRepository = Depends(get_catalog_repository)):
    return FacetViewModel.load(repo, Facet.CATEGORY).to_response()


@router.get("/brands")
def list_brands(repo: CatalogRepository = Depends(get_catalog_repository)):
    return FacetViewModel.load(repo, Facet.BRAND).to_response()


@router.get("/capacities")
def list_capacities(repo: CatalogRepository = Depends(get_catalog_repository)):
    return FacetViewModel.load(repo, Facet.CAPACITY).to_response()
