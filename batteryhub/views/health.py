from fastapi import APIRouter, Depends
from fastapi.responses import JSONResponse

from batteryhub.exceptions import SourceUnavailable
from batteryhub.repositories.catalog_repo import CatalogRepository, get_catalog_repository

router = APIRouter()


@router.get("/health")
def health(repo: CatalogRepository = Depends(get_catalog_repository)):
    try:
        count = repo.count()
    except SourceUnavailable as exc:
        return JSONResponse({"status": "unavailable", "error": exc.reason}, status_code=503)
    return {"status": "ok", "products": count}
