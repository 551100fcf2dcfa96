import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse, PlainTextResponse
from fastapi.staticfiles import StaticFiles

from batteryhub.config import settings
from batteryhub.exceptions import SourceUnavailable
from batteryhub.logging_config import setup_logging
from batteryhub.schemas.responses import ErrorResponse
from batteryhub.views import catalog, health

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    setup_logging()

    # ensure the uploads directory exists for the static mount
    settings.uploads_dir.mkdir(parents=True, exist_ok=True)

    if not settings.catalog_path.exists():
        logger.warning("Catalog file %s does not exist; catalog requests will fail", settings.catalog_path)
    logger.info("Serving catalog from %s", settings.catalog_path)

    yield


app = FastAPI(title=settings.app_name, debug=settings.debug, lifespan=lifespan)

app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_origins,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

# product images referenced by the catalog
app.mount("/uploads", StaticFiles(directory=str(settings.uploads_dir), check_dir=False), name="uploads")


@app.exception_handler(SourceUnavailable)
async def source_unavailable_handler(request: Request, exc: SourceUnavailable):
    logger.error("Catalog unavailable while serving %s: %s", request.url.path, exc, exc_info=exc)
    body = ErrorResponse(message="Server error", error=str(exc))
    return JSONResponse(body.model_dump(), status_code=500)


@app.get("/")
async def index():
    return PlainTextResponse("Server is running!")


# routers
app.include_router(catalog.router)
app.include_router(health.router)
