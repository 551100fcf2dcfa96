import json
import logging
from collections import Counter
from pathlib import Path

from pydantic import TypeAdapter, ValidationError

from batteryhub.config import settings
from batteryhub.exceptions import SourceUnavailable
from batteryhub.schemas.product import Product

logger = logging.getLogger(__name__)

_PRODUCTS = TypeAdapter(list[Product])


class CatalogRepository:
    """Read-only product catalog backed by a JSON file.

    The file is re-read on every call; nothing is cached between requests.
    """

    def __init__(self, path: Path | str):
        self.path = Path(path)

    def load_all(self) -> list[Product]:
        source = str(self.path)
        try:
            raw = self.path.read_text(encoding="utf-8")
        except OSError as exc:
            logger.error("Failed to read catalog %s: %s", source, exc)
            raise SourceUnavailable(source, str(exc)) from exc

        try:
            data = json.loads(raw)
        except json.JSONDecodeError as exc:
            logger.error("Catalog %s is not valid JSON: %s", source, exc)
            raise SourceUnavailable(source, f"invalid JSON: {exc}") from exc

        if not isinstance(data, list):
            raise SourceUnavailable(source, "expected a JSON array of products")

        try:
            products = _PRODUCTS.validate_python(data)
        except ValidationError as exc:
            logger.error("Catalog %s has invalid products: %s", source, exc)
            raise SourceUnavailable(source, f"invalid product data ({exc.error_count()} errors)") from exc

        duplicates = sorted(slug for slug, n in Counter(p.slug for p in products).items() if n > 1)
        if duplicates:
            raise SourceUnavailable(source, f"duplicate slugs: {', '.join(duplicates)}")

        logger.debug("Loaded %d products from %s", len(products), source)
        return products

    def count(self) -> int:
        return len(self.load_all())


def get_catalog_repository() -> CatalogRepository:
    return CatalogRepository(settings.catalog_path)
