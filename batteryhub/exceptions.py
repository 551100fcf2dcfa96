class CatalogError(Exception):
    """Base class for catalog failures surfaced to the HTTP layer."""


class SourceUnavailable(CatalogError):
    """The catalog source could not produce a snapshot."""

    def __init__(self, source: str, reason: str):
        self.source = source
        self.reason = reason
        super().__init__(f"Catalog unavailable ({source}): {reason}")
