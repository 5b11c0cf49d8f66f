"""
CardCatalog exception types
"""


class CardCatalogError(Exception):
    """Base class for failures that abort a catalog run."""


class SourceUnavailableError(CardCatalogError):
    """Raised when a feed or auxiliary list cannot be obtained or read."""

    def __init__(self, source: str, message: str):
        self.source = source
        super().__init__(f"[{source}] {message}")


class CatalogWriteError(CardCatalogError):
    """Raised when one or more catalog artifacts could not be persisted."""

    def __init__(self, failed_artifacts: list[str], message: str):
        self.failed_artifacts = failed_artifacts
        super().__init__(f"{message}: {', '.join(failed_artifacts)}")
