"""
Custom exception hierarchy for the school content search.

Provides specific exception types for the failure modes that exist around
the search core: configuration problems, unreadable catalogs, and invalid
query arguments. The search scan itself never raises for data problems.
"""


class SchoolSearchError(Exception):
    """Base exception for all school content search errors."""

    def __init__(self, message: str, details: dict = None):
        """
        Initialize the exception.

        Args:
            message: Human-readable error description.
            details: Optional dictionary with additional context.
        """
        super().__init__(message)
        self.message = message
        self.details = details or {}


class ConfigurationError(SchoolSearchError):
    """Raised when configuration is invalid or missing."""
    pass


class CatalogError(SchoolSearchError):
    """Raised when a source catalog file cannot be read."""

    def __init__(self, message: str, path: str = None, details: dict = None):
        """
        Initialize catalog error.

        Args:
            message: Error description.
            path: Path to the problematic catalog file.
            details: Additional context.
        """
        super().__init__(message, details)
        self.path = path


class SearchError(SchoolSearchError):
    """Raised when a search query is built from invalid arguments."""

    def __init__(self, message: str, query: str = None, details: dict = None):
        """
        Initialize search error.

        Args:
            message: Error description.
            query: The problematic search query text.
            details: Additional context.
        """
        super().__init__(message, details)
        self.query = query


if __name__ == "__main__":
    try:
        raise ConfigurationError("Config file not found", {"path": "/config/config.json"})
    except SchoolSearchError as e:
        print(f"Caught: {e.__class__.__name__}: {e.message}")
        print(f"Details: {e.details}")

    try:
        raise CatalogError("Catalog is not valid JSON", path="/data/catalog.json")
    except CatalogError as e:
        print(f"Catalog failed: {e.path}")
