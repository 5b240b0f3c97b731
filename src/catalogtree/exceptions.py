"""Custom exceptions for catalogtree."""


class CatalogError(Exception):
    """Base exception for catalogtree operations."""


class FetchError(CatalogError):
    """Error while obtaining catalog source text."""


class CatalogNotFoundError(FetchError):
    """Catalog source does not exist at the requested location."""


class RenderError(CatalogError):
    """Error while rendering a parsed catalog."""
