"""Catalog service errors.

The engine (facets, query, pagination) never raises on bad data. What can
fail is a request (bad paging, unknown catalog or item, out-of-stock cart
add) or the item source behind the engine. Each failure carries a stable
``error_code`` that transports map to their own status codes.
"""

from typing import Any, TypedDict


class FieldError(TypedDict, total=False):
    field: str
    message: str
    code: str


class DomainError(Exception):
    """Base class for catalog service errors.

    ``retryable`` marks failures of the item source that may succeed on a
    later attempt; the request itself was fine.
    """

    error_code: str = "DOMAIN_ERROR"
    retryable: bool = False

    def __init__(self, message: str, **context: Any) -> None:
        super().__init__(message)
        self.message = message
        self.context = context

    def to_dict(self) -> dict[str, Any]:
        payload: dict[str, Any] = {"message": self.message, "code": self.error_code}
        payload.update(self.context)
        return payload


class ValidationError(DomainError):
    """A request parameter or cart operation broke a rule (HTTP 422).

    ``errors`` lists per-field problems, e.g.
    ``[{"field": "item_id", "message": "Item is out of stock", "code": "OUT_OF_STOCK"}]``.
    """

    error_code: str = "VALIDATION_ERROR"

    def __init__(
        self,
        message: str | None = None,
        errors: list[FieldError] | list[dict[str, str]] | None = None,
        **context: Any,
    ) -> None:
        self.errors = list(errors) if errors else None
        if message is None:
            message = "Validation failed" if self.errors else "Validation error"
        super().__init__(message, **context)

    def to_dict(self) -> dict[str, Any]:
        payload = super().to_dict()
        if self.errors:
            payload["errors"] = self.errors
        return payload


class NotFoundError(DomainError):
    """Unknown catalog name, or no item with that id in the catalog (HTTP 404)."""

    error_code: str = "NOT_FOUND"

    def __init__(self, resource: str, identifier: str | None = None, **context: Any) -> None:
        what = f"{resource} with identifier '{identifier}'" if identifier else resource
        super().__init__(f"{what} not found", resource=resource, identifier=identifier, **context)


class CatalogUnavailableError(DomainError):
    """The item source failed to deliver a catalog (HTTP 503).

    The browse request fails as a whole; results are never computed over a
    partial collection.
    """

    error_code: str = "CATALOG_UNAVAILABLE"
    retryable: bool = True

    def __init__(self, catalog: str, **context: Any) -> None:
        super().__init__(
            f"Could not load products for catalog '{catalog}'", catalog=catalog, **context
        )


class CatalogNotLoadedError(DomainError):
    """A catalog view was queried before its collection was loaded (HTTP 503)."""

    error_code: str = "CATALOG_NOT_LOADED"
    retryable: bool = True

    def __init__(self, message: str = "Catalog collection is not loaded", **context: Any) -> None:
        super().__init__(message, **context)
