"""Tests for domain error classes."""

from storefront_catalog.domain.errors import (
    CatalogNotLoadedError,
    CatalogUnavailableError,
    DomainError,
    NotFoundError,
    ValidationError,
)
from storefront_catalog.domain.item import PagingValidationError
from storefront_catalog.domain.pagination import WindowValidationError


class TestDomainError:
    """Tests for base DomainError class."""

    def test_creates_error_with_message(self) -> None:
        error = DomainError("Something went wrong")

        assert error.message == "Something went wrong"
        assert error.error_code == "DOMAIN_ERROR"
        assert error.context == {}
        assert str(error) == "Something went wrong"

    def test_to_dict_includes_context(self) -> None:
        error = DomainError("Test error", field="page", value=3)

        assert error.to_dict() == {
            "message": "Test error",
            "code": "DOMAIN_ERROR",
            "field": "page",
            "value": 3,
        }


class TestValidationError:
    """Tests for ValidationError class."""

    def test_simple_validation_error(self) -> None:
        error = ValidationError("Invalid input")

        assert error.message == "Invalid input"
        assert error.error_code == "VALIDATION_ERROR"
        assert error.errors is None
        assert error.to_dict() == {"message": "Invalid input", "code": "VALIDATION_ERROR"}

    def test_default_message(self) -> None:
        assert ValidationError().message == "Validation error"

    def test_field_errors(self) -> None:
        errors = [{"field": "item_id", "message": "Item is out of stock", "code": "OUT_OF_STOCK"}]

        error = ValidationError(errors=errors)

        assert error.message == "Validation failed"
        assert error.to_dict() == {
            "message": "Validation failed",
            "code": "VALIDATION_ERROR",
            "errors": errors,
        }

    def test_paging_and_window_errors_are_validation_errors(self) -> None:
        assert isinstance(PagingValidationError("bad"), ValidationError)
        assert isinstance(WindowValidationError("bad"), ValidationError)
        assert PagingValidationError("bad").error_code == "VALIDATION_ERROR"


class TestNotFoundError:
    def test_message_with_identifier(self) -> None:
        error = NotFoundError("Item", "abc")

        assert error.message == "Item with identifier 'abc' not found"
        assert error.error_code == "NOT_FOUND"
        assert error.context == {"resource": "Item", "identifier": "abc"}

    def test_message_without_identifier(self) -> None:
        assert NotFoundError("Catalog").message == "Catalog not found"


class TestCatalogErrors:
    def test_catalog_unavailable(self) -> None:
        error = CatalogUnavailableError("physical")

        assert error.error_code == "CATALOG_UNAVAILABLE"
        assert error.message == "Could not load products for catalog 'physical'"
        assert error.context == {"catalog": "physical"}

    def test_catalog_not_loaded(self) -> None:
        error = CatalogNotLoadedError(catalog="digital")

        assert error.error_code == "CATALOG_NOT_LOADED"
        assert error.to_dict()["catalog"] == "digital"

    def test_only_source_failures_are_retryable(self) -> None:
        assert CatalogUnavailableError("physical").retryable
        assert CatalogNotLoadedError().retryable
        assert not NotFoundError("Item", "x").retryable
        assert not ValidationError("bad").retryable
