"""Error body shared by every route.

The exception handlers build these models, so the OpenAPI schema and the
actual responses cannot drift apart.
"""

from pydantic import BaseModel, ConfigDict


class ErrorDetail(BaseModel):
    """One rejected field."""

    field: str
    message: str
    code: str | None = None


class ErrorResponse(BaseModel):
    """``detail`` is human readable; ``code`` is stable and safe to branch on."""

    detail: str
    code: str | None = None
    errors: list[ErrorDetail] | None = None

    model_config = ConfigDict(
        json_schema_extra={
            "examples": [
                {"detail": "Catalog with identifier 'toys' not found", "code": "NOT_FOUND"},
                {
                    "detail": "Could not load products for catalog 'physical'",
                    "code": "CATALOG_UNAVAILABLE",
                },
                {
                    "detail": "Invalid request parameters",
                    "code": "VALIDATION_ERROR",
                    "errors": [
                        {
                            "field": "page_size",
                            "message": "Input should be less than or equal to 200",
                            "code": "less_than_equal",
                        }
                    ],
                },
            ]
        }
    )
