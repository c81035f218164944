"""Custom HTTP exception hierarchy and standardized error responses.

Exception Hierarchy:
    AppError (HTTPException)
    ├── ClientError (4xx errors)
    │   ├── BadRequestError (400)
    │   │   └── InvalidReferenceError (400)
    │   ├── NotFoundError (404)
    │   │   └── ResourceNotFoundError (404)
    │   ├── ConflictError (409)
    │   └── UnprocessableEntityError (422)
    └── ServerError (5xx errors)
        └── InternalServerError (500)

Each class only declares its HTTP status and default message; ``error_code``
defaults to the class name.

Usage:
    # Option 1: Pass individual parameters
    raise NotFoundError(message="Product not found", detail={"product_id": 123})

    # Option 2: Pass ErrorResponse object directly
    error = ErrorResponse(
        error_code="PRODUCT_NOT_FOUND",
        message="Product not found",
        detail={"product_id": 123},
    )
    raise NotFoundError(error)

    # Domain errors raised by the catalog service
    raise ResourceNotFoundError("Seller", 42)
    raise InvalidReferenceError("Option", 7, product_id=3)
"""

from typing import Any, ClassVar

from fastapi import HTTPException, status
from pydantic import BaseModel, Field


class ErrorResponse(BaseModel):
    """Standardized error response model."""

    success: bool = Field(default=False, description="Always False for errors")
    error_code: str = Field(description="Error code identifier")
    message: str = Field(description="Human-readable error message")
    detail: dict[str, Any] | None = Field(default=None, description="Additional error details")
    path: str | None = Field(default=None, description="Request path where error occurred")


class AppError(HTTPException):
    """Base exception for all application HTTP errors."""

    http_status: ClassVar[int] = status.HTTP_500_INTERNAL_SERVER_ERROR
    default_message: ClassVar[str] = "An error occurred"

    def __init__(
        self,
        message: str | ErrorResponse | None = None,
        error_code: str | None = None,
        detail: dict[str, Any] | None = None,
    ) -> None:
        if isinstance(message, ErrorResponse):
            error_code = message.error_code
            detail = message.detail
            message = message.message
        message = message or self.default_message

        # HTTPException.__init__ assigns self.detail, so ours are set afterwards
        super().__init__(status_code=self.http_status, detail=message)
        self.message = message
        self.error_code = error_code or self.__class__.__name__
        self.detail = detail

    def to_error_response(self, path: str | None = None) -> ErrorResponse:
        """Convert exception to ErrorResponse object.

        Args:
            path: Request path where error occurred
        """
        return ErrorResponse(
            error_code=self.error_code,
            message=self.message,
            detail=self.detail,
            path=path,
        )


# ============================================================================
# Client Exceptions (4xx)
# ============================================================================


class ClientError(AppError):
    """Base exception for client errors (4xx)."""

    http_status = status.HTTP_400_BAD_REQUEST
    default_message = "Client error"


class BadRequestError(ClientError):
    """400 Bad Request - Invalid request parameters."""

    default_message = "Bad request"


class NotFoundError(ClientError):
    """404 Not Found - Resource does not exist."""

    http_status = status.HTTP_404_NOT_FOUND
    default_message = "Not found"


class ConflictError(ClientError):
    """409 Conflict - Unique constraint or state conflict."""

    http_status = status.HTTP_409_CONFLICT
    default_message = "Conflict"


class UnprocessableEntityError(ClientError):
    """422 Unprocessable Entity - Validation error."""

    http_status = status.HTTP_422_UNPROCESSABLE_ENTITY
    default_message = "Unprocessable entity"


class ResourceNotFoundError(NotFoundError):
    """404 - An identifier does not resolve to a row of the named resource."""

    def __init__(self, resource: str, resource_id: Any) -> None:
        self.resource = resource
        self.resource_id = resource_id
        super().__init__(
            message=f"{resource} not found with id: {resource_id}",
            error_code="RESOURCE_NOT_FOUND",
            detail={"resource": resource, "id": resource_id},
        )


class InvalidReferenceError(BadRequestError):
    """400 - The resource exists but belongs to a different product."""

    def __init__(self, resource: str, resource_id: Any, product_id: Any) -> None:
        self.resource = resource
        self.resource_id = resource_id
        self.product_id = product_id
        super().__init__(
            message=f"{resource} {resource_id} does not belong to product {product_id}",
            error_code="INVALID_REFERENCE",
            detail={"resource": resource, "id": resource_id, "product_id": product_id},
        )


# ============================================================================
# Server Exceptions (5xx)
# ============================================================================


class ServerError(AppError):
    """Base exception for server errors (5xx)."""

    default_message = "Server error"


class InternalServerError(ServerError):
    """500 Internal Server Error - Unexpected server error."""

    default_message = "Internal server error"
