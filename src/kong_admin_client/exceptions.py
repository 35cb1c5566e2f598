"""Kong Admin API client exceptions.

Errors fall into four kinds so callers can tell them apart:

- KongRequestError: the request could not be built; nothing was sent.
- KongConnectionError: the transport failed (DNS, refused, timeout).
- KongStatusError: Kong answered with a non-success status code.
- KongDecodeError: Kong answered successfully but the body was unusable.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

if TYPE_CHECKING:
    import httpx


class KongAPIError(Exception):
    """Base exception for Kong Admin API errors.

    Attributes:
        message: Human-readable error message.
        status_code: HTTP status code from Kong API (if applicable).
        response_body: Parsed response body from Kong API (if available).
        endpoint: The API endpoint that was called.
    """

    def __init__(
        self,
        message: str,
        status_code: int | None = None,
        response_body: dict[str, Any] | None = None,
        endpoint: str | None = None,
    ) -> None:
        """Initialize KongAPIError.

        Args:
            message: Human-readable error message.
            status_code: HTTP status code from Kong API.
            response_body: Parsed response body from Kong API.
            endpoint: The API endpoint that was called.
        """
        super().__init__(message)
        self.message = message
        self.status_code = status_code
        self.response_body = response_body
        self.endpoint = endpoint

    def __str__(self) -> str:
        """Return string representation of the error."""
        parts = [self.message]
        if self.status_code:
            parts.append(f"(status: {self.status_code})")
        if self.endpoint:
            parts.append(f"[endpoint: {self.endpoint}]")
        return " ".join(parts)


class KongConfigError(KongAPIError):
    """Exception raised when client configuration cannot be loaded."""

    def __init__(self, message: str, details: str | None = None) -> None:
        super().__init__(message=message)
        self.details = details

    def __str__(self) -> str:
        if self.details:
            return f"{self.message}: {self.details}"
        return self.message


class KongRequestError(KongAPIError):
    """Exception raised when a request cannot be constructed.

    Raised before any network activity, e.g. for an unsupported HTTP
    method, a body that cannot be encoded as JSON, or option values that
    cannot be expressed as query parameters.
    """

    def __init__(self, message: str, endpoint: str | None = None) -> None:
        super().__init__(message=message, endpoint=endpoint)


class KongConnectionError(KongAPIError):
    """Exception raised when connection to Kong Admin API fails.

    This includes network errors, timeouts, and DNS resolution failures.
    """

    def __init__(
        self,
        message: str = "Failed to connect to Kong Admin API",
        endpoint: str | None = None,
        original_error: Exception | None = None,
    ) -> None:
        """Initialize KongConnectionError.

        Args:
            message: Human-readable error message.
            endpoint: The API endpoint that was attempted.
            original_error: The original exception that caused this error.
        """
        super().__init__(message=message, endpoint=endpoint)
        self.original_error = original_error


class KongStatusError(KongAPIError):
    """Exception raised when Kong returns a non-success status code.

    The raw ``httpx.Response`` is kept on ``response`` so callers can
    still inspect headers or the undecoded body.
    """

    def __init__(
        self,
        message: str,
        status_code: int,
        response_body: dict[str, Any] | None = None,
        endpoint: str | None = None,
        response: httpx.Response | None = None,
    ) -> None:
        super().__init__(
            message=message,
            status_code=status_code,
            response_body=response_body,
            endpoint=endpoint,
        )
        self.response = response


class KongValidationError(KongStatusError):
    """Exception raised when Kong API rejects invalid request data.

    This is typically a 400 response indicating schema validation failure.
    """

    def __init__(
        self,
        message: str = "Invalid request data",
        validation_errors: dict[str, Any] | None = None,
        response_body: dict[str, Any] | None = None,
        endpoint: str | None = None,
        response: httpx.Response | None = None,
    ) -> None:
        """Initialize KongValidationError.

        Args:
            message: Human-readable error message.
            validation_errors: Specific field validation errors from Kong.
            response_body: Parsed response body from Kong API.
            endpoint: The API endpoint that was called.
            response: The raw HTTP response.
        """
        super().__init__(
            message=message,
            status_code=400,
            response_body=response_body,
            endpoint=endpoint,
            response=response,
        )
        self.validation_errors = validation_errors or {}


class KongAuthError(KongStatusError):
    """Exception raised when Kong refuses the request (401/403)."""

    def __init__(
        self,
        message: str = "Authentication to Kong Admin API failed",
        status_code: int = 401,
        response_body: dict[str, Any] | None = None,
        endpoint: str | None = None,
        response: httpx.Response | None = None,
    ) -> None:
        super().__init__(
            message=message,
            status_code=status_code,
            response_body=response_body,
            endpoint=endpoint,
            response=response,
        )


class KongNotFoundError(KongStatusError):
    """Exception raised when a requested Kong resource is not found.

    This is a 404 response from the Kong Admin API.
    """

    def __init__(
        self,
        message: str = "Kong resource not found",
        resource_type: str | None = None,
        resource_id: str | None = None,
        response_body: dict[str, Any] | None = None,
        endpoint: str | None = None,
        response: httpx.Response | None = None,
    ) -> None:
        """Initialize KongNotFoundError.

        Args:
            message: Human-readable error message.
            resource_type: Type of resource (e.g., "certificate", "plugin").
            resource_id: ID or name of the resource.
            response_body: Parsed response body from Kong API.
            endpoint: The API endpoint that was called.
            response: The raw HTTP response.
        """
        if resource_type and resource_id:
            message = f"{resource_type} '{resource_id}' not found"
        super().__init__(
            message=message,
            status_code=404,
            response_body=response_body,
            endpoint=endpoint,
            response=response,
        )
        self.resource_type = resource_type
        self.resource_id = resource_id


class KongConflictError(KongStatusError):
    """Exception raised when a unique constraint is violated (409)."""

    def __init__(
        self,
        message: str = "Kong resource already exists",
        response_body: dict[str, Any] | None = None,
        endpoint: str | None = None,
        response: httpx.Response | None = None,
    ) -> None:
        super().__init__(
            message=message,
            status_code=409,
            response_body=response_body,
            endpoint=endpoint,
            response=response,
        )


class KongDecodeError(KongAPIError):
    """Exception raised when a successful response cannot be decoded.

    Distinct from KongStatusError: Kong accepted the request, but the body
    was not valid JSON or did not match the expected shape.
    """

    def __init__(
        self,
        message: str,
        status_code: int | None = None,
        endpoint: str | None = None,
        response: httpx.Response | None = None,
        original_error: Exception | None = None,
    ) -> None:
        super().__init__(message=message, status_code=status_code, endpoint=endpoint)
        self.response = response
        self.original_error = original_error
