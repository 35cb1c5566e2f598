"""Kong Admin API HTTP client."""

from __future__ import annotations

import json
from dataclasses import dataclass
from functools import lru_cache
from typing import TYPE_CHECKING, Any, Generic, TypeVar

import httpx
import structlog
from pydantic import BaseModel, TypeAdapter, ValidationError

from kong_admin_client.__version__ import __version__
from kong_admin_client.config import KongConnectionConfig
from kong_admin_client.exceptions import (
    KongAPIError,
    KongAuthError,
    KongConflictError,
    KongConnectionError,
    KongDecodeError,
    KongNotFoundError,
    KongRequestError,
    KongStatusError,
    KongValidationError,
)
from kong_admin_client.query import add_options

if TYPE_CHECKING:
    from kong_admin_client.models.base import ListOptions

logger = structlog.get_logger()

T = TypeVar("T")

SUPPORTED_METHODS = frozenset({"GET", "POST", "PATCH", "DELETE"})
BODYLESS_METHODS = frozenset({"GET", "DELETE"})
USER_AGENT = f"kong-admin-client/{__version__}"


@dataclass(frozen=True)
class KongResponse(Generic[T]):
    """Result of a single Admin API call.

    Attributes:
        data: Decoded body, or None when no result type was requested or
            the response had no content.
        status_code: HTTP status code.
        response: The raw httpx response.
    """

    data: T | None
    status_code: int
    response: httpx.Response


@lru_cache(maxsize=128)
def _type_adapter(result_type: Any) -> TypeAdapter[Any]:
    return TypeAdapter(result_type)


class KongAdminClient:
    """HTTP client for Kong Admin API.

    Every call issues exactly one request and blocks until the response is
    read. There are no retries; every failure is raised to the caller. The
    connection config is frozen, so one client can be shared by threads.

    Example:
        ```python
        from kong_admin_client import KongAdminClient, KongConnectionConfig
        from kong_admin_client.models import Certificate

        connection = KongConnectionConfig(base_url="http://localhost:8001")

        with KongAdminClient(connection) as client:
            cert = client.get("certificates/example.com", result_type=Certificate)
            print(cert.snis)
        ```
    """

    def __init__(self, connection_config: KongConnectionConfig | None = None) -> None:
        """Initialize Kong Admin API client.

        Args:
            connection_config: Connection settings (URL, timeout, SSL).
                Defaults to ``KongConnectionConfig.from_env()``.
        """
        if connection_config is None:
            connection_config = KongConnectionConfig.from_env()
        self.connection_config = connection_config

        self._client = httpx.Client(
            base_url=connection_config.base_url,
            timeout=httpx.Timeout(connection_config.timeout),
            verify=connection_config.verify_ssl,
            headers={
                "Accept": "application/json",
                "User-Agent": USER_AGENT,
            },
        )

        logger.info(
            "Kong Admin API client initialized",
            base_url=connection_config.base_url,
        )

    @staticmethod
    def _encode_body(body: Any, endpoint: str) -> bytes:
        """Serialize a request body to JSON bytes.

        Pydantic models are dumped in JSON mode with None fields excluded.

        Raises:
            KongRequestError: If the body cannot be encoded.
        """
        if isinstance(body, BaseModel):
            payload = body.model_dump(mode="json", by_alias=True, exclude_none=True)
        else:
            payload = body

        try:
            return json.dumps(payload).encode("utf-8")
        except (TypeError, ValueError) as e:
            raise KongRequestError(
                f"Request body cannot be encoded as JSON: {e}",
                endpoint=endpoint,
            ) from e

    @staticmethod
    def _parse_error_body(response: httpx.Response) -> dict[str, Any] | None:
        if not response.content:
            return None
        try:
            body = response.json()
        except ValueError:
            return {"raw": response.text}
        if isinstance(body, dict):
            return body
        return {"raw": response.text}

    def _raise_for_status(self, response: httpx.Response, endpoint: str) -> None:
        """Raise the status error matching a non-success response.

        Raises:
            KongValidationError: If request validation failed (400).
            KongAuthError: If the request was refused (401/403).
            KongNotFoundError: If resource not found (404).
            KongConflictError: If a unique constraint was violated (409).
            KongStatusError: For other non-success status codes.
        """
        status = response.status_code
        body = self._parse_error_body(response)
        server_message = body.get("message") if body else None

        if status == 400:
            raise KongValidationError(
                message=server_message or "Validation failed",
                validation_errors=body.get("fields") if body else None,
                response_body=body,
                endpoint=endpoint,
                response=response,
            )

        if status in (401, 403):
            raise KongAuthError(
                message=server_message or "Authentication failed",
                status_code=status,
                response_body=body,
                endpoint=endpoint,
                response=response,
            )

        if status == 404:
            raise KongNotFoundError(
                message=server_message or "Resource not found",
                response_body=body,
                endpoint=endpoint,
                response=response,
            )

        if status == 409:
            raise KongConflictError(
                message=server_message or "Resource already exists",
                response_body=body,
                endpoint=endpoint,
                response=response,
            )

        raise KongStatusError(
            message=server_message or f"Kong API error: {status}",
            status_code=status,
            response_body=body,
            endpoint=endpoint,
            response=response,
        )

    def _decode(self, response: httpx.Response, endpoint: str, result_type: Any) -> Any:
        """Decode a successful response body into ``result_type``.

        Raises:
            KongDecodeError: If the body is not JSON or does not validate.
        """
        try:
            body = response.json()
        except ValueError as e:
            raise KongDecodeError(
                message="Kong returned a malformed JSON body",
                status_code=response.status_code,
                endpoint=endpoint,
                response=response,
                original_error=e,
            ) from e

        try:
            return _type_adapter(result_type).validate_python(body)
        except ValidationError as e:
            raise KongDecodeError(
                message=f"Kong response does not match expected shape: {e}",
                status_code=response.status_code,
                endpoint=endpoint,
                response=response,
                original_error=e,
            ) from e

    def execute(
        self,
        method: str,
        endpoint: str,
        body: Any = None,
        *,
        params: ListOptions | None = None,
        result_type: Any = None,
    ) -> KongResponse[Any]:
        """Make a single HTTP request to Kong Admin API.

        Args:
            method: HTTP method (GET, POST, PATCH, DELETE).
            endpoint: API endpoint, relative to the configured base URL.
            body: Request body; a pydantic model or any JSON-serializable
                value. Not allowed for GET and DELETE.
            params: Filter options encoded into the query string.
            result_type: Type to decode a successful body into (a model
                class or any type pydantic can validate). When None, the
                status is checked but the body is not decoded.

        Returns:
            KongResponse with decoded data, status code and raw response.

        Raises:
            KongRequestError: If the request cannot be built (nothing sent).
            KongConnectionError: If connection to Kong fails.
            KongStatusError: If Kong returns a non-success status.
            KongDecodeError: If a successful body cannot be decoded.
        """
        verb = method.upper()
        if verb not in SUPPORTED_METHODS:
            raise KongRequestError(f"Unsupported HTTP method: {method}", endpoint=endpoint)

        url = f"/{add_options(endpoint, params).lstrip('/')}"
        log = logger.bind(method=verb, endpoint=url)

        headers: dict[str, str] = {}
        content: bytes | None = None
        if body is not None:
            if verb in BODYLESS_METHODS:
                raise KongRequestError(f"{verb} requests cannot carry a body", endpoint=url)
            content = self._encode_body(body, url)
            headers["Content-Type"] = "application/json"

        try:
            log.debug("Kong API request")
            response = self._client.request(verb, url, content=content, headers=headers)
            log.debug("Kong API response", status=response.status_code)
        except httpx.TimeoutException as e:
            log.error("Kong request timeout", error=str(e))
            raise KongConnectionError(
                message=f"Kong request timed out: {e}",
                endpoint=url,
                original_error=e,
            ) from e
        except httpx.TransportError as e:
            log.error("Kong connection error", error=str(e))
            raise KongConnectionError(
                message=f"Failed to connect to Kong: {e}",
                endpoint=url,
                original_error=e,
            ) from e

        if not response.is_success:
            log.debug("Kong API error response", status=response.status_code)
            self._raise_for_status(response, url)

        data = None
        if result_type is not None and response.content:
            data = self._decode(response, url, result_type)

        return KongResponse(data=data, status_code=response.status_code, response=response)

    def get(
        self,
        endpoint: str,
        *,
        params: ListOptions | None = None,
        result_type: Any = None,
    ) -> Any:
        """GET request to Kong Admin API.

        Args:
            endpoint: API endpoint (e.g., "certificates", "plugins/enabled").
            params: Filter options for the query string.
            result_type: Type to decode the body into.

        Returns:
            Decoded response body, or None.
        """
        return self.execute("GET", endpoint, params=params, result_type=result_type).data

    def post(self, endpoint: str, body: Any = None, *, result_type: Any = None) -> Any:
        """POST request to Kong Admin API.

        Returns:
            Decoded response body (created resource), or None.
        """
        return self.execute("POST", endpoint, body, result_type=result_type).data

    def patch(self, endpoint: str, body: Any = None, *, result_type: Any = None) -> Any:
        """PATCH request to Kong Admin API.

        Returns:
            Decoded response body (updated resource), or None.
        """
        return self.execute("PATCH", endpoint, body, result_type=result_type).data

    def delete(self, endpoint: str) -> None:
        """DELETE request to Kong Admin API."""
        self.execute("DELETE", endpoint)

    def close(self) -> None:
        """Close the HTTP client and release resources."""
        self._client.close()
        logger.debug("Kong client closed")

    def __enter__(self) -> KongAdminClient:
        """Context manager entry."""
        return self

    def __exit__(self, *args: Any) -> None:
        """Context manager exit."""
        self.close()

    def get_status(self) -> dict[str, Any]:
        """Get Kong node status.

        Returns:
            Kong status information including database connectivity.
        """
        status: dict[str, Any] = self.get("status", result_type=dict[str, Any])
        return status

    def check_connection(self) -> bool:
        """Check if connection to Kong Admin API is working.

        Returns:
            True if connection is successful, False otherwise.
        """
        try:
            self.get_status()
            return True
        except KongAPIError:
            return False
