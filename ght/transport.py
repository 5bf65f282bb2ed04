"""
HTTP Transport for ght.

Handles HTTP communication with the GitHub REST API and maps error responses
to typed exceptions. Requests are never retried; every failure surfaces to the
caller immediately.
"""

import time
from typing import Any

import httpx

from ght.exceptions import (
    AuthenticationError,
    AuthorizationError,
    ConflictError,
    NotFoundError,
    RateLimitedError,
    RemoteError,
    ServerError,
    TransportError,
    ValidationError,
)
from ght.logging import log_http_request, log_http_response

API_VERSION = "2022-11-28"


class HTTPTransport:
    """
    HTTP transport layer with token authentication.

    Handles:
    - Bearer token and GitHub REST media type headers
    - Debug logging of requests and responses with the token masked
    - Error response parsing into typed exceptions
    """

    def __init__(
        self,
        base_url: str,
        token: str,
        timeout: float = 30.0,
    ) -> None:
        """
        Initialize HTTP transport.

        Args:
            base_url: Base URL for API requests (e.g., "https://api.github.com")
            token: Personal access token or app installation token
            timeout: Request timeout in seconds
        """
        self.base_url = base_url.rstrip("/")
        self.timeout = timeout

        self._client = httpx.Client(
            base_url=self.base_url,
            timeout=timeout,
            headers={
                "Accept": "application/vnd.github+json",
                "Authorization": f"Bearer {token}",
                "X-GitHub-Api-Version": API_VERSION,
            },
        )

    def close(self) -> None:
        """Close the HTTP client."""
        self._client.close()

    def __enter__(self) -> "HTTPTransport":
        return self

    def __exit__(self, *args: Any) -> None:
        self.close()

    def request(
        self,
        method: str,
        path: str,
        params: dict[str, Any] | None = None,
        body: dict[str, Any] | None = None,
    ) -> Any:
        """
        Make a request and decode its JSON body.

        Args:
            method: HTTP method (GET, POST, PUT, etc.)
            path: API path (e.g., "/repos/octo/hello")
            params: Query parameters
            body: JSON request body

        Returns:
            Parsed JSON response, or an empty dict when the body is empty

        Raises:
            RemoteError: On non-success responses (subclass chosen by status) or an undecodable body
            TransportError: When no response was received
        """
        operation = f"{method} {path}"
        log_http_request(method, path, headers=dict(self._client.headers), body=body)

        started = time.monotonic()
        try:
            response = self._client.request(method, path, params=params, json=body)
        except httpx.RequestError as e:
            raise TransportError(f"{operation}: {e}") from e

        log_http_response(
            response.status_code, path, (time.monotonic() - started) * 1000
        )

        if response.status_code >= 400:
            raise self._parse_error_response(response, operation)

        if not response.content:
            return {}
        try:
            return response.json()
        except ValueError as e:
            raise RemoteError(
                "INVALID_RESPONSE",
                f"response body is not valid JSON: {e}",
                response.status_code,
                operation,
                response.headers.get("X-GitHub-Request-Id"),
            ) from e

    def _parse_error_response(
        self, response: httpx.Response, operation: str | None = None
    ) -> RemoteError:
        """
        Parse an error response into a typed exception.

        GitHub error bodies look like ``{"message": ..., "errors": [...]}``.

        Args:
            response: HTTP response with error status
            operation: Method and path of the failing request

        Returns:
            Appropriate RemoteError subclass
        """
        try:
            data = response.json()
        except Exception:
            data = {}
        if not isinstance(data, dict):
            data = {}

        status_code = response.status_code
        code = _status_code_name(status_code)
        message = data.get("message") or f"HTTP {status_code}"
        details = [
            err.get("message") or err.get("code")
            for err in data.get("errors") or []
            if isinstance(err, dict)
        ]
        if details:
            message = f"{message} ({'; '.join(d for d in details if d)})"
        request_id = response.headers.get("X-GitHub-Request-Id")

        if status_code == 401:
            return AuthenticationError(code, message, status_code, operation, request_id)
        elif status_code == 403:
            return AuthorizationError(code, message, status_code, operation, request_id)
        elif status_code == 404:
            return NotFoundError(code, message, status_code, operation, request_id)
        elif status_code == 409:
            return ConflictError(code, message, status_code, operation, request_id)
        elif status_code == 429:
            retry_after_str = response.headers.get("Retry-After", "60")
            try:
                retry_after = int(retry_after_str)
            except ValueError:
                retry_after = 60
            return RateLimitedError(
                code, message, status_code, retry_after, operation, request_id
            )
        elif status_code >= 500:
            return ServerError(code, message, status_code, operation, request_id)
        else:
            return ValidationError(code, message, status_code, operation, request_id)


def _status_code_name(status_code: int) -> str:
    """Symbolic name for a status code, e.g. 404 -> "NOT_FOUND"."""
    try:
        return httpx.codes(status_code).name
    except ValueError:
        return f"HTTP_{status_code}"
