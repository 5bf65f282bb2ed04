"""ght exception classes."""


class GhtError(Exception):
    """Base exception for all ght errors."""

    def __init__(
        self, code: str, message: str, request_id: str | None = None
    ) -> None:
        self.code = code
        self.message = message
        self.request_id = request_id
        self.context: str | None = None
        super().__init__(code, message)

    def with_context(self, context: str) -> "GhtError":
        """
        Attach a description of the failing step and return the same error.

        Used as ``raise err.with_context("failed to ...")`` so the error kind
        and status survive while the message names the operation and target.
        """
        self.context = context
        return self

    def __str__(self) -> str:
        text = f"[{self.code}] {self.message}"
        if self.context:
            return f"{self.context} |→ {text}"
        return text


class ConfigurationError(GhtError):
    """Raised when local configuration is invalid or missing."""

    def __init__(self, message: str, code: str = "CONFIGURATION_ERROR") -> None:
        super().__init__(code, message)


class RepoConfigNotFoundError(ConfigurationError):
    """Raised when the repository must be created but the template has no way to do it."""

    def __init__(self) -> None:
        super().__init__(
            "no repository section in template file", code="REPO_CONFIG_NOT_FOUND"
        )


class TemplateReadError(ConfigurationError):
    """Raised when a template document cannot be read."""

    def __init__(self, reference: str, reason: str) -> None:
        super().__init__(
            f"failed to read template {reference}: {reason}",
            code="TEMPLATE_READ_ERROR",
        )
        self.reference = reference


class TemplateParseError(ConfigurationError):
    """Raised when a template document is not valid JSON of the expected shape."""

    def __init__(self, message: str) -> None:
        super().__init__(message, code="TEMPLATE_PARSE_ERROR")


class TransportError(GhtError):
    """Raised when a request never produced an HTTP response."""

    def __init__(self, message: str) -> None:
        super().__init__("CONNECTION_ERROR", message)


class RemoteError(GhtError):
    """Raised when the API answers with a non-success status."""

    def __init__(
        self,
        code: str,
        message: str,
        status_code: int,
        operation: str | None = None,
        request_id: str | None = None,
    ) -> None:
        super().__init__(code, message, request_id)
        self.status_code = status_code
        self.operation = operation

    def __str__(self) -> str:
        text = f"[{self.code}] {self.message}"
        if self.operation:
            text = f"{self.operation}: {self.status_code} {text}"
        if self.context:
            return f"{self.context} |→ {text}"
        return text


class AuthenticationError(RemoteError):
    """Raised when the token is missing, expired or invalid."""

    pass


class AuthorizationError(RemoteError):
    """Raised when access is denied."""

    pass


class NotFoundError(RemoteError):
    """Raised when a resource is not found."""

    pass


class ConflictError(RemoteError):
    """Raised on conflicts (stale file sha, existing resource, etc.)."""

    pass


class RateLimitedError(RemoteError):
    """Raised when rate limited."""

    def __init__(
        self,
        code: str,
        message: str,
        status_code: int,
        retry_after: int,
        operation: str | None = None,
        request_id: str | None = None,
    ) -> None:
        super().__init__(code, message, status_code, operation, request_id)
        self.retry_after = retry_after


class ValidationError(RemoteError):
    """Raised on validation errors."""

    pass


class ServerError(RemoteError):
    """Raised on server errors (5xx)."""

    pass
