"""ght - create and configure GitHub repositories from a JSON template."""

__version__ = "0.1.0"

from ght.client import GitHubClient  # noqa: E402
from ght.exceptions import (  # noqa: E402
    AuthenticationError,
    AuthorizationError,
    ConfigurationError,
    ConflictError,
    GhtError,
    NotFoundError,
    RateLimitedError,
    RemoteError,
    RepoConfigNotFoundError,
    ServerError,
    TemplateParseError,
    TemplateReadError,
    TransportError,
    ValidationError,
)
from ght.logging import configure_logging, get_logger  # noqa: E402
from ght.runner import run  # noqa: E402
from ght.template import load_config  # noqa: E402
from ght.transport import HTTPTransport  # noqa: E402
from ght.types import DesiredConfig, RepoOptions, RunResult  # noqa: E402

__all__ = [
    "__version__",
    # Main entry points
    "run",
    "load_config",
    # Client
    "GitHubClient",
    "HTTPTransport",
    # Models
    "DesiredConfig",
    "RepoOptions",
    "RunResult",
    # Exceptions
    "GhtError",
    "ConfigurationError",
    "RepoConfigNotFoundError",
    "TemplateReadError",
    "TemplateParseError",
    "TransportError",
    "RemoteError",
    "AuthenticationError",
    "AuthorizationError",
    "NotFoundError",
    "ConflictError",
    "RateLimitedError",
    "ValidationError",
    "ServerError",
    # Logging
    "configure_logging",
    "get_logger",
]
