"""HTTP clients and error taxonomy shared by the CLI and dispatcher."""

from .catalog import DEFAULT_CATALOG_URL, CatalogClient, fetch_models, parse_library_page
from .exceptions import (
    DecodeFailure,
    IOFailure,
    NonZeroExit,
    OperationError,
    TransportFailure,
)
from .http import (
    DEFAULT_BASE_URL,
    DEFAULT_DAEMON_PORT,
    DEFAULT_TIMEOUT_SECONDS,
    GENERATE_PATH,
    GenerationClient,
    generate_response,
)

__all__ = [
    "DEFAULT_BASE_URL",
    "DEFAULT_CATALOG_URL",
    "DEFAULT_DAEMON_PORT",
    "DEFAULT_TIMEOUT_SECONDS",
    "GENERATE_PATH",
    "CatalogClient",
    "DecodeFailure",
    "GenerationClient",
    "IOFailure",
    "NonZeroExit",
    "OperationError",
    "TransportFailure",
    "fetch_models",
    "generate_response",
    "parse_library_page",
]
