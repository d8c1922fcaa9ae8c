"""
Application-specific exception classes.

Every failure the generation layer can produce is one of these; the HTTP
boundary turns them into the structured error body.
"""

import logging
from typing import List, Optional


class GameManualError(Exception):
    """Base exception class for game manual errors."""

    status_code: int = 500

    def __init__(
        self,
        message: str,
        error_code: Optional[str] = None,
        details: Optional[dict] = None,
        status_code: Optional[int] = None,
    ):
        super().__init__(message)
        self.message = message
        self.error_code = error_code or self.__class__.__name__
        self.details = details or {}
        if status_code is not None:
            self.status_code = status_code


class InvalidInputError(GameManualError):
    """Raised when the request is rejected before any provider is called."""

    status_code = 400

    def __init__(self, message: str, field: Optional[str] = None, **kwargs):
        super().__init__(message, error_code="INVALID_INPUT", **kwargs)
        self.field = field


class ProviderUnavailableError(GameManualError):
    """Raised when an explicitly requested provider has no credentials configured."""

    status_code = 400

    def __init__(
        self,
        provider_id: str,
        provider_name: str,
        available: Optional[List[str]] = None,
        **kwargs,
    ):
        message = f"Requested provider {provider_name} is not available on server."
        super().__init__(message, error_code="PROVIDER_UNAVAILABLE", **kwargs)
        self.provider_id = provider_id
        self.provider_name = provider_name
        self.available = list(available or [])


class NoProviderConfiguredError(GameManualError):
    """Raised when no provider credentials are configured at all."""

    status_code = 500

    def __init__(self, message: str, config_keys: Optional[List[str]] = None, **kwargs):
        super().__init__(message, error_code="NO_PROVIDER_CONFIGURED", **kwargs)
        self.config_keys = list(config_keys or [])


class ProviderError(GameManualError):
    """Base for failures raised by a provider adapter."""

    status_code = 500

    def __init__(
        self,
        message: str,
        provider_id: Optional[str] = None,
        provider_name: Optional[str] = None,
        **kwargs,
    ):
        kwargs.setdefault("error_code", "PROVIDER_ERROR")
        super().__init__(message, **kwargs)
        self.provider_id = provider_id
        self.provider_name = provider_name


class UpstreamError(ProviderError):
    """Raised on a non-2xx reply or a transport failure talking to a backend."""

    def __init__(self, message: str, upstream_status: Optional[int] = None, **kwargs):
        super().__init__(message, error_code="UPSTREAM_ERROR", **kwargs)
        self.upstream_status = upstream_status
        if upstream_status is not None:
            self.details.setdefault("upstream_status", upstream_status)


class MalformedResponseError(ProviderError):
    """Raised when a backend reply cannot be turned into a game manual."""

    def __init__(self, message: str, **kwargs):
        super().__init__(message, error_code="MALFORMED_RESPONSE", **kwargs)


def log_error(error: GameManualError, logger=None, level: str = "error"):
    """
    Log a GameManualError with structured information.

    Args:
        error: The error to log
        logger: Logger instance (uses default logger if None)
        level: Log level ("error", "warning", "info", "debug")
    """
    if logger is None:
        logger = logging.getLogger(__name__)

    log_func = getattr(logger, level)
    log_func(
        f"{error.error_code}: {error.message}",
        extra={
            "error_code": error.error_code,
            "details": error.details,
            "context": {
                attr: getattr(error, attr, None)
                for attr in ["provider_id", "provider_name", "field", "upstream_status"]
                if hasattr(error, attr)
            },
        },
    )
