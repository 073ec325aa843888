"""
Error types raised by the Intouch client.

Every failure surfaces to the caller as one of these; none are retried or
swallowed inside the client.
"""

from __future__ import annotations

from typing import Any, Dict, Optional


class IntouchError(Exception):
    """Base class for all Intouch client errors."""


class ConfigurationError(IntouchError):
    """A required credential resolved to an empty value."""

    def __init__(self, message: str, *, field: Optional[str] = None, env_var: Optional[str] = None) -> None:
        super().__init__(message)
        self.field = field
        self.env_var = env_var


class RequestValidationError(IntouchError, ValueError):
    """Caller payload failed schema checks. Raised before any network call."""

    def __init__(
        self,
        message: str,
        *,
        field_errors: Optional[Dict[str, str]] = None,
        operation: Optional[str] = None,
    ) -> None:
        super().__init__(message)
        self.field_errors = field_errors or {}
        self.operation = operation


class ResponseValidationError(IntouchError, ValueError):
    """The gateway answered with a body whose shape the client does not recognise."""

    def __init__(
        self,
        message: str,
        *,
        field_errors: Optional[Dict[str, str]] = None,
        payload: Any = None,
        operation: Optional[str] = None,
    ) -> None:
        super().__init__(message)
        self.field_errors = field_errors or {}
        self.payload = payload
        self.operation = operation


class TransportError(IntouchError):
    """The HTTP exchange itself failed: network, auth, non-2xx status or non-JSON body."""

    def __init__(self, message: str, *, status_code: Optional[int] = None, body: Any = None) -> None:
        super().__init__(message)
        self.status_code = status_code
        self.body = body


__all__ = [
    "IntouchError",
    "ConfigurationError",
    "RequestValidationError",
    "ResponseValidationError",
    "TransportError",
]
