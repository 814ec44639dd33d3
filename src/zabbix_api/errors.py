"""Zabbix API Client Error Taxonomy.

This module defines the error hierarchy for the client, providing
structured error handling with specific error codes and context
information.

Hierarchy:
    ZabbixApiError
    ├── TransportError
    │   └── TransportTimeoutError
    ├── ProtocolError
    │   ├── MalformedResponseError
    │   └── RemoteError
    ├── DecodeError
    └── ApiError
        ├── NotAuthenticatedError
        ├── EntityNotEnabledError
        ├── UnsupportedOperationError
        └── ConfigurationError
"""
from __future__ import annotations

from typing import Any


class ZabbixApiError(Exception):
    """Base exception for all client errors.

    Attributes:
        code: Error code following the zabbix:<area>/<name> pattern
        message: Human-readable error message
        details: Optional additional error context
    """

    def __init__(self, code: str, message: str, details: dict[str, Any] | None = None) -> None:
        super().__init__(message)
        self.code = code
        self.message = message
        self.details = details or {}

    def to_dict(self) -> dict[str, Any]:
        """Serialize to ``{code, message, details}`` dict."""
        return {
            "code": self.code,
            "message": self.message,
            "details": self.details,
        }


class TransportError(ZabbixApiError):
    """Raised when the HTTP round trip fails.

    Covers refused connections, TLS failures, timeouts and non-200 HTTP
    responses. Transport errors are never retried by the client.

    Attributes:
        url: Sanitized endpoint URL
        status_code: HTTP status when the server answered with non-200
        cause: Original exception, if any
    """

    def __init__(
        self,
        message: str,
        url: str | None = None,
        status_code: int | None = None,
        cause: Exception | None = None,
        details: dict[str, Any] | None = None,
    ) -> None:
        details_dict: dict[str, Any] = {}
        if url is not None:
            details_dict["url"] = url
        if status_code is not None:
            details_dict["status_code"] = status_code
        if details:
            details_dict.update(details)
        super().__init__(code="zabbix:transport/error", message=message, details=details_dict)
        self.url = url
        self.status_code = status_code
        self.cause = cause


class TransportTimeoutError(TransportError):
    """Raised when the HTTP request exceeds the configured timeout."""

    def __init__(
        self,
        timeout: float,
        url: str | None = None,
        cause: Exception | None = None,
    ) -> None:
        super().__init__(
            message=f"Request timeout after {timeout}s",
            url=url,
            cause=cause,
            details={"timeout": timeout},
        )
        self.code = "zabbix:transport/timeout"
        self.timeout = timeout


class ProtocolError(ZabbixApiError):
    """Base class for JSON-RPC envelope level failures."""


class MalformedResponseError(ProtocolError):
    """Raised when a response body is not a well-formed JSON-RPC envelope.

    This covers invalid JSON, a non-object body, and envelopes where
    ``result`` and ``error`` are both absent or both present.
    """

    def __init__(self, reason: str, details: dict[str, Any] | None = None) -> None:
        super().__init__(
            code="zabbix:protocol/malformed_response",
            message=f"Malformed response: {reason}",
            details=details or {},
        )
        self.reason = reason


class RemoteError(ProtocolError):
    """Raised when the server returns a JSON-RPC error object.

    The code, message and data are kept exactly as the server sent them.
    Specific remote codes (expired session, missing permissions) are not
    translated into narrower types.

    Attributes:
        remote_code: JSON-RPC error code
        remote_message: Error message from the server
        data: Additional error description from the server
    """

    def __init__(self, code: int, message: str, data: Any = None) -> None:
        super().__init__(
            code="zabbix:protocol/remote_error",
            message=f"Remote error {code}: {message}",
            details={"code": code, "message": message, "data": data},
        )
        self.remote_code = code
        self.remote_message = message
        self.data = data


class DecodeError(ZabbixApiError):
    """Raised when a successful result does not match the expected shape.

    Attributes:
        field_path: Location of the offending value (e.g. ``result[0].hostid``)
        reason: What was wrong with it
    """

    def __init__(self, field_path: str, reason: str) -> None:
        super().__init__(
            code="zabbix:decode/invalid_result",
            message=f"Cannot decode '{field_path}': {reason}",
            details={"field_path": field_path, "reason": reason},
        )
        self.field_path = field_path
        self.reason = reason


class ApiError(ZabbixApiError):
    """Base class for misuse detected by the client before any network I/O."""


class NotAuthenticatedError(ApiError):
    """Raised when an auth-requiring method is called without a session.

    Call ``get_auth_session()`` first.
    """

    def __init__(self, method: str) -> None:
        super().__init__(
            code="zabbix:api/not_authenticated",
            message=f"Method '{method}' requires an authenticated session",
            details={"method": method},
        )
        self.method = method


class EntityNotEnabledError(ApiError):
    """Raised when a typed method is used for an entity kind left out of the config."""

    def __init__(self, kind: str) -> None:
        super().__init__(
            code="zabbix:api/entity_not_enabled",
            message=(
                f"Entity kind '{kind}' is not enabled for this client. "
                "Use raw_api_call() or enable it in ClientConfig.entities"
            ),
            details={"kind": kind},
        )
        self.kind = kind


class UnsupportedOperationError(ApiError):
    """Raised when the protocol variant does not offer a method or parameter.

    Attributes:
        variant: Protocol variant name
        operation: API method or parameter that is not available
    """

    def __init__(self, variant: str, operation: str) -> None:
        super().__init__(
            code="zabbix:api/unsupported_operation",
            message=f"'{operation}' is not supported by protocol variant {variant}",
            details={"variant": variant, "operation": operation},
        )
        self.variant = variant
        self.operation = operation


class ConfigurationError(ApiError):
    """Raised when the client configuration cannot serve the request."""

    def __init__(self, message: str, details: dict[str, Any] | None = None) -> None:
        super().__init__(code="zabbix:api/configuration", message=message, details=details or {})
