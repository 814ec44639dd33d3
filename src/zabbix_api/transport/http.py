"""Blocking HTTP transport for JSON-RPC calls.

One POST per call against the configured endpoint. No retries: connection,
TLS and timeout failures are raised immediately as TransportError.

Example:
    >>> with HttpTransport(timeout=10.0) as transport:
    ...     body = transport.send(
    ...         "https://zabbix.example.com/api_jsonrpc.php",
    ...         b'{"jsonrpc":"2.0","method":"apiinfo.version","params":{},"id":1}',
    ...     )
"""

import time
from types import TracebackType
from typing import Optional

import httpx

from zabbix_api.errors import TransportError, TransportTimeoutError
from zabbix_api.models.constants import CONTENT_TYPE_JSON, DEFAULT_TIMEOUT
from zabbix_api.observability import get_logger
from zabbix_api.utils.sanitization import sanitize_headers, sanitize_url

logger = get_logger(__name__)

# Bytes of a non-200 body kept in the error message
ERROR_BODY_PREVIEW = 200


class HttpTransport:
    """Synchronous HTTP transport backed by ``httpx.Client``.

    Attributes:
        timeout: Request timeout in seconds
        verify_tls: Whether server certificates are validated
    """

    def __init__(
        self,
        timeout: float = DEFAULT_TIMEOUT,
        verify_tls: bool = True,
        transport: Optional[httpx.BaseTransport] = None,
    ) -> None:
        """Initialize the transport.

        Args:
            timeout: Request timeout in seconds
            verify_tls: Set False to accept self-signed certificates
            transport: Optional custom httpx transport (for testing), e.g.
                httpx.MockTransport
        """
        self.timeout = timeout
        self.verify_tls = verify_tls
        if transport is not None:
            self._client = httpx.Client(transport=transport, timeout=timeout)
        else:
            self._client = httpx.Client(timeout=timeout, verify=verify_tls)

    @property
    def is_closed(self) -> bool:
        return self._client.is_closed

    def close(self) -> None:
        self._client.close()

    def __enter__(self) -> "HttpTransport":
        return self

    def __exit__(
        self,
        exc_type: type[BaseException] | None,
        exc_val: BaseException | None,
        exc_tb: TracebackType | None,
    ) -> None:
        self.close()

    def send(self, url: str, body: bytes, headers: dict[str, str] | None = None) -> bytes:
        """POST a request body and return the response body.

        Args:
            url: Endpoint URL
            body: Encoded JSON-RPC request
            headers: Extra headers (e.g. Authorization)

        Returns:
            Raw response body

        Raises:
            TransportTimeoutError: If the request times out
            TransportError: On connection/TLS failure or a non-200 status
        """
        sanitized_url = sanitize_url(url)
        request_headers = {"Content-Type": CONTENT_TYPE_JSON}
        if headers:
            request_headers.update(headers)

        logger.debug(
            "zabbix_api.transport.post",
            url=sanitized_url,
            size=len(body),
            headers=sanitize_headers(request_headers),
        )
        start_time = time.perf_counter()

        try:
            response = self._client.post(url, content=body, headers=request_headers)
        except httpx.TimeoutException as e:
            logger.warning(
                "zabbix_api.transport.timeout",
                url=sanitized_url,
                timeout=self.timeout,
            )
            raise TransportTimeoutError(self.timeout, url=sanitized_url, cause=e) from e
        except httpx.HTTPError as e:
            logger.warning(
                "zabbix_api.transport.error",
                url=sanitized_url,
                error=str(e),
                error_type=type(e).__name__,
            )
            raise TransportError(
                f"{type(e).__name__} calling {sanitized_url}: {e}. "
                "Verify the Zabbix frontend is running and reachable.",
                url=sanitized_url,
                cause=e,
            ) from e

        duration_ms = (time.perf_counter() - start_time) * 1000
        logger.debug(
            "zabbix_api.transport.response",
            url=sanitized_url,
            status_code=response.status_code,
            duration_ms=round(duration_ms, 2),
        )

        if response.status_code != httpx.codes.OK:
            logger.error(
                "zabbix_api.transport.unexpected_status",
                url=sanitized_url,
                status_code=response.status_code,
            )
            raise TransportError(
                f"Unexpected HTTP status {response.status_code} from {sanitized_url}. "
                f"Server response: {response.text[:ERROR_BODY_PREVIEW]}",
                url=sanitized_url,
                status_code=response.status_code,
            )

        return response.content
