"""JSON-RPC 2.0 envelope codec for the Zabbix API.

This module implements the JSON-RPC 2.0 specification
(https://www.jsonrpc.org/specification) as spoken by the Zabbix frontend:

- encode_request() wraps a method call into request bytes
- decode_response() unwraps response bytes into the result, or raises

Standard JSON-RPC Error Codes:
    -32700: Parse error (invalid JSON)
    -32600: Invalid request (malformed JSON-RPC)
    -32601: Method not found
    -32602: Invalid params
    -32603: Internal error
    -32500: Application error (Zabbix)

Example:
    >>> body = encode_request("apiinfo.version", {}, request_id=1)
    >>> body
    b'{"jsonrpc":"2.0","method":"apiinfo.version","params":{},"id":1}'
    >>> decode_response(b'{"jsonrpc":"2.0","result":"7.0.0","id":1}').result
    '7.0.0'
"""

import json
from typing import Any, Literal

from pydantic import Field, ValidationError

from zabbix_api.errors import MalformedResponseError, RemoteError
from zabbix_api.models.base import ZabbixBaseModel, ZabbixRecordModel
from zabbix_api.models.constants import JSON_RPC_VERSION

# JSON-RPC 2.0 Standard Error Codes
PARSE_ERROR = -32700
INVALID_REQUEST = -32600
METHOD_NOT_FOUND = -32601
INVALID_PARAMS = -32602
INTERNAL_ERROR = -32603
# Zabbix reports business rule violations with this code
APPLICATION_ERROR = -32500

ERROR_MESSAGES: dict[int, str] = {
    PARSE_ERROR: "Parse error",
    INVALID_REQUEST: "Invalid request",
    METHOD_NOT_FOUND: "Method not found",
    INVALID_PARAMS: "Invalid params",
    INTERNAL_ERROR: "Internal error",
    APPLICATION_ERROR: "Application error",
}


class JsonRpcError(ZabbixRecordModel):
    """JSON-RPC 2.0 error object.

    Attributes:
        code: Integer error code
        message: Short error description
        data: Detailed description; Zabbix sends a string

    Example:
        >>> error = JsonRpcError(code=-32602, message="Invalid params.", data="No permissions")
        >>> error.code
        -32602
    """

    code: int = Field(strict=True, description="Error code")
    message: str = Field(strict=True, description="Short error description")
    data: Any = Field(default=None, description="Additional error information")


class JsonRpcRequest(ZabbixBaseModel):
    """JSON-RPC 2.0 request.

    Attributes:
        jsonrpc: Protocol version (always "2.0")
        method: API method in ``<object>.<operation>`` form
        params: Request parameters, passed through unmodified
        id: Request identifier for correlation
        auth: Session token when the protocol variant places it in the body
    """

    jsonrpc: Literal["2.0"] = Field(
        default=JSON_RPC_VERSION, description="JSON-RPC protocol version (always '2.0')"
    )
    method: str = Field(min_length=1, description="API method name")
    params: Any = Field(description="Request parameters")
    id: int = Field(description="Request identifier for correlation")
    auth: str | None = Field(default=None, description="Session token (body placement)")


class JsonRpcResponse(ZabbixRecordModel):
    """JSON-RPC 2.0 successful response.

    Attributes:
        result: Response data, any JSON value
        id: Request identifier echoed by the server
    """

    jsonrpc: str | None = Field(default=None, description="JSON-RPC protocol version")
    result: Any = Field(description="Response data")
    # Servers echo ids verbatim; the client only compares them.
    id: Any = Field(default=None, description="Request identifier")


def encode_request(
    method: str,
    params: Any,
    request_id: int,
    auth: str | None = None,
) -> bytes:
    """Encode a JSON-RPC 2.0 request.

    Args:
        method: API method name (e.g. ``host.get``)
        params: Already-encoded params; ``None`` is sent as ``{}``
        request_id: Correlation id
        auth: Session token to place in the ``auth`` member, if any

    Returns:
        UTF-8 encoded JSON request body
    """
    request = JsonRpcRequest(
        method=method,
        params={} if params is None else params,
        id=request_id,
        auth=auth,
    )
    exclude = {"auth"} if auth is None else None
    return request.model_dump_json(exclude=exclude).encode("utf-8")


def decode_response(body: bytes | str) -> JsonRpcResponse:
    """Decode a JSON-RPC 2.0 response.

    Args:
        body: Raw response body

    Returns:
        The successful response; its ``result`` is passed through unmodified

    Raises:
        MalformedResponseError: Invalid JSON, not an object, or not exactly
            one of ``result``/``error`` present
        RemoteError: The server returned an error object
    """
    try:
        envelope = json.loads(body)
    except (ValueError, UnicodeDecodeError) as e:
        raise MalformedResponseError("body is not valid JSON", details={"error": str(e)}) from e

    if not isinstance(envelope, dict):
        raise MalformedResponseError(
            "expected a JSON object", details={"type": type(envelope).__name__}
        )

    has_result = "result" in envelope
    has_error = "error" in envelope
    if has_result and has_error:
        raise MalformedResponseError("both 'result' and 'error' are present")
    if not has_result and not has_error:
        raise MalformedResponseError("neither 'result' nor 'error' is present")

    if has_error:
        try:
            error = JsonRpcError.model_validate(envelope["error"])
        except ValidationError as e:
            raise MalformedResponseError(
                "invalid 'error' member",
                details={"errors": e.errors(include_url=False, include_context=False)},
            ) from e
        raise RemoteError(error.code, error.message, error.data)

    try:
        return JsonRpcResponse.model_validate(envelope)
    except ValidationError as e:
        raise MalformedResponseError(
            "invalid response envelope",
            details={"errors": e.errors(include_url=False, include_context=False)},
        ) from e
