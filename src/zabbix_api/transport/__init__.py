"""Zabbix API HTTP Transport Layer.

This module provides the wire-level pieces of the client:
- JSON-RPC 2.0 envelope encoding/decoding
- A blocking httpx transport, one POST per call
- Protocol variant descriptors (auth placement, method set, field layout)

Public exports:
    encode_request / decode_response: Envelope codec
    JsonRpcRequest / JsonRpcResponse / JsonRpcError: Envelope models
    HttpTransport: Blocking HTTP transport
    ProtocolVariant, V6, V7, get_variant: Protocol variants
"""

from zabbix_api.transport.http import HttpTransport
from zabbix_api.transport.jsonrpc import (
    JsonRpcError,
    JsonRpcRequest,
    JsonRpcResponse,
    decode_response,
    encode_request,
)
from zabbix_api.transport.variants import V6, V7, ProtocolVariant, get_variant

__all__ = [
    # JSON-RPC
    "JsonRpcRequest",
    "JsonRpcResponse",
    "JsonRpcError",
    "encode_request",
    "decode_response",
    # HTTP
    "HttpTransport",
    # Variants
    "ProtocolVariant",
    "V6",
    "V7",
    "get_variant",
]
