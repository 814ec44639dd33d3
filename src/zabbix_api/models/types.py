"""Type aliases for the Zabbix API client.

This module defines type aliases to document the semantic meaning of
string types.
"""

from typing import Any, TypeAlias

ObjectID: TypeAlias = str
"""Server-assigned identifier; numeric but always encoded as a string."""

SessionToken: TypeAlias = str
"""Opaque session token returned by user.login."""

Params: TypeAlias = dict[str, Any]
"""JSON-ready request params."""
