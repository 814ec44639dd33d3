"""Enumerations for the Zabbix API client."""

from enum import Enum


class EntityKind(str, Enum):
    """Entity kinds with typed operations on the client.

    Each kind can be enabled or left out per client via
    ``ClientConfig.entities``.
    """

    HOST = "host"
    HOST_GROUP = "host_group"
    ITEM = "item"
    TRIGGER = "trigger"
    WEB_SCENARIO = "web_scenario"
    USER = "user"
    USER_GROUP = "user_group"


class Operation(str, Enum):
    """Typed operations supported for every entity kind."""

    CREATE = "create"
    GET = "get"


class HostStatus(str, Enum):
    """Host monitoring status as encoded by the server."""

    ENABLED = "0"
    DISABLED = "1"


class MacroType(str, Enum):
    """User macro value type."""

    TEXT = "0"
    SECRET = "1"
    VAULT = "2"


class AuthPlacement(str, Enum):
    """Where the session token travels on authenticated requests.

    BODY: top-level ``auth`` member of the JSON-RPC request.
    HEADER: ``Authorization: Bearer <token>`` header, no ``auth`` member.
    """

    BODY = "body"
    HEADER = "header"
