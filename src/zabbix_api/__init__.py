"""Client SDK for the Zabbix JSON-RPC API.

Example:
    >>> from zabbix_api import ClientConfig, ZabbixApiClient
    >>>
    >>> config = ClientConfig(url="http://localhost:3080/api_jsonrpc.php", variant="v6")
    >>> with ZabbixApiClient(config) as client:
    ...     client.get_api_info()
    ...     client.get_auth_session("Admin", "zabbix")
    ...     client.raw_api_call("host.get", {"output": ["hostid", "host"]})
"""

from zabbix_api.client import ZabbixApiClient
from zabbix_api.config import ClientConfig
from zabbix_api.errors import (
    ApiError,
    ConfigurationError,
    DecodeError,
    EntityNotEnabledError,
    MalformedResponseError,
    NotAuthenticatedError,
    ProtocolError,
    RemoteError,
    TransportError,
    TransportTimeoutError,
    UnsupportedOperationError,
    ZabbixApiError,
)
from zabbix_api.models import (
    CreateHostGroupRequest,
    CreateHostRequest,
    CreateItemRequest,
    CreateTriggerRequest,
    CreateUserGroupRequest,
    CreateUserRequest,
    CreateWebScenarioRequest,
    EntityKind,
    GetRequest,
    Host,
    HostGroup,
    Item,
    Trigger,
    UpdateHostRequest,
    UpdateHostResponse,
    User,
    UserGroup,
    WebScenario,
)
from zabbix_api.transport.variants import V6, V7, ProtocolVariant

__version__ = "0.1.0"

__all__ = [
    "ZabbixApiClient",
    "ClientConfig",
    # Variants
    "ProtocolVariant",
    "V6",
    "V7",
    # Errors
    "ZabbixApiError",
    "TransportError",
    "TransportTimeoutError",
    "ProtocolError",
    "MalformedResponseError",
    "RemoteError",
    "DecodeError",
    "ApiError",
    "NotAuthenticatedError",
    "EntityNotEnabledError",
    "UnsupportedOperationError",
    "ConfigurationError",
    # Models
    "EntityKind",
    "GetRequest",
    "Host",
    "HostGroup",
    "Item",
    "Trigger",
    "WebScenario",
    "User",
    "UserGroup",
    "CreateHostRequest",
    "CreateHostGroupRequest",
    "CreateItemRequest",
    "CreateTriggerRequest",
    "CreateWebScenarioRequest",
    "CreateUserRequest",
    "CreateUserGroupRequest",
    "UpdateHostRequest",
    "UpdateHostResponse",
]
