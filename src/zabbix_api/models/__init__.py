"""Zabbix API Models.

This module provides the Pydantic models for request params and decoded
records of every supported entity kind.
"""

# Base models
from zabbix_api.models.base import ZabbixBaseModel, ZabbixRecordModel

# Constants
from zabbix_api.models.constants import (
    API_INFO_METHOD,
    EXTEND,
    JSON_RPC_VERSION,
    LOGIN_METHOD,
    LOGOUT_METHOD,
    NO_AUTH_METHODS,
)

# Enums
from zabbix_api.models.enums import (
    AuthPlacement,
    EntityKind,
    HostStatus,
    MacroType,
    Operation,
)

# Type aliases
from zabbix_api.models.types import ObjectID, Params, SessionToken

# Request shapes
from zabbix_api.models.requests import GetRequest

# Entities
from zabbix_api.models.host import (
    CreateHostRequest,
    Host,
    HostInterface,
    HostTag,
    UpdateHostRequest,
    UpdateHostResponse,
)
from zabbix_api.models.hostgroup import CreateHostGroupRequest, HostGroup, HostGroupId
from zabbix_api.models.item import CreateItemRequest, Item, ItemTag
from zabbix_api.models.macro import HostMacro
from zabbix_api.models.template import Template, TemplateId
from zabbix_api.models.trigger import CreateTriggerRequest, Trigger, TriggerTag
from zabbix_api.models.user import CreateUserRequest, User, UserGroupId, UserMedia
from zabbix_api.models.usergroup import (
    CreateUserGroupRequest,
    UserGroup,
    UserGroupMember,
    UserGroupPermission,
    UserGroupTagFilter,
    UserGroupUser,
)
from zabbix_api.models.webscenario import (
    CreateWebScenarioRequest,
    WebScenario,
    WebScenarioStep,
    WebScenarioStepRecord,
)

__all__ = [
    # Base
    "ZabbixBaseModel",
    "ZabbixRecordModel",
    # Constants
    "API_INFO_METHOD",
    "EXTEND",
    "JSON_RPC_VERSION",
    "LOGIN_METHOD",
    "LOGOUT_METHOD",
    "NO_AUTH_METHODS",
    # Enums
    "AuthPlacement",
    "EntityKind",
    "HostStatus",
    "MacroType",
    "Operation",
    # Types
    "ObjectID",
    "Params",
    "SessionToken",
    # Requests
    "GetRequest",
    # Host
    "Host",
    "HostInterface",
    "HostTag",
    "HostMacro",
    "CreateHostRequest",
    "UpdateHostRequest",
    "UpdateHostResponse",
    # Host group
    "HostGroup",
    "HostGroupId",
    "CreateHostGroupRequest",
    # Template
    "Template",
    "TemplateId",
    # Item
    "Item",
    "ItemTag",
    "CreateItemRequest",
    # Trigger
    "Trigger",
    "TriggerTag",
    "CreateTriggerRequest",
    # Web scenario
    "WebScenario",
    "WebScenarioStep",
    "WebScenarioStepRecord",
    "CreateWebScenarioRequest",
    # User
    "User",
    "UserGroupId",
    "UserMedia",
    "CreateUserRequest",
    # User group
    "UserGroup",
    "UserGroupMember",
    "UserGroupPermission",
    "UserGroupTagFilter",
    "UserGroupUser",
    "CreateUserGroupRequest",
]
