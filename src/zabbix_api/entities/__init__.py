"""Entity mappers: typed shapes <-> wire JSON, per entity kind."""

from zabbix_api.entities.base import EntityMapper, format_loc
from zabbix_api.entities.registry import (
    HOST_GROUP_MAPPER,
    HOST_MAPPER,
    ITEM_MAPPER,
    MAPPERS,
    TRIGGER_MAPPER,
    USER_GROUP_MAPPER,
    USER_MAPPER,
    WEB_SCENARIO_MAPPER,
    MapperRegistry,
)

__all__ = [
    "EntityMapper",
    "MapperRegistry",
    "MAPPERS",
    "HOST_MAPPER",
    "HOST_GROUP_MAPPER",
    "ITEM_MAPPER",
    "TRIGGER_MAPPER",
    "WEB_SCENARIO_MAPPER",
    "USER_MAPPER",
    "USER_GROUP_MAPPER",
    "format_loc",
]
