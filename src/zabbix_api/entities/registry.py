"""Entity mapper units, one per supported entity kind.

Each unit is independent: a client built with a subset of
``EntityKind`` values only exposes typed methods for that subset, while
``raw_api_call`` still reaches every server method.
"""

from types import MappingProxyType

from zabbix_api.entities.base import EntityMapper
from zabbix_api.errors import EntityNotEnabledError
from zabbix_api.models.constants import EXTEND
from zabbix_api.models.enums import EntityKind
from zabbix_api.models.host import CreateHostRequest, Host
from zabbix_api.models.hostgroup import CreateHostGroupRequest, HostGroup
from zabbix_api.models.item import CreateItemRequest, Item
from zabbix_api.models.trigger import CreateTriggerRequest, Trigger
from zabbix_api.models.user import CreateUserRequest, User
from zabbix_api.models.usergroup import CreateUserGroupRequest, UserGroup
from zabbix_api.models.webscenario import CreateWebScenarioRequest, WebScenario

HOST_MAPPER = EntityMapper(
    kind=EntityKind.HOST,
    api_object="host",
    record_model=Host,
    create_model=CreateHostRequest,
    ids_field="hostids",
)

HOST_GROUP_MAPPER = EntityMapper(
    kind=EntityKind.HOST_GROUP,
    api_object="hostgroup",
    record_model=HostGroup,
    create_model=CreateHostGroupRequest,
    ids_field="groupids",
)

ITEM_MAPPER = EntityMapper(
    kind=EntityKind.ITEM,
    api_object="item",
    record_model=Item,
    create_model=CreateItemRequest,
    ids_field="itemids",
)

TRIGGER_MAPPER = EntityMapper(
    kind=EntityKind.TRIGGER,
    api_object="trigger",
    record_model=Trigger,
    create_model=CreateTriggerRequest,
    ids_field="triggerids",
)

WEB_SCENARIO_MAPPER = EntityMapper(
    kind=EntityKind.WEB_SCENARIO,
    api_object="httptest",
    record_model=WebScenario,
    create_model=CreateWebScenarioRequest,
    ids_field="httptestids",
    get_defaults=MappingProxyType({"selectSteps": EXTEND}),
)

USER_MAPPER = EntityMapper(
    kind=EntityKind.USER,
    api_object="user",
    record_model=User,
    create_model=CreateUserRequest,
    ids_field="userids",
)

USER_GROUP_MAPPER = EntityMapper(
    kind=EntityKind.USER_GROUP,
    api_object="usergroup",
    record_model=UserGroup,
    create_model=CreateUserGroupRequest,
    ids_field="usrgrpids",
)

MAPPERS: dict[EntityKind, EntityMapper] = {
    mapper.kind: mapper
    for mapper in (
        HOST_MAPPER,
        HOST_GROUP_MAPPER,
        ITEM_MAPPER,
        TRIGGER_MAPPER,
        WEB_SCENARIO_MAPPER,
        USER_MAPPER,
        USER_GROUP_MAPPER,
    )
}


class MapperRegistry:
    """The entity mappers enabled for one client."""

    def __init__(self, kinds: frozenset[EntityKind]) -> None:
        self._mappers = {kind: MAPPERS[kind] for kind in kinds}

    @property
    def kinds(self) -> frozenset[EntityKind]:
        return frozenset(self._mappers)

    def __contains__(self, kind: object) -> bool:
        return kind in self._mappers

    def get(self, kind: EntityKind) -> EntityMapper:
        """Return the mapper for ``kind``.

        Raises:
            EntityNotEnabledError: If the kind is not enabled
        """
        try:
            return self._mappers[kind]
        except KeyError:
            raise EntityNotEnabledError(kind.value) from None
