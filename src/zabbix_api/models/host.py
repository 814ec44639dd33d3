"""Host shapes for ``host.get``, ``host.create`` and ``host.update``."""

from pydantic import Field

from zabbix_api.models.base import ZabbixBaseModel, ZabbixRecordModel
from zabbix_api.models.enums import HostStatus
from zabbix_api.models.hostgroup import HostGroupId
from zabbix_api.models.macro import HostMacro
from zabbix_api.models.template import TemplateId
from zabbix_api.models.types import ObjectID


class Host(ZabbixRecordModel):
    """Host record returned by ``host.get``.

    Attributes:
        host_id: Server-assigned host id
        host: Technical host name
        name: Visible name (when selected)
        status: Monitoring status (when selected)
    """

    host_id: ObjectID = Field(alias="hostid")
    host: str
    name: str | None = None
    status: HostStatus | None = None
    description: str | None = None


class HostTag(ZabbixBaseModel):
    tag: str
    value: str = ""


class HostInterface(ZabbixBaseModel):
    """Agent/SNMP/IPMI/JMX interface defined on ``host.create``.

    ``interface_type``: 1 agent, 2 SNMP, 3 IPMI, 4 JMX.
    """

    interface_type: int = Field(alias="type", ge=1, le=4)
    main: int = Field(ge=0, le=1)
    use_ip: int = Field(alias="useip", ge=0, le=1)
    ip: str = ""
    dns: str = ""
    port: str = "10050"


class CreateHostRequest(ZabbixBaseModel):
    """Params for ``host.create``.

    Example:
        >>> request = CreateHostRequest(
        ...     host="server1",
        ...     groups=[HostGroupId(group_id="2")],
        ... )
        >>> request.to_wire()["groups"]
        [{'groupid': '2'}]
    """

    host: str = Field(min_length=1)
    groups: list[HostGroupId] = Field(min_length=1)
    name: str | None = None
    interfaces: list[HostInterface] = Field(default_factory=list)
    tags: list[HostTag] = Field(default_factory=list)
    templates: list[TemplateId] = Field(default_factory=list)
    macros: list[HostMacro] = Field(default_factory=list)
    status: HostStatus | None = None
    inventory_mode: int | None = Field(default=None, ge=-1, le=1)
    inventory: dict[str, str] | None = None


class UpdateHostRequest(ZabbixBaseModel):
    """Params for ``host.update``.

    There is no typed update method; send the wire form through
    ``ZabbixApiClient.raw_api_call`` and decode the result with
    ``UpdateHostResponse``.

    Example:
        >>> UpdateHostRequest.disable_host("10105").to_wire()
        {'hostid': '10105', 'status': '1'}
    """

    host_id: ObjectID = Field(alias="hostid")
    name: str | None = None
    status: HostStatus | None = None
    description: str | None = None

    @classmethod
    def disable_host(cls, host_id: ObjectID) -> "UpdateHostRequest":
        """Request that stops monitoring of one host."""
        return cls(host_id=host_id, status=HostStatus.DISABLED)


class UpdateHostResponse(ZabbixRecordModel):
    """Result of ``host.update``: the ids of the updated hosts."""

    host_ids: list[ObjectID] = Field(alias="hostids")
