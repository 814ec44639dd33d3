"""Host group shapes."""

from pydantic import Field

from zabbix_api.models.base import ZabbixBaseModel, ZabbixRecordModel
from zabbix_api.models.types import ObjectID


class HostGroup(ZabbixRecordModel):
    """Host group record returned by ``hostgroup.get``."""

    group_id: ObjectID = Field(alias="groupid")
    name: str
    flags: str | None = None
    uuid: str | None = None


class HostGroupId(ZabbixBaseModel):
    """Reference to an existing host group, as used by ``host.create``."""

    group_id: ObjectID = Field(alias="groupid")

    @classmethod
    def from_group(cls, group: HostGroup) -> "HostGroupId":
        return cls(group_id=group.group_id)


class CreateHostGroupRequest(ZabbixBaseModel):
    """Params for ``hostgroup.create``."""

    name: str = Field(min_length=1)
