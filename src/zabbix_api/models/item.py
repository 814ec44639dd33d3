"""Item shapes for ``item.get`` and ``item.create``."""

from pydantic import Field

from zabbix_api.models.base import ZabbixBaseModel, ZabbixRecordModel
from zabbix_api.models.types import ObjectID


class Item(ZabbixRecordModel):
    """Item record returned by ``item.get``."""

    item_id: ObjectID = Field(alias="itemid")
    name: str
    key_: str
    host_id: ObjectID = Field(alias="hostid")
    item_type: int | None = Field(default=None, alias="type")
    value_type: int | None = None
    delay: str | None = None
    lastvalue: str | None = None


class ItemTag(ZabbixBaseModel):
    tag: str
    value: str = ""


class CreateItemRequest(ZabbixBaseModel):
    """Params for ``item.create``.

    ``item_type`` is the item type (0 agent, 2 trapper, ...) and
    ``value_type`` the stored value type (0 float, 3 unsigned, 4 text, ...).
    """

    name: str = Field(min_length=1)
    key_: str = Field(min_length=1)
    host_id: ObjectID = Field(alias="hostid")
    item_type: int = Field(alias="type", ge=0)
    value_type: int = Field(ge=0, le=5)
    interface_id: ObjectID | None = Field(default=None, alias="interfaceid")
    delay: str | None = None
    tags: list[ItemTag] = Field(default_factory=list)
    units: str | None = None
    description: str | None = None
