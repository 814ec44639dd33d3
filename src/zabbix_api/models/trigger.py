"""Trigger shapes for ``trigger.get`` and ``trigger.create``."""

from pydantic import Field

from zabbix_api.models.base import ZabbixBaseModel, ZabbixRecordModel
from zabbix_api.models.types import ObjectID


class Trigger(ZabbixRecordModel):
    """Trigger record returned by ``trigger.get``."""

    trigger_id: ObjectID = Field(alias="triggerid")
    description: str
    expression: str
    event_name: str | None = None
    url: str | None = None
    priority: int | None = None
    recovery_mode: int | None = None
    recovery_expression: str | None = None


class TriggerTag(ZabbixBaseModel):
    tag: str
    value: str = ""


class CreateTriggerRequest(ZabbixBaseModel):
    """Params for ``trigger.create``.

    ``priority``: 0 not classified .. 5 disaster.
    """

    description: str = Field(min_length=1)
    expression: str = Field(min_length=1)
    priority: int = Field(default=0, ge=0, le=5)
    event_name: str | None = None
    url: str | None = None
    comments: str | None = None
    tags: list[TriggerTag] = Field(default_factory=list)
