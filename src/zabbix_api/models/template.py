"""Template shapes referenced by hosts."""

from pydantic import Field

from zabbix_api.models.base import ZabbixBaseModel, ZabbixRecordModel
from zabbix_api.models.types import ObjectID


class Template(ZabbixRecordModel):
    template_id: ObjectID = Field(alias="templateid")
    host: str
    name: str | None = None
    description: str | None = None
    uuid: str | None = None


class TemplateId(ZabbixBaseModel):
    """Reference to a template linked on ``host.create``."""

    template_id: ObjectID = Field(alias="templateid")

    @classmethod
    def from_template(cls, template: Template) -> "TemplateId":
        return cls(template_id=template.template_id)
