"""Web scenario (``httptest``) shapes."""

from pydantic import Field

from zabbix_api.models.base import ZabbixBaseModel, ZabbixRecordModel
from zabbix_api.models.types import ObjectID


class WebScenarioStep(ZabbixBaseModel):
    """One step of a web scenario; ``no`` is the 1-based step order."""

    name: str = Field(min_length=1)
    url: str = Field(min_length=1)
    no: int = Field(ge=1)
    status_codes: str = ""


class WebScenarioStepRecord(ZabbixRecordModel):
    name: str
    url: str
    no: int
    status_codes: str | None = None


class WebScenario(ZabbixRecordModel):
    """Web scenario record returned by ``httptest.get``.

    ``steps`` is present when the request selects them (the default for
    ``get_webscenarios``).
    """

    http_test_id: ObjectID = Field(alias="httptestid")
    name: str
    host_id: ObjectID = Field(alias="hostid")
    steps: list[WebScenarioStepRecord] | None = None


class CreateWebScenarioRequest(ZabbixBaseModel):
    """Params for ``httptest.create``."""

    name: str = Field(min_length=1)
    host_id: ObjectID = Field(alias="hostid")
    steps: list[WebScenarioStep] = Field(min_length=1)
