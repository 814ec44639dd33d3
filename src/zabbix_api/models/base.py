"""Base Pydantic model configuration for Zabbix API models.

Two bases are used:
- ZabbixBaseModel for caller-built request shapes: extra fields are
  forbidden so that typos in optional fields surface immediately.
- ZabbixRecordModel for records decoded from server results: fields the
  server adds beyond the declared ones (``output: "extend"`` returns many)
  are ignored.

Both are frozen and accept either the Python field name or the wire alias.
"""

from typing import Any

from pydantic import BaseModel, ConfigDict


class ZabbixBaseModel(BaseModel):
    """Base model for request shapes sent to the server.

    Example:
        >>> from pydantic import Field
        >>> class HostGroupRef(ZabbixBaseModel):
        ...     group_id: str = Field(alias="groupid")
        >>> HostGroupRef(group_id="2").to_wire()
        {'groupid': '2'}
    """

    model_config = ConfigDict(
        frozen=True,
        extra="forbid",
        populate_by_name=True,
        validate_default=True,
    )

    def to_wire(self) -> dict[str, Any]:
        """Dump to the JSON-ready wire form: aliases, no unset optionals."""
        return self.model_dump(mode="json", by_alias=True, exclude_none=True)


class ZabbixRecordModel(BaseModel):
    """Base model for records decoded from server results."""

    model_config = ConfigDict(
        frozen=True,
        extra="ignore",
        populate_by_name=True,
    )

    def to_wire(self) -> dict[str, Any]:
        return self.model_dump(mode="json", by_alias=True, exclude_none=True)
