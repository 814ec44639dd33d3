"""Generic ``<object>.get`` request shape.

Every Zabbix ``get`` method shares the same core parameters: an output
selection, exact-match ``filter``, substring ``search``, sorting and
limiting. Kind-specific parameters (``hostids``, ``selectSteps``,
``with_triggers``, ...) go in ``options`` and are merged into the params
as-is.
"""

from typing import Any, Literal

from pydantic import Field

from zabbix_api.models.base import ZabbixBaseModel
from zabbix_api.models.constants import EXTEND


class GetRequest(ZabbixBaseModel):
    """Filter/search structure for ``get`` operations.

    Attributes:
        output: ``"extend"`` or the list of field names to return
        filter: Field name to expected value(s), exact match
        search: Field name to substring, case-insensitive match
        limit: Maximum number of records
        sortfield: Field(s) to sort by
        sortorder: ``ASC`` or ``DESC``
        options: Additional method-specific params merged verbatim

    Example:
        >>> GetRequest(filter={"host": ["server1"]}).to_params()
        {'output': 'extend', 'filter': {'host': ['server1']}}
    """

    output: str | list[str] = Field(default=EXTEND, description="Output field selection")
    filter: dict[str, Any] | None = Field(default=None, description="Exact-match filter")
    search: dict[str, Any] | None = Field(default=None, description="Substring search")
    limit: int | None = Field(default=None, ge=1, description="Maximum records to return")
    sortfield: str | list[str] | None = Field(default=None, description="Sort field(s)")
    sortorder: Literal["ASC", "DESC"] | None = Field(default=None, description="Sort order")
    options: dict[str, Any] = Field(
        default_factory=dict, description="Method-specific params merged into the request"
    )

    def to_params(self) -> dict[str, Any]:
        params = self.model_dump(mode="json", exclude_none=True, exclude={"options"})
        params.update(self.options)
        return params
