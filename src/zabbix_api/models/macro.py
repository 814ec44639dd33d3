"""User macro shapes."""

from pydantic import Field

from zabbix_api.models.base import ZabbixBaseModel
from zabbix_api.models.enums import MacroType


class HostMacro(ZabbixBaseModel):
    """Host-level user macro defined on ``host.create``.

    Example:
        >>> HostMacro(macro="{$SNMP_COMMUNITY}", value="public").to_wire()
        {'macro': '{$SNMP_COMMUNITY}', 'value': 'public'}
        >>> HostMacro.secret("{$DB_PASSWORD}", "s3cr3t").macro_type
        <MacroType.SECRET: '1'>
    """

    macro: str = Field(pattern=r"^\{\$.+\}$")
    value: str
    description: str | None = None
    macro_type: MacroType | None = Field(default=None, alias="type")

    @classmethod
    def text(cls, macro: str, value: str, description: str | None = None) -> "HostMacro":
        return cls(macro=macro, value=value, description=description, macro_type=MacroType.TEXT)

    @classmethod
    def secret(cls, macro: str, value: str, description: str | None = None) -> "HostMacro":
        return cls(macro=macro, value=value, description=description, macro_type=MacroType.SECRET)

    @classmethod
    def vault(cls, macro: str, value: str, description: str | None = None) -> "HostMacro":
        return cls(macro=macro, value=value, description=description, macro_type=MacroType.VAULT)
