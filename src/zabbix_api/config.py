"""Client configuration.

The configuration is an explicit, immutable object passed to the client.
The client never reads credentials or endpoints from the process
environment; see ``zabbix_api.testing.env`` for the env-driven harness.

Example:
    >>> config = ClientConfig(
    ...     url="https://zabbix.example.com/api_jsonrpc.php",
    ...     username="Admin",
    ...     password="zabbix",
    ...     variant="v6",
    ...     entities={"host", "host_group"},
    ... )
    >>> config.variant.name
    'v6'
"""

from typing import Annotated, Any
from urllib.parse import urlparse

from pydantic import BeforeValidator, Field, InstanceOf, SecretStr, field_validator

from zabbix_api.models.base import ZabbixBaseModel
from zabbix_api.models.constants import DEFAULT_TIMEOUT
from zabbix_api.models.enums import EntityKind
from zabbix_api.transport.variants import V7, ProtocolVariant, get_variant


def _coerce_variant(value: Any) -> Any:
    if isinstance(value, str):
        return get_variant(value)
    return value


VariantField = Annotated[InstanceOf[ProtocolVariant], BeforeValidator(_coerce_variant)]


class ClientConfig(ZabbixBaseModel):
    """Configuration of a ZabbixApiClient.

    Attributes:
        url: JSON-RPC endpoint, e.g. ``https://host/api_jsonrpc.php``
        username: Login name used by get_auth_session() when none is given
        password: Password used by get_auth_session() when none is given
        verify_tls: Validate server certificates; False accepts self-signed ones
        timeout: HTTP timeout in seconds for one call
        variant: Protocol variant (V6/V7 or "v6"/"v7")
        entities: Entity kinds with typed methods on the client
    """

    url: str = Field(..., description="JSON-RPC endpoint URL")
    username: str | None = Field(default=None, description="Login name")
    password: SecretStr | None = Field(default=None, description="Login password")
    verify_tls: bool = Field(default=True, description="Validate TLS certificates")
    timeout: float = Field(default=DEFAULT_TIMEOUT, gt=0, description="HTTP timeout (seconds)")
    variant: VariantField = Field(default_factory=lambda: V7, description="Protocol variant")
    entities: frozenset[EntityKind] = Field(
        default=frozenset(EntityKind), description="Enabled entity kinds"
    )

    @field_validator("url")
    @classmethod
    def validate_url(cls, v: str) -> str:
        """Require an absolute http(s) URL."""
        parsed = urlparse(v)
        if parsed.scheme.lower() not in ("http", "https") or not parsed.netloc:
            raise ValueError(
                f"Invalid endpoint URL: {v}. Must be an http(s) URL "
                "(e.g. https://zabbix.example.com/api_jsonrpc.php)"
            )
        return v

    def credentials(self) -> tuple[str, str] | None:
        """Return configured (username, password), or None if either is missing."""
        if self.username is None or self.password is None:
            return None
        return self.username, self.password.get_secret_value()
