"""Protocol variant descriptors.

The client speaks one of two server API generations. A variant is a small
frozen descriptor consulted by the request pipeline:

- where the session token travels (request body or Authorization header)
- which API methods the typed surface may call
- per-method parameter renames and parameters the generation lacks

The variant is chosen when the client is constructed and never changes.

Example:
    >>> V7.auth_placement
    <AuthPlacement.HEADER: 'header'>
    >>> V6.place_auth("0424bd59b807674191e7d77572075f33")
    ('0424bd59b807674191e7d77572075f33', {})
"""

from collections.abc import Mapping
from dataclasses import dataclass, field
from types import MappingProxyType
from typing import Any

from zabbix_api.errors import UnsupportedOperationError
from zabbix_api.models.enums import AuthPlacement

_ENTITY_METHODS = frozenset(
    {
        "host.get",
        "host.create",
        "hostgroup.get",
        "hostgroup.create",
        "item.get",
        "item.create",
        "trigger.get",
        "trigger.create",
        "httptest.get",
        "httptest.create",
        "user.get",
        "user.create",
        "usergroup.get",
        "usergroup.create",
    }
)

_SESSION_METHODS = frozenset({"apiinfo.version", "user.login", "user.logout"})

# Template groups were split out of host groups in 6.2. No typed wrapper
# calls them yet; they are listed so raw callers can check V7.supports()
# before using them.
_V7_ONLY_METHODS = frozenset({"templategroup.get", "templategroup.create"})


@dataclass(frozen=True, eq=False)
class ProtocolVariant:
    """Capability descriptor of one server API generation.

    Variants are module-level singletons: they compare and hash by identity
    and copying returns the same object.

    Attributes:
        name: Variant name ("v6" or "v7")
        auth_placement: Where the session token is sent
        methods: API methods available to the typed surface
        param_renames: Method -> {param name -> name on the wire}
        unsupported_params: Method -> params this generation does not accept
    """

    name: str
    auth_placement: AuthPlacement
    methods: frozenset[str]
    param_renames: Mapping[str, Mapping[str, str]] = field(
        default_factory=lambda: MappingProxyType({})
    )
    unsupported_params: Mapping[str, frozenset[str]] = field(
        default_factory=lambda: MappingProxyType({})
    )

    def __copy__(self) -> "ProtocolVariant":
        return self

    def __deepcopy__(self, memo: dict[int, Any]) -> "ProtocolVariant":
        return self

    def supports(self, method: str) -> bool:
        return method in self.methods

    def require(self, method: str) -> None:
        """Raise UnsupportedOperationError if the method is not available."""
        if not self.supports(method):
            raise UnsupportedOperationError(self.name, method)

    def place_auth(self, token: str | None) -> tuple[str | None, dict[str, str]]:
        """Return the ``auth`` body member and extra headers for a token.

        Args:
            token: Session token, or None for calls that carry no auth

        Returns:
            (body auth value or None, headers to add)
        """
        if token is None:
            return None, {}
        if self.auth_placement is AuthPlacement.HEADER:
            return None, {"Authorization": f"Bearer {token}"}
        return token, {}

    def adapt_params(self, method: str, params: dict[str, Any]) -> dict[str, Any]:
        """Apply this generation's field layout to encoded params.

        Raises:
            UnsupportedOperationError: If a param unavailable in this
                generation is set
        """
        for name in self.unsupported_params.get(method, frozenset()):
            if name in params:
                raise UnsupportedOperationError(self.name, f"{method}:{name}")
        renames = self.param_renames.get(method)
        if not renames:
            return params
        return {renames.get(key, key): value for key, value in params.items()}


V6 = ProtocolVariant(
    name="v6",
    auth_placement=AuthPlacement.BODY,
    methods=_ENTITY_METHODS | _SESSION_METHODS,
    param_renames=MappingProxyType(
        {"usergroup.create": MappingProxyType({"hostgroup_rights": "rights"})}
    ),
    unsupported_params=MappingProxyType(
        {"usergroup.create": frozenset({"templategroup_rights"})}
    ),
)

V7 = ProtocolVariant(
    name="v7",
    auth_placement=AuthPlacement.HEADER,
    methods=_ENTITY_METHODS | _SESSION_METHODS | _V7_ONLY_METHODS,
)

VARIANTS: dict[str, ProtocolVariant] = {V6.name: V6, V7.name: V7}


def get_variant(name: str) -> ProtocolVariant:
    """Look up a variant by name ("v6" or "v7", case-insensitive).

    Raises:
        ValueError: If the name is unknown
    """
    try:
        return VARIANTS[name.lower()]
    except KeyError:
        raise ValueError(
            f"Unknown protocol variant '{name}'. Supported: {', '.join(sorted(VARIANTS))}"
        ) from None
