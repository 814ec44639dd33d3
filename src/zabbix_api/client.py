"""Synchronous client for the Zabbix JSON-RPC API.

ZabbixApiClient is the public surface of the package. It offers:
- get_api_info() and get_auth_session() for the session lifecycle
- typed get/create methods per entity kind
- raw_api_call() for any server method without a typed wrapper

Every method goes through the same pipeline:

    entity mapper (encode) -> session token -> variant auth placement
    -> envelope encode -> HTTP POST -> envelope decode
    -> entity mapper (decode)

Example:
    >>> from zabbix_api import ClientConfig, GetRequest, ZabbixApiClient
    >>>
    >>> config = ClientConfig(url="https://zabbix.example.com/api_jsonrpc.php")
    >>> with ZabbixApiClient(config) as client:
    ...     client.get_auth_session("Admin", "zabbix")
    ...     hosts = client.get_hosts(GetRequest(filter={"host": ["server1"]}))
"""

import itertools
from collections.abc import Mapping
from types import TracebackType
from typing import Any, Optional

import httpx

from zabbix_api.config import ClientConfig
from zabbix_api.entities.base import GetInput
from zabbix_api.entities.registry import MapperRegistry
from zabbix_api.errors import ConfigurationError, DecodeError, ZabbixApiError
from zabbix_api.models.constants import API_INFO_METHOD, LOGIN_METHOD, LOGOUT_METHOD
from zabbix_api.models.enums import EntityKind, Operation
from zabbix_api.models.host import CreateHostRequest, Host
from zabbix_api.models.hostgroup import CreateHostGroupRequest, HostGroup
from zabbix_api.models.item import CreateItemRequest, Item
from zabbix_api.models.trigger import CreateTriggerRequest, Trigger
from zabbix_api.models.types import ObjectID, SessionToken
from zabbix_api.models.user import CreateUserRequest, User
from zabbix_api.models.usergroup import CreateUserGroupRequest, UserGroup
from zabbix_api.models.webscenario import CreateWebScenarioRequest, WebScenario
from zabbix_api.observability import get_logger, is_debug_mode, sanitize_for_logging
from zabbix_api.session import SessionManager
from zabbix_api.transport.http import HttpTransport
from zabbix_api.transport.jsonrpc import decode_response, encode_request
from zabbix_api.utils.sanitization import sanitize_url

logger = get_logger(__name__)


class ZabbixApiClient:
    """Client bound to one endpoint and one protocol variant.

    A client instance may be shared between threads: the session token is
    guarded by the session manager and the request id counter is an
    ``itertools.count``. Calls are not serialized.

    Attributes:
        config: Client configuration
        variant: Protocol variant the client is bound to
    """

    def __init__(
        self,
        config: ClientConfig,
        transport: Optional[httpx.BaseTransport] = None,
    ) -> None:
        """Initialize the client.

        Args:
            config: Client configuration
            transport: Optional custom httpx transport (for testing), e.g.
                httpx.MockTransport
        """
        self.config = config
        self.variant = config.variant
        self._http = HttpTransport(
            timeout=config.timeout,
            verify_tls=config.verify_tls,
            transport=transport,
        )
        self._session = SessionManager()
        self._mappers = MapperRegistry(config.entities)
        self._request_counter = itertools.count(1)

        if not config.verify_tls:
            logger.warning(
                "zabbix_api.client.tls_verification_disabled",
                url=sanitize_url(config.url),
            )

    def __enter__(self) -> "ZabbixApiClient":
        return self

    def __exit__(
        self,
        exc_type: type[BaseException] | None,
        exc_val: BaseException | None,
        exc_tb: TracebackType | None,
    ) -> None:
        self.close()

    def close(self) -> None:
        """Close the underlying HTTP client."""
        self._http.close()

    @property
    def is_authenticated(self) -> bool:
        return self._session.is_authenticated

    @property
    def entity_kinds(self) -> frozenset[EntityKind]:
        """Entity kinds with typed methods on this client."""
        return self._mappers.kinds

    # Session

    def get_api_info(self) -> str:
        """Return the server API version. Does not require a session.

        Raises:
            DecodeError: If the result is not a string
        """
        result = self._call(API_INFO_METHOD, {})
        if not isinstance(result, str):
            raise DecodeError("result", f"expected a version string, got {type(result).__name__}")
        logger.info("zabbix_api.client.api_version", version=result)
        return result

    def get_auth_session(
        self, username: str | None = None, password: str | None = None
    ) -> SessionToken:
        """Log in and store the session token for subsequent calls.

        Calling again re-authenticates and replaces the stored token.

        Args:
            username: Login name; defaults to ClientConfig.username
            password: Password; defaults to ClientConfig.password

        Returns:
            The session token

        Raises:
            ConfigurationError: If no credentials are given or configured
            RemoteError: If the server rejects the login
        """
        if username is None or password is None:
            configured = self.config.credentials()
            if configured is None:
                raise ConfigurationError(
                    "No credentials given and none configured in ClientConfig"
                )
            username = username if username is not None else configured[0]
            password = password if password is not None else configured[1]

        logger.info("zabbix_api.client.login", username=username)
        return self._session.authenticate(self._login, username, password)

    def logout(self) -> None:
        """End the server session and forget the token.

        The token is forgotten even if the server call fails.
        """
        try:
            self._call(LOGOUT_METHOD, [])
        finally:
            self._session.clear()

    def raw_api_call(self, method: str, params: Any = None) -> Any:
        """Call any API method and return its raw result.

        Params are sent as given, without local validation. The session token
        is attached unless the method is one that takes no auth
        (``apiinfo.version``, ``user.login``). Logging in through this method
        does not update the client's session.

        Args:
            method: API method, e.g. ``"maintenance.get"``
            params: JSON-ready params; None is sent as ``{}``

        Returns:
            The ``result`` member of the response, unmodified
        """
        return self._call(method, params)

    # Hosts

    def get_hosts(self, request: GetInput = None) -> list[Host]:
        """Return hosts matching ``request`` (``host.get``)."""
        return self._get(EntityKind.HOST, request)

    def create_host(self, request: CreateHostRequest | Mapping[str, Any]) -> ObjectID:
        """Create a host and return its id (``host.create``)."""
        return self._create(EntityKind.HOST, request)

    # Host groups

    def get_host_groups(self, request: GetInput = None) -> list[HostGroup]:
        return self._get(EntityKind.HOST_GROUP, request)

    def create_host_group(self, request: CreateHostGroupRequest | Mapping[str, Any]) -> ObjectID:
        return self._create(EntityKind.HOST_GROUP, request)

    # Items

    def get_items(self, request: GetInput = None) -> list[Item]:
        return self._get(EntityKind.ITEM, request)

    def create_item(self, request: CreateItemRequest | Mapping[str, Any]) -> ObjectID:
        return self._create(EntityKind.ITEM, request)

    # Triggers

    def get_triggers(self, request: GetInput = None) -> list[Trigger]:
        return self._get(EntityKind.TRIGGER, request)

    def create_trigger(self, request: CreateTriggerRequest | Mapping[str, Any]) -> ObjectID:
        return self._create(EntityKind.TRIGGER, request)

    # Web scenarios

    def get_webscenarios(self, request: GetInput = None) -> list[WebScenario]:
        """Return web scenarios (``httptest.get``), steps included by default."""
        return self._get(EntityKind.WEB_SCENARIO, request)

    def create_webscenario(
        self, request: CreateWebScenarioRequest | Mapping[str, Any]
    ) -> ObjectID:
        return self._create(EntityKind.WEB_SCENARIO, request)

    # Users

    def get_users(self, request: GetInput = None) -> list[User]:
        return self._get(EntityKind.USER, request)

    def create_user(self, request: CreateUserRequest | Mapping[str, Any]) -> ObjectID:
        return self._create(EntityKind.USER, request)

    # User groups

    def get_user_groups(self, request: GetInput = None) -> list[UserGroup]:
        return self._get(EntityKind.USER_GROUP, request)

    def create_user_group(self, request: CreateUserGroupRequest | Mapping[str, Any]) -> ObjectID:
        return self._create(EntityKind.USER_GROUP, request)

    # Pipeline

    def _login(self, username: str, password: str) -> Any:
        return self._call(LOGIN_METHOD, {"username": username, "password": password})

    def _get(self, kind: EntityKind, request: GetInput) -> Any:
        mapper = self._mappers.get(kind)
        method = mapper.method(Operation.GET)
        self.variant.require(method)
        params = mapper.encode_params(Operation.GET, request, self.variant)
        records = mapper.decode_result(Operation.GET, self._call(method, params))
        logger.info("zabbix_api.client.records", method=method, count=len(records))
        return records

    def _create(self, kind: EntityKind, request: Any) -> ObjectID:
        mapper = self._mappers.get(kind)
        method = mapper.method(Operation.CREATE)
        self.variant.require(method)
        params = mapper.encode_params(Operation.CREATE, request, self.variant)
        ids = mapper.decode_result(Operation.CREATE, self._call(method, params))
        logger.info("zabbix_api.client.created", method=method, object_id=ids[0])
        return ids[0]

    def _call(self, method: str, params: Any) -> Any:
        """Send one JSON-RPC call and return its result.

        Raises:
            NotAuthenticatedError: Before any I/O, if the method needs a
                session and none is established
            TransportError: On HTTP failure
            MalformedResponseError: If the response is not a valid envelope
            RemoteError: If the server returns an error object
        """
        token = self._session.token_for(method)
        auth, headers = self.variant.place_auth(token)
        request_id = next(self._request_counter)
        body = encode_request(method, params, request_id, auth=auth)

        logger.info(
            "zabbix_api.client.call",
            method=method,
            request_id=request_id,
            variant=self.variant.name,
        )
        logger.debug(
            "zabbix_api.client.params",
            method=method,
            params=params if is_debug_mode() else sanitize_for_logging(params),
        )

        try:
            response = decode_response(self._http.send(self.config.url, body, headers))
        except ZabbixApiError as e:
            logger.error(
                "zabbix_api.client.call_failed",
                method=method,
                request_id=request_id,
                error_code=e.code,
                error=e.message,
                details=e.details,
            )
            raise

        if response.id != request_id:
            logger.debug(
                "zabbix_api.client.id_mismatch",
                method=method,
                request_id=request_id,
                response_id=response.id,
            )
        logger.debug("zabbix_api.client.result", method=method, request_id=request_id)
        return response.result
