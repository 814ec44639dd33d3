"""Tests for the ZabbixApiClient dispatch façade.

Every test runs the full pipeline (mapper, session, variant, envelope codec,
httpx) against MockZabbixServer, so assertions are made on the JSON-RPC
requests that actually went over the wire.
"""

from typing import Any

import httpx
import pytest
from pydantic import ValidationError

from zabbix_api.client import ZabbixApiClient
from zabbix_api.config import ClientConfig
from zabbix_api.errors import (
    ConfigurationError,
    DecodeError,
    EntityNotEnabledError,
    MalformedResponseError,
    NotAuthenticatedError,
    RemoteError,
    TransportError,
    TransportTimeoutError,
    UnsupportedOperationError,
)
from zabbix_api.models import (
    CreateHostRequest,
    EntityKind,
    GetRequest,
    HostGroupId,
    HostInterface,
    HostMacro,
    HostStatus,
    UpdateHostRequest,
    UpdateHostResponse,
)
from zabbix_api.testing import MockZabbixServer, assert_no_auth, assert_token_placement
from zabbix_api.testing.fixtures import DEFAULT_TEST_URL, stub_client
from zabbix_api.testing.mocks import FailingTransport
from zabbix_api.transport.variants import V6, V7

TOKEN = "0424bd59b807674191e7d77572075f33"
SECOND_TOKEN = "8f3a1c2b9d7e6f5a4b3c2d1e0f9a8b7c"


def login(client: ZabbixApiClient, server: MockZabbixServer, token: str = TOKEN) -> None:
    server.add_result(token)
    client.get_auth_session("Admin", "zabbix")


class TestGetApiInfo:
    """Tests for get_api_info()."""

    def test_returns_version_without_auth(
        self, client: ZabbixApiClient, mock_server: MockZabbixServer
    ) -> None:
        """apiinfo.version is sent with empty params and no token."""
        mock_server.add_result("7.0.0")

        assert client.get_api_info() == "7.0.0"

        request = mock_server.last_request
        assert request.method == "apiinfo.version"
        assert request.params == {}
        assert request.body["jsonrpc"] == "2.0"
        assert_no_auth(request)

    def test_no_token_even_when_authenticated(
        self, client: ZabbixApiClient, mock_server: MockZabbixServer
    ) -> None:
        """The server rejects apiinfo.version with a token, so none is attached."""
        login(client, mock_server)
        mock_server.add_result("7.0.0")

        client.get_api_info()

        assert_no_auth(mock_server.last_request)

    def test_non_string_result_is_decode_error(
        self, client: ZabbixApiClient, mock_server: MockZabbixServer
    ) -> None:
        mock_server.add_result({"version": "7.0.0"})

        with pytest.raises(DecodeError) as exc_info:
            client.get_api_info()

        assert exc_info.value.field_path == "result"


class TestGetAuthSession:
    """Tests for login and session state."""

    def test_login_stores_token(
        self, client: ZabbixApiClient, mock_server: MockZabbixServer
    ) -> None:
        """user.login sends username/password without auth and returns the token."""
        mock_server.add_result(TOKEN)

        token = client.get_auth_session("Admin", "zabbix")

        assert token == TOKEN
        assert client.is_authenticated
        request = mock_server.last_request
        assert request.method == "user.login"
        assert request.params == {"username": "Admin", "password": "zabbix"}
        assert_no_auth(request)

    def test_falls_back_to_configured_credentials(self) -> None:
        with stub_client(username="Admin", password="zabbix") as (client, server):
            server.add_result(TOKEN)

            assert client.get_auth_session() == TOKEN
            assert server.last_request.params == {"username": "Admin", "password": "zabbix"}

    def test_missing_credentials_raise_before_io(
        self, offline_client: ZabbixApiClient, failing_transport: FailingTransport
    ) -> None:
        with pytest.raises(ConfigurationError):
            offline_client.get_auth_session()

        assert failing_transport.calls == 0

    def test_rejected_login_leaves_client_unauthenticated(
        self, client: ZabbixApiClient, mock_server: MockZabbixServer
    ) -> None:
        mock_server.add_error(
            -32500,
            "Application error.",
            "Incorrect user name or password or account is temporarily blocked.",
        )

        with pytest.raises(RemoteError) as exc_info:
            client.get_auth_session("Admin", "wrong")

        assert exc_info.value.remote_code == -32500
        assert not client.is_authenticated

    def test_reauthentication_replaces_token(
        self, client: ZabbixApiClient, mock_server: MockZabbixServer
    ) -> None:
        login(client, mock_server)
        login(client, mock_server, token=SECOND_TOKEN)
        mock_server.add_result([])

        client.get_hosts()

        assert_token_placement(mock_server.last_request, SECOND_TOKEN, V7)

    def test_empty_token_is_decode_error(
        self, client: ZabbixApiClient, mock_server: MockZabbixServer
    ) -> None:
        mock_server.add_result("")

        with pytest.raises(DecodeError):
            client.get_auth_session("Admin", "zabbix")

        assert not client.is_authenticated


class TestTokenPlacement:
    """The same typed call places the token where each variant expects it."""

    HOSTS = [{"hostid": "10001", "host": "server1", "name": "Server 1", "status": "0"}]

    def test_v7_sends_bearer_header(
        self, client: ZabbixApiClient, mock_server: MockZabbixServer
    ) -> None:
        login(client, mock_server)
        mock_server.add_result(self.HOSTS)

        hosts = client.get_hosts(GetRequest(filter={"host": ["server1"]}))

        assert len(hosts) == 1
        assert hosts[0].host_id == "10001"
        assert hosts[0].host == "server1"
        request = mock_server.last_request
        assert request.method == "host.get"
        assert request.params == {"output": "extend", "filter": {"host": ["server1"]}}
        assert_token_placement(request, TOKEN, V7)

    def test_v6_sends_auth_member(
        self, client_v6: ZabbixApiClient, mock_server: MockZabbixServer
    ) -> None:
        login(client_v6, mock_server)
        mock_server.add_result(self.HOSTS)

        hosts = client_v6.get_hosts(GetRequest(filter={"host": ["server1"]}))

        assert [host.host_id for host in hosts] == ["10001"]
        assert_token_placement(mock_server.last_request, TOKEN, V6)

    def test_request_ids_increase(
        self, client: ZabbixApiClient, mock_server: MockZabbixServer
    ) -> None:
        mock_server.add_result("7.0.0")
        mock_server.add_result("7.0.0")

        client.get_api_info()
        client.get_api_info()

        assert [request.id for request in mock_server.requests] == [1, 2]


class TestNotAuthenticated:
    """Auth-requiring calls fail before any network I/O without a session."""

    def test_typed_get_before_login(
        self, offline_client: ZabbixApiClient, failing_transport: FailingTransport
    ) -> None:
        with pytest.raises(NotAuthenticatedError) as exc_info:
            offline_client.get_hosts()

        assert exc_info.value.method == "host.get"
        assert failing_transport.calls == 0

    def test_typed_create_before_login(
        self, offline_client: ZabbixApiClient, failing_transport: FailingTransport
    ) -> None:
        with pytest.raises(NotAuthenticatedError):
            offline_client.create_host_group({"name": "Linux servers"})

        assert failing_transport.calls == 0

    def test_raw_call_before_login(
        self, offline_client: ZabbixApiClient, failing_transport: FailingTransport
    ) -> None:
        with pytest.raises(NotAuthenticatedError):
            offline_client.raw_api_call("maintenance.get", {})

        assert failing_transport.calls == 0

    @pytest.mark.parametrize("variant", [None, "v6"])
    def test_default_and_v6_configs_before_login(self, variant: str | None) -> None:
        """No variant given means V7; either way nothing reaches the network."""
        transport = FailingTransport()
        options: dict[str, Any] = {} if variant is None else {"variant": variant}

        with ZabbixApiClient(
            ClientConfig(url=DEFAULT_TEST_URL, **options), transport=transport
        ) as client:
            with pytest.raises(NotAuthenticatedError):
                client.get_users()

        assert client.variant is (V7 if variant is None else V6)
        assert transport.calls == 0


class TestRawApiCall:
    """Tests for raw_api_call()."""

    def test_apiinfo_version_unauthenticated(
        self, client: ZabbixApiClient, mock_server: MockZabbixServer
    ) -> None:
        mock_server.add_result("6.4.0")

        assert client.raw_api_call("apiinfo.version", {}) == "6.4.0"
        assert_no_auth(mock_server.last_request)

    def test_params_and_result_pass_through(
        self, client_v6: ZabbixApiClient, mock_server: MockZabbixServer
    ) -> None:
        """Params are sent as given and the result comes back unmodified."""
        login(client_v6, mock_server)
        result = {"maintenanceids": ["3"], "extra": [1, None, {"nested": True}]}
        mock_server.add_result(result)
        params: Any = ["3"]

        assert client_v6.raw_api_call("maintenance.delete", params) == result

        request = mock_server.last_request
        assert request.method == "maintenance.delete"
        assert request.params == ["3"]
        assert_token_placement(request, TOKEN, V6)

    def test_host_update_through_raw_call(
        self, client: ZabbixApiClient, mock_server: MockZabbixServer
    ) -> None:
        """Methods without a typed wrapper take typed shapes via to_wire()."""
        login(client, mock_server)
        mock_server.add_result({"hostids": ["10105"]})

        result = client.raw_api_call(
            "host.update", UpdateHostRequest.disable_host("10105").to_wire()
        )

        assert UpdateHostResponse.model_validate(result).host_ids == ["10105"]
        request = mock_server.last_request
        assert request.method == "host.update"
        assert request.params == {"hostid": "10105", "status": HostStatus.DISABLED.value}
        assert_token_placement(request, TOKEN, V7)

    def test_none_params_sent_as_empty_object(
        self, client: ZabbixApiClient, mock_server: MockZabbixServer
    ) -> None:
        mock_server.add_result("7.0.0")

        client.raw_api_call("apiinfo.version")

        assert mock_server.last_request.params == {}

    def test_raw_login_does_not_update_session(
        self, client: ZabbixApiClient, mock_server: MockZabbixServer
    ) -> None:
        mock_server.add_result(TOKEN)

        assert client.raw_api_call("user.login", {"username": "Admin", "password": "zabbix"}) == TOKEN
        assert not client.is_authenticated

    def test_not_gated_by_enabled_entities(self) -> None:
        with stub_client(entities={EntityKind.HOST}) as (client, server):
            login(client, server)
            server.add_result([{"itemid": "23296", "name": "CPU load"}])

            result = client.raw_api_call("item.get", {"output": ["itemid", "name"]})

            assert result == [{"itemid": "23296", "name": "CPU load"}]


class TestFailures:
    """Remote, envelope and transport failures surface as typed errors."""

    def test_remote_error_surfaces_unchanged(
        self, client: ZabbixApiClient, mock_server: MockZabbixServer
    ) -> None:
        login(client, mock_server)
        mock_server.add_error(
            -32602, "Invalid params.", "No permissions to referred object or it does not exist!"
        )

        with pytest.raises(RemoteError) as exc_info:
            client.get_hosts()

        error = exc_info.value
        assert error.remote_code == -32602
        assert error.remote_message == "Invalid params."
        assert error.data == "No permissions to referred object or it does not exist!"

    def test_both_result_and_error_is_malformed(
        self, client: ZabbixApiClient, mock_server: MockZabbixServer
    ) -> None:
        mock_server.add_envelope(
            {
                "jsonrpc": "2.0",
                "result": "7.0.0",
                "error": {"code": -32602, "message": "Invalid params.", "data": ""},
                "id": 1,
            }
        )

        with pytest.raises(MalformedResponseError):
            client.get_api_info()

    def test_neither_result_nor_error_is_malformed(
        self, client: ZabbixApiClient, mock_server: MockZabbixServer
    ) -> None:
        mock_server.add_envelope({"jsonrpc": "2.0", "id": 1})

        with pytest.raises(MalformedResponseError):
            client.get_api_info()

    def test_http_error_status(
        self, client: ZabbixApiClient, mock_server: MockZabbixServer
    ) -> None:
        mock_server.add_raw("<html>Bad Gateway</html>", status_code=502)

        with pytest.raises(TransportError) as exc_info:
            client.get_api_info()

        assert exc_info.value.status_code == 502

    def test_connection_refused(
        self, client: ZabbixApiClient, mock_server: MockZabbixServer
    ) -> None:
        mock_server.add_exception(httpx.ConnectError("Connection refused"))

        with pytest.raises(TransportError) as exc_info:
            client.get_api_info()

        assert isinstance(exc_info.value.cause, httpx.ConnectError)

    def test_timeout(self, client: ZabbixApiClient, mock_server: MockZabbixServer) -> None:
        mock_server.add_exception(httpx.ReadTimeout("timed out"))

        with pytest.raises(TransportTimeoutError) as exc_info:
            client.get_api_info()

        assert exc_info.value.timeout == client.config.timeout

    def test_mismatched_response_id_is_tolerated(
        self, client: ZabbixApiClient, mock_server: MockZabbixServer
    ) -> None:
        mock_server.add_result("7.0.0", request_id=99)

        assert client.get_api_info() == "7.0.0"

    @pytest.mark.parametrize("request_id", ["99", 1.5, {"x": 1}])
    def test_non_integer_response_id_is_tolerated(
        self, client: ZabbixApiClient, mock_server: MockZabbixServer, request_id: Any
    ) -> None:
        mock_server.add_result("7.0.0", request_id=request_id)

        assert client.get_api_info() == "7.0.0"


class TestTypedGet:
    """Tests for the typed get_* methods."""

    def test_empty_result_is_empty_list(
        self, client: ZabbixApiClient, mock_server: MockZabbixServer
    ) -> None:
        login(client, mock_server)
        mock_server.add_result([])

        assert client.get_hosts() == []

    def test_default_params(
        self, client: ZabbixApiClient, mock_server: MockZabbixServer
    ) -> None:
        login(client, mock_server)
        mock_server.add_result([{"groupid": "2", "name": "Linux servers"}])

        groups = client.get_host_groups()

        assert groups[0].group_id == "2"
        assert mock_server.last_request.method == "hostgroup.get"
        assert mock_server.last_request.params == {"output": "extend"}

    def test_mapping_input_sent_as_is(
        self, client: ZabbixApiClient, mock_server: MockZabbixServer
    ) -> None:
        login(client, mock_server)
        mock_server.add_result([])
        params = {"output": ["itemid", "name"], "hostids": ["10084"], "search": {"key_": "cpu"}}

        client.get_items(params)

        assert mock_server.last_request.params == params

    def test_webscenarios_select_steps_by_default(
        self, client: ZabbixApiClient, mock_server: MockZabbixServer
    ) -> None:
        login(client, mock_server)
        mock_server.add_result(
            [
                {
                    "httptestid": "5",
                    "name": "Homepage",
                    "hostid": "10084",
                    "steps": [
                        {"httpstepid": "9", "name": "Home", "url": "https://example.com", "no": "1"}
                    ],
                }
            ]
        )

        scenarios = client.get_webscenarios()

        assert mock_server.last_request.method == "httptest.get"
        assert mock_server.last_request.params["selectSteps"] == "extend"
        assert scenarios[0].steps is not None
        assert scenarios[0].steps[0].no == 1

    def test_users_and_groups(
        self, client: ZabbixApiClient, mock_server: MockZabbixServer
    ) -> None:
        login(client, mock_server)
        mock_server.add_result([{"userid": "1", "username": "Admin", "roleid": "3"}])
        mock_server.add_result(
            [{"usrgrpid": "7", "name": "Zabbix administrators", "users": [{"userid": "1"}]}]
        )

        users = client.get_users()
        groups = client.get_user_groups({"output": "extend", "selectUsers": ["userid"]})

        assert users[0].username == "Admin"
        assert groups[0].users is not None
        assert groups[0].users[0].user_id == "1"

    def test_triggers_accept_numeric_strings(
        self, client: ZabbixApiClient, mock_server: MockZabbixServer
    ) -> None:
        login(client, mock_server)
        mock_server.add_result(
            [
                {
                    "triggerid": "13491",
                    "description": "High CPU load",
                    "expression": "{13491}>5",
                    "priority": "4",
                }
            ]
        )

        triggers = client.get_triggers()

        assert triggers[0].priority == 4

    def test_malformed_record_reports_field_path(
        self, client: ZabbixApiClient, mock_server: MockZabbixServer
    ) -> None:
        login(client, mock_server)
        mock_server.add_result([{"hostid": "10001", "host": "server1"}, {"host": "server2"}])

        with pytest.raises(DecodeError) as exc_info:
            client.get_hosts()

        assert exc_info.value.field_path == "result[1].hostid"


class TestTypedCreate:
    """Tests for the typed create_* methods."""

    @pytest.mark.parametrize(
        ("method_name", "api_method", "payload", "ids_field"),
        [
            (
                "create_host",
                "host.create",
                {"host": "server1", "groups": [{"groupid": "2"}]},
                "hostids",
            ),
            ("create_host_group", "hostgroup.create", {"name": "Linux servers"}, "groupids"),
            (
                "create_item",
                "item.create",
                {
                    "name": "CPU load",
                    "key_": "system.cpu.load[all,avg1]",
                    "hostid": "10084",
                    "type": 0,
                    "value_type": 0,
                    "interfaceid": "1",
                    "delay": "1m",
                },
                "itemids",
            ),
            (
                "create_trigger",
                "trigger.create",
                {
                    "description": "High CPU load on {HOST.NAME}",
                    "expression": "last(/server1/system.cpu.load[all,avg1])>5",
                    "priority": 4,
                },
                "triggerids",
            ),
            (
                "create_webscenario",
                "httptest.create",
                {
                    "name": "Homepage",
                    "hostid": "10084",
                    "steps": [
                        {"name": "Home", "url": "https://example.com", "no": 1, "status_codes": "200"}
                    ],
                },
                "httptestids",
            ),
            (
                "create_user",
                "user.create",
                {
                    "username": "jdoe",
                    "passwd": "Str0ng-Passw0rd",
                    "roleid": "1",
                    "usrgrps": [{"usrgrpid": "7"}],
                },
                "userids",
            ),
            ("create_user_group", "usergroup.create", {"name": "Operators"}, "usrgrpids"),
        ],
    )
    def test_returns_first_created_id(
        self,
        client: ZabbixApiClient,
        mock_server: MockZabbixServer,
        method_name: str,
        api_method: str,
        payload: dict[str, Any],
        ids_field: str,
    ) -> None:
        login(client, mock_server)
        mock_server.add_result({ids_field: ["10105"]})

        object_id = getattr(client, method_name)(payload)

        assert object_id == "10105"
        request = mock_server.last_request
        assert request.method == api_method
        for key, value in payload.items():
            assert request.params[key] == value
        assert_token_placement(request, TOKEN, V7)

    def test_typed_request_is_sent_in_wire_form(
        self, client: ZabbixApiClient, mock_server: MockZabbixServer
    ) -> None:
        login(client, mock_server)
        mock_server.add_result({"hostids": ["10105"]})
        request = CreateHostRequest(
            host="server1",
            groups=[HostGroupId(group_id="2")],
            interfaces=[HostInterface(interface_type=1, main=1, use_ip=1, ip="192.0.2.10")],
            macros=[HostMacro.secret("{$DB_PASSWORD}", "s3cr3t")],
        )

        client.create_host(request)

        params = mock_server.last_request.params
        assert params["groups"] == [{"groupid": "2"}]
        assert params["interfaces"] == [
            {"type": 1, "main": 1, "useip": 1, "ip": "192.0.2.10", "dns": "", "port": "10050"}
        ]
        assert params["macros"] == [{"macro": "{$DB_PASSWORD}", "value": "s3cr3t", "type": "1"}]

    def test_empty_id_list_is_decode_error(
        self, client: ZabbixApiClient, mock_server: MockZabbixServer
    ) -> None:
        login(client, mock_server)
        mock_server.add_result({"groupids": []})

        with pytest.raises(DecodeError) as exc_info:
            client.create_host_group({"name": "Linux servers"})

        assert exc_info.value.field_path == "result.groupids"

    def test_invalid_input_fails_before_io(
        self, offline_client: ZabbixApiClient, failing_transport: FailingTransport
    ) -> None:
        with pytest.raises(ValidationError):
            offline_client.create_host({"host": "server1", "groups": []})

        assert failing_transport.calls == 0


class TestVariantAdaptation:
    """Per-variant parameter layout on usergroup.create."""

    RIGHTS = [{"id": "2", "permission": 2}]

    def test_v6_renames_hostgroup_rights(
        self, client_v6: ZabbixApiClient, mock_server: MockZabbixServer
    ) -> None:
        login(client_v6, mock_server)
        mock_server.add_result({"usrgrpids": ["13"]})

        client_v6.create_user_group({"name": "Operators", "hostgroup_rights": self.RIGHTS})

        assert mock_server.last_request.params == {"name": "Operators", "rights": self.RIGHTS}

    def test_v7_keeps_hostgroup_rights(
        self, client: ZabbixApiClient, mock_server: MockZabbixServer
    ) -> None:
        login(client, mock_server)
        mock_server.add_result({"usrgrpids": ["13"]})

        client.create_user_group(
            {"name": "Operators", "hostgroup_rights": self.RIGHTS, "templategroup_rights": self.RIGHTS}
        )

        params = mock_server.last_request.params
        assert params["hostgroup_rights"] == self.RIGHTS
        assert params["templategroup_rights"] == self.RIGHTS

    def test_v6_rejects_templategroup_rights(
        self, client_v6: ZabbixApiClient, mock_server: MockZabbixServer
    ) -> None:
        login(client_v6, mock_server)

        with pytest.raises(UnsupportedOperationError):
            client_v6.create_user_group({"name": "Operators", "templategroup_rights": self.RIGHTS})

        assert len(mock_server.requests) == 1


class TestEntityGating:
    """Typed methods are available only for enabled entity kinds."""

    def test_disabled_kind_raises_before_io(self) -> None:
        with stub_client(entities={EntityKind.HOST, EntityKind.HOST_GROUP}) as (client, server):
            login(client, server)

            with pytest.raises(EntityNotEnabledError) as exc_info:
                client.get_items()

            assert exc_info.value.kind == "item"
            assert len(server.requests) == 1
            assert client.entity_kinds == frozenset({EntityKind.HOST, EntityKind.HOST_GROUP})

    def test_enabled_kind_still_works(self) -> None:
        with stub_client(entities={"host"}) as (client, server):
            login(client, server)
            server.add_result([])

            assert client.get_hosts() == []


class TestLogout:
    """Tests for logout()."""

    def test_logout_sends_token_and_clears_session(
        self, client_v6: ZabbixApiClient, mock_server: MockZabbixServer
    ) -> None:
        login(client_v6, mock_server)
        mock_server.add_result(True)

        client_v6.logout()

        request = mock_server.last_request
        assert request.method == "user.logout"
        assert request.params == []
        assert_token_placement(request, TOKEN, V6)
        assert not client_v6.is_authenticated

    def test_session_cleared_when_logout_fails(
        self, client: ZabbixApiClient, mock_server: MockZabbixServer
    ) -> None:
        login(client, mock_server)
        mock_server.add_error(-32602, "Invalid params.", "Session terminated, re-login, please.")

        with pytest.raises(RemoteError):
            client.logout()

        assert not client.is_authenticated


class TestLifecycle:
    def test_context_manager_closes_http_client(self) -> None:
        with stub_client() as (client, _server):
            pass

        assert client._http.is_closed
