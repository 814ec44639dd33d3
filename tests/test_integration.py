"""Live tests against a real Zabbix frontend.

Skipped unless ZABBIX_API_URL, ZABBIX_API_USER and ZABBIX_API_PASSWORD are
set. They only read from the server.
"""

from collections.abc import Iterator

import pytest

from zabbix_api.client import ZabbixApiClient
from zabbix_api.models import GetRequest
from zabbix_api.testing import IntegrationConfig


@pytest.fixture
def live_client(integration_config: IntegrationConfig) -> Iterator[ZabbixApiClient]:
    with ZabbixApiClient(integration_config.to_client_config()) as client:
        yield client


class TestLiveServer:
    def test_api_version(self, live_client: ZabbixApiClient) -> None:
        version = live_client.get_api_info()

        assert version.split(".")[0].isdigit()

    def test_login_and_read(self, live_client: ZabbixApiClient) -> None:
        live_client.get_auth_session()
        try:
            groups = live_client.get_host_groups(GetRequest(limit=5))
            hosts = live_client.raw_api_call("host.get", {"output": ["hostid"], "limit": 5})
        finally:
            live_client.logout()

        assert all(group.group_id for group in groups)
        assert isinstance(hosts, list)
