"""Pytest fixtures for Zabbix API client tests.

Fixtures (use with pytest):
    mock_server: Fresh MockZabbixServer.
    client: V7 client wired to mock_server.
    client_v6: V6 client wired to mock_server.
    offline_client: V7 client whose transport fails the test on any request.
    integration_config: Live server settings from the environment; skips
                        the test when they are not set.

Context managers:
    stub_client(): Sync context manager yielding a client and its stub server.
"""

from contextlib import contextmanager
from typing import Any, Iterator

import pytest

from zabbix_api.client import ZabbixApiClient
from zabbix_api.config import ClientConfig
from zabbix_api.testing.env import IntegrationConfig
from zabbix_api.testing.mocks import FailingTransport, MockZabbixServer

DEFAULT_TEST_URL = "http://localhost:3080/api_jsonrpc.php"


@contextmanager
def stub_client(
    variant: str = "v7", **config: Any
) -> Iterator[tuple[ZabbixApiClient, MockZabbixServer]]:
    """Yield a client talking to a fresh MockZabbixServer.

    Example:
        >>> with stub_client("v6") as (client, server):
        ...     server.add_result("7.0.0")
        ...     client.get_api_info()
        '7.0.0'
    """
    server = MockZabbixServer()
    client = ZabbixApiClient(
        ClientConfig(url=DEFAULT_TEST_URL, variant=variant, **config),
        transport=server.transport,
    )
    try:
        yield client, server
    finally:
        client.close()


@pytest.fixture
def mock_server() -> MockZabbixServer:
    return MockZabbixServer()


@pytest.fixture
def client(mock_server: MockZabbixServer) -> Iterator[ZabbixApiClient]:
    with ZabbixApiClient(
        ClientConfig(url=DEFAULT_TEST_URL, variant="v7"), transport=mock_server.transport
    ) as api_client:
        yield api_client


@pytest.fixture
def client_v6(mock_server: MockZabbixServer) -> Iterator[ZabbixApiClient]:
    with ZabbixApiClient(
        ClientConfig(url=DEFAULT_TEST_URL, variant="v6"), transport=mock_server.transport
    ) as api_client:
        yield api_client


@pytest.fixture
def failing_transport() -> FailingTransport:
    return FailingTransport()


@pytest.fixture
def offline_client(failing_transport: FailingTransport) -> Iterator[ZabbixApiClient]:
    with ZabbixApiClient(
        ClientConfig(url=DEFAULT_TEST_URL), transport=failing_transport
    ) as api_client:
        yield api_client


@pytest.fixture
def integration_config() -> IntegrationConfig:
    config = IntegrationConfig.from_env()
    if config is None:
        pytest.skip("integration tests are disabled (ZABBIX_API_URL/USER/PASSWORD not set)")
    return config
