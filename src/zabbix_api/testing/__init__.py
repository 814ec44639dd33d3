"""Testing utilities for code built on the Zabbix API client.

Modules:
    mocks: MockZabbixServer (queued JSON-RPC responses, request recording)
           and FailingTransport (fails on any network call).
    fixtures: Pytest fixtures (mock_server, client, client_v6,
              offline_client, integration_config) and stub_client().
    assertions: assert_token_placement, assert_no_auth.
    env: IntegrationConfig for live tests driven by environment variables.

Example:
    >>> from zabbix_api.testing import MockZabbixServer, assert_token_placement
    >>> # in conftest.py
    >>> pytest_plugins = ["zabbix_api.testing.fixtures"]
"""

from zabbix_api.testing.assertions import assert_no_auth, assert_token_placement
from zabbix_api.testing.env import IntegrationConfig
from zabbix_api.testing.mocks import FailingTransport, MockZabbixServer, RecordedRequest

__all__ = [
    "FailingTransport",
    "IntegrationConfig",
    "MockZabbixServer",
    "RecordedRequest",
    "assert_no_auth",
    "assert_token_placement",
]
