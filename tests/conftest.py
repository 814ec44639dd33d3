"""Shared pytest configuration for Zabbix API client tests.

Fixtures come from zabbix_api.testing.fixtures: mock_server, client,
client_v6, failing_transport, offline_client, integration_config.
"""

pytest_plugins = ["zabbix_api.testing.fixtures"]
