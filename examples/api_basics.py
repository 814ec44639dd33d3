"""API basics example for the Zabbix API client.

Reads the endpoint and credentials from ZABBIX_API_URL, ZABBIX_API_USER and
ZABBIX_API_PASSWORD (optionally ZABBIX_API_VARIANT), prints the server API
version, logs in and logs out again.
"""

from __future__ import annotations

import argparse
import sys
from typing import Sequence

from zabbix_api import ZabbixApiClient
from zabbix_api.observability import get_logger
from zabbix_api.testing.env import IntegrationConfig

logger = get_logger(__name__)


def parse_args(argv: Sequence[str] | None = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Show the Zabbix API version and log in.")
    parser.add_argument(
        "--insecure",
        action="store_true",
        help="Accept self-signed TLS certificates.",
    )
    return parser.parse_args(argv)


def main(argv: Sequence[str] | None = None) -> int:
    """Print the API version and check that the credentials work."""
    args = parse_args(argv)
    settings = IntegrationConfig.from_env()
    if settings is None:
        print("Set ZABBIX_API_URL, ZABBIX_API_USER and ZABBIX_API_PASSWORD", file=sys.stderr)
        return 1

    config = settings.to_client_config(verify_tls=not args.insecure)
    with ZabbixApiClient(config) as client:
        print(f"Zabbix API version: {client.get_api_info()}")
        client.get_auth_session()
        logger.info("examples.api_basics.logged_in", variant=config.variant.name)
        client.logout()
    return 0


if __name__ == "__main__":
    sys.exit(main())
