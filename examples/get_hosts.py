"""List hosts, optionally filtered by a name substring.

Usage:
    python examples/get_hosts.py --search web --limit 20
"""

from __future__ import annotations

import argparse
import sys
from typing import Sequence

from zabbix_api import GetRequest, ZabbixApiClient
from zabbix_api.models import HostStatus
from zabbix_api.testing.env import IntegrationConfig


def parse_args(argv: Sequence[str] | None = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="List Zabbix hosts.")
    parser.add_argument("--search", help="Substring of the technical host name.")
    parser.add_argument("--limit", type=int, default=50, help="Maximum hosts to list.")
    return parser.parse_args(argv)


def build_request(search: str | None, limit: int) -> GetRequest:
    return GetRequest(
        output=["hostid", "host", "name", "status"],
        search={"host": search} if search else None,
        limit=limit,
        sortfield="host",
    )


def main(argv: Sequence[str] | None = None) -> int:
    args = parse_args(argv)
    settings = IntegrationConfig.from_env()
    if settings is None:
        print("Set ZABBIX_API_URL, ZABBIX_API_USER and ZABBIX_API_PASSWORD", file=sys.stderr)
        return 1

    with ZabbixApiClient(settings.to_client_config()) as client:
        client.get_auth_session()
        try:
            hosts = client.get_hosts(build_request(args.search, args.limit))
        finally:
            client.logout()

    for host in hosts:
        state = "disabled" if host.status is HostStatus.DISABLED else "enabled"
        print(f"{host.host_id:>8}  {host.host:<32} {state}")
    return 0


if __name__ == "__main__":
    sys.exit(main())
