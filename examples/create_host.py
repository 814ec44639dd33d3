"""Create a host group and a host with an agent interface in it.

Usage:
    python examples/create_host.py --group "Example servers" --host web-01 --ip 192.0.2.10
"""

from __future__ import annotations

import argparse
import sys
from typing import Sequence

from zabbix_api import CreateHostRequest, GetRequest, ZabbixApiClient
from zabbix_api.models import HostGroupId, HostInterface, HostTag
from zabbix_api.observability import get_logger
from zabbix_api.testing.env import IntegrationConfig

logger = get_logger(__name__)

AGENT_INTERFACE = 1


def parse_args(argv: Sequence[str] | None = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Create a host group and a host.")
    parser.add_argument("--group", required=True, help="Host group name (created if missing).")
    parser.add_argument("--host", required=True, help="Technical host name.")
    parser.add_argument("--ip", default="127.0.0.1", help="Agent interface IP address.")
    return parser.parse_args(argv)


def ensure_group(client: ZabbixApiClient, name: str) -> str:
    """Return the id of the named host group, creating it if needed."""
    existing = client.get_host_groups(GetRequest(filter={"name": [name]}))
    if existing:
        return existing[0].group_id
    return client.create_host_group({"name": name})


def main(argv: Sequence[str] | None = None) -> int:
    args = parse_args(argv)
    settings = IntegrationConfig.from_env()
    if settings is None:
        print("Set ZABBIX_API_URL, ZABBIX_API_USER and ZABBIX_API_PASSWORD", file=sys.stderr)
        return 1

    with ZabbixApiClient(settings.to_client_config()) as client:
        client.get_auth_session()
        try:
            group_id = ensure_group(client, args.group)
            host_id = client.create_host(
                CreateHostRequest(
                    host=args.host,
                    groups=[HostGroupId(group_id=group_id)],
                    interfaces=[
                        HostInterface(interface_type=AGENT_INTERFACE, main=1, use_ip=1, ip=args.ip)
                    ],
                    tags=[HostTag(tag="created-by", value="zabbix-api")],
                )
            )
        finally:
            client.logout()

    logger.info("examples.create_host.created", group_id=group_id, host_id=host_id)
    print(f"Created host {args.host} ({host_id}) in group {args.group} ({group_id})")
    return 0


if __name__ == "__main__":
    sys.exit(main())
