"""Call any API method that has no typed wrapper.

Usage:
    python examples/raw_api_call.py problem.get '{"recent": true, "limit": 10}'
"""

from __future__ import annotations

import argparse
import json
import sys
from typing import Sequence

from zabbix_api import ZabbixApiClient, ZabbixApiError
from zabbix_api.models import NO_AUTH_METHODS
from zabbix_api.testing.env import IntegrationConfig


def parse_args(argv: Sequence[str] | None = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Call a Zabbix API method.")
    parser.add_argument("method", help="API method, e.g. problem.get")
    parser.add_argument("params", nargs="?", default="{}", help="JSON params (default: {}).")
    return parser.parse_args(argv)


def main(argv: Sequence[str] | None = None) -> int:
    args = parse_args(argv)
    settings = IntegrationConfig.from_env()
    if settings is None:
        print("Set ZABBIX_API_URL, ZABBIX_API_USER and ZABBIX_API_PASSWORD", file=sys.stderr)
        return 1

    with ZabbixApiClient(settings.to_client_config()) as client:
        needs_session = args.method not in NO_AUTH_METHODS
        if needs_session:
            client.get_auth_session()
        try:
            result = client.raw_api_call(args.method, json.loads(args.params))
        except ZabbixApiError as e:
            print(json.dumps(e.to_dict(), indent=2), file=sys.stderr)
            return 2
        finally:
            if needs_session:
                client.logout()

    print(json.dumps(result, indent=2))
    return 0


if __name__ == "__main__":
    sys.exit(main())
