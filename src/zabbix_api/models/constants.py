"""Constants for the Zabbix JSON-RPC API.

This module defines protocol-wide constants used across the codebase.
"""

JSON_RPC_VERSION = "2.0"

CONTENT_TYPE_JSON = "application/json"

EXTEND = "extend"
"""Value of ``output``/``select*`` params asking the server for all fields."""

API_INFO_METHOD = "apiinfo.version"
LOGIN_METHOD = "user.login"
LOGOUT_METHOD = "user.logout"

NO_AUTH_METHODS = frozenset({API_INFO_METHOD, LOGIN_METHOD})
"""Methods the server accepts without a session token.

``apiinfo.version`` is rejected by the server when a token is attached.
"""

DEFAULT_TIMEOUT = 30.0
"""Default HTTP timeout in seconds for a single API call."""
