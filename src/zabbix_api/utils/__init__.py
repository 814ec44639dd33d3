"""Utility helpers for the Zabbix API client."""

from zabbix_api.utils.sanitization import sanitize_headers, sanitize_token, sanitize_url

__all__ = ["sanitize_headers", "sanitize_token", "sanitize_url"]
