"""structlog setup for the Zabbix API client.

Log records from structlog and from the standard ``logging`` module go
through one ``ProcessorFormatter`` on stdout, rendered either as colored
console lines (development) or as JSON objects (production).

Environment Variables:
    ZABBIX_API_LOG_FORMAT: "console" (default) or "json"
    ZABBIX_API_LOG_LEVEL: DEBUG, INFO (default), WARNING or ERROR
    ZABBIX_API_SERVICE_NAME: Value of the ``service`` key on every record
    ZABBIX_API_DEBUG: "true"/"1" to log request params without redaction

Example:
    >>> configure_logging(log_format="json", log_level="DEBUG")
    >>> logger = get_logger("zabbix_api.client")
    >>> logger.info("zabbix_api.client.call", method="host.get", request_id=3)
"""

import logging
import os
import sys
from dataclasses import dataclass
from typing import Any, Mapping

import structlog
from structlog.typing import Processor

DEFAULT_LOG_LEVEL = "INFO"
DEFAULT_LOG_FORMAT = "console"
DEFAULT_SERVICE_NAME = "zabbix-api"

ENV_LOG_FORMAT = "ZABBIX_API_LOG_FORMAT"
ENV_LOG_LEVEL = "ZABBIX_API_LOG_LEVEL"
ENV_SERVICE_NAME = "ZABBIX_API_SERVICE_NAME"
ENV_DEBUG = "ZABBIX_API_DEBUG"

REDACTED_PLACEHOLDER = "***REDACTED***"

# Matched as case-insensitive substrings of param names. "passwd" is the
# user.create field, "auth" covers the v6 request member.
SENSITIVE_KEY_FRAGMENTS = ("password", "passwd", "token", "secret", "authorization", "auth")

_TRUTHY = frozenset({"1", "true", "yes", "on"})

_configured = False


@dataclass(frozen=True)
class LogSettings:
    """Resolved logging options."""

    log_format: str = DEFAULT_LOG_FORMAT
    log_level: str = DEFAULT_LOG_LEVEL
    service_name: str = DEFAULT_SERVICE_NAME

    @classmethod
    def from_env(cls, environ: Mapping[str, str] | None = None) -> "LogSettings":
        env = os.environ if environ is None else environ
        return cls(
            log_format=env.get(ENV_LOG_FORMAT, DEFAULT_LOG_FORMAT).lower(),
            log_level=env.get(ENV_LOG_LEVEL, DEFAULT_LOG_LEVEL).upper(),
            service_name=env.get(ENV_SERVICE_NAME, DEFAULT_SERVICE_NAME),
        )


def sanitize_for_logging(data: Any) -> Any:
    """Return a copy of params with credential values replaced.

    Dicts and lists are walked recursively; any other value is returned as
    is.

    Example:
        >>> sanitize_for_logging({"username": "Admin", "password": "zabbix"})
        {'username': 'Admin', 'password': '***REDACTED***'}
        >>> sanitize_for_logging([{"passwd": "x"}, "10105"])
        [{'passwd': '***REDACTED***'}, '10105']
    """
    if isinstance(data, list):
        return [sanitize_for_logging(item) for item in data]
    if not isinstance(data, dict):
        return data
    return {
        key: REDACTED_PLACEHOLDER if _is_sensitive(key) else sanitize_for_logging(value)
        for key, value in data.items()
    }


def _is_sensitive(key: object) -> bool:
    if not isinstance(key, str):
        return False
    lowered = key.lower()
    return any(fragment in lowered for fragment in SENSITIVE_KEY_FRAGMENTS)


def is_debug_mode() -> bool:
    """True when ZABBIX_API_DEBUG asks for unredacted param logging."""
    return os.environ.get(ENV_DEBUG, "").strip().lower() in _TRUTHY


def _pre_chain() -> list[Processor]:
    return [
        structlog.contextvars.merge_contextvars,
        structlog.stdlib.add_log_level,
        structlog.stdlib.add_logger_name,
        structlog.stdlib.PositionalArgumentsFormatter(),
        structlog.processors.TimeStamper(fmt="iso"),
        structlog.processors.StackInfoRenderer(),
        structlog.processors.UnicodeDecoder(),
    ]


def _renderer(log_format: str) -> Processor:
    if log_format == "json":
        return structlog.processors.JSONRenderer()
    return structlog.dev.ConsoleRenderer(
        colors=True, exception_formatter=structlog.dev.plain_traceback
    )


def configure_logging(
    log_format: str | None = None,
    log_level: str | None = None,
    service_name: str | None = None,
    force: bool = False,
) -> None:
    """Install the structlog and stdlib logging configuration.

    Arguments left as None fall back to the environment, then to the
    defaults. Later calls are ignored unless ``force`` is set.

    Args:
        log_format: "json" or "console"
        log_level: Minimum level name
        service_name: Bound as ``service`` on every record
        force: Reconfigure even if logging is already configured
    """
    global _configured

    if _configured and not force:
        return

    env = LogSettings.from_env()
    settings = LogSettings(
        log_format=(log_format or env.log_format).lower(),
        log_level=(log_level or env.log_level).upper(),
        service_name=service_name or env.service_name,
    )
    pre_chain = _pre_chain()

    structlog.configure(
        processors=[*pre_chain, structlog.stdlib.ProcessorFormatter.wrap_for_formatter],
        logger_factory=structlog.stdlib.LoggerFactory(),
        wrapper_class=structlog.stdlib.BoundLogger,
        cache_logger_on_first_use=True,
    )

    handler = logging.StreamHandler(sys.stdout)
    handler.setFormatter(
        structlog.stdlib.ProcessorFormatter(
            foreign_pre_chain=pre_chain,
            processors=[
                structlog.stdlib.ProcessorFormatter.remove_processors_meta,
                _renderer(settings.log_format),
            ],
        )
    )

    root = logging.getLogger()
    root.handlers.clear()
    root.addHandler(handler)
    root.setLevel(getattr(logging, settings.log_level))

    structlog.contextvars.bind_contextvars(service=settings.service_name)
    _configured = True


def get_logger(name: str) -> structlog.stdlib.BoundLogger:
    """Return a logger named ``name``, configuring logging on first use."""
    if not _configured:
        configure_logging()
    return structlog.stdlib.get_logger(name)


def bind_context(**kwargs: Any) -> None:
    """Bind key/values onto every subsequent record in this context.

    Example:
        >>> bind_context(zabbix_url="https://zabbix.example.com/api_jsonrpc.php")
    """
    structlog.contextvars.bind_contextvars(**kwargs)


def clear_context() -> None:
    structlog.contextvars.clear_contextvars()
