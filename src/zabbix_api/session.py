"""Session token lifecycle.

The session manager holds the token returned by ``user.login`` and hands it
out to calls that need it. States:

    Unauthenticated --authenticate()--> Authenticated(token)
    Authenticated   --authenticate()--> Authenticated(new token)
    Authenticated   --clear()---------> Unauthenticated

There is no automatic renewal: if the server invalidates the token, the
next call fails with the server's RemoteError.
"""

import threading
from collections.abc import Callable

from zabbix_api.errors import DecodeError, NotAuthenticatedError
from zabbix_api.models.constants import NO_AUTH_METHODS
from zabbix_api.models.types import SessionToken
from zabbix_api.observability import get_logger
from zabbix_api.utils.sanitization import sanitize_token

logger = get_logger(__name__)

LoginCall = Callable[[str, str], object]


class SessionManager:
    """Thread-safe holder of the current session token.

    Reads and writes of the token slot go through a lock, so a call that
    starts while another thread re-authenticates sees either the old or the
    new token, never a partial state. Calls themselves are not serialized.
    """

    def __init__(self) -> None:
        self._token: SessionToken | None = None
        self._lock = threading.Lock()

    @property
    def is_authenticated(self) -> bool:
        with self._lock:
            return self._token is not None

    @property
    def token(self) -> SessionToken | None:
        with self._lock:
            return self._token

    def authenticate(self, login: LoginCall, username: str, password: str) -> SessionToken:
        """Run a login call and store the returned token.

        Args:
            login: Callable performing ``user.login`` without a token and
                returning its result
            username: Login name
            password: Password

        Returns:
            The new session token

        Raises:
            DecodeError: If the login result is not a non-empty string
            ZabbixApiError: Whatever the login call raises; the previous
                session state is kept
        """
        result = login(username, password)
        if not isinstance(result, str) or not result:
            raise DecodeError("result", "expected a non-empty session token string")

        with self._lock:
            self._token = result

        logger.info(
            "zabbix_api.session.authenticated",
            username=username,
            token=sanitize_token(result),
        )
        return result

    def token_for(self, method: str) -> SessionToken | None:
        """Return the token to attach to a call of ``method``.

        Returns:
            None for methods that take no auth, else the stored token

        Raises:
            NotAuthenticatedError: If the method needs auth and no session
                is established
        """
        if method in NO_AUTH_METHODS:
            return None
        with self._lock:
            token = self._token
        if token is None:
            raise NotAuthenticatedError(method)
        return token

    def clear(self) -> None:
        with self._lock:
            self._token = None
        logger.debug("zabbix_api.session.cleared")
