"""Tests for the session token lifecycle."""

import threading

import pytest

from zabbix_api.errors import DecodeError, NotAuthenticatedError, RemoteError
from zabbix_api.session import SessionManager

TOKEN = "0424bd59b807674191e7d77572075f33"


class TestSessionManager:
    """Tests for SessionManager state transitions."""

    def test_starts_unauthenticated(self) -> None:
        session = SessionManager()

        assert not session.is_authenticated
        assert session.token is None

    def test_authenticate_stores_token(self) -> None:
        session = SessionManager()
        calls: list[tuple[str, str]] = []

        def login(username: str, password: str) -> str:
            calls.append((username, password))
            return TOKEN

        assert session.authenticate(login, "Admin", "zabbix") == TOKEN
        assert calls == [("Admin", "zabbix")]
        assert session.is_authenticated
        assert session.token_for("host.get") == TOKEN

    def test_no_auth_methods_never_get_a_token(self) -> None:
        session = SessionManager()
        session.authenticate(lambda u, p: TOKEN, "Admin", "zabbix")

        assert session.token_for("apiinfo.version") is None
        assert session.token_for("user.login") is None

    def test_token_for_without_session_raises(self) -> None:
        with pytest.raises(NotAuthenticatedError) as exc_info:
            SessionManager().token_for("item.create")

        assert exc_info.value.method == "item.create"
        assert exc_info.value.code == "zabbix:api/not_authenticated"

    @pytest.mark.parametrize("result", ["", None, 42, {"sessionid": TOKEN}])
    def test_invalid_login_result_keeps_previous_state(self, result: object) -> None:
        session = SessionManager()
        session.authenticate(lambda u, p: TOKEN, "Admin", "zabbix")

        with pytest.raises(DecodeError):
            session.authenticate(lambda u, p: result, "Admin", "zabbix")

        assert session.token == TOKEN

    def test_failed_login_propagates(self) -> None:
        session = SessionManager()

        def login(username: str, password: str) -> str:
            raise RemoteError(-32500, "Application error.", "Incorrect user name or password")

        with pytest.raises(RemoteError):
            session.authenticate(login, "Admin", "wrong")

        assert not session.is_authenticated

    def test_clear(self) -> None:
        session = SessionManager()
        session.authenticate(lambda u, p: TOKEN, "Admin", "zabbix")

        session.clear()

        assert not session.is_authenticated
        with pytest.raises(NotAuthenticatedError):
            session.token_for("host.get")

    def test_concurrent_reauthentication(self) -> None:
        """Readers always see one of the complete tokens written."""
        session = SessionManager()
        tokens = [f"{i:032x}" for i in range(8)]
        session.authenticate(lambda u, p: tokens[0], "Admin", "zabbix")
        seen: list[str | None] = []

        def writer(token: str) -> None:
            session.authenticate(lambda u, p: token, "Admin", "zabbix")

        def reader() -> None:
            for _ in range(50):
                seen.append(session.token_for("host.get"))

        threads = [threading.Thread(target=writer, args=(t,)) for t in tokens]
        threads += [threading.Thread(target=reader) for _ in range(4)]
        for thread in threads:
            thread.start()
        for thread in threads:
            thread.join()

        assert session.token in tokens
        assert set(seen) <= set(tokens)
