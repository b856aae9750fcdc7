"""
Configuration session lifecycle: create, list, resolve and tear down.

There is no single-session endpoint; lookups scan the current listing on
every call and never cache it.
"""

from vyrest.errors import NotFoundError
from vyrest.logger import get_logger
from vyrest.models import Session, SessionList
from vyrest.transaction import ConfigTransaction
from vyrest.transport import Transport, location_id

logger = get_logger(__name__)

CONF_ROOT = "/rest/conf"


class SessionManager:
    """Creates and resolves configuration sessions for the authenticated user."""

    def __init__(self, transport: Transport):
        self._transport = transport

    def create_session(self) -> Session:
        """
        Open a new session.

        The create response only carries the new id (in its Location header),
        so the full record is resolved from a fresh listing.
        """
        response = self._transport.request("POST", CONF_ROOT)
        session_id = location_id(response)
        logger.info(f"Created configuration session {session_id}")
        return self.get_session(session_id)

    def list_sessions(self) -> list[Session]:
        return self._transport.get_model(CONF_ROOT, SessionList).sessions

    def get_session(self, session_id: str) -> Session:
        """
        Raises:
            NotFoundError: No listed session has ``session_id``.
        """
        for session in self.list_sessions():
            if session.id == session_id:
                return session
        raise NotFoundError(f"Session {session_id} does not exist")

    def session_exists(self, session_id: str) -> bool:
        """
        Check whether ``session_id`` is currently listed.

        The answer can be stale by the time the caller acts on it.
        """
        return any(session.id == session_id for session in self.list_sessions())

    def connect_session(self, session_id: str) -> ConfigTransaction:
        """Resolve ``session_id`` and return a transaction bound to it."""
        session = self.get_session(session_id)
        return ConfigTransaction(self._transport, session.id)

    def teardown_session(self, session_id: str) -> None:
        self._transport.request("DELETE", f"{CONF_ROOT}/{session_id}")
        logger.info(f"Tore down configuration session {session_id}")

    def teardown_all_sessions(self) -> int:
        """
        Tear down every session owned by the authenticated user.

        Sessions of other users are left alone. The first failing teardown
        stops the sequence and propagates.

        Returns:
            Number of sessions torn down.
        """
        owned = [
            session
            for session in self.list_sessions()
            if session.username == self._transport.username
        ]
        for session in owned:
            self.teardown_session(session.id)
        return len(owned)
