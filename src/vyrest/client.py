"""
Entry point to the device REST API.

``Client`` owns the HTTP transport and hands out the session, transaction,
process and operational-command helpers that share it.
"""

from typing import Optional, Sequence

import httpx

from vyrest.config import ClientConfig
from vyrest.logger import get_logger
from vyrest.models import OpNode
from vyrest.operational import OperationalCommand, get_operational
from vyrest.processes import ProcessRegistry
from vyrest.sessions import SessionManager
from vyrest.transaction import ConfigTransaction
from vyrest.transport import Transport

logger = get_logger(__name__)


class Client:
    """
    Client for one device and one user.

    Calls are sequential and blocking. Use as a context manager, or call
    ``close()``, to release the connection pool.

    Example:
        with Client(ClientConfig(host="192.0.2.1", username="vyatta", password="...")) as c:
            session = c.sessions.create_session()
            tx = c.transaction(session.id)
            tx.set(["system", "host-name", "router1"])
            tx.commit()
    """

    def __init__(
        self,
        config: ClientConfig,
        http_transport: Optional[httpx.BaseTransport] = None,
    ):
        self.config = config
        self.transport = Transport(config, http_transport=http_transport)
        self.sessions = SessionManager(self.transport)
        self.processes = ProcessRegistry(self.transport)
        logger.debug(f"Client ready for {config.username}@{config.base_url}")

    def transaction(self, session_id: str) -> ConfigTransaction:
        """Bind to ``session_id`` without checking that it exists."""
        return ConfigTransaction(self.transport, session_id)

    def get_operational(self, path: Sequence[str]) -> OpNode:
        return get_operational(self.transport, path)

    def start_command(self, path: Sequence[str]) -> OperationalCommand:
        return OperationalCommand.start(self.transport, path)

    def close(self) -> None:
        self.transport.close()

    def __enter__(self) -> "Client":
        return self

    def __exit__(self, *exc_info) -> None:
        self.close()
