"""
Configuration changes staged against one editing session.

Set/delete stage mutations in the session's candidate configuration;
commit/save/load/discard act on the whole session.
"""

from typing import Sequence

from vyrest.logger import get_logger
from vyrest.models import ConfigNode
from vyrest.transport import Transport, encode_path

logger = get_logger(__name__)


class ConfigTransaction:
    """
    Operations bound to a single configuration session.

    The session id is not checked locally; the server rejects unknown ids.
    """

    def __init__(self, transport: Transport, session_id: str):
        self._transport = transport
        self.session_id = session_id

    @property
    def base_path(self) -> str:
        return f"/rest/conf/{self.session_id}"

    def set(self, path: Sequence[str]) -> None:
        """Create ``path`` in the candidate configuration."""
        self._transport.request("PUT", f"{self.base_path}/set{encode_path(path)}")

    def delete(self, path: Sequence[str]) -> None:
        """Remove ``path`` from the candidate configuration."""
        self._transport.request("PUT", f"{self.base_path}/delete{encode_path(path)}")

    def get(self, path: Sequence[str]) -> ConfigNode:
        """Fetch the node at ``path`` with its children and help metadata."""
        return self._transport.get_model(
            f"{self.base_path}{encode_path(path)}", ConfigNode
        )

    def _action(self, action: str) -> str:
        message = self._transport.message_request("POST", f"{self.base_path}/{action}")
        logger.info(f"Session {self.session_id}: {action} done")
        return message

    def commit(self) -> str:
        return self._action("commit")

    def save(self) -> str:
        """Save the running configuration as the boot configuration."""
        return self._action("save")

    def load(self) -> str:
        """Replace the candidate with the boot configuration."""
        return self._action("load")

    def discard(self) -> str:
        return self._action("discard")

    def show(self) -> str:
        """Return the full candidate configuration as text."""
        return self._action("show")

    def __repr__(self) -> str:
        return f"ConfigTransaction(session_id={self.session_id!r})"
