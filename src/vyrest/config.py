"""
Client configuration.

A ``ClientConfig`` is built once and passed to ``Client``; nothing here is
process-wide state. ``from_env`` layers explicit overrides on top of
environment variables (optionally loaded from a ``.env`` file).
"""

import os
from typing import Any, Optional

from dotenv import find_dotenv, load_dotenv
from pydantic import BaseModel, Field, ValidationError

from vyrest.errors import InvalidArgumentError

ENV_PREFIX = "VYREST_"

_ENV_FIELDS = {
    "host": "HOST",
    "username": "USER",
    "password": "PASS",
    "session_id": "SID",
    "timeout": "TIMEOUT",
    "verify_tls": "VERIFY_TLS",
    "poll_interval": "POLL_INTERVAL",
}


class ClientConfig(BaseModel):
    """Connection settings for one client instance."""

    host: str = ""
    username: str = ""
    password: str = Field(default="", repr=False)
    session_id: Optional[str] = None
    timeout: float = 30.0  # seconds, applied to every request
    # The device ships a self-signed certificate; verification is opt-in.
    verify_tls: bool = False
    poll_interval: float = 0.0  # seconds between output polls
    protocol_version: str = "0.1"

    @property
    def base_url(self) -> str:
        if "://" in self.host:
            return self.host.rstrip("/")
        return f"https://{self.host}"

    @classmethod
    def from_env(cls, **overrides: Any) -> "ClientConfig":
        """
        Build a config from ``VYREST_*`` environment variables.

        Keyword arguments that are not None take precedence over the
        environment.

        Raises:
            InvalidArgumentError: A value does not have the expected type.
        """
        load_dotenv(find_dotenv(usecwd=True))

        values: dict[str, Any] = {}
        for field_name, suffix in _ENV_FIELDS.items():
            raw = os.getenv(ENV_PREFIX + suffix)
            if raw is not None and raw != "":
                values[field_name] = raw

        explicit = {k: v for k, v in overrides.items() if v is not None}
        values.update(explicit)
        try:
            return cls(**values)
        except ValidationError as e:
            bad = [str(err["loc"][0]) for err in e.errors() if err["loc"]]
            names = [
                name if name in explicit else ENV_PREFIX + _ENV_FIELDS.get(name, name)
                for name in bad
            ]
            raise InvalidArgumentError(
                f"invalid value for {', '.join(names)}: {e.errors()[0]['msg']}"
            ) from e
