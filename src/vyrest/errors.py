"""
Error taxonomy for the vyrest client.

Every failure raised by the library is a ``VyrestError`` tagged with an
``ErrorKind`` so callers can branch on the kind instead of matching text.
"""

from __future__ import annotations

from enum import Enum
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    import httpx


class ErrorKind(str, Enum):
    TRANSPORT = "transport"
    STATUS = "status"
    DECODE = "decode"
    NOT_FOUND = "not_found"
    INVALID_ARGUMENT = "invalid_argument"


class VyrestError(Exception):
    """Base class for all client errors."""

    kind: ErrorKind

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message


class TransportFailure(VyrestError):
    """The request never produced a response (connection, TLS, timeout)."""

    kind = ErrorKind.TRANSPORT


class StatusFailure(VyrestError):
    """
    The server answered with a status code of 400 or above.

    The raw response stays attached so call sites that give a status a
    protocol meaning (410 while polling output) can inspect it.
    """

    kind = ErrorKind.STATUS

    def __init__(
        self,
        status_code: int,
        status_text: str,
        message: str | None = None,
        response: httpx.Response | None = None,
    ):
        super().__init__(message or status_text)
        self.status_code = status_code
        self.status_text = status_text
        self.server_message = message
        self.response = response


class DecodeFailure(VyrestError):
    """A non-empty response body could not be decoded."""

    kind = ErrorKind.DECODE


class NotFoundError(VyrestError):
    """A session or process id is absent from the current server listing."""

    kind = ErrorKind.NOT_FOUND


class InvalidArgumentError(VyrestError):
    """A required argument was not supplied."""

    kind = ErrorKind.INVALID_ARGUMENT
