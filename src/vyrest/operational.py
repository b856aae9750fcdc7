"""
Operational (non-configuration) commands run as server-side jobs.

Starting a command returns a handle carrying only the job id. Output is
retrieved by polling the job endpoint: each successful poll returns the
output produced since the previous poll, and a ``410 Gone`` answer marks
the end of the output.
"""

import time
from http import HTTPStatus
from typing import Callable, Sequence, TextIO

from vyrest.errors import StatusFailure
from vyrest.logger import get_logger
from vyrest.models import OpNode
from vyrest.transport import Transport, encode_path, location_id

logger = get_logger(__name__)

OP_ROOT = "/rest/op"


def get_operational(transport: Transport, path: Sequence[str]) -> OpNode:
    """Describe the operational tree node at ``path``."""
    return transport.get_model(f"{OP_ROOT}{encode_path(path)}", OpNode)


class OperationalCommand:
    """
    Handle to one server-side job.

    Holds no output between calls. A job's output can only be consumed
    once, so a handle must not be polled from two threads at a time.
    """

    def __init__(self, transport: Transport, pid: str):
        self._transport = transport
        self._pid = pid

    @classmethod
    def start(cls, transport: Transport, path: Sequence[str]) -> "OperationalCommand":
        """Launch the command at ``path`` and return a handle to the job."""
        response = transport.request("POST", f"{OP_ROOT}{encode_path(path)}")
        pid = location_id(response)
        logger.info(f"Started '{' '.join(path)}' as process {pid}")
        return cls(transport, pid)

    @property
    def pid(self) -> str:
        return self._pid

    @property
    def endpoint(self) -> str:
        return f"{OP_ROOT}/{self._pid}"

    def _poll(self, emit: Callable[[str], None]) -> int:
        """
        Poll until the server answers 410, handing every chunk to ``emit``.

        Any other failure aborts the loop and propagates.

        Returns:
            Number of requests issued, the terminating one included.
        """
        interval = self._transport.config.poll_interval
        polls = 0
        while True:
            if polls and interval > 0:
                time.sleep(interval)
            polls += 1
            try:
                response = self._transport.request("GET", self.endpoint)
            except StatusFailure as e:
                if e.status_code == HTTPStatus.GONE:
                    logger.debug(f"Process {self._pid} output exhausted after {polls} polls")
                    return polls
                raise
            emit(response.text)

    def output(self) -> str:
        """Wait for the job to finish and return its complete output."""
        chunks: list[str] = []
        self._poll(chunks.append)
        return "".join(chunks)

    def stream_output(self, sink: TextIO) -> None:
        """Write each output chunk to ``sink`` as soon as it arrives."""

        def emit(chunk: str) -> None:
            if not chunk:
                return
            sink.write(chunk)
            flush = getattr(sink, "flush", None)
            if flush is not None:
                flush()

        self._poll(emit)

    def kill(self) -> None:
        self._transport.request("DELETE", self.endpoint)
        logger.info(f"Killed process {self._pid}")

    def __repr__(self) -> str:
        return f"OperationalCommand(pid={self._pid!r})"
