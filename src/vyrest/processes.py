"""
Discovery of running operational commands.

The process set changes constantly, so every lookup fetches a fresh listing.
"""

from vyrest.errors import NotFoundError
from vyrest.logger import get_logger
from vyrest.models import Process, ProcessList
from vyrest.operational import OP_ROOT, OperationalCommand
from vyrest.transport import Transport

logger = get_logger(__name__)


class ProcessRegistry:
    def __init__(self, transport: Transport):
        self._transport = transport

    def list_processes(self) -> list[Process]:
        return self._transport.get_model(OP_ROOT, ProcessList).processes

    def get_process(self, pid: str) -> Process:
        """
        Raises:
            NotFoundError: ``pid`` is not in the current listing.
        """
        for process in self.list_processes():
            if process.id == pid:
                return process
        raise NotFoundError(f"Process {pid} does not exist")

    def command_for(self, process: Process) -> OperationalCommand:
        return OperationalCommand(self._transport, process.id)

    def get_command(self, pid: str) -> OperationalCommand:
        """Resolve ``pid`` against the listing and return a handle to it."""
        return self.command_for(self.get_process(pid))

    def kill_processes(self) -> int:
        """
        Kill every process owned by the authenticated user.

        The first failing kill stops the sequence and propagates.

        Returns:
            Number of processes killed.
        """
        owned = [
            process
            for process in self.list_processes()
            if process.username == self._transport.username
        ]
        for process in owned:
            self.command_for(process).kill()
        logger.info(f"Killed {len(owned)} processes for {self._transport.username}")
        return len(owned)
