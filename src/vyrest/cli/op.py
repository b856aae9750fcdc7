"""
CLI commands for operational mode: browsing the command tree and starting,
inspecting and killing jobs.
"""

import sys
from typing import Optional

import typer

from vyrest.cli._client import echo_table, open_client, require_path

CMD_HELP = "Operational command, one word per argument"


def register_commands(app: typer.Typer):
    """Register operational commands onto the app."""

    @app.command("get-op")
    def get_op(
        ctx: typer.Context,
        path: Optional[list[str]] = typer.Argument(None, help=CMD_HELP),
    ):
        """Get children of operational path."""
        with open_client(ctx) as client:
            node = client.get_operational(path or [])
            for child in node.children:
                typer.echo(child)

    @app.command("start-cmd")
    def start_cmd(
        ctx: typer.Context,
        path: Optional[list[str]] = typer.Argument(None, help=CMD_HELP),
    ):
        """Start an operational command."""
        with open_client(ctx) as client:
            cmd = client.start_command(require_path(path, "a command to start"))
            typer.echo(cmd.pid)

    @app.command("run-cmd")
    def run_cmd(
        ctx: typer.Context,
        path: Optional[list[str]] = typer.Argument(None, help=CMD_HELP),
    ):
        """Start and retrieve output from an operational mode command."""
        with open_client(ctx) as client:
            cmd = client.start_command(require_path(path, "a command to run"))
            cmd.stream_output(sys.stdout)

    @app.command("get-output")
    def get_output(
        ctx: typer.Context,
        pid: str = typer.Argument(help="Process id"),
    ):
        """Get output from a previously started operational command."""
        with open_client(ctx) as client:
            out = client.processes.get_command(pid).output()
            typer.echo(out, nl=not out.endswith("\n"))

    @app.command("kill-process")
    def kill_process(
        ctx: typer.Context,
        pid: str = typer.Argument(help="Process id"),
    ):
        """Kill an operational command."""
        with open_client(ctx) as client:
            client.processes.get_command(pid).kill()

    @app.command("kill-processes")
    def kill_processes(ctx: typer.Context):
        """Kill all currently running operational commands for your user."""
        with open_client(ctx) as client:
            client.processes.kill_processes()

    @app.command("list-processes")
    def list_processes(ctx: typer.Context):
        """List all running operational commands."""
        with open_client(ctx) as client:
            procs = client.processes.list_processes()
            echo_table(
                ["process-id", "username", "command"],
                [[p.id, p.username, p.command] for p in procs],
            )
