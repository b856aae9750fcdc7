"""
vyrest CLI - drive a device's configuration and operational REST API.

Commands are split into focused modules:
- sessions: setup-session, list-sessions, teardown-session(s), session-exists
- conf:     set, delete, get, commit, save, load, discard, show
- op:       get-op, start-cmd, run-cmd, get-output, kill-process(es), list-processes
"""

from typing import Optional

import typer

from vyrest.cli import conf, op, sessions
from vyrest.config import ClientConfig
from vyrest.errors import VyrestError
from vyrest.logger import setup_logging

app = typer.Typer(
    help="Client for the configuration and operational REST API of a device",
    no_args_is_help=True,
)


@app.callback()
def main(
    ctx: typer.Context,
    host: Optional[str] = typer.Option(None, "--host", help="Hostname [VYREST_HOST]"),
    user: Optional[str] = typer.Option(None, "--user", help="Username [VYREST_USER]"),
    password: Optional[str] = typer.Option(
        None, "--pass", help="Password [VYREST_PASS]"
    ),
    sid: Optional[str] = typer.Option(
        None, "--sid", help="Session-id to which to connect [VYREST_SID]"
    ),
    timeout: Optional[float] = typer.Option(
        None, "--timeout", help="Per-request timeout in seconds (default 30)"
    ),
    verify_tls: bool = typer.Option(
        False, "--verify-tls", help="Verify the device TLS certificate [VYREST_VERIFY_TLS]"
    ),
    poll_interval: Optional[float] = typer.Option(
        None, "--poll-interval", help="Seconds to wait between output polls"
    ),
    verbose: bool = typer.Option(
        False, "--verbose", "-v", help="Enable verbose logging (DEBUG level)"
    ),
):
    """
    Client for the configuration and operational REST API of a device.
    """
    setup_logging("DEBUG" if verbose else "WARNING")
    try:
        ctx.obj = ClientConfig.from_env(
            host=host,
            username=user,
            password=password,
            session_id=sid,
            timeout=timeout,
            verify_tls=verify_tls or None,
            poll_interval=poll_interval,
        )
    except VyrestError as e:
        typer.echo(f"Error: {e}", err=True)
        raise typer.Exit(code=1)


sessions.register_commands(app)
conf.register_commands(app)
op.register_commands(app)

if __name__ == "__main__":
    app()
