"""
CLI commands operating on the configuration tree of a session.

All of them act on the session given with ``--sid``.
"""

from typing import Optional

import typer

from vyrest.cli._client import open_client, require_path, require_session_id

PATH_HELP = "Configuration path, one segment per argument"


def register_commands(app: typer.Typer):
    """Register configuration commands onto the app."""

    @app.command("set")
    def set_(
        ctx: typer.Context,
        path: Optional[list[str]] = typer.Argument(None, help=PATH_HELP),
    ):
        """Create a path in the configuration hierarchy."""
        with open_client(ctx) as client:
            path = require_path(path, "a path to set")
            tx = client.sessions.connect_session(require_session_id(ctx))
            tx.set(path)

    @app.command("delete")
    def delete(
        ctx: typer.Context,
        path: Optional[list[str]] = typer.Argument(None, help=PATH_HELP),
    ):
        """Delete a path from the configuration hierarchy."""
        with open_client(ctx) as client:
            path = require_path(path, "a path to delete")
            tx = client.sessions.connect_session(require_session_id(ctx))
            tx.delete(path)

    @app.command("get")
    def get(
        ctx: typer.Context,
        path: Optional[list[str]] = typer.Argument(None, help=PATH_HELP),
    ):
        """Get children of the path."""
        with open_client(ctx) as client:
            tx = client.sessions.connect_session(require_session_id(ctx))
            node = tx.get(path or [])
            typer.echo(node.model_dump_json(indent=4))

    def lifecycle(name: str, help_text: str, echo_message: bool = False):
        def command(ctx: typer.Context):
            with open_client(ctx) as client:
                tx = client.sessions.connect_session(require_session_id(ctx))
                message = getattr(tx, name)()
                if echo_message:
                    typer.echo(message)

        command.__doc__ = help_text
        app.command(name)(command)

    lifecycle("commit", "Commit")
    lifecycle("save", "Save to the bootup configuration")
    lifecycle("load", "Load configuration from bootup configuration")
    lifecycle("discard", "Discard configuration changes")
    lifecycle("show", "Show candidate configuration", echo_message=True)
