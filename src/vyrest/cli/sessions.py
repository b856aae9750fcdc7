"""
CLI commands for configuration sessions.

Usage:
    vyrest setup-session
    vyrest list-sessions
    vyrest --sid ID teardown-session
    vyrest teardown-sessions
    vyrest --sid ID session-exists
"""

import typer

from vyrest.cli._client import echo_table, open_client, require_session_id


def register_commands(app: typer.Typer):
    """Register session commands onto the app."""

    @app.command("setup-session")
    def setup_session(ctx: typer.Context):
        """Setup a new session."""
        with open_client(ctx) as client:
            session = client.sessions.create_session()
            typer.echo(session.id)

    @app.command("list-sessions")
    def list_sessions(ctx: typer.Context):
        """List all sessions."""
        with open_client(ctx) as client:
            sessions = client.sessions.list_sessions()
            echo_table(
                ["session-id", "username", "description"],
                [[s.id, s.username, s.description] for s in sessions],
            )

    @app.command("teardown-session")
    def teardown_session(ctx: typer.Context):
        """Teardown a session."""
        with open_client(ctx) as client:
            session = client.sessions.get_session(require_session_id(ctx))
            client.sessions.teardown_session(session.id)

    @app.command("teardown-sessions")
    def teardown_sessions(ctx: typer.Context):
        """Teardown all sessions."""
        with open_client(ctx) as client:
            client.sessions.teardown_all_sessions()

    @app.command("session-exists")
    def session_exists(ctx: typer.Context):
        """Check if a session exists."""
        with open_client(ctx) as client:
            typer.echo(client.sessions.session_exists(require_session_id(ctx)))
