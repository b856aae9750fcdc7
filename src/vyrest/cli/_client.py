"""
Shared helpers for CLI commands: building the client, turning library
errors into exit codes, and plain-text tables.
"""

from contextlib import contextmanager
from typing import Iterator, Optional, Sequence

import typer

from vyrest.client import Client
from vyrest.config import ClientConfig
from vyrest.errors import InvalidArgumentError, VyrestError
from vyrest.logger import get_logger

logger = get_logger(__name__)


def make_client(config: ClientConfig) -> Client:
    return Client(config)


@contextmanager
def open_client(ctx: typer.Context) -> Iterator[Client]:
    """
    Yield a client for the invocation's config.

    Any ``VyrestError`` raised inside the block is printed to stderr and
    ends the command with exit code 1.
    """
    config: ClientConfig = ctx.obj
    client = make_client(config)
    try:
        yield client
    except VyrestError as e:
        logger.debug(f"{e.kind.value} error: {e}")
        typer.echo(f"Error: {e}", err=True)
        raise typer.Exit(code=1)
    finally:
        client.close()


def require_session_id(ctx: typer.Context) -> str:
    session_id: Optional[str] = ctx.obj.session_id
    if not session_id:
        raise InvalidArgumentError("must supply a session id with --sid")
    return session_id


def require_path(path: Optional[list[str]], what: str) -> list[str]:
    if not path:
        raise InvalidArgumentError(f"must supply {what}")
    return path


def echo_table(headers: Sequence[str], rows: Sequence[Sequence[str]]) -> None:
    """Print ``rows`` in left-aligned columns under a dashed header."""
    widths = [len(h) for h in headers]
    for row in rows:
        widths = [max(w, len(cell)) for w, cell in zip(widths, row)]

    def line(cells: Sequence[str]) -> str:
        return "  ".join(cell.ljust(w) for cell, w in zip(cells, widths)).rstrip()

    typer.echo(line(headers))
    typer.echo(line(["-" * len(h) for h in headers]))
    for row in rows:
        typer.echo(line(row))
