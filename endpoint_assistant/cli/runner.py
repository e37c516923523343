"""
Command Runner.

Shared plumbing for CLI commands: output consoles, running a command's
coroutine against the client held by the Typer context, and turning any
failure into `Error: <message>` on stderr with exit code 1.
"""

import asyncio
from collections.abc import Awaitable, Callable
from typing import TypeVar

import typer
from rich.console import Console
from rich.markup import escape

from endpoint_assistant.core.client import EndpointsClient
from endpoint_assistant.core.logging import get_logger, log_with_source

logger = get_logger(__name__)

console = Console()
err_console = Console(stderr=True)

T = TypeVar("T")


def get_context_client(ctx: typer.Context) -> EndpointsClient:
    """Return the client built by the app callback."""
    client = ctx.find_root().obj
    if not isinstance(client, EndpointsClient):
        raise RuntimeError("CLI context has no API client; was the app callback skipped?")
    return client


def require_argument(value: str | None, usage: str) -> str:
    """Exit with a usage line when a positional argument is missing."""
    if not value:
        err_console.print(f"Usage: endpoint-assistant {escape(usage)}", soft_wrap=True)
        raise typer.Exit(1)
    return value


def run_command(ctx: typer.Context, operation: Callable[[EndpointsClient], Awaitable[T]]) -> T:
    """
    Run an async command body with the context client.

    The client is always closed afterwards. Any exception is reported and
    converted into exit code 1.
    """
    client = get_context_client(ctx)

    async def _run() -> T:
        try:
            return await operation(client)
        finally:
            await client.close()

    try:
        return asyncio.run(_run())
    except typer.Exit:
        raise
    except Exception as e:
        log_with_source(
            logger,
            "cli",
            "debug",
            "Command failed",
            command=ctx.info_name,
            error_type=type(e).__name__,
            error=str(e),
        )
        err_console.print(f"[red]Error: {escape(str(e))}[/red]", soft_wrap=True)
        raise typer.Exit(1) from e
