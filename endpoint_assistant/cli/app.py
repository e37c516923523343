"""
CLI Application.

Command-line client for the Endpoints API.
Built with Typer for commands and Rich for formatted output.

Usage:
    endpoint-assistant --help
    endpoint-assistant overview
    endpoint-assistant inspect /job-tracker/january-2026
    endpoint-assistant download 123/job-tracker/offer.pdf
    endpoint-assistant url 123/job-tracker/offer.pdf --expires-in 600
    endpoint-assistant export /job-tracker/january-2026
    endpoint-assistant scan "track job applications" --text "Applied to Acme"
    endpoint-assistant scan "receipts" --file a.pdf,b.png --target /receipts/2026-q1
    endpoint-assistant create /projects/q1-2026 --items '[{"data": {"task": "plan"}}]'
    endpoint-assistant append /projects/q1-2026 '[{"data": {"task": "ship"}}]'
    endpoint-assistant delete /projects/q1-2026
    endpoint-assistant delete-item abc12345 /projects/q1-2026
    endpoint-assistant stats

Options:
    --verbose, -v     Enable verbose output (INFO level logging)
    --debug, -d       Enable debug mode (DEBUG level logging)

This module is the composition root: the callback resolves settings once,
builds the one EndpointsClient and hands it to commands via the context.
"""

import click
import structlog
import typer
from rich.markup import escape
from typer.core import TyperGroup

from endpoint_assistant.cli.commands import billing, endpoints, files, scan
from endpoint_assistant.cli.runner import console, err_console
from endpoint_assistant.core.client import EndpointsClient
from endpoint_assistant.core.config import get_settings, validate_settings
from endpoint_assistant.core.logging import get_logger, setup_logging


class HelpOnUnknownCommandGroup(TyperGroup):
    """Show the help listing (exit 0) instead of a usage error for unknown commands."""

    def resolve_command(self, ctx: click.Context, args: list[str]):
        if args and not args[0].startswith("-") and self.get_command(ctx, args[0]) is None:
            console.print(f"[yellow]Unknown command: {escape(args[0])}[/yellow]\n")
            typer.echo(ctx.get_help())
            ctx.exit(0)
        return super().resolve_command(ctx, args)


app = typer.Typer(
    name="endpoint-assistant",
    help="Endpoint Assistant - browse, scan and manage Endpoints API data.",
    cls=HelpOnUnknownCommandGroup,
    rich_markup_mode="rich",
)

app.command("overview")(endpoints.overview)
app.command("inspect")(endpoints.inspect)
app.command("download")(files.download)
app.command("url")(files.url)
app.command("export")(endpoints.export)
app.command("scan")(scan.scan)
app.command("delete")(endpoints.delete)
app.command("delete-item")(endpoints.delete_item_command)
app.command("create")(endpoints.create)
app.command("append")(endpoints.append)
app.command("stats")(billing.stats)


@app.callback(invoke_without_command=True)
def main_callback(
    ctx: typer.Context,
    verbose: bool = typer.Option(
        False,
        "--verbose",
        "-v",
        help="Enable verbose output (INFO level logging)",
    ),
    debug: bool = typer.Option(
        False,
        "--debug",
        "-d",
        help="Enable debug mode (DEBUG level logging)",
    ),
) -> None:
    """
    Endpoint Assistant.

    Reads ENDPOINTS_API_URL and ENDPOINTS_API_KEY from the environment or a
    .env file in the working directory.
    """
    if ctx.invoked_subcommand is None:
        typer.echo(ctx.get_help())
        raise typer.Exit(0)

    validation = validate_settings()
    if not validation.valid:
        err_console.print("[red]Configuration Error:[/red]")
        for error in validation.errors:
            err_console.print(f"   - {escape(error)}", soft_wrap=True)
        err_console.print("\nSet them in the environment or a .env file.")
        raise typer.Exit(1)

    settings = get_settings()

    if debug:
        log_level = "DEBUG"
    elif verbose:
        log_level = "INFO"
    else:
        log_level = settings.log_level

    setup_logging(level=log_level, format_type=settings.log_format, log_file=settings.log_file)
    structlog.contextvars.bind_contextvars(source="cli")

    logger = get_logger(__name__)
    logger.debug("CLI invoked", command=ctx.invoked_subcommand, log_level=log_level)

    ctx.obj = EndpointsClient(settings)


def main() -> None:
    """Console script entry point."""
    app()
