"""
Scan Command.

Run the server's AI extraction over text or local files.
"""

from typing import Optional

import typer
from rich.markup import escape
from rich.table import Table

from endpoint_assistant.api.scan import scan_files, scan_text
from endpoint_assistant.core.client import EndpointsClient
from endpoint_assistant.core.exceptions import UsageError
from endpoint_assistant.cli.runner import console, require_argument, run_command

SCAN_USAGE = "scan <prompt> [--text T | --file F,...] [--target P]"


def split_file_list(raw: str) -> list[str]:
    """Split a comma-separated --file value, dropping blanks."""
    return [part.strip() for part in raw.split(",") if part.strip()]


def scan(
    ctx: typer.Context,
    prompt: Optional[str] = typer.Argument(None, help="What to extract, e.g. \"track job applications\""),
    text: Optional[str] = typer.Option(None, "--text", "-t", help="Text to scan"),
    file: Optional[str] = typer.Option(
        None, "--file", "-f", help="File(s) to scan, comma-separated"
    ),
    target: Optional[str] = typer.Option(
        None, "--target", help="Endpoint path to file the results under"
    ),
) -> None:
    """
    Extract structured records from text or files.

    All files are sent in one request.

    Examples:
        endpoint-assistant scan "track job applications" --text "Applied to Acme as Engineer"
        endpoint-assistant scan "receipts" --file a.pdf,b.png --target /receipts/2026-q1
    """
    scan_prompt = require_argument(prompt, SCAN_USAGE)

    async def _scan(client: EndpointsClient) -> None:
        if text is None and file is None:
            raise UsageError("Provide either --text or --file")
        if text is not None and file is not None:
            raise UsageError("Use either --text or --file, not both")

        if text is not None:
            result = await scan_text(scan_prompt, text, target, client=client)
        else:
            result = await scan_files(scan_prompt, split_file_list(file), target, client=client)

        table = Table(title="Scan Complete", show_header=False)
        table.add_column("Field", style="cyan")
        table.add_column("Value")
        table.add_row("Endpoint", escape(result.endpoint.path))
        table.add_row("Entries added", str(result.entries_added))
        table.add_row("Total entries", str(result.total_entries))
        console.print(table)

    run_command(ctx, _scan)
