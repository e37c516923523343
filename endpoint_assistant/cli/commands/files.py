"""
File Commands.

Download stored files or print their presigned URLs.
"""

from pathlib import Path
from typing import Optional

import typer
from rich.markup import escape

from endpoint_assistant.api.files import download_file, get_file_url
from endpoint_assistant.core.client import EndpointsClient
from endpoint_assistant.cli.runner import console, require_argument, run_command


def download(
    ctx: typer.Context,
    key: Optional[str] = typer.Argument(None, help="Storage key, e.g. 123/job-tracker/file.pdf"),
    output_dir: Optional[Path] = typer.Option(
        None, "--output-dir", "-o", help="Directory to save into (default ./results)"
    ),
) -> None:
    """
    Download a file by its storage key.

    Examples:
        endpoint-assistant download 123/job-tracker/offer.pdf
        endpoint-assistant download 123/receipts/scan.png -o ./downloads
    """
    file_key = require_argument(key, "download <key>")
    output_path = output_dir / Path(file_key).name if output_dir else None

    async def _download(client: EndpointsClient) -> Path:
        console.print(f"Downloading: {escape(file_key)}", soft_wrap=True)
        saved_path = await download_file(file_key, output_path, client=client)
        console.print(f"[green]✓ Saved to: {escape(str(saved_path))}[/green]", soft_wrap=True)
        return saved_path

    run_command(ctx, _download)


def url(
    ctx: typer.Context,
    key: Optional[str] = typer.Argument(None, help="Storage key"),
    expires_in: Optional[int] = typer.Option(
        None, "--expires-in", "-e", min=1, help="URL lifetime in seconds"
    ),
) -> None:
    """
    Print a presigned URL for a stored file.

    Examples:
        endpoint-assistant url 123/job-tracker/offer.pdf
        endpoint-assistant url 123/job-tracker/offer.pdf --expires-in 7200
    """
    file_key = require_argument(key, "url <key> [--expires-in N]")

    async def _url(client: EndpointsClient) -> None:
        file_url = await get_file_url(file_key, expires_in, client=client)
        console.print(file_url.url, markup=False, highlight=False, soft_wrap=True)
        console.print(f"[dim]Expires in {file_url.expires_in} seconds[/dim]")

    run_command(ctx, _url)
