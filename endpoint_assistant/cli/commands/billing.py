"""
Billing Command.

Show plan, usage and quota for the authenticated account.
"""

import typer
from rich.markup import escape
from rich.table import Table

from endpoint_assistant.api.billing import get_billing_stats
from endpoint_assistant.core.client import EndpointsClient
from endpoint_assistant.cli.runner import console, run_command


def format_bytes(size: int | str) -> str:
    """Render a byte count as B/KB/MB/GB; non-numeric values pass through."""
    try:
        value = float(size)
    except (TypeError, ValueError):
        return str(size)
    for unit in ("B", "KB", "MB", "GB"):
        if value < 1024 or unit == "GB":
            return f"{value:.0f} {unit}" if unit == "B" else f"{value:.1f} {unit}"
        value /= 1024
    return f"{value:.1f} GB"


def stats(ctx: typer.Context) -> None:
    """
    Show billing and usage stats.

    The server may reject API key auth on this route with HTTP 401.

    Examples:
        endpoint-assistant stats
    """

    async def _stats(client: EndpointsClient) -> None:
        billing = await get_billing_stats(client=client)

        table = Table(title="Billing & Usage", show_header=True)
        table.add_column("Metric", style="cyan")
        table.add_column("Value")

        table.add_row("Tier", escape(billing.tier))
        table.add_row("Status", escape(billing.status))
        table.add_row("Parses", f"{billing.parses_this_month} / {billing.monthly_parse_limit}")
        table.add_row(
            "Storage",
            f"{format_bytes(billing.storage_used)} / {format_bytes(billing.storage_limit)}",
        )
        table.add_row("Period ends", escape(billing.current_period_end))

        console.print(table)

    run_command(ctx, _stats)
