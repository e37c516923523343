"""
Endpoint Commands.

Browse, inspect, export, create, extend and delete endpoints.
"""

import json
from pathlib import Path
from typing import Optional

import typer
from pydantic import ValidationError
from rich.json import JSON
from rich.markup import escape
from rich.panel import Panel
from rich.table import Table
from rich.tree import Tree

from endpoint_assistant.api.endpoints import (
    append_items,
    create_endpoint,
    delete_endpoint,
    get_endpoint,
    list_endpoints,
)
from endpoint_assistant.api.files import DEFAULT_RESULTS_DIR
from endpoint_assistant.api.items import delete_item
from endpoint_assistant.core.client import EndpointsClient
from endpoint_assistant.core.exceptions import UsageError
from endpoint_assistant.cli.runner import console, require_argument, run_command
from endpoint_assistant.schemas.endpoints import (
    EndpointDetails,
    ExtractedMetadataItem,
    NewItem,
    SimpleMetadataItem,
)

RECENT_ITEMS_SHOWN = 3


def parse_items(raw: str) -> list[NewItem]:
    """
    Parse a JSON array of {"data": {...}} objects given on the command line.

    Raises:
        UsageError: If the text is not valid JSON or not an array of items
    """
    try:
        data = json.loads(raw)
    except json.JSONDecodeError as e:
        raise UsageError(f"Invalid items JSON: {e.msg} (line {e.lineno}, column {e.colno})") from e

    if not isinstance(data, list):
        raise UsageError('Items JSON must be an array of {"data": {...}} objects')

    try:
        return [NewItem.model_validate(item) for item in data]
    except ValidationError as e:
        raise UsageError('Each item must be an object with a "data" object') from e


def overview(ctx: typer.Context) -> None:
    """
    List all endpoints grouped by category.

    Examples:
        endpoint-assistant overview
    """

    async def _overview(client: EndpointsClient) -> None:
        categories = await list_endpoints(client=client)

        tree = Tree("[bold]Endpoints Overview[/bold]")
        total_endpoints = 0
        for category in categories:
            branch = tree.add(f"[cyan]{escape(category.name)}/[/cyan]")
            for endpoint in category.endpoints:
                branch.add(escape(endpoint.slug))
                total_endpoints += 1

        console.print(tree)
        console.print(
            f"\nTotal: {len(categories)} categories, {total_endpoints} endpoints"
        )

    run_command(ctx, _overview)


def _display_simple_item(item: SimpleMetadataItem) -> None:
    console.print(Panel(
        JSON.from_data(item.data),
        title=f"Item {escape(str(item.id))}",
        subtitle=f"Created {escape(item.created_at)}",
        title_align="left",
    ))


def _display_extracted_item(item: ExtractedMetadataItem) -> None:
    lines = [
        f"[cyan]File:[/cyan] {escape(item.file_path or '(text input)')}",
        f"[cyan]Type:[/cyan] {escape(item.file_type)}",
        f"[cyan]Summary:[/cyan] {escape(item.summary)}",
    ]
    if item.entities:
        lines.append("[cyan]Entities:[/cyan]")
        for entity in item.entities:
            role = f" ({escape(entity.role)})" if entity.role else ""
            lines.append(f"  - {escape(entity.name)} [dim]{escape(entity.type)}[/dim]{role}")
    console.print(Panel("\n".join(lines), title="Extracted item", title_align="left"))


def _display_details(details: EndpointDetails) -> None:
    table = Table(title="Endpoint Details", show_header=True)
    table.add_column("Field", style="cyan")
    table.add_column("Value")

    table.add_row("Path", escape(details.endpoint.path))
    table.add_row("Category", escape(details.endpoint.category))
    table.add_row("Slug", escape(details.endpoint.slug))
    table.add_row("ID", str(details.endpoint.id))
    table.add_row("Total Items", str(details.total_items))
    table.add_row("Old Metadata", str(len(details.metadata.old_metadata)))
    table.add_row("New Metadata", str(len(details.metadata.new_metadata)))

    console.print(table)

    recent = details.metadata.new_metadata[:RECENT_ITEMS_SHOWN]
    if recent:
        console.print("\n[bold]Recent Metadata[/bold]")
        for item in recent:
            if item.kind == "simple":
                _display_simple_item(item)
            else:
                _display_extracted_item(item)


def inspect(
    ctx: typer.Context,
    path: Optional[str] = typer.Argument(None, help="Endpoint path, e.g. /job-tracker/january-2026"),
) -> None:
    """
    Show an endpoint's details and its most recent items.

    Examples:
        endpoint-assistant inspect /job-tracker/january-2026
    """
    endpoint_path = require_argument(path, "inspect <path>")

    async def _inspect(client: EndpointsClient) -> None:
        details = await get_endpoint(endpoint_path, client=client)
        _display_details(details)

    run_command(ctx, _inspect)


def export(
    ctx: typer.Context,
    path: Optional[str] = typer.Argument(None, help="Endpoint path to export"),
    output_dir: Optional[Path] = typer.Option(
        None, "--output-dir", "-o", help="Directory to write into (default ./results)"
    ),
) -> None:
    """
    Export an endpoint's full details as JSON.

    Writes <category>-<slug>.json.

    Examples:
        endpoint-assistant export /job-tracker/january-2026
        endpoint-assistant export /receipts/2026-q1 -o ./backups
    """
    endpoint_path = require_argument(path, "export <path>")

    async def _export(client: EndpointsClient) -> Path:
        details = await get_endpoint(endpoint_path, client=client)

        directory = output_dir or Path.cwd() / DEFAULT_RESULTS_DIR
        output_path = directory / f"{details.endpoint.category}-{details.endpoint.slug}.json"
        output_path.parent.mkdir(parents=True, exist_ok=True)
        output_path.write_text(json.dumps(details.to_payload(), indent=2), encoding="utf-8")

        console.print(f"[green]Exported to: {escape(str(output_path))}[/green]", soft_wrap=True)
        return output_path

    run_command(ctx, _export)


def create(
    ctx: typer.Context,
    path: Optional[str] = typer.Argument(None, help="Path of the new endpoint, e.g. /projects/q1-2026"),
    items: Optional[str] = typer.Option(
        None, "--items", help='Initial items as JSON, e.g. \'[{"data": {"name": "x"}}]\''
    ),
) -> None:
    """
    Create a new endpoint, optionally with initial items.

    Examples:
        endpoint-assistant create /projects/q1-2026
        endpoint-assistant create /projects/q1-2026 --items '[{"data": {"task": "plan"}}]'
    """
    endpoint_path = require_argument(path, "create <path> [--items JSON]")

    async def _create(client: EndpointsClient) -> None:
        new_items = parse_items(items) if items is not None else None
        result = await create_endpoint(endpoint_path, new_items, client=client)
        console.print(
            f"[green]Created endpoint {escape(result.endpoint.path)}[/green] "
            f"(ID {result.endpoint.id}, {result.items_added} items added)",
            soft_wrap=True,
        )

    run_command(ctx, _create)


def append(
    ctx: typer.Context,
    path: Optional[str] = typer.Argument(None, help="Endpoint path"),
    items_json: Optional[str] = typer.Argument(None, help="Items as a JSON array of {\"data\": {...}}"),
) -> None:
    """
    Append items to an existing endpoint.

    Examples:
        endpoint-assistant append /job-tracker/january-2026 '[{"data": {"company": "Acme"}}]'
    """
    endpoint_path = require_argument(path, "append <path> <itemsJSON>")
    raw_items = require_argument(items_json, "append <path> <itemsJSON>")

    async def _append(client: EndpointsClient) -> None:
        result = await append_items(endpoint_path, parse_items(raw_items), client=client)
        console.print(
            f"[green]Added {result.items_added} items to {escape(result.endpoint.path)}[/green] "
            f"(total {result.total_items})",
            soft_wrap=True,
        )

    run_command(ctx, _append)


def delete(
    ctx: typer.Context,
    path: Optional[str] = typer.Argument(None, help="Endpoint path to delete"),
) -> None:
    """
    Delete an endpoint and all of its files.

    Files that could not be deleted are listed; they do not fail the command.

    Examples:
        endpoint-assistant delete /job-tracker/january-2026
    """
    endpoint_path = require_argument(path, "delete <path>")

    async def _delete(client: EndpointsClient) -> None:
        result = await delete_endpoint(endpoint_path, client=client)

        console.print(
            f"[green]Deleted endpoint {escape(endpoint_path)}[/green] "
            f"({result.deleted_files} files deleted)",
            soft_wrap=True,
        )

        if result.file_results:
            table = Table(title="Files", show_header=True)
            table.add_column("Key", style="cyan")
            table.add_column("Status")
            table.add_column("Details")
            for file_result in result.file_results:
                status = "[green]✓ deleted[/green]" if file_result.success else "[red]✗ failed[/red]"
                table.add_row(escape(file_result.key), status, escape(file_result.error or "-"))
            console.print(table)

        failed = [r for r in result.file_results if not r.success]
        if failed:
            console.print(f"[yellow]{len(failed)} files could not be deleted[/yellow]")

    run_command(ctx, _delete)


def delete_item_command(
    ctx: typer.Context,
    item_id: Optional[str] = typer.Argument(None, help="ID of the item to delete"),
    path: Optional[str] = typer.Argument(None, help="Path of the endpoint holding the item"),
) -> None:
    """
    Delete a single item from an endpoint.

    Examples:
        endpoint-assistant delete-item abc12345 /job-tracker/january-2026
    """
    target_id = require_argument(item_id, "delete-item <id> <path>")
    endpoint_path = require_argument(path, "delete-item <id> <path>")

    async def _delete_item(client: EndpointsClient) -> None:
        result = await delete_item(target_id, endpoint_path, client=client)

        console.print(f"[green]Deleted item {escape(str(result.deleted.item_id))}[/green]")
        if result.deleted.had_file:
            file_status = "deleted" if result.deleted.file_deleted else "[yellow]not deleted[/yellow]"
            console.print(f"Attached file: {file_status}")
        console.print(f"Remaining items: {result.remaining_items}")
        if result.endpoint_deleted:
            console.print("[yellow]Endpoint removed (no items left)[/yellow]")

    run_command(ctx, _delete_item)
