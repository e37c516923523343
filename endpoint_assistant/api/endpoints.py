"""
Endpoint Operations.

List, inspect, create, append to and delete endpoints. Endpoint paths are
accepted with or without their leading slash ("/job-tracker/january-2026"
and "job-tracker/january-2026" address the same endpoint).
"""

from collections.abc import Iterable, Mapping
from typing import Any
from urllib.parse import quote

from endpoint_assistant.core.client import EndpointsClient, get_client
from endpoint_assistant.schemas.endpoints import (
    AppendItemsResponse,
    CreateEndpointResponse,
    DeleteEndpointResponse,
    EndpointDetails,
    NewItem,
    TreeCategory,
    TreeResponse,
)


def endpoint_url_path(path: str) -> str:
    """Strip one leading slash and percent-encode each segment of an endpoint path."""
    normalized = path[1:] if path.startswith("/") else path
    return quote(normalized, safe="/")


def _serialize_items(items: Iterable[NewItem | Mapping[str, Any]]) -> list[dict[str, Any]]:
    payload = []
    for item in items:
        if not isinstance(item, NewItem):
            item = NewItem.model_validate(item)
        payload.append(item.to_payload())
    return payload


async def list_endpoints(*, client: EndpointsClient | None = None) -> list[TreeCategory]:
    """List all endpoints grouped by category."""
    client = client or get_client()
    response = await client.get("/api/endpoints/tree")
    return TreeResponse.model_validate(response).categories


async def get_endpoint(path: str, *, client: EndpointsClient | None = None) -> EndpointDetails:
    """
    Get endpoint details including metadata.

    Args:
        path: Endpoint path (e.g., "/job-tracker/january-2026")
    """
    client = client or get_client()
    response = await client.get(f"/api/endpoints/{endpoint_url_path(path)}")
    return EndpointDetails.model_validate(response)


async def create_endpoint(
    path: str,
    items: Iterable[NewItem | Mapping[str, Any]] | None = None,
    *,
    client: EndpointsClient | None = None,
) -> CreateEndpointResponse:
    """
    Create a new endpoint.

    Args:
        path: Endpoint path (e.g., "/projects/q1-2026")
        items: Optional initial items, each shaped {"data": {...}}
    """
    client = client or get_client()
    body: dict[str, Any] = {"path": path}
    if items is not None:
        body["items"] = _serialize_items(items)
    response = await client.post("/api/endpoints", body)
    return CreateEndpointResponse.model_validate(response)


async def append_items(
    path: str,
    items: Iterable[NewItem | Mapping[str, Any]],
    *,
    client: EndpointsClient | None = None,
) -> AppendItemsResponse:
    """
    Append items to an existing endpoint.

    Args:
        path: Endpoint path (e.g., "/job-tracker/january-2026")
        items: Items to append, each shaped {"data": {...}}
    """
    client = client or get_client()
    response = await client.patch(
        f"/api/endpoints/{endpoint_url_path(path)}",
        {"items": _serialize_items(items)},
    )
    return AppendItemsResponse.model_validate(response)


async def delete_endpoint(
    path: str, *, client: EndpointsClient | None = None
) -> DeleteEndpointResponse:
    """
    Delete an endpoint and all associated files.

    Per-file failures are reported in `file_results`; they do not raise.
    """
    client = client or get_client()
    response = await client.delete(f"/api/endpoints/{endpoint_url_path(path)}")
    return DeleteEndpointResponse.model_validate(response)
