"""Item Operations."""

from urllib.parse import quote

from endpoint_assistant.core.client import EndpointsClient, get_client
from endpoint_assistant.schemas.items import DeleteItemResponse


async def delete_item(
    item_id: str, path: str, *, client: EndpointsClient | None = None
) -> DeleteItemResponse:
    """
    Delete a single item from an endpoint.

    Args:
        item_id: The item ID to delete
        path: The endpoint path (e.g., "/job-tracker/january-2026"), sent
            fully encoded as the `path` query parameter
    """
    client = client or get_client()
    encoded_path = quote(path, safe="")
    response = await client.delete(f"/api/items/{quote(str(item_id), safe='')}?path={encoded_path}")
    return DeleteItemResponse.model_validate(response)
