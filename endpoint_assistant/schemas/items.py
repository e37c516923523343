"""Item Schemas."""

from endpoint_assistant.schemas.base import ApiModel


class DeletedItem(ApiModel):
    """What happened to a deleted item and its attached file."""

    item_id: int | str
    had_file: bool
    file_deleted: bool


class DeleteItemResponse(ApiModel):
    """Result of deleting one item from an endpoint."""

    success: bool
    deleted: DeletedItem
    endpoint_deleted: bool
    remaining_items: int
