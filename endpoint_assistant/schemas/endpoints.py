"""
Endpoint Schemas.

Endpoint details carry metadata items in one of two shapes, depending on
how the items were produced:

    simple      {id, data, createdAt}
    extracted   {filePath, fileType, fileSize?, originalText, summary, entities}

The server does not tag them, so the variant is chosen from the payload
itself (a "data" key means simple). Callers branch on `item.kind`.
"""

from typing import Annotated, Any, Literal, Union

from pydantic import Discriminator, Field, Tag

from endpoint_assistant.schemas.base import ApiModel


class Endpoint(ApiModel):
    """An endpoint as returned by detail, create, append and scan calls."""

    id: int
    path: str
    category: str
    slug: str


class TreeEndpoint(ApiModel):
    """An endpoint entry within the category tree."""

    id: int
    path: str
    slug: str


class TreeCategory(ApiModel):
    """A category and the endpoints filed under it."""

    name: str
    endpoints: list[TreeEndpoint] = Field(default_factory=list)


class TreeResponse(ApiModel):
    """Response of GET /api/endpoints/tree."""

    categories: list[TreeCategory] = Field(default_factory=list)


class ExtractedEntity(ApiModel):
    """A named entity found by AI extraction."""

    name: str
    type: str
    role: str | None = None


class SimpleMetadataItem(ApiModel):
    """A stored record with free-form data."""

    kind: Literal["simple"] = Field(default="simple", exclude=True)
    id: int | str
    data: Any
    created_at: str


class ExtractedMetadataItem(ApiModel):
    """A record produced by AI extraction from a source file or text."""

    kind: Literal["extracted"] = Field(default="extracted", exclude=True)
    file_path: str | None = None
    file_type: str
    file_size: int | None = None
    original_text: str
    summary: str
    entities: list[ExtractedEntity] = Field(default_factory=list)


def _metadata_kind(value: Any) -> str:
    if isinstance(value, dict):
        return "simple" if "data" in value else "extracted"
    return getattr(value, "kind", "extracted")


MetadataItem = Annotated[
    Union[
        Annotated[SimpleMetadataItem, Tag("simple")],
        Annotated[ExtractedMetadataItem, Tag("extracted")],
    ],
    Discriminator(_metadata_kind),
]


class EndpointMetadata(ApiModel):
    """Items of an endpoint, split by whether they were seen before."""

    old_metadata: list[MetadataItem] = Field(default_factory=list)
    new_metadata: list[MetadataItem] = Field(default_factory=list)


class EndpointDetails(ApiModel):
    """Response of GET /api/endpoints/{path}."""

    endpoint: Endpoint
    metadata: EndpointMetadata
    total_items: int


class NewItem(ApiModel):
    """An item to add to an endpoint."""

    data: dict[str, Any]


class CreateEndpointResponse(ApiModel):
    """Response of POST /api/endpoints."""

    endpoint: Endpoint
    items_added: int


class AppendItemsResponse(ApiModel):
    """Response of PATCH /api/endpoints/{path}."""

    endpoint: Endpoint
    items_added: int
    total_items: int


class FileDeleteResult(ApiModel):
    """Outcome of deleting one stored file."""

    key: str
    success: bool
    error: str | None = None


class DeleteEndpointResponse(ApiModel):
    """Response of DELETE /api/endpoints/{path}; file failures are listed, not raised."""

    success: bool
    deleted_files: int
    file_results: list[FileDeleteResult] = Field(default_factory=list)
