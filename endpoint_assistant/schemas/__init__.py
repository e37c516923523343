# Pydantic schemas package
from endpoint_assistant.schemas.base import ApiModel
from endpoint_assistant.schemas.billing import BillingStats
from endpoint_assistant.schemas.endpoints import (
    AppendItemsResponse,
    CreateEndpointResponse,
    DeleteEndpointResponse,
    Endpoint,
    EndpointDetails,
    EndpointMetadata,
    ExtractedEntity,
    ExtractedMetadataItem,
    FileDeleteResult,
    MetadataItem,
    NewItem,
    SimpleMetadataItem,
    TreeCategory,
    TreeEndpoint,
    TreeResponse,
)
from endpoint_assistant.schemas.files import FileUrl
from endpoint_assistant.schemas.items import DeletedItem, DeleteItemResponse
from endpoint_assistant.schemas.scan import ScanFile, ScanResponse

__all__ = [
    "ApiModel",
    "AppendItemsResponse",
    "BillingStats",
    "CreateEndpointResponse",
    "DeleteEndpointResponse",
    "DeleteItemResponse",
    "DeletedItem",
    "Endpoint",
    "EndpointDetails",
    "EndpointMetadata",
    "ExtractedEntity",
    "ExtractedMetadataItem",
    "FileDeleteResult",
    "FileUrl",
    "MetadataItem",
    "NewItem",
    "ScanFile",
    "ScanResponse",
    "SimpleMetadataItem",
    "TreeCategory",
    "TreeEndpoint",
    "TreeResponse",
]
