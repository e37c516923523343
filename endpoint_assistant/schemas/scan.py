"""Scan Schemas."""

from dataclasses import dataclass

from endpoint_assistant.schemas.base import ApiModel
from endpoint_assistant.schemas.endpoints import Endpoint


@dataclass(frozen=True)
class ScanFile:
    """A file to upload for AI extraction."""

    filename: str
    content: bytes
    content_type: str | None = None


class ScanResponse(ApiModel):
    """Result of an AI extraction run."""

    success: bool
    endpoint: Endpoint
    entries_added: int
    total_entries: int
