"""File Schemas."""

from pydantic import Field

from endpoint_assistant.schemas.base import ApiModel


class FileUrl(ApiModel):
    """Presigned URL for a stored file."""

    url: str
    expires_in: int = Field(description="Seconds until the URL expires")
