"""
Base Schemas.

Every payload of the Endpoints API uses camelCase keys. Models expose
snake_case attributes, accept either spelling on input, keep keys they do
not declare, and serialise back to the server's shape with
`model_dump(by_alias=True)`.
"""

from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel


class ApiModel(BaseModel):
    """Base for all request/response models."""

    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        extra="allow",
    )

    def to_payload(self) -> dict:
        """Serialise to the JSON shape the server sent or expects."""
        return self.model_dump(mode="json", by_alias=True, exclude_unset=True)
