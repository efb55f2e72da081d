"""Post schemas."""

from typing import Dict, Optional
from pydantic import BaseModel, ConfigDict


class PostForm(BaseModel):
    """Values submitted by the edit form."""
    title: str = ""
    slug: str = ""
    markdown: str = ""


class PostFormErrors(BaseModel):
    """Per-field error messages for the edit form."""
    title: Optional[str] = None
    slug: Optional[str] = None
    markdown: Optional[str] = None

    @property
    def has_errors(self) -> bool:
        return any(message for message in self.as_dict().values())

    def as_dict(self) -> Dict[str, str]:
        """Only the fields that carry an error."""
        return {field: message for field, message in self.model_dump().items() if message}


class PostRead(BaseModel):
    """Schema for reading a post."""
    model_config = ConfigDict(from_attributes=True)

    title: str
    slug: str
    markdown: str
