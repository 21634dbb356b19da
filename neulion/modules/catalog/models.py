"""
Neulion catalog data models.

Plain records produced from SOAP responses. Field names follow Python
conventions; the Neulion names are kept as aliases so records can be
dumped back in the shape the API uses.
"""

import json
from datetime import date, datetime
from enum import Enum
from typing import List, Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator


class Category(BaseModel):
    """A video category of the configured group."""

    model_config = ConfigDict(populate_by_name=True)

    id: Optional[int] = Field(None, alias="categoryId", description="Category identifier")
    key: Optional[str] = Field(None, alias="categoryKey", description="Category key")
    name: Optional[str] = Field(None, description="Display name")
    parent_id: Optional[int] = Field(None, alias="parentId", description="Parent category id")


class ProgramDetail(BaseModel):
    """
    Details of a single VOD program.

    Only the identifier and the two array fields are typed; every other
    field the API returns is passed through as-is.
    """

    model_config = ConfigDict(populate_by_name=True, extra="allow")

    program_id: Optional[int] = Field(None, alias="programId", description="Program identifier")
    category_id_array: List[int] = Field(
        default_factory=list, alias="categoryIdArray", description="Categories the program is in"
    )
    tag_array: List[str] = Field(default_factory=list, alias="tagArray", description="Program tags")

    @field_validator("tag_array", mode="before")
    @classmethod
    def stringify_tags(cls, v):
        """Tags can come back as numbers when they look numeric."""
        if v is None:
            return []
        return [str(tag) for tag in v if tag is not None]

    def to_record(self) -> dict:
        """Flat record using the Neulion field names."""
        return self.model_dump(by_alias=True)


# Serialization Helpers


class NeulionJSONEncoder(json.JSONEncoder):
    """JSON encoder for catalog records."""

    def default(self, obj):
        if isinstance(obj, (datetime, date)):
            return obj.isoformat()
        elif isinstance(obj, Enum):
            return obj.value
        elif hasattr(obj, "model_dump"):
            return obj.model_dump(by_alias=True)
        return super().default(obj)


__all__ = ["Category", "ProgramDetail", "NeulionJSONEncoder"]
