from datetime import datetime
from pydantic import BaseModel

from ..models.category import EntryType
from .fields import RecordId


class CategoryCreate(BaseModel):
    """
    Fields for creating a category.

    Left optional so that the store, not the request parser, decides
    what a complete record is.
    """
    name: str | None = None
    type: EntryType | None = None
    parent_id: RecordId | None = None


class CategoryUpdate(BaseModel):
    """Fields for updating a category (all optional)."""
    name: str | None = None
    type: EntryType | None = None
    parent_id: RecordId | None = None


class CategoryResponse(BaseModel):
    """Category response with all fields."""
    id: int
    name: str
    type: EntryType
    parent_id: int | None = None
    created_at: datetime
    updated_at: datetime

    class Config:
        from_attributes = True


class CategoryPage(BaseModel):
    page: int
    per_page: int
    total: int
    items: list[CategoryResponse]
