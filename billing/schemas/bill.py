from datetime import datetime
from pydantic import BaseModel

from ..models.category import EntryType
from .fields import Amount, RecordId


class BillCreate(BaseModel):
    """Fields for creating a bill."""
    amount: Amount | None = None
    type: EntryType | None = None
    category_id: RecordId | None = None
    title: str | None = None
    description: str | None = None
    date: datetime | None = None


class BillUpdate(BaseModel):
    """Fields for updating a bill (all optional)."""
    amount: Amount | None = None
    type: EntryType | None = None
    category_id: RecordId | None = None
    title: str | None = None
    description: str | None = None
    date: datetime | None = None


class BillResponse(BaseModel):
    """Bill response with all fields."""
    id: int
    amount: float
    type: EntryType
    category_id: int | None = None
    title: str | None = None
    description: str | None = None
    date: datetime
    created_at: datetime
    updated_at: datetime

    class Config:
        from_attributes = True


class BillPage(BaseModel):
    page: int
    per_page: int
    total: int
    items: list[BillResponse]
