from .base import Base
from .category import Category, EntryType
from .bill import Bill

__all__ = [
    "Base",
    "Category",
    "EntryType",
    "Bill",
]
