import enum
from sqlalchemy import String, Integer, Enum
from sqlalchemy.orm import Mapped, mapped_column

from .base import Base, TimestampMixin


class EntryType(enum.Enum):
    """Direction of money for categories and bills."""
    INCOME = "INCOME"
    EXPENSE = "EXPENSE"


class Category(Base, TimestampMixin):
    """
    Label applied to bills, typed as income or expense.
    Supports optional hierarchy (parent_id for subcategories).
    """

    __tablename__ = "categories"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    name: Mapped[str] = mapped_column(String(255), nullable=False)
    type: Mapped[EntryType] = mapped_column(
        Enum(EntryType), nullable=False, default=EntryType.EXPENSE
    )

    # Optional parent, not constrained: dangling ids and cycles are stored as given
    parent_id: Mapped[int | None] = mapped_column(Integer, nullable=True, index=True)

    def __repr__(self) -> str:
        return f"<Category(id={self.id}, name='{self.name}', type={self.type})>"
