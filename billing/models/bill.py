from datetime import datetime
from decimal import Decimal
from sqlalchemy import String, Integer, DateTime, Enum
from sqlalchemy.orm import Mapped, mapped_column

from .base import Base, TimestampMixin
from .category import EntryType


class Bill(Base, TimestampMixin):
    """
    A single income or expense record.

    Amounts are stored as integer cents to avoid floating point issues.
    The sign of the amount is not tied to the type.
    """

    __tablename__ = "bills"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    amount_cents: Mapped[int] = mapped_column(Integer, nullable=False)
    type: Mapped[EntryType] = mapped_column(
        Enum(EntryType), nullable=False, default=EntryType.EXPENSE, index=True
    )

    # Not validated against categories
    category_id: Mapped[int | None] = mapped_column(Integer, nullable=True)

    title: Mapped[str | None] = mapped_column(String(255), nullable=True)
    description: Mapped[str | None] = mapped_column(String(1000), nullable=True)
    date: Mapped[datetime] = mapped_column(
        DateTime, nullable=False, default=datetime.now, index=True
    )

    @property
    def amount(self) -> float | None:
        """Get amount as decimal dollars."""
        if self.amount_cents is None:
            return None
        return self.amount_cents / 100.0

    @amount.setter
    def amount(self, value: Decimal | float | None) -> None:
        """Set amount from decimal dollars."""
        self.amount_cents = None if value is None else int(round(value * 100))

    def __repr__(self) -> str:
        return (
            f"<Bill(id={self.id}, date={self.date}, type={self.type}, "
            f"amount={self.amount}, title='{self.title}')>"
        )
