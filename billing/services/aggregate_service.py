from datetime import date, datetime, time, timedelta
from sqlalchemy.orm import Session
from sqlalchemy import func, extract

from ..models import Bill, EntryType


def month_bounds(today: date) -> tuple[datetime, datetime]:
    """[first of this month, first of next month)."""
    start = today.replace(day=1)
    if start.month == 12:
        end = start.replace(year=start.year + 1, month=1)
    else:
        end = start.replace(month=start.month + 1)
    return datetime.combine(start, time.min), datetime.combine(end, time.min)


def week_bounds(today: date) -> tuple[datetime, datetime]:
    """[most recent Sunday, following Sunday). Weeks start on Sunday."""
    # weekday(): Monday == 0 ... Sunday == 6
    start = today - timedelta(days=(today.weekday() + 1) % 7)
    end = start + timedelta(days=7)
    return datetime.combine(start, time.min), datetime.combine(end, time.min)


def year_bounds(year: int) -> tuple[datetime, datetime]:
    return datetime(year, 1, 1), datetime(year + 1, 1, 1)


class AggregateService:
    """Read-only statistics over bills, recomputed on every call."""

    def __init__(self, db: Session):
        self.db = db

    def _sum_cents(self, entry_type: EntryType, start: datetime | None = None, end: datetime | None = None) -> int:
        query = self.db.query(func.coalesce(func.sum(Bill.amount_cents), 0)).filter(
            Bill.type == entry_type
        )
        if start is not None:
            query = query.filter(Bill.date >= start)
        if end is not None:
            query = query.filter(Bill.date < end)
        return int(query.scalar() or 0)

    def _period_totals(self, entry_type: EntryType, today: date) -> dict:
        month_start, month_end = month_bounds(today)
        week_start, week_end = week_bounds(today)
        return {
            "month": self._sum_cents(entry_type, month_start, month_end) / 100.0,
            "week": self._sum_cents(entry_type, week_start, week_end) / 100.0,
            "total": self._sum_cents(entry_type) / 100.0,
        }

    def summary(self, today: date | None = None) -> dict:
        """Income and expense sums for the current month, current week and all time."""
        today = today or date.today()
        return {
            "income": self._period_totals(EntryType.INCOME, today),
            "expense": self._period_totals(EntryType.EXPENSE, today),
        }

    def _monthly_amounts(self, entry_type: EntryType, year: int) -> list[dict]:
        start, end = year_bounds(year)
        month_col = extract("month", Bill.date)

        rows = (
            self.db.query(
                month_col.label("month"),
                func.sum(Bill.amount_cents).label("amount_cents"),
            )
            .filter(
                Bill.type == entry_type,
                Bill.date >= start,
                Bill.date < end,
            )
            .group_by(month_col)
            .order_by(month_col)
            .all()
        )

        # Months without bills produce no row and are left out
        return [
            {"month": int(row.month) - 1, "amount": int(row.amount_cents or 0) / 100.0}
            for row in rows
        ]

    def monthly_line(self, year: int | None = None) -> dict:
        """Per-month income and expense totals for one calendar year (January == 0)."""
        if year is None:
            year = date.today().year
        return {
            "year": year,
            "expense": self._monthly_amounts(EntryType.EXPENSE, year),
            "income": self._monthly_amounts(EntryType.INCOME, year),
        }
