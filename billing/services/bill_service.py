import logging
from datetime import datetime
from decimal import Decimal
from sqlalchemy.orm import Session

from ..config import PER_PAGE
from ..database import commit
from ..errors import NotFoundError
from ..models import Bill, EntryType
from .pagination import paginate, is_present

logger = logging.getLogger(__name__)

# Applied when supplied and not blank
_REQUIRED_FIELDS = ("amount", "type", "date")
# Applied when supplied and not null; an empty string is a valid value
_OPTIONAL_FIELDS = ("title", "description", "category_id")


class BillService:
    def __init__(self, db: Session):
        self.db = db

    def list_bills(self, page: int = 1, per_page: int = PER_PAGE) -> tuple[list[Bill], int]:
        query = self.db.query(Bill).order_by(Bill.date.desc(), Bill.id.desc())
        return paginate(query, page, per_page)

    def get_bill(self, bill_id: int) -> Bill:
        bill = self.db.query(Bill).filter(Bill.id == bill_id).first()
        if not bill:
            raise NotFoundError("Bill", bill_id)
        return bill

    def create_bill(
        self,
        amount: Decimal | float | None,
        type: EntryType | None = None,
        category_id: int | None = None,
        title: str | None = None,
        description: str | None = None,
        date: datetime | None = None,
    ) -> Bill:
        bill = Bill(
            amount=amount,
            type=type or EntryType.EXPENSE,
            category_id=category_id,
            title=title,
            description=description,
        )
        if date is not None:
            bill.date = date
        self.db.add(bill)
        commit(self.db)
        logger.info("Created bill %s (%s %s)", bill.id, bill.type.value, bill.amount)
        return bill

    def update_bill(self, bill_id: int, changes: dict) -> Bill:
        bill = self.get_bill(bill_id)

        for field in _REQUIRED_FIELDS:
            if is_present(changes.get(field)):
                setattr(bill, field, changes[field])
        for field in _OPTIONAL_FIELDS:
            if changes.get(field) is not None:
                setattr(bill, field, changes[field])

        commit(self.db)
        logger.info("Updated bill %s", bill_id)
        return bill

    def delete_bill(self, bill_id: int) -> None:
        """Delete a bill. Missing ids are ignored."""
        bill = self.db.query(Bill).filter(Bill.id == bill_id).first()
        if bill is None:
            return
        self.db.delete(bill)
        commit(self.db)
        logger.info("Deleted bill %s", bill_id)
