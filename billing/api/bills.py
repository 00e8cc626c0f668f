from typing import Annotated
from fastapi import APIRouter, Depends, Path, Query
from sqlalchemy.orm import Session

from ..auth import require_admin
from ..config import PER_PAGE
from ..database import get_db
from ..schemas.fields import MIN_ID, MAX_ID
from ..schemas import (
    BillCreate,
    BillUpdate,
    BillResponse,
    BillPage,
    SummaryResponse,
    MutationResult,
)
from ..services import BillService, AggregateService

router = APIRouter()

BillId = Annotated[int, Path(ge=MIN_ID, le=MAX_ID)]


@router.get("", response_model=BillPage)
def list_bills(page: int = Query(1, ge=1), db: Session = Depends(get_db)):
    """Get one page of bills, most recent first."""
    service = BillService(db)
    items, total = service.list_bills(page=page)
    return BillPage(
        page=page,
        per_page=PER_PAGE,
        total=total,
        items=[BillResponse.model_validate(b) for b in items],
    )


# Must be registered before /{bill_id}
@router.get("/summary", response_model=SummaryResponse)
def get_summary(db: Session = Depends(get_db)):
    """Income and expense totals for this month, this week and all time."""
    return AggregateService(db).summary()


@router.get("/{bill_id}", response_model=BillResponse)
def get_bill(bill_id: BillId, db: Session = Depends(get_db)):
    """Get a single bill by ID."""
    return BillService(db).get_bill(bill_id)


@router.post(
    "",
    response_model=MutationResult,
    status_code=201,
    dependencies=[Depends(require_admin)],
)
def create_bill(bill: BillCreate, db: Session = Depends(get_db)):
    """Create a bill record."""
    service = BillService(db)
    db_bill = service.create_bill(**bill.model_dump())
    return MutationResult(data=db_bill.id)


@router.put(
    "/{bill_id}",
    response_model=MutationResult,
    dependencies=[Depends(require_admin)],
)
def update_bill(bill_id: BillId, bill: BillUpdate, db: Session = Depends(get_db)):
    """Update a bill."""
    service = BillService(db)
    db_bill = service.update_bill(bill_id, bill.model_dump(exclude_unset=True))
    return MutationResult(data=db_bill.id)


@router.delete(
    "/{bill_id}",
    response_model=MutationResult,
    response_model_exclude_none=True,
    dependencies=[Depends(require_admin)],
)
def delete_bill(bill_id: BillId, db: Session = Depends(get_db)):
    """Delete a bill. Succeeds even if it does not exist."""
    BillService(db).delete_bill(bill_id)
    return MutationResult()
