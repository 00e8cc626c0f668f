from fastapi import APIRouter, Depends, Query
from sqlalchemy.orm import Session

from ..database import get_db
from ..schemas import LineChartResponse
from ..services import AggregateService

router = APIRouter()


@router.get("/line", response_model=LineChartResponse)
def monthly_line(
    year: int | None = Query(None, ge=1, le=9998),
    db: Session = Depends(get_db),
):
    """Income and expense per month of a year; months without bills are omitted."""
    return AggregateService(db).monthly_line(year=year)
