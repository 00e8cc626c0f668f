from pydantic import BaseModel

from .category import CategoryCreate, CategoryUpdate, CategoryResponse, CategoryPage
from .bill import BillCreate, BillUpdate, BillResponse, BillPage
from .aggregate import PeriodTotals, SummaryResponse, MonthlyAmount, LineChartResponse


class MutationResult(BaseModel):
    """Acknowledgement returned by create, update and delete."""
    success: bool = True
    data: int | None = None


__all__ = [
    "CategoryCreate",
    "CategoryUpdate",
    "CategoryResponse",
    "CategoryPage",
    "BillCreate",
    "BillUpdate",
    "BillResponse",
    "BillPage",
    "PeriodTotals",
    "SummaryResponse",
    "MonthlyAmount",
    "LineChartResponse",
    "MutationResult",
]
