from .category_service import CategoryService
from .bill_service import BillService
from .aggregate_service import AggregateService, month_bounds, week_bounds, year_bounds
from .pagination import paginate, is_present

__all__ = [
    "CategoryService",
    "BillService",
    "AggregateService",
    "month_bounds",
    "week_bounds",
    "year_bounds",
    "paginate",
    "is_present",
]
