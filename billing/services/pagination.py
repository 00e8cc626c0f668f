from sqlalchemy.orm import Query

from ..config import PER_PAGE


def paginate(query: Query, page: int, per_page: int = PER_PAGE) -> tuple[list, int]:
    """Return one 1-indexed page of an ordered query and the total row count."""
    total = query.order_by(None).count()
    items = query.offset((page - 1) * per_page).limit(per_page).all()
    return items, total


def is_present(value) -> bool:
    """True for a supplied value: not None and not a blank string."""
    if value is None:
        return False
    if isinstance(value, str) and not value.strip():
        return False
    return True
