import logging
from sqlalchemy.orm import Session

from ..config import PER_PAGE
from ..database import commit
from ..errors import NotFoundError
from ..models import Category, EntryType
from .pagination import paginate, is_present

logger = logging.getLogger(__name__)


class CategoryService:
    def __init__(self, db: Session):
        self.db = db

    def list_categories(self, page: int = 1, per_page: int = PER_PAGE) -> tuple[list[Category], int]:
        query = self.db.query(Category).order_by(Category.id)
        return paginate(query, page, per_page)

    def list_all(self) -> list[Category]:
        return self.db.query(Category).order_by(Category.id).all()

    def get_category(self, category_id: int) -> Category:
        category = self.db.query(Category).filter(Category.id == category_id).first()
        if not category:
            raise NotFoundError("Category", category_id)
        return category

    def create_category(
        self,
        name: str | None,
        type: EntryType | None = None,
        parent_id: int | None = None,
    ) -> Category:
        category = Category(
            name=name,
            type=type or EntryType.EXPENSE,
            parent_id=parent_id,
        )
        self.db.add(category)
        commit(self.db)
        logger.info("Created category %s (%s)", category.id, category.name)
        return category

    def update_category(self, category_id: int, changes: dict) -> Category:
        """
        Apply the supplied fields to a category.

        Absent, null and blank values leave the field untouched. The parent
        is only reassigned when it differs from the current one.
        """
        category = self.get_category(category_id)

        if is_present(changes.get("name")):
            category.name = changes["name"]
        if is_present(changes.get("type")):
            category.type = changes["type"]
        parent_id = changes.get("parent_id")
        if is_present(parent_id) and parent_id != category.parent_id:
            category.parent_id = parent_id

        commit(self.db)
        logger.info("Updated category %s", category_id)
        return category

    def delete_category(self, category_id: int) -> None:
        """Delete a category. Missing ids are ignored; children and bills are kept."""
        category = self.db.query(Category).filter(Category.id == category_id).first()
        if category is None:
            return
        self.db.delete(category)
        commit(self.db)
        logger.info("Deleted category %s", category_id)
