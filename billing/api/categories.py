from typing import Annotated
from fastapi import APIRouter, Depends, Path, Query
from sqlalchemy.orm import Session

from ..auth import require_admin
from ..config import PER_PAGE
from ..database import get_db
from ..schemas.fields import MIN_ID, MAX_ID
from ..schemas import (
    CategoryCreate,
    CategoryUpdate,
    CategoryResponse,
    CategoryPage,
    MutationResult,
)
from ..services import CategoryService

router = APIRouter()

CategoryId = Annotated[int, Path(ge=MIN_ID, le=MAX_ID)]


@router.get("", response_model=CategoryPage)
def list_categories(page: int = Query(1, ge=1), db: Session = Depends(get_db)):
    """Get one page of categories, oldest first."""
    service = CategoryService(db)
    items, total = service.list_categories(page=page)
    return CategoryPage(
        page=page,
        per_page=PER_PAGE,
        total=total,
        items=[CategoryResponse.model_validate(c) for c in items],
    )


@router.get("/all", response_model=list[CategoryResponse])
def list_all_categories(db: Session = Depends(get_db)):
    """Get all categories."""
    return CategoryService(db).list_all()


@router.get("/{category_id}", response_model=CategoryResponse)
def get_category(category_id: CategoryId, db: Session = Depends(get_db)):
    """Get a single category by ID."""
    return CategoryService(db).get_category(category_id)


@router.post(
    "",
    response_model=MutationResult,
    status_code=201,
    dependencies=[Depends(require_admin)],
)
def create_category(category: CategoryCreate, db: Session = Depends(get_db)):
    """Create a new category."""
    service = CategoryService(db)
    db_category = service.create_category(
        name=category.name,
        type=category.type,
        parent_id=category.parent_id,
    )
    return MutationResult(data=db_category.id)


@router.put(
    "/{category_id}",
    response_model=MutationResult,
    dependencies=[Depends(require_admin)],
)
def update_category(
    category_id: CategoryId,
    category: CategoryUpdate,
    db: Session = Depends(get_db)
):
    """Update a category."""
    service = CategoryService(db)
    db_category = service.update_category(
        category_id, category.model_dump(exclude_unset=True)
    )
    return MutationResult(data=db_category.id)


@router.delete(
    "/{category_id}",
    response_model=MutationResult,
    response_model_exclude_none=True,
    dependencies=[Depends(require_admin)],
)
def delete_category(category_id: CategoryId, db: Session = Depends(get_db)):
    """Delete a category. Succeeds even if it does not exist."""
    CategoryService(db).delete_category(category_id)
    return MutationResult()
