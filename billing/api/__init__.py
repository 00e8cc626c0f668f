from fastapi import APIRouter, Depends

from ..auth import get_current_identity
from .categories import router as categories_router
from .bills import router as bills_router
from .charts import router as charts_router

# Every route requires an authenticated caller
api_router = APIRouter(dependencies=[Depends(get_current_identity)])

api_router.include_router(categories_router, prefix="/categories", tags=["categories"])
api_router.include_router(bills_router, prefix="/bills", tags=["bills"])
api_router.include_router(charts_router, prefix="/charts", tags=["charts"])
