import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI, Request
from fastapi.encoders import jsonable_encoder
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse

from .api import api_router
from .config import API_PREFIX, DATABASE_URL, ensure_config_dir
from .database import init_db, close_db, is_db_open
from .errors import NotFoundError, PersistenceError

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Handle startup and shutdown events."""
    if not is_db_open():
        if DATABASE_URL.startswith("sqlite"):
            ensure_config_dir()
        init_db(DATABASE_URL)
    yield
    # Cleanup on shutdown
    close_db()


app = FastAPI(
    title="Billing Ledger",
    description="Categories, bills and income/expense statistics",
    version="0.1.0",
    lifespan=lifespan
)


@app.exception_handler(NotFoundError)
async def not_found_handler(request: Request, exc: NotFoundError):
    return JSONResponse(status_code=404, content={"detail": "404 Not Found"})


@app.exception_handler(PersistenceError)
async def persistence_error_handler(request: Request, exc: PersistenceError):
    logger.error("%s %s failed: %s", request.method, request.url.path, exc)
    return JSONResponse(status_code=500, content={"detail": str(exc)})


@app.exception_handler(RequestValidationError)
async def validation_error_handler(request: Request, exc: RequestValidationError):
    # The rejected input is left out: NaN and Infinity cannot be written back as JSON
    errors = [
        {key: value for key, value in error.items() if key != "input"}
        for error in exc.errors()
    ]
    return JSONResponse(status_code=422, content={"detail": jsonable_encoder(errors)})


# API routes
app.include_router(api_router, prefix=API_PREFIX)


@app.get("/health")
def health_check():
    """Health check endpoint."""
    return {"status": "ok", "database": is_db_open()}
