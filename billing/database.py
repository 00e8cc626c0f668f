import logging
from sqlalchemy import create_engine
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import sessionmaker, Session
from sqlalchemy.engine import Engine

from .errors import PersistenceError
from .models import Base

logger = logging.getLogger(__name__)

# Global state for the open database
_current_engine: Engine | None = None
_current_session_factory: sessionmaker | None = None


def init_db(database_url: str) -> None:
    """
    Open the database at database_url.

    Creates the tables if they don't exist.
    """
    global _current_engine, _current_session_factory

    if _current_engine is not None:
        close_db()

    connect_args = {}
    if database_url.startswith("sqlite"):
        # Sync endpoints run in a threadpool
        connect_args["check_same_thread"] = False

    _current_engine = create_engine(database_url, echo=False, connect_args=connect_args)
    _current_session_factory = sessionmaker(bind=_current_engine)

    Base.metadata.create_all(_current_engine)
    logger.info("Opened database %s", _current_engine.url.render_as_string(hide_password=True))


def close_db() -> None:
    """Close the open database."""
    global _current_engine, _current_session_factory

    if _current_engine is not None:
        _current_engine.dispose()
        _current_engine = None
        _current_session_factory = None


def get_session() -> Session:
    """Get a session for the open database."""
    if _current_session_factory is None:
        raise RuntimeError("No database is currently open")
    return _current_session_factory()


def get_db():
    """FastAPI dependency for database sessions."""
    session = get_session()
    try:
        yield session
        session.commit()
    except Exception:
        session.rollback()
        raise
    finally:
        session.close()


def commit(session: Session) -> None:
    """Commit pending writes, reporting any store rejection as PersistenceError."""
    try:
        session.commit()
    except (SQLAlchemyError, OverflowError) as exc:
        session.rollback()
        message = str(getattr(exc, "orig", None) or exc)
        logger.warning("Write rejected by the store: %s", message)
        raise PersistenceError(message) from exc


def is_db_open() -> bool:
    """Check if a database is currently open."""
    return _current_engine is not None
