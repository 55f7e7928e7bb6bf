from __future__ import annotations

from typing import Optional

from loguru import logger
from sqlalchemy import create_engine
from sqlalchemy.engine import Engine, make_url
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.pool import StaticPool

from .models import metadata
from .settings import Settings

_engine: Optional[Engine] = None


def _build_engine(database_url: str) -> Engine:
    url = make_url(database_url)
    if url.get_backend_name() == "sqlite":
        kwargs = {"connect_args": {"check_same_thread": False}}
        if url.database in (None, "", ":memory:"):
            # An in-memory database only exists on its one connection.
            kwargs["poolclass"] = StaticPool
        return create_engine(url, **kwargs)
    return create_engine(url, pool_pre_ping=True)


# PUBLIC_INTERFACE
def init_engine(settings: Settings) -> Engine:
    """
    Create the process-wide engine (and its connection pool).

    When settings.create_schema is set, the todos table is created if it
    does not exist yet. An unreachable database is logged, not raised: the
    service still starts and each request reports the failure itself.
    """
    global _engine
    if _engine is not None:
        _engine.dispose()
    _engine = _build_engine(settings.database_url)
    logger.info("Database engine ready: {}", _engine.url.render_as_string(hide_password=True))
    if settings.create_schema:
        try:
            metadata.create_all(_engine, checkfirst=True)
        except SQLAlchemyError as e:
            logger.error("Could not create schema: {}", e)
    return _engine


# PUBLIC_INTERFACE
def get_engine() -> Engine:
    """Return the engine created by init_engine."""
    if _engine is None:
        raise RuntimeError("Database not initialized")
    return _engine


# PUBLIC_INTERFACE
def dispose_engine() -> None:
    """Close all pooled connections and forget the engine."""
    global _engine
    if _engine is not None:
        _engine.dispose()
        logger.info("Database engine disposed")
    _engine = None
