"""Database session and engine utilities.

This module creates the synchronous SQLAlchemy engine and the session factory
used by the API. SQLite URLs get ``check_same_thread`` disabled so a session
can cross FastAPI's threadpool boundary.
"""

from __future__ import annotations

import logging
from time import perf_counter

from sqlalchemy import create_engine, event, text
from sqlalchemy.engine import Engine
from sqlalchemy.engine.url import make_url
from sqlalchemy.exc import OperationalError
from sqlalchemy.orm import sessionmaker

from lexdrill.core.config import settings

logger = logging.getLogger(__name__)


def _connect_args_for(url: str) -> dict[str, object]:
    try:
        parsed_url = make_url(url)
    except Exception:
        return {}

    if parsed_url.drivername.startswith("sqlite"):
        return {"check_same_thread": False}
    return {}


def _install_slow_query_logger(engine: Engine) -> None:
    """Attach cursor hooks that warn when a statement exceeds the threshold."""

    threshold_ms = max(getattr(settings, "SQLALCHEMY_SLOW_QUERY_THRESHOLD_MS", 0) or 0, 0)
    if threshold_ms == 0:
        return

    marker = "_lexdrill_slow_query_hook"
    if getattr(engine, marker, False):
        return

    setattr(engine, marker, True)

    def _before_cursor_execute(conn, cursor, statement, parameters, context, executemany):  # type: ignore[override]
        context._lexdrill_query_start = perf_counter()

    def _after_cursor_execute(conn, cursor, statement, parameters, context, executemany):  # type: ignore[override]
        start = getattr(context, "_lexdrill_query_start", None)
        if start is None:
            return

        elapsed_ms = (perf_counter() - start) * 1000.0
        if elapsed_ms < threshold_ms:
            return

        snippet = " ".join(statement.split()) if isinstance(statement, str) else str(statement)
        if len(snippet) > 200:
            snippet = snippet[:197] + "..."

        params_preview = repr(parameters)
        if len(params_preview) > 200:
            params_preview = params_preview[:197] + "..."

        logger.warning(
            "Slow SQL (%.1f ms) - %s | params=%s",
            elapsed_ms,
            snippet,
            params_preview,
        )

    event.listen(engine, "before_cursor_execute", _before_cursor_execute)
    event.listen(engine, "after_cursor_execute", _after_cursor_execute)


def _verify_database_connection(engine: Engine) -> None:
    with engine.connect() as connection:
        connection.execute(text("SELECT 1"))


# These globals are populated by ``configure_database``.
engine: Engine
SessionLocal: sessionmaker


def configure_database(database_url: str | None = None) -> None:
    """Initialise the engine and session factory.

    ``database_url`` defaults to the environment configuration. The
    connection is verified eagerly so a misconfigured URL fails at boot
    rather than on the first request.
    """

    global engine, SessionLocal

    target_url = str(database_url or settings.DATABASE_URL)
    logger.info("Configuring database: %s", make_url(target_url).render_as_string(hide_password=True))

    candidate_engine = create_engine(
        target_url,
        pool_pre_ping=True,
        connect_args=_connect_args_for(target_url),
    )
    _install_slow_query_logger(candidate_engine)

    try:
        _verify_database_connection(candidate_engine)
    except (OperationalError, OSError) as exc:
        logger.error("Database connection failed: %s", exc)
        candidate_engine.dispose()
        raise

    engine = candidate_engine
    SessionLocal = sessionmaker(autoflush=False, bind=engine)


# Initialise the engine at import time so the rest of the application can use
# it immediately.
configure_database()
