"""Application context - central container for shared dependencies."""

import logging
from collections.abc import Generator
from contextlib import contextmanager
from dataclasses import dataclass

from sqlalchemy import Engine
from sqlalchemy.orm import Session, sessionmaker

from tierboard.config import Settings
from tierboard.db.session import build_engine, build_session_factory, session_scope

logger = logging.getLogger(__name__)


@dataclass
class AppContext:
    """Container for application-wide dependencies.

    Initialize once at app startup via create_context().
    """

    settings: Settings
    engine: Engine
    session_factory: sessionmaker[Session]

    @contextmanager
    def session(self) -> Generator[Session, None, None]:
        """Get a database session as a context manager.

        Commits on success, rolls back on error and always closes, so each
        request holds its connection only for the duration of the block.
        """
        with session_scope(self.session_factory) as session:
            yield session


def create_context(settings: Settings | None = None) -> AppContext:
    """Create and return a fully initialized application context."""
    logger.info("Creating application context")

    if settings is None:
        from tierboard.config import get_settings

        settings = get_settings()

    database_url = settings.resolved_database_url
    engine = build_engine(database_url)
    logger.debug(f"Database engine created: {engine.url.render_as_string(hide_password=True)}")

    session_factory = build_session_factory(engine)

    logger.info("Application context created successfully")

    return AppContext(
        settings=settings,
        engine=engine,
        session_factory=session_factory,
    )
