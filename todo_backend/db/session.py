"""Database connection handle.

The engine is owned by a ``Database`` instance that the application creates at
startup and disposes at shutdown; stores receive it explicitly.
"""

import logging

from sqlmodel import SQLModel, Session, create_engine

from ..core.config import settings
from .. import models  # noqa: F401  (registers every table on SQLModel.metadata)

logger = logging.getLogger(__name__)


# Helper function to ensure URL format is correct
def get_db_url(url: str = None) -> str:
    url = url or settings.DATABASE_URL
    if not url:
        return "sqlite:///todo.db"
    # Sync engine only; strip async drivers and legacy postgres scheme
    url = url.replace("postgres://", "postgresql://")
    return url.replace("+asyncpg", "").replace("+aiosqlite", "")


class Database:
    def __init__(self, url: str = None, echo: bool = None, timeout: float = None):
        self.url = get_db_url(url)
        echo = settings.SQL_ECHO if echo is None else echo
        timeout = settings.DB_TIMEOUT if timeout is None else timeout

        # --- CONFIGURATION FOR SQLITE ---
        if self.url.startswith("sqlite"):
            self.engine = create_engine(
                self.url,
                echo=echo,
                connect_args={"check_same_thread": False, "timeout": timeout},
            )
        # --- CONFIGURATION FOR POSTGRESQL ---
        else:
            self.engine = create_engine(
                self.url,
                echo=echo,
                pool_pre_ping=True,
                pool_size=5,
                max_overflow=10,
            )

    def create_all(self) -> None:
        """Create all database tables."""
        SQLModel.metadata.create_all(self.engine)
        logger.info("Database ready url=%s", self.engine.url.render_as_string(hide_password=True))

    def session(self) -> Session:
        # Returned records stay readable after the session closes
        return Session(self.engine, expire_on_commit=False)

    def dispose(self) -> None:
        self.engine.dispose()
        logger.info("Database engine disposed")
