"""Shared SQLAlchemy engine for the ledger database.

One pooled engine is created lazily per process and handed to repositories
through ``DatabaseEnginePort``. Connection settings come from the
environment (and a ``.env`` file when present):

- ``LEDGER_DB_URL``: SQLAlchemy URL, required.
- ``LEDGER_DB_POOL_SIZE``: persistent connections kept in the pool.
- ``LEDGER_DB_MAX_OVERFLOW``: extra connections opened under load.
"""

from dataclasses import dataclass
import os
import threading
from typing import Optional

import dotenv
from sqlalchemy import create_engine
from sqlalchemy.engine import Engine
from sqlalchemy.pool import QueuePool

from finledger.application.ports.database import DatabaseEnginePort
from finledger.infrastructure.logging.logger import get_app_logger
from finledger.infrastructure.settings import read_int_env

DEFAULT_POOL_SIZE = 5
DEFAULT_MAX_OVERFLOW = 5


@dataclass(frozen=True)
class DatabaseSettings:
    """Connection parameters of the ledger database.

    Attributes:
        url: SQLAlchemy URL including driver and credentials.
        pool_size: Connections kept open by the pool.
        max_overflow: Connections allowed beyond ``pool_size``.
    """

    url: str
    pool_size: int = DEFAULT_POOL_SIZE
    max_overflow: int = DEFAULT_MAX_OVERFLOW

    @classmethod
    def from_env(cls) -> "DatabaseSettings":
        """Build settings from the environment after loading ``.env``.

        Raises:
            RuntimeError: If ``LEDGER_DB_URL`` is missing or empty.
        """
        dotenv.load_dotenv()
        url = os.getenv("LEDGER_DB_URL", "").strip()
        if not url:
            raise RuntimeError("Missing environment variable: LEDGER_DB_URL")
        logger = get_app_logger()
        pool_size = read_int_env(
            "LEDGER_DB_POOL_SIZE", DEFAULT_POOL_SIZE, logger
        )
        if pool_size == 0:
            logger.warning("LEDGER_DB_POOL_SIZE must be positive; using default")
            pool_size = DEFAULT_POOL_SIZE
        return cls(
            url=url,
            pool_size=pool_size,
            max_overflow=read_int_env(
                "LEDGER_DB_MAX_OVERFLOW", DEFAULT_MAX_OVERFLOW, logger
            ),
        )


def _create_engine(settings: DatabaseSettings) -> Engine:
    """Create a pooled engine that checks connections before use."""
    return create_engine(
        settings.url,
        poolclass=QueuePool,
        pool_size=settings.pool_size,
        max_overflow=settings.max_overflow,
        pool_pre_ping=True,
        future=True,
    )


_ledger_engine: Optional[Engine] = None
_engine_lock = threading.Lock()


def get_ledger_engine() -> Engine:
    """Return the process-wide engine, creating it on first use.

    Returns:
        Engine: Engine connected to ``LEDGER_DB_URL``.

    Raises:
        RuntimeError: If the database URL is not configured.
    """
    global _ledger_engine
    if _ledger_engine is None:
        with _engine_lock:
            if _ledger_engine is None:
                settings = DatabaseSettings.from_env()
                _ledger_engine = _create_engine(settings)
                get_app_logger().info(
                    f"Ledger engine created: pool_size={settings.pool_size}, "
                    f"max_overflow={settings.max_overflow}"
                )
    return _ledger_engine


def dispose_ledger_engine() -> None:
    """Close pooled connections and forget the shared engine."""
    global _ledger_engine
    with _engine_lock:
        if _ledger_engine is not None:
            _ledger_engine.dispose()
            _ledger_engine = None


class SqlAlchemyDatabaseEngineAdapter(DatabaseEnginePort):
    """DatabaseEnginePort backed by the shared engine."""

    def get_ledger_engine(self) -> Engine:
        return get_ledger_engine()


__all__ = [
    "DatabaseSettings",
    "get_ledger_engine",
    "dispose_ledger_engine",
    "SqlAlchemyDatabaseEngineAdapter",
]
