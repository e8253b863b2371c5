"""Repository layer for folder and file data access."""

from typing import Optional

from common.logging_config import get_logger
from volders import config
from volders.database import Database
from volders.repositories.base import VolderRepository
from volders.repositories.memory_repository import MemoryRepository
from volders.repositories.sql_repository import SQLRepository

logger = get_logger(__name__)

BACKENDS = ("memory", "sqlite")


def create_repository(
    backend: Optional[str] = None,
    database_path: Optional[str] = None
) -> VolderRepository:
    """
    Build a repository for the configured backend.

    Args:
        backend: "memory" or "sqlite". Defaults to VOLDERS_REPOSITORY_BACKEND
        database_path: SQLite file path. Defaults to VOLDERS_DATABASE_PATH

    Returns:
        Repository instance; the SQLite schema is created if missing

    Raises:
        ValueError: If backend is not a known backend name, or database_path
            names an in-memory SQLite database
    """
    backend = (backend or config.REPOSITORY_BACKEND).lower()

    if backend == "memory":
        logger.info("Using in-memory repository")
        return MemoryRepository()

    if backend == "sqlite":
        db = Database(database_path or config.DATABASE_PATH)
        db.init_schema()
        logger.info(f"Using SQLite repository [path={db.path}]")
        return SQLRepository(db)

    raise ValueError(f"Unknown repository backend: {backend!r} (expected one of {BACKENDS})")


__all__ = [
    "VolderRepository",
    "MemoryRepository",
    "SQLRepository",
    "create_repository",
]
