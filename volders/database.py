"""Database schema and connection management for SQLite."""

import sqlite3
from contextlib import contextmanager
from pathlib import Path
from typing import Generator

from common.logging_config import get_logger

logger = get_logger(__name__)

IN_MEMORY_PATHS = ("", ":memory:")


class Database:
    """
    SQLite database holding the folders and files tables.

    Each call to connection() opens a fresh connection, so a Database can be
    shared between threads. For the same reason the path must name a file:
    an in-memory database would vanish between connections.
    """

    def __init__(self, path: str):
        if path in IN_MEMORY_PATHS or "mode=memory" in path:
            raise ValueError(f"Database path must be a file, got {path!r}")
        self.path = path

    def init_schema(self) -> None:
        """
        Create tables and indexes if they don't exist.
        """
        db_path = Path(self.path)
        db_path.parent.mkdir(parents=True, exist_ok=True)

        with self.connection() as conn:
            cursor = conn.cursor()

            cursor.execute("""
                CREATE TABLE IF NOT EXISTS folders (
                    id TEXT PRIMARY KEY DEFAULT (lower(hex(randomblob(16)))),
                    user TEXT NOT NULL DEFAULT '',
                    parent_id TEXT,
                    name TEXT NOT NULL,
                    creation_date TEXT NOT NULL,
                    modified_date TEXT NOT NULL,
                    FOREIGN KEY(parent_id) REFERENCES folders(id)
                )
            """)

            cursor.execute("""
                CREATE TABLE IF NOT EXISTS files (
                    id TEXT PRIMARY KEY DEFAULT (lower(hex(randomblob(16)))),
                    user TEXT NOT NULL DEFAULT '',
                    folder_id TEXT NOT NULL,
                    name TEXT NOT NULL,
                    content_type TEXT NOT NULL,
                    size INTEGER NOT NULL,
                    creation_date TEXT NOT NULL,
                    modified_date TEXT NOT NULL,
                    data BLOB,
                    FOREIGN KEY(folder_id) REFERENCES folders(id)
                )
            """)

            cursor.execute("""
                CREATE INDEX IF NOT EXISTS idx_folders_parent_id ON folders(parent_id)
            """)

            cursor.execute("""
                CREATE INDEX IF NOT EXISTS idx_files_folder_id ON files(folder_id)
            """)

        logger.info(f"Database schema initialized [path={self.path}]")

    @contextmanager
    def connection(self) -> Generator[sqlite3.Connection, None, None]:
        """
        Context manager for database connections.

        Commits when the block exits normally, rolls back otherwise, and
        always closes the connection.
        """
        conn = sqlite3.connect(self.path)
        conn.row_factory = sqlite3.Row
        try:
            conn.execute("PRAGMA foreign_keys = ON")
            yield conn
            conn.commit()
        except BaseException:
            conn.rollback()
            raise
        finally:
            conn.close()
