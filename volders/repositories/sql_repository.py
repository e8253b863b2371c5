"""SQLite-backed repository for production use."""

import sqlite3
from contextlib import closing, contextmanager
from typing import Generator, List

from common.logging_config import get_logger
from volders.config import PROGRESS_HANDLER_INTERVAL
from volders.context import Context
from volders.database import Database
from volders.exceptions import NotFoundError, OperationCancelledError, StorageBackendError
from volders.models import File, Folder
from volders.repositories.base import VolderRepository
from volders.utils import from_timestamp, to_timestamp, utc_now

logger = get_logger(__name__)


# OverflowError comes from binding integers wider than 64 bits
STORE_ERRORS = (sqlite3.Error, OverflowError)

FOLDER_COLUMNS = "id, user, parent_id, name, creation_date, modified_date"
FILE_COLUMNS = "id, user, folder_id, name, content_type, size, creation_date, modified_date"

FOLDER_HIERARCHY_QUERY = f"""
    WITH RECURSIVE folder_hierarchy AS (
        SELECT {FOLDER_COLUMNS}
        FROM folders
        WHERE id = ?
        UNION
        SELECT f.id, f.user, f.parent_id, f.name, f.creation_date, f.modified_date
        FROM folders f
        INNER JOIN folder_hierarchy fh ON f.parent_id = fh.id
    )
    SELECT {FOLDER_COLUMNS}
    FROM folder_hierarchy
"""


def _row_to_folder(row: sqlite3.Row) -> Folder:
    return Folder(
        id=row["id"],
        user=row["user"],
        parent_id=row["parent_id"],
        name=row["name"],
        creation_date=from_timestamp(row["creation_date"]),
        modified_date=from_timestamp(row["modified_date"]),
    )


def _row_to_file(row: sqlite3.Row, include_data: bool) -> File:
    return File(
        id=row["id"],
        user=row["user"],
        folder_id=row["folder_id"],
        name=row["name"],
        content_type=row["content_type"],
        size=row["size"],
        creation_date=from_timestamp(row["creation_date"]),
        modified_date=from_timestamp(row["modified_date"]),
        data=bytes(row["data"]) if include_data and row["data"] is not None else None,
    )


@contextmanager
def _backend_errors(action: str) -> Generator[None, None, None]:
    """
    Translate store errors raised inside the block into StorageBackendError.
    """
    try:
        yield
    except STORE_ERRORS as e:
        logger.error(f"Failed to {action}: {e}", exc_info=True)
        raise StorageBackendError(f"Failed to {action}: {e}") from e


class SQLRepository(VolderRepository):
    """
    VolderRepository storing folders and files in SQLite.

    IDs are generated by the database and read back with RETURNING. Every
    statement is parameterized.
    """

    def __init__(self, db: Database):
        self.db = db

    # Folders

    def get_folder(self, folder_id: str) -> Folder:
        with _backend_errors(f"get folder [id={folder_id}]"):
            with self.db.connection() as conn:
                cursor = conn.execute(
                    f"SELECT {FOLDER_COLUMNS} FROM folders WHERE id = ?",
                    (folder_id,)
                )
                row = cursor.fetchone()

        if row is None:
            raise NotFoundError("folder", folder_id)
        return _row_to_folder(row)

    def create_folder(self, folder: Folder) -> None:
        logger.debug(f"Creating folder [name={folder.name}, parent_id={folder.parent_id}]")
        now = utc_now()

        with _backend_errors("create folder"):
            with self.db.connection() as conn:
                cursor = conn.execute(
                    """
                    INSERT INTO folders (user, parent_id, name, creation_date, modified_date)
                    VALUES (?, ?, ?, ?, ?)
                    RETURNING id
                    """,
                    (folder.user, folder.parent_id, folder.name, to_timestamp(now), to_timestamp(now))
                )
                folder.id = cursor.fetchall()[0]["id"]

        folder.creation_date = now
        folder.modified_date = now
        logger.info(f"Created folder [id={folder.id}]")

    def update_folder(self, folder: Folder) -> None:
        logger.debug(f"Updating folder [id={folder.id}]")
        now = utc_now()

        with _backend_errors(f"update folder [id={folder.id}]"):
            with self.db.connection() as conn:
                cursor = conn.execute(
                    """
                    UPDATE folders SET parent_id = ?, name = ?, modified_date = ?
                    WHERE id = ?
                    RETURNING user, creation_date
                    """,
                    (folder.parent_id, folder.name, to_timestamp(now), folder.id)
                )
                rows = cursor.fetchall()
                row = rows[0] if rows else None

        if row is None:
            raise NotFoundError("folder", folder.id)

        folder.user = row["user"]
        folder.creation_date = from_timestamp(row["creation_date"])
        folder.modified_date = now

    def delete_folder(self, folder_id: str) -> None:
        logger.debug(f"Deleting folder [id={folder_id}]")

        with _backend_errors(f"delete folder [id={folder_id}]"):
            with self.db.connection() as conn:
                cursor = conn.execute("DELETE FROM folders WHERE id = ?", (folder_id,))
                deleted = cursor.rowcount

        if deleted == 0:
            raise NotFoundError("folder", folder_id)
        logger.info(f"Deleted folder [id={folder_id}]")

    # Files

    def get_file(self, file_id: str, include_data: bool = True) -> File:
        columns = f"{FILE_COLUMNS}, data" if include_data else f"{FILE_COLUMNS}, NULL AS data"

        with _backend_errors(f"get file [id={file_id}]"):
            with self.db.connection() as conn:
                cursor = conn.execute(
                    f"SELECT {columns} FROM files WHERE id = ?",
                    (file_id,)
                )
                row = cursor.fetchone()

        if row is None:
            raise NotFoundError("file", file_id)
        return _row_to_file(row, include_data)

    def create_file(self, file: File) -> None:
        logger.debug(f"Creating file [name={file.name}, folder_id={file.folder_id}]")
        now = utc_now()

        with _backend_errors("create file"):
            with self.db.connection() as conn:
                cursor = conn.execute(
                    """
                    INSERT INTO files (user, folder_id, name, content_type, size, creation_date, modified_date, data)
                    VALUES (?, ?, ?, ?, ?, ?, ?, ?)
                    RETURNING id
                    """,
                    (
                        file.user,
                        file.folder_id,
                        file.name,
                        file.content_type,
                        file.size,
                        to_timestamp(now),
                        to_timestamp(now),
                        file.data,
                    )
                )
                file.id = cursor.fetchall()[0]["id"]

        file.creation_date = now
        file.modified_date = now
        logger.info(f"Created file [id={file.id}, size={file.size}]")

    def update_file(self, file: File) -> None:
        logger.debug(f"Updating file [id={file.id}]")
        now = utc_now()

        with _backend_errors(f"update file [id={file.id}]"):
            with self.db.connection() as conn:
                cursor = conn.execute(
                    """
                    UPDATE files
                    SET folder_id = ?, name = ?, content_type = ?, size = ?, modified_date = ?, data = ?
                    WHERE id = ?
                    RETURNING user, creation_date
                    """,
                    (file.folder_id, file.name, file.content_type, file.size, to_timestamp(now), file.data, file.id)
                )
                rows = cursor.fetchall()
                row = rows[0] if rows else None

        if row is None:
            raise NotFoundError("file", file.id)

        file.user = row["user"]
        file.creation_date = from_timestamp(row["creation_date"])
        file.modified_date = now

    def delete_file(self, file_id: str) -> None:
        logger.debug(f"Deleting file [id={file_id}]")

        with _backend_errors(f"delete file [id={file_id}]"):
            with self.db.connection() as conn:
                cursor = conn.execute("DELETE FROM files WHERE id = ?", (file_id,))
                deleted = cursor.rowcount

        if deleted == 0:
            raise NotFoundError("file", file_id)
        logger.info(f"Deleted file [id={file_id}]")

    # Hierarchy

    def get_folder_hierarchy(self, ctx: Context, folder_id: str) -> List[Folder]:
        """
        Load a folder and its descendants with one recursive query.

        The context is polled by a SQLite progress handler while the
        statement runs and again before each row is consumed, so a
        cancellation interrupts the query and no partial list is returned.
        """
        ctx.check()
        folders: List[Folder] = []

        try:
            with self.db.connection() as conn:
                conn.set_progress_handler(
                    lambda: 1 if ctx.is_cancelled() else 0,
                    PROGRESS_HANDLER_INTERVAL
                )
                try:
                    with closing(conn.cursor()) as cursor:
                        cursor.execute(FOLDER_HIERARCHY_QUERY, (folder_id,))
                        for row in cursor:
                            ctx.check()
                            folders.append(_row_to_folder(row))
                finally:
                    conn.set_progress_handler(None, 0)
        except STORE_ERRORS as e:
            if ctx.is_cancelled():
                logger.info(f"Folder hierarchy query cancelled [root={folder_id}]")
                raise OperationCancelledError(f"folder hierarchy query cancelled: {e}") from e
            logger.error(f"Failed to load folder hierarchy [root={folder_id}]: {e}", exc_info=True)
            raise StorageBackendError(f"Failed to load folder hierarchy: {e}") from e

        if not folders:
            raise NotFoundError("folder", folder_id)

        logger.debug(f"Loaded folder hierarchy [root={folder_id}, count={len(folders)}]")
        return folders
