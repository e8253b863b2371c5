"""In-memory repository for tests and local development."""

from collections import deque
from dataclasses import replace
from typing import Dict, List

from common.logging_config import get_logger
from volders.context import Context
from volders.exceptions import AlreadyExistsError, NotFoundError
from volders.locks import ReadWriteLock
from volders.models import File, Folder
from volders.repositories.base import VolderRepository
from volders.utils import generate_uuid, utc_now

logger = get_logger(__name__)


class MemoryRepository(VolderRepository):
    """
    Thread-safe VolderRepository backed by two dicts.

    Both dicts are guarded by one reader/writer lock: get_* and
    get_folder_hierarchy() share it, mutations hold it exclusively. Entities
    are copied on the way in and on the way out, so callers never hold a
    reference to stored state.
    """

    def __init__(self):
        self._folders: Dict[str, Folder] = {}
        self._files: Dict[str, File] = {}
        self._lock = ReadWriteLock()

    # Folders

    def create_folder(self, folder: Folder) -> None:
        with self._lock.write_locked():
            if not folder.id:
                folder.id = generate_uuid()
            elif folder.id in self._folders:
                raise AlreadyExistsError("folder", folder.id)

            folder.creation_date = utc_now()
            folder.modified_date = folder.creation_date
            self._folders[folder.id] = replace(folder)

        logger.info(f"Created folder [id={folder.id}, parent_id={folder.parent_id}]")

    def get_folder(self, folder_id: str) -> Folder:
        with self._lock.read_locked():
            folder = self._folders.get(folder_id)
            if folder is None:
                raise NotFoundError("folder", folder_id)
            return replace(folder)

    def update_folder(self, folder: Folder) -> None:
        with self._lock.write_locked():
            stored = self._folders.get(folder.id)
            if stored is None:
                raise NotFoundError("folder", folder.id)

            folder.user = stored.user
            folder.creation_date = stored.creation_date
            folder.modified_date = utc_now()
            self._folders[folder.id] = replace(folder)

        logger.debug(f"Updated folder [id={folder.id}]")

    def delete_folder(self, folder_id: str) -> None:
        with self._lock.write_locked():
            if folder_id not in self._folders:
                raise NotFoundError("folder", folder_id)
            del self._folders[folder_id]

        logger.info(f"Deleted folder [id={folder_id}]")

    # Files

    def create_file(self, file: File) -> None:
        with self._lock.write_locked():
            if not file.id:
                file.id = generate_uuid()
            elif file.id in self._files:
                raise AlreadyExistsError("file", file.id)

            file.creation_date = utc_now()
            file.modified_date = file.creation_date
            self._files[file.id] = replace(file)

        logger.info(f"Created file [id={file.id}, folder_id={file.folder_id}, size={file.size}]")

    def get_file(self, file_id: str, include_data: bool = True) -> File:
        with self._lock.read_locked():
            file = self._files.get(file_id)
            if file is None:
                raise NotFoundError("file", file_id)
            if include_data:
                return replace(file)
            return replace(file, data=None)

    def update_file(self, file: File) -> None:
        with self._lock.write_locked():
            stored = self._files.get(file.id)
            if stored is None:
                raise NotFoundError("file", file.id)

            file.user = stored.user
            file.creation_date = stored.creation_date
            file.modified_date = utc_now()
            self._files[file.id] = replace(file)

        logger.debug(f"Updated file [id={file.id}]")

    def delete_file(self, file_id: str) -> None:
        with self._lock.write_locked():
            if file_id not in self._files:
                raise NotFoundError("file", file_id)
            del self._files[file_id]

        logger.info(f"Deleted file [id={file_id}]")

    # Hierarchy

    def get_folder_hierarchy(self, ctx: Context, folder_id: str) -> List[Folder]:
        """
        Breadth-first walk over parent_id links starting at folder_id.

        Children are visited in creation order. A folder is emitted at most
        once even if the parent links form a cycle.
        """
        ctx.check()
        with self._lock.read_locked():
            root = self._folders.get(folder_id)
            if root is None:
                raise NotFoundError("folder", folder_id)

            children: Dict[str, List[Folder]] = {}
            for folder in self._folders.values():
                if folder.parent_id is not None:
                    children.setdefault(folder.parent_id, []).append(folder)

            hierarchy: List[Folder] = []
            seen = set()
            queue = deque([root])
            while queue:
                ctx.check()
                folder = queue.popleft()
                if folder.id in seen:
                    continue
                seen.add(folder.id)
                hierarchy.append(replace(folder))
                queue.extend(children.get(folder.id, []))

        logger.debug(f"Loaded folder hierarchy [root={folder_id}, count={len(hierarchy)}]")
        return hierarchy
