"""Repository interface shared by all storage backends."""

from abc import ABC, abstractmethod
from typing import List

from volders.context import Context
from volders.exceptions import UnsupportedOperationError
from volders.models import File, Folder


class VolderRepository(ABC):
    """
    Data access contract for folders and files.

    Callers depend on this class only; concrete backends are picked by
    create_repository() or injected directly in tests.
    """

    @abstractmethod
    def get_folder(self, folder_id: str) -> Folder:
        """Get folder by ID. Raises NotFoundError if absent."""
        pass

    @abstractmethod
    def get_file(self, file_id: str, include_data: bool = True) -> File:
        """Get file by ID, optionally without its payload. Raises NotFoundError if absent."""
        pass

    @abstractmethod
    def create_folder(self, folder: Folder) -> None:
        """
        Persist a new folder.

        Assigns folder.id and sets creation_date and modified_date on the
        passed object.
        """
        pass

    @abstractmethod
    def create_file(self, file: File) -> None:
        """Persist a new file. Same contract as create_folder()."""
        pass

    @abstractmethod
    def update_folder(self, folder: Folder) -> None:
        """Replace all mutable fields and refresh modified_date."""
        pass

    @abstractmethod
    def update_file(self, file: File) -> None:
        """Replace all mutable fields and refresh modified_date."""
        pass

    @abstractmethod
    def delete_folder(self, folder_id: str) -> None:
        """Remove a folder. Child folders and files are left untouched."""
        pass

    @abstractmethod
    def delete_file(self, file_id: str) -> None:
        pass

    def get_folder_hierarchy(self, ctx: Context, folder_id: str) -> List[Folder]:
        """
        Get a folder and all of its transitive descendants.

        Args:
            ctx: Cancellation context polled during the traversal
            folder_id: ID of the folder to start from

        Returns:
            Flat list, starting folder first, then descendants breadth-first

        Raises:
            NotFoundError: If folder_id does not exist
            OperationCancelledError: If ctx is cancelled before completion
            UnsupportedOperationError: If the backend has no hierarchy support
        """
        raise UnsupportedOperationError(
            f"{type(self).__name__} does not support folder hierarchy retrieval"
        )
