"""Entity definitions for folders and files."""

from dataclasses import dataclass
from datetime import datetime
from typing import Optional


@dataclass
class Common:
    """
    Fields shared by every stored entity.

    Attributes:
        id: Opaque identifier, assigned by the backend on creation
        user: Owner identifier (informational)
        creation_date: Set once on creation
        modified_date: Equal to creation_date on creation, refreshed on update
    """
    id: str = ""
    user: str = ""
    creation_date: Optional[datetime] = None
    modified_date: Optional[datetime] = None


@dataclass
class Folder(Common):
    """
    Named container. parent_id of None means a root-level folder.
    """
    parent_id: Optional[str] = None
    name: str = ""


@dataclass
class File(Common):
    """
    Named binary payload stored in exactly one folder.

    data is None when the payload was not loaded.
    """
    folder_id: str = ""
    name: str = ""
    content_type: str = ""
    size: int = 0
    data: Optional[bytes] = None
