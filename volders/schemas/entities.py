"""Pydantic schemas for transferring folders and files."""

from typing import Optional

from pydantic import ConfigDict

from volders.models import File, Folder
from volders.schemas.common import CommonSchema


class FolderSchema(CommonSchema):
    """Transfer model for a folder. parent_id is omitted for root folders."""
    parent_id: Optional[str] = None
    name: str

    @classmethod
    def from_entity(cls, folder: Folder) -> "FolderSchema":
        return cls(
            id=folder.id,
            user=folder.user,
            creation_date=folder.creation_date,
            modified_date=folder.modified_date,
            parent_id=folder.parent_id,
            name=folder.name,
        )

    def to_entity(self) -> Folder:
        return Folder(
            id=self.id,
            user=self.user,
            creation_date=self.creation_date,
            modified_date=self.modified_date,
            parent_id=self.parent_id,
            name=self.name,
        )


class FileSchema(CommonSchema):
    """
    Transfer model for a file.

    data travels base64-encoded in JSON and is omitted when not loaded.
    """
    model_config = ConfigDict(ser_json_bytes="base64", val_json_bytes="base64")

    folder_id: str
    name: str
    content_type: str = ""
    size: int = 0
    data: Optional[bytes] = None

    @classmethod
    def from_entity(cls, file: File, include_data: bool = True) -> "FileSchema":
        return cls(
            id=file.id,
            user=file.user,
            creation_date=file.creation_date,
            modified_date=file.modified_date,
            folder_id=file.folder_id,
            name=file.name,
            content_type=file.content_type,
            size=file.size,
            data=file.data if include_data else None,
        )

    def to_entity(self) -> File:
        return File(
            id=self.id,
            user=self.user,
            creation_date=self.creation_date,
            modified_date=self.modified_date,
            folder_id=self.folder_id,
            name=self.name,
            content_type=self.content_type,
            size=self.size,
            data=self.data,
        )
