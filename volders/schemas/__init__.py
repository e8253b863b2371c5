"""Pydantic schemas for folder and file transfer."""

from volders.schemas.common import CommonSchema
from volders.schemas.entities import FileSchema, FolderSchema

__all__ = [
    "CommonSchema",
    "FolderSchema",
    "FileSchema",
]
