"""Utility helper functions for the repositories."""

import uuid
from datetime import datetime, timezone
from typing import Optional


def generate_uuid() -> str:
    """
    Generate a new UUID4 string.

    Returns:
        UUID4 string
    """
    return str(uuid.uuid4())


def utc_now() -> datetime:
    """
    Get the current time as a timezone-aware UTC datetime.
    """
    return datetime.now(timezone.utc)


def to_timestamp(value: Optional[datetime]) -> Optional[str]:
    """
    Serialize a datetime to ISO format for storage.
    """
    return value.isoformat() if value is not None else None


def from_timestamp(value: Optional[str]) -> Optional[datetime]:
    """
    Parse an ISO format timestamp read from storage.
    """
    return datetime.fromisoformat(value) if value is not None else None
