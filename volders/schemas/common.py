"""Common schemas shared by folder and file representations."""

from datetime import datetime
from typing import Any, Dict, Optional

from pydantic import BaseModel


class CommonSchema(BaseModel):
    """Fields shared by every stored entity."""
    id: str = ""
    user: str = ""
    creation_date: Optional[datetime] = None
    modified_date: Optional[datetime] = None

    def to_transfer_dict(self) -> Dict[str, Any]:
        """JSON-ready dict with unset optional fields left out."""
        return self.model_dump(mode="json", exclude_none=True)
