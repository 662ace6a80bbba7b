"""Record-level access entry."""

from dataclasses import dataclass
from datetime import datetime
from uuid import UUID


@dataclass
class RecordAccess:
    """Grant or deny for one resource instance, overriding the type-level decision."""

    user_id: UUID
    resource_type: str
    resource_id: str
    granted: bool
    created_at: datetime
    created_by: UUID | None = None
