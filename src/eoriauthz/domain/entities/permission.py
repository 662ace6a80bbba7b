"""Permission entity - one (resource, action) pair of the catalog."""

from dataclasses import dataclass
from uuid import UUID


@dataclass
class Permission:
    """Catalog permission identified by its dotted name ``resource.action``."""

    id: UUID
    resource: str
    action: str
    name: str
    display_name: str | None = None
    description: str | None = None
    is_system: bool = True
