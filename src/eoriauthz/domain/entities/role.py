"""Role entity for RBAC."""

from dataclasses import dataclass
from uuid import UUID


@dataclass
class Role:
    """Role - named bundle of permissions (episcop, paroh, contabil, ...)."""

    id: UUID
    name: str
    display_name: str | None = None
    description: str | None = None
    is_system: bool = False
    is_active: bool = True
