"""User membership in a parish (tenant)."""

from dataclasses import dataclass
from datetime import datetime
from uuid import UUID

from eoriauthz.domain.value_objects import AccessLevel


@dataclass
class TenantMembership:
    """User may operate in parish with the given access level."""

    id: UUID
    user_id: UUID
    parish_id: UUID
    access_level: AccessLevel
    is_primary: bool
    created_at: datetime
