"""Minimal user identity read by the authorization subsystem."""

from dataclasses import dataclass
from uuid import UUID

from eoriauthz.domain.value_objects import LegacyRole


@dataclass
class AppUser:
    """User row. legacy_role is only set on accounts created before RBAC."""

    id: UUID
    email: str
    legacy_role: LegacyRole | None = None
