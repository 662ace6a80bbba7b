"""Domain entities."""

from eoriauthz.domain.entities.app_user import AppUser
from eoriauthz.domain.entities.permission import Permission
from eoriauthz.domain.entities.permission_override import PermissionOverride
from eoriauthz.domain.entities.record_access import RecordAccess
from eoriauthz.domain.entities.role import Role
from eoriauthz.domain.entities.session import Session
from eoriauthz.domain.entities.tenant_membership import TenantMembership
from eoriauthz.domain.entities.user_role import UserRole

__all__ = [
    "AppUser",
    "Permission",
    "PermissionOverride",
    "RecordAccess",
    "Role",
    "Session",
    "TenantMembership",
    "UserRole",
]
