"""Repository ports."""

from eoriauthz.application.ports.repositories.permission_override_repository import (
    PermissionOverrideRepository,
)
from eoriauthz.application.ports.repositories.permission_repository import (
    PermissionRepository,
)
from eoriauthz.application.ports.repositories.record_access_repository import (
    RecordAccessRepository,
)
from eoriauthz.application.ports.repositories.role_repository import RoleRepository
from eoriauthz.application.ports.repositories.session_repository import SessionRepository
from eoriauthz.application.ports.repositories.tenant_access_repository import (
    TenantAccessRepository,
)
from eoriauthz.application.ports.repositories.user_repository import UserRepository
from eoriauthz.application.ports.repositories.user_role_repository import (
    UserRoleRepository,
)

__all__ = [
    "PermissionOverrideRepository",
    "PermissionRepository",
    "RecordAccessRepository",
    "RoleRepository",
    "SessionRepository",
    "TenantAccessRepository",
    "UserRepository",
    "UserRoleRepository",
]
