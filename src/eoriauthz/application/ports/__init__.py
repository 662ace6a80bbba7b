"""Application ports - interfaces for external adapters."""

from eoriauthz.application.ports.permission_cache import PermissionCacheInvalidator
from eoriauthz.application.ports.permission_resolver import PermissionResolver
from eoriauthz.application.ports.session_validator import SessionValidation, SessionValidator
from eoriauthz.application.ports.unit_of_work import UnitOfWork, UnitOfWorkFactory

__all__ = [
    "PermissionCacheInvalidator",
    "PermissionResolver",
    "SessionValidation",
    "SessionValidator",
    "UnitOfWork",
    "UnitOfWorkFactory",
]
