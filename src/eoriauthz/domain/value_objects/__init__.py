"""Domain value objects."""

from eoriauthz.domain.value_objects.access_level import AccessLevel
from eoriauthz.domain.value_objects.decision import Decision
from eoriauthz.domain.value_objects.legacy_role import LegacyRole
from eoriauthz.domain.value_objects.reason_code import ReasonCode
from eoriauthz.domain.value_objects.session_status import SessionStatus

__all__ = [
    "AccessLevel",
    "Decision",
    "LegacyRole",
    "ReasonCode",
    "SessionStatus",
]
