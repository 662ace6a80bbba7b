"""Authorization decision value object."""

from dataclasses import dataclass

from eoriauthz.domain.value_objects.reason_code import ReasonCode


@dataclass(frozen=True)
class Decision:
    """Outcome of PermissionResolver.decide.

    permission is the resolved catalog name, or None when the request could
    not be mapped onto the catalog.
    """

    allowed: bool
    reason: ReasonCode
    permission: str | None = None

    @classmethod
    def allow(cls, reason: ReasonCode, permission: str | None = None) -> "Decision":
        return cls(allowed=True, reason=reason, permission=permission)

    @classmethod
    def deny(cls, reason: ReasonCode, permission: str | None = None) -> "Decision":
        return cls(allowed=False, reason=reason, permission=permission)
