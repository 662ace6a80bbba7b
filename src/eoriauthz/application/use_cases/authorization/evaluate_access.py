"""Evaluate access use case - resolver call plus audit record."""

import logging
from uuid import UUID

from eoriauthz.application.ports import PermissionResolver
from eoriauthz.domain.exceptions import CallerError, PermissionDenied
from eoriauthz.domain.value_objects import Decision, ReasonCode
from eoriauthz.logging import AUDIT_LOGGER

audit_logger = logging.getLogger(AUDIT_LOGGER)


class EvaluateAccessUseCase:
    """Ask the resolver for a decision and log its reason for audit."""

    def __init__(self, permission_resolver: PermissionResolver) -> None:
        self._resolver = permission_resolver

    async def execute(
        self,
        user_id: UUID | None,
        action: str,
        resource_type: str,
        resource_id: str | None = None,
        tenant_id: UUID | None = None,
    ) -> Decision:
        """Return the decision. StoreUnavailable propagates."""
        decision = await self._resolver.decide(
            user_id, action, resource_type, resource_id=resource_id, tenant_id=tenant_id
        )
        audit_logger.info(
            "access %s: %s on %s",
            "allowed" if decision.allowed else "denied",
            action,
            resource_type,
            extra={
                "user_id": str(user_id) if user_id else None,
                "action": action,
                "permission": decision.permission,
                "resource_type": resource_type,
                "resource_id": resource_id,
                "tenant_id": str(tenant_id) if tenant_id else None,
                "allowed": decision.allowed,
                "reason": decision.reason.value,
            },
        )
        return decision

    async def require(
        self,
        user_id: UUID | None,
        action: str,
        resource_type: str,
        resource_id: str | None = None,
        tenant_id: UUID | None = None,
    ) -> Decision:
        """Like execute, but raise on deny.

        CallerError when no usable principal was passed, PermissionDenied otherwise.
        """
        decision = await self.execute(
            user_id, action, resource_type, resource_id=resource_id, tenant_id=tenant_id
        )
        if decision.reason == ReasonCode.CALLER_ERROR:
            raise CallerError(f"No principal for {action} on {resource_type}")
        if not decision.allowed:
            raise PermissionDenied(
                f"Access denied for {action} on {resource_type}",
                reason=decision.reason.value,
            )
        return decision
