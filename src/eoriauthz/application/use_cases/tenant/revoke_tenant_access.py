"""Revoke parish membership."""

from uuid import UUID

from eoriauthz.application.use_cases.authorization.evaluate_access import EvaluateAccessUseCase
from eoriauthz.domain.exceptions import NotFound


class RevokeTenantAccessUseCase:
    def __init__(self, unit_of_work_factory: type, access: EvaluateAccessUseCase) -> None:
        self._uow_factory = unit_of_work_factory
        self._access = access

    async def execute(self, actor_id: UUID, user_id: UUID, parish_id: UUID) -> None:
        """Remove membership. Actor needs users.update."""
        await self._access.require(actor_id, "users.update", "user")

        async with self._uow_factory() as uow:
            if not await uow.tenants.get(user_id, parish_id):
                raise NotFound("Membership", f"{user_id}/{parish_id}")
            await uow.tenants.delete(user_id, parish_id)
