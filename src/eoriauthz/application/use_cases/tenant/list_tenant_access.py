"""List parish memberships of a user."""

from uuid import UUID

from eoriauthz.application.use_cases.authorization.evaluate_access import EvaluateAccessUseCase
from eoriauthz.domain.entities import TenantMembership


class ListTenantAccessUseCase:
    """Users may list their own memberships; others need users.read."""

    def __init__(self, unit_of_work_factory: type, access: EvaluateAccessUseCase) -> None:
        self._uow_factory = unit_of_work_factory
        self._access = access

    async def execute(self, actor_id: UUID, user_id: UUID) -> list[TenantMembership]:
        if actor_id != user_id:
            await self._access.require(actor_id, "users.read", "user")

        async with self._uow_factory() as uow:
            memberships = await uow.tenants.list_for_user(user_id)
        return sorted(memberships, key=lambda m: (not m.is_primary, str(m.parish_id)))
