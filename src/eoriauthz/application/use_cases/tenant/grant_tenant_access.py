"""Grant or update parish membership."""

from datetime import UTC, datetime
from uuid import UUID, uuid4

from eoriauthz.application.use_cases.authorization.evaluate_access import EvaluateAccessUseCase
from eoriauthz.domain.entities import TenantMembership
from eoriauthz.domain.exceptions import NotFound
from eoriauthz.domain.value_objects import AccessLevel


class GrantTenantAccessUseCase:
    """Make user a member of parish with an access level.

    Marking a membership primary clears the flag on the user's other
    memberships in the same transaction. With is_primary=None an existing
    membership keeps its flag and a new one is not primary.
    """

    def __init__(self, unit_of_work_factory: type, access: EvaluateAccessUseCase) -> None:
        self._uow_factory = unit_of_work_factory
        self._access = access

    async def execute(
        self,
        actor_id: UUID,
        user_id: UUID,
        parish_id: UUID,
        access_level: AccessLevel,
        is_primary: bool | None = None,
    ) -> TenantMembership:
        await self._access.require(actor_id, "users.update", "user")

        async with self._uow_factory() as uow:
            if not await uow.users.get_by_id(user_id):
                raise NotFound("User", str(user_id))

            existing = await uow.tenants.list_for_user(user_id)
            if is_primary:
                for m in existing:
                    if m.is_primary and m.parish_id != parish_id:
                        m.is_primary = False
                        await uow.tenants.upsert(m)

            current = next((m for m in existing if m.parish_id == parish_id), None)
            if is_primary is None:
                is_primary = bool(current and current.is_primary)
            membership = TenantMembership(
                id=current.id if current else uuid4(),
                user_id=user_id,
                parish_id=parish_id,
                access_level=AccessLevel(access_level),
                is_primary=is_primary,
                created_at=current.created_at if current else datetime.now(UTC),
            )
            return await uow.tenants.upsert(membership)
