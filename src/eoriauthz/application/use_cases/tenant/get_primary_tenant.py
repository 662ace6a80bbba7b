"""Primary parish lookup."""

from uuid import UUID

from eoriauthz.domain.entities import TenantMembership


def pick_primary(memberships: list[TenantMembership]) -> TenantMembership | None:
    """Primary membership; lowest id wins when several are flagged."""
    primaries = [m for m in memberships if m.is_primary]
    if not primaries:
        return None
    return min(primaries, key=lambda m: m.id)


class GetPrimaryTenantUseCase:
    """Default parish scope for a user, or None when no membership is primary."""

    def __init__(self, unit_of_work_factory: type) -> None:
        self._uow_factory = unit_of_work_factory

    async def execute(self, user_id: UUID) -> TenantMembership | None:
        async with self._uow_factory() as uow:
            memberships = await uow.tenants.list_for_user(user_id)
        return pick_primary(memberships)
