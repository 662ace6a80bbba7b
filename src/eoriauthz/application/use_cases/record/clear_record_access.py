"""Clear record-level access entry."""

from uuid import UUID

from eoriauthz.application.use_cases.authorization.evaluate_access import EvaluateAccessUseCase
from eoriauthz.domain.exceptions import NotFound


class ClearRecordAccessUseCase:
    def __init__(self, unit_of_work_factory: type, access: EvaluateAccessUseCase) -> None:
        self._uow_factory = unit_of_work_factory
        self._access = access

    async def execute(
        self, actor_id: UUID, user_id: UUID, resource_type: str, resource_id: str
    ) -> None:
        await self._access.require(actor_id, "permissions.manage", "permission")

        async with self._uow_factory() as uow:
            if not await uow.records.get(user_id, resource_type, resource_id):
                raise NotFound("RecordAccess", f"{user_id}/{resource_type}/{resource_id}")
            await uow.records.delete(user_id, resource_type, resource_id)
