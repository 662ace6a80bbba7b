"""Seed catalog use case - apply the static RBAC payload idempotently."""

import logging
from dataclasses import dataclass
from uuid import uuid4

from eoriauthz.application.dto.seed_payload import SeedPayload
from eoriauthz.domain.entities import Permission, Role
from eoriauthz.domain.exceptions import NotFound

logger = logging.getLogger(__name__)


@dataclass
class SeedResult:
    permissions_created: int = 0
    roles_created: int = 0
    bindings_created: int = 0
    resource_types: int = 0


class SeedCatalogUseCase:
    """Insert missing permissions, roles and bindings; never deletes anything."""

    def __init__(self, unit_of_work_factory: type) -> None:
        self._uow_factory = unit_of_work_factory

    async def execute(self, payload: SeedPayload) -> SeedResult:
        result = SeedResult()
        async with self._uow_factory() as uow:
            for p in payload.permissions:
                created = await uow.permissions.create_if_missing(
                    Permission(
                        id=uuid4(),
                        resource=p.resource,
                        action=p.action,
                        name=p.name,
                        display_name=p.display_name,
                        description=p.display_name,
                        is_system=True,
                    )
                )
                result.permissions_created += int(created)

            for r in payload.roles:
                created = await uow.roles.create_if_missing(
                    Role(
                        id=uuid4(),
                        name=r.name,
                        display_name=r.display_name,
                        description=r.description,
                        is_system=True,
                        is_active=True,
                    )
                )
                result.roles_created += int(created)

            for rtype, category in payload.resource_types.items():
                await uow.permissions.upsert_resource_type(rtype, category)
                result.resource_types += 1

            for role_name, perm_names in payload.role_permissions.items():
                role = await uow.roles.get_by_name(role_name)
                if not role:
                    raise NotFound("Role", role_name)
                for name in perm_names:
                    perm = await uow.permissions.get_by_name(name)
                    if not perm:
                        raise NotFound("Permission", name)
                    added = await uow.roles.add_permission(role.id, perm.id)
                    result.bindings_created += int(added)

        logger.info(
            "catalog seeded: %d permissions, %d roles, %d bindings created",
            result.permissions_created,
            result.roles_created,
            result.bindings_created,
        )
        return result
