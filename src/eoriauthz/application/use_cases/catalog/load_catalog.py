"""Load catalog use case - snapshot the permission table."""

from eoriauthz.domain.permission_catalog import PermissionCatalog


class LoadCatalogUseCase:
    """Build the immutable PermissionCatalog from the store."""

    def __init__(self, unit_of_work_factory: type) -> None:
        self._uow_factory = unit_of_work_factory

    async def execute(self) -> PermissionCatalog:
        async with self._uow_factory() as uow:
            permissions = await uow.permissions.list_all()
            resource_types = await uow.permissions.list_resource_types()
        return PermissionCatalog(permissions, resource_types)
