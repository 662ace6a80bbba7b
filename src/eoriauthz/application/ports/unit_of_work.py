"""Unit of Work port - transactional boundary."""

from collections.abc import AsyncIterator
from typing import Protocol

from eoriauthz.application.ports.repositories import (
    PermissionOverrideRepository,
    PermissionRepository,
    RecordAccessRepository,
    RoleRepository,
    SessionRepository,
    TenantAccessRepository,
    UserRepository,
    UserRoleRepository,
)


class UnitOfWork(Protocol):
    """Unit of Work - manages transaction and repository access."""

    @property
    def permissions(self) -> PermissionRepository: ...

    @property
    def roles(self) -> RoleRepository: ...

    @property
    def user_roles(self) -> UserRoleRepository: ...

    @property
    def overrides(self) -> PermissionOverrideRepository: ...

    @property
    def tenants(self) -> TenantAccessRepository: ...

    @property
    def records(self) -> RecordAccessRepository: ...

    @property
    def sessions(self) -> SessionRepository: ...

    @property
    def users(self) -> UserRepository: ...

    async def commit(self) -> None: ...

    async def rollback(self) -> None: ...


class UnitOfWorkFactory(Protocol):
    """Factory for creating UnitOfWork instances."""

    async def __call__(self) -> AsyncIterator[UnitOfWork]: ...
