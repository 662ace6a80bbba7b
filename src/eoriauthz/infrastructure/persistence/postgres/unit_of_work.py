"""PostgreSQL Unit of Work implementation."""

import logging
from collections.abc import AsyncIterator
from contextlib import asynccontextmanager

import psycopg
from psycopg_pool import AsyncConnectionPool

from eoriauthz.domain.exceptions import StoreUnavailable
from eoriauthz.infrastructure.persistence.postgres.permission_override_repository import (
    PostgresPermissionOverrideRepository,
)
from eoriauthz.infrastructure.persistence.postgres.permission_repository import (
    PostgresPermissionRepository,
)
from eoriauthz.infrastructure.persistence.postgres.record_access_repository import (
    PostgresRecordAccessRepository,
)
from eoriauthz.infrastructure.persistence.postgres.role_repository import (
    PostgresRoleRepository,
)
from eoriauthz.infrastructure.persistence.postgres.session_repository import (
    PostgresSessionRepository,
)
from eoriauthz.infrastructure.persistence.postgres.tenant_access_repository import (
    PostgresTenantAccessRepository,
)
from eoriauthz.infrastructure.persistence.postgres.user_repository import (
    PostgresUserRepository,
)
from eoriauthz.infrastructure.persistence.postgres.user_role_repository import (
    PostgresUserRoleRepository,
)

logger = logging.getLogger(__name__)


class PostgresUnitOfWork:
    """PostgreSQL Unit of Work - one connection, one transaction."""

    def __init__(self, pool: AsyncConnectionPool) -> None:
        self._pool = pool
        self._conn: object | None = None
        self._conn_cm: object | None = None

    async def __aenter__(self) -> "PostgresUnitOfWork":
        self._conn_cm = self._pool.connection()
        try:
            self._conn = await self._conn_cm.__aenter__()
        except psycopg.Error as e:
            self._conn_cm = None
            raise StoreUnavailable(f"Could not acquire connection: {e}") from e
        self._permissions = PostgresPermissionRepository(self._conn)
        self._roles = PostgresRoleRepository(self._conn)
        self._user_roles = PostgresUserRoleRepository(self._conn)
        self._overrides = PostgresPermissionOverrideRepository(self._conn)
        self._tenants = PostgresTenantAccessRepository(self._conn)
        self._records = PostgresRecordAccessRepository(self._conn)
        self._sessions = PostgresSessionRepository(self._conn)
        self._users = PostgresUserRepository(self._conn)
        return self

    async def __aexit__(self, exc_type: object, exc_val: object, exc_tb: object) -> None:
        if exc_type and self._conn:
            await self.rollback()
        if self._conn_cm:
            await self._conn_cm.__aexit__(exc_type, exc_val, exc_tb)

    @property
    def permissions(self) -> PostgresPermissionRepository:
        return self._permissions

    @property
    def roles(self) -> PostgresRoleRepository:
        return self._roles

    @property
    def user_roles(self) -> PostgresUserRoleRepository:
        return self._user_roles

    @property
    def overrides(self) -> PostgresPermissionOverrideRepository:
        return self._overrides

    @property
    def tenants(self) -> PostgresTenantAccessRepository:
        return self._tenants

    @property
    def records(self) -> PostgresRecordAccessRepository:
        return self._records

    @property
    def sessions(self) -> PostgresSessionRepository:
        return self._sessions

    @property
    def users(self) -> PostgresUserRepository:
        return self._users

    async def commit(self) -> None:
        if self._conn:
            try:
                await self._conn.commit()
            except psycopg.Error as e:
                raise StoreUnavailable(f"Commit failed: {e}") from e

    async def rollback(self) -> None:
        """Roll back; a broken connection is logged so the original error propagates."""
        if self._conn:
            try:
                await self._conn.rollback()
            except psycopg.Error as e:
                logger.warning("Rollback failed", extra={"error": str(e)})


def create_uow_factory(pool: AsyncConnectionPool) -> object:
    """Create UnitOfWork factory (async context manager)."""

    @asynccontextmanager
    async def factory() -> AsyncIterator[PostgresUnitOfWork]:
        uow = PostgresUnitOfWork(pool)
        async with uow:
            yield uow
            await uow.commit()

    return factory
