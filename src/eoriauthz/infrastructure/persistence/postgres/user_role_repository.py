"""PostgreSQL user-role binding repository."""

from uuid import UUID

from psycopg import AsyncConnection

from eoriauthz.domain.entities import Role, UserRole
from eoriauthz.infrastructure.persistence.postgres.errors import translate_store_errors


class PostgresUserRoleRepository:
    """UserRole repository implementation."""

    def __init__(self, conn: AsyncConnection) -> None:
        self._conn = conn

    @translate_store_errors
    async def list_roles_for_user(self, user_id: UUID) -> list[Role]:
        """Roles bound to user, active or not."""
        cur = await self._conn.execute(
            "SELECT r.id, r.name, r.display_name, r.description, r.is_system, r.is_active "
            "FROM user_role ur JOIN role r ON r.id = ur.role_id "
            "WHERE ur.user_id = %s ORDER BY r.name",
            (user_id,),
        )
        rows = await cur.fetchall()
        return [
            Role(
                id=r[0],
                name=r[1],
                display_name=r[2],
                description=r[3],
                is_system=r[4],
                is_active=r[5],
            )
            for r in rows
        ]

    @translate_store_errors
    async def get(self, user_id: UUID, role_id: UUID) -> UserRole | None:
        """Get binding."""
        cur = await self._conn.execute(
            "SELECT user_id, role_id, assigned_at FROM user_role "
            "WHERE user_id = %s AND role_id = %s",
            (user_id, role_id),
        )
        r = await cur.fetchone()
        if not r:
            return None
        return UserRole(user_id=r[0], role_id=r[1], assigned_at=r[2])

    @translate_store_errors
    async def create(self, user_role: UserRole) -> UserRole:
        """Create binding."""
        await self._conn.execute(
            "INSERT INTO user_role (user_id, role_id, assigned_at) VALUES (%s, %s, %s)",
            (user_role.user_id, user_role.role_id, user_role.assigned_at),
        )
        return user_role

    @translate_store_errors
    async def delete(self, user_id: UUID, role_id: UUID) -> None:
        """Delete binding."""
        await self._conn.execute(
            "DELETE FROM user_role WHERE user_id = %s AND role_id = %s",
            (user_id, role_id),
        )
