"""PostgreSQL role repository implementation."""

from uuid import UUID

from psycopg import AsyncConnection

from eoriauthz.domain.entities import Role
from eoriauthz.infrastructure.persistence.postgres.errors import translate_store_errors

_COLUMNS = "id, name, display_name, description, is_system, is_active"


def _row_to_role(r: tuple) -> Role:
    return Role(
        id=r[0],
        name=r[1],
        display_name=r[2],
        description=r[3],
        is_system=r[4],
        is_active=r[5],
    )


class PostgresRoleRepository:
    """Role and role_permission repository implementation."""

    def __init__(self, conn: AsyncConnection) -> None:
        self._conn = conn

    @translate_store_errors
    async def get_by_id(self, role_id: UUID) -> Role | None:
        """Get role by id."""
        cur = await self._conn.execute(
            f"SELECT {_COLUMNS} FROM role WHERE id = %s",
            (role_id,),
        )
        r = await cur.fetchone()
        return _row_to_role(r) if r else None

    @translate_store_errors
    async def get_by_name(self, name: str) -> Role | None:
        """Get role by name."""
        cur = await self._conn.execute(
            f"SELECT {_COLUMNS} FROM role WHERE name = %s",
            (name,),
        )
        r = await cur.fetchone()
        return _row_to_role(r) if r else None

    @translate_store_errors
    async def list_all(self) -> list[Role]:
        """List all roles."""
        cur = await self._conn.execute(f"SELECT {_COLUMNS} FROM role ORDER BY name")
        rows = await cur.fetchall()
        return [_row_to_role(r) for r in rows]

    @translate_store_errors
    async def create(self, role: Role) -> Role:
        """Create role."""
        await self._conn.execute(
            f"INSERT INTO role ({_COLUMNS}) VALUES (%s, %s, %s, %s, %s, %s)",
            (
                role.id,
                role.name,
                role.display_name,
                role.description,
                role.is_system,
                role.is_active,
            ),
        )
        return role

    @translate_store_errors
    async def create_if_missing(self, role: Role) -> bool:
        """Insert role unless the name exists. Returns True if inserted."""
        cur = await self._conn.execute(
            f"INSERT INTO role ({_COLUMNS}) VALUES (%s, %s, %s, %s, %s, %s) "
            "ON CONFLICT (name) DO NOTHING",
            (
                role.id,
                role.name,
                role.display_name,
                role.description,
                role.is_system,
                role.is_active,
            ),
        )
        return cur.rowcount == 1

    @translate_store_errors
    async def delete(self, role_id: UUID) -> None:
        """Delete role; bindings cascade."""
        await self._conn.execute("DELETE FROM role WHERE id = %s", (role_id,))

    @translate_store_errors
    async def list_permission_ids(self, role_ids: list[UUID]) -> set[UUID]:
        """Union of permission ids bound to any of the roles."""
        if not role_ids:
            return set()
        cur = await self._conn.execute(
            "SELECT DISTINCT permission_id FROM role_permission WHERE role_id = ANY(%s)",
            (list(role_ids),),
        )
        rows = await cur.fetchall()
        return {r[0] for r in rows}

    @translate_store_errors
    async def add_permission(self, role_id: UUID, permission_id: UUID) -> bool:
        """Bind permission to role. Returns True if the binding is new."""
        cur = await self._conn.execute(
            "INSERT INTO role_permission (role_id, permission_id) VALUES (%s, %s) "
            "ON CONFLICT DO NOTHING",
            (role_id, permission_id),
        )
        return cur.rowcount == 1

    @translate_store_errors
    async def replace_permissions(self, role_id: UUID, permission_ids: set[UUID]) -> None:
        """Replace the role's permission set. Runs inside the caller's transaction."""
        await self._conn.execute(
            "DELETE FROM role_permission WHERE role_id = %s",
            (role_id,),
        )
        if not permission_ids:
            return
        async with self._conn.cursor() as cur:
            await cur.executemany(
                "INSERT INTO role_permission (role_id, permission_id) VALUES (%s, %s)",
                [(role_id, pid) for pid in sorted(permission_ids)],
            )
