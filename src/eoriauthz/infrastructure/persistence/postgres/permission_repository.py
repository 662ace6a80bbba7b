"""PostgreSQL permission catalog repository."""

from uuid import UUID

from psycopg import AsyncConnection

from eoriauthz.domain.entities import Permission
from eoriauthz.infrastructure.persistence.postgres.errors import translate_store_errors

_COLUMNS = "id, resource, action, name, display_name, description, is_system"


def _row_to_permission(r: tuple) -> Permission:
    return Permission(
        id=r[0],
        resource=r[1],
        action=r[2],
        name=r[3],
        display_name=r[4],
        description=r[5],
        is_system=r[6],
    )


class PostgresPermissionRepository:
    """Permission repository implementation."""

    def __init__(self, conn: AsyncConnection) -> None:
        self._conn = conn

    @translate_store_errors
    async def list_all(self) -> list[Permission]:
        """List the whole catalog."""
        cur = await self._conn.execute(f"SELECT {_COLUMNS} FROM permission ORDER BY name")
        rows = await cur.fetchall()
        return [_row_to_permission(r) for r in rows]

    @translate_store_errors
    async def get_by_name(self, name: str) -> Permission | None:
        """Get permission by dotted name."""
        cur = await self._conn.execute(
            f"SELECT {_COLUMNS} FROM permission WHERE name = %s",
            (name,),
        )
        r = await cur.fetchone()
        return _row_to_permission(r) if r else None

    @translate_store_errors
    async def create_if_missing(self, permission: Permission) -> bool:
        """Insert permission unless the name exists. Returns True if inserted."""
        cur = await self._conn.execute(
            f"INSERT INTO permission ({_COLUMNS}) VALUES (%s, %s, %s, %s, %s, %s, %s) "
            "ON CONFLICT (name) DO NOTHING",
            (
                permission.id,
                permission.resource,
                permission.action,
                permission.name,
                permission.display_name,
                permission.description,
                permission.is_system,
            ),
        )
        return cur.rowcount == 1

    @translate_store_errors
    async def list_resource_types(self) -> dict[str, str]:
        """Map of resource type -> permission resource category."""
        cur = await self._conn.execute("SELECT name, category FROM resource_type")
        rows = await cur.fetchall()
        return {r[0]: r[1] for r in rows}

    @translate_store_errors
    async def upsert_resource_type(self, resource_type: str, category: str) -> None:
        """Register or re-point a resource type."""
        await self._conn.execute(
            "INSERT INTO resource_type (name, category) VALUES (%s, %s) "
            "ON CONFLICT (name) DO UPDATE SET category = EXCLUDED.category",
            (resource_type, category),
        )

    @translate_store_errors
    async def delete(self, permission_id: UUID) -> None:
        """Delete a non-system permission."""
        await self._conn.execute(
            "DELETE FROM permission WHERE id = %s AND NOT is_system",
            (permission_id,),
        )
