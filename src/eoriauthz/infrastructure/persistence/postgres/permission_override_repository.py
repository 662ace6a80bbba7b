"""PostgreSQL user permission override repository."""

from uuid import UUID

from psycopg import AsyncConnection

from eoriauthz.domain.entities import PermissionOverride
from eoriauthz.infrastructure.persistence.postgres.errors import translate_store_errors

_COLUMNS = "user_id, permission_id, granted, created_at, created_by"


def _row_to_override(r: tuple) -> PermissionOverride:
    return PermissionOverride(
        user_id=r[0],
        permission_id=r[1],
        granted=r[2],
        created_at=r[3],
        created_by=r[4],
    )


class PostgresPermissionOverrideRepository:
    """PermissionOverride repository implementation."""

    def __init__(self, conn: AsyncConnection) -> None:
        self._conn = conn

    @translate_store_errors
    async def get(self, user_id: UUID, permission_id: UUID) -> PermissionOverride | None:
        """Get the override for (user, permission)."""
        cur = await self._conn.execute(
            f"SELECT {_COLUMNS} FROM user_permission_override "
            "WHERE user_id = %s AND permission_id = %s",
            (user_id, permission_id),
        )
        r = await cur.fetchone()
        return _row_to_override(r) if r else None

    @translate_store_errors
    async def list_for_user(self, user_id: UUID) -> list[PermissionOverride]:
        """All overrides of user."""
        cur = await self._conn.execute(
            f"SELECT {_COLUMNS} FROM user_permission_override WHERE user_id = %s",
            (user_id,),
        )
        rows = await cur.fetchall()
        return [_row_to_override(r) for r in rows]

    @translate_store_errors
    async def upsert(self, override: PermissionOverride) -> PermissionOverride:
        """Create or replace the override."""
        await self._conn.execute(
            f"INSERT INTO user_permission_override ({_COLUMNS}) VALUES (%s, %s, %s, %s, %s) "
            "ON CONFLICT (user_id, permission_id) DO UPDATE SET "
            "granted = EXCLUDED.granted, created_at = EXCLUDED.created_at, "
            "created_by = EXCLUDED.created_by",
            (
                override.user_id,
                override.permission_id,
                override.granted,
                override.created_at,
                override.created_by,
            ),
        )
        return override

    @translate_store_errors
    async def delete(self, user_id: UUID, permission_id: UUID) -> None:
        """Delete override."""
        await self._conn.execute(
            "DELETE FROM user_permission_override WHERE user_id = %s AND permission_id = %s",
            (user_id, permission_id),
        )
