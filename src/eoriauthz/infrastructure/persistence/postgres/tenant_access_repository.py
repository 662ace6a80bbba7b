"""PostgreSQL user-parish membership repository."""

from uuid import UUID

from psycopg import AsyncConnection

from eoriauthz.domain.entities import TenantMembership
from eoriauthz.domain.value_objects import AccessLevel
from eoriauthz.infrastructure.persistence.postgres.errors import translate_store_errors

_COLUMNS = "id, user_id, parish_id, access_level, is_primary, created_at"


def _row_to_membership(r: tuple) -> TenantMembership:
    return TenantMembership(
        id=r[0],
        user_id=r[1],
        parish_id=r[2],
        access_level=AccessLevel(r[3]),
        is_primary=r[4],
        created_at=r[5],
    )


class PostgresTenantAccessRepository:
    """TenantMembership repository implementation."""

    def __init__(self, conn: AsyncConnection) -> None:
        self._conn = conn

    @translate_store_errors
    async def get(self, user_id: UUID, parish_id: UUID) -> TenantMembership | None:
        """Get membership of user in parish."""
        cur = await self._conn.execute(
            f"SELECT {_COLUMNS} FROM user_parish WHERE user_id = %s AND parish_id = %s",
            (user_id, parish_id),
        )
        r = await cur.fetchone()
        return _row_to_membership(r) if r else None

    @translate_store_errors
    async def list_for_user(self, user_id: UUID) -> list[TenantMembership]:
        """Memberships of user, ordered by id."""
        cur = await self._conn.execute(
            f"SELECT {_COLUMNS} FROM user_parish WHERE user_id = %s ORDER BY id",
            (user_id,),
        )
        rows = await cur.fetchall()
        return [_row_to_membership(r) for r in rows]

    @translate_store_errors
    async def upsert(self, membership: TenantMembership) -> TenantMembership:
        """Create membership or update its access level and primary flag."""
        cur = await self._conn.execute(
            f"INSERT INTO user_parish ({_COLUMNS}) VALUES (%s, %s, %s, %s, %s, %s) "
            "ON CONFLICT (user_id, parish_id) DO UPDATE SET "
            "access_level = EXCLUDED.access_level, is_primary = EXCLUDED.is_primary "
            f"RETURNING {_COLUMNS}",
            (
                membership.id,
                membership.user_id,
                membership.parish_id,
                membership.access_level.value,
                membership.is_primary,
                membership.created_at,
            ),
        )
        r = await cur.fetchone()
        return _row_to_membership(r)

    @translate_store_errors
    async def delete(self, user_id: UUID, parish_id: UUID) -> None:
        """Delete membership."""
        await self._conn.execute(
            "DELETE FROM user_parish WHERE user_id = %s AND parish_id = %s",
            (user_id, parish_id),
        )
