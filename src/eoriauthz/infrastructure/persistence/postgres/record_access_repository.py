"""PostgreSQL record-level access repository."""

from uuid import UUID

from psycopg import AsyncConnection

from eoriauthz.domain.entities import RecordAccess
from eoriauthz.infrastructure.persistence.postgres.errors import translate_store_errors


class PostgresRecordAccessRepository:
    """RecordAccess repository implementation."""

    def __init__(self, conn: AsyncConnection) -> None:
        self._conn = conn

    @translate_store_errors
    async def get(
        self, user_id: UUID, resource_type: str, resource_id: str
    ) -> RecordAccess | None:
        """Get entry for exactly this record."""
        cur = await self._conn.execute(
            "SELECT user_id, resource_type, resource_id, granted, created_at, created_by "
            "FROM record_access "
            "WHERE user_id = %s AND resource_type = %s AND resource_id = %s",
            (user_id, resource_type, resource_id),
        )
        r = await cur.fetchone()
        if not r:
            return None
        return RecordAccess(
            user_id=r[0],
            resource_type=r[1],
            resource_id=r[2],
            granted=r[3],
            created_at=r[4],
            created_by=r[5],
        )

    @translate_store_errors
    async def upsert(self, entry: RecordAccess) -> RecordAccess:
        """Create or replace entry."""
        await self._conn.execute(
            "INSERT INTO record_access "
            "(user_id, resource_type, resource_id, granted, created_at, created_by) "
            "VALUES (%s, %s, %s, %s, %s, %s) "
            "ON CONFLICT (user_id, resource_type, resource_id) DO UPDATE SET "
            "granted = EXCLUDED.granted, created_at = EXCLUDED.created_at, "
            "created_by = EXCLUDED.created_by",
            (
                entry.user_id,
                entry.resource_type,
                entry.resource_id,
                entry.granted,
                entry.created_at,
                entry.created_by,
            ),
        )
        return entry

    @translate_store_errors
    async def delete(self, user_id: UUID, resource_type: str, resource_id: str) -> None:
        """Delete entry."""
        await self._conn.execute(
            "DELETE FROM record_access "
            "WHERE user_id = %s AND resource_type = %s AND resource_id = %s",
            (user_id, resource_type, resource_id),
        )
