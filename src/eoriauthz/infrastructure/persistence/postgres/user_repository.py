"""PostgreSQL user repository (read-only view for authorization)."""

from uuid import UUID

from psycopg import AsyncConnection

from eoriauthz.domain.entities import AppUser
from eoriauthz.domain.value_objects import LegacyRole
from eoriauthz.infrastructure.persistence.postgres.errors import translate_store_errors


class PostgresUserRepository:
    def __init__(self, conn: AsyncConnection) -> None:
        self._conn = conn

    @translate_store_errors
    async def get_by_id(self, user_id: UUID) -> AppUser | None:
        """Get user by id."""
        cur = await self._conn.execute(
            "SELECT id, email, legacy_role FROM app_user WHERE id = %s",
            (user_id,),
        )
        r = await cur.fetchone()
        if not r:
            return None
        legacy = r[2] if r[2] in LegacyRole._value2member_map_ else None
        return AppUser(id=r[0], email=r[1], legacy_role=LegacyRole(legacy) if legacy else None)
