"""PostgreSQL session repository."""

from datetime import datetime
from uuid import UUID

from psycopg import AsyncConnection

from eoriauthz.domain.entities import Session
from eoriauthz.infrastructure.persistence.postgres.errors import translate_store_errors


class PostgresSessionRepository:
    """Session repository implementation."""

    def __init__(self, conn: AsyncConnection) -> None:
        self._conn = conn

    @translate_store_errors
    async def get(self, token: str) -> Session | None:
        """Get session by token."""
        cur = await self._conn.execute(
            "SELECT token, user_id, expires_at, created_at, ip_address, user_agent "
            "FROM session WHERE token = %s",
            (token,),
        )
        r = await cur.fetchone()
        if not r:
            return None
        return Session(
            token=r[0],
            user_id=r[1],
            expires_at=r[2],
            created_at=r[3],
            ip_address=r[4],
            user_agent=r[5],
        )

    @translate_store_errors
    async def create(self, session: Session) -> Session:
        """Create session."""
        await self._conn.execute(
            "INSERT INTO session (token, user_id, expires_at, created_at, ip_address, user_agent) "
            "VALUES (%s, %s, %s, %s, %s, %s)",
            (
                session.token,
                session.user_id,
                session.expires_at,
                session.created_at,
                session.ip_address,
                session.user_agent,
            ),
        )
        return session

    @translate_store_errors
    async def delete(self, token: str) -> None:
        """Delete session."""
        await self._conn.execute("DELETE FROM session WHERE token = %s", (token,))

    @translate_store_errors
    async def delete_for_user(self, user_id: UUID) -> int:
        """Delete all sessions of user. Returns number deleted."""
        cur = await self._conn.execute("DELETE FROM session WHERE user_id = %s", (user_id,))
        return cur.rowcount

    @translate_store_errors
    async def delete_expired(self, now: datetime) -> int:
        """Delete sessions that expired before now. Returns number deleted."""
        cur = await self._conn.execute("DELETE FROM session WHERE expires_at < %s", (now,))
        return cur.rowcount
