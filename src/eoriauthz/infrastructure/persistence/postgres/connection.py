"""PostgreSQL async connection pool for the permission registries."""

from psycopg_pool import AsyncConnectionPool


def create_pool(
    conninfo: str, min_size: int = 2, max_size: int = 10, timeout: float = 5.0
) -> AsyncConnectionPool:
    """Create the registry pool, closed.

    Callers open it (PoolLifespanMiddleware, or the CLI around a single
    command). Connections are checked on checkout so a dropped server shows up
    as StoreUnavailable on the next request instead of a failed query
    mid-decision. `timeout` bounds the wait for a free connection.
    """
    return AsyncConnectionPool(
        conninfo=conninfo,
        min_size=min_size,
        max_size=max_size,
        timeout=timeout,
        check=AsyncConnectionPool.check_connection,
        name="eoriauthz",
        open=False,
    )
