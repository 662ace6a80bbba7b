"""Health check endpoints."""

import falcon.asgi
from psycopg_pool import AsyncConnectionPool


class HealthResource:
    """Liveness and readiness endpoints."""

    def __init__(self, pool: AsyncConnectionPool | None = None, resolver=None) -> None:
        self._pool = pool
        self._resolver = resolver

    async def on_get(self, req: falcon.asgi.Request, resp: falcon.asgi.Response) -> None:
        """GET /v1/health - liveness."""
        resp.media = {"status": "ok"}
        resp.status = falcon.HTTP_200

    async def on_get_ready(self, req: falcon.asgi.Request, resp: falcon.asgi.Response) -> None:
        """GET /v1/health/ready - pool open and catalog loaded."""
        pool_ready = self._pool is None or not self._pool.closed
        catalog_ready = self._resolver is None or self._resolver.catalog_loaded
        if pool_ready and catalog_ready:
            resp.media = {"status": "ready"}
            resp.status = falcon.HTTP_200
        else:
            resp.media = {"status": "not ready", "pool": pool_ready, "catalog": catalog_ready}
            resp.status = falcon.HTTP_503
