"""Lifespan middleware - pool, catalog seed and catalog snapshot."""

import logging
from typing import Any

from psycopg_pool import AsyncConnectionPool

from eoriauthz.application.dto.seed_payload import SeedPayload
from eoriauthz.application.use_cases.catalog.load_catalog import LoadCatalogUseCase
from eoriauthz.application.use_cases.catalog.seed_catalog import SeedCatalogUseCase
from eoriauthz.infrastructure.permission.permission_resolver import RBACPermissionResolver

logger = logging.getLogger(__name__)


class PoolLifespanMiddleware:
    """Opens the connection pool on startup and closes it on shutdown."""

    def __init__(self, pool: AsyncConnectionPool) -> None:
        self._pool = pool

    async def process_startup(self, scope: dict[str, Any], event: dict[str, Any]) -> None:
        await self._pool.open()

    async def process_shutdown(self, scope: dict[str, Any], event: dict[str, Any]) -> None:
        await self._pool.close()


class CatalogLifespanMiddleware:
    """Seeds the catalog when configured, then installs the snapshot in the resolver.

    Must come after PoolLifespanMiddleware in the middleware list.
    """

    def __init__(
        self,
        resolver: RBACPermissionResolver,
        load_catalog: LoadCatalogUseCase,
        seed_catalog: SeedCatalogUseCase | None = None,
        seed_payload: SeedPayload | None = None,
    ) -> None:
        self._resolver = resolver
        self._load = load_catalog
        self._seed = seed_catalog
        self._payload = seed_payload

    async def process_startup(self, scope: dict[str, Any], event: dict[str, Any]) -> None:
        if self._seed is not None and self._payload is not None:
            await self._seed.execute(self._payload)
        catalog = await self._load.execute()
        self._resolver.set_catalog(catalog)
        logger.info(
            "Permission catalog loaded",
            extra={"permissions": len(catalog), "resource_types": len(catalog.resource_types)},
        )
