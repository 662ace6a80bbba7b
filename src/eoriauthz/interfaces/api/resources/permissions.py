"""Permission catalog listing."""

import falcon.asgi

from eoriauthz.infrastructure.permission.permission_resolver import RBACPermissionResolver
from eoriauthz.interfaces.api.resources.common import current_user


class PermissionsResource:
    """GET /v1/permissions - catalog snapshot, optionally filtered by ?resource=."""

    def __init__(self, resolver: RBACPermissionResolver) -> None:
        self._resolver = resolver

    async def on_get(self, req: falcon.asgi.Request, resp: falcon.asgi.Response) -> None:
        if not current_user(req, resp):
            return

        resource = req.get_param("resource")
        catalog = self._resolver.catalog
        resp.media = {
            "items": [
                {
                    "id": str(p.id),
                    "name": p.name,
                    "resource": p.resource,
                    "action": p.action,
                    "display_name": p.display_name,
                }
                for p in catalog
                if resource is None or p.resource == resource
            ],
            "resource_types": dict(catalog.resource_types),
        }
        resp.status = falcon.HTTP_200
