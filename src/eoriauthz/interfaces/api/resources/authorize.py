"""Authorization decision endpoint."""

import falcon.asgi

from eoriauthz.application.use_cases.authorization.evaluate_access import EvaluateAccessUseCase
from eoriauthz.domain.exceptions import ValidationError
from eoriauthz.interfaces.api.resources.common import current_user, parse_uuid, read_body


class AuthorizeResource:
    """POST /v1/authorize - decide for the session user.

    Denials are answered with 200 and allowed=false; the caller enforces.
    """

    def __init__(self, evaluate_access: EvaluateAccessUseCase) -> None:
        self._evaluate = evaluate_access

    async def on_post(self, req: falcon.asgi.Request, resp: falcon.asgi.Response) -> None:
        user = current_user(req, resp)
        if not user:
            return

        body = await read_body(req)
        action = body.get("action")
        resource_type = body.get("resource_type")
        if not isinstance(action, str) or not isinstance(resource_type, str):
            raise ValidationError("action and resource_type are required")

        resource_id = body.get("resource_id")
        tenant_id = body.get("tenant_id")
        decision = await self._evaluate.execute(
            user.user_id,
            action,
            resource_type,
            resource_id=str(resource_id) if resource_id is not None else None,
            tenant_id=parse_uuid(tenant_id, "tenant_id") if tenant_id else None,
        )
        resp.media = {
            "allowed": decision.allowed,
            "reason": decision.reason.value,
            "permission": decision.permission,
        }
        resp.status = falcon.HTTP_200
