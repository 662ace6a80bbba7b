"""Session endpoints."""

import falcon.asgi

from eoriauthz.application.use_cases.session.revoke_session import (
    RevokeSessionUseCase,
    RevokeUserSessionsUseCase,
)
from eoriauthz.interfaces.api.resources.common import current_user, parse_uuid


class CurrentSessionResource:
    """DELETE /v1/sessions/current - logout."""

    def __init__(self, revoke_session: RevokeSessionUseCase, cookie_name: str = "session") -> None:
        self._revoke = revoke_session
        self._cookie_name = cookie_name

    async def on_delete(self, req: falcon.asgi.Request, resp: falcon.asgi.Response) -> None:
        user = current_user(req, resp)
        if not user:
            return

        await self._revoke.execute(user.token)
        resp.unset_cookie(self._cookie_name)
        resp.status = falcon.HTTP_204


class UserSessionsResource:
    """DELETE /v1/users/{user_id}/sessions - sign the user out everywhere."""

    def __init__(self, revoke_user_sessions: RevokeUserSessionsUseCase) -> None:
        self._revoke = revoke_user_sessions

    async def on_delete(
        self, req: falcon.asgi.Request, resp: falcon.asgi.Response, user_id: str
    ) -> None:
        user = current_user(req, resp)
        if not user:
            return

        count = await self._revoke.execute(user.user_id, parse_uuid(user_id, "user ID"))
        resp.media = {"revoked": count}
        resp.status = falcon.HTTP_200
