"""Session middleware - resolves the session token to a trusted user id."""

from dataclasses import dataclass
from uuid import UUID

import falcon.asgi

from eoriauthz.application.ports import SessionValidator
from eoriauthz.domain.value_objects import SessionStatus


@dataclass
class RequestUser:
    """User from request context."""

    user_id: UUID
    token: str


class AuthMiddleware:
    """Sets req.context.user from a Bearer token or the session cookie.

    req.context.user is None when no token was sent or it did not validate;
    req.context.session_status tells which.
    """

    def __init__(self, session_validator: SessionValidator, cookie_name: str = "session") -> None:
        self._validator = session_validator
        self._cookie_name = cookie_name

    def _token(self, req: falcon.asgi.Request) -> str | None:
        auth = req.get_header("Authorization")
        if auth and auth.startswith("Bearer "):
            return auth[7:].strip() or None
        values = req.get_cookie_values(self._cookie_name)
        return values[0] if values else None

    async def process_request(
        self, req: falcon.asgi.Request, resp: falcon.asgi.Response
    ) -> None:
        req.context.user = None
        token = self._token(req)
        if not token:
            req.context.session_status = SessionStatus.NOT_FOUND
            return

        result = await self._validator.validate(token)
        req.context.session_status = result.status
        if result.is_valid:
            req.context.user = RequestUser(user_id=result.user_id, token=token)
