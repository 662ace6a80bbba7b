"""Request helpers shared by resources."""

from uuid import UUID

import falcon.asgi

from eoriauthz.domain.exceptions import ValidationError
from eoriauthz.domain.value_objects import SessionStatus
from eoriauthz.interfaces.api.middleware.auth import RequestUser


def current_user(req: falcon.asgi.Request, resp: falcon.asgi.Response) -> RequestUser | None:
    """Session user, or None after writing a 401 response."""
    user = getattr(req.context, "user", None)
    if user:
        return user
    status = getattr(req.context, "session_status", SessionStatus.NOT_FOUND)
    resp.status = falcon.HTTP_401
    resp.media = {
        "error": "Session expired" if status == SessionStatus.EXPIRED else "Unauthorized"
    }
    return None


def parse_uuid(value: str | None, field: str) -> UUID:
    try:
        return UUID(str(value))
    except ValueError:
        raise ValidationError(f"Invalid {field}") from None


async def read_body(req: falcon.asgi.Request) -> dict:
    body = await req.get_media(default_when_empty={})
    if not isinstance(body, dict):
        raise ValidationError("Request body must be a JSON object")
    return body
