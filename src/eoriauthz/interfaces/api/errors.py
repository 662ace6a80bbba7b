"""Error handlers mapping domain exceptions to HTTP responses."""

import logging

import falcon
import falcon.asgi

from eoriauthz.domain.exceptions import (
    CallerError,
    NotFound,
    PermissionDenied,
    StoreUnavailable,
    UnknownPermission,
    ValidationError,
)

logger = logging.getLogger(__name__)


async def handle_permission_denied(req, resp, ex: PermissionDenied, params) -> None:
    resp.status = falcon.HTTP_403
    resp.media = {"error": "Permission denied", "reason": ex.reason}


async def handle_caller_error(req, resp, ex: CallerError, params) -> None:
    resp.status = falcon.HTTP_401
    resp.media = {"error": "Unauthorized"}


async def handle_not_found(req, resp, ex: NotFound, params) -> None:
    resp.status = falcon.HTTP_404
    resp.media = {"error": str(ex)}


async def handle_validation_error(req, resp, ex: Exception, params) -> None:
    resp.status = falcon.HTTP_400
    resp.media = {"error": str(ex)}


async def handle_store_unavailable(req, resp, ex: StoreUnavailable, params) -> None:
    logger.error("Registry unavailable: %s", ex)
    resp.status = falcon.HTTP_503
    resp.media = {"error": "Authorization store unavailable"}


async def handle_unexpected(req, resp, ex: Exception, params) -> None:
    logger.exception("Unhandled error on %s %s", req.method, req.path)
    resp.status = falcon.HTTP_500
    resp.media = {"title": "500 Internal Server Error"}


def register_error_handlers(app: falcon.asgi.App) -> None:
    """Install handlers; most specific exception wins in Falcon."""
    app.add_error_handler(Exception, handle_unexpected)
    app.add_error_handler(PermissionDenied, handle_permission_denied)
    app.add_error_handler(CallerError, handle_caller_error)
    app.add_error_handler(NotFound, handle_not_found)
    app.add_error_handler(ValidationError, handle_validation_error)
    app.add_error_handler(UnknownPermission, handle_validation_error)
    app.add_error_handler(StoreUnavailable, handle_store_unavailable)
