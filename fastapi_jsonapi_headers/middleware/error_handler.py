"""JSON:API error handling middleware."""

import logging
from typing import Any

from starlette.responses import JSONResponse

from fastapi_jsonapi_headers.constants import MEDIA_TYPE
from fastapi_jsonapi_headers.core.errors import JSONAPIErrorBuilder, JSONAPIHeaderError

logger = logging.getLogger("fastapi_jsonapi_headers.middleware")


class ErrorHandlerMiddleware:
    """Convert exceptions into JSON:API error documents."""

    def __init__(self, app: Any) -> None:
        """Store the ASGI app for middleware chaining."""
        self.app = app
        self.errors = JSONAPIErrorBuilder()

    async def __call__(self, scope: dict[str, Any], receive: Any, send: Any) -> None:
        """Handle exceptions and serialize JSON:API error documents."""
        try:
            await self.app(scope, receive, send)
        except JSONAPIHeaderError as exc:
            logger.debug("Header error: %s", exc)
            error = self.errors.from_exception(exc)
            await self._respond(error, int(exc.status), scope, receive, send)
        except Exception as exc:  # noqa: BLE001 - last-resort handler
            logger.exception("Unhandled error")
            error = self.errors.error_object(
                status="500",
                title="Internal Server Error",
                detail=str(exc),
            )
            await self._respond(error, 500, scope, receive, send)

    async def _respond(
        self, error: dict[str, Any], status_code: int, scope: dict[str, Any], receive: Any, send: Any
    ) -> None:
        response = JSONResponse(
            self.errors.error_document([error]),
            status_code=status_code,
            media_type=MEDIA_TYPE,
        )
        await response(scope, receive, send)
