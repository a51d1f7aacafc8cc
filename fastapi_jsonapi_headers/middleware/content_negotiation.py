"""JSON:API content negotiation middleware."""

import logging
from typing import Any, Iterable

from starlette.responses import JSONResponse

from fastapi_jsonapi_headers.constants import MEDIA_TYPE
from fastapi_jsonapi_headers.core.errors import JSONAPIErrorBuilder, JSONAPIHeaderError
from fastapi_jsonapi_headers.utils.content_negotiation import MediaTypeHeaderBuilder
from fastapi_jsonapi_headers.utils.media_type import MediaTypeHeader, split_header_values

logger = logging.getLogger("fastapi_jsonapi_headers.middleware")

STATE_KEY = "jsonapi_content_type"
_WILDCARDS = frozenset({"*/*", "application/*"})


def accepts_jsonapi(accept: str) -> bool:
    """Return whether an ``Accept`` header allows a JSON:API response."""
    for member in split_header_values(accept):
        try:
            header = MediaTypeHeader.parse(member)
        except JSONAPIHeaderError:
            continue
        if header.media_type in _WILDCARDS:
            return True
        if header.media_type != MEDIA_TYPE:
            continue
        try:
            MediaTypeHeaderBuilder.from_header(header)
        except JSONAPIHeaderError as exc:
            logger.debug("Ignoring Accept member %r: %s", member, exc)
            continue
        return True
    return False


class ContentNegotiationMiddleware:
    """Ensure JSON:API media type for requests and responses."""

    def __init__(self, app: Any, *, methods: Iterable[str] = ("POST", "PATCH")) -> None:
        """Store the ASGI app and the methods whose body must be JSON:API."""
        self.app = app
        self.methods = frozenset(method.upper() for method in methods)
        self.errors = JSONAPIErrorBuilder()

    async def __call__(self, scope: dict[str, Any], receive: Any, send: Any) -> None:
        """Validate JSON:API headers before passing to downstream app."""
        if scope.get("type") != "http":
            await self.app(scope, receive, send)
            return

        method = scope.get("method", "").upper()
        headers = {k.decode("latin-1").lower(): v.decode("latin-1") for k, v in scope.get("headers", [])}
        content_type = headers.get("content-type", "")
        accept = headers.get("accept", "")

        if method in self.methods:
            try:
                builder = MediaTypeHeaderBuilder.from_header(content_type)
            except JSONAPIHeaderError as exc:
                logger.debug("Rejecting Content-Type %r: %s", content_type, exc)
                response = self._error_response(415, "Unsupported Media Type", str(exc))
                await response(scope, receive, send)
                return
            scope.setdefault("state", {})[STATE_KEY] = builder

        if accept and not accepts_jsonapi(accept):
            logger.debug("Rejecting Accept %r", accept)
            response = self._error_response(406, "Not Acceptable", None)
            await response(scope, receive, send)
            return

        await self.app(scope, receive, send)

    def _error_response(self, status_code: int, title: str, detail: Any) -> JSONResponse:
        error = self.errors.error_object(status=str(status_code), title=title, detail=detail)
        return JSONResponse(
            self.errors.error_document([error]),
            status_code=status_code,
            media_type=MEDIA_TYPE,
        )
