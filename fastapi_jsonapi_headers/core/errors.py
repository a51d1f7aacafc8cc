"""JSON:API header errors and error object templates."""

from typing import Any, ClassVar

from fastapi_jsonapi_headers.constants import (
    ILLEGAL_MEDIA_TYPE_MESSAGE,
    ILLEGAL_PARAMETERS_MESSAGE,
)


class JSONAPIHeaderError(ValueError):
    """Base class for malformed or unsupported JSON:API headers."""

    status: ClassVar[str] = "400"
    title: ClassVar[str] = "Bad Request"


class FormatError(JSONAPIHeaderError):
    """A raw header string is structurally malformed."""

    def __init__(self, raw: str, reason: str) -> None:
        super().__init__(f"{reason}: {raw!r}")
        self.raw = raw


class InvalidArgumentError(JSONAPIHeaderError):
    """A header name contains the `:` delimiter."""

    def __init__(self, name: str) -> None:
        super().__init__(f"Delimiter found in header name: {name!r}")
        self.name = name


class InvalidMediaTypeError(JSONAPIHeaderError):
    """The media type is not ``application/vnd.api+json``."""

    status = "415"
    title = "Unsupported Media Type"

    def __init__(self, media_type: str) -> None:
        super().__init__(f"{ILLEGAL_MEDIA_TYPE_MESSAGE} (got {media_type!r})")
        self.media_type = media_type


class IllegalParameterError(JSONAPIHeaderError):
    """A media-type parameter other than ``ext``, ``profile`` or ``q``."""

    status = "415"
    title = "Unsupported Media Type"

    def __init__(self, parameter: str) -> None:
        super().__init__(f"{ILLEGAL_PARAMETERS_MESSAGE} (got {parameter!r})")
        self.parameter = parameter


class InvalidUriError(JSONAPIHeaderError):
    """A token of an `ext` or `profile` parameter is not an absolute URI."""

    def __init__(self, uri: str) -> None:
        super().__init__(f"Invalid URI: {uri!r}")
        self.uri = uri


class JSONAPIErrorBuilder:
    """Build JSON:API error objects and error documents."""

    def error_object(
        self,
        *,
        status: str | None = None,
        code: str | None = None,
        title: str | None = None,
        detail: str | None = None,
        source: dict[str, Any] | None = None,
        meta: dict[str, Any] | None = None,
    ) -> dict[str, Any]:
        """Return a JSON:API error object."""
        error: dict[str, Any] = {}
        if status is not None:
            error["status"] = status
        if code is not None:
            error["code"] = code
        if title is not None:
            error["title"] = title
        if detail is not None:
            error["detail"] = detail
        if source is not None:
            error["source"] = source
        if meta is not None:
            error["meta"] = meta
        if not error:
            raise ValueError("Error object must include at least one field.")
        return error

    def from_exception(self, exc: JSONAPIHeaderError) -> dict[str, Any]:
        """Return a JSON:API error object describing a header error."""
        return self.error_object(
            status=exc.status,
            code=type(exc).__name__,
            title=exc.title,
            detail=str(exc),
        )

    def error_document(self, errors: list[dict[str, Any]]) -> dict[str, Any]:
        """Return a JSON:API document with an errors array."""
        return {"errors": errors}
