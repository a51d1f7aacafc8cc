"""Helpers for JSON:API content negotiation."""

from __future__ import annotations

from typing import Iterable

from pydantic import AnyUrl, TypeAdapter, ValidationError

from fastapi_jsonapi_headers.constants import (
    CONTENT_TYPE_HEADER,
    EXTENSIONS_PARAMETER,
    LEGAL_PARAMETERS,
    MEDIA_TYPE,
    PROFILES_PARAMETER,
)
from fastapi_jsonapi_headers.core.errors import (
    IllegalParameterError,
    InvalidMediaTypeError,
    InvalidUriError,
)
from fastapi_jsonapi_headers.utils.header_field import HeaderField
from fastapi_jsonapi_headers.utils.media_type import (
    MediaTypeHeader,
    MediaTypeParameter,
    ascii_lower,
)

UriLike = AnyUrl | str

_URI_ADAPTER = TypeAdapter(AnyUrl)


def parse_uri(value: UriLike) -> AnyUrl:
    """Validate ``value`` as an absolute URI.

    Tokens holding whitespace, control characters or double quotes are
    rejected; the URL parser alone would drop tabs and newlines.
    """
    text = str(value)
    if any(char.isspace() or not char.isprintable() or char == '"' for char in text):
        raise InvalidUriError(text)
    try:
        return _URI_ADAPTER.validate_python(text)
    except ValidationError as exc:
        raise InvalidUriError(text) from exc


def _parse_uris_parameter(parameter: MediaTypeParameter) -> set[AnyUrl]:
    value = parameter.value
    if len(value) >= 2 and value.startswith('"') and value.endswith('"'):
        value = value[1:-1]
    if not value:
        return set()
    return {parse_uri(token) for token in value.split(" ")}


def _format_uris_parameter(uris: Iterable[AnyUrl]) -> str:
    return '"{}"'.format(" ".join(sorted(str(uri) for uri in uris)))


class MediaTypeHeaderBuilder:
    """Build ``Content-Type`` headers carrying JSON:API ``ext`` and ``profile`` parameters.

    Extension and profile URIs are kept as sets. ``build`` emits them sorted by
    their string form, so equal sets always produce the same header.
    """

    def __init__(self) -> None:
        self.extensions: set[AnyUrl] = set()
        self.profiles: set[AnyUrl] = set()

    @classmethod
    def from_header(cls, header: MediaTypeHeader | str) -> MediaTypeHeaderBuilder:
        """Create a builder from an existing JSON:API media-type header.

        Raises ``InvalidMediaTypeError`` for any media type other than
        ``application/vnd.api+json``, ``IllegalParameterError`` for parameters
        other than ``ext``, ``profile`` and ``q`` and ``InvalidUriError`` when
        an ``ext`` or ``profile`` token is not an absolute URI.
        """
        if isinstance(header, str):
            header = MediaTypeHeader.parse(header)
        if header.media_type != MEDIA_TYPE:
            raise InvalidMediaTypeError(header.media_type)
        for parameter in header.parameters:
            if ascii_lower(parameter.name) not in LEGAL_PARAMETERS:
                raise IllegalParameterError(parameter.name)

        builder = cls()
        extensions = header.get_parameter(EXTENSIONS_PARAMETER)
        if extensions is not None:
            builder.extensions = _parse_uris_parameter(extensions)
        profiles = header.get_parameter(PROFILES_PARAMETER)
        if profiles is not None:
            builder.profiles = _parse_uris_parameter(profiles)
        return builder

    def add_extension(self, uri: UriLike) -> MediaTypeHeaderBuilder:
        """Add an extension URI; adding a known one is a no-op."""
        self.extensions.add(parse_uri(uri))
        return self

    def add_profile(self, uri: UriLike) -> MediaTypeHeaderBuilder:
        """Add a profile URI; adding a known one is a no-op."""
        self.profiles.add(parse_uri(uri))
        return self

    def remove_extension(self, uri: UriLike) -> MediaTypeHeaderBuilder:
        """Remove an extension URI if present."""
        self.extensions.discard(parse_uri(uri))
        return self

    def remove_profile(self, uri: UriLike) -> MediaTypeHeaderBuilder:
        """Remove a profile URI if present."""
        self.profiles.discard(parse_uri(uri))
        return self

    def clear_all_parameters(self) -> MediaTypeHeaderBuilder:
        """Drop every extension and profile."""
        self.extensions.clear()
        self.profiles.clear()
        return self

    def build(self) -> MediaTypeHeader:
        """Return a new JSON:API header; empty URI sets are omitted."""
        header = MediaTypeHeader(media_type=MEDIA_TYPE)
        if self.extensions:
            header.add_parameter(EXTENSIONS_PARAMETER, _format_uris_parameter(self.extensions))
        if self.profiles:
            header.add_parameter(PROFILES_PARAMETER, _format_uris_parameter(self.profiles))
        return header

    def build_header_field(self) -> HeaderField:
        """Return the built header as a ``Content-Type`` header field."""
        return HeaderField.create(CONTENT_TYPE_HEADER, self.build().format())


def parse_jsonapi_media_type(content_type: str) -> MediaTypeHeaderBuilder:
    """Parse a JSON:API ``Content-Type`` value into a builder."""
    return MediaTypeHeaderBuilder.from_header(content_type)
