"""Utility templates for JSON:API headers."""

from .content_negotiation import MediaTypeHeaderBuilder, parse_jsonapi_media_type, parse_uri
from .header_field import HeaderField
from .media_type import MediaTypeHeader, MediaTypeParameter, split_header_values

__all__ = [
    "HeaderField",
    "MediaTypeHeader",
    "MediaTypeHeaderBuilder",
    "MediaTypeParameter",
    "parse_jsonapi_media_type",
    "parse_uri",
    "split_header_values",
]
