"""JSON:API header utilities for FastAPI and Starlette applications."""

from .core.errors import (
    FormatError,
    IllegalParameterError,
    InvalidArgumentError,
    InvalidMediaTypeError,
    InvalidUriError,
    JSONAPIErrorBuilder,
    JSONAPIHeaderError,
)
from .middleware import ContentNegotiationMiddleware, ErrorHandlerMiddleware
from .utils import HeaderField, MediaTypeHeader, MediaTypeHeaderBuilder, MediaTypeParameter

__all__ = [
    "ContentNegotiationMiddleware",
    "ErrorHandlerMiddleware",
    "FormatError",
    "HeaderField",
    "IllegalParameterError",
    "InvalidArgumentError",
    "InvalidMediaTypeError",
    "InvalidUriError",
    "JSONAPIErrorBuilder",
    "JSONAPIHeaderError",
    "MediaTypeHeader",
    "MediaTypeHeaderBuilder",
    "MediaTypeParameter",
]
