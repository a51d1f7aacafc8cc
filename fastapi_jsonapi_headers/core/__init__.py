"""Core JSON:API header errors."""

from .errors import (
    FormatError,
    IllegalParameterError,
    InvalidArgumentError,
    InvalidMediaTypeError,
    InvalidUriError,
    JSONAPIErrorBuilder,
    JSONAPIHeaderError,
)

__all__ = [
    "FormatError",
    "IllegalParameterError",
    "InvalidArgumentError",
    "InvalidMediaTypeError",
    "InvalidUriError",
    "JSONAPIErrorBuilder",
    "JSONAPIHeaderError",
]
