"""Middleware templates for JSON:API."""

from .content_negotiation import ContentNegotiationMiddleware, accepts_jsonapi
from .error_handler import ErrorHandlerMiddleware

__all__ = ["ContentNegotiationMiddleware", "ErrorHandlerMiddleware", "accepts_jsonapi"]
