"""Request handler exports."""

from .identify_request_handler import CORS_HEADERS, HandlerResponse, IdentifyRequestHandler

__all__ = ["CORS_HEADERS", "HandlerResponse", "IdentifyRequestHandler"]
