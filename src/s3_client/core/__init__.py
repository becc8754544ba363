"""Core utilities and shared components for s3-client."""

from .config import settings
from .exceptions import S3ClientToolError, ValidationError
from .observability import get_logger, get_tracer

__all__ = [
    "settings",
    "S3ClientToolError",
    "ValidationError",
    "get_logger",
    "get_tracer",
]
