"""Object storage operations for S3-compatible services."""

from .address import parse_object_address
from .clients import S3ClientConfig, S3ClientManager
from .identity import get_caller_identity
from .operations import StorageClient
from .transfer import download_object, stream_object, upload_file

__all__ = [
    "S3ClientConfig",
    "S3ClientManager",
    "StorageClient",
    "download_object",
    "get_caller_identity",
    "parse_object_address",
    "stream_object",
    "upload_file",
]
