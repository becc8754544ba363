"""A small command-line client for S3 object storage.

This package wraps the handful of S3 operations needed day to day (list,
get, cat, put, delete, presign) and a caller identity lookup behind a flat
``s3-client`` command. Objects are addressed as ``bucket/key`` or
``s3://bucket/key``.

Recommended Usage:
    The CLI is the main entry point, but the facades can be used directly:

    >>> from s3_client import S3ClientConfig, S3ClientManager, StorageClient
    >>> from s3_client import download_object, parse_object_address
    >>> storage = StorageClient(S3ClientManager(S3ClientConfig()))
    >>> ref = parse_object_address("my-bucket/reports/2024.csv")
    >>> download_object(storage, ref)
"""

__version__ = "0.1.0"

from .objectstorage import (
    S3ClientConfig,
    S3ClientManager,
    StorageClient,
    download_object,
    get_caller_identity,
    parse_object_address,
    stream_object,
    upload_file,
)
from .schemas import (
    BucketEntry,
    ObjectEntry,
    ObjectListing,
    ObjectRef,
    PutObjectRequest,
)

__all__ = [
    # Schemas
    "BucketEntry",
    "ObjectEntry",
    "ObjectListing",
    "ObjectRef",
    "PutObjectRequest",
    # Clients and facades
    "S3ClientConfig",
    "S3ClientManager",
    "StorageClient",
    "get_caller_identity",
    # Addresses and transfers
    "parse_object_address",
    "download_object",
    "stream_object",
    "upload_file",
]
