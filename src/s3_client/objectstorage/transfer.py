"""Moving object bytes between the storage service and local files."""

import contextlib
import gzip
import os
import shutil
from typing import BinaryIO, Optional

from s3_client.core import get_logger
from s3_client.objectstorage.operations import StorageClient
from s3_client.schemas import ObjectRef, PutObjectRequest

logger = get_logger(__name__)

TEMP_SUFFIX = "_tmp"


def local_name_for_key(key: str) -> str:
    """Flatten an object key into a single local file name."""
    return key.replace("/", "_")


def resolve_download_path(key: str, local_path: Optional[str] = None) -> str:
    """Pick the local file a download should land in.

    Without an explicit path the flattened key is used in the current
    directory. An explicit path naming an existing directory receives the
    flattened key inside it; any other explicit path is used as is.
    """
    if local_path is None:
        return local_name_for_key(key)
    if os.path.isdir(local_path):
        return os.path.join(local_path, local_name_for_key(key))
    return local_path


def stream_object(
    storage: StorageClient,
    ref: ObjectRef,
    out: BinaryIO,
    decompress: bool = False,
) -> None:
    """Copy an object body to a binary stream, optionally gunzipping it."""
    with storage.open_object(ref) as body:
        if decompress:
            with gzip.GzipFile(fileobj=body, mode="rb") as reader:
                shutil.copyfileobj(reader, out)
        else:
            shutil.copyfileobj(body, out)
    out.flush()


def download_object(
    storage: StorageClient, ref: ObjectRef, local_path: Optional[str] = None
) -> str:
    """Download an object to a local file.

    The body is written to a ``_tmp`` sibling of the destination and only
    renamed into place once it has been fully written. The temporary file
    is removed if anything fails along the way.

    Args:
        storage: Storage client facade
        ref: Object to download
        local_path: Destination file or directory

    Returns:
        Path of the written file
    """
    target = resolve_download_path(ref.key, local_path)
    tmp_path = target + TEMP_SUFFIX
    logger.info("Downloading object", bucket=ref.bucket, key=ref.key, target=target)

    try:
        with open(tmp_path, "wb") as f:
            with storage.open_object(ref) as body:
                shutil.copyfileobj(body, f)
            f.flush()
        os.replace(tmp_path, target)
    except BaseException:
        with contextlib.suppress(FileNotFoundError):
            os.remove(tmp_path)
        raise

    logger.info("Object downloaded", bucket=ref.bucket, key=ref.key, target=target)
    return target


def upload_file(
    storage: StorageClient,
    local_path: str,
    ref: ObjectRef,
    content_type: Optional[str] = None,
) -> int:
    """Upload a local file to an object.

    Returns:
        Number of bytes uploaded
    """
    with open(local_path, "rb") as f:
        size = os.fstat(f.fileno()).st_size
        storage.put_object(
            PutObjectRequest(
                object_ref=ref,
                body=f,
                content_length=size,
                content_type=content_type,
            )
        )
    return size
