"""Parsing of ``bucket/key`` and ``s3://bucket/key`` object addresses."""

from urllib.parse import urlparse

from s3_client.core import get_logger
from s3_client.core.exceptions import AddressError
from s3_client.schemas import ObjectRef

logger = get_logger(__name__)

S3_SCHEME = "s3://"


def parse_object_address(address: str, need_key: bool = True) -> ObjectRef:
    """Parse an object address into a bucket and key.

    Both ``bucket/key`` and ``s3://bucket/key`` forms are accepted. The plain
    form is split on the first ``/`` only, so ``bucket/a/b`` addresses key
    ``a/b``.

    Args:
        address: Address string supplied by the user
        need_key: Whether an empty key is an error

    Returns:
        ObjectRef for the address

    Raises:
        AddressError: If the address is malformed or lacks a required key
    """
    if address.startswith(S3_SCHEME):
        try:
            parsed = urlparse(address)
        except ValueError as e:
            raise AddressError(f"invalid address '{address}': {e}")
        bucket = parsed.netloc
        key = parsed.path.lstrip("/")
    else:
        bucket, _, key = address.partition("/")

    if not bucket:
        raise AddressError(f"missing bucket: {address}")
    if need_key and not key:
        raise AddressError(f"need key: {address}")

    logger.debug("Object address parsed", bucket=bucket, key=key)
    return ObjectRef(bucket=bucket, key=key)
