"""Storage client facade over the boto3 S3 client.

Each method maps onto a single S3 API call. Nothing here retries or
paginates; the SDK owns transport and retry behaviour, and listings return
one page.

Zero-valued request fields (``None``, empty strings, zero) are omitted from
outgoing requests so that the service applies its own defaults.
"""

from contextlib import contextmanager
from typing import Any, Callable, Iterator, Optional, Sequence

from botocore.exceptions import BotoCoreError
from botocore.response import StreamingBody

from s3_client.core import get_logger, get_tracer
from s3_client.core.exceptions import (
    CrossBucketDeleteError,
    StorageOperationError,
    ValidationError,
)
from s3_client.objectstorage.clients import S3ClientManager
from s3_client.schemas import (
    BucketEntry,
    ObjectEntry,
    ObjectListing,
    ObjectRef,
    PutObjectRequest,
)

logger = get_logger(__name__)
tracer = get_tracer(__name__)


def request_params(**params: Any) -> dict[str, Any]:
    """Drop zero-valued parameters from an SDK request."""
    return {name: value for name, value in params.items() if value}


class StorageClient:
    """Thin pass-through to the S3 list/get/put/delete/presign operations."""

    def __init__(self, client_manager: S3ClientManager):
        self.client_manager = client_manager

    @property
    def client(self):
        return self.client_manager.client

    def list_buckets(self) -> list[BucketEntry]:
        """List all buckets owned by the caller."""
        with tracer.start_as_current_span("s3.list_buckets"):
            response = self.client.list_buckets()

        buckets = [
            BucketEntry(name=b["Name"], creation_date=b["CreationDate"])
            for b in response.get("Buckets", [])
        ]
        logger.info("Buckets listed", bucket_count=len(buckets))
        return buckets

    def list_objects(
        self, bucket: str, prefix: str = "", max_keys: Optional[int] = None
    ) -> ObjectListing:
        """List a single page of objects under a bucket and prefix.

        Args:
            bucket: Bucket name
            prefix: Key prefix; empty lists the whole bucket
            max_keys: Page size; the service default applies when unset

        Returns:
            ObjectListing with the page contents and truncation flag
        """
        with tracer.start_as_current_span("s3.list_objects_v2"):
            response = self.client.list_objects_v2(
                **request_params(Bucket=bucket, Prefix=prefix, MaxKeys=max_keys)
            )

        listing = ObjectListing(
            bucket=bucket,
            prefix=prefix,
            objects=[
                ObjectEntry(
                    key=obj["Key"],
                    size=obj.get("Size", 0),
                    last_modified=obj["LastModified"],
                )
                for obj in response.get("Contents", [])
            ],
            is_truncated=bool(response.get("IsTruncated", False)),
        )
        logger.info(
            "Objects listed",
            bucket=bucket,
            prefix=prefix,
            object_count=len(listing.objects),
            is_truncated=listing.is_truncated,
        )
        return listing

    def get_object(self, ref: ObjectRef) -> tuple[StreamingBody, Callable[[], None]]:
        """Fetch an object body.

        The caller must invoke the returned release action once it is done
        with the body. Release drains whatever is left of the body and
        closes the connection; calling it again is a no-op.

        Args:
            ref: Object to fetch

        Returns:
            Tuple of (body stream, release action)
        """
        with tracer.start_as_current_span("s3.get_object"):
            response = self.client.get_object(
                **request_params(Bucket=ref.bucket, Key=ref.key)
            )
        body: StreamingBody = response["Body"]
        released = False

        def release() -> None:
            nonlocal released
            if released:
                return
            released = True
            try:
                for _ in body.iter_chunks():
                    pass
            except (BotoCoreError, OSError) as e:
                logger.debug("Draining object body failed", key=ref.key, error=str(e))
            finally:
                body.close()

        logger.info(
            "Object fetched",
            bucket=ref.bucket,
            key=ref.key,
            content_length=response.get("ContentLength"),
        )
        return body, release

    @contextmanager
    def open_object(self, ref: ObjectRef) -> Iterator[StreamingBody]:
        """Fetch an object body and release it on every exit path."""
        body, release = self.get_object(ref)
        try:
            yield body
        finally:
            release()

    def put_object(self, request: PutObjectRequest) -> None:
        """Upload a byte stream to an object."""
        ref = request.object_ref
        with tracer.start_as_current_span("s3.put_object"):
            self.client.put_object(
                Body=request.body,
                **request_params(
                    Bucket=ref.bucket,
                    Key=ref.key,
                    ContentLength=request.content_length,
                    ContentType=request.content_type,
                ),
            )
        logger.info(
            "Object uploaded",
            bucket=ref.bucket,
            key=ref.key,
            content_length=request.content_length,
            content_type=request.content_type,
        )

    def delete_objects(self, refs: Sequence[ObjectRef]) -> None:
        """Delete a batch of objects from a single bucket.

        Raises:
            ValidationError: If the batch is empty
            CrossBucketDeleteError: If the batch spans more than one bucket
            StorageOperationError: If the service fails to delete any key
        """
        if not refs:
            raise ValidationError("no objects to delete")

        bucket = refs[0].bucket
        for ref in refs:
            if ref.bucket != bucket:
                raise CrossBucketDeleteError(
                    "cannot delete multiple bucket objects at once"
                )

        with tracer.start_as_current_span("s3.delete_objects"):
            response = self.client.delete_objects(
                Bucket=bucket,
                Delete={"Objects": [{"Key": ref.key} for ref in refs]},
            )

        errors = response.get("Errors", [])
        if errors:
            failed = ", ".join(
                f"{err.get('Key')} ({err.get('Code')}: {err.get('Message')})"
                for err in errors
            )
            logger.error("Object deletion failed", bucket=bucket, failed=failed)
            raise StorageOperationError(f"failed to delete from {bucket}: {failed}")

        logger.info("Objects deleted", bucket=bucket, object_count=len(refs))

    def presign_get_object(self, ref: ObjectRef, expires_in: int) -> str:
        """Generate a time-limited URL for downloading an object."""
        with tracer.start_as_current_span("s3.presign_get_object"):
            url = self.client.generate_presigned_url(
                ClientMethod="get_object",
                Params=request_params(Bucket=ref.bucket, Key=ref.key),
                ExpiresIn=expires_in,
            )
        logger.info(
            "Presigned URL generated",
            bucket=ref.bucket,
            key=ref.key,
            expires_in=expires_in,
        )
        return url
