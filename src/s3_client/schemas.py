"""Request and result schemas for s3-client."""

from dataclasses import dataclass, field
from datetime import datetime
from typing import Any, Optional

from pydantic import BaseModel, ConfigDict, Field


class ObjectRef(BaseModel):
    """A bucket and key pair addressing one object or prefix."""

    model_config = ConfigDict(frozen=True)

    bucket: str = Field(..., description="Bucket name")
    key: str = Field(default="", description="Object key or key prefix")

    @property
    def uri(self) -> str:
        """Render as ``bucket/key``."""
        return f"{self.bucket}/{self.key}"


class PutObjectRequest(BaseModel):
    """An upload of a local byte stream to one object."""

    object_ref: ObjectRef
    body: Any = Field(..., description="Readable binary stream")
    content_length: int = Field(..., ge=0, description="Body length in bytes")
    content_type: Optional[str] = Field(default=None, description="MIME type")


@dataclass(frozen=True)
class BucketEntry:
    """A bucket returned by a bucket listing."""

    name: str
    creation_date: datetime


@dataclass(frozen=True)
class ObjectEntry:
    """An object returned by an object listing."""

    key: str
    size: int
    last_modified: datetime


@dataclass(frozen=True)
class ObjectListing:
    """One page of objects under a bucket and prefix."""

    bucket: str
    prefix: str
    objects: list[ObjectEntry] = field(default_factory=list)
    is_truncated: bool = False
