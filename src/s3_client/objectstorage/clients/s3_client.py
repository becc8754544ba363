"""S3 client configuration and management.

This module provides boto3 session and client construction for the CLI with
support for AWS profiles and S3-compatible services.

The S3ClientManager owns a single boto3 session per invocation and hands out
the ``s3`` and ``sts`` clients built from it, so that the region and
credentials used by every command agree.

Credentials are resolved by boto3 itself: from the named profile when one is
given, otherwise from the default chain (environment, shared config, instance
role).

S3-Compatible Services:
    Supports custom endpoints for services like MinIO via endpoint_url.
    The endpoint applies to the S3 client only; identity lookups keep the
    default STS endpoint.
"""

from typing import Any, Dict, Optional

import boto3
from pydantic import BaseModel, ConfigDict, Field

from s3_client.core import get_logger

logger = get_logger(__name__)

DEFAULT_REGION = "us-east-1"


class S3ClientConfig(BaseModel):
    """Configuration for S3 client connections.

    Example:
        # AWS profile
        config = S3ClientConfig(aws_profile="my-profile")

        # MinIO endpoint
        config = S3ClientConfig(
            endpoint_url="http://localhost:9000",
            aws_profile="minio"
        )
    """

    model_config = ConfigDict(extra="forbid")

    region_name: Optional[str] = Field(
        None, description="AWS region name; resolved from the session when unset"
    )
    endpoint_url: Optional[str] = Field(
        None, description="Custom S3 endpoint URL for S3-compatible services"
    )
    aws_profile: Optional[str] = Field(
        None, description="AWS CLI profile name to use for credentials"
    )


class S3ClientManager:
    """Manages the boto3 session and the clients built from it."""

    def __init__(self, config: S3ClientConfig):
        """Initialize S3 client manager.

        Args:
            config: S3 client configuration
        """
        self.config = config
        self._session: Optional[boto3.Session] = None
        self._client = None
        self._sts_client = None
        logger.info("S3 client manager initialized", region=config.region_name)

    @property
    def session(self) -> boto3.Session:
        """Get or create the boto3 session."""
        if self._session is None:
            self._session = self._create_session()
        return self._session

    @property
    def client(self):
        """Get or create S3 client instance."""
        if self._client is None:
            kwargs: Dict[str, Any] = {}
            if self.config.endpoint_url:
                kwargs["endpoint_url"] = self.config.endpoint_url
            self._client = self.session.client("s3", **kwargs)  # type: ignore
            logger.info("S3 client created", endpoint_url=self.config.endpoint_url)
        return self._client

    @property
    def sts_client(self):
        """Get or create STS client instance."""
        if self._sts_client is None:
            self._sts_client = self.session.client("sts")  # type: ignore
            logger.info("STS client created")
        return self._sts_client

    @property
    def region(self) -> str:
        """Effective region of the session."""
        return self.session.region_name or DEFAULT_REGION

    def _create_session(self) -> boto3.Session:
        """Create boto3 session with the configured settings."""
        kwargs: Dict[str, Any] = {}
        if self.config.region_name:
            kwargs["region_name"] = self.config.region_name

        if self.config.aws_profile:
            session = boto3.Session(profile_name=self.config.aws_profile, **kwargs)
            logger.info(
                "Session created with profile", profile=self.config.aws_profile
            )
        else:
            session = boto3.Session(**kwargs)
            logger.info("Session created with default credential chain")

        return session
