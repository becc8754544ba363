"""Caller identity lookup through STS."""

from typing import Any

from s3_client.core import get_logger, get_tracer
from s3_client.objectstorage.clients import S3ClientManager

logger = get_logger(__name__)
tracer = get_tracer(__name__)


def get_caller_identity(client_manager: S3ClientManager) -> dict[str, Any]:
    """Ask STS who the current caller is.

    Returns:
        The GetCallerIdentity response as returned by the service
    """
    with tracer.start_as_current_span("sts.get_caller_identity"):
        response = client_manager.sts_client.get_caller_identity()
    logger.info("Caller identity resolved", arn=response.get("Arn"))
    return response
