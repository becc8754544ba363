"""Configuration management for s3-client."""

from typing import Optional

from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    """Application settings with environment variable support."""

    log_level: str = "WARNING"
    otel_enabled: bool = False
    otel_service_name: str = "s3-client"

    aws_profile: Optional[str] = None
    region_name: Optional[str] = None
    endpoint_url: Optional[str] = None
    presign_expires_in: int = 900

    model_config = {
        "env_prefix": "S3_CLIENT_",
        "case_sensitive": False,
    }


settings = Settings()
