"""Tests for request schemas and client configuration."""

import io

import pytest
from pydantic import ValidationError

from s3_client.objectstorage.clients import S3ClientConfig
from s3_client.schemas import ObjectRef, PutObjectRequest


class TestObjectRef:
    """Test object references."""

    def test_uri(self):
        ref = ObjectRef(bucket="bucket", key="a/b.txt")
        assert ref.uri == "bucket/a/b.txt"

    def test_key_defaults_to_empty(self):
        assert ObjectRef(bucket="bucket").key == ""

    def test_frozen(self):
        ref = ObjectRef(bucket="bucket", key="k")
        with pytest.raises(ValidationError):
            ref.key = "other"


class TestPutObjectRequest:
    """Test upload requests."""

    def test_defaults(self):
        request = PutObjectRequest(
            object_ref=ObjectRef(bucket="b", key="k"),
            body=io.BytesIO(b"abc"),
            content_length=3,
        )
        assert request.content_type is None
        assert request.body.read() == b"abc"

    def test_negative_length_rejected(self):
        with pytest.raises(ValidationError):
            PutObjectRequest(
                object_ref=ObjectRef(bucket="b", key="k"),
                body=io.BytesIO(),
                content_length=-1,
            )


class TestS3ClientConfig:
    """Test S3 client configuration."""

    def test_defaults(self):
        config = S3ClientConfig()
        assert config.region_name is None
        assert config.endpoint_url is None
        assert config.aws_profile is None

    def test_with_profile(self):
        config = S3ClientConfig(aws_profile="myprofile", region_name="eu-west-1")
        assert config.aws_profile == "myprofile"
        assert config.region_name == "eu-west-1"

    def test_extra_fields_forbidden(self):
        with pytest.raises(ValidationError):
            S3ClientConfig(bucket="nope")

    def test_explicit_credentials_not_accepted(self):
        """Credentials come from the profile or the default chain only."""
        with pytest.raises(ValidationError):
            S3ClientConfig(access_key_id="key", secret_access_key="secret")
