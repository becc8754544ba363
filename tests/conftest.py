"""Test configuration and fixtures for s3-client."""

import boto3
import pytest
from moto import mock_aws


@pytest.fixture(autouse=True)
def aws_environment(monkeypatch):
    """Point boto3 at fake credentials and a fixed region."""
    monkeypatch.setenv("AWS_ACCESS_KEY_ID", "testing")
    monkeypatch.setenv("AWS_SECRET_ACCESS_KEY", "testing")
    monkeypatch.setenv("AWS_SESSION_TOKEN", "testing")
    monkeypatch.setenv("AWS_DEFAULT_REGION", "us-east-1")
    monkeypatch.delenv("AWS_PROFILE", raising=False)


@pytest.fixture
def temp_dir(tmp_path):
    """Create a temporary directory for testing."""
    return tmp_path


@pytest.fixture
def s3():
    """Mocked S3 with a populated test bucket."""
    with mock_aws():
        client = boto3.client("s3", region_name="us-east-1")
        client.create_bucket(Bucket="test-bucket")
        client.put_object(Bucket="test-bucket", Key="data/file1.txt", Body=b"content1")
        client.put_object(
            Bucket="test-bucket", Key="data/file2.txt", Body=b"content2content2"
        )
        client.put_object(
            Bucket="test-bucket", Key="data/subdir/file3.txt", Body=b"content3"
        )
        yield client
