"""Tests for object address parsing."""

import pytest

from s3_client.core.exceptions import AddressError, ValidationError
from s3_client.objectstorage.address import parse_object_address


class TestPlainAddress:
    """Test bucket/key addresses."""

    def test_splits_on_first_slash_only(self):
        ref = parse_object_address("bucket/key/with/slashes")
        assert ref.bucket == "bucket"
        assert ref.key == "key/with/slashes"

    def test_bucket_only_without_key_requirement(self):
        ref = parse_object_address("bucket", need_key=False)
        assert ref.bucket == "bucket"
        assert ref.key == ""

    def test_trailing_slash_is_empty_prefix(self):
        ref = parse_object_address("bucket/", need_key=False)
        assert ref.bucket == "bucket"
        assert ref.key == ""

    def test_bucket_only_with_key_requirement(self):
        with pytest.raises(AddressError, match="need key"):
            parse_object_address("bucket", need_key=True)

    def test_trailing_slash_with_key_requirement(self):
        with pytest.raises(AddressError, match="need key"):
            parse_object_address("bucket/", need_key=True)

    def test_missing_bucket(self):
        with pytest.raises(AddressError, match="missing bucket"):
            parse_object_address("/key", need_key=True)


class TestS3UriAddress:
    """Test s3://bucket/key addresses."""

    def test_uri_with_key(self):
        ref = parse_object_address("s3://my-bucket/a/b")
        assert ref.bucket == "my-bucket"
        assert ref.key == "a/b"

    @pytest.mark.parametrize("address", ["s3://my-bucket", "s3://my-bucket/"])
    def test_uri_without_key(self, address):
        ref = parse_object_address(address, need_key=False)
        assert ref.bucket == "my-bucket"
        assert ref.key == ""

    def test_uri_without_key_when_required(self):
        with pytest.raises(AddressError, match="need key"):
            parse_object_address("s3://my-bucket/", need_key=True)

    def test_uri_without_bucket(self):
        with pytest.raises(ValidationError):
            parse_object_address("s3:///key", need_key=False)

    def test_uri_keeps_percent_escapes_in_key(self):
        ref = parse_object_address("s3://my-bucket/a%20b")
        assert ref.key == "a%20b"

    def test_address_error_is_validation_error(self):
        assert issubclass(AddressError, ValidationError)
