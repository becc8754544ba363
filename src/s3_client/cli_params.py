"""Shared CLI parameter definitions.

The functions return Typer option/argument declarations meant to be used
inside ``Annotated`` so that the global connection options and the
per-command options keep consistent names and help text:

    @app.command()
    def my_command(
        address: Annotated[str, object_address_argument()],
        max_keys: Annotated[Optional[int], max_keys_option()] = None,
    ):
        pass

Parameter Categories:
    - AWS parameters: profile, region and endpoint for the session
    - Object parameters: addresses and local paths
    - Operation parameters: per-command behaviour
"""

import typer


def aws_profile_option():
    """AWS profile option."""
    return typer.Option("--profile", help="AWS CLI profile name")


def aws_region_option():
    """AWS region option."""
    return typer.Option("--region", help="AWS region name")


def aws_endpoint_url_option():
    """AWS endpoint URL option."""
    return typer.Option("--endpoint-url", help="Custom S3 endpoint URL")


def object_address_argument():
    """Object address argument."""
    return typer.Argument(
        metavar="BUCKET/KEY", help="Object address: bucket/key or s3://bucket/key"
    )


def content_type_option():
    """Content type option."""
    return typer.Option("--content-type", help="Content-Type header for the upload")


def max_keys_option():
    """Max keys option."""
    return typer.Option(
        "--max-keys", min=1, help="Maximum number of objects to return"
    )


def expires_in_option():
    """Presigned URL lifetime option."""
    return typer.Option(
        "--expires-in", min=1, help="Lifetime of the signed URL in seconds"
    )
