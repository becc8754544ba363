"""Command-line interface for s3-client.

Commands:
    - help / version / whoami
    - cat, zcat, get: read objects
    - ls: list buckets or the objects under a bucket/prefix
    - put, rm: write and delete objects
    - public-url, private-url: print object URLs

Object addresses are given as ``bucket/key`` or ``s3://bucket/key``.
Every failure is reported on stderr with exit status 1.
"""

import json
from datetime import datetime, tzinfo
from typing import Annotated, Any, Optional

import click
import typer
from typer.core import TyperGroup

from . import __version__
from .cli_params import (
    aws_endpoint_url_option,
    aws_profile_option,
    aws_region_option,
    content_type_option,
    expires_in_option,
    max_keys_option,
    object_address_argument,
)
from .core import get_logger, settings
from .core.exceptions import InvalidArgumentsError, UnknownCommandError
from .objectstorage import (
    S3ClientConfig,
    S3ClientManager,
    StorageClient,
    download_object,
    get_caller_identity,
    parse_object_address,
    stream_object,
    upload_file,
)
from .schemas import ObjectRef

logger = get_logger(__name__)


class S3ClientGroup(TyperGroup):
    """Command group reporting every failure as a one-line error."""

    def resolve_command(self, ctx: click.Context, args: list[str]):
        name = args[0] if args else ""
        if name and not name.startswith("-") and self.get_command(ctx, name) is None:
            raise UnknownCommandError(name)
        return super().resolve_command(ctx, args)

    def invoke(self, ctx: click.Context) -> Any:
        try:
            return super().invoke(ctx)
        except (click.exceptions.Exit, click.exceptions.Abort):
            raise
        except click.UsageError as e:
            _fail(InvalidArgumentsError(e.format_message()))
        except click.ClickException:
            raise
        except Exception as e:
            _fail(e)


def _fail(error: Exception) -> None:
    logger.debug("Command failed", error=str(error), error_type=type(error).__name__)
    typer.echo(f"Error: {error}", err=True)
    raise typer.Exit(1)


app = typer.Typer(
    name="s3-client",
    cls=S3ClientGroup,
    help="Small command-line client for S3 object storage.",
    add_completion=False,
    context_settings={"help_option_names": ["-h", "--help"]},
)


def version_callback(value: bool) -> None:
    """Display version information."""
    if value:
        typer.echo(f"s3-client {__version__}")
        raise typer.Exit()


@app.callback()
def main_callback(
    ctx: typer.Context,
    profile: Annotated[Optional[str], aws_profile_option()] = settings.aws_profile,
    region: Annotated[Optional[str], aws_region_option()] = settings.region_name,
    endpoint_url: Annotated[
        Optional[str], aws_endpoint_url_option()
    ] = settings.endpoint_url,
    version: Annotated[
        Optional[bool],
        typer.Option(
            "--version", callback=version_callback, is_eager=True, help="Show version."
        ),
    ] = None,
) -> None:
    """
    s3-client: list, read, write and sign S3 objects.

    Credentials come from the standard AWS chain (environment, shared
    config, instance role) unless --profile is given.
    """
    ctx.obj = S3ClientConfig(
        aws_profile=profile,
        region_name=region,
        endpoint_url=endpoint_url,
    )


def _client_manager(ctx: typer.Context) -> S3ClientManager:
    return S3ClientManager(ctx.obj or S3ClientConfig())


def _storage(ctx: typer.Context) -> StorageClient:
    return StorageClient(_client_manager(ctx))


def format_timestamp(value: datetime, tz: Optional[tzinfo] = None) -> str:
    """Render a timestamp as RFC 3339, in the local timezone unless tz is given.

    A zero UTC offset is written as ``Z``.
    """
    rendered = value.astimezone(tz).isoformat(timespec="seconds")
    if rendered.endswith("+00:00"):
        rendered = rendered[: -len("+00:00")] + "Z"
    return rendered


@app.command("help")
def help_cmd(ctx: typer.Context) -> None:
    """Show this message and exit."""
    typer.echo(ctx.parent.get_help() if ctx.parent else ctx.get_help())


@app.command("version")
def version_cmd() -> None:
    """Show version."""
    typer.echo(f"s3-client {__version__}")


@app.command("whoami")
def whoami_cmd(ctx: typer.Context) -> None:
    """Show the identity of the current AWS credentials."""
    identity = dict(get_caller_identity(_client_manager(ctx)))
    identity.pop("ResponseMetadata", None)
    typer.echo(json.dumps(identity, indent=2, default=str))


@app.command("cat")
def cat_cmd(
    ctx: typer.Context,
    address: Annotated[str, object_address_argument()],
) -> None:
    """Write an object's bytes to stdout."""
    ref = parse_object_address(address, need_key=True)
    stream_object(_storage(ctx), ref, click.get_binary_stream("stdout"))


@app.command("zcat")
def zcat_cmd(
    ctx: typer.Context,
    address: Annotated[str, object_address_argument()],
) -> None:
    """Write a gzip-compressed object's decompressed bytes to stdout."""
    ref = parse_object_address(address, need_key=True)
    stream_object(
        _storage(ctx), ref, click.get_binary_stream("stdout"), decompress=True
    )


@app.command("get")
def get_cmd(
    ctx: typer.Context,
    address: Annotated[str, object_address_argument()],
    local_path: Annotated[
        Optional[str],
        typer.Argument(
            metavar="[LOCAL_PATH]",
            help="Destination file or directory (default: key with '/' -> '_')",
        ),
    ] = None,
) -> None:
    """
    Download an object to a local file.

    Examples:
        s3-client get my-bucket/logs/2024/app.log
        s3-client get s3://my-bucket/logs/2024/app.log ./downloads
    """
    ref = parse_object_address(address, need_key=True)
    download_object(_storage(ctx), ref, local_path)


@app.command("ls")
def ls_cmd(
    ctx: typer.Context,
    address: Annotated[
        Optional[str],
        typer.Argument(
            metavar="[BUCKET[/PREFIX]]",
            help="Bucket and optional key prefix; omit to list buckets",
        ),
    ] = None,
    max_keys: Annotated[Optional[int], max_keys_option()] = None,
) -> None:
    """
    List buckets, or the objects under a bucket and prefix.

    Object listings return a single page; whether more objects exist is
    reported on stderr.
    """
    storage = _storage(ctx)

    if address is None:
        for bucket in storage.list_buckets():
            typer.echo(f"{format_timestamp(bucket.creation_date)} {bucket.name}")
        return

    ref = parse_object_address(address, need_key=False)
    listing = storage.list_objects(ref.bucket, ref.key, max_keys=max_keys)
    for obj in listing.objects:
        typer.echo(
            f"{format_timestamp(obj.last_modified)} {obj.size:10d} "
            f"{ObjectRef(bucket=listing.bucket, key=obj.key).uri}"
        )
    typer.echo(f"IsTruncated: {str(listing.is_truncated).lower()}", err=True)


@app.command("put")
def put_cmd(
    ctx: typer.Context,
    local_file: Annotated[str, typer.Argument(help="Local file to upload")],
    address: Annotated[str, object_address_argument()],
    content_type: Annotated[Optional[str], content_type_option()] = None,
) -> None:
    """
    Upload a local file to an object.

    Examples:
        s3-client put --content-type text/plain notes.txt my-bucket/notes.txt
    """
    ref = parse_object_address(address, need_key=True)
    upload_file(_storage(ctx), local_file, ref, content_type=content_type)


@app.command("rm")
def rm_cmd(
    ctx: typer.Context,
    addresses: Annotated[
        list[str],
        typer.Argument(
            metavar="BUCKET/KEY...", help="Objects to delete, all in one bucket"
        ),
    ],
) -> None:
    """Delete one or more objects from a single bucket."""
    refs = [parse_object_address(address, need_key=True) for address in addresses]
    _storage(ctx).delete_objects(refs)


@app.command("public-url")
def public_url_cmd(
    ctx: typer.Context,
    address: Annotated[str, object_address_argument()],
) -> None:
    """Print the unsigned HTTPS URL of an object."""
    ref = parse_object_address(address, need_key=True)
    region = _client_manager(ctx).region
    typer.echo(f"https://{ref.bucket}.s3-{region}.amazonaws.com/{ref.key}")


@app.command("private-url")
def private_url_cmd(
    ctx: typer.Context,
    address: Annotated[str, object_address_argument()],
    expires_in: Annotated[int, expires_in_option()] = settings.presign_expires_in,
) -> None:
    """Print a time-limited signed URL for downloading an object."""
    ref = parse_object_address(address, need_key=True)
    typer.echo(_storage(ctx).presign_get_object(ref, expires_in=expires_in))


def main() -> None:
    """Console script entry point."""
    app()


if __name__ == "__main__":
    main()
