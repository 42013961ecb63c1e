"""
Upload command for Nexus Tool CLI.

This module provides the upload command for a single file or a whole
local directory tree.
"""

import asyncio
import sys
from pathlib import Path

import click

from ..api import NexusClient
from ..exceptions import NexusError
from ..models.context import TransferContext
from ..models.results import TransferSummary
from ..models.uri import RemoteUri
from ..transfer import upload_single, upload_tree
from ..utils import setup_logging
from ..utils.error_handling import handle_error, handle_generic_error
from .download import report_summary


async def _upload(args: TransferContext) -> TransferSummary:
    remote = args.remote
    local_path = Path(args.local_path)
    async with NexusClient.create_from_config_file(args.config) as client:
        if local_path.is_dir():
            return await upload_tree(client, remote.repo_id, local_path, remote.repo_path)
        return await upload_single(client, remote.repo_id, local_path, remote.repo_path)


@click.command()
@click.argument("local_path", type=click.Path(exists=True))
@click.argument("remote_uri")
@click.pass_context
def upload(ctx: click.Context, local_path: str, remote_uri: str) -> None:
    """Upload LOCAL_PATH to REMOTE_URI.

    A local directory is uploaded file by file below the remote path. For a
    single file, a remote directory (trailing slash) keeps the local file name.
    """
    setup_logging(ctx.obj["debug"])

    try:
        remote = RemoteUri.parse(remote_uri)
        if Path(local_path).is_dir() and not remote.is_directory:
            click.echo(f"Error: Uploading a directory requires a directory URI (ending with '/'): {remote_uri}", err=True)
            sys.exit(1)

        args = TransferContext(
            local_path=local_path,
            remote=remote,
            config=ctx.obj["config"],
            debug=ctx.obj["debug"],
            max_workers=ctx.obj["max_workers"],
        )
        summary = asyncio.run(_upload(args))
    except NexusError as e:
        handle_error(e, f"upload to {remote_uri}")
        sys.exit(1)
    except Exception as e:
        handle_generic_error(e, f"upload to {remote_uri}")
        sys.exit(1)

    report_summary(summary, "upload")


__all__ = ["upload"]
