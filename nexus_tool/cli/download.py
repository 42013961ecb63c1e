"""
Download command for Nexus Tool CLI.

This module provides the download command. A directory URI mirrors the
whole remote tree; a file URI fetches a single file.
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
from ..transfer import download_single, download_tree, generate_transfer_report
from ..utils import setup_logging
from ..utils.error_handling import handle_error, handle_generic_error
from ..utils.logging_utils import format_count_with_unit


async def _download(args: TransferContext) -> TransferSummary:
    remote = args.remote
    async with NexusClient.create_from_config_file(args.config) as client:
        if remote.is_directory:
            return await download_tree(
                client, remote.repo_id, remote.repo_path, Path(args.local_path), max_workers=args.max_workers
            )
        return await download_single(client, remote.repo_id, remote.repo_path, Path(args.local_path))


def report_summary(summary: TransferSummary, operation: str) -> None:
    """Print the transfer result and exit with 1 when anything failed."""
    generate_transfer_report(summary, operation)
    click.echo(f"{format_count_with_unit(summary.transferred_count, 'file')} transferred")
    if summary.has_failures:
        click.echo(
            f"Error: {operation} failed for {format_count_with_unit(summary.failure_count, 'item')};"
            f" first error: {summary.first_error}",
            err=True,
        )
        sys.exit(1)


@click.command()
@click.argument("local_path", type=click.Path())
@click.argument("remote_uri")
@click.pass_context
def download(ctx: click.Context, local_path: str, remote_uri: str) -> None:
    """Download REMOTE_URI into LOCAL_PATH.

    A remote directory (trailing slash) is mirrored recursively below
    LOCAL_PATH; a remote file is written to LOCAL_PATH, or into it when
    LOCAL_PATH is an existing directory.
    """
    setup_logging(ctx.obj["debug"])

    try:
        args = TransferContext(
            local_path=local_path,
            remote=RemoteUri.parse(remote_uri),
            config=ctx.obj["config"],
            debug=ctx.obj["debug"],
            max_workers=ctx.obj["max_workers"],
        )
        summary = asyncio.run(_download(args))
    except NexusError as e:
        handle_error(e, f"download of {remote_uri}")
        sys.exit(1)
    except Exception as e:
        handle_generic_error(e, f"download of {remote_uri}")
        sys.exit(1)

    report_summary(summary, "download")


__all__ = ["download", "report_summary"]
