"""
List command for Nexus Tool CLI.

This module provides the ls command for listing remote directories, with
an optional concurrent recursive walk.
"""

import asyncio
import logging
import sys

import click

from ..api import NexusClient
from ..exceptions import NexusError
from ..models.context import ListContext
from ..models.results import TraversalStats
from ..models.uri import RemoteUri
from ..traversal import CallbackSink, CollectingSink, TreeTraversal
from ..utils import setup_logging
from ..utils.error_handling import handle_error, handle_generic_error
from ..utils.formatting import format_entry, format_json
from ..utils.logging_utils import format_count_with_unit


async def _list(args: ListContext) -> TraversalStats:
    start_dir = args.remote.repo_path
    async with NexusClient.create_from_config_file(args.config) as client:
        traversal = TreeTraversal(client, args.remote.repo_id)

        if args.output_format == "json":
            collector = CollectingSink()
            stats = await traversal.walk(start_dir, collector, recursive=args.recursive)
            click.echo(format_json(collector.entries))
            return stats

        relative_root = start_dir if args.recursive else None
        sink = CallbackSink(
            lambda entry: click.echo(format_entry(entry, args.output_format, relative_root))
        )
        return await traversal.walk(start_dir, sink, recursive=args.recursive)


@click.command()
@click.option("-R", "--recursive", is_flag=True, help="List subdirectories recursively")
@click.option(
    "--format",
    "output_format",
    type=click.Choice(["short", "long", "json"]),
    default="short",
    show_default=True,
    help="Output format",
)
@click.argument("remote_uri")
@click.pass_context
def ls(ctx: click.Context, recursive: bool, output_format: str, remote_uri: str) -> None:
    """List the content of the remote directory REMOTE_URI (e.g. ::/releases/org/example/)."""
    setup_logging(ctx.obj["debug"])

    try:
        remote = RemoteUri.parse(remote_uri)
        if not remote.is_directory:
            click.echo(f"Error: Remote URI must denote a directory (end with '/'): {remote_uri}", err=True)
            sys.exit(1)

        args = ListContext(
            remote=remote,
            recursive=recursive,
            output_format=output_format,
            config=ctx.obj["config"],
            debug=ctx.obj["debug"],
        )
        stats = asyncio.run(_list(args))
    except NexusError as e:
        handle_error(e, f"listing {remote_uri}")
        sys.exit(1)
    except Exception as e:
        handle_generic_error(e, f"listing {remote_uri}")
        sys.exit(1)

    logging.info(
        "Listed %s and %s",
        format_count_with_unit(stats.directories, "directories", singular="directory"),
        format_count_with_unit(stats.files, "file"),
    )
    if stats.has_failures:
        for failure in stats.failures:
            logging.error("Cannot list %s: %s", failure.path, failure.error)
        click.echo(
            f"Error: {format_count_with_unit(len(stats.failures), 'subdirectories', singular='subdirectory')}"
            f" could not be listed; first error: {stats.failures[0].path}: {stats.failures[0].error}",
            err=True,
        )
        sys.exit(1)


__all__ = ["ls"]
