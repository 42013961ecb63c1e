"""
Remove command for Nexus Tool CLI.

This module provides the rm command, which deletes a remote file or a
remote directory with everything below it.
"""

import asyncio
import sys
from typing import Optional

import click

from ..api import NexusClient
from ..exceptions import NexusError
from ..models.uri import RemoteUri
from ..utils import setup_logging
from ..utils.error_handling import handle_error, handle_generic_error


async def _remove(remote: RemoteUri, config: Optional[str]) -> str:
    async with NexusClient.create_from_config_file(config) as client:
        return await client.delete_path(remote.repo_id, remote.repo_path)


@click.command(name="rm")
@click.argument("remote_uri")
@click.pass_context
def rm(ctx: click.Context, remote_uri: str) -> None:
    """Remove REMOTE_URI from its repository.

    A directory URI (trailing slash) removes the directory and its contents.
    """
    setup_logging(ctx.obj["debug"])

    try:
        remote = RemoteUri.parse(remote_uri)
        if remote.repo_path == "/":
            click.echo(f"Error: Refusing to remove the repository root: {remote_uri}", err=True)
            sys.exit(1)

        url = asyncio.run(_remove(remote, ctx.obj["config"]))
    except NexusError as e:
        handle_error(e, f"removal of {remote_uri}")
        sys.exit(1)
    except Exception as e:
        handle_generic_error(e, f"removal of {remote_uri}")
        sys.exit(1)

    click.echo(f"Removed {url}")


__all__ = ["rm"]
