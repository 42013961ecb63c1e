"""
Unified CLI entry point for Nexus Tool operations using Click.

This module provides the main CLI group and shared options.
"""

import sys
from typing import Optional

import click

from . import download, ls, remove, upload
from .._version import __version__
from ..utils.constants import DEFAULT_MAX_WORKERS

# ============================================================================
# CLI Group
# ============================================================================


@click.group(context_settings={"help_option_names": ["-h", "--help"]})
@click.version_option(version=__version__, prog_name="nexus-tool")
@click.option(
    "--config",
    type=click.Path(exists=True, dir_okay=False),
    help="Path to Nexus CLI config file (default: ~/.config/nexus/cli.toml)",
)
@click.option(
    "-d",
    "--debug",
    count=True,
    help="Increase verbosity (use -d for INFO, -dd for DEBUG, -ddd for DEBUG with HTTP logs)",
)
@click.option(
    "--max-workers",
    type=click.IntRange(1, 100),
    default=DEFAULT_MAX_WORKERS,
    show_default=True,
    help="Maximum number of concurrent downloads",
)
@click.pass_context
def cli(ctx: click.Context, config: Optional[str], debug: int, max_workers: int) -> None:
    """Nexus Tool - List, download, upload and remove Nexus repository content.

    Remote locations use the syntax ::/REPO_ID/PATH, where a trailing slash
    denotes a directory. Prefix REPO_ID with @staging: to deploy into a
    staging repository.
    """
    # Store shared options in context for subcommands to access
    ctx.ensure_object(dict)
    ctx.obj["config"] = config
    ctx.obj["debug"] = debug
    ctx.obj["max_workers"] = max_workers


# Register subcommands
cli.add_command(ls.ls)
cli.add_command(download.download)
cli.add_command(upload.upload)
cli.add_command(remove.rm)


# ============================================================================
# Main Entry Point
# ============================================================================


def main() -> None:
    """Main entry point for the CLI."""
    try:
        cli()  # pylint: disable=no-value-for-parameter  # Click handles parameters
    except KeyboardInterrupt:
        click.echo("\n\nOperation cancelled by user", err=True)
        sys.exit(130)


__all__ = ["cli", "main"]
