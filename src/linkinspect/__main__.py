"""Command-line interface (CLI) for linkinspect."""

# pylint: disable=no-value-for-parameter
from __future__ import annotations

import click

from linkinspect.config import EXIT_FAILURE, USAGE_MESSAGE
from linkinspect.inspector import inspect_paths

# Import logging configuration first to intercept all logging
from linkinspect.utils.logging_config import get_logger

# Initialize logger for this module
logger = get_logger(__name__)


class _PathsOnlyCommand(click.Command):
    """A command whose every argument is a path, including ``--help``, ``--`` and dash-prefixed names."""

    def parse_args(self, ctx: click.Context, args: list[str]) -> list[str]:
        # A leading separator stops option parsing, so later tokens (a second ``--`` included) stay positional
        return super().parse_args(ctx, ["--", *args])


@click.command(cls=_PathsOnlyCommand, context_settings={"help_option_names": []})
@click.argument("paths", nargs=-1, type=str)
@click.pass_context
def main(ctx: click.Context, paths: tuple[str, ...]) -> None:
    """Print the type and lstat metadata of each PATH, following symlinks until a non-symlink entry is reached.

    Each symlink hop is printed two spaces deeper than the link that led to it. Per-path errors are written to
    ``stderr`` and do not affect the exit status.

    Parameters
    ----------
    ctx : click.Context
        The click context, used to exit with a failure status when no path is given.
    paths : tuple[str, ...]
        The paths to inspect, in order.

    Examples
    --------
    Single file:
        $ linkinspect /etc/hostname

    Symlink chain:
        $ linkinspect /usr/bin/python3 ./build/current

    """
    if not paths:
        click.echo(USAGE_MESSAGE)
        ctx.exit(EXIT_FAILURE)

    logger.debug("Inspecting paths", extra={"count": len(paths)})
    inspect_paths(paths)


if __name__ == "__main__":
    main()
