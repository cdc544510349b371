"""Inspect filesystem entries, following symlinks hop by hop until a non-symlink entry is reached."""

from __future__ import annotations

import errno
import os
from typing import TYPE_CHECKING

import click

from linkinspect.config import INDENT_STEP, INITIAL_DEPTH, READLINK_MAX_BYTES
from linkinspect.output_formatter import (
    format_banner,
    format_error,
    format_record,
    format_truncation_warning,
    format_type_line,
)
from linkinspect.path_resolver import link_base_dir, resolve
from linkinspect.schemas import EntryType, StatRecord
from linkinspect.utils.exceptions import SyscallError
from linkinspect.utils.logging_config import get_logger

if TYPE_CHECKING:
    from collections.abc import Iterable

# Initialize logger for this module
logger = get_logger(__name__)


def inspect_paths(paths: Iterable[str]) -> None:
    """Inspect each path in turn, printing a banner line before each one.

    Failures are reported per path on ``stderr`` and never stop the remaining paths from being inspected.

    Parameters
    ----------
    paths : Iterable[str]
        The paths to inspect, in order.

    """
    for path in paths:
        _echo(format_banner(path))
        inspect("", path, INITIAL_DEPTH)


def inspect(base_dir: str, path: str, depth: int = INITIAL_DEPTH) -> None:
    """Print the type and metadata of ``path``, de-referencing symlinks recursively.

    The entry is looked up without following a final symlink. A symlink gets a type line and its target is
    inspected one level deeper; any other entry gets a type line followed by its full metadata record. Lookup and
    readlink failures are printed to ``stderr`` and end this call without a record.

    Parameters
    ----------
    base_dir : str
        Directory of the link that produced ``path``, used to retry once when ``path`` is relative and not found.
        Empty when ``path`` came from the command line or no retry applies.
    path : str
        The path to inspect.
    depth : int
        Indentation of every line printed for this entry (default: 2).

    """
    try:
        path, result = _lstat_with_retry(base_dir, path)
    except SyscallError as exc:
        _echo(format_error(exc, depth), err=True)
        return

    record = StatRecord.from_stat_result(result)
    _echo(format_type_line(record.entry_type, path, depth))

    if record.entry_type is not EntryType.SYMLINK:
        for line in format_record(record, depth):
            _echo(line)
        return

    try:
        target_text, truncated = _readlink(path)
    except SyscallError as exc:
        _echo(format_error(exc, depth), err=True)
        return

    if truncated:
        _echo(format_truncation_warning(target_text, depth), err=True)

    next_base_dir = link_base_dir(path, target_text)
    logger.debug(
        "Following symlink",
        extra={"link": path, "target": target_text, "base_dir": next_base_dir, "depth": depth},
    )
    try:
        inspect(next_base_dir, target_text, depth + INDENT_STEP)
    except RecursionError:
        # A cycle through the final component never fails lstat; it ends at the interpreter stack limit instead
        loop_error = SyscallError("lstat", target_text, errno.ELOOP, os.strerror(errno.ELOOP))
        _echo(format_error(loop_error, depth + INDENT_STEP), err=True)


def _echo(line: str, *, err: bool = False) -> None:
    # Undecodable path bytes are written back as they were read, on both streams
    click.echo(os.fsencode(line), err=err)


def _lstat_with_retry(base_dir: str, path: str) -> tuple[str, os.stat_result]:
    """Look up ``path``, retrying once against ``base_dir`` when it is relative and not found.

    Returns
    -------
    tuple[str, os.stat_result]
        The path that was found (rewritten when the retry was used) and its metadata.

    Raises
    ------
    SyscallError
        If the lookup fails and no retry applies, or if the retry fails too.

    """
    try:
        return path, _lstat(path)
    except SyscallError as exc:
        if exc.errno != errno.ENOENT or not base_dir or os.path.isabs(path):
            raise
        retry_path = resolve(base_dir, path)

    logger.debug("Path not found, retrying against base directory", extra={"path": path, "retry_path": retry_path})
    return retry_path, _lstat(retry_path)


def _lstat(path: str) -> os.stat_result:
    try:
        return os.lstat(path)
    except OSError as exc:
        raise SyscallError.from_os_error("lstat", path, exc) from exc


def _readlink(path: str) -> tuple[str, bool]:
    """Read the target of the symlink at ``path`` through a bounded buffer.

    Returns
    -------
    tuple[str, bool]
        The target text, cut to ``READLINK_MAX_BYTES`` bytes, and whether the buffer was filled (in which case the
        text may be truncated).

    Raises
    ------
    SyscallError
        If the link cannot be read.

    """
    try:
        raw = os.readlink(os.fsencode(path))
    except OSError as exc:
        raise SyscallError.from_os_error("readlink", path, exc) from exc

    raw = raw[:READLINK_MAX_BYTES]
    return os.fsdecode(raw), len(raw) == READLINK_MAX_BYTES
