"""Functions to render inspection results as console lines."""

from __future__ import annotations

import time
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from linkinspect.schemas import EntryType, StatRecord
    from linkinspect.utils.exceptions import SyscallError


def _indent(depth: int, line: str) -> str:
    return f"{' ' * depth}{line}"


def format_banner(path: str) -> str:
    """Return the line printed before a command-line path is inspected."""
    return f'"{path}" ==>>'


def format_type_line(entry_type: EntryType, path: str, depth: int) -> str:
    """Return the line naming the type of the entry at ``path``."""
    return _indent(depth, f'{entry_type.value}: "{path}"')


def format_record(record: StatRecord, depth: int) -> list[str]:
    """Render the metadata of a terminal entry, one field per line.

    Timestamps use the ``ctime()`` layout in local time.

    Parameters
    ----------
    record : StatRecord
        The metadata to render.
    depth : int
        Number of spaces to prefix each line with.

    Returns
    -------
    list[str]
        The rendered lines, without line terminators.

    """
    lines = [
        f"I-node number:            {record.ino}",
        f"Mode:                     {record.mode:o} (octal)",
        f"Link count:               {record.nlink}",
        f"Ownership:                UID={record.uid}   GID={record.gid}",
        f"Preferred I/O block size: {record.blksize} bytes",
        f"File size:                {record.size} bytes",
        f"Blocks allocated:         {record.blocks}",
        f"Last status change:       {time.ctime(record.ctime)}",
        f"Last file access:         {time.ctime(record.atime)}",
        f"Last file modification:   {time.ctime(record.mtime)}",
    ]
    return [_indent(depth, line) for line in lines]


def format_error(error: SyscallError, depth: int) -> str:
    """Return the error line for a failed call made by ``inspect()``."""
    return _indent(depth, f"ERROR: inspect(): {error}")


def format_truncation_warning(target_text: str, depth: int) -> str:
    """Return the warning printed when a link target filled the read buffer."""
    return _indent(depth, f'WARN: "{target_text}" may be a truncated file name due to buffer size limit')
