"""Schema for the metadata reported about a single filesystem entry."""

from __future__ import annotations

import stat
from enum import Enum
from typing import TYPE_CHECKING

from pydantic import BaseModel, ConfigDict

if TYPE_CHECKING:
    import os


class EntryType(Enum):
    """Enum representing the type of a filesystem entry, valued by the word printed for it."""

    BLOCK_DEVICE = "block device"
    CHARACTER_DEVICE = "character device"
    DIRECTORY = "directory"
    FIFO = "FIFO/pipe"
    SYMLINK = "symlink"
    REGULAR_FILE = "regular file"
    SOCKET = "socket"
    UNKNOWN = "unknown?"

    @classmethod
    def from_mode(cls, mode: int) -> EntryType:
        """Classify ``st_mode`` bits into an ``EntryType``.

        Parameters
        ----------
        mode : int
            The ``st_mode`` field of a stat result.

        Returns
        -------
        EntryType
            The matching type, or ``UNKNOWN`` when the file-type bits match none of the known kinds.

        """
        return _TYPES_BY_FORMAT.get(stat.S_IFMT(mode), cls.UNKNOWN)


_TYPES_BY_FORMAT = {
    stat.S_IFBLK: EntryType.BLOCK_DEVICE,
    stat.S_IFCHR: EntryType.CHARACTER_DEVICE,
    stat.S_IFDIR: EntryType.DIRECTORY,
    stat.S_IFIFO: EntryType.FIFO,
    stat.S_IFLNK: EntryType.SYMLINK,
    stat.S_IFREG: EntryType.REGULAR_FILE,
    stat.S_IFSOCK: EntryType.SOCKET,
}


class StatRecord(BaseModel):  # pylint: disable=too-many-instance-attributes
    """Raw ``lstat`` metadata for one filesystem entry.

    Attributes
    ----------
    entry_type : EntryType
        The classified type of the entry.
    ino : int
        The inode number.
    mode : int
        The full mode bits, type included.
    nlink : int
        The number of hard links.
    uid : int
        The owner's user id.
    gid : int
        The owner's group id.
    blksize : int
        The preferred I/O block size in bytes.
    size : int
        The size in bytes.
    blocks : int
        The number of 512-byte blocks allocated.
    ctime : float
        Time of the last status change, in seconds since the epoch.
    atime : float
        Time of the last access, in seconds since the epoch.
    mtime : float
        Time of the last modification, in seconds since the epoch.

    """

    model_config = ConfigDict(frozen=True)

    entry_type: EntryType
    ino: int
    mode: int
    nlink: int
    uid: int
    gid: int
    blksize: int
    size: int
    blocks: int
    ctime: float
    atime: float
    mtime: float

    @classmethod
    def from_stat_result(cls, result: os.stat_result) -> StatRecord:
        """Build a record from the result of ``os.lstat``.

        Parameters
        ----------
        result : os.stat_result
            The stat result to copy.

        Returns
        -------
        StatRecord
            The immutable record.

        """
        return cls(
            entry_type=EntryType.from_mode(result.st_mode),
            ino=result.st_ino,
            mode=result.st_mode,
            nlink=result.st_nlink,
            uid=result.st_uid,
            gid=result.st_gid,
            # Not reported on every platform
            blksize=getattr(result, "st_blksize", 0),
            size=result.st_size,
            blocks=getattr(result, "st_blocks", 0),
            ctime=result.st_ctime,
            atime=result.st_atime,
            mtime=result.st_mtime,
        )
