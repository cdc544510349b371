"""Custom exceptions for the linkinspect package."""

from __future__ import annotations


class SyscallError(Exception):
    """Exception raised when a filesystem call made during inspection fails.

    Carries the name of the failing call, the path it was given and the OS error code and message, so the
    inspector can report the failure in a single line without inspecting the original ``OSError``.

    Attributes
    ----------
    syscall : str
        Name of the failing call (``lstat`` or ``readlink``).
    path : str
        The path passed to the call.
    errno : int
        The OS error code.
    strerror : str
        The human-readable description of ``errno``.

    """

    def __init__(self, syscall: str, path: str, errno: int, strerror: str) -> None:
        self.syscall = syscall
        self.path = path
        self.errno = errno
        self.strerror = strerror
        super().__init__(f'on call to {syscall}(): "{path}"; ec={errno}; {strerror}')

    @classmethod
    def from_os_error(cls, syscall: str, path: str, exc: OSError) -> SyscallError:
        """Build a ``SyscallError`` from an ``OSError`` raised by ``syscall``.

        Parameters
        ----------
        syscall : str
            Name of the failing call.
        path : str
            The path passed to the call.
        exc : OSError
            The error raised by the ``os`` module.

        Returns
        -------
        SyscallError
            The structured error.

        """
        # errno is None only for OSErrors raised by Python code rather than the OS
        errno = exc.errno if exc.errno is not None else 0
        strerror = exc.strerror or str(exc)
        return cls(syscall, path, errno, strerror)
