"""Resolution of symlink targets against the directory of the link that produced them."""

from __future__ import annotations

import os


def resolve(base_dir: str, target_text: str) -> str:
    """Return the path to try for ``target_text`` relative to ``base_dir``.

    The join is purely textual: no component is normalised or checked against the filesystem, so the result keeps
    the spelling of both inputs (``"./a"`` and ``"b"`` give ``"./a/b"``).

    Parameters
    ----------
    base_dir : str
        Directory containing the link that produced ``target_text``. Empty when there is none.
    target_text : str
        The link target (or any path) to resolve.

    Returns
    -------
    str
        ``target_text`` unchanged when it is absolute or when ``base_dir`` is empty, otherwise ``base_dir`` joined
        with ``target_text``.

    """
    if not base_dir or os.path.isabs(target_text):
        return target_text
    return os.path.join(base_dir, target_text)


def link_base_dir(link_path: str, target_text: str) -> str:
    """Return the base directory to retry ``target_text`` against, or ``""`` when there is none.

    Parameters
    ----------
    link_path : str
        Path of the symlink whose target is ``target_text``.
    target_text : str
        The text read from the symlink.

    Returns
    -------
    str
        The parent component of ``link_path`` when ``target_text`` is relative, ``""`` otherwise or when
        ``link_path`` has no parent component.

    """
    if os.path.isabs(target_text):
        return ""
    return os.path.dirname(link_path)
