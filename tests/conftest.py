"""Fixtures for tests.

This file provides shared fixtures for building files and symlink chains in a temporary directory.
They are used by the inspector and CLI test modules.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Callable, List

import pytest

if TYPE_CHECKING:
    from pathlib import Path

MakeChainFunc = Callable[[int], List["Path"]]

TARGET_CONTENT = "hello linkinspect\n"


@pytest.fixture
def regular_file(tmp_path: Path) -> Path:
    """Create a small regular file in a temporary directory.

    Returns
    -------
    Path
        The absolute path of the file.

    """
    path = tmp_path / "target.txt"
    path.write_text(TARGET_CONTENT, encoding="utf-8")
    return path


@pytest.fixture
def make_chain(tmp_path: Path, regular_file: Path) -> MakeChainFunc:
    """Provide a helper that builds a chain of symlinks ending at ``regular_file``.

    ``link_0`` points at ``target.txt`` and every ``link_i`` points at ``link_{i-1}``, all with relative targets
    inside ``tmp_path``.

    Returns
    -------
    MakeChainFunc
        A function taking the chain length and returning the links, the last one being the head of the chain.

    """

    def _make_chain(length: int) -> list[Path]:
        links = []
        previous = regular_file.name
        for i in range(length):
            link = tmp_path / f"link_{i}"
            link.symlink_to(previous)
            links.append(link)
            previous = link.name
        return links

    return _make_chain

