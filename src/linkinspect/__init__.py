"""linkinspect: report lstat metadata for filesystem entries, de-referencing symlinks hop by hop."""

from linkinspect.inspector import inspect, inspect_paths
from linkinspect.path_resolver import resolve

__all__ = ["inspect", "inspect_paths", "resolve"]
