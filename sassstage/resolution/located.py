"""
Where a candidate path lives: inside the virtual build graph, or on disk.

The build graph is addressed by paths relative to its root, disk files by
absolute paths. Each candidate is classified once, so the existence check
never has to guess from path prefixes.
"""

import os
from typing import Optional, Union

from pydantic import BaseModel, ConfigDict


class InGraph(BaseModel):
    model_config = ConfigDict(frozen=True)

    relative_path: str
    absolute_path: str


class OnDisk(BaseModel):
    model_config = ConfigDict(frozen=True)

    absolute_path: str


Located = Union[InGraph, OnDisk]


def locate(absolute_path: str, graph_root: Optional[str]) -> Located:
    """Classifies an absolute candidate path against the build graph root."""
    if graph_root is not None and _is_within(absolute_path, graph_root):
        relative = os.path.relpath(absolute_path, graph_root).replace(os.sep, "/")
        return InGraph(relative_path=relative, absolute_path=absolute_path)
    return OnDisk(absolute_path=absolute_path)


def _is_within(path: str, root: str) -> bool:
    """True for paths strictly inside root; the root itself is not a file in the graph."""
    path = os.path.normpath(path)
    root = os.path.normpath(root)
    try:
        return path != root and os.path.commonpath([path, root]) == root
    except ValueError:
        # Different drives on Windows.
        return False
