"""
The contract between the sass stage and the enclosing incremental build system.
"""

import os
from typing import Dict, List, Mapping, Optional, Protocol, Union


class BuildGraph(Protocol):
    """
    The enclosing build system's in-memory view of its source files.

    `root` is the absolute directory graph paths are relative to. `import_file`
    returns the current contents of a buildable unit, or None if there is no
    such unit. Looking a file up is also how the build system learns that the
    file being compiled depends on it.
    """

    root: str

    def import_file(self, relative_path: str) -> Optional[str]: ...


class InMemoryBuildGraph:
    """A dictionary-backed build graph that records every lookup it serves."""

    def __init__(self, root: str, files: Optional[Mapping[str, Union[str, bytes]]] = None):
        self.root = os.path.abspath(root)
        self._files: Dict[str, Union[str, bytes]] = dict(files or {})
        self.requested: List[str] = []

    def import_file(self, relative_path: str) -> Optional[str]:
        self.requested.append(relative_path)
        contents = self._files.get(relative_path)
        if contents is None:
            return None
        if isinstance(contents, bytes):
            return contents.decode("utf-8", errors="replace")
        return contents

    def dependencies(self) -> List[str]:
        """The distinct paths that were found in the graph, in first-lookup order."""
        seen: List[str] = []
        for path in self.requested:
            if path in self._files and path not in seen:
                seen.append(path)
        return seen
