from typing import Dict, Optional

from .classes import ResolvedImport


class ImportMemoTable:
    """
    Remembers how imports were resolved during one top-level compile, so that a
    compile error raised inside an imported file can be shown with that file's text.
    A new table is created for every compile and dropped with it.
    """

    def __init__(self):
        self._paths: Dict[str, str] = {}
        self._contents: Dict[str, str] = {}

    def record(self, specifier: str, resolved: ResolvedImport):
        # Last write wins: within one compile a path always maps to the same snapshot.
        self._paths[specifier] = resolved.absolute_path
        self._contents[resolved.absolute_path] = resolved.contents

    def path_for(self, token: str) -> Optional[str]:
        """Maps a compiler file token (a resolved path or a specifier) to a resolved path."""
        if token in self._contents:
            return token
        return self._paths.get(token)

    def contents_for(self, path: str) -> Optional[str]:
        return self._contents.get(path)

    def __len__(self) -> int:
        return len(self._contents)
