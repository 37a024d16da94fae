import asyncio
import logging
from typing import Optional

from sassstage.graph import BuildGraph

from .classes import ResolvedImport
from .located import InGraph, Located, OnDisk

logger = logging.getLogger(__name__)


class ExistenceResolver:
    """
    Answers whether a located candidate exists, and with which contents.
    This class is the boundary between import resolution and the outside world.
    """

    def __init__(self, graph: Optional[BuildGraph]):
        self.graph = graph

    async def check(self, located: Located) -> Optional[ResolvedImport]:
        if isinstance(located, InGraph):
            return self._check_graph(located)
        return await self._check_disk(located)

    def _check_graph(self, located: InGraph) -> Optional[ResolvedImport]:
        # The graph is authoritative for everything under its root, even when
        # a file with the same path exists on disk.
        contents = self.graph.import_file(located.relative_path)
        if contents is None:
            return None
        if isinstance(contents, bytes):
            contents = contents.decode("utf-8", errors="replace")
        logger.debug("Found %s in the build graph", located.relative_path)
        return ResolvedImport(absolute_path=located.absolute_path, contents=contents, origin="graph")

    async def _check_disk(self, located: OnDisk) -> Optional[ResolvedImport]:
        try:
            contents = await asyncio.to_thread(_read_text, located.absolute_path)
        except FileNotFoundError:
            return None
        logger.debug("Read %s from disk", located.absolute_path)
        return ResolvedImport(absolute_path=located.absolute_path, contents=contents, origin="disk")


def _read_text(path: str) -> str:
    with open(path, "r", encoding="utf-8", errors="replace") as f:
        return f.read()
