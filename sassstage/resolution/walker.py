import asyncio
import logging
import os
from typing import List, Optional, Sequence

from sassstage.exceptions import ImportAmbiguous, ImportNotFound

from .candidates import generate_candidates
from .classes import ResolvedImport
from .existence import ExistenceResolver
from .located import locate

logger = logging.getLogger(__name__)


class LoadPathWalker:
    """
    Resolves `@import` specifiers against the importing file's directory and
    then each configured load path, in order.

    The first directory with exactly one existing candidate wins. A directory
    with several existing candidates is an error, even when a later directory
    would have had a single match.
    """

    def __init__(self, resolver: ExistenceResolver, load_paths: Sequence[str] = (), graph_root: Optional[str] = None):
        self.resolver = resolver
        self.load_paths = tuple(load_paths)
        self.graph_root = graph_root

    def search_directories(self, importer: str) -> List[str]:
        return [os.path.dirname(importer), *self.load_paths]

    async def resolve(self, specifier: str, importer: str) -> ResolvedImport:
        if not os.path.isabs(importer):
            raise ValueError(f"Importing file must be an absolute path, got '{importer}'")

        for directory in self.search_directories(importer):
            candidates = generate_candidates(specifier, directory)
            checks = [self.resolver.check(locate(c, self.graph_root)) for c in candidates]
            found = [result for result in await asyncio.gather(*checks) if result is not None]

            if not found:
                continue

            if len(found) > 1:
                raise ImportAmbiguous(specifier, importer, [r.absolute_path for r in found])

            logger.debug("Resolved '%s' from %s to %s", specifier, importer, found[0].absolute_path)
            return found[0]

        raise ImportNotFound(specifier)
