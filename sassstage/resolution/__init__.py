"""Import resolution: candidate naming, load path search and existence checks."""

from .candidates import generate_candidates
from .classes import ResolvedImport
from .existence import ExistenceResolver
from .located import InGraph, Located, OnDisk, locate
from .memo import ImportMemoTable
from .walker import LoadPathWalker

__all__ = [
    "generate_candidates",
    "ResolvedImport",
    "ExistenceResolver",
    "InGraph",
    "Located",
    "OnDisk",
    "locate",
    "ImportMemoTable",
    "LoadPathWalker",
]
