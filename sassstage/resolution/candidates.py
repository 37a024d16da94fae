import os
import posixpath
from typing import List

from sassstage.config import EXTENSION_PATTERN, PARTIAL_MARKER, STYLESHEET_EXTENSIONS


def generate_candidates(specifier: str, directory: str) -> List[str]:
    """
    Lists every file an `@import` specifier could refer to inside one directory.

    The order is the precedence order: partials before standalone files, and
    `.scss` before `.sass`. All paths are absolute and normalized.
    """
    basename = posixpath.basename(specifier)
    dirname = posixpath.dirname(specifier)
    has_extension = EXTENSION_PATTERN.search(specifier) is not None

    if basename.startswith(PARTIAL_MARKER):
        if has_extension:
            relative = [specifier]
        else:
            relative = [specifier + ext for ext in STYLESHEET_EXTENSIONS]
    else:
        partial = posixpath.join(dirname, PARTIAL_MARKER + basename)
        if has_extension:
            relative = [partial, specifier]
        else:
            relative = [partial + ext for ext in STYLESHEET_EXTENSIONS]
            relative += [specifier + ext for ext in STYLESHEET_EXTENSIONS]

    return [os.path.abspath(os.path.join(directory, candidate)) for candidate in relative]
