from typing import Any, Callable, Mapping, Optional, Protocol

from sassstage.resolution.classes import ResolvedImport

# Called by the compiler for every `@import` it meets: (specifier, importing file token).
ImportHook = Callable[[str, str], ResolvedImport]


class RawCompileError(Exception):
    """
    A failure reported by the compiler, before it is attributed to a real file.
    `file` is the compiler's file token: ENTRY_TOKEN for the entry source, or the
    path of an imported file.
    """

    def __init__(self, message: str, file: Optional[str] = None, line: Optional[int] = None, column: Optional[int] = None):
        self.message = message
        self.file = file
        self.line = line
        self.column = column
        super().__init__(message)


class StylesheetCompiler(Protocol):
    """
    Turns stylesheet source into CSS.

    `options` holds the compiler pass-through options plus `indented_syntax`
    and, when source maps are on, `output_file`. Implementations call
    `import_hook` synchronously and raise RawCompileError on failure.
    """

    def compile(self, source: str, import_hook: ImportHook, options: Mapping[str, Any]) -> str: ...
