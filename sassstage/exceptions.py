"""
Custom exception types for the sass build stage.
"""

from enum import Enum
from typing import List, Optional

from pydantic import BaseModel


class Span(BaseModel):
    """A position inside a stylesheet, used for error reporting."""

    line: int
    column: int
    file_path: Optional[str] = None


class ErrorCode(Enum):

    # --- Configuration Errors ---
    INVALID_LOAD_PATHS = 'Invalid "loadPaths" option: expected a string or a list of strings, got {provided}.'
    INVALID_OPTION = 'Invalid "{name}" option: {details}'

    # --- Import Resolution Errors ---
    IMPORT_NOT_FOUND = "File to import not found or unreadable: {specifier}"
    IMPORT_AMBIGUOUS = (
        "It's not clear which file to import for '@import \"{specifier}\"' in file \"{importer}\". "
        "Candidates: {candidates}. Please delete or rename all but one of these files."
    )

    # --- Compilation Errors ---
    COMPILATION_FAILED = "{message}"


class SassStageError(Exception):
    def __init__(
        self,
        code: ErrorCode,
        span: Optional[Span] = None,
        file_path: Optional[str] = None,
        **kwargs,
    ):
        self.code = code
        self.span = span
        self.details = kwargs

        core_message = code.value.format(**kwargs)

        location_prefix = ""
        if span:
            location_prefix = f"Error in '{span.file_path}' (Line: {span.line}, Column: {span.column}):\n"
        elif file_path:
            location_prefix = f"Error in '{file_path}': "

        self.message = location_prefix + core_message

        super().__init__(self.message)


class ConfigurationError(SassStageError):
    """Raised while building options, before any file is processed."""


class ImportNotFound(SassStageError):
    def __init__(self, specifier: str):
        self.specifier = specifier
        super().__init__(ErrorCode.IMPORT_NOT_FOUND, specifier=specifier)


class ImportAmbiguous(SassStageError):
    def __init__(self, specifier: str, importer: str, candidates: List[str]):
        self.specifier = specifier
        self.importer = importer
        self.candidates = list(candidates)
        super().__init__(
            ErrorCode.IMPORT_AMBIGUOUS,
            specifier=specifier,
            importer=importer,
            candidates=", ".join(self.candidates),
        )


class CompileError(SassStageError):
    """
    A compile failure attributed to the real file it happened in.
    `contents` holds the full text of that file, or None when the file is unknown.
    """

    def __init__(self, message: str, file: str, contents: Optional[str], line: Optional[int], column: Optional[int]):
        self.file = file
        self.contents = contents
        self.line = line
        self.column = column
        span = Span(line=line, column=column, file_path=file) if line is not None and column is not None else None
        super().__init__(ErrorCode.COMPILATION_FAILED, span=span, file_path=file, message=message)
        # The formatted text carries the location; `message` stays the bare compiler message.
        self.message = message
