from .driver import FileResult, FileState, SassStage, collect_outputs, output_filename
from .exceptions import CompileError, ConfigurationError, ErrorCode, ImportAmbiguous, ImportNotFound, SassStageError
from .graph import BuildGraph, InMemoryBuildGraph
from .options import StageOptions

__all__ = [
    "FileResult",
    "FileState",
    "SassStage",
    "collect_outputs",
    "output_filename",
    "CompileError",
    "ConfigurationError",
    "ErrorCode",
    "ImportAmbiguous",
    "ImportNotFound",
    "SassStageError",
    "BuildGraph",
    "InMemoryBuildGraph",
    "StageOptions",
]
