from .base import ImportHook, RawCompileError, StylesheetCompiler
from .libsass_compiler import LibsassCompiler

__all__ = [
    "ImportHook",
    "RawCompileError",
    "StylesheetCompiler",
    "LibsassCompiler",
]
