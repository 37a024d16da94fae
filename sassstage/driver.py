"""
The sass build stage: decides what happens to each input file and runs the
compiler with import resolution wired into the enclosing build graph.
"""

import asyncio
import functools
import logging
import os
from concurrent.futures import ThreadPoolExecutor
from enum import Enum
from typing import Any, Dict, Mapping, Optional, Union

from pydantic import BaseModel, ConfigDict

from .compiler.base import RawCompileError, StylesheetCompiler
from .compiler.libsass_compiler import LibsassCompiler
from .config import ENTRY_TOKEN, EXTENSION_PATTERN, PARTIAL_MARKER, TARGET_EXTENSION
from .exceptions import SassStageError
from .graph import BuildGraph
from .options import StageOptions
from .resolution.classes import ResolvedImport
from .resolution.existence import ExistenceResolver
from .resolution.memo import ImportMemoTable
from .resolution.walker import LoadPathWalker
from .translator import CompileErrorTranslator

logger = logging.getLogger(__name__)

Contents = Union[str, bytes]


class FileState(Enum):
    SKIPPED = "skipped"  # not a stylesheet entry point, passed through
    IGNORED = "ignored"  # a partial, never built on its own
    EMPTY = "empty"  # blank source, compiler not invoked
    EMITTED = "emitted"
    FAILED = "failed"


class FileResult(BaseModel):
    model_config = ConfigDict(arbitrary_types_allowed=True)

    file: str
    state: FileState
    outputs: Dict[str, Contents] = {}
    error: Optional[BaseException] = None


def output_filename(file: str) -> str:
    return EXTENSION_PATTERN.sub("", file) + TARGET_EXTENSION


class SassStage:
    """
    Compiles stylesheet entry points. Options are validated here, once, so a bad
    configuration fails before any file is touched.
    """

    def __init__(
        self,
        options: Optional[Union[StageOptions, Mapping[str, Any]]] = None,
        compiler: Optional[StylesheetCompiler] = None,
        max_workers: Optional[int] = None,
    ):
        if isinstance(options, StageOptions):
            self.options = options
        else:
            self.options = StageOptions.from_mapping(options)
        self.compiler = compiler if compiler is not None else LibsassCompiler()
        # Compiles block while their imports are resolved, and resolution reads
        # files on the loop's default executor, so compiles get their own threads.
        self._executor = ThreadPoolExecutor(max_workers=max_workers, thread_name_prefix="sassstage-compile")

    def close(self):
        self._executor.shutdown(wait=True)

    def __enter__(self) -> "SassStage":
        return self

    def __exit__(self, exc_type, exc_value, traceback):
        self.close()

    async def build(self, files: Mapping[str, Contents], graph: Optional[BuildGraph] = None) -> Dict[str, FileResult]:
        """Builds every file concurrently. A failed file only fails its own result."""
        results = await asyncio.gather(*(self.build_file(file, contents, graph) for file, contents in files.items()))
        return {result.file: result for result in results}

    def run(self, files: Mapping[str, Contents], graph: Optional[BuildGraph] = None) -> Dict[str, FileResult]:
        return asyncio.run(self.build(files, graph))

    async def build_file(self, file: str, contents: Contents, graph: Optional[BuildGraph] = None) -> FileResult:
        if not self.options.is_included(file):
            logger.debug("Passing through %s", file)
            return FileResult(file=file, state=FileState.SKIPPED, outputs={file: contents})

        if os.path.basename(file).startswith(PARTIAL_MARKER):
            logger.debug("Not building partial %s", file)
            return FileResult(file=file, state=FileState.IGNORED)

        output_file = output_filename(file)

        source = contents.decode("utf-8", errors="replace") if isinstance(contents, bytes) else contents
        # Blank input is emitted as blank CSS without asking the compiler.
        if not source:
            return FileResult(file=file, state=FileState.EMPTY, outputs={output_file: ""})

        base = graph.root if graph is not None else os.getcwd()
        entry_file = os.path.abspath(os.path.join(base, file))

        try:
            css = await self._compile(entry_file, source, os.path.join(base, output_file), graph)
        except (SassStageError, OSError) as e:
            logger.debug("Failed to build %s: %s", file, e)
            return FileResult(file=file, state=FileState.FAILED, error=e)

        return FileResult(file=file, state=FileState.EMITTED, outputs={output_file: css})

    async def _compile(self, entry_file: str, source: str, output_file: str, graph: Optional[BuildGraph]) -> str:
        loop = asyncio.get_running_loop()
        graph_root = graph.root if graph is not None else None
        walker = LoadPathWalker(ExistenceResolver(graph), self.options.load_paths, graph_root)
        memo = ImportMemoTable()

        async def resolve(specifier: str, importer: str) -> ResolvedImport:
            resolved = await walker.resolve(specifier, importer)
            memo.record(specifier, resolved)
            return resolved

        def import_hook(specifier: str, previous: str) -> ResolvedImport:
            # Runs on the compiler's thread; the resolution itself runs on the loop.
            importer = entry_file if previous == ENTRY_TOKEN else os.path.abspath(previous)
            future = asyncio.run_coroutine_threadsafe(resolve(specifier, importer), loop)
            return future.result()

        options: Dict[str, Any] = dict(self.options.compiler_options())
        options["indented_syntax"] = entry_file.endswith(".sass")
        if self.options.source_map:
            options["output_file"] = os.path.abspath(output_file)

        try:
            return await loop.run_in_executor(self._executor, functools.partial(self.compiler.compile, source, import_hook, options))
        except RawCompileError as e:
            raise CompileErrorTranslator(entry_file, source, memo).translate(e) from e


def collect_outputs(results: Mapping[str, FileResult]) -> Dict[str, Contents]:
    """Merges the outputs of a build, raising the first failure in input order."""
    outputs: Dict[str, Contents] = {}
    for result in results.values():
        if result.state is FileState.FAILED:
            raise result.error
        outputs.update(result.outputs)
    return outputs
