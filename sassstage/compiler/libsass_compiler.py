import logging
import os
from typing import Any, Dict, Mapping, Optional

import sass

from sassstage.config import ENTRY_TOKEN

from .base import ImportHook, RawCompileError
from .error_parser import parse_sass_error

logger = logging.getLogger(__name__)

# Pass-through options the libsass bindings have no equivalent for.
UNSUPPORTED_OPTIONS = ("indent_type", "indent_width", "linefeed")


class LibsassCompiler:
    """
    Compiles stylesheets with libsass. Every `@import` is answered by the
    supplied import hook; libsass never reads imported files by itself.
    """

    def compile(self, source: str, import_hook: ImportHook, options: Mapping[str, Any]) -> str:
        failure: Dict[str, Optional[BaseException]] = {"error": None}

        def importer(path: str, prev: str):
            try:
                resolved = import_hook(path, prev)
            except Exception as e:
                if failure["error"] is None:
                    failure["error"] = e
                raise
            return [(resolved.absolute_path, resolved.contents)]

        kwargs = self._build_kwargs(options)
        try:
            result = sass.compile(string=source, importers=[(0, importer)], **kwargs)
        except sass.CompileError as e:
            error = failure["error"]
            # Disk failures other than "not found" abort the compile as they are.
            if isinstance(error, OSError):
                raise error
            parsed = parse_sass_error(str(e))
            message = str(error) if error is not None else parsed.message
            file = parsed.file
            if file is not None and file != ENTRY_TOKEN:
                # libsass reports paths relative to the working directory.
                file = os.path.abspath(file)
            raise RawCompileError(message, file=file, line=parsed.line, column=parsed.column) from e

        # libsass only builds maps for filename= compiles; string compiles get
        # the reference comment alone and the map itself is not emitted.
        if options.get("source_map") and options.get("output_file"):
            result = result.rstrip("\n") + "\n\n" + source_map_comment(options["output_file"])
        return result

    def _build_kwargs(self, options: Mapping[str, Any]) -> Dict[str, Any]:
        kwargs: Dict[str, Any] = {}
        for name in UNSUPPORTED_OPTIONS:
            if options.get(name) is not None:
                logger.debug("Option '%s' is not supported by libsass and was ignored", name)

        if options.get("output_style") is not None:
            kwargs["output_style"] = options["output_style"]
        if options.get("precision") is not None:
            kwargs["precision"] = options["precision"]
        if options.get("source_comments") is not None:
            kwargs["source_comments"] = options["source_comments"]
        if options.get("indented_syntax"):
            kwargs["indented"] = True
        return kwargs


def source_map_comment(output_file: str) -> str:
    return f"/*# sourceMappingURL={os.path.basename(output_file)}.map */"
