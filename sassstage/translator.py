from sassstage.compiler.base import RawCompileError
from sassstage.config import ENTRY_TOKEN
from sassstage.exceptions import CompileError
from sassstage.resolution.memo import ImportMemoTable


class CompileErrorTranslator:
    """
    Attributes a raw compiler failure to the file it really happened in: the
    entry file itself, or one of the files resolved while compiling it.
    """

    def __init__(self, entry_file: str, entry_source: str, memo: ImportMemoTable):
        self.entry_file = entry_file
        self.entry_source = entry_source
        self.memo = memo

    def translate(self, raw: RawCompileError) -> CompileError:
        # Anything after the first line is compiler-internal detail.
        message = raw.message.split("\n")[0]

        if raw.file == ENTRY_TOKEN or raw.file == self.entry_file:
            file, contents = self.entry_file, self.entry_source
        else:
            path = self.memo.path_for(raw.file) if raw.file is not None else None
            if path is not None:
                file, contents = path, self.memo.contents_for(path)
            else:
                file, contents = f"unknown({raw.file or ''})", None

        return CompileError(message, file=file, contents=contents, line=raw.line, column=raw.column)
