import os
import sys

sys.path.insert(0, os.path.abspath(os.path.join(os.path.dirname(__file__), "..")))

from sassstage.compiler.base import RawCompileError
from sassstage.exceptions import CompileError, ErrorCode
from sassstage.resolution.classes import ResolvedImport
from sassstage.resolution.memo import ImportMemoTable
from sassstage.translator import CompileErrorTranslator

ENTRY = "/proj/css/main.scss"
ENTRY_SOURCE = '@import "buttons";\n'


def _translator():
    memo = ImportMemoTable()
    memo.record("buttons", ResolvedImport(absolute_path="/proj/css/_buttons.scss", contents=".btn { @extend .x; }", origin="graph"))
    return CompileErrorTranslator(ENTRY, ENTRY_SOURCE, memo)


def test_entry_token_maps_to_entry_file():
    error = _translator().translate(RawCompileError("Invalid CSS\nmore", file="stdin", line=1, column=9))

    assert isinstance(error, CompileError)
    assert error.code == ErrorCode.COMPILATION_FAILED
    assert error.message == "Invalid CSS"
    assert error.file == ENTRY
    assert error.contents == ENTRY_SOURCE
    assert (error.line, error.column) == (1, 9)
    assert str(error).startswith(f"Error in '{ENTRY}' (Line: 1, Column: 9)")


def test_imported_path_maps_to_remembered_contents_not_entry_source():
    error = _translator().translate(RawCompileError("bad extend", file="/proj/css/_buttons.scss", line=1, column=8))

    assert error.file == "/proj/css/_buttons.scss"
    assert error.contents == ".btn { @extend .x; }"


def test_specifier_token_maps_through_the_memo():
    error = _translator().translate(RawCompileError("bad extend", file="buttons", line=1, column=8))
    assert error.file == "/proj/css/_buttons.scss"


def test_unknown_file_falls_back_to_placeholder():
    error = _translator().translate(RawCompileError("boom", file="/elsewhere.scss", line=3, column=1))
    assert error.file == "unknown(/elsewhere.scss)"
    assert error.contents is None


def test_missing_location_is_tolerated():
    error = _translator().translate(RawCompileError("boom"))
    assert error.file == "unknown()"
    assert error.line is None
    assert error.span is None
