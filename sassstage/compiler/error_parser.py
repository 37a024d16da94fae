"""
Reads the plain-text error messages produced by libsass.

A libsass failure comes back as a single string: a headline, the location of
the failing statement ("on line L:C of FILE"), the chain of imports that led
there ("from line L:C of FILE") and a source excerpt. Only the headline and the
locations are kept.
"""

from importlib.resources import files as pkg_files
from typing import List, Optional

from lark import Lark, Token, Transformer
from lark.exceptions import LarkError
from pydantic import BaseModel

LARK_PARSER = Lark(
    (pkg_files("sassstage.compiler") / "sass_error.lark").read_text(),
    start="start",
    parser="lalr",
)

HEADLINE_PREFIX = "Error: "


class ErrorLocation(BaseModel):
    kind: str
    line: int
    column: Optional[int] = None
    file: str


class ParsedSassError(BaseModel):
    message: str
    file: Optional[str] = None
    line: Optional[int] = None
    column: Optional[int] = None
    import_trace: List[ErrorLocation] = []


class SassErrorTransformer(Transformer):
    """Turns a parsed location line into an ErrorLocation."""

    def location(self, items: list) -> ErrorLocation:
        kind, line = items[0], items[1]
        column = items[2] if len(items) == 4 else None
        file: Token = items[-1]
        return ErrorLocation(
            kind=kind.value,
            line=int(line),
            column=int(column) if column is not None else None,
            file=file.value.strip(),
        )


def parse_location(text: str) -> Optional[ErrorLocation]:
    """Parses one location line; returns None for any other kind of line."""
    text = text.strip()
    if not text:
        return None
    try:
        tree = LARK_PARSER.parse(text)
    except LarkError:
        return None
    return SassErrorTransformer().transform(tree)


def parse_sass_error(text: str) -> ParsedSassError:
    lines = text.splitlines() or [""]
    headline = lines[0].strip()
    if headline.startswith(HEADLINE_PREFIX):
        headline = headline[len(HEADLINE_PREFIX):]

    parsed = ParsedSassError(message=headline)
    for line in lines[1:]:
        location = parse_location(line)
        if location is None:
            continue
        if location.kind == "on" and parsed.file is None:
            parsed.file = location.file
            parsed.line = location.line
            parsed.column = location.column
        else:
            parsed.import_trace.append(location)
    return parsed
