"""
Static configuration data for the sass build stage.
This includes naming conventions for stylesheet sources, the default entry-point
pattern and the compiler options that may be forwarded to the compile step.
"""

import re

# A leading underscore marks a file as import-only (a "partial").
PARTIAL_MARKER = "_"

# Order matters: the first extension is always tried before the second.
STYLESHEET_EXTENSIONS = (".scss", ".sass")
EXTENSION_PATTERN = re.compile(r"\.s[ca]ss$")

TARGET_EXTENSION = ".css"

# The file token a compiler uses for source text passed in as a string.
ENTRY_TOKEN = "stdin"

DEFAULT_INCLUDE = "**/*.{sass,scss}"

# Maps the accepted option names onto the keyword names used internally.
LOAD_PATH_OPTION_NAMES = ("loadPaths", "loadPath", "importPaths", "load_paths", "load_path", "import_paths")

PERMITTED_COMPILER_OPTIONS = {
    "indentType": "indent_type",
    "indentWidth": "indent_width",
    "linefeed": "linefeed",
    "outputStyle": "output_style",
    "precision": "precision",
    "sourceComments": "source_comments",
    "sourceMap": "source_map",
}
