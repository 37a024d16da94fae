import os
from typing import Any, Dict, Literal, Mapping, Optional, Tuple

from pydantic import BaseModel, ConfigDict, ValidationError
from wcmatch import glob

from .config import DEFAULT_INCLUDE, LOAD_PATH_OPTION_NAMES, PERMITTED_COMPILER_OPTIONS
from .exceptions import ConfigurationError, ErrorCode


class StageOptions(BaseModel):
    """
    Validated options for one sass build stage.
    Built once at setup; shared read-only by every file compiled afterwards.
    """

    model_config = ConfigDict(frozen=True)

    include: str = DEFAULT_INCLUDE
    load_paths: Tuple[str, ...] = ()

    # --- Compiler pass-through ---
    indent_type: Optional[str] = None
    indent_width: Optional[int] = None
    linefeed: Optional[str] = None
    output_style: Optional[Literal["nested", "expanded", "compact", "compressed"]] = None
    precision: Optional[int] = None
    source_comments: Optional[bool] = None
    source_map: bool = True

    @classmethod
    def from_mapping(cls, options: Optional[Mapping[str, Any]] = None) -> "StageOptions":
        """
        Builds options from a user mapping using either the camelCase names of the
        build configuration or their snake_case equivalents. Unknown keys are ignored.
        """
        options = dict(options or {})
        values: Dict[str, Any] = {"load_paths": normalize_load_paths(options)}

        if options.get("include") is not None:
            values["include"] = options["include"]

        for camel_name, field_name in PERMITTED_COMPILER_OPTIONS.items():
            for name in (camel_name, field_name):
                if options.get(name) is not None:
                    values[field_name] = options[name]
                    break

        try:
            return cls(**values)
        except ValidationError as e:
            first = e.errors()[0]
            name = ".".join(str(part) for part in first["loc"]) or "options"
            raise ConfigurationError(ErrorCode.INVALID_OPTION, name=name, details=first["msg"]) from e

    def compiler_options(self) -> Dict[str, Any]:
        """Returns the pass-through options that were actually set."""
        fields = PERMITTED_COMPILER_OPTIONS.values()
        return {name: getattr(self, name) for name in fields if getattr(self, name) is not None}

    def is_included(self, file: str) -> bool:
        return glob.globmatch(file.replace(os.sep, "/"), self.include, flags=glob.GLOBSTAR | glob.BRACE)


def normalize_load_paths(options: Mapping[str, Any]) -> Tuple[str, ...]:
    """
    Picks the first load path alias that is set and returns it as a tuple
    of absolute directories. A single string counts as a one-item list.
    """
    raw: Any = None
    for name in LOAD_PATH_OPTION_NAMES:
        # An empty list is still a choice; only missing or blank values defer to the next alias.
        if options.get(name) is not None and options[name] != "":
            raw = options[name]
            break

    if raw is None:
        return ()

    if isinstance(raw, str):
        raw = [raw]
    elif not isinstance(raw, (list, tuple)) or not all(isinstance(p, str) for p in raw):
        raise ConfigurationError(ErrorCode.INVALID_LOAD_PATHS, provided=type(raw).__name__)

    return tuple(os.path.abspath(p) for p in raw)
