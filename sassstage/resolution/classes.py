from typing import Literal

from pydantic import BaseModel, ConfigDict


class ResolvedImport(BaseModel):
    """The answer to one `@import`: an existing file and its text at resolution time."""

    model_config = ConfigDict(frozen=True)

    absolute_path: str
    contents: str
    origin: Literal["graph", "disk"]
