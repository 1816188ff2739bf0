"""Configuration for a single resolution run."""

from pydantic import BaseModel, ConfigDict, Field

from pdftree.exceptions import ErrorLevel


class ResolveOptions(BaseModel):
    """
    Options controlling tree resolution.

    Params:
        max_depth: Maximum number of nested concrete levels below a section
        error_level: Detail of the tree location attached to raised errors
    """

    model_config = ConfigDict(frozen=True)

    max_depth: int = Field(default=200, ge=1)
    error_level: ErrorLevel = ErrorLevel.USER


DEFAULT_OPTIONS = ResolveOptions()
