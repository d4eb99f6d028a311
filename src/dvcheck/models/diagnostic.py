"""Pydantic v2 model for the diagnostics returned to callers."""

from datetime import timedelta

from pydantic import BaseModel, ConfigDict, Field


class Diagnostic(BaseModel):
    """A single validation finding, as reported to the caller.

    Severity only decides whether a finding is reported, so it is not
    part of this record.
    """

    model_config = ConfigDict(frozen=True)

    message: str = Field(min_length=1)
    file_line_number: int | None = Field(default=None, ge=1)
    video_time: timedelta | None = None
    file_line: str | None = None  # raw scout line, for operator reference
