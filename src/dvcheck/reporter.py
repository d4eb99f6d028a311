"""Severity filtering and annotation of rule findings.

Turns internal Findings into caller-facing Diagnostics: drops findings
below the run's strictness, attaches the source line and its video time,
and keeps rule execution order.
"""

import logging
from collections.abc import Callable, Iterable
from datetime import timedelta

from dvcheck.models import Diagnostic, PlayLog
from dvcheck.severity import Finding
from dvcheck.timecode import video_time_from_raw

logger = logging.getLogger(__name__)

VideoTimeFn = Callable[[str | None], timedelta | None]


def surfaced(findings: Iterable[Finding], validation_level: int) -> list[Finding]:
    """Findings whose severity surfaces at ``validation_level``."""
    return [f for f in findings if f.severity.surfaces_at(validation_level)]


def to_diagnostic(
    finding: Finding,
    plays: PlayLog,
    video_time_fn: VideoTimeFn = video_time_from_raw,
) -> Diagnostic:
    """Annotate a finding with its file line, raw text and video time."""
    line_number = finding.record.file_line_number if finding.record is not None else None
    raw = plays.raw_line(line_number)
    video_time = video_time_fn(raw) if raw is not None else None
    return Diagnostic(
        message=finding.message,
        file_line_number=line_number,
        video_time=video_time,
        file_line=raw,
    )


def build_report(
    findings: Iterable[Finding],
    plays: PlayLog,
    validation_level: int,
    video_time_fn: VideoTimeFn = video_time_from_raw,
) -> list[Diagnostic]:
    """Filter ``findings`` by severity and convert them to Diagnostics."""
    findings = list(findings)
    kept = surfaced(findings, validation_level)
    logger.debug(
        "Severity filter at level %d kept %d of %d findings",
        validation_level,
        len(kept),
        len(findings),
    )
    return [to_diagnostic(f, plays, video_time_fn) for f in kept]


def format_diagnostic(diagnostic: Diagnostic) -> str:
    """One-line human-readable rendering, e.g. ``line 12 [0:01:09]: ...``."""
    parts = []
    if diagnostic.file_line_number is not None:
        parts.append(f"line {diagnostic.file_line_number}")
    if diagnostic.video_time is not None:
        parts.append(f"[{diagnostic.video_time}]")
    prefix = " ".join(parts)
    if prefix:
        return f"{prefix}: {diagnostic.message}"
    return diagnostic.message
