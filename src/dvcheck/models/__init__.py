"""Pydantic v2 models for play logs, rosters and diagnostics.

Re-exports all model classes for convenient import::

    from dvcheck.models import PlayLog, PlayRecord, MatchMetadata, ...
"""

from .diagnostic import Diagnostic
from .play import PlayLog, PlayRecord, Skill, TeamSide, required_columns
from .roster import MatchMetadata, RosterEntry

__all__ = [
    "Diagnostic",
    "MatchMetadata",
    "PlayLog",
    "PlayRecord",
    "RosterEntry",
    "Skill",
    "TeamSide",
    "required_columns",
]
