"""Pydantic v2 models for play-by-play rows and the ordered play log.

PlayRecord validates one scouted row (a skill, or a marker such as a
substitution or timeout). PlayLog is the immutable, ordered sequence of
records plus the raw source lines they were parsed from.
"""

import logging
from collections.abc import Iterable, Iterator, Mapping
from dataclasses import dataclass
from enum import Enum

from pydantic import BaseModel, ConfigDict, Field, ValidationError, field_validator

from dvcheck.exceptions import InvalidArgument, MissingColumns

logger = logging.getLogger(__name__)


class Skill(str, Enum):
    """Skill (or marker) recorded on a row. Lookup is case-insensitive."""

    SERVE = "Serve"
    RECEPTION = "Reception"
    SET = "Set"
    ATTACK = "Attack"
    BLOCK = "Block"
    DIG = "Dig"
    FREEBALL = "Freeball"
    ROTATION_ERROR = "Rotation error"
    TECHNICAL_TIMEOUT = "Technical timeout"
    TIMEOUT = "Timeout"
    SUBSTITUTION = "Substitution"
    POINT = "Point"

    @classmethod
    def _missing_(cls, value):
        if isinstance(value, str):
            folded = value.strip().lower()
            for member in cls:
                if member.value.lower() == folded:
                    return member
        return None


class TeamSide(str, Enum):
    HOME = "home"
    VISITING = "visiting"

    @property
    def label(self) -> str:
        """Capitalised side name for messages ("Home" / "Visiting")."""
        return self.value.capitalize()


# Columns a row must carry regardless of file type. Slot columns are added
# per file type by required_columns().
BASE_COLUMNS = frozenset({
    "skill",
    "skill_type",
    "evaluation",
    "evaluation_code",
    "team",
    "player_number",
    "player_id",
    "start_zone",
    "end_zone",
    "end_subzone",
    "num_players",
    "substitution",
    "code",
    "point_id",
    "set_number",
    "home_team_score",
    "visiting_team_score",
    "point_won_by",
    "file_line_number",
    "home_team",
    "visiting_team",
})


def required_columns(slots: int = 6) -> frozenset[str]:
    """Columns required for a log with ``slots`` rotation slots per team."""
    slot_columns = {
        f"{side.value}_p{n}" for side in TeamSide for n in range(1, slots + 1)
    }
    return BASE_COLUMNS | slot_columns


class PlayRecord(BaseModel):
    """Validation model for a single play-by-play row."""

    model_config = ConfigDict(frozen=True)

    skill: Skill | None = None
    skill_type: str | None = None
    evaluation: str | None = None
    evaluation_code: str | None = None
    attack_code: str | None = None
    team: str | None = None
    player_number: int | None = None
    player_id: str | None = None
    start_zone: int | None = None
    end_zone: int | None = None
    end_subzone: str | None = None
    num_players: str | None = None
    home_p1: int | None = None
    home_p2: int | None = None
    home_p3: int | None = None
    home_p4: int | None = None
    home_p5: int | None = None
    home_p6: int | None = None
    visiting_p1: int | None = None
    visiting_p2: int | None = None
    visiting_p3: int | None = None
    visiting_p4: int | None = None
    visiting_p5: int | None = None
    visiting_p6: int | None = None
    substitution: bool = False
    code: str | None = None
    point_id: int | None = None
    set_number: int | None = Field(default=None, ge=1)
    home_team_score: int | None = Field(default=None, ge=0)
    visiting_team_score: int | None = Field(default=None, ge=0)
    point_won_by: str | None = None
    file_line_number: int | None = Field(default=None, ge=1)
    home_team: str | None = None
    visiting_team: str | None = None

    @field_validator("skill", mode="before")
    @classmethod
    def coerce_skill(cls, v):
        """Accept skill names in any case; blank or unrecognised means no skill."""
        if v is None or (isinstance(v, str) and not v.strip()):
            return None
        if isinstance(v, str):
            try:
                return Skill(v)
            except ValueError:
                logger.warning("Unrecognised skill %r, row treated as having no skill", v)
                return None
        return v

    @field_validator("player_id", mode="before")
    @classmethod
    def coerce_player_id(cls, v):
        """Player IDs are labels; numeric IDs are kept as their text."""
        if isinstance(v, int) and not isinstance(v, bool):
            return str(v)
        return v

    @field_validator("substitution", mode="before")
    @classmethod
    def coerce_substitution(cls, v):
        return False if v is None else v

    @property
    def team_side(self) -> TeamSide | None:
        """Which side acted on this row, by comparing literal team names."""
        if self.team is None:
            return None
        if self.team == self.home_team:
            return TeamSide.HOME
        if self.team == self.visiting_team:
            return TeamSide.VISITING
        return None

    def slot_values(self, side: TeamSide, slots: int = 6) -> tuple[int | None, ...]:
        """Raw slot values for ``side``, missing entries included."""
        return tuple(
            getattr(self, f"{side.value}_p{n}") for n in range(1, slots + 1)
        )

    def lineup(self, side: TeamSide, slots: int = 6) -> tuple[int, ...] | None:
        """Complete lineup for ``side``, or None if any slot is missing."""
        values = self.slot_values(side, slots)
        if any(v is None for v in values):
            return None
        return values

    def slot_of(self, player: int | None, side: TeamSide, slots: int = 6) -> int | None:
        """1-based rotation slot ``player`` occupies for ``side``, if any."""
        if player is None:
            return None
        for n, value in enumerate(self.slot_values(side, slots), start=1):
            if value is not None and value == player:
                return n
        return None


@dataclass(frozen=True)
class PlayLog:
    """Immutable, ordered play-by-play log.

    Rows are addressed by 0-based index. ``raw_lines`` holds the source
    text; ``file_line_number`` on a record is a 1-based index into it.
    """

    records: tuple[PlayRecord, ...] = ()
    raw_lines: tuple[str, ...] = ()

    @classmethod
    def from_rows(
        cls,
        rows: Iterable[Mapping],
        raw_lines: Iterable[str] = (),
        slots: int = 6,
    ) -> "PlayLog":
        """Build a log from row mappings.

        Raises:
            MissingColumns: If any row lacks a required column.
            InvalidArgument: If a row fails model validation.
        """
        rows = [dict(row) for row in rows]
        required = required_columns(slots)
        missing: set[str] = set()
        for row in rows:
            missing.update(required.difference(row))
        if missing:
            logger.error("Play log rows lack columns: %s", sorted(missing))
            raise MissingColumns(sorted(missing))

        try:
            records = tuple(PlayRecord.model_validate(row) for row in rows)
        except ValidationError as e:
            logger.error("Play log rows failed validation: %s", e)
            raise InvalidArgument(
                f"Play log rows are malformed: {e}", argument="play_log"
            ) from e

        return cls(records=records, raw_lines=tuple(raw_lines))

    def __len__(self) -> int:
        return len(self.records)

    def __iter__(self) -> Iterator[PlayRecord]:
        return iter(self.records)

    def __getitem__(self, index: int) -> PlayRecord:
        return self.records[index]

    def previous(self, index: int) -> PlayRecord | None:
        """Row immediately before ``index``; None at the start of the log."""
        if index <= 0:
            return None
        return self.records[index - 1]

    def next(self, index: int) -> PlayRecord | None:
        """Row immediately after ``index``; None at the end of the log."""
        if index + 1 >= len(self.records):
            return None
        return self.records[index + 1]

    def previous_in_rally(self, index: int) -> PlayRecord | None:
        """Previous row, only if it belongs to the same point."""
        prev = self.previous(index)
        if prev is None or prev.point_id != self.records[index].point_id:
            return None
        return prev

    def next_in_rally(self, index: int) -> PlayRecord | None:
        """Next row, only if it belongs to the same point."""
        nxt = self.next(index)
        if nxt is None or nxt.point_id != self.records[index].point_id:
            return None
        return nxt

    def pairs(self) -> Iterator[tuple[int, PlayRecord, PlayRecord]]:
        """Yield ``(index, previous, current)`` for every adjacent pair."""
        for i in range(1, len(self.records)):
            yield i, self.records[i - 1], self.records[i]

    def rally_pairs(self) -> Iterator[tuple[int, PlayRecord, PlayRecord]]:
        """Adjacent pairs that belong to the same point."""
        for i, cur in enumerate(self.records):
            prev = self.previous_in_rally(i)
            if prev is not None:
                yield i, prev, cur

    def rally_indices(self) -> dict[int, list[int]]:
        """Row indices grouped by point_id, in order of first appearance.

        Rows without a point_id belong to no rally and are left out.
        """
        groups: dict[int, list[int]] = {}
        for i, record in enumerate(self.records):
            if record.point_id is None:
                continue
            groups.setdefault(record.point_id, []).append(i)
        return groups

    def rallies(self) -> dict[int, list[PlayRecord]]:
        """Records grouped by point_id (see rally_indices)."""
        return {
            point_id: [self.records[i] for i in indices]
            for point_id, indices in self.rally_indices().items()
        }

    def raw_line(self, file_line_number: int | None) -> str | None:
        """Source text for a 1-based line number, if known."""
        if file_line_number is None or not 1 <= file_line_number <= len(self.raw_lines):
            return None
        return self.raw_lines[file_line_number - 1]
