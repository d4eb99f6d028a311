"""Pydantic v2 models for team rosters and match metadata."""

from pydantic import BaseModel, ConfigDict, field_validator, model_validator
from typing_extensions import Self

from .play import TeamSide


class RosterEntry(BaseModel):
    """One player in a team's roster."""

    model_config = ConfigDict(frozen=True)

    player_id: str | None = None
    number: int | None = None
    name: str = ""
    role: str | None = None  # position label: setter, outside, ...
    special_role: str | None = None  # e.g. "L" (libero), "C" (captain)

    @field_validator("player_id", mode="before")
    @classmethod
    def coerce_player_id(cls, v):
        if isinstance(v, int) and not isinstance(v, bool):
            return str(v)
        return v

    @field_validator("role", "special_role", mode="before")
    @classmethod
    def blank_to_none(cls, v):
        """Empty labels carry no information."""
        if isinstance(v, str) and not v.strip():
            return None
        return v

    def is_libero(self, marker: str = "L") -> bool:
        return self.special_role is not None and marker in self.special_role


class MatchMetadata(BaseModel):
    """Team names and rosters for both sides of a match."""

    model_config = ConfigDict(frozen=True)

    home_team: str = ""
    visiting_team: str = ""
    players_h: tuple[RosterEntry, ...] = ()
    players_v: tuple[RosterEntry, ...] = ()

    @model_validator(mode="after")
    def check_teams_different(self) -> Self:
        """Rows are attributed to a side by team name, so names must differ."""
        if self.home_team and self.home_team == self.visiting_team:
            raise ValueError(
                f"home_team and visiting_team are identical ({self.home_team!r})"
            )
        return self

    def home_team_name(self) -> str:
        return self.home_team

    def visiting_team_name(self) -> str:
        return self.visiting_team

    def team_name(self, side: TeamSide) -> str:
        if side is TeamSide.HOME:
            return self.home_team_name()
        return self.visiting_team_name()

    def team_label(self, side: TeamSide) -> str:
        """Message prefix, e.g. ``Home team (Lions)``."""
        return f"{side.label} team ({self.team_name(side)})"

    def roster(self, side: TeamSide) -> tuple[RosterEntry, ...]:
        return self.players_h if side is TeamSide.HOME else self.players_v

    def liberos(self, side: TeamSide, marker: str = "L") -> frozenset[int]:
        """Jersey numbers of the players flagged as liberos for ``side``."""
        return frozenset(
            p.number
            for p in self.roster(side)
            if p.number is not None and p.is_libero(marker)
        )
