"""Validator configuration with defaults matching DataVolley conventions."""

from dataclasses import dataclass, field

from pydantic import BaseModel, ConfigDict, field_validator

INDOOR = "indoor"
BEACH = "beach"
FILE_TYPES = (INDOOR, BEACH)


@dataclass
class ValidatorConfig:
    """Configuration for a single validation run.

    Built by the engine from the caller's arguments; rules only read it.
    """

    # 0 = off, 1 = major issues only, 2 = also likely misinterpretations,
    # 3 = everything including minor/derivable issues
    validation_level: int = 2

    # "indoor" or "beach"
    file_type: str = INDOOR

    # Attack codes a back-row player may legally play from a front-row zone
    setter_tip_codes: tuple[str, ...] = ()

    # Rules are independent; >1 maps them over a thread pool
    max_workers: int = 1

    # Zones an attack may start from, by row of the court
    front_row_zones: frozenset[int] = field(
        default_factory=lambda: frozenset({2, 3, 4})
    )
    back_row_zones: frozenset[int] = field(
        default_factory=lambda: frozenset({1, 5, 6, 7, 8, 9})
    )

    # Rotation slots occupied by front-row / back-row players
    front_row_slots: tuple[int, ...] = (2, 3, 4)
    back_row_slots: tuple[int, ...] = (1, 5, 6)

    # Marker inside a roster special_role that designates a libero
    libero_role_marker: str = "L"

    @property
    def is_indoor(self) -> bool:
        return self.file_type == INDOOR

    @property
    def slot_count(self) -> int:
        """Players on court per team: six indoor, two on the beach."""
        return 6 if self.is_indoor else 2


class ValidationOptions(BaseModel):
    """Caller-supplied options mapping, e.g. ``{"setter_tip_codes": ["PP"]}``."""

    model_config = ConfigDict(extra="forbid", frozen=True)

    setter_tip_codes: tuple[str, ...] = ()

    @field_validator("setter_tip_codes", mode="before")
    @classmethod
    def drop_missing_codes(cls, v):
        """A single code is accepted as a one-item list; null entries are dropped."""
        if v is None:
            return ()
        if isinstance(v, str):
            return (v,)
        if isinstance(v, (list, tuple, set, frozenset)):
            return tuple(code for code in v if code is not None)
        return v
