"""Severity and strictness levels, and the internal Finding record.

A finding of severity S surfaces when the run's strictness is at least
``4 - S``:

    =========  ==========  ========  ======
    Severity   MAJOR_ONLY  STANDARD  STRICT
    =========  ==========  ========  ======
    MAJOR      yes         yes       yes
    MODERATE   no          yes       yes
    MINOR      no          no        yes
    =========  ==========  ========  ======
"""

from dataclasses import dataclass
from enum import IntEnum

from dvcheck.models import PlayRecord


class Strictness(IntEnum):
    OFF = 0
    MAJOR_ONLY = 1
    STANDARD = 2
    STRICT = 3


class Severity(IntEnum):
    MINOR = 1  # minor or derivable, e.g. from post-processed compound codes
    MODERATE = 2  # likely to lead to misinterpretation of the data
    MAJOR = 3  # structural error

    @property
    def minimum_strictness(self) -> Strictness:
        """Lowest strictness at which findings of this severity surface."""
        return Strictness(4 - self.value)

    def surfaces_at(self, level: int) -> bool:
        return self.minimum_strictness <= level


@dataclass(frozen=True)
class Finding:
    """A rule's output before filtering and annotation.

    ``record`` is the row the finding points at; None for roster-level
    findings that have no source line.
    """

    message: str
    severity: Severity = Severity.MODERATE
    record: PlayRecord | None = None
