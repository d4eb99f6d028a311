"""Rule type and small helpers shared by the rule modules."""

from collections.abc import Callable
from dataclasses import dataclass

from dvcheck.config import ValidatorConfig
from dvcheck.models import MatchMetadata, PlayLog
from dvcheck.severity import Finding, Severity, Strictness

Check = Callable[[PlayLog, MatchMetadata, ValidatorConfig], list[Finding]]


@dataclass(frozen=True)
class Rule:
    """A named check plus the conditions under which it runs.

    ``severities`` lists every severity the check can emit; a rule none of
    whose findings could surface at the run's level is not executed.
    """

    name: str
    check: Check
    severities: frozenset[Severity]
    indoor_only: bool = False
    min_level: Strictness = Strictness.MAJOR_ONLY

    def applies(self, config: ValidatorConfig) -> bool:
        if self.indoor_only and not config.is_indoor:
            return False
        if config.validation_level < self.min_level:
            return False
        return any(s.surfaces_at(config.validation_level) for s in self.severities)

    def __call__(
        self, plays: PlayLog, meta: MatchMetadata, config: ValidatorConfig
    ) -> list[Finding]:
        return self.check(plays, meta, config)


def same(a, b) -> bool:
    """Equality that is False when either side is missing."""
    return a is not None and b is not None and a == b
