"""Rotation and substitution checks against the recorded lineups."""

from collections.abc import Iterator

from dvcheck.config import ValidatorConfig
from dvcheck.models import MatchMetadata, PlayLog, PlayRecord, Skill, TeamSide
from dvcheck.rotation import (
    Lineup,
    find_lineup,
    is_left_rotation,
    lineup_changed,
    parse_substitution_code,
    reconcile_substitution,
)
from dvcheck.severity import Finding, Severity

# substitutions this close to either end of the log are not checked
EDGE_ROWS = 2


def check_rotation_changes(
    plays: PlayLog, meta: MatchMetadata, config: ValidatorConfig
) -> list[Finding]:
    """Outside substitutions, a lineup may only change by rotating left.

    Technical timeouts are skipped; comparisons involving a row with an
    incomplete lineup are ignored.
    """
    rows = [r for r in plays if r.skill is not Skill.TECHNICAL_TIMEOUT]
    findings: list[Finding] = []
    for side in TeamSide:
        for prev, cur in zip(rows, rows[1:]):
            if cur.substitution:
                continue
            before = prev.lineup(side, config.slot_count)
            after = cur.lineup(side, config.slot_count)
            if lineup_changed(before, after) and not is_left_rotation(before, after):
                findings.append(
                    Finding(
                        f"{side.label} team rotation has changed incorrectly",
                        Severity.MAJOR,
                        cur,
                    )
                )
    return findings


def _substitutions(
    plays: PlayLog, config: ValidatorConfig
) -> Iterator[tuple[PlayRecord, Lineup, Lineup, int | None, int | None]]:
    """Yield ``(row, before, after, outgoing, incoming)`` per checkable sub."""
    for i in range(EDGE_ROWS, len(plays) - EDGE_ROWS):
        record = plays[i]
        if not record.substitution:
            continue
        parsed = parse_substitution_code(record.code)
        if parsed is None:
            continue
        side, outgoing, incoming = parsed
        before = find_lineup(plays, i, side, config.slot_count, -1)
        after = find_lineup(plays, i, side, config.slot_count, +1)
        if before is None or after is None:
            continue
        yield record, before, after, outgoing, incoming


def check_unchanged_substitution(
    plays: PlayLog, meta: MatchMetadata, config: ValidatorConfig
) -> list[Finding]:
    return [
        Finding(
            "Player lineup did not change after substitution: "
            "was the sub recorded incorrectly?",
            Severity.MAJOR,
            record,
        )
        for record, before, after, _, _ in _substitutions(plays, config)
        if before == after
    ]


def check_substitution_lineup(
    plays: PlayLog, meta: MatchMetadata, config: ValidatorConfig
) -> list[Finding]:
    """The lineup change must match the players named in the sub code."""
    return [
        Finding(
            "Player lineup conflicts with recorded substitution: "
            "was the sub recorded incorrectly?",
            Severity.MAJOR,
            record,
        )
        for record, before, after, outgoing, incoming in _substitutions(plays, config)
        if before != after
        and not reconcile_substitution(before, after, outgoing, incoming)
    ]
