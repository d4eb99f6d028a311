"""Point attribution and score progression checks."""

from dvcheck.config import ValidatorConfig
from dvcheck.models import MatchMetadata, PlayLog, PlayRecord, Skill
from dvcheck.severity import Finding, Severity

from .base import same

ERROR_CODE = "="
WINNING_CODE = "#"
WINNING_SKILLS = frozenset({Skill.SERVE, Skill.ATTACK, Skill.BLOCK})

# sets after the first restart the score from 0-0
RESTARTED_SETS = range(2, 6)


def _is_error(record: PlayRecord) -> bool:
    if record.evaluation_code == ERROR_CODE:
        return True
    return (
        record.skill is Skill.BLOCK
        and record.evaluation is not None
        and "invasion" in record.evaluation.lower()
    )


def check_error_point_attribution(
    plays: PlayLog, meta: MatchMetadata, config: ValidatorConfig
) -> list[Finding]:
    """A team that made an error cannot win the point."""
    return [
        Finding(
            'Point awarded to incorrect team following error (or "error" '
            "evaluation incorrect)",
            Severity.MAJOR,
            record,
        )
        for record in plays
        if _is_error(record) and same(record.team, record.point_won_by)
    ]


def check_winning_point_attribution(
    plays: PlayLog, meta: MatchMetadata, config: ValidatorConfig
) -> list[Finding]:
    """An ace, winning attack or stuff block must win the point."""
    findings: list[Finding] = []
    for record in plays:
        if record.skill not in WINNING_SKILLS or record.evaluation_code != WINNING_CODE:
            continue
        if record.team is None or record.point_won_by is None:
            continue
        if record.team != record.point_won_by:
            findings.append(
                Finding(
                    f'Point awarded to incorrect team (or "{record.evaluation}" '
                    "evaluation incorrect)",
                    Severity.MAJOR,
                    record,
                )
            )
    return findings


def _delta(before: int | None, after: int | None) -> int | None:
    if before is None or after is None:
        return None
    return after - before


def score_jump_rows(plays: PlayLog) -> set[int]:
    """Indices of rows whose scores do not follow from the previous row.

    A score may rise by at most one per row, and may only fall when the
    set number goes up.
    """
    rows: set[int] = set()
    for i, prev, cur in plays.pairs():
        deltas = (
            _delta(prev.home_team_score, cur.home_team_score),
            _delta(prev.visiting_team_score, cur.visiting_team_score),
        )
        set_delta = _delta(prev.set_number, cur.set_number)
        jumped = any(d is not None and d > 1 for d in deltas)
        dropped = any(d is not None and d < 0 for d in deltas)
        if jumped or (dropped and set_delta is not None and set_delta <= 0):
            rows.add(i)
    return rows


def check_score_sequence(
    plays: PlayLog, meta: MatchMetadata, config: ValidatorConfig
) -> list[Finding]:
    return [
        Finding(
            "Scores do not follow proper sequence "
            "(note that the error may be in the point before this one)",
            Severity.MAJOR,
            plays[i],
        )
        for i in sorted(score_jump_rows(plays))
    ]


def check_point_scores(
    plays: PlayLog, meta: MatchMetadata, config: ValidatorConfig
) -> list[Finding]:
    """The point winner's score must go up by exactly one per point.

    Uses the last row of each point that has a set number and a winner.
    The first point of sets 2-5 must read 1-0 to the winner. Points that
    contain a row-level score jump are left to check_score_sequence, and
    a point whose scores are missing leaves the next point unchecked.
    """
    jumps = score_jump_rows(plays)
    points: list[tuple[int, PlayRecord, list[int]]] = []
    for point_id, indices in plays.rally_indices().items():
        decided = [
            i for i in indices
            if plays[i].set_number is not None and plays[i].point_won_by is not None
        ]
        if decided:
            points.append((point_id, plays[decided[-1]], indices))
    points.sort(key=lambda p: p[0])

    findings: list[Finding] = []
    # None after a point without scores: the next increment is unknown
    prev_scores: tuple[int, int] | None = (0, 0)
    sets_started: set[int] = set()
    for _, last, indices in points:
        first_of_set = (
            last.set_number in RESTARTED_SETS and last.set_number not in sets_started
        )
        sets_started.add(last.set_number)
        if last.home_team_score is None or last.visiting_team_score is None:
            prev_scores = None
            continue
        scores = (last.home_team_score, last.visiting_team_score)
        won_by_home = last.point_won_by == last.home_team
        winner = 0 if won_by_home else 1

        if first_of_set:
            ok = scores == ((1, 0) if won_by_home else (0, 1))
        elif prev_scores is None:
            ok = True
        else:
            ok = scores[winner] - prev_scores[winner] == 1
        prev_scores = scores

        if ok or jumps.intersection(indices):
            continue
        lost_by = last.visiting_team if won_by_home else last.home_team
        findings.append(
            Finding(
                "Point assigned to incorrect team or scores incorrect "
                f"(point was won by {last.point_won_by} but score was "
                f"incremented for {lost_by})",
                Severity.MAJOR,
                last,
            )
        )
    return findings
