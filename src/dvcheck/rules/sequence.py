"""Checks on pairs of consecutive rows."""

from dvcheck.config import ValidatorConfig
from dvcheck.models import MatchMetadata, PlayLog, Skill
from dvcheck.severity import Finding, Severity

from .base import same

NO_BLOCK = "No block"

# Skill pairs that one player cannot make back to back. Other repeats are
# left alone: some scouts code one touch as two skills (e.g. reception and
# set) for the same player.
IMPOSSIBLE_REPEATS = frozenset({
    (Skill.RECEPTION, Skill.ATTACK),
    (Skill.SET, Skill.BLOCK),
})


def _blocked_attacks(plays: PlayLog):
    """Attacks followed in the same rally by a block from the other side."""
    for i, record in enumerate(plays):
        if record.skill is not Skill.ATTACK:
            continue
        following = plays.next_in_rally(i)
        if (
            following is not None
            and following.skill is Skill.BLOCK
            and not same(record.team, following.team)
        ):
            yield record


def check_missing_blocker_count(
    plays: PlayLog, meta: MatchMetadata, config: ValidatorConfig
) -> list[Finding]:
    return [
        Finding(
            "Attack (which was blocked) does not have number of blockers recorded",
            Severity.MINOR,
            attack,
        )
        for attack in _blocked_attacks(plays)
        if attack.num_players is None
    ]


def check_no_block_followed_by_block(
    plays: PlayLog, meta: MatchMetadata, config: ValidatorConfig
) -> list[Finding]:
    return [
        Finding(
            'Attack (which was followed by a block) has "No block" recorded '
            "for number of players",
            Severity.MAJOR,
            attack,
        )
        for attack in _blocked_attacks(plays)
        if attack.num_players == NO_BLOCK
    ]


def check_repeated_rows(
    plays: PlayLog, meta: MatchMetadata, config: ValidatorConfig
) -> list[Finding]:
    """Same skill and evaluation by the same player on consecutive rows."""
    findings: list[Finding] = []
    for _, prev, cur in plays.pairs():
        if (
            same(prev.evaluation_code, cur.evaluation_code)
            and same(prev.skill, cur.skill)
            and same(prev.team, cur.team)
            and same(prev.player_number, cur.player_number)
        ):
            findings.append(
                Finding(
                    "Repeated row with same skill and evaluation_code for the same player",
                    Severity.MAJOR,
                    cur,
                )
            )
    return findings


def check_consecutive_player_actions(
    plays: PlayLog, meta: MatchMetadata, config: ValidatorConfig
) -> list[Finding]:
    findings: list[Finding] = []
    for _, prev, cur in plays.rally_pairs():
        if not same(prev.player_id, cur.player_id):
            continue
        if (prev.skill, cur.skill) in IMPOSSIBLE_REPEATS:
            findings.append(
                Finding("Consecutive actions by the same player", Severity.MAJOR, cur)
            )
    return findings
