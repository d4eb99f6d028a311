"""Ace coding checks, evaluated once per rally.

A serve was an ace when the serving team won the point and the serve was
either not received or the reception was an error. It is not clear whether
a rotation error straight after the serve should count as an ace, so each
check resolves that case in the direction that keeps it quiet:

* "should be an ace" treats a following rotation error as not an ace;
* "should not be an ace" treats it as an ace.
"""

from dvcheck.config import ValidatorConfig
from dvcheck.models import MatchMetadata, PlayLog, PlayRecord, Skill
from dvcheck.severity import Finding, Severity

ACE = "Ace"
ERROR = "Error"

# skills that may follow an ace without muddying the call
ACE_FOLLOWERS = frozenset({Skill.RECEPTION, Skill.ROTATION_ERROR})


def _single_serve(rally: list[PlayRecord]) -> int | None:
    serves = [i for i, r in enumerate(rally) if r.skill is Skill.SERVE]
    if len(serves) != 1:
        return None
    return serves[0]


def _won_outright(rally: list[PlayRecord], sv: int) -> bool:
    """Server's team won the point and the reception (if any) failed."""
    serve = rally[sv]
    if serve.team is None or serve.team != serve.point_won_by:
        return False
    receptions = [r for r in rally if r.skill is Skill.RECEPTION]
    return not receptions or receptions[0].evaluation == ERROR


def _skill_after(rally: list[PlayRecord], sv: int) -> Skill | None:
    if sv + 1 >= len(rally):
        return None
    return rally[sv + 1].skill


def should_be_ace(rally: list[PlayRecord]) -> bool | None:
    """True if the rally's serve was an ace but is not coded as one.

    None when the rally does not have exactly one serve.
    """
    sv = _single_serve(rally)
    if sv is None:
        return None
    following = _skill_after(rally, sv)
    was_ace = _won_outright(rally, sv)
    if following is Skill.ROTATION_ERROR:
        was_ace = False
    if following is not None and following not in ACE_FOLLOWERS:
        was_ace = False
    return was_ace and rally[sv].evaluation != ACE


def should_not_be_ace(rally: list[PlayRecord]) -> bool | None:
    """True if the rally's serve is coded as an ace but was not one."""
    sv = _single_serve(rally)
    if sv is None:
        return None
    was_ace = _won_outright(rally, sv)
    if _skill_after(rally, sv) is Skill.ROTATION_ERROR:
        was_ace = True
    return not was_ace and rally[sv].evaluation == ACE


def _serve_findings(plays: PlayLog, predicate, message: str) -> list[Finding]:
    findings: list[Finding] = []
    for rally in plays.rallies().values():
        if predicate(rally):
            findings.extend(
                Finding(message, Severity.MAJOR, r)
                for r in rally
                if r.skill is Skill.SERVE
            )
    return findings


def check_missing_ace(
    plays: PlayLog, meta: MatchMetadata, config: ValidatorConfig
) -> list[Finding]:
    return _serve_findings(plays, should_be_ace, "Winning serve not coded as an ace")


def check_false_ace(
    plays: PlayLog, meta: MatchMetadata, config: ValidatorConfig
) -> list[Finding]:
    return _serve_findings(
        plays, should_not_be_ace, "Non-winning serve was coded as an ace"
    )
