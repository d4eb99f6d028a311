"""Dependent-skill chain checks.

A reception must agree with the serve it answers, an attack with the set
before it, and a block or dig with the attack before it. Only adjacent
rows of the same rally are compared.
"""

from dvcheck import skill_types
from dvcheck.config import ValidatorConfig
from dvcheck.models import MatchMetadata, PlayLog, PlayRecord, Skill
from dvcheck.severity import Finding, Severity
from dvcheck.skill_types import TypeMatch

RECEPTION_ZONE_FIELDS = (
    ("start_zone", "start zone"),
    ("end_zone", "end zone"),
    ("end_subzone", "end sub-zone"),
)


def _unrecognised(record: PlayRecord, skill: Skill) -> list[Finding]:
    if skill_types.is_recognised(record.skill_type, skill):
        return []
    return [
        Finding(
            f"{skill.value} type ({record.skill_type}) is not a recognised "
            f"{skill_types.label_suffix(skill)} type",
            Severity.MINOR,
            record,
        )
    ]


def _type_chain(
    plays: PlayLog,
    source: Skill,
    dependent: Skill,
    *,
    skip_unknown: bool = False,
    report_source: bool = False,
) -> list[Finding]:
    """Compare each ``dependent`` row's type with the ``source`` row before it.

    With ``skip_unknown`` the pair is not compared when either label is the
    ``Unknown ... type`` placeholder. Unrecognised labels are reported for
    the dependent row, and for the source row when ``report_source`` is set,
    alongside the mismatch they belong to.
    """
    findings: list[Finding] = []
    for _, prev, cur in plays.rally_pairs():
        if cur.skill is not dependent or prev.skill is not source:
            continue
        if cur.skill_type is None or prev.skill_type is None:
            continue
        if skip_unknown and (
            skill_types.is_unknown(cur.skill_type, dependent)
            or skill_types.is_unknown(prev.skill_type, source)
        ):
            continue

        result = skill_types.compare(prev.skill_type, source, cur.skill_type, dependent)
        if result is TypeMatch.MATCH:
            continue
        findings.append(
            Finding(
                f"{dependent.value} type ({cur.skill_type}) does not match "
                f"{source.value.lower()} type ({prev.skill_type})",
                Severity.MODERATE,
                cur,
            )
        )
        if report_source:
            findings.extend(_unrecognised(prev, source))
        findings.extend(_unrecognised(cur, dependent))
    return findings


def check_reception_type(
    plays: PlayLog, meta: MatchMetadata, config: ValidatorConfig
) -> list[Finding]:
    """Reception type must match the serve type it follows."""
    return _type_chain(
        plays, Skill.SERVE, Skill.RECEPTION, skip_unknown=True, report_source=True
    )


def check_reception_zones(
    plays: PlayLog, meta: MatchMetadata, config: ValidatorConfig
) -> list[Finding]:
    """Reception zones must match serve zones where both are recorded."""
    findings: list[Finding] = []
    for field, label in RECEPTION_ZONE_FIELDS:
        for _, prev, cur in plays.rally_pairs():
            if cur.skill is not Skill.RECEPTION or prev.skill is not Skill.SERVE:
                continue
            received = getattr(cur, field)
            served = getattr(prev, field)
            if received is None or served is None or received == served:
                continue
            findings.append(
                Finding(
                    f"Reception {label} ({received}) does not match "
                    f"serve {label} ({served})",
                    Severity.MINOR,
                    cur,
                )
            )
    return findings


def check_attack_type(
    plays: PlayLog, meta: MatchMetadata, config: ValidatorConfig
) -> list[Finding]:
    return _type_chain(plays, Skill.SET, Skill.ATTACK, report_source=True)


def check_block_type(
    plays: PlayLog, meta: MatchMetadata, config: ValidatorConfig
) -> list[Finding]:
    return _type_chain(plays, Skill.ATTACK, Skill.BLOCK)


def check_dig_type(
    plays: PlayLog, meta: MatchMetadata, config: ValidatorConfig
) -> list[Finding]:
    return _type_chain(plays, Skill.ATTACK, Skill.DIG)
