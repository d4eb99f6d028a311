"""Checks of who was on court, and where, when a skill was recorded."""

from dvcheck.config import ValidatorConfig
from dvcheck.models import MatchMetadata, PlayLog, PlayRecord, Skill, TeamSide
from dvcheck.severity import Finding, Severity

ON_COURT_SKILLS = frozenset({
    Skill.SERVE,
    Skill.ATTACK,
    Skill.BLOCK,
    Skill.DIG,
    Skill.FREEBALL,
    Skill.RECEPTION,
    Skill.SET,
})

LIBERO_FORBIDDEN_SKILLS = frozenset({Skill.SERVE, Skill.ATTACK, Skill.BLOCK})


def _acting_slot(record: PlayRecord, config: ValidatorConfig) -> int | None:
    """Rotation slot of the acting player in their own team's lineup."""
    side = record.team_side
    if side is None:
        return None
    return record.slot_of(record.player_number, side, config.slot_count)


def check_back_row_attack(
    plays: PlayLog, meta: MatchMetadata, config: ValidatorConfig
) -> list[Finding]:
    """Back-row players may not attack from a front-row zone.

    Attacks whose code is a configured setter tip code are exempt.
    """
    findings: list[Finding] = []
    for record in plays:
        if record.skill is not Skill.ATTACK:
            continue
        if record.start_zone not in config.front_row_zones:
            continue
        if record.attack_code is not None and record.attack_code in config.setter_tip_codes:
            continue
        if _acting_slot(record, config) in config.back_row_slots:
            findings.append(
                Finding(
                    "Back-row player made an attack from a front-row zone",
                    Severity.MAJOR,
                    record,
                )
            )
    return findings


def check_front_row_attack_from_back_zone(
    plays: PlayLog, meta: MatchMetadata, config: ValidatorConfig
) -> list[Finding]:
    """Legal, but a front-row attack from the back zones is usually a typo."""
    findings: list[Finding] = []
    for record in plays:
        if record.skill is not Skill.ATTACK:
            continue
        if record.start_zone not in config.back_row_zones:
            continue
        if _acting_slot(record, config) in config.front_row_slots:
            findings.append(
                Finding(
                    "Front-row player made an attack from a back-row zone "
                    "(legal, but possibly a scouting error)",
                    Severity.MODERATE,
                    record,
                )
            )
    return findings


def check_back_row_block(
    plays: PlayLog, meta: MatchMetadata, config: ValidatorConfig
) -> list[Finding]:
    return [
        Finding("Block by a back-row player", Severity.MAJOR, record)
        for record in plays
        if record.skill is Skill.BLOCK
        and _acting_slot(record, config) in config.back_row_slots
    ]


def check_server_position(
    plays: PlayLog, meta: MatchMetadata, config: ValidatorConfig
) -> list[Finding]:
    """The server must be the serving team's slot-1 player."""
    findings: list[Finding] = []
    for record in plays:
        if record.skill is not Skill.SERVE:
            continue
        side = record.team_side
        if side is None or record.player_number is None:
            continue
        server_slot = record.slot_values(side, config.slot_count)[0]
        if server_slot is None:
            continue
        if record.player_number != server_slot:
            findings.append(
                Finding("Serving player not in position 1", Severity.MAJOR, record)
            )
    return findings


def check_player_on_court(
    plays: PlayLog, meta: MatchMetadata, config: ValidatorConfig
) -> list[Finding]:
    """The acting player must be in the current rotation (liberos excepted).

    Rows without any lineup data for the acting team are skipped.
    """
    liberos = {
        side: meta.liberos(side, config.libero_role_marker) for side in TeamSide
    }
    findings: list[Finding] = []
    for record in plays:
        if record.skill not in ON_COURT_SKILLS:
            continue
        side = record.team_side
        if side is None or record.player_number is None:
            continue
        slots = record.slot_values(side, config.slot_count)
        if all(v is None for v in slots):
            continue
        if record.player_number in liberos[side]:
            continue
        if record.player_number not in slots:
            findings.append(
                Finding(
                    "The listed player is not on court in this rotation",
                    Severity.MAJOR,
                    record,
                )
            )
    return findings


def check_libero_skills(
    plays: PlayLog, meta: MatchMetadata, config: ValidatorConfig
) -> list[Finding]:
    """Liberos may not serve, attack or block."""
    liberos = {
        side: meta.liberos(side, config.libero_role_marker) for side in TeamSide
    }
    findings: list[Finding] = []
    for record in plays:
        if record.skill not in LIBERO_FORBIDDEN_SKILLS:
            continue
        side = record.team_side
        if side is None or record.player_number not in liberos[side]:
            continue
        findings.append(
            Finding(
                "Player designated as libero was recorded making a "
                f"{record.skill.value.lower()}",
                Severity.MAJOR,
                record,
            )
        )
    return findings
