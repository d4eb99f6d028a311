"""Roster-level checks. Findings have no source line."""

from dvcheck.config import ValidatorConfig
from dvcheck.models import MatchMetadata, PlayLog, TeamSide
from dvcheck.severity import Finding, Severity


def check_duplicate_player_ids(
    plays: PlayLog, meta: MatchMetadata, config: ValidatorConfig
) -> list[Finding]:
    """Player IDs must be unique within a team. Missing IDs are ignored."""
    findings: list[Finding] = []
    for side in TeamSide:
        roster = meta.roster(side)
        seen: set[str] = set()
        duplicated: list[str] = []
        for player in roster:
            pid = player.player_id
            if pid is None:
                continue
            if pid in seen and pid not in duplicated:
                duplicated.append(pid)
            seen.add(pid)

        for pid in duplicated:
            players = ", ".join(
                f"{p.name} [jersey number {p.number}]"
                for p in roster
                if p.player_id == pid
            )
            findings.append(
                Finding(
                    f"{meta.team_label(side)} players {players} "
                    f"have the same player ID ({pid})",
                    Severity.MAJOR,
                )
            )
    return findings


def check_missing_player_roles(
    plays: PlayLog, meta: MatchMetadata, config: ValidatorConfig
) -> list[Finding]:
    """Every roster entry should have a position label (indoor only)."""
    findings: list[Finding] = []
    for side in TeamSide:
        missing = [p.name for p in meta.roster(side) if p.role is None]
        if not missing:
            continue
        if len(missing) > 1:
            noun, verb = "players", "have"
        else:
            noun, verb = "player", "has"
        findings.append(
            Finding(
                f"{meta.team_label(side)} {noun} {', '.join(missing)} {verb} "
                "no position (opposite/outside/etc) assigned in the players list",
                Severity.MAJOR,
            )
        )
    return findings
