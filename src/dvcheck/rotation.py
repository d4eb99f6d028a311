"""Rotation tracking helpers shared by the rotation and substitution rules.

Lineups are tuples of jersey numbers ordered by rotation slot (slot 1
first). After a side-out the receiving team rotates left: the player in
slot 2 moves to slot 1 and the player in slot 1 moves to the last slot.
"""

import re

from dvcheck.models import PlayLog, TeamSide

# *c02:01 -> home player 2 replaced by player 1; ac.. is the visiting team
SUBSTITUTION_CODE = re.compile(r"^(?P<team>.)c(?P<out>[^:]*):(?P<in>.*)$")

Lineup = tuple[int, ...]


def rotate_left(slots: Lineup) -> Lineup:
    if not slots:
        return slots
    return slots[1:] + slots[:1]


def is_left_rotation(prev: Lineup, cur: Lineup) -> bool:
    """True if ``cur`` is ``prev`` rotated left by one slot."""
    return len(prev) == len(cur) and rotate_left(tuple(prev)) == tuple(cur)


def lineup_changed(prev: Lineup | None, cur: Lineup | None) -> bool:
    """True if both lineups are known and differ."""
    if prev is None or cur is None:
        return False
    return tuple(prev) != tuple(cur)


def _to_number(text: str) -> int | None:
    text = text.strip()
    if not text.isdigit():
        return None
    return int(text)


def parse_substitution_code(code: str | None) -> tuple[TeamSide, int | None, int | None] | None:
    """Split a substitution code into ``(side, outgoing, incoming)``.

    Returns None if ``code`` is not a substitution code. Player numbers
    that cannot be read are returned as None.
    """
    if code is None:
        return None
    m = SUBSTITUTION_CODE.match(code)
    if m is None:
        return None
    side = TeamSide.VISITING if m.group("team") == "a" else TeamSide.HOME
    return side, _to_number(m.group("out")), _to_number(m.group("in"))


def reconcile_substitution(
    prev: Lineup, cur: Lineup, outgoing: int | None, incoming: int | None
) -> bool:
    """True if the lineup change is explained by ``outgoing`` -> ``incoming``."""
    if outgoing is None or incoming is None:
        return False
    return (
        outgoing in prev
        and incoming in cur
        and incoming not in prev
        and outgoing not in cur
    )


def find_lineup(
    plays: PlayLog, index: int, side: TeamSide, slots: int, step: int
) -> Lineup | None:
    """Nearest complete lineup one or two rows away from ``index``.

    ``step`` is -1 to look backwards, +1 to look forwards. Returns None
    when neither row has a complete lineup.
    """
    for distance in (1, 2):
        k = index + step * distance
        if not 0 <= k < len(plays):
            return None
        lineup = plays[k].lineup(side, slots)
        if lineup is not None:
            return lineup
    return None
