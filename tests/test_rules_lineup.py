"""Tests for rotation and substitution rules (dvcheck.rules.lineup)."""

from dvcheck.rotation import rotate_left
from dvcheck.rules import (
    check_rotation_changes,
    check_substitution_lineup,
    check_unchanged_substitution,
)

from factories import HOME_LINEUP, VISITING_LINEUP, play_log, row

AFTER_SUB = (1, 8, 3, 4, 5, 6)  # home player 2 replaced by 8

UNCHANGED = (
    "Player lineup did not change after substitution: "
    "was the sub recorded incorrectly?"
)
CONFLICT = (
    "Player lineup conflicts with recorded substitution: "
    "was the sub recorded incorrectly?"
)


def substitution_log(code, after=AFTER_SUB, *, side="home", position=2, length=5):
    """``length`` rows with a substitution at ``position``.

    Rows before the substitution carry the starting lineup, rows from the
    substitution on carry ``after``.
    """
    start = HOME_LINEUP if side == "home" else VISITING_LINEUP
    rows = []
    for i in range(length):
        lineup = start if i < position else after
        fields = {f"{side}_lineup": lineup}
        if i == position:
            fields.update(skill="Substitution", substitution=True, code=code)
        rows.append(row(**fields))
    return play_log(*rows)


class TestRotationChanges:
    def test_left_rotation_allowed(self, meta, config):
        plays = play_log(row(), row(), row(home_lineup=rotate_left(HOME_LINEUP)))
        assert check_rotation_changes(plays, meta, config) == []

    def test_other_change_reported(self, meta, config):
        plays = play_log(row(), row(home_lineup=(2, 1, 3, 4, 5, 6)))
        findings = check_rotation_changes(plays, meta, config)
        assert [f.message for f in findings] == ["Home team rotation has changed incorrectly"]
        assert findings[0].record is plays[1]

    def test_visiting_label(self, meta, config):
        plays = play_log(row(), row(visiting_lineup=(16, 11, 12, 13, 14, 15)))
        assert [f.message for f in check_rotation_changes(plays, meta, config)] == [
            "Visiting team rotation has changed incorrectly"
        ]

    def test_home_reported_before_visiting(self, meta, config):
        plays = play_log(
            row(),
            row(visiting_lineup=(16, 11, 12, 13, 14, 15)),
            row(home_lineup=(2, 1, 3, 4, 5, 6), visiting_lineup=(16, 11, 12, 13, 14, 15)),
        )
        assert [f.message.split()[0] for f in check_rotation_changes(plays, meta, config)] == [
            "Home",
            "Visiting",
        ]

    def test_substitution_rows_skipped(self, meta, config):
        plays = play_log(row(), row(home_lineup=AFTER_SUB, substitution=True))
        assert check_rotation_changes(plays, meta, config) == []

    def test_technical_timeout_rows_skipped(self, meta, config):
        plays = play_log(
            row(),
            row(skill="Technical timeout", home_lineup=(6, 5, 4, 3, 2, 1)),
            row(),
        )
        assert check_rotation_changes(plays, meta, config) == []

    def test_incomplete_lineups_ignored(self, meta, config):
        plays = play_log(row(), row(home_lineup=(2, None, 3, 4, 5, 6)), row())
        assert check_rotation_changes(plays, meta, config) == []


class TestSubstitutions:
    def test_recorded_substitution(self, meta, config):
        plays = substitution_log("*c02:08")
        assert check_unchanged_substitution(plays, meta, config) == []
        assert check_substitution_lineup(plays, meta, config) == []

    def test_lineup_unchanged(self, meta, config):
        plays = substitution_log("*c02:08", after=HOME_LINEUP)
        findings = check_unchanged_substitution(plays, meta, config)
        assert [f.message for f in findings] == [UNCHANGED]
        assert findings[0].record is plays[2]
        assert check_substitution_lineup(plays, meta, config) == []

    def test_lineup_conflicts_with_code(self, meta, config):
        plays = substitution_log("*c03:08")
        findings = check_substitution_lineup(plays, meta, config)
        assert [f.message for f in findings] == [CONFLICT]
        assert findings[0].record is plays[2]
        assert check_unchanged_substitution(plays, meta, config) == []

    def test_visiting_substitution(self, meta, config):
        after = (11, 12, 13, 14, 15, 18)
        plays = substitution_log("ac16:18", after, side="visiting")
        assert check_substitution_lineup(plays, meta, config) == []
        plays = substitution_log("ac15:18", after, side="visiting")
        assert len(check_substitution_lineup(plays, meta, config)) == 1

    def test_unreadable_player_numbers_conflict(self, meta, config):
        plays = substitution_log("*c??:08")
        assert [f.message for f in check_substitution_lineup(plays, meta, config)] == [
            CONFLICT
        ]

    def test_substitutions_near_log_edges_skipped(self, meta, config):
        early = substitution_log("*c02:08", after=HOME_LINEUP, position=1)
        late = substitution_log("*c02:08", after=HOME_LINEUP, position=3)
        assert check_unchanged_substitution(early, meta, config) == []
        assert check_unchanged_substitution(late, meta, config) == []

    def test_non_substitution_codes_skipped(self, meta, config):
        plays = substitution_log("*T", after=HOME_LINEUP)
        assert check_unchanged_substitution(plays, meta, config) == []
