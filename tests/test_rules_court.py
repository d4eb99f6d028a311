"""Tests for the court-position rules (dvcheck.rules.court).

Home lineup is (1, 2, 3, 4, 5, 6): players 2-4 are front row, 1, 5 and 6
back row. Player 7 is the home libero.
"""

import pytest

from dvcheck.config import ValidatorConfig
from dvcheck.rules import (
    check_back_row_attack,
    check_back_row_block,
    check_front_row_attack_from_back_zone,
    check_libero_skills,
    check_player_on_court,
    check_server_position,
)
from dvcheck.severity import Severity

from factories import HOME, VISITING, play_log, row


def messages(findings):
    return [f.message for f in findings]


# ---------------------------------------------------------------------------
# Attacks and blocks by row
# ---------------------------------------------------------------------------


class TestBackRowAttack:
    MESSAGE = "Back-row player made an attack from a front-row zone"

    def test_back_row_player_from_front_zone(self, meta, config):
        plays = play_log(row(skill="Attack", team=HOME, player_number=1, start_zone=4))
        findings = check_back_row_attack(plays, meta, config)
        assert messages(findings) == [self.MESSAGE]
        assert findings[0].severity is Severity.MAJOR
        assert findings[0].record is plays[0]

    def test_front_row_player_from_front_zone(self, meta, config):
        plays = play_log(row(skill="Attack", team=HOME, player_number=3, start_zone=3))
        assert check_back_row_attack(plays, meta, config) == []

    def test_back_row_player_from_back_zone(self, meta, config):
        plays = play_log(row(skill="Attack", team=HOME, player_number=6, start_zone=8))
        assert check_back_row_attack(plays, meta, config) == []

    def test_visiting_team_uses_its_own_lineup(self, meta, config):
        plays = play_log(row(skill="Attack", team=VISITING, player_number=15, start_zone=2))
        assert messages(check_back_row_attack(plays, meta, config)) == [self.MESSAGE]

    def test_setter_tip_code_exempt(self, meta):
        plays = play_log(row(
            skill="Attack", team=HOME, player_number=1, start_zone=4, attack_code="PP",
        ))
        config = ValidatorConfig(setter_tip_codes=("PP",))
        assert check_back_row_attack(plays, meta, config) == []

    def test_other_attack_codes_not_exempt(self, meta):
        plays = play_log(row(
            skill="Attack", team=HOME, player_number=1, start_zone=4, attack_code="X5",
        ))
        config = ValidatorConfig(setter_tip_codes=("PP",))
        assert messages(check_back_row_attack(plays, meta, config)) == [self.MESSAGE]

    def test_missing_zone_or_team_skipped(self, meta, config):
        plays = play_log(
            row(skill="Attack", team=HOME, player_number=1),
            row(skill="Attack", player_number=1, start_zone=4),
        )
        assert check_back_row_attack(plays, meta, config) == []


class TestFrontRowAttackFromBackZone:
    def test_front_row_player_from_back_zone(self, meta, config):
        plays = play_log(row(skill="Attack", team=HOME, player_number=3, start_zone=6))
        findings = check_front_row_attack_from_back_zone(plays, meta, config)
        assert len(findings) == 1
        assert findings[0].severity is Severity.MODERATE
        assert findings[0].message.startswith("Front-row player made an attack")

    def test_back_row_player_from_back_zone(self, meta, config):
        plays = play_log(row(skill="Attack", team=HOME, player_number=1, start_zone=6))
        assert check_front_row_attack_from_back_zone(plays, meta, config) == []


class TestBackRowBlock:
    def test_back_row_blocker(self, meta, config):
        plays = play_log(
            row(skill="Block", team=HOME, player_number=5),
            row(skill="Block", team=VISITING, player_number=16),
        )
        findings = check_back_row_block(plays, meta, config)
        assert messages(findings) == ["Block by a back-row player"] * 2

    def test_front_row_blocker(self, meta, config):
        plays = play_log(row(skill="Block", team=HOME, player_number=3))
        assert check_back_row_block(plays, meta, config) == []


# ---------------------------------------------------------------------------
# Server and on-court checks
# ---------------------------------------------------------------------------


class TestServerPosition:
    def test_server_in_slot_one(self, meta, config):
        plays = play_log(row(skill="Serve", team=HOME, player_number=1))
        assert check_server_position(plays, meta, config) == []

    def test_server_not_in_slot_one(self, meta, config):
        plays = play_log(row(skill="Serve", team=VISITING, player_number=13))
        assert messages(check_server_position(plays, meta, config)) == [
            "Serving player not in position 1"
        ]

    def test_missing_data_skipped(self, meta, config):
        plays = play_log(
            row(skill="Serve", team=HOME, player_number=2, home_lineup=(None, 2, 3, 4, 5, 6)),
            row(skill="Serve", team=HOME),
        )
        assert check_server_position(plays, meta, config) == []


class TestPlayerOnCourt:
    MESSAGE = "The listed player is not on court in this rotation"

    def test_player_off_court(self, meta, config):
        plays = play_log(row(skill="Dig", team=HOME, player_number=9))
        assert messages(check_player_on_court(plays, meta, config)) == [self.MESSAGE]

    def test_player_on_court(self, meta, config):
        plays = play_log(row(skill="Dig", team=HOME, player_number=4))
        assert check_player_on_court(plays, meta, config) == []

    def test_libero_exempt(self, meta, config):
        plays = play_log(row(skill="Reception", team=HOME, player_number=7))
        assert check_player_on_court(plays, meta, config) == []

    def test_row_without_lineup_skipped(self, meta, config):
        plays = play_log(row(skill="Dig", team=HOME, player_number=9, home_lineup=None))
        assert check_player_on_court(plays, meta, config) == []

    @pytest.mark.parametrize("skill", ["Timeout", "Substitution", "Rotation error"])
    def test_non_playing_rows_skipped(self, meta, config, skill):
        plays = play_log(row(skill=skill, team=HOME, player_number=9))
        assert check_player_on_court(plays, meta, config) == []

    def test_beach_lineup(self, meta, beach_config):
        plays = play_log(
            row(skill="Dig", team=HOME, player_number=2, home_lineup=(1, 2)),
            row(skill="Dig", team=HOME, player_number=3, home_lineup=(1, 2)),
            slots=2,
        )
        findings = check_player_on_court(plays, meta, beach_config)
        assert [f.record.file_line_number for f in findings] == [2]


class TestLiberoSkills:
    @pytest.mark.parametrize("skill,word", [
        ("Serve", "serve"),
        ("Attack", "attack"),
        ("Block", "block"),
    ])
    def test_forbidden_skill(self, meta, config, skill, word):
        plays = play_log(row(skill=skill, team=HOME, player_number=7))
        assert messages(check_libero_skills(plays, meta, config)) == [
            f"Player designated as libero was recorded making a {word}"
        ]

    def test_allowed_skill(self, meta, config):
        plays = play_log(row(skill="Dig", team=VISITING, player_number=17))
        assert check_libero_skills(plays, meta, config) == []

    def test_other_teams_libero_number(self, meta, config):
        # 17 is the visiting libero, not a home player
        plays = play_log(row(skill="Attack", team=HOME, player_number=17))
        assert check_libero_skills(plays, meta, config) == []
