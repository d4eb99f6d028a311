"""Tests for roster-level rules (dvcheck.rules.roster)."""

from dvcheck.rules import check_duplicate_player_ids, check_missing_player_roles
from dvcheck.severity import Severity

from factories import meta, meta_dict, play_log


def _with_home_players(*players):
    values = meta_dict()
    return meta(players_h=values["players_h"] + list(players))


class TestDuplicatePlayerIds:
    def test_clean_roster(self, config):
        assert check_duplicate_player_ids(play_log(), meta(), config) == []

    def test_duplicate_id(self, config):
        roster_meta = _with_home_players(
            {"player_id": "H01", "number": 9, "name": "Home 9", "role": "setter"},
        )
        findings = check_duplicate_player_ids(play_log(), roster_meta, config)
        assert [f.message for f in findings] == [
            "Home team (Lions) players Home 1 [jersey number 1], Home 9 "
            "[jersey number 9] have the same player ID (H01)"
        ]
        assert findings[0].severity is Severity.MAJOR
        assert findings[0].record is None

    def test_missing_ids_not_duplicates(self, config):
        roster_meta = _with_home_players(
            {"number": 9, "name": "Home 9", "role": "setter"},
            {"number": 10, "name": "Home 10", "role": "setter"},
        )
        assert check_duplicate_player_ids(play_log(), roster_meta, config) == []


class TestMissingPlayerRoles:
    def test_one_player(self, config):
        values = meta_dict()
        values["players_v"][1]["role"] = None
        findings = check_missing_player_roles(play_log(), meta(**values), config)
        assert [f.message for f in findings] == [
            "Visiting team (Tigers) player Visiting 12 has no position "
            "(opposite/outside/etc) assigned in the players list"
        ]

    def test_several_players(self, config):
        roster_meta = _with_home_players(
            {"player_id": "H09", "number": 9, "name": "Home 9"},
            {"player_id": "H10", "number": 10, "name": "Home 10", "role": ""},
        )
        findings = check_missing_player_roles(play_log(), roster_meta, config)
        assert [f.message for f in findings] == [
            "Home team (Lions) players Home 9, Home 10 have no position "
            "(opposite/outside/etc) assigned in the players list"
        ]
