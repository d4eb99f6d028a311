"""Tests for ace coding rules (dvcheck.rules.serve).

A following rotation error is resolved differently by the two checks:
it never makes a serve "should be an ace", and never makes an ace
"should not be an ace".
"""

import pytest

from dvcheck.rules import check_false_ace, check_missing_ace, should_be_ace, should_not_be_ace

from factories import HOME, VISITING, play_log, row


def rally(*rows):
    return list(play_log(*rows))


def serve(evaluation="Positive", won_by=HOME):
    return row(skill="Serve", team=HOME, player_number=1, evaluation=evaluation,
               point_won_by=won_by, point_id=1)


def reception(evaluation="Error", won_by=HOME):
    return row(skill="Reception", team=VISITING, player_number=12, evaluation=evaluation,
               point_won_by=won_by, point_id=1)


def rotation_error(won_by=HOME):
    return row(skill="Rotation error", team=VISITING, point_won_by=won_by, point_id=1)


class TestShouldBeAce:
    def test_reception_error_not_coded_as_ace(self):
        assert should_be_ace(rally(serve(), reception()))

    def test_unreceived_winning_serve(self):
        assert should_be_ace(rally(serve()))

    def test_coded_ace(self):
        assert not should_be_ace(rally(serve("Ace"), reception()))

    def test_reception_kept_in_play(self):
        assert not should_be_ace(rally(serve(), reception("Positive")))

    def test_point_lost(self):
        assert not should_be_ace(rally(serve(won_by=VISITING), reception(won_by=VISITING)))

    def test_rotation_error_is_not_an_ace(self):
        assert not should_be_ace(rally(serve(), rotation_error()))

    def test_rally_continued(self):
        rows = rally(serve(), row(skill="Set", team=VISITING, point_won_by=HOME, point_id=1))
        assert not should_be_ace(rows)

    @pytest.mark.parametrize("serves", [0, 2])
    def test_needs_exactly_one_serve(self, serves):
        rows = [serve() for _ in range(serves)] + [reception()]
        assert should_be_ace(rally(*rows)) is None
        assert should_not_be_ace(rally(*rows)) is None


class TestShouldNotBeAce:
    def test_ace_on_lost_point(self):
        assert should_not_be_ace(rally(serve("Ace", won_by=VISITING)))

    def test_ace_with_reception_kept_in_play(self):
        assert should_not_be_ace(rally(serve("Ace"), reception("Positive")))

    def test_genuine_ace(self):
        assert not should_not_be_ace(rally(serve("Ace"), reception()))

    def test_rotation_error_counts_as_ace(self):
        rows = rally(serve("Ace", won_by=VISITING), rotation_error(won_by=VISITING))
        assert not should_not_be_ace(rows)


class TestAceRules:
    def test_missing_ace_reported_on_serve(self, meta, config):
        plays = play_log(serve(), reception())
        findings = check_missing_ace(plays, meta, config)
        assert [f.message for f in findings] == ["Winning serve not coded as an ace"]
        assert findings[0].record is plays[0]

    def test_false_ace_reported_on_serve(self, meta, config):
        plays = play_log(serve("Ace", won_by=VISITING), reception("Positive", won_by=VISITING))
        findings = check_false_ace(plays, meta, config)
        assert [f.message for f in findings] == ["Non-winning serve was coded as an ace"]
        assert findings[0].record is plays[0]

    def test_consistent_rally(self, meta, config):
        plays = play_log(serve("Ace"), reception())
        assert check_missing_ace(plays, meta, config) == []
        assert check_false_ace(plays, meta, config) == []
