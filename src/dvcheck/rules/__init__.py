"""Validation rules for DataVolley play logs.

Each rule wraps a pure check ``(plays, meta, config) -> list[Finding]``.
RULES is the execution order used by the engine::

    from dvcheck.rules import RULES
    findings = [f for rule in RULES if rule.applies(config)
                for f in rule(plays, meta, config)]
"""

from dvcheck.severity import Severity, Strictness

from .base import Check, Rule
from .court import (
    check_back_row_attack,
    check_back_row_block,
    check_front_row_attack_from_back_zone,
    check_libero_skills,
    check_player_on_court,
    check_server_position,
)
from .lineup import (
    check_rotation_changes,
    check_substitution_lineup,
    check_unchanged_substitution,
)
from .roster import check_duplicate_player_ids, check_missing_player_roles
from .scoring import (
    check_error_point_attribution,
    check_point_scores,
    check_score_sequence,
    check_winning_point_attribution,
    score_jump_rows,
)
from .sequence import (
    check_consecutive_player_actions,
    check_missing_blocker_count,
    check_no_block_followed_by_block,
    check_repeated_rows,
)
from .serve import check_false_ace, check_missing_ace, should_be_ace, should_not_be_ace
from .skill_chain import (
    check_attack_type,
    check_block_type,
    check_dig_type,
    check_reception_type,
    check_reception_zones,
)

MAJOR = frozenset({Severity.MAJOR})
MODERATE = frozenset({Severity.MODERATE})
MINOR = frozenset({Severity.MINOR})
TYPED = frozenset({Severity.MODERATE, Severity.MINOR})

RULES: tuple[Rule, ...] = (
    Rule("duplicate_player_ids", check_duplicate_player_ids, MAJOR),
    Rule("missing_player_roles", check_missing_player_roles, MAJOR, indoor_only=True),
    Rule("reception_type", check_reception_type, TYPED),
    Rule("reception_zones", check_reception_zones, MINOR, min_level=Strictness.STRICT),
    Rule("attack_type", check_attack_type, TYPED, min_level=Strictness.STRICT),
    Rule("block_type", check_block_type, TYPED, min_level=Strictness.STRICT),
    Rule("dig_type", check_dig_type, TYPED, min_level=Strictness.STRICT),
    Rule("back_row_attack", check_back_row_attack, MAJOR, indoor_only=True),
    Rule(
        "front_row_attack_from_back_zone",
        check_front_row_attack_from_back_zone,
        MODERATE,
        indoor_only=True,
    ),
    Rule("back_row_block", check_back_row_block, MAJOR, indoor_only=True),
    Rule("missing_ace", check_missing_ace, MAJOR, indoor_only=True),
    Rule("false_ace", check_false_ace, MAJOR, indoor_only=True),
    Rule("server_position", check_server_position, MAJOR, indoor_only=True),
    Rule("missing_blocker_count", check_missing_blocker_count, MINOR),
    Rule("no_block_followed_by_block", check_no_block_followed_by_block, MAJOR),
    Rule("player_on_court", check_player_on_court, MAJOR),
    Rule("libero_skills", check_libero_skills, MAJOR, indoor_only=True),
    Rule("repeated_rows", check_repeated_rows, MAJOR),
    Rule("consecutive_player_actions", check_consecutive_player_actions, MAJOR),
    Rule("error_point_attribution", check_error_point_attribution, MAJOR),
    Rule("winning_point_attribution", check_winning_point_attribution, MAJOR),
    Rule("point_scores", check_point_scores, MAJOR),
    Rule("score_sequence", check_score_sequence, MAJOR),
    Rule("rotation_changes", check_rotation_changes, MAJOR),
    Rule("unchanged_substitution", check_unchanged_substitution, MAJOR),
    Rule("substitution_lineup", check_substitution_lineup, MAJOR),
)

__all__ = [
    "Check",
    "RULES",
    "Rule",
    "check_attack_type",
    "check_back_row_attack",
    "check_back_row_block",
    "check_block_type",
    "check_consecutive_player_actions",
    "check_dig_type",
    "check_duplicate_player_ids",
    "check_error_point_attribution",
    "check_false_ace",
    "check_front_row_attack_from_back_zone",
    "check_libero_skills",
    "check_missing_ace",
    "check_missing_blocker_count",
    "check_missing_player_roles",
    "check_no_block_followed_by_block",
    "check_player_on_court",
    "check_point_scores",
    "check_reception_type",
    "check_reception_zones",
    "check_repeated_rows",
    "check_rotation_changes",
    "check_score_sequence",
    "check_server_position",
    "check_substitution_lineup",
    "check_unchanged_substitution",
    "check_winning_point_attribution",
    "score_jump_rows",
    "should_be_ace",
    "should_not_be_ace",
]
