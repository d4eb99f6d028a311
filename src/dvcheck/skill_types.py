"""Skill-type label table for dependent-skill chains.

A skill type label is a qualifier followed by the skill's label suffix,
e.g. ``"Jump-float serve"`` -> qualifier ``"Jump-float"`` + ``"serve"``.
A dependent skill (reception after serve, attack after set, ...) must carry
the same qualifier as the skill it depends on::

    Jump-float serve        ->  Jump-float serve reception
    High ball set           ->  High ball attack
    High ball attack        ->  High ball block / High ball dig

Each skill also has an ``Unknown <suffix> type`` placeholder, whose
qualifier is UNKNOWN. Labels outside the table still chain when the
dependent label is the source label with its suffix swapped.
"""

from enum import Enum

from dvcheck.models import Skill

UNKNOWN = "Unknown"

SERVE_QUALIFIERS = frozenset({
    "Jump",
    "Jump-float",
    "Float",
    "Topspin",
    "Hybrid",
})

BALL_QUALIFIERS = frozenset({
    "High ball",
    "Half ball",
    "Quick ball",
    "Head ball",
    "Tense ball",
    "Super ball",
    "Fast ball",
    "Slide ball",
    "Other",
})

# skill -> (label suffix, qualifier family)
SKILL_LABELS: dict[Skill, tuple[str, frozenset[str]]] = {
    Skill.SERVE: ("serve", SERVE_QUALIFIERS),
    Skill.RECEPTION: ("serve reception", SERVE_QUALIFIERS),
    Skill.SET: ("set", BALL_QUALIFIERS),
    Skill.ATTACK: ("attack", BALL_QUALIFIERS),
    Skill.BLOCK: ("block", BALL_QUALIFIERS),
    Skill.DIG: ("dig", BALL_QUALIFIERS),
}


class TypeMatch(Enum):
    MATCH = "match"
    MISMATCH = "mismatch"


def label_suffix(skill: Skill) -> str:
    return SKILL_LABELS[skill][0]


def unknown_label(skill: Skill) -> str:
    """Placeholder label, e.g. ``Unknown serve reception type``."""
    return f"{UNKNOWN} {label_suffix(skill)} type"


def qualifier(label: str | None, skill: Skill) -> str | None:
    """Split the qualifier off a ``skill`` type label.

    Returns UNKNOWN for the placeholder label and None when the label is
    not a recognised type for ``skill``.
    """
    if label is None:
        return None
    suffix, family = SKILL_LABELS[skill]
    if label == unknown_label(skill):
        return UNKNOWN
    # suffixes may span two words ("serve reception")
    if label.endswith(" " + suffix):
        head = label[: -len(suffix) - 1]
        if head in family:
            return head
    return None


def is_recognised(label: str | None, skill: Skill) -> bool:
    return qualifier(label, skill) is not None


def is_unknown(label: str | None, skill: Skill) -> bool:
    return label is not None and label == unknown_label(skill)


def dependent_label(source_label: str | None, source: Skill, dependent: Skill) -> str | None:
    """Label a ``dependent`` row should carry after ``source_label``.

    The source suffix is swapped for the dependent one, whatever the
    qualifier: ``"Other serve"`` -> ``"Other serve reception"``. Returns
    None when ``source_label`` does not end in the source suffix.
    """
    suffix = label_suffix(source)
    if source_label is None or not source_label.endswith(" " + suffix):
        return None
    return source_label[: -len(suffix)] + label_suffix(dependent)


def compare(
    source_label: str, source: Skill, label: str, dependent: Skill
) -> TypeMatch:
    """Compare a dependent skill's type ``label`` against its source's.

    The labels match when the dependent label is the source label with its
    suffix swapped, or when both carry the same qualifier from the table
    (which also pairs the ``Unknown ... type`` placeholders).
    """
    if label == dependent_label(source_label, source, dependent):
        return TypeMatch.MATCH
    source_q = qualifier(source_label, source)
    if source_q is not None and source_q == qualifier(label, dependent):
        return TypeMatch.MATCH
    return TypeMatch.MISMATCH
