"""Validation engine: resolve configuration, run the rules, report.

Usage::

    from dvcheck.engine import validate

    diagnostics = validate(plays, meta, validation_level=2,
                           options={"setter_tip_codes": ["PP"]})
    for d in diagnostics:
        print(d.file_line_number, d.message)
"""

import dataclasses
import logging
from collections.abc import Iterable, Mapping, Sequence
from concurrent.futures import ThreadPoolExecutor

from pydantic import ValidationError

from dvcheck.config import FILE_TYPES, ValidationOptions, ValidatorConfig
from dvcheck.exceptions import InvalidArgument
from dvcheck.models import Diagnostic, MatchMetadata, PlayLog
from dvcheck.reporter import VideoTimeFn, build_report
from dvcheck.rules import RULES, Rule
from dvcheck.severity import Finding, Strictness
from dvcheck.timecode import video_time_from_raw

logger = logging.getLogger(__name__)


def resolve_config(
    validation_level: int = 2,
    options: Mapping | None = None,
    file_type: str = "indoor",
    max_workers: int = 1,
) -> ValidatorConfig:
    """Check the caller's arguments and build a ValidatorConfig.

    Raises:
        InvalidArgument: If any argument is out of range or malformed.
    """
    if (
        isinstance(validation_level, bool)
        or not isinstance(validation_level, int)
        or validation_level not in range(Strictness.OFF, Strictness.STRICT + 1)
    ):
        raise InvalidArgument(
            f"validation_level must be an integer 0-3, got {validation_level!r}",
            argument="validation_level",
        )

    if not isinstance(file_type, str) or file_type.strip().lower() not in FILE_TYPES:
        raise InvalidArgument(
            f"file_type must be one of {list(FILE_TYPES)}, got {file_type!r}",
            argument="file_type",
        )

    if options is None:
        options = {}
    if not isinstance(options, Mapping):
        raise InvalidArgument(
            f"options must be a mapping, got {type(options).__name__}",
            argument="options",
        )
    try:
        parsed = ValidationOptions.model_validate(dict(options))
    except ValidationError as e:
        logger.error("Invalid validation options %r: %s", options, e)
        raise InvalidArgument(f"Invalid options: {e}", argument="options") from e

    if isinstance(max_workers, bool) or not isinstance(max_workers, int) or max_workers < 1:
        raise InvalidArgument(
            f"max_workers must be a positive integer, got {max_workers!r}",
            argument="max_workers",
        )

    return ValidatorConfig(
        validation_level=int(validation_level),
        file_type=file_type.strip().lower(),
        setter_tip_codes=parsed.setter_tip_codes,
        max_workers=max_workers,
    )


def _as_play_log(
    play_log, config: ValidatorConfig, raw_lines: Iterable[str] | None = None
) -> PlayLog:
    if isinstance(play_log, PlayLog):
        if raw_lines is None:
            return play_log
        return dataclasses.replace(play_log, raw_lines=tuple(raw_lines))
    if isinstance(play_log, Sequence) and not isinstance(play_log, (str, bytes)):
        lines = () if raw_lines is None else raw_lines
        return PlayLog.from_rows(play_log, lines, slots=config.slot_count)
    raise InvalidArgument(
        f"play_log must be a PlayLog or a sequence of rows, got {type(play_log).__name__}",
        argument="play_log",
    )


def _as_metadata(roster_metadata) -> MatchMetadata:
    if isinstance(roster_metadata, MatchMetadata):
        return roster_metadata
    if not isinstance(roster_metadata, Mapping):
        raise InvalidArgument(
            "roster_metadata must be MatchMetadata or a mapping, "
            f"got {type(roster_metadata).__name__}",
            argument="roster_metadata",
        )
    try:
        return MatchMetadata.model_validate(dict(roster_metadata))
    except ValidationError as e:
        logger.error("Invalid roster metadata: %s", e)
        raise InvalidArgument(
            f"Invalid roster metadata: {e}", argument="roster_metadata"
        ) from e


def run_rules(
    plays: PlayLog,
    meta: MatchMetadata,
    config: ValidatorConfig,
    rules: Sequence[Rule] = RULES,
) -> list[Finding]:
    """Run every rule that applies to ``config``, in order.

    Rules share no state, so with ``config.max_workers > 1`` they are
    mapped over a thread pool; the concatenation order is unchanged.
    """
    active = [rule for rule in rules if rule.applies(config)]
    logger.debug(
        "Running %d of %d rules (level=%d, file_type=%s)",
        len(active),
        len(rules),
        config.validation_level,
        config.file_type,
    )

    if config.max_workers > 1:
        with ThreadPoolExecutor(max_workers=config.max_workers) as pool:
            results = list(pool.map(lambda rule: rule(plays, meta, config), active))
    else:
        results = [rule(plays, meta, config) for rule in active]

    findings: list[Finding] = []
    for rule, found in zip(active, results):
        if found:
            logger.debug("Rule %s: %d findings", rule.name, len(found))
        findings.extend(found)
    return findings


def validate(
    play_log,
    roster_metadata,
    validation_level: int = 2,
    options: Mapping | None = None,
    file_type: str = "indoor",
    *,
    raw_lines: Iterable[str] | None = None,
    video_time_fn: VideoTimeFn = video_time_from_raw,
    max_workers: int = 1,
) -> list[Diagnostic]:
    """Validate a play log against itself and the team rosters.

    Args:
        play_log: A PlayLog, or a sequence of row mappings.
        roster_metadata: MatchMetadata, or a mapping with ``home_team``,
            ``visiting_team``, ``players_h`` and ``players_v``.
        validation_level: 0 (off) to 3 (report minor issues too).
        options: Optional mapping; ``setter_tip_codes`` lists attack codes
            a back-row player may play from a front-row zone.
        file_type: ``"indoor"`` or ``"beach"``.
        raw_lines: Source scout lines, indexed by ``file_line_number``.
            Needed to annotate diagnostics when ``play_log`` is a sequence
            of rows; replaces the lines of a PlayLog when given.
        video_time_fn: Derives a video time from a raw scout line.
        max_workers: Threads used to run the rules.

    Returns:
        Diagnostics in rule execution order. Empty at level 0.

    Raises:
        InvalidArgument: On bad configuration or missing play-log columns.
    """
    config = resolve_config(validation_level, options, file_type, max_workers)
    plays = _as_play_log(play_log, config, raw_lines)
    meta = _as_metadata(roster_metadata)

    if config.validation_level == Strictness.OFF:
        return []

    logger.info(
        "Validating %d rows (level=%d, file_type=%s, setter_tip_codes=%s)",
        len(plays),
        config.validation_level,
        config.file_type,
        list(config.setter_tip_codes),
    )
    findings = run_rules(plays, meta, config)
    diagnostics = build_report(findings, plays, config.validation_level, video_time_fn)
    logger.info("Validation reported %d issues", len(diagnostics))
    return diagnostics
