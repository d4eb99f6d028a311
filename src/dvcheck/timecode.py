"""Video time extraction from raw DataVolley scout lines.

A scout line is semicolon-separated; the 13th field holds the video time
in whole or fractional seconds, e.g.::

    *13SM-~~~~~~~~~;;;;;;;10.54.47;1;3;6;1;4162;;9;4;1;3;...
                                           ^^^^ video time
"""

import logging
import math
from datetime import timedelta

logger = logging.getLogger(__name__)

VIDEO_TIME_FIELD = 12  # 0-based


def video_time_from_raw(raw_line: str | None) -> timedelta | None:
    """Return the video time recorded on ``raw_line``.

    Returns None if the line is missing, too short, or the field is blank,
    non-numeric or out of range.
    """
    if not raw_line:
        return None
    fields = raw_line.split(";")
    if len(fields) <= VIDEO_TIME_FIELD:
        return None
    value = fields[VIDEO_TIME_FIELD].strip()
    if not value:
        return None
    try:
        seconds = float(value)
    except ValueError:
        logger.debug("Non-numeric video time %r", value)
        return None
    if not math.isfinite(seconds) or seconds < 0:
        return None
    try:
        return timedelta(seconds=seconds)
    except OverflowError:
        logger.debug("Video time out of range %r", value)
        return None
