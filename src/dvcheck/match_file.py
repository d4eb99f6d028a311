"""Loader for pre-parsed match documents.

A match document is the upstream parser's output serialised as JSON,
optionally gzip-compressed (``.json.gz``)::

    {
      "meta": {"home_team": "...", "visiting_team": "...",
               "players_h": [...], "players_v": [...]},
      "plays": [{"skill": "Serve", "team": "...", ...}, ...],
      "raw": ["*13SM-...", ...]
    }
"""

import gzip
import json
import logging
from pathlib import Path

from pydantic import BaseModel, ValidationError

from dvcheck.exceptions import InvalidArgument, MatchFileError
from dvcheck.models import MatchMetadata, PlayLog

logger = logging.getLogger(__name__)


class MatchDocument(BaseModel):
    """Top-level shape of a match document. Rows are checked by PlayLog."""

    meta: MatchMetadata
    plays: list[dict]
    raw: list[str] = []


def read_text(path: str | Path) -> str:
    """Read a document, decompressing ``.gz`` files.

    Raises:
        MatchFileError: If the file does not exist or cannot be decoded.
    """
    file_path = Path(path)
    if not file_path.exists():
        raise MatchFileError(f"No match file at {file_path}", path=str(file_path))
    try:
        data = file_path.read_bytes()
        if file_path.suffix == ".gz":
            data = gzip.decompress(data)
        return data.decode("utf-8")
    except (OSError, UnicodeDecodeError) as e:
        raise MatchFileError(
            f"Could not read match file {file_path}: {e}", path=str(file_path)
        ) from e


def load_match(path: str | Path, slots: int = 6) -> tuple[PlayLog, MatchMetadata]:
    """Load a match document into a PlayLog and its MatchMetadata.

    Args:
        path: ``.json`` or ``.json.gz`` file.
        slots: Rotation slots per team the rows must carry (6 indoor,
            2 beach).

    Raises:
        MatchFileError: If the file is missing, not JSON, or does not match
            the document schema.
    """
    text = read_text(path)
    try:
        document = MatchDocument.model_validate(json.loads(text))
    except json.JSONDecodeError as e:
        raise MatchFileError(f"{path} is not valid JSON: {e}", path=str(path)) from e
    except ValidationError as e:
        logger.error("Match file %s failed validation: %s", path, e)
        raise MatchFileError(
            f"{path} is not a valid match document: {e}", path=str(path)
        ) from e

    try:
        plays = PlayLog.from_rows(document.plays, document.raw, slots=slots)
    except InvalidArgument as e:
        raise MatchFileError(f"{path}: {e}", path=str(path)) from e

    logger.info(
        "Loaded %s: %d rows, %d raw lines, %s vs %s",
        path,
        len(plays),
        len(plays.raw_lines),
        document.meta.home_team,
        document.meta.visiting_team,
    )
    return plays, document.meta
