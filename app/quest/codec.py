"""Goals file codec.

File layout: a JSON array, one object per goal, each tagged with a ``Type``
discriminator followed by the variant's own keys::

    [
      {"Type": "SimpleGoal", "Name": "Read", "IsComplete": false,
       "_points": 100, "_scored": false},
      {"Type": "ChecklistGoal", "Name": "Run", "IsComplete": false,
       "_pointsPer": 50, "_targetCount": 3, "_completedCount": 1, "_bonus": 500}
    ]

Progress fields (IsComplete, _scored, _completedCount) are restored verbatim.
Decoding is all-or-nothing: any bad record fails the whole collection.
"""

from __future__ import annotations

import codecs
import logging
from pathlib import Path
from typing import Sequence

from pydantic import TypeAdapter, ValidationError

from app.quest.errors import CorruptGoalFileError, GoalFileError, UnknownVariantError
from app.quest.goals import Goal

logger = logging.getLogger(__name__)

_COLLECTION = TypeAdapter(list[Goal])

# pydantic error types raised by the discriminated union for a bad tag
_TAG_ERRORS = {"union_tag_invalid", "union_tag_not_found"}


def _record_position(loc: tuple) -> int | None:
    if loc and isinstance(loc[0], int):
        return loc[0]
    return None


def _translate(exc: ValidationError) -> Exception:
    errors = exc.errors()
    for err in errors:
        if err["type"] in _TAG_ERRORS:
            tag = err.get("ctx", {}).get("tag")
            return UnknownVariantError(tag, _record_position(err["loc"]))

    first = errors[0]
    loc = ".".join(str(part) for part in first["loc"]) or "<root>"
    return CorruptGoalFileError(
        f"Invalid goals data at {loc}: {first['msg']} ({len(errors)} error(s))"
    )


def encode_goals(goals: Sequence[Goal]) -> str:
    return _COLLECTION.dump_json(list(goals), by_alias=True, indent=2).decode("utf-8")


def decode_goals(text: str | bytes) -> list[Goal]:
    """Decode a goals document.

    Validation is strict: values must already have their JSON types, so
    ``"IsComplete": "yes"`` or ``"_points": "100"`` are rejected. A leading
    UTF-8 byte-order mark is ignored.

    Raises UnknownVariantError for an unrecognised or missing ``Type`` and
    CorruptGoalFileError for anything else that does not validate.
    """
    if isinstance(text, bytes):
        text = text.removeprefix(codecs.BOM_UTF8)
    else:
        text = text.removeprefix("\ufeff")
    try:
        return _COLLECTION.validate_json(text, strict=True)
    except ValidationError as exc:
        raise _translate(exc) from exc


def save_goals(goals: Sequence[Goal], path: str | Path) -> None:
    """Overwrite *path* with the full collection."""
    path = Path(path)
    try:
        path.write_text(encode_goals(goals) + "\n", encoding="utf-8")
    except OSError as exc:
        raise GoalFileError(f"Could not write {path}: {exc}") from exc
    logger.info("Saved %d goal(s) to %s", len(goals), path)


def load_goals(path: str | Path) -> list[Goal]:
    """Read and decode *path*.

    FileNotFoundError propagates unchanged; callers decide what a missing
    file means.
    """
    path = Path(path)
    try:
        raw = path.read_bytes()
    except FileNotFoundError:
        raise
    except OSError as exc:
        raise GoalFileError(f"Could not read {path}: {exc}") from exc

    goals = decode_goals(raw)
    logger.info("Loaded %d goal(s) from %s", len(goals), path)
    return goals
