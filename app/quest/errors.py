"""Quest error taxonomy.

Every error raised by the quest core derives from QuestError so the HTTP
router and the CLI can report them uniformly.
"""

from __future__ import annotations


class QuestError(Exception):
    """Base class for quest errors."""


class ParseError(QuestError, ValueError):
    """Malformed numeric input coming from the boundary layer."""

    def __init__(self, field: str, raw: str):
        self.field = field
        self.raw = raw
        super().__init__(f"Invalid number for '{field}': {raw!r}")


class OutOfRangeError(QuestError, IndexError):
    """Goal index outside 1..len(goals)."""

    def __init__(self, index: int, size: int):
        self.index = index
        self.size = size
        if size == 0:
            msg = f"No goal #{index}: there are no goals yet"
        else:
            msg = f"No goal #{index}: choose a number between 1 and {size}"
        super().__init__(msg)


class UnknownVariantError(QuestError):
    """Unrecognised goal type discriminator."""

    def __init__(self, tag: object, position: int | None = None):
        self.tag = tag
        self.position = position
        where = f" (record {position})" if position is not None else ""
        super().__init__(f"Unknown goal type: {tag!r}{where}")


class InvalidVariantError(UnknownVariantError):
    """Unrecognised variant name passed to add_goal."""


class GoalValidationError(QuestError, ValueError):
    """Goal parameters rejected by the variant model."""


class GoalFileError(QuestError):
    """Goals file could not be read or written."""


class CorruptGoalFileError(GoalFileError):
    """Goals file content is not a valid goal collection."""
