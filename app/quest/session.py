"""Quest session — the goal collection and score ledger for one user.

All state lives on a QuestSession instance that callers pass around
explicitly; there is no module-level goal list or score.
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Any, Iterator

from pydantic import ValidationError

from app.config import settings
from app.quest import codec, recorder
from app.quest.errors import GoalValidationError, InvalidVariantError, OutOfRangeError, QuestError
from app.quest.goals import ChecklistGoal, EternalGoal, Goal, SimpleGoal, goal_status
from app.quest.ledger import ScoreLedger

logger = logging.getLogger(__name__)

# Menu name → (model, accepted keyword parameters)
VARIANTS: dict[str, tuple[type, frozenset[str]]] = {
    "simple": (SimpleGoal, frozenset({"points"})),
    "eternal": (EternalGoal, frozenset({"points"})),
    "checklist": (ChecklistGoal, frozenset({"target_count", "points_per_event", "bonus"})),
}


def resolve_variant(variant: str) -> str:
    """Normalise a variant name; accepts "simple" as well as "SimpleGoal"."""
    key = variant.strip().lower()
    if key.endswith("goal"):
        key = key[: -len("goal")]
    if key not in VARIANTS:
        raise InvalidVariantError(variant)
    return key


class GoalListing:
    """Numbered view over a session's goals.

    Each iteration walks the collection as it is at that moment, yielding
    ``(index, status)`` pairs numbered from 1.
    """

    def __init__(self, goals: list[Goal]):
        self._goals = goals

    def __iter__(self) -> Iterator[tuple[int, str]]:
        for index, goal in enumerate(self._goals, start=1):
            yield index, goal_status(goal)

    def __len__(self) -> int:
        return len(self._goals)


class QuestSession:
    def __init__(self, goals_file: str | Path | None = None, goals: list[Goal] | None = None):
        self.goals_file = Path(goals_file if goals_file is not None else settings.goals_file)
        self._goals: list[Goal] = list(goals or [])
        self._ledger = ScoreLedger()

    def __len__(self) -> int:
        return len(self._goals)

    @property
    def goals(self) -> tuple[Goal, ...]:
        return tuple(self._goals)

    @property
    def score(self) -> int:
        return self._ledger.total

    # -- goals --------------------------------------------------------------

    def add_goal(self, variant: str, name: str, **params: Any) -> Goal:
        key = resolve_variant(variant)
        model, accepted = VARIANTS[key]
        params = {k: v for k, v in params.items() if v is not None}

        unexpected = sorted(set(params) - accepted)
        if unexpected:
            raise GoalValidationError(
                f"Unexpected parameter(s) for {key} goal: {', '.join(unexpected)}"
            )
        if key == "checklist" and "bonus" not in params:
            params["bonus"] = settings.checklist_default_bonus

        try:
            goal = model(name=name, **params)
        except ValidationError as exc:
            raise GoalValidationError(_describe(exc)) from exc

        self._goals.append(goal)
        logger.info("Added %s #%d: %r", goal.type, len(self._goals), goal.name)
        return goal

    def get_goal(self, index: int) -> Goal:
        """Return the goal at 1-based *index*."""
        if not 1 <= index <= len(self._goals):
            raise OutOfRangeError(index, len(self._goals))
        return self._goals[index - 1]

    def list_goals(self) -> GoalListing:
        return GoalListing(self._goals)

    def record_achievement(self, index: int) -> int:
        goal = self.get_goal(index)
        earned = recorder.record(goal)
        total = self._ledger.add(earned)
        logger.info("Goal #%d %r: +%d points (total %d)", index, goal.name, earned, total)
        return earned

    # -- persistence --------------------------------------------------------

    def save_goals(self, path: str | Path | None = None) -> Path:
        target = Path(path) if path is not None else self.goals_file
        codec.save_goals(self._goals, target)
        return target

    def load_goals(self, path: str | Path | None = None) -> bool:
        """Replace the collection with the goals stored at *path*.

        Returns False when the file does not exist; the collection is then
        emptied. Decoding errors propagate and leave the session untouched.
        The score ledger restarts from zero after every successful load.
        """
        source = Path(path) if path is not None else self.goals_file
        try:
            loaded = codec.load_goals(source)
            found = True
        except FileNotFoundError:
            logger.info("No saved goals at %s", source)
            loaded = []
            found = False
        except QuestError as exc:
            logger.warning("Load from %s aborted, keeping %d goal(s): %s", source, len(self._goals), exc)
            raise

        # In-place so existing GoalListing views follow the new collection
        self._goals[:] = loaded
        self._ledger.reset()
        return found


def _describe(exc: ValidationError) -> str:
    parts = []
    for err in exc.errors():
        field = ".".join(str(p) for p in err["loc"]) or "goal"
        parts.append(f"{field}: {err['msg']}")
    return "; ".join(parts)
