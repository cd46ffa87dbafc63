"""Goal variants — a closed tagged union over Simple, Eternal and Checklist.

Each variant is a plain pydantic model carrying its own fields; behaviour
lives in the module-level functions below, which dispatch on the variant.
Field aliases are the on-disk record keys (see app.quest.codec).
"""

from __future__ import annotations

from typing import Annotated, Literal, Union

from pydantic import BaseModel, ConfigDict, Field

DEFAULT_CHECKLIST_BONUS = 500


class GoalBase(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    # Discriminator; narrowed to a Literal on each variant.
    type: str = Field(alias="Type", frozen=True)
    name: str = Field(alias="Name", min_length=1, frozen=True)
    completed: bool = Field(default=False, alias="IsComplete")


class SimpleGoal(GoalBase):
    """Pays out once, when first completed."""

    type: Literal["SimpleGoal"] = Field(default="SimpleGoal", alias="Type", frozen=True)
    points: int = Field(alias="_points")
    scored: bool = Field(default=False, alias="_scored")


class EternalGoal(GoalBase):
    """Never completes; pays out on every achievement."""

    type: Literal["EternalGoal"] = Field(default="EternalGoal", alias="Type", frozen=True)
    points: int = Field(alias="_points")


class ChecklistGoal(GoalBase):
    """Pays per event, plus a bonus when the target count is reached."""

    type: Literal["ChecklistGoal"] = Field(default="ChecklistGoal", alias="Type", frozen=True)
    points_per_event: int = Field(alias="_pointsPer")
    target_count: int = Field(alias="_targetCount", ge=1)
    completed_count: int = Field(default=0, alias="_completedCount", ge=0)
    bonus: int = Field(default=DEFAULT_CHECKLIST_BONUS, alias="_bonus")


Goal = Annotated[
    Union[SimpleGoal, EternalGoal, ChecklistGoal],
    Field(discriminator="type"),
]


# ---------------------------------------------------------------------------
# Achievement behaviour
# ---------------------------------------------------------------------------


def _record_simple(goal: SimpleGoal) -> int:
    if goal.completed:
        return 0
    goal.completed = True
    if goal.scored:
        # Restored mid-state: points were already paid out before the save.
        return 0
    goal.scored = True
    return goal.points


def _record_eternal(goal: EternalGoal) -> int:
    return goal.points


def _record_checklist(goal: ChecklistGoal) -> int:
    if goal.completed:
        return 0
    goal.completed_count += 1
    earned = goal.points_per_event
    if goal.completed_count >= goal.target_count:
        goal.completed = True
        earned += goal.bonus
    return earned


def record_achievement(goal: Goal) -> int:
    """Apply one achievement event to *goal*; return the points it earned.

    Complete Simple and Checklist goals are left untouched and earn 0.
    """
    if isinstance(goal, SimpleGoal):
        return _record_simple(goal)
    if isinstance(goal, EternalGoal):
        return _record_eternal(goal)
    if isinstance(goal, ChecklistGoal):
        return _record_checklist(goal)
    raise TypeError(f"Unhandled goal variant: {type(goal).__name__}")


# ---------------------------------------------------------------------------
# Display
# ---------------------------------------------------------------------------


def goal_status(goal: Goal) -> str:
    """One-line display string; never parsed back."""
    if isinstance(goal, SimpleGoal):
        return f"[X] {goal.name}" if goal.completed else f"[ ] {goal.name}"
    if isinstance(goal, EternalGoal):
        return f"[ ] {goal.name} (Eternal Goal, +{goal.points} pts each time)"
    if isinstance(goal, ChecklistGoal):
        if goal.completed:
            return f"[X] {goal.name}"
        return f"[ ] {goal.name} (Completed {goal.completed_count}/{goal.target_count})"
    raise TypeError(f"Unhandled goal variant: {type(goal).__name__}")
