"""Request/response contract for the quest HTTP API — Pydantic v2 models."""

from __future__ import annotations

from typing import Any

from pydantic import BaseModel, Field


class GoalCreate(BaseModel):
    variant: str = Field(description="simple | eternal | checklist")
    name: str
    points: int | None = None  # simple / eternal
    target_count: int | None = None  # checklist
    points_per_event: int | None = None  # checklist
    bonus: int | None = None  # checklist; server default when omitted

    def params(self) -> dict[str, Any]:
        return self.model_dump(exclude={"variant", "name"}, exclude_none=True)


class GoalEntry(BaseModel):
    index: int  # 1-based
    status: str
    goal: dict[str, Any]  # The goal as stored in the goals file


class AchievementResult(BaseModel):
    index: int
    earned: int
    total_score: int
    status: str


class ScoreResponse(BaseModel):
    total_score: int


class PersistResult(BaseModel):
    path: str
    goal_count: int
    found: bool = True  # False when load found no saved goals
