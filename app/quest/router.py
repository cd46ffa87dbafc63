"""Quest HTTP router — goals, achievements, score, save/load."""

from __future__ import annotations

from fastapi import APIRouter, Depends, HTTPException, Request

from app.auth import verify_api_key
from app.quest.errors import (
    GoalFileError,
    GoalValidationError,
    InvalidVariantError,
    OutOfRangeError,
    UnknownVariantError,
)
from app.quest.goals import Goal, goal_status
from app.quest.schemas import (
    AchievementResult,
    GoalCreate,
    GoalEntry,
    PersistResult,
    ScoreResponse,
)
from app.quest.session import QuestSession

router = APIRouter(prefix="/quest", tags=["quest"])


def get_quest_session(request: Request) -> QuestSession:
    session = getattr(request.app.state, "quest_session", None)
    if session is None:
        raise RuntimeError("Quest session not initialised — app not built via create_app().")
    return session


def _entry(index: int, goal: Goal) -> GoalEntry:
    return GoalEntry(index=index, status=goal_status(goal), goal=goal.model_dump(by_alias=True))


# ---------------------------------------------------------------------------
# /quest/goals
# ---------------------------------------------------------------------------


@router.get("/goals", response_model=list[GoalEntry])
async def goals_list(
    session: QuestSession = Depends(get_quest_session),
    _: str = Depends(verify_api_key),
) -> list[GoalEntry]:
    return [_entry(i, g) for i, g in enumerate(session.goals, start=1)]


@router.post("/goals", response_model=GoalEntry, status_code=201)
async def goals_add(
    body: GoalCreate,
    session: QuestSession = Depends(get_quest_session),
    _: str = Depends(verify_api_key),
) -> GoalEntry:
    try:
        goal = session.add_goal(body.variant, body.name, **body.params())
    except (InvalidVariantError, GoalValidationError) as exc:
        raise HTTPException(status_code=422, detail=str(exc))
    return _entry(len(session), goal)


@router.post("/goals/{index}/achievements", response_model=AchievementResult)
async def goals_record(
    index: int,
    session: QuestSession = Depends(get_quest_session),
    _: str = Depends(verify_api_key),
) -> AchievementResult:
    try:
        earned = session.record_achievement(index)
    except OutOfRangeError as exc:
        raise HTTPException(status_code=404, detail=str(exc))
    return AchievementResult(
        index=index,
        earned=earned,
        total_score=session.score,
        status=goal_status(session.get_goal(index)),
    )


# ---------------------------------------------------------------------------
# /quest/score, /quest/save, /quest/load
# ---------------------------------------------------------------------------


@router.get("/score", response_model=ScoreResponse)
async def score(
    session: QuestSession = Depends(get_quest_session),
    _: str = Depends(verify_api_key),
) -> ScoreResponse:
    return ScoreResponse(total_score=session.score)


# save/load are plain functions so the file I/O runs in the threadpool

@router.post("/save", response_model=PersistResult)
def save(
    session: QuestSession = Depends(get_quest_session),
    _: str = Depends(verify_api_key),
) -> PersistResult:
    try:
        path = session.save_goals()
    except GoalFileError as exc:
        raise HTTPException(status_code=500, detail=str(exc))
    return PersistResult(path=str(path), goal_count=len(session))


@router.post("/load", response_model=PersistResult)
def load(
    session: QuestSession = Depends(get_quest_session),
    _: str = Depends(verify_api_key),
) -> PersistResult:
    try:
        found = session.load_goals()
    except (UnknownVariantError, GoalFileError) as exc:
        raise HTTPException(status_code=422, detail=str(exc))
    return PersistResult(path=str(session.goals_file), goal_count=len(session), found=found)
