"""Shared fixtures for the test suite."""

from __future__ import annotations

from pathlib import Path

import pytest
from httpx import ASGITransport, AsyncClient

from app.main import create_app
from app.quest.goals import ChecklistGoal, EternalGoal, SimpleGoal
from app.quest.session import QuestSession


# ---------------------------------------------------------------------------
# Goals file / session (no shared state between tests)
# ---------------------------------------------------------------------------

@pytest.fixture()
def goals_path(tmp_path: Path) -> Path:
    return tmp_path / "goals.json"


@pytest.fixture()
def session(goals_path: Path) -> QuestSession:
    return QuestSession(goals_path)


@pytest.fixture()
def mixed_goals() -> list:
    """One of each variant, with some progress already made."""
    return [
        SimpleGoal(name="Read scriptures", points=100, completed=True, scored=True),
        EternalGoal(name="Journal", points=25),
        ChecklistGoal(name="Temple", target_count=5, points_per_event=50, bonus=500, completed_count=2),
        SimpleGoal(name="Run a marathon", points=1000),
    ]


# ---------------------------------------------------------------------------
# HTTP
# ---------------------------------------------------------------------------

@pytest.fixture()
def app(session: QuestSession):
    return create_app(session)


@pytest.fixture()
async def client(app):
    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://test") as ac:
        yield ac
