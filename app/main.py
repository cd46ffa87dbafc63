import logging
from contextlib import asynccontextmanager
from typing import AsyncIterator

from fastapi import FastAPI

from app.config import settings
from app.logging_config import setup_logging
from app.quest.errors import QuestError
from app.quest.router import router as quest_router
from app.quest.session import QuestSession

logger = logging.getLogger(__name__)


def create_app(session: QuestSession | None = None) -> FastAPI:
    """Build the API around *session* (a fresh one on settings.goals_file by default)."""
    quest_session = session if session is not None else QuestSession()

    @asynccontextmanager
    async def lifespan(app: FastAPI) -> AsyncIterator[None]:
        setup_logging(settings.log_level)
        if settings.autoload_goals:
            try:
                quest_session.load_goals()
            except QuestError as exc:
                logger.error("Could not load %s, starting empty: %s", quest_session.goals_file, exc)
        logger.info("Quest API started with %d goal(s).", len(quest_session))
        yield
        logger.info("Quest API shutting down.")

    app = FastAPI(title="EternalQuest", version="0.1.0", lifespan=lifespan)
    app.state.quest_session = quest_session
    app.include_router(quest_router)

    @app.get("/")
    async def root() -> dict:
        return {
            "status": "ok",
            "docs": "/docs",
            "health": "/health",
            "quest": {
                "goals": "/quest/goals",
                "achievements": "/quest/goals/{index}/achievements",
                "score": "/quest/score",
                "save": "/quest/save",
                "load": "/quest/load",
            },
        }

    @app.get("/health")
    async def health() -> dict[str, str]:
        return {"status": "ok"}

    return app


app = create_app()
