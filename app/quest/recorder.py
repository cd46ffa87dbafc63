"""Achievement recorder — one event against one goal."""

from __future__ import annotations

import logging

from app.quest.goals import Goal, record_achievement

logger = logging.getLogger(__name__)


def record(goal: Goal) -> int:
    """Record an achievement on *goal* and return the score delta."""
    earned = record_achievement(goal)
    logger.debug("Achievement on %s %r earned %d", goal.type, goal.name, earned)
    return earned
