"""Tests for QuestSession — goal operations, ledger, save/load."""

from __future__ import annotations

import json

import pytest

from app.config import settings
from app.quest.errors import (
    CorruptGoalFileError,
    GoalValidationError,
    InvalidVariantError,
    OutOfRangeError,
    UnknownVariantError,
)
from app.quest.goals import ChecklistGoal, EternalGoal, SimpleGoal
from app.quest.ledger import ScoreLedger
from app.quest.session import QuestSession, resolve_variant


# ---------------------------------------------------------------------------
# add_goal
# ---------------------------------------------------------------------------

class TestAddGoal:
    def test_add_each_variant(self, session):
        session.add_goal("simple", "Read", points=100)
        session.add_goal("eternal", "Pray", points=25)
        session.add_goal("checklist", "Run", target_count=3, points_per_event=50, bonus=200)
        assert [type(g) for g in session.goals] == [SimpleGoal, EternalGoal, ChecklistGoal]
        assert session.goals[2].bonus == 200

    def test_checklist_default_bonus_from_settings(self, session, monkeypatch):
        monkeypatch.setattr(settings, "checklist_default_bonus", 750)
        goal = session.add_goal("checklist", "Run", target_count=3, points_per_event=50)
        assert goal.bonus == 750

    @pytest.mark.parametrize("variant", ["Simple", "SIMPLE", " simple ", "SimpleGoal"])
    def test_variant_name_forms(self, variant):
        assert resolve_variant(variant) == "simple"

    def test_invalid_variant(self, session):
        with pytest.raises(InvalidVariantError):
            session.add_goal("negative", "Snack", points=-10)
        assert len(session) == 0

    def test_invalid_variant_is_unknown_variant(self, session):
        with pytest.raises(UnknownVariantError):
            session.add_goal("bogus", "x", points=1)

    def test_missing_points(self, session):
        with pytest.raises(GoalValidationError):
            session.add_goal("simple", "Read")

    def test_empty_name(self, session):
        with pytest.raises(GoalValidationError):
            session.add_goal("eternal", "", points=5)

    def test_unexpected_parameter(self, session):
        with pytest.raises(GoalValidationError, match="target_count"):
            session.add_goal("simple", "Read", points=5, target_count=3)

    def test_none_parameters_ignored(self, session):
        goal = session.add_goal("simple", "Read", points=5, bonus=None)
        assert goal.points == 5


# ---------------------------------------------------------------------------
# list_goals
# ---------------------------------------------------------------------------

class TestListGoals:
    def test_one_based(self, session):
        session.add_goal("simple", "Read", points=100)
        session.add_goal("eternal", "Pray", points=25)
        assert list(session.list_goals()) == [
            (1, "[ ] Read"),
            (2, "[ ] Pray (Eternal Goal, +25 pts each time)"),
        ]

    def test_restartable(self, session):
        session.add_goal("simple", "Read", points=100)
        listing = session.list_goals()
        assert list(listing) == list(listing)

    def test_reflects_current_state(self, session):
        listing = session.list_goals()
        assert list(listing) == []
        session.add_goal("simple", "Read", points=100)
        session.record_achievement(1)
        assert list(listing) == [(1, "[X] Read")]
        assert len(listing) == 1

    def test_follows_load(self, session, mixed_goals, goals_path):
        QuestSession(goals_path, mixed_goals).save_goals()
        listing = session.list_goals()
        session.load_goals()
        assert len(list(listing)) == len(mixed_goals)


# ---------------------------------------------------------------------------
# record_achievement + ledger
# ---------------------------------------------------------------------------

class TestRecordAchievement:
    def test_simple_scenario(self, session):
        session.add_goal("simple", "Read", points=100)
        assert [session.record_achievement(1), session.record_achievement(1)] == [100, 0]
        assert session.score == 100

    def test_checklist_scenario(self, session):
        session.add_goal("checklist", "Run", target_count=3, points_per_event=50, bonus=500)
        assert [session.record_achievement(1) for _ in range(3)] == [50, 50, 550]
        assert list(session.list_goals()) == [(1, "[X] Run")]
        assert session.score == 650

    def test_ledger_accumulates_across_goals(self, session):
        session.add_goal("eternal", "Pray", points=25)
        session.add_goal("simple", "Read", points=100)
        session.record_achievement(1)
        session.record_achievement(2)
        session.record_achievement(1)
        assert session.score == 150

    @pytest.mark.parametrize("index", [0, -1, 2, 99])
    def test_out_of_range(self, session, index):
        session.add_goal("eternal", "Pray", points=25)
        with pytest.raises(OutOfRangeError):
            session.record_achievement(index)
        assert session.score == 0

    def test_out_of_range_on_empty(self, session):
        with pytest.raises(OutOfRangeError, match="no goals"):
            session.record_achievement(1)

    def test_score_is_read_only(self, session):
        with pytest.raises(AttributeError):
            session.score = 10


class TestScoreLedger:
    def test_starts_at_zero(self):
        assert ScoreLedger().total == 0

    def test_add_and_reset(self):
        ledger = ScoreLedger()
        assert ledger.add(50) == 50
        assert ledger.add(550) == 600
        ledger.reset()
        assert ledger.total == 0


# ---------------------------------------------------------------------------
# save / load
# ---------------------------------------------------------------------------

class TestPersistence:
    def test_roundtrip(self, goals_path, mixed_goals):
        QuestSession(goals_path, mixed_goals).save_goals()
        restored = QuestSession(goals_path)
        assert restored.load_goals() is True
        assert list(restored.goals) == mixed_goals

    def test_roundtrip_after_progress(self, session):
        session.add_goal("simple", "Read", points=100)
        session.add_goal("checklist", "Run", target_count=3, points_per_event=50)
        session.record_achievement(1)
        session.record_achievement(2)
        session.save_goals()

        restored = QuestSession(session.goals_file)
        restored.load_goals()
        assert list(restored.goals) == list(session.goals)
        # Completed simple goal stays paid out; checklist resumes at 2/3
        assert restored.record_achievement(1) == 0
        assert restored.record_achievement(2) == 50

    def test_load_resets_ledger(self, session):
        session.add_goal("eternal", "Pray", points=25)
        session.record_achievement(1)
        session.save_goals()
        assert session.score == 25
        session.load_goals()
        assert session.score == 0

    def test_load_replaces_collection(self, session, goals_path, mixed_goals):
        QuestSession(goals_path, mixed_goals[:1]).save_goals()
        session.add_goal("eternal", "Pray", points=25)
        session.add_goal("eternal", "Fast", points=25)
        session.load_goals()
        assert list(session.goals) == mixed_goals[:1]

    def test_missing_file_is_empty(self, session):
        session.add_goal("eternal", "Pray", points=25)
        session.record_achievement(1)
        assert session.load_goals() is False
        assert len(session) == 0
        assert session.score == 0

    def test_unknown_type_leaves_session_untouched(self, session, goals_path):
        session.add_goal("eternal", "Pray", points=25)
        session.record_achievement(1)
        goals_path.write_text(json.dumps([{"Type": "BogusGoal", "Name": "x"}]))

        with pytest.raises(UnknownVariantError):
            session.load_goals()
        assert [g.name for g in session.goals] == ["Pray"]
        assert session.score == 25

    def test_corrupt_file_leaves_session_untouched(self, session, goals_path):
        session.add_goal("simple", "Read", points=100)
        goals_path.write_text("garbage")
        with pytest.raises(CorruptGoalFileError):
            session.load_goals()
        assert len(session) == 1

    def test_explicit_path(self, session, tmp_path, mixed_goals):
        other = tmp_path / "other.json"
        QuestSession(other, mixed_goals).save_goals()
        assert session.load_goals(other) is True
        assert len(session) == len(mixed_goals)
        assert session.save_goals(other) == other

    def test_default_path_from_settings(self, monkeypatch, tmp_path):
        monkeypatch.setattr(settings, "goals_file", str(tmp_path / "quest.json"))
        assert QuestSession().goals_file == tmp_path / "quest.json"
