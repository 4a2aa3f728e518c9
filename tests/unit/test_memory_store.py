"""
Unit tests for the in-memory career store.

Run: pytest tests/unit/test_memory_store.py -v
"""

import sys
from pathlib import Path

# Add project root to Python path (for direct invocation)
sys.path.insert(0, str(Path(__file__).parent.parent.parent))

import asyncio

import pytest

from repositories.memory_store import MemoryStore
from repositories.store import RecordLocks


def run(coro):
    return asyncio.run(coro)


# ---------------------------------------------------------------------------
# Career questions and users
# ---------------------------------------------------------------------------

class TestCareerQuestions:

    def test_create_assigns_id_and_timestamp(self, store):
        question = run(store.create_career_question("Should I switch to PM?", "SWE", "PM"))
        assert question.id
        assert question.created_at is not None
        assert question.current_role == "SWE"
        assert question.target_role == "PM"

    def test_identical_submissions_get_distinct_ids(self, store):
        first = run(store.create_career_question("Same question"))
        second = run(store.create_career_question("Same question"))
        assert first.id != second.id

    def test_get_unknown_returns_none(self, store):
        assert run(store.get_career_question("missing")) is None

    def test_list_by_user(self, store):
        user = run(store.create_user("dana"))
        run(store.create_career_question("Q1", user_id=user.id))
        run(store.create_career_question("Q2", user_id=user.id))
        run(store.create_career_question("Q3"))

        questions = run(store.list_career_questions_by_user(user.id))
        assert sorted(q.question for q in questions) == ["Q1", "Q2"]

    def test_get_user_by_username(self, store):
        user = run(store.create_user("dana"))
        assert run(store.get_user_by_username("dana")).id == user.id
        assert run(store.get_user_by_username("nobody")) is None


# ---------------------------------------------------------------------------
# SWOT analyses
# ---------------------------------------------------------------------------

class TestSwotAnalyses:

    def test_create_and_get_by_question(self, store):
        created = run(store.create_swot_analysis("q1", strengths=["a"]))
        fetched = run(store.get_swot_analysis("q1"))
        assert fetched.id == created.id
        assert fetched.strengths == ["a"]
        assert fetched.weaknesses == []
        assert fetched.conversation_status == "pending"

    def test_update_replaces_lists_and_stamps(self, store):
        created = run(store.create_swot_analysis("q1", strengths=["a", "b"]))
        updated = run(store.update_swot_analysis("q1", {"strengths": ["c"]}))
        assert updated.strengths == ["c"]
        assert updated.updated_at >= created.updated_at

    def test_update_does_not_mutate_earlier_snapshot(self, store):
        created = run(store.create_swot_analysis("q1", conversation_status="active"))
        run(store.update_swot_analysis("q1", {"conversation_status": "converged"}))
        assert created.conversation_status == "active"
        assert run(store.get_swot_analysis("q1")).conversation_status == "converged"

    def test_update_missing_returns_none(self, store):
        assert run(store.update_swot_analysis("missing", {"strengths": []})) is None

    def test_update_rejects_unknown_field(self, store):
        run(store.create_swot_analysis("q1"))
        with pytest.raises(ValueError):
            run(store.update_swot_analysis("q1", {"color": "blue"}))

    def test_update_rejects_immutable_field(self, store):
        run(store.create_swot_analysis("q1"))
        with pytest.raises(ValueError):
            run(store.update_swot_analysis("q1", {"question_id": "q2"}))


# ---------------------------------------------------------------------------
# Agent conversations
# ---------------------------------------------------------------------------

class TestAgentConversations:

    def test_lookup_by_question_and_agent(self, store):
        created = run(store.create_agent_conversation("q1", "vazir", status="active"))
        assert run(store.get_agent_conversation("q1", "vazir")).id == created.id
        assert run(store.get_agent_conversation("q1", "gawi")) is None

    def test_append_keeps_order(self, store):
        conversation = run(store.create_agent_conversation("q1", "vazir"))
        for i in range(3):
            run(store.append_conversation_message(
                conversation.id, {"role": "LLM-strengths", "content": str(i), "timestamp": "t"}
            ))
        messages = run(store.get_agent_conversation("q1", "vazir")).messages
        assert [m["content"] for m in messages] == ["0", "1", "2"]

    def test_concurrent_appends_are_not_lost(self, store):
        conversation = run(store.create_agent_conversation("q1", "vazir"))

        async def append_many():
            await asyncio.gather(*[
                store.append_conversation_message(
                    conversation.id, {"role": "user", "content": str(i), "timestamp": "t"}
                )
                for i in range(20)
            ])

        run(append_many())
        messages = run(store.get_agent_conversation("q1", "vazir")).messages
        assert len(messages) == 20

    def test_append_to_missing_returns_none(self, store):
        assert run(store.append_conversation_message("missing", {"role": "x"})) is None

    def test_update_status(self, store):
        conversation = run(store.create_agent_conversation("q1", "vazir", status="active"))
        updated = run(store.update_agent_conversation(conversation.id, {"status": "completed"}))
        assert updated.status == "completed"


# ---------------------------------------------------------------------------
# Career data and recommendations
# ---------------------------------------------------------------------------

class TestPlaceholderEntities:

    def test_career_data_roundtrip(self, store):
        run(store.create_career_data("q1", market_metrics={"avgSalary": 0}))
        data = run(store.get_career_data("q1"))
        assert data.market_metrics == {"avgSalary": 0}
        assert data.salary_data == []

    def test_recommendation_update(self, store):
        run(store.create_decision_recommendation("q1", objective_weights={"salary": 50}))
        updated = run(store.update_decision_recommendation("q1", {"objective_weights": {"salary": 80}}))
        assert updated.objective_weights == {"salary": 80}

    def test_stored_values_are_copies(self):
        store = MemoryStore()
        weights = {"salary": 50}
        run(store.create_decision_recommendation("q1", objective_weights=weights))
        weights["salary"] = 0
        assert run(store.get_decision_recommendation("q1")).objective_weights == {"salary": 50}


# ---------------------------------------------------------------------------
# Record locks
# ---------------------------------------------------------------------------

class TestRecordLocks:

    def test_one_lock_per_record(self):
        locks = RecordLocks()
        assert locks.get("swot_analyses", "a") is locks.get("swot_analyses", "a")
        assert locks.get("swot_analyses", "a") is not locks.get("swot_analyses", "b")
        assert locks.get("swot_analyses", "a") is not locks.get("career_data", "a")

    def test_locks_are_kept_per_updated_record(self, store):
        run(store.create_swot_analysis("q1"))
        run(store.update_swot_analysis("q1", {"strengths": ["a"]}))
        run(store.update_swot_analysis("q1", {"strengths": ["b"]}))
        assert len(store.locks._locks) == 1
