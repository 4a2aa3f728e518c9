"""
Unit tests for the Gawi and Zaki placeholder services.

Run: pytest tests/unit/test_placeholder_services.py -v
"""

import sys
from pathlib import Path

# Add project root to Python path (for direct invocation)
sys.path.insert(0, str(Path(__file__).parent.parent.parent))

import asyncio

from services import CareerDataService, RecommendationService


def run(coro):
    return asyncio.run(coro)


class TestCareerDataService:

    def test_generate_stores_placeholder(self, store):
        data = run(CareerDataService(store).generate("q1"))
        assert data.salary_data == []
        assert data.market_metrics["marketDemand"] == "Coming Soon"
        assert run(store.get_career_data("q1")).id == data.id

    def test_generate_twice_keeps_one_record(self, store):
        first = run(CareerDataService(store).generate("q1"))
        second = run(CareerDataService(store).generate("q1"))
        assert first.id == second.id
        assert len(store.career_data) == 1


class TestRecommendationService:

    def test_weights_are_echoed(self, store):
        weights = {"salary": 70, "prestige": 40, "riskTolerance": 20, "growthPotential": 90}
        recommendation = run(RecommendationService(store).generate("q1", weights))

        assert recommendation.objective_weights == weights
        assert recommendation.recommendations[0]["title"] == "Analysis Coming Soon"
        assert recommendation.recommendations[0]["isOptimal"] is False
        assert recommendation.policy_status["trainingEpisodes"] == 0

    def test_no_weights(self, store):
        recommendation = run(RecommendationService(store).generate("q1"))
        assert recommendation.objective_weights == {}

    def test_regenerate_replaces_weights(self, store):
        run(RecommendationService(store).generate("q1", {"salary": 10}))
        updated = run(RecommendationService(store).generate("q1", {"salary": 90}))
        assert updated.objective_weights == {"salary": 90}
        assert len(store.decision_recommendations) == 1
