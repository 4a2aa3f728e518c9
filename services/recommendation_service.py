"""
Recommendation Service - Zaki agent.

Zaki's policy is not trained yet: every request stores and returns a
single "coming soon" recommendation together with the caller's objective
weights, so the dashboard can render the weights panel.
"""

import logging
from typing import Any, Dict, Optional

from models import AgentType, DecisionRecommendation
from models.common import iso_timestamp
from repositories.store import CareerStore

logger = logging.getLogger(__name__)


def placeholder_recommendations() -> list:
    return [{
        "title": "Analysis Coming Soon",
        "score": 0,
        "confidence": 0,
        "strategy": ["Zaki agent is being updated"],
        "outcomes": ["Please use Vazir agent for now"],
        "isOptimal": False,
    }]


class RecommendationService:
    """Application service for the Zaki decision agent."""

    def __init__(self, store: CareerStore):
        self.store = store

    async def generate(
        self,
        question_id: str,
        objective_weights: Optional[Dict[str, Any]] = None,
    ) -> DecisionRecommendation:
        """
        Store the placeholder recommendation for a question.

        Args:
            question_id: CareerQuestion ID (not checked for existence)
            objective_weights: salary / prestige / riskTolerance /
                growthPotential, each 0-100; echoed back unchanged

        Returns:
            Stored DecisionRecommendation
        """
        logger.info(f"{AgentType.ZAKI.value} agent disabled; returning placeholder recommendation for {question_id}")
        payload: Dict[str, Any] = {
            "objective_weights": dict(objective_weights or {}),
            "recommendations": placeholder_recommendations(),
            "policy_status": {
                "trainingEpisodes": 0,
                "convergence": 0,
                "lastUpdated": iso_timestamp(),
            },
        }

        existing = await self.store.get_decision_recommendation(question_id)
        if existing is not None:
            return await self.store.update_decision_recommendation(question_id, payload)
        return await self.store.create_decision_recommendation(question_id=question_id, **payload)
