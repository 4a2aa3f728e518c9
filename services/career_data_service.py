"""
Career Data Service - Gawi agent.

Gawi's market research is not computed yet: every request stores and
returns the same placeholder payload so the dashboard can render its
empty state.
"""

import logging
from typing import Any, Dict

from models import AgentType, CareerData
from repositories.store import CareerStore

logger = logging.getLogger(__name__)

PLACEHOLDER_MARKET_METRICS = {
    "avgSalary": 0,
    "successRate": 0,
    "timeToSenior": 0,
    "marketDemand": "Coming Soon",
}


class CareerDataService:
    """Application service for the Gawi market-data agent."""

    def __init__(self, store: CareerStore):
        self.store = store

    async def generate(self, question_id: str) -> CareerData:
        """
        Store the placeholder market data for a question.

        Creates the record on first call and replaces it afterwards.

        Args:
            question_id: CareerQuestion ID (not checked for existence)

        Returns:
            Stored CareerData
        """
        logger.info(f"{AgentType.GAWI.value} agent disabled; returning placeholder data for {question_id}")
        payload: Dict[str, Any] = {
            "salary_data": [],
            "trajectory_data": [],
            "market_metrics": dict(PLACEHOLDER_MARKET_METRICS),
            "scenarios": [],
        }

        existing = await self.store.get_career_data(question_id)
        if existing is not None:
            return await self.store.update_career_data(question_id, payload)
        return await self.store.create_career_data(question_id=question_id, **payload)
