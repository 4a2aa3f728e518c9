"""
Repositories module - Data Access Layer.

``CareerStore`` is the interface request handlers and services depend on.
Two backends implement it:

- ``MemoryStore``: process-lifetime dict tables (STORE_BACKEND=memory)
- ``SQLStore``: SQLModel engine on DATABASE_URL (STORE_BACKEND=sql), built
  from the per-entity repositories below

Usage:
    from repositories import build_store

    store = build_store()
    question = await store.create_career_question("Should I switch to PM?")
    analysis = await store.get_swot_analysis(question.id)
"""

import logging
from typing import Optional

from config.settings import settings
from repositories.store import CareerStore
from repositories.memory_store import MemoryStore
from repositories.sql_store import SQLStore
from repositories.base_repository import BaseRepository, QuestionScopedRepository
from repositories.user_repository import UserRepository
from repositories.career_question_repository import CareerQuestionRepository
from repositories.swot_analysis_repository import SwotAnalysisRepository
from repositories.agent_conversation_repository import AgentConversationRepository
from repositories.career_data_repository import CareerDataRepository
from repositories.decision_recommendation_repository import DecisionRecommendationRepository

logger = logging.getLogger(__name__)


def build_store(backend: Optional[str] = None, database_url: Optional[str] = None) -> CareerStore:
    """
    Build the configured store backend.

    Args:
        backend: "memory" or "sql"; defaults to settings.STORE_BACKEND
        database_url: Used by the sql backend; defaults to settings.DATABASE_URL

    Returns:
        CareerStore implementation

    Raises:
        ValueError: Unknown backend name
    """
    backend = (backend or settings.STORE_BACKEND).lower()

    if backend == "memory":
        logger.info("Using in-memory store (state is lost on restart)")
        return MemoryStore()

    if backend == "sql":
        from utils.database import create_db_engine, get_engine

        url = database_url or settings.DATABASE_URL
        logger.info(f"Using SQL store on {url.split('@')[-1]}")
        engine = create_db_engine(url) if database_url else get_engine()
        return SQLStore(engine)

    raise ValueError(f"Unsupported store backend: {backend}")


__all__ = [
    "CareerStore",
    "MemoryStore",
    "SQLStore",
    "build_store",
    "BaseRepository",
    "QuestionScopedRepository",
    "UserRepository",
    "CareerQuestionRepository",
    "SwotAnalysisRepository",
    "AgentConversationRepository",
    "CareerDataRepository",
    "DecisionRecommendationRepository",
]
