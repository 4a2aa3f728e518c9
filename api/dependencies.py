"""
FastAPI dependencies.

Shared collaborators live on ``app.state`` (set up by ``api.main.create_app``)
and are handed to routes through these functions, so tests can swap any of
them with ``app.dependency_overrides`` or by passing them to ``create_app``.
"""

from fastapi import Depends, Request

from repositories.store import CareerStore
from services import (
    CareerDataService,
    ConnectionNotifier,
    RecommendationService,
    SwotAnalysisService,
)
from utils.llm_service import LLMService


def get_store(request: Request) -> CareerStore:
    return request.app.state.store


def get_notifier(request: Request) -> ConnectionNotifier:
    return request.app.state.notifier


def get_llm_service(request: Request) -> LLMService:
    """Return the shared LLMService, building it on first use."""
    if request.app.state.llm_service is None:
        request.app.state.llm_service = LLMService()
    return request.app.state.llm_service


def get_swot_analysis_service(
    store: CareerStore = Depends(get_store),
    llm_service: LLMService = Depends(get_llm_service),
    notifier: ConnectionNotifier = Depends(get_notifier),
) -> SwotAnalysisService:
    return SwotAnalysisService(store, llm_service, notifier)


def get_career_data_service(store: CareerStore = Depends(get_store)) -> CareerDataService:
    return CareerDataService(store)


def get_recommendation_service(store: CareerStore = Depends(get_store)) -> RecommendationService:
    return RecommendationService(store)
