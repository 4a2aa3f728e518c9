"""
Decision Recommendation API Routes - Zaki agent.

Endpoints:
- POST /api/recommendations/{question_id} - Generate (placeholder) recommendations
- GET /api/recommendations/{question_id} - Get stored recommendations
"""

from typing import Optional

from fastapi import APIRouter, Body, Depends

from api.dependencies import get_recommendation_service, get_store
from api.models.common_schemas import ErrorResponse
from api.models.recommendation_schemas import (
    DecisionRecommendationResponse,
    RecommendationRequest,
)
from repositories.store import CareerStore
from services import RecommendationService
from utils.errors import NotFoundError

router = APIRouter(prefix="/api/recommendations", tags=["Recommendations"])


@router.post(
    "/{question_id}",
    response_model=DecisionRecommendationResponse,
    responses={400: {"model": ErrorResponse}},
)
async def generate_recommendations(
    question_id: str,
    request: Optional[RecommendationRequest] = Body(default=None),
    service: RecommendationService = Depends(get_recommendation_service),
):
    """Zaki is disabled in this release; echoes the weights with a placeholder recommendation."""
    weights = None
    if request and request.objective_weights:
        weights = request.objective_weights.model_dump(by_alias=True, exclude_none=True)

    recommendation = await service.generate(question_id, weights)
    return DecisionRecommendationResponse.model_validate(recommendation)


@router.get(
    "/{question_id}",
    response_model=DecisionRecommendationResponse,
    responses={404: {"model": ErrorResponse}},
)
async def get_recommendations(question_id: str, store: CareerStore = Depends(get_store)):
    recommendation = await store.get_decision_recommendation(question_id)
    if not recommendation:
        raise NotFoundError("Recommendations not found")
    return DecisionRecommendationResponse.model_validate(recommendation)
