"""
Career Data API Routes - Gawi agent.

Endpoints:
- POST /api/career-data/{question_id} - Generate (placeholder) market data
- GET /api/career-data/{question_id} - Get stored market data
"""

from fastapi import APIRouter, Depends

from api.dependencies import get_career_data_service, get_store
from api.models.career_data_schemas import CareerDataResponse
from api.models.common_schemas import ErrorResponse
from repositories.store import CareerStore
from services import CareerDataService
from utils.errors import NotFoundError

router = APIRouter(prefix="/api/career-data", tags=["Career Data"])


@router.post("/{question_id}", response_model=CareerDataResponse)
async def generate_career_data(
    question_id: str,
    service: CareerDataService = Depends(get_career_data_service),
):
    """Gawi is disabled in this release; stores and returns an empty payload."""
    data = await service.generate(question_id)
    return CareerDataResponse.model_validate(data)


@router.get(
    "/{question_id}",
    response_model=CareerDataResponse,
    responses={404: {"model": ErrorResponse}},
)
async def get_career_data(question_id: str, store: CareerStore = Depends(get_store)):
    data = await store.get_career_data(question_id)
    if not data:
        raise NotFoundError("Career data not found")
    return CareerDataResponse.model_validate(data)
