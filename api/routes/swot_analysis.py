"""
SWOT Analysis API Routes - Vazir agent.

Handles HTTP concerns and delegates the analysis flow to SwotAnalysisService.

Endpoints:
- POST /api/swot-analysis - Analyze a new question given in the body
- POST /api/swot-analysis/{question_id} - Analyze an existing question
- GET /api/swot-analysis/{question_id} - Get the stored analysis
"""

import logging
from typing import Optional

from fastapi import APIRouter, Body, Depends

from api.dependencies import get_store, get_swot_analysis_service
from api.models.common_schemas import ErrorResponse
from api.models.swot_schemas import SwotAnalysisRequest, SwotAnalysisResponse
from repositories.store import CareerStore
from services import SwotAnalysisService
from utils.errors import NotFoundError

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api/swot-analysis", tags=["SWOT Analysis"])

START_RESPONSES = {
    400: {"model": ErrorResponse, "description": "Missing question text or LLM failure"},
    404: {"model": ErrorResponse, "description": "Career question not found"},
}


async def _start(
    service: SwotAnalysisService,
    question_id: Optional[str],
    request: Optional[SwotAnalysisRequest],
) -> SwotAnalysisResponse:
    request = request or SwotAnalysisRequest()
    if question_id:
        logger.info(f"Starting SWOT analysis for question: {question_id}")
    else:
        logger.info(f"Starting SWOT analysis with custom question: {request.question}")

    analysis = await service.start_analysis(
        question_id=question_id,
        question=request.question,
        current_role=request.current_role,
        target_role=request.target_role,
    )
    return SwotAnalysisResponse.model_validate(analysis)


@router.post("", response_model=SwotAnalysisResponse, responses=START_RESPONSES)
async def start_custom_swot_analysis(
    request: Optional[SwotAnalysisRequest] = Body(default=None),
    service: SwotAnalysisService = Depends(get_swot_analysis_service),
):
    """
    Create a career question from the body and run the SWOT analysis on it.

    Returns the analysis as written before the quadrant conversation
    (status **active**). The transcript is at
    `GET /api/conversations/{questionId}/vazir`.
    """
    return await _start(service, None, request)


@router.post("/{question_id}", response_model=SwotAnalysisResponse, responses=START_RESPONSES)
async def start_swot_analysis(
    question_id: str,
    request: Optional[SwotAnalysisRequest] = Body(default=None),
    service: SwotAnalysisService = Depends(get_swot_analysis_service),
):
    """Run (or re-run) the SWOT analysis for an existing career question."""
    return await _start(service, question_id, request)


@router.get(
    "/{question_id}",
    response_model=SwotAnalysisResponse,
    responses={404: {"model": ErrorResponse}},
)
async def get_swot_analysis(question_id: str, store: CareerStore = Depends(get_store)):
    analysis = await store.get_swot_analysis(question_id)
    if not analysis:
        raise NotFoundError("Analysis not found")
    return SwotAnalysisResponse.model_validate(analysis)
