"""
Career Question API Routes.

Endpoints:
- POST /api/career-questions - Submit a career question
- GET /api/career-questions/{question_id} - Get a career question
"""

import logging

from fastapi import APIRouter, Depends

from api.dependencies import get_store
from api.models.career_question_schemas import (
    CareerQuestionCreateRequest,
    CareerQuestionResponse,
)
from api.models.common_schemas import ErrorResponse
from repositories.store import CareerStore
from utils.errors import NotFoundError

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api/career-questions", tags=["Career Questions"])


@router.post(
    "",
    response_model=CareerQuestionResponse,
    responses={400: {"model": ErrorResponse}},
)
async def create_career_question(
    request: CareerQuestionCreateRequest,
    store: CareerStore = Depends(get_store),
):
    """
    Submit a career question.

    Identical submissions create distinct questions; there is no deduplication.
    """
    question = await store.create_career_question(
        question=request.question,
        current_role=request.current_role,
        target_role=request.target_role,
        user_id=request.user_id,
    )
    logger.info(f"Created career question {question.id}")
    return CareerQuestionResponse.model_validate(question)


@router.get(
    "/{question_id}",
    response_model=CareerQuestionResponse,
    responses={404: {"model": ErrorResponse}},
)
async def get_career_question(question_id: str, store: CareerStore = Depends(get_store)):
    question = await store.get_career_question(question_id)
    if not question:
        raise NotFoundError("Question not found")
    return CareerQuestionResponse.model_validate(question)
