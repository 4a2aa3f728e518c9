"""
User API Routes.

Users are an optional owner reference for career questions; there is no
authentication.

Endpoints:
- POST /api/users - Create a user
- GET /api/users/{user_id} - Get a user
- GET /api/users/{user_id}/career-questions - List a user's questions
"""

from typing import List

from fastapi import APIRouter, Depends

from api.dependencies import get_store
from api.models.career_question_schemas import CareerQuestionResponse
from api.models.common_schemas import ErrorResponse
from api.models.user_schemas import UserCreateRequest, UserResponse
from repositories.store import CareerStore
from utils.errors import NotFoundError, ValidationError

router = APIRouter(prefix="/api/users", tags=["Users"])


@router.post("", response_model=UserResponse, responses={400: {"model": ErrorResponse}})
async def create_user(request: UserCreateRequest, store: CareerStore = Depends(get_store)):
    if await store.get_user_by_username(request.username):
        raise ValidationError(f"Username already taken: {request.username}")

    user = await store.create_user(request.username)
    return UserResponse.model_validate(user)


@router.get("/{user_id}", response_model=UserResponse, responses={404: {"model": ErrorResponse}})
async def get_user(user_id: str, store: CareerStore = Depends(get_store)):
    user = await store.get_user(user_id)
    if not user:
        raise NotFoundError("User not found")
    return UserResponse.model_validate(user)


@router.get(
    "/{user_id}/career-questions",
    response_model=List[CareerQuestionResponse],
    responses={404: {"model": ErrorResponse}},
)
async def list_user_career_questions(user_id: str, store: CareerStore = Depends(get_store)):
    if not await store.get_user(user_id):
        raise NotFoundError("User not found")

    questions = await store.list_career_questions_by_user(user_id)
    return [CareerQuestionResponse.model_validate(q) for q in questions]
