"""
Agent Conversation API Routes.

Endpoints:
- GET /api/conversations/{question_id}/{agent_type} - Get an agent transcript
"""

from fastapi import APIRouter, Depends

from api.dependencies import get_store
from api.models.common_schemas import ErrorResponse
from api.models.conversation_schemas import AgentConversationResponse
from repositories.store import CareerStore
from utils.errors import NotFoundError

router = APIRouter(prefix="/api/conversations", tags=["Conversations"])


@router.get(
    "/{question_id}/{agent_type}",
    response_model=AgentConversationResponse,
    responses={404: {"model": ErrorResponse}},
)
async def get_conversation(
    question_id: str,
    agent_type: str,
    store: CareerStore = Depends(get_store),
):
    conversation = await store.get_agent_conversation(question_id, agent_type)
    if not conversation:
        raise NotFoundError("Conversation not found")
    return AgentConversationResponse.model_validate(conversation)
