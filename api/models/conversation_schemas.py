from datetime import datetime
from typing import List, Optional

from pydantic import Field

from api.models.common_schemas import CamelModel


class ConversationMessage(CamelModel):
    role: str = Field(..., description="'system' or 'LLM-<quadrant>'")
    content: str
    timestamp: str


class AgentConversationResponse(CamelModel):
    id: str
    question_id: str
    agent_type: str = Field(..., description="vazir | gawi | zaki")
    messages: List[ConversationMessage] = Field(default_factory=list)
    status: str = Field(..., description="pending | active | completed")
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None
