from datetime import datetime
from typing import List, Dict
import uuid

from sqlmodel import SQLModel, Field, Column
from sqlalchemy import JSON

from models.common import ConversationStatus, UTCDateTime, utc_now


class AgentConversation(SQLModel, table=True):
    """
    Transcript of one agent's conversation about one career question.

    One row per (question_id, agent_type). The message list only grows.

    Message structure (JSON list element):
    {
        "role": "system" | "LLM-strengths" | "LLM-weaknesses" | ...,
        "content": "turn text",
        "timestamp": "2025-01-01T00:00:00.000Z"
    }
    """
    __tablename__ = "agent_conversations"

    id: str = Field(default_factory=lambda: str(uuid.uuid4()), primary_key=True)
    question_id: str = Field(index=True)  # informational, not enforced
    agent_type: str = Field(index=True)  # vazir, gawi, zaki

    messages: List[Dict[str, str]] = Field(default_factory=list, sa_column=Column(JSON))
    status: str = Field(default=ConversationStatus.PENDING.value)  # pending, active, completed

    created_at: datetime = Field(default_factory=utc_now, sa_column=Column(UTCDateTime, nullable=False))
    updated_at: datetime = Field(default_factory=utc_now, sa_column=Column(UTCDateTime, nullable=False))
