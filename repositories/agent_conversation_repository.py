"""
Agent conversation repository.

Handles the (question, agent) keyed transcripts.
"""

from typing import Dict, Optional
from sqlmodel import Session, select

from models.agent_conversation import AgentConversation
from repositories.base_repository import BaseRepository


class AgentConversationRepository(BaseRepository[AgentConversation]):
    """Repository for managing agent conversations."""

    def __init__(self, db_session: Session):
        super().__init__(db_session, AgentConversation)

    def get_by_question_and_agent(
        self, question_id: str, agent_type: str
    ) -> Optional[AgentConversation]:
        """
        Get the conversation for one (question, agent) pair.

        Args:
            question_id: CareerQuestion ID
            agent_type: "vazir" | "gawi" | "zaki"

        Returns:
            AgentConversation or None
        """
        query = select(AgentConversation).where(
            AgentConversation.question_id == question_id,
            AgentConversation.agent_type == agent_type,
        )
        return self.db.exec(query).first()

    def append_message(
        self, conversation: AgentConversation, message: Dict[str, str]
    ) -> AgentConversation:
        """
        Append one message to the transcript.

        Args:
            conversation: Loaded conversation
            message: {"role", "content", "timestamp"}

        Returns:
            Updated conversation
        """
        return self.apply(conversation, {"messages": [*conversation.messages, dict(message)]})
