"""
SWOT Analysis Service - Vazir agent.

Owns the SWOT analysis lifecycle for one career question:
- Question resolution (existing id, or a new question from request fields)
- Initial SWOT generation and persistence
- The multi-turn quadrant conversation and its transcript
- Progress notifications to subscribed WebSocket clients

State machine:
    SwotAnalysis.conversation_status: pending -> active -> converged
    AgentConversation.status:         pending -> active -> completed

The quadrant loop visits strengths, weaknesses, opportunities, threats in
order. If the call ceiling is reached first, the analysis is marked
converged and the remaining quadrants are skipped. A normal run marks the
conversation completed and leaves the analysis active.

Failures from the LLM propagate to the caller. Nothing is rolled back: a
failed turn leaves the transcript with the quadrants completed so far and
the conversation still active.
"""

import logging
from typing import Optional

from config.settings import settings
from models import (
    AgentConversation,
    AgentType,
    AnalysisStatus,
    CareerQuestion,
    ConversationStatus,
    SwotAnalysis,
    SWOT_QUADRANTS,
)
from models.common import iso_timestamp
from repositories.store import CareerStore
from services.notifier import ConnectionNotifier
from utils.errors import NotFoundError, ValidationError
from utils.llm_service import LLMService

logger = logging.getLogger(__name__)

CONVERSATION_OPENING = "Starting multi-LLM SWOT analysis conversation"


class SwotAnalysisService:
    """
    Application service for the Vazir SWOT agent.

    Dependencies are injected so tests can pass an in-memory store and a
    deterministic LLM stub.
    """

    def __init__(
        self,
        store: CareerStore,
        llm_service: Optional[LLMService] = None,
        notifier: Optional[ConnectionNotifier] = None,
        max_calls: Optional[int] = None,
    ):
        self.store = store
        self.llm_service = llm_service or LLMService()
        self.notifier = notifier
        self.max_calls = settings.MAX_CONVERSATION_CALLS if max_calls is None else max_calls

    # ============ ANALYSIS LIFECYCLE ============

    async def start_analysis(
        self,
        question_id: Optional[str] = None,
        question: Optional[str] = None,
        current_role: Optional[str] = None,
        target_role: Optional[str] = None,
    ) -> SwotAnalysis:
        """
        Run a SWOT analysis for a career question.

        Args:
            question_id: Existing question; when omitted a new question is
                created from the remaining arguments
            question: Question text (required when question_id is omitted)
            current_role: Optional current role for a new question
            target_role: Optional target role for a new question

        Returns:
            The SwotAnalysis as written before the quadrant conversation ran
            (status "active")

        Raises:
            NotFoundError: question_id does not exist
            ValidationError: No question_id and no question text
            UpstreamError: LLM call failed (nothing rolled back)
        """
        career_question = await self._resolve_question(
            question_id, question, current_role, target_role
        )
        question_id = career_question.id
        logger.info(f"Starting SWOT analysis for question {question_id}")

        # Generate before touching the store so a failure leaves no trace
        swot = await self.llm_service.generate_swot(
            career_question.question,
            career_question.current_role,
            career_question.target_role,
        )

        quadrants = swot.model_dump()
        analysis = await self.store.get_swot_analysis(question_id)
        if analysis is not None:
            analysis = await self.store.update_swot_analysis(question_id, {
                **quadrants,
                "conversation_status": AnalysisStatus.ACTIVE.value,
            })
        else:
            analysis = await self.store.create_swot_analysis(
                question_id=question_id,
                conversation_status=AnalysisStatus.ACTIVE.value,
                **quadrants,
            )

        await self._notify_started(question_id)
        await self._run_conversation(career_question)

        logger.info(f"SWOT analysis completed for question {question_id}")
        return analysis

    async def get_conversation_status(self, question_id: str) -> Optional[AgentConversation]:
        """Return the Vazir transcript for a question, if any."""
        return await self.store.get_agent_conversation(question_id, AgentType.VAZIR.value)

    # ============ INTERNALS ============

    async def _resolve_question(
        self,
        question_id: Optional[str],
        question: Optional[str],
        current_role: Optional[str],
        target_role: Optional[str],
    ) -> CareerQuestion:
        if question_id:
            career_question = await self.store.get_career_question(question_id)
            if not career_question:
                raise NotFoundError("Career question not found")
            return career_question

        if not question or not question.strip():
            raise ValidationError("question is required when no question id is given")

        career_question = await self.store.create_career_question(
            question=question,
            current_role=current_role,
            target_role=target_role,
        )
        logger.info(f"Created career question {career_question.id} for custom analysis")
        return career_question

    async def _get_or_create_conversation(self, question_id: str) -> AgentConversation:
        conversation = await self.get_conversation_status(question_id)
        if conversation is None:
            return await self.store.create_agent_conversation(
                question_id=question_id,
                agent_type=AgentType.VAZIR.value,
                messages=[{
                    "role": "system",
                    "content": CONVERSATION_OPENING,
                    "timestamp": iso_timestamp(),
                }],
                status=ConversationStatus.ACTIVE.value,
            )

        return await self.store.update_agent_conversation(
            conversation.id, {"status": ConversationStatus.ACTIVE.value}
        )

    async def _run_conversation(self, career_question: CareerQuestion) -> AgentConversation:
        """Walk the four quadrants, one LLM turn each, under the call ceiling."""
        question_id = career_question.id
        conversation = await self._get_or_create_conversation(question_id)
        context = (
            f"Question: {career_question.question}\n"
            f"Current Role: {career_question.current_role}\n"
            f"Target Role: {career_question.target_role}"
        )

        call_count = 0
        for section in SWOT_QUADRANTS:
            if call_count >= self.max_calls:
                logger.info(
                    f"Call ceiling {self.max_calls} reached for question {question_id}; "
                    f"marking analysis converged before {section.value}"
                )
                await self.store.update_swot_analysis(
                    question_id, {"conversation_status": AnalysisStatus.CONVERGED.value}
                )
                return conversation

            content = await self.llm_service.generate_turn(
                AgentType.VAZIR.value,
                context,
                conversation.messages,
                section.value,
            )
            call_count += 1

            conversation = await self.store.append_conversation_message(conversation.id, {
                "role": f"LLM-{section.value}",
                "content": content,
                "timestamp": iso_timestamp(),
            })
            await self._notify_progress(question_id, content)

        return await self.store.update_agent_conversation(
            conversation.id, {"status": ConversationStatus.COMPLETED.value}
        )

    async def _notify_started(self, question_id: str) -> None:
        if self.notifier is not None:
            await self.notifier.publish_analysis_started(question_id, AgentType.VAZIR.value)

    async def _notify_progress(self, question_id: str, content: str) -> None:
        if self.notifier is not None:
            await self.notifier.publish_conversation_progress(
                question_id, AgentType.VAZIR.value, content
            )
