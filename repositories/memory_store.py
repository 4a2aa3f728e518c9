"""
In-memory career store.

Process-lifetime dict tables keyed by record id. Nothing survives a restart.
Question-scoped lookups scan the table, which is fine for the small
collection sizes a single dashboard produces.
"""

import copy
from typing import Any, Callable, Dict, List, Optional, TypeVar

from sqlmodel import SQLModel

from models import (
    AgentConversation,
    CareerData,
    CareerQuestion,
    DecisionRecommendation,
    SwotAnalysis,
    User,
)
from repositories.store import CareerStore, stamped_copy, validate_updates

T = TypeVar("T", bound=SQLModel)


class MemoryStore(CareerStore):
    """CareerStore backed by plain dictionaries."""

    def __init__(self):
        super().__init__()
        self.users: Dict[str, User] = {}
        self.career_questions: Dict[str, CareerQuestion] = {}
        self.swot_analyses: Dict[str, SwotAnalysis] = {}
        self.agent_conversations: Dict[str, AgentConversation] = {}
        self.career_data: Dict[str, CareerData] = {}
        self.decision_recommendations: Dict[str, DecisionRecommendation] = {}

    # ---------------------------------------------------------------------
    # Helpers
    # ---------------------------------------------------------------------
    @staticmethod
    def _find(table: Dict[str, T], predicate: Callable[[T], bool]) -> Optional[T]:
        return next((record for record in table.values() if predicate(record)), None)

    @staticmethod
    def _insert(table: Dict[str, T], record: T) -> T:
        table[record.id] = record
        return record

    async def _update(
        self,
        table_name: str,
        table: Dict[str, T],
        record: Optional[T],
        updates: Dict[str, Any],
    ) -> Optional[T]:
        if record is None:
            return None

        updates = validate_updates(type(record), updates)
        async with self.locks.get(table_name, record.id):
            # Re-read under the lock so a writer that got in first is not lost
            current = table[record.id]
            updated = stamped_copy(current, updates)
            table[record.id] = updated
            return updated

    # ============ USERS ============

    async def create_user(self, username: str) -> User:
        return self._insert(self.users, User(username=username))

    async def get_user(self, user_id: str) -> Optional[User]:
        return self.users.get(user_id)

    async def get_user_by_username(self, username: str) -> Optional[User]:
        return self._find(self.users, lambda u: u.username == username)

    # ============ CAREER QUESTIONS ============

    async def create_career_question(
        self,
        question: str,
        current_role: Optional[str] = None,
        target_role: Optional[str] = None,
        user_id: Optional[str] = None,
    ) -> CareerQuestion:
        record = CareerQuestion(
            question=question,
            current_role=current_role,
            target_role=target_role,
            user_id=user_id,
        )
        return self._insert(self.career_questions, record)

    async def get_career_question(self, question_id: str) -> Optional[CareerQuestion]:
        return self.career_questions.get(question_id)

    async def list_career_questions_by_user(self, user_id: str) -> List[CareerQuestion]:
        return [q for q in self.career_questions.values() if q.user_id == user_id]

    # ============ SWOT ANALYSES ============

    async def create_swot_analysis(
        self,
        question_id: str,
        strengths: Optional[List[str]] = None,
        weaknesses: Optional[List[str]] = None,
        opportunities: Optional[List[str]] = None,
        threats: Optional[List[str]] = None,
        conversation_status: str = "pending",
    ) -> SwotAnalysis:
        record = SwotAnalysis(
            question_id=question_id,
            strengths=list(strengths or []),
            weaknesses=list(weaknesses or []),
            opportunities=list(opportunities or []),
            threats=list(threats or []),
            conversation_status=conversation_status,
        )
        return self._insert(self.swot_analyses, record)

    async def get_swot_analysis(self, question_id: str) -> Optional[SwotAnalysis]:
        return self._find(self.swot_analyses, lambda a: a.question_id == question_id)

    async def update_swot_analysis(
        self, question_id: str, updates: Dict[str, Any]
    ) -> Optional[SwotAnalysis]:
        existing = await self.get_swot_analysis(question_id)
        return await self._update("swot_analyses", self.swot_analyses, existing, updates)

    # ============ AGENT CONVERSATIONS ============

    async def create_agent_conversation(
        self,
        question_id: str,
        agent_type: str,
        messages: Optional[List[Dict[str, str]]] = None,
        status: str = "pending",
    ) -> AgentConversation:
        record = AgentConversation(
            question_id=question_id,
            agent_type=agent_type,
            messages=copy.deepcopy(messages or []),
            status=status,
        )
        return self._insert(self.agent_conversations, record)

    async def get_agent_conversation(
        self, question_id: str, agent_type: str
    ) -> Optional[AgentConversation]:
        return self._find(
            self.agent_conversations,
            lambda c: c.question_id == question_id and c.agent_type == agent_type,
        )

    async def update_agent_conversation(
        self, conversation_id: str, updates: Dict[str, Any]
    ) -> Optional[AgentConversation]:
        existing = self.agent_conversations.get(conversation_id)
        return await self._update("agent_conversations", self.agent_conversations, existing, updates)

    async def append_conversation_message(
        self, conversation_id: str, message: Dict[str, str]
    ) -> Optional[AgentConversation]:
        if conversation_id not in self.agent_conversations:
            return None

        async with self.locks.get("agent_conversations", conversation_id):
            current = self.agent_conversations[conversation_id]
            updated = stamped_copy(
                current, {"messages": [*current.messages, dict(message)]}
            )
            self.agent_conversations[conversation_id] = updated
            return updated

    # ============ CAREER DATA ============

    async def create_career_data(
        self,
        question_id: str,
        salary_data: Optional[List[Dict[str, Any]]] = None,
        trajectory_data: Optional[List[Dict[str, Any]]] = None,
        market_metrics: Optional[Dict[str, Any]] = None,
        scenarios: Optional[List[Dict[str, Any]]] = None,
    ) -> CareerData:
        record = CareerData(
            question_id=question_id,
            salary_data=copy.deepcopy(salary_data or []),
            trajectory_data=copy.deepcopy(trajectory_data or []),
            market_metrics=copy.deepcopy(market_metrics),
            scenarios=copy.deepcopy(scenarios or []),
        )
        return self._insert(self.career_data, record)

    async def get_career_data(self, question_id: str) -> Optional[CareerData]:
        return self._find(self.career_data, lambda d: d.question_id == question_id)

    async def update_career_data(
        self, question_id: str, updates: Dict[str, Any]
    ) -> Optional[CareerData]:
        existing = await self.get_career_data(question_id)
        return await self._update("career_data", self.career_data, existing, updates)

    # ============ DECISION RECOMMENDATIONS ============

    async def create_decision_recommendation(
        self,
        question_id: str,
        objective_weights: Optional[Dict[str, Any]] = None,
        recommendations: Optional[List[Dict[str, Any]]] = None,
        policy_status: Optional[Dict[str, Any]] = None,
    ) -> DecisionRecommendation:
        record = DecisionRecommendation(
            question_id=question_id,
            objective_weights=copy.deepcopy(objective_weights or {}),
            recommendations=copy.deepcopy(recommendations or []),
            policy_status=copy.deepcopy(policy_status),
        )
        return self._insert(self.decision_recommendations, record)

    async def get_decision_recommendation(
        self, question_id: str
    ) -> Optional[DecisionRecommendation]:
        return self._find(self.decision_recommendations, lambda r: r.question_id == question_id)

    async def update_decision_recommendation(
        self, question_id: str, updates: Dict[str, Any]
    ) -> Optional[DecisionRecommendation]:
        existing = await self.get_decision_recommendation(question_id)
        return await self._update(
            "decision_recommendations", self.decision_recommendations, existing, updates
        )
