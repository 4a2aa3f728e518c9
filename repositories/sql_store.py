"""
SQL-backed career store.

Opens one SQLModel session per operation on a shared engine and delegates
queries to the per-entity repositories. Updates and appends hold the same
per-record asyncio locks as the in-memory backend.
"""

from typing import Any, Dict, List, Optional

from sqlalchemy.engine import Engine
from sqlmodel import Session

from models import (
    AgentConversation,
    CareerData,
    CareerQuestion,
    DecisionRecommendation,
    SwotAnalysis,
    User,
)
from repositories.agent_conversation_repository import AgentConversationRepository
from repositories.career_data_repository import CareerDataRepository
from repositories.career_question_repository import CareerQuestionRepository
from repositories.decision_recommendation_repository import DecisionRecommendationRepository
from repositories.store import CareerStore, validate_updates
from repositories.swot_analysis_repository import SwotAnalysisRepository
from repositories.user_repository import UserRepository


class SQLStore(CareerStore):
    """CareerStore backed by a SQLModel engine (sqlite or postgres)."""

    def __init__(self, engine: Engine):
        super().__init__()
        self.engine = engine

    def _session(self) -> Session:
        return Session(self.engine)

    # ============ USERS ============

    async def create_user(self, username: str) -> User:
        with self._session() as db:
            return UserRepository(db).create(User(username=username))

    async def get_user(self, user_id: str) -> Optional[User]:
        with self._session() as db:
            return UserRepository(db).get_by_id(user_id)

    async def get_user_by_username(self, username: str) -> Optional[User]:
        with self._session() as db:
            return UserRepository(db).get_by_username(username)

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
        with self._session() as db:
            return CareerQuestionRepository(db).create(record)

    async def get_career_question(self, question_id: str) -> Optional[CareerQuestion]:
        with self._session() as db:
            return CareerQuestionRepository(db).get_by_id(question_id)

    async def list_career_questions_by_user(self, user_id: str) -> List[CareerQuestion]:
        with self._session() as db:
            return CareerQuestionRepository(db).get_by_user(user_id)

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
        with self._session() as db:
            return SwotAnalysisRepository(db).create(record)

    async def get_swot_analysis(self, question_id: str) -> Optional[SwotAnalysis]:
        with self._session() as db:
            return SwotAnalysisRepository(db).get_by_question(question_id)

    async def update_swot_analysis(
        self, question_id: str, updates: Dict[str, Any]
    ) -> Optional[SwotAnalysis]:
        updates = validate_updates(SwotAnalysis, updates)
        existing = await self.get_swot_analysis(question_id)
        if existing is None:
            return None

        async with self.locks.get("swot_analyses", existing.id):
            with self._session() as db:
                repo = SwotAnalysisRepository(db)
                return repo.apply(repo.get_by_id(existing.id), updates)

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
            messages=[dict(m) for m in messages or []],
            status=status,
        )
        with self._session() as db:
            return AgentConversationRepository(db).create(record)

    async def get_agent_conversation(
        self, question_id: str, agent_type: str
    ) -> Optional[AgentConversation]:
        with self._session() as db:
            return AgentConversationRepository(db).get_by_question_and_agent(question_id, agent_type)

    async def update_agent_conversation(
        self, conversation_id: str, updates: Dict[str, Any]
    ) -> Optional[AgentConversation]:
        updates = validate_updates(AgentConversation, updates)
        async with self.locks.get("agent_conversations", conversation_id):
            with self._session() as db:
                repo = AgentConversationRepository(db)
                conversation = repo.get_by_id(conversation_id)
                if conversation is None:
                    return None
                return repo.apply(conversation, updates)

    async def append_conversation_message(
        self, conversation_id: str, message: Dict[str, str]
    ) -> Optional[AgentConversation]:
        async with self.locks.get("agent_conversations", conversation_id):
            with self._session() as db:
                repo = AgentConversationRepository(db)
                conversation = repo.get_by_id(conversation_id)
                if conversation is None:
                    return None
                return repo.append_message(conversation, message)

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
            salary_data=salary_data or [],
            trajectory_data=trajectory_data or [],
            market_metrics=market_metrics,
            scenarios=scenarios or [],
        )
        with self._session() as db:
            return CareerDataRepository(db).create(record)

    async def get_career_data(self, question_id: str) -> Optional[CareerData]:
        with self._session() as db:
            return CareerDataRepository(db).get_by_question(question_id)

    async def update_career_data(
        self, question_id: str, updates: Dict[str, Any]
    ) -> Optional[CareerData]:
        updates = validate_updates(CareerData, updates)
        existing = await self.get_career_data(question_id)
        if existing is None:
            return None

        async with self.locks.get("career_data", existing.id):
            with self._session() as db:
                repo = CareerDataRepository(db)
                return repo.apply(repo.get_by_id(existing.id), updates)

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
            objective_weights=objective_weights or {},
            recommendations=recommendations or [],
            policy_status=policy_status,
        )
        with self._session() as db:
            return DecisionRecommendationRepository(db).create(record)

    async def get_decision_recommendation(
        self, question_id: str
    ) -> Optional[DecisionRecommendation]:
        with self._session() as db:
            return DecisionRecommendationRepository(db).get_by_question(question_id)

    async def update_decision_recommendation(
        self, question_id: str, updates: Dict[str, Any]
    ) -> Optional[DecisionRecommendation]:
        updates = validate_updates(DecisionRecommendation, updates)
        existing = await self.get_decision_recommendation(question_id)
        if existing is None:
            return None

        async with self.locks.get("decision_recommendations", existing.id):
            with self._session() as db:
                repo = DecisionRecommendationRepository(db)
                return repo.apply(repo.get_by_id(existing.id), updates)

    # ============ LIFECYCLE ============

    def close(self) -> None:
        self.engine.dispose()
