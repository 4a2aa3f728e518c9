"""
Career store interface.

Request handlers and services depend on ``CareerStore`` only; the backing
implementation (in-memory tables or a SQLModel engine) is chosen at startup
by ``repositories.build_store()``.

Contract shared by every backend:
- get_* returns None for unknown keys, never raises
- create_* stamps created_at / updated_at
- update_* replaces the supplied fields wholesale (no list merge), stamps
  updated_at, and returns None when the record does not exist
- updates to one record are serialized by a per-record asyncio.Lock
"""

import asyncio
import copy
from abc import ABC, abstractmethod
from typing import Any, Dict, List, Optional, Tuple

from sqlmodel import SQLModel

from models import (
    AgentConversation,
    CareerData,
    CareerQuestion,
    DecisionRecommendation,
    SwotAnalysis,
    User,
)
from models.common import utc_now

# Fields an update may never touch
IMMUTABLE_FIELDS = {"id", "question_id", "agent_type", "created_at"}


def validate_updates(model_class: type, updates: Dict[str, Any]) -> Dict[str, Any]:
    """
    Check an update dict against a model's fields.

    Args:
        model_class: SQLModel class being updated
        updates: Field name -> new value

    Returns:
        Deep copy of updates, safe to store

    Raises:
        ValueError: Unknown or immutable field
    """
    unknown = set(updates) - set(model_class.model_fields)
    if unknown:
        raise ValueError(f"Unknown {model_class.__name__} fields: {sorted(unknown)}")

    blocked = set(updates) & IMMUTABLE_FIELDS
    if blocked:
        raise ValueError(f"Immutable {model_class.__name__} fields: {sorted(blocked)}")

    return copy.deepcopy(updates)


class RecordLocks:
    """
    Lazily created asyncio locks, one per (table, record id).

    Locks are never evicted: the map holds one entry per record ever
    updated. The store has no delete operation, so no lock outlives its
    record.
    """

    def __init__(self):
        self._locks: Dict[Tuple[str, str], asyncio.Lock] = {}

    def get(self, table: str, record_id: str) -> asyncio.Lock:
        key = (table, record_id)
        lock = self._locks.get(key)
        if lock is None:
            lock = asyncio.Lock()
            self._locks[key] = lock
        return lock


class CareerStore(ABC):
    """Create/get/update operations for every entity kind."""

    def __init__(self):
        self.locks = RecordLocks()

    # ============ USERS ============

    @abstractmethod
    async def create_user(self, username: str) -> User:
        ...

    @abstractmethod
    async def get_user(self, user_id: str) -> Optional[User]:
        ...

    @abstractmethod
    async def get_user_by_username(self, username: str) -> Optional[User]:
        ...

    # ============ CAREER QUESTIONS ============

    @abstractmethod
    async def create_career_question(
        self,
        question: str,
        current_role: Optional[str] = None,
        target_role: Optional[str] = None,
        user_id: Optional[str] = None,
    ) -> CareerQuestion:
        ...

    @abstractmethod
    async def get_career_question(self, question_id: str) -> Optional[CareerQuestion]:
        ...

    @abstractmethod
    async def list_career_questions_by_user(self, user_id: str) -> List[CareerQuestion]:
        ...

    # ============ SWOT ANALYSES ============

    @abstractmethod
    async def create_swot_analysis(
        self,
        question_id: str,
        strengths: Optional[List[str]] = None,
        weaknesses: Optional[List[str]] = None,
        opportunities: Optional[List[str]] = None,
        threats: Optional[List[str]] = None,
        conversation_status: str = "pending",
    ) -> SwotAnalysis:
        ...

    @abstractmethod
    async def get_swot_analysis(self, question_id: str) -> Optional[SwotAnalysis]:
        ...

    @abstractmethod
    async def update_swot_analysis(
        self, question_id: str, updates: Dict[str, Any]
    ) -> Optional[SwotAnalysis]:
        ...

    # ============ AGENT CONVERSATIONS ============

    @abstractmethod
    async def create_agent_conversation(
        self,
        question_id: str,
        agent_type: str,
        messages: Optional[List[Dict[str, str]]] = None,
        status: str = "pending",
    ) -> AgentConversation:
        ...

    @abstractmethod
    async def get_agent_conversation(
        self, question_id: str, agent_type: str
    ) -> Optional[AgentConversation]:
        ...

    @abstractmethod
    async def update_agent_conversation(
        self, conversation_id: str, updates: Dict[str, Any]
    ) -> Optional[AgentConversation]:
        ...

    @abstractmethod
    async def append_conversation_message(
        self, conversation_id: str, message: Dict[str, str]
    ) -> Optional[AgentConversation]:
        """Append one message under the record lock so concurrent appends all land."""
        ...

    # ============ CAREER DATA ============

    @abstractmethod
    async def create_career_data(
        self,
        question_id: str,
        salary_data: Optional[List[Dict[str, Any]]] = None,
        trajectory_data: Optional[List[Dict[str, Any]]] = None,
        market_metrics: Optional[Dict[str, Any]] = None,
        scenarios: Optional[List[Dict[str, Any]]] = None,
    ) -> CareerData:
        ...

    @abstractmethod
    async def get_career_data(self, question_id: str) -> Optional[CareerData]:
        ...

    @abstractmethod
    async def update_career_data(
        self, question_id: str, updates: Dict[str, Any]
    ) -> Optional[CareerData]:
        ...

    # ============ DECISION RECOMMENDATIONS ============

    @abstractmethod
    async def create_decision_recommendation(
        self,
        question_id: str,
        objective_weights: Optional[Dict[str, Any]] = None,
        recommendations: Optional[List[Dict[str, Any]]] = None,
        policy_status: Optional[Dict[str, Any]] = None,
    ) -> DecisionRecommendation:
        ...

    @abstractmethod
    async def get_decision_recommendation(
        self, question_id: str
    ) -> Optional[DecisionRecommendation]:
        ...

    @abstractmethod
    async def update_decision_recommendation(
        self, question_id: str, updates: Dict[str, Any]
    ) -> Optional[DecisionRecommendation]:
        ...

    # ============ LIFECYCLE ============

    def close(self) -> None:
        """Release backend resources. No-op by default."""


def stamped_copy(record: SQLModel, updates: Dict[str, Any]) -> SQLModel:
    """Return a new instance of record's class with updates applied and updated_at stamped."""
    data = record.model_dump()
    data.update(updates)
    if "updated_at" in type(record).model_fields:
        data["updated_at"] = utc_now()
    return type(record)(**data)
