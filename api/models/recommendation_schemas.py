from datetime import datetime
from typing import Any, Dict, List, Optional

from pydantic import Field

from api.models.common_schemas import CamelModel


class ObjectiveWeights(CamelModel):
    """User priorities, each 0-100. No constraint on their sum."""
    salary: Optional[float] = Field(None, ge=0, le=100)
    prestige: Optional[float] = Field(None, ge=0, le=100)
    risk_tolerance: Optional[float] = Field(None, ge=0, le=100)
    growth_potential: Optional[float] = Field(None, ge=0, le=100)


class RecommendationRequest(CamelModel):
    objective_weights: Optional[ObjectiveWeights] = None


class RecommendationItem(CamelModel):
    """A scored candidate strategy; at most one item should be optimal."""
    title: str
    score: float
    confidence: float
    strategy: List[str] = Field(default_factory=list)
    outcomes: List[str] = Field(default_factory=list)
    is_optimal: bool = False


class PolicyStatus(CamelModel):
    training_episodes: int = 0
    convergence: float = 0
    last_updated: str


class DecisionRecommendationResponse(CamelModel):
    id: str
    question_id: str
    objective_weights: Dict[str, Any] = Field(default_factory=dict)
    recommendations: List[RecommendationItem] = Field(default_factory=list)
    policy_status: Optional[PolicyStatus] = None
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None
