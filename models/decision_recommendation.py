from datetime import datetime
from typing import List, Dict, Any, Optional
import uuid

from sqlmodel import SQLModel, Field, Column
from sqlalchemy import JSON

from models.common import UTCDateTime, utc_now


class DecisionRecommendation(SQLModel, table=True):
    """
    Zaki's scored strategies for one career question.

    JSON shapes:
        objective_weights: {"salary", "prestige", "riskTolerance", "growthPotential"} (0-100 each)
        recommendations:   [{"title", "score", "confidence", "strategy": [str],
                             "outcomes": [str], "isOptimal": bool}]
        policy_status:     {"trainingEpisodes", "convergence", "lastUpdated"}
    """
    __tablename__ = "decision_recommendations"

    id: str = Field(default_factory=lambda: str(uuid.uuid4()), primary_key=True)
    question_id: str = Field(index=True)  # informational, not enforced

    objective_weights: Dict[str, Any] = Field(default_factory=dict, sa_column=Column(JSON))
    recommendations: List[Dict[str, Any]] = Field(default_factory=list, sa_column=Column(JSON))
    policy_status: Optional[Dict[str, Any]] = Field(default=None, sa_column=Column(JSON))

    created_at: datetime = Field(default_factory=utc_now, sa_column=Column(UTCDateTime, nullable=False))
    updated_at: datetime = Field(default_factory=utc_now, sa_column=Column(UTCDateTime, nullable=False))
