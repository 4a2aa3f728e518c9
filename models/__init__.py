from models.common import (
    iso_timestamp,
    utc_now,
    AgentType,
    AnalysisStatus,
    ConversationStatus,
    SwotQuadrant,
    SWOT_QUADRANTS,
)
from models.user import User
from models.career_question import CareerQuestion
from models.swot_analysis import SwotAnalysis
from models.agent_conversation import AgentConversation
from models.career_data import CareerData
from models.decision_recommendation import DecisionRecommendation

__all__ = [
    "iso_timestamp",
    "utc_now",
    "AgentType",
    "AnalysisStatus",
    "ConversationStatus",
    "SwotQuadrant",
    "SWOT_QUADRANTS",
    "User",
    "CareerQuestion",
    "SwotAnalysis",
    "AgentConversation",
    "CareerData",
    "DecisionRecommendation",
]
