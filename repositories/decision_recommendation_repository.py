from sqlmodel import Session

from models.decision_recommendation import DecisionRecommendation
from repositories.base_repository import QuestionScopedRepository


class DecisionRecommendationRepository(QuestionScopedRepository[DecisionRecommendation]):
    """Repository for Zaki recommendations, one per career question."""

    def __init__(self, db_session: Session):
        super().__init__(db_session, DecisionRecommendation)
