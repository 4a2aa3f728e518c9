"""
Career question repository.

Questions are immutable once created, so there is no update helper here.
"""

from typing import List
from sqlmodel import Session, select

from models.career_question import CareerQuestion
from repositories.base_repository import BaseRepository


class CareerQuestionRepository(BaseRepository[CareerQuestion]):
    """Repository for managing career questions."""

    def __init__(self, db_session: Session):
        super().__init__(db_session, CareerQuestion)

    def get_by_user(self, user_id: str) -> List[CareerQuestion]:
        """
        Get all questions submitted by a user, oldest first.

        Args:
            user_id: Owning user ID

        Returns:
            List of questions
        """
        query = (
            select(CareerQuestion)
            .where(CareerQuestion.user_id == user_id)
            .order_by(CareerQuestion.created_at)
        )
        return list(self.db.exec(query).all())
