from sqlmodel import Session

from models.career_data import CareerData
from repositories.base_repository import QuestionScopedRepository


class CareerDataRepository(QuestionScopedRepository[CareerData]):
    """Repository for Gawi market data, one per career question."""

    def __init__(self, db_session: Session):
        super().__init__(db_session, CareerData)
