from sqlmodel import Session

from models.swot_analysis import SwotAnalysis
from repositories.base_repository import QuestionScopedRepository


class SwotAnalysisRepository(QuestionScopedRepository[SwotAnalysis]):
    """Repository for SWOT analyses, one per career question."""

    def __init__(self, db_session: Session):
        super().__init__(db_session, SwotAnalysis)
