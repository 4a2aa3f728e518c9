from datetime import datetime
from typing import List
import uuid

from sqlmodel import SQLModel, Field, Column
from sqlalchemy import JSON

from models.common import AnalysisStatus, UTCDateTime, utc_now


class SwotAnalysis(SQLModel, table=True):
    """
    Vazir's SWOT analysis for one career question.

    One-to-one with a CareerQuestion, looked up by question_id.
    Each update replaces the quadrant lists it is given; lists are never merged.

    conversation_status: "pending" | "active" | "converged"
    """
    __tablename__ = "swot_analyses"

    id: str = Field(default_factory=lambda: str(uuid.uuid4()), primary_key=True)
    question_id: str = Field(index=True)  # informational, not enforced

    strengths: List[str] = Field(default_factory=list, sa_column=Column(JSON))
    weaknesses: List[str] = Field(default_factory=list, sa_column=Column(JSON))
    opportunities: List[str] = Field(default_factory=list, sa_column=Column(JSON))
    threats: List[str] = Field(default_factory=list, sa_column=Column(JSON))

    conversation_status: str = Field(default=AnalysisStatus.PENDING.value)

    updated_at: datetime = Field(default_factory=utc_now, sa_column=Column(UTCDateTime, nullable=False))
