from datetime import datetime
from typing import Optional
import uuid

from sqlmodel import SQLModel, Field, Column
from sqlalchemy import Text

from models.common import UTCDateTime, utc_now


class CareerQuestion(SQLModel, table=True):
    """
    A user's career decision prompt plus optional role context.

    Immutable after creation.
    """
    __tablename__ = "career_questions"

    id: str = Field(default_factory=lambda: str(uuid.uuid4()), primary_key=True)
    user_id: Optional[str] = Field(default=None, index=True)  # informational, not enforced

    question: str = Field(sa_column=Column(Text, nullable=False))
    current_role: Optional[str] = None
    target_role: Optional[str] = None

    created_at: datetime = Field(default_factory=utc_now, sa_column=Column(UTCDateTime, nullable=False))
