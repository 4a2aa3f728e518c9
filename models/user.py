from datetime import datetime
import uuid

from sqlmodel import SQLModel, Field, Column

from models.common import UTCDateTime, utc_now


class User(SQLModel, table=True):
    """
    Optional owner of career questions.

    Carries no credentials; the API has no authentication.
    """
    __tablename__ = "users"

    id: str = Field(default_factory=lambda: str(uuid.uuid4()), primary_key=True)
    username: str = Field(index=True, unique=True)
    created_at: datetime = Field(default_factory=utc_now, sa_column=Column(UTCDateTime, nullable=False))
