from datetime import datetime
from typing import List, Dict, Any, Optional
import uuid

from sqlmodel import SQLModel, Field, Column
from sqlalchemy import JSON

from models.common import UTCDateTime, utc_now


class CareerData(SQLModel, table=True):
    """
    Gawi's market data for one career question.

    JSON shapes:
        salary_data:     [{"role", "years": [int], "salaries": [number]}]
        trajectory_data: [{"outcome", "percentage": 0-100, "color"}]
        market_metrics:  {"avgSalary", "successRate", "timeToSenior", "marketDemand"}
        scenarios:       [{"name", "successProbability", "fiveYearIncome", "riskLevel"}]
    """
    __tablename__ = "career_data"

    id: str = Field(default_factory=lambda: str(uuid.uuid4()), primary_key=True)
    question_id: str = Field(index=True)  # informational, not enforced

    salary_data: List[Dict[str, Any]] = Field(default_factory=list, sa_column=Column(JSON))
    trajectory_data: List[Dict[str, Any]] = Field(default_factory=list, sa_column=Column(JSON))
    market_metrics: Optional[Dict[str, Any]] = Field(default=None, sa_column=Column(JSON))
    scenarios: List[Dict[str, Any]] = Field(default_factory=list, sa_column=Column(JSON))

    updated_at: datetime = Field(default_factory=utc_now, sa_column=Column(UTCDateTime, nullable=False))
