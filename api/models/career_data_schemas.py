from datetime import datetime
from typing import List, Optional

from pydantic import Field

from api.models.common_schemas import CamelModel


class SalarySeries(CamelModel):
    role: str
    years: List[int] = Field(default_factory=list)
    salaries: List[float] = Field(default_factory=list)


class TrajectoryOutcome(CamelModel):
    """One career outcome; percentages are not required to sum to 100."""
    outcome: str
    percentage: float = Field(..., ge=0, le=100)
    color: str


class MarketMetrics(CamelModel):
    avg_salary: float = 0
    success_rate: float = 0
    time_to_senior: float = 0
    market_demand: str = ""


class Scenario(CamelModel):
    name: str
    success_probability: float
    five_year_income: float
    risk_level: str


class CareerDataResponse(CamelModel):
    id: str
    question_id: str
    salary_data: List[SalarySeries] = Field(default_factory=list)
    trajectory_data: List[TrajectoryOutcome] = Field(default_factory=list)
    market_metrics: Optional[MarketMetrics] = None
    scenarios: List[Scenario] = Field(default_factory=list)
    updated_at: Optional[datetime] = None
