from datetime import datetime
from typing import List, Optional

from pydantic import Field

from api.models.common_schemas import CamelModel


class SwotAnalysisRequest(CamelModel):
    """
    Request body for starting a SWOT analysis.

    All fields are optional. Without a question id in the path, `question`
    is required and a new career question is created from these fields.
    """
    question: Optional[str] = Field(None, description="Career question text")
    current_role: Optional[str] = None
    target_role: Optional[str] = None


class SwotAnalysisResponse(CamelModel):
    id: str
    question_id: str
    strengths: List[str] = Field(default_factory=list)
    weaknesses: List[str] = Field(default_factory=list)
    opportunities: List[str] = Field(default_factory=list)
    threats: List[str] = Field(default_factory=list)
    conversation_status: str = Field(..., description="pending | active | converged")
    updated_at: Optional[datetime] = None
