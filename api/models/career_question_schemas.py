from datetime import datetime
from typing import Optional

from pydantic import Field, field_validator

from api.models.common_schemas import CamelModel


class CareerQuestionCreateRequest(CamelModel):
    """Request body for submitting a career question."""
    question: str = Field(..., min_length=1, description="Career decision prompt")
    current_role: Optional[str] = Field(None, description="e.g. 'Senior Software Engineer'")
    target_role: Optional[str] = Field(None, description="e.g. 'Product Manager'")
    user_id: Optional[str] = Field(None, description="Optional owning user (informational)")

    @field_validator("question")
    @classmethod
    def question_not_blank(cls, v: str) -> str:
        if not v.strip():
            raise ValueError("question must not be blank")
        return v


class CareerQuestionResponse(CamelModel):
    id: str
    question: str
    current_role: Optional[str] = None
    target_role: Optional[str] = None
    user_id: Optional[str] = None
    created_at: Optional[datetime] = None
