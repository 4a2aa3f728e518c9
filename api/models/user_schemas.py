from datetime import datetime
from typing import Optional

from pydantic import Field

from api.models.common_schemas import CamelModel


class UserCreateRequest(CamelModel):
    username: str = Field(..., min_length=1, description="Unique username")


class UserResponse(CamelModel):
    id: str
    username: str
    created_at: Optional[datetime] = None
