from datetime import datetime
from typing import Literal, Optional

from pydantic import Field

from trackstar.schemas.common import CamelModel

Frequency = Literal["daily", "weekly"]


class HabitCreate(CamelModel):
    name: str = Field(..., min_length=1, max_length=100)
    description: Optional[str] = None
    frequency: Frequency = "daily"
    target_count: int = Field(1, ge=1, le=100)
    category: Optional[str] = Field(None, max_length=50)
    color: Optional[str] = Field(None, max_length=20)


class HabitUpdate(CamelModel):
    name: Optional[str] = Field(None, min_length=1, max_length=100)
    description: Optional[str] = None
    frequency: Optional[Frequency] = None
    target_count: Optional[int] = Field(None, ge=1, le=100)
    category: Optional[str] = Field(None, max_length=50)
    color: Optional[str] = Field(None, max_length=20)
    is_active: Optional[bool] = None


class HabitSummary(CamelModel):
    id: str
    name: str
    frequency: str
    target_count: int
    category: Optional[str] = None


class HabitOut(HabitSummary):
    user_id: str
    description: Optional[str] = None
    color: Optional[str] = None
    is_active: bool
    created_at: datetime
    updated_at: datetime
