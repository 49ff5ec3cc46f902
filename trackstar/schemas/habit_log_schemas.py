from datetime import datetime
from typing import Literal, Optional

from pydantic import Field

from trackstar.schemas.common import CamelModel
from trackstar.schemas.habit_schemas import HabitSummary

Mood = Literal["excellent", "good", "okay", "difficult", "struggling"]


class HabitLogCreate(CamelModel):
    habit_id: str = Field(..., min_length=1, description="ID of the habit being logged")
    completed_date: Optional[datetime] = Field(None, description="Date of completion (defaults to now)")
    completion_count: int = Field(1, ge=1, le=100)
    notes: Optional[str] = Field(None, max_length=500)
    mood: Optional[Mood] = None
    difficulty: Optional[int] = Field(None, ge=1, le=5)


class HabitLogUpdate(CamelModel):
    """Only these fields are mutable; date and habit/user linkage are fixed."""

    completion_count: Optional[int] = Field(None, ge=1, le=100)
    notes: Optional[str] = Field(None, max_length=500)
    mood: Optional[Mood] = None
    difficulty: Optional[int] = Field(None, ge=1, le=5)


class HabitLogOut(CamelModel):
    id: str
    habit_id: str
    user_id: str
    completed_date: datetime
    completion_count: int
    notes: Optional[str] = None
    mood: Optional[str] = None
    difficulty: Optional[int] = None
    created_at: datetime
    updated_at: datetime


class HabitStats(CamelModel):
    total_completions: int
    total_days: int
    completion_rate: str
    current_streak: int
    longest_streak: int
    average_mood: Optional[float] = None
    average_difficulty: Optional[float] = None


class StatsResult(CamelModel):
    habit: HabitSummary
    period: str
    stats: HabitStats
