from datetime import date
from typing import Optional

from fastapi import APIRouter, Depends, Query, status
from sqlalchemy.orm import Session

from trackstar.auth import get_current_user
from trackstar.config import DEFAULT_LOG_LIMIT, DEFAULT_STATS_DAYS, MAX_STATS_DAYS
from trackstar.database import get_db
from trackstar.routes.deps import get_stats_service
from trackstar.schemas.common import Envelope, ListEnvelope, MessageResponse
from trackstar.schemas.habit_log_schemas import HabitLogCreate, HabitLogOut, HabitLogUpdate, StatsResult
from trackstar.services.habit_log_service import HabitLogService
from trackstar.services.stats_service import HabitStatsService

router = APIRouter(prefix="/habit-logs", tags=["Habit Logs"])


@router.get("", response_model=ListEnvelope[HabitLogOut], summary="Get all habit logs for current user")
def list_habit_logs(
    habit_id: Optional[str] = Query(None, alias="habitId", description="Filter by specific habit ID"),
    start_date: Optional[date] = Query(None, alias="startDate", description="Filter logs from this date"),
    end_date: Optional[date] = Query(None, alias="endDate", description="Filter logs until this date"),
    limit: int = Query(DEFAULT_LOG_LIMIT, ge=1, le=100, description="Maximum number of logs to return"),
    user_id: str = Depends(get_current_user),
    db: Session = Depends(get_db),
):
    logs = HabitLogService.get_all(db, user_id, habit_id, start_date, end_date, limit)
    return ListEnvelope[HabitLogOut](count=len(logs), data=[HabitLogOut.model_validate(log) for log in logs])


@router.get("/stats/{habit_id}", response_model=Envelope[StatsResult], summary="Get statistics for a specific habit")
def get_habit_stats(
    habit_id: str,
    days: int = Query(DEFAULT_STATS_DAYS, ge=1, le=MAX_STATS_DAYS, description="Number of days to analyze"),
    user_id: str = Depends(get_current_user),
    stats_service: HabitStatsService = Depends(get_stats_service),
):
    return Envelope[StatsResult](data=stats_service.compute_stats(habit_id, user_id, days))


@router.get("/{log_id}", response_model=Envelope[HabitLogOut], summary="Get a habit log by ID")
def get_habit_log(log_id: str, user_id: str = Depends(get_current_user), db: Session = Depends(get_db)):
    log = HabitLogService.get_by_id(db, user_id, log_id)
    return Envelope[HabitLogOut](data=HabitLogOut.model_validate(log))


@router.post("", response_model=Envelope[HabitLogOut], status_code=status.HTTP_201_CREATED,
             summary="Log a habit completion")
def create_habit_log(log_data: HabitLogCreate, user_id: str = Depends(get_current_user),
                     db: Session = Depends(get_db)):
    log = HabitLogService.create(db, user_id, log_data.model_dump())
    return Envelope[HabitLogOut](data=HabitLogOut.model_validate(log), message="Habit completion logged successfully")


@router.put("/{log_id}", response_model=Envelope[HabitLogOut], summary="Update a habit log")
def update_habit_log(log_id: str, log_data: HabitLogUpdate, user_id: str = Depends(get_current_user),
                     db: Session = Depends(get_db)):
    log = HabitLogService.update(db, user_id, log_id, log_data.model_dump(exclude_unset=True, exclude_none=True))
    return Envelope[HabitLogOut](data=HabitLogOut.model_validate(log), message="Habit log updated successfully")


@router.delete("/{log_id}", response_model=MessageResponse, summary="Delete a habit log")
def delete_habit_log(log_id: str, user_id: str = Depends(get_current_user), db: Session = Depends(get_db)):
    HabitLogService.delete(db, user_id, log_id)
    return MessageResponse(message="Habit log deleted successfully")
