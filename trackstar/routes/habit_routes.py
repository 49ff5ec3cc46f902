from typing import Optional

from fastapi import APIRouter, Depends, Query, status
from sqlalchemy.orm import Session

from trackstar.auth import get_current_user
from trackstar.database import get_db
from trackstar.schemas.common import Envelope, ListEnvelope, MessageResponse
from trackstar.schemas.habit_schemas import HabitCreate, HabitOut, HabitUpdate
from trackstar.services.habit_service import HabitService

router = APIRouter(prefix="/habits", tags=["Habits"])


@router.get("", response_model=ListEnvelope[HabitOut], summary="Get all habits for current user")
def list_habits(
    is_active: Optional[bool] = Query(None, alias="isActive"),
    user_id: str = Depends(get_current_user),
    db: Session = Depends(get_db),
):
    habits = HabitService.get_all(db, user_id, is_active)
    return ListEnvelope[HabitOut](count=len(habits), data=[HabitOut.model_validate(h) for h in habits])


@router.post("", response_model=Envelope[HabitOut], status_code=status.HTTP_201_CREATED, summary="Create a habit")
def create_habit(habit_data: HabitCreate, user_id: str = Depends(get_current_user), db: Session = Depends(get_db)):
    habit = HabitService.create(db, user_id, habit_data.model_dump())
    return Envelope[HabitOut](data=HabitOut.model_validate(habit), message="Habit created successfully")


@router.get("/{habit_id}", response_model=Envelope[HabitOut], summary="Get a habit by ID")
def get_habit(habit_id: str, user_id: str = Depends(get_current_user), db: Session = Depends(get_db)):
    habit = HabitService.get_by_id(db, user_id, habit_id)
    return Envelope[HabitOut](data=HabitOut.model_validate(habit))


@router.put("/{habit_id}", response_model=Envelope[HabitOut], summary="Update a habit")
def update_habit(habit_id: str, habit_data: HabitUpdate, user_id: str = Depends(get_current_user),
                 db: Session = Depends(get_db)):
    habit = HabitService.update(db, user_id, habit_id, habit_data.model_dump(exclude_unset=True, exclude_none=True))
    return Envelope[HabitOut](data=HabitOut.model_validate(habit), message="Habit updated successfully")


@router.delete("/{habit_id}", response_model=MessageResponse, summary="Delete a habit and its logs")
def delete_habit(habit_id: str, user_id: str = Depends(get_current_user), db: Session = Depends(get_db)):
    HabitService.delete(db, user_id, habit_id)
    return MessageResponse(message="Habit deleted successfully")
