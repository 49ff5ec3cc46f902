"""
habit_service.py — Habits
CRUD for the habits a user tracks. Deleting a habit drops its logs with it.
"""

import logging

from sqlalchemy.orm import Session

from trackstar.errors import NotFound, ValidationError
from trackstar.models.habit import Habit
from trackstar.services.user_service import UserService

logger = logging.getLogger(__name__)


class HabitService:
    @staticmethod
    def create(db: Session, user_id: str, data: dict) -> Habit:
        UserService.get_active(db, user_id)
        h = Habit(
            user_id=user_id,
            name=data.get("name"),
            description=data.get("description"),
            frequency=data.get("frequency", "daily"),
            target_count=data.get("target_count", 1),
            category=data.get("category"),
            color=data.get("color"),
        )
        db.add(h)
        db.commit()
        db.refresh(h)
        logger.info("Created habit %s for user %s", h.id, user_id)
        return h

    @staticmethod
    def get_all(db: Session, user_id: str, is_active: bool | None = None) -> list[Habit]:
        query = db.query(Habit).filter_by(user_id=user_id)
        if is_active is not None:
            query = query.filter_by(is_active=is_active)
        return query.order_by(Habit.created_at.desc()).all()

    @staticmethod
    def get_by_id(db: Session, user_id: str, habit_id: str) -> Habit:
        h = db.query(Habit).filter_by(id=habit_id, user_id=user_id).first()
        if not h:
            raise NotFound("Habit not found")
        return h

    @staticmethod
    def update(db: Session, user_id: str, habit_id: str, data: dict) -> Habit:
        if not data:
            raise ValidationError("No valid updates provided")
        h = HabitService.get_by_id(db, user_id, habit_id)
        for k, v in data.items():
            if hasattr(h, k):
                setattr(h, k, v)
        db.commit()
        db.refresh(h)
        return h

    @staticmethod
    def delete(db: Session, user_id: str, habit_id: str) -> None:
        h = HabitService.get_by_id(db, user_id, habit_id)
        db.delete(h)
        db.commit()
        logger.info("Deleted habit %s for user %s", habit_id, user_id)
