"""
habit_log_service.py — Habit completion logs
Logs completions (one per habit per calendar day), lists them by date range and edits them.
"""

import logging
from datetime import date, datetime, time, timedelta

from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session

from trackstar.config import DEFAULT_LOG_LIMIT
from trackstar.database import to_utc_naive, utcnow
from trackstar.errors import NotFound, ValidationError
from trackstar.models.habit import Habit
from trackstar.models.habit_log import HabitLog

logger = logging.getLogger(__name__)

UPDATABLE_FIELDS = ("completion_count", "notes", "mood", "difficulty")


class HabitLogService:
    @staticmethod
    def get_all(db: Session, user_id: str, habit_id: str | None = None,
                start_date: date | None = None, end_date: date | None = None,
                limit: int = DEFAULT_LOG_LIMIT) -> list[HabitLog]:
        """Newest first; start/end dates are inclusive calendar days."""
        query = db.query(HabitLog).filter(HabitLog.user_id == user_id)
        if habit_id:
            query = query.filter(HabitLog.habit_id == habit_id)
        if start_date:
            query = query.filter(HabitLog.completed_date >= datetime.combine(start_date, time.min))
        if end_date:
            query = query.filter(HabitLog.completed_date < datetime.combine(end_date + timedelta(days=1), time.min))
        return query.order_by(HabitLog.completed_date.desc()).limit(limit).all()

    @staticmethod
    def get_by_id(db: Session, user_id: str, log_id: str) -> HabitLog:
        log = db.query(HabitLog).filter_by(id=log_id, user_id=user_id).first()
        if not log:
            raise NotFound("Habit log not found")
        return log

    @staticmethod
    def create(db: Session, user_id: str, data: dict) -> HabitLog:
        """Log a completion. Rejects a second log for the same habit on the same day."""
        habit_id = data["habit_id"]
        habit = db.query(Habit).filter_by(id=habit_id, user_id=user_id).first()
        if not habit:
            raise NotFound("Habit not found")

        completed = to_utc_naive(data.get("completed_date") or utcnow())
        day = completed.date()

        existing = db.query(HabitLog).filter_by(habit_id=habit_id, user_id=user_id, completed_day=day).first()
        if existing:
            raise ValidationError("Habit already logged for this date")

        log = HabitLog(
            habit_id=habit_id,
            user_id=user_id,
            completed_date=completed,
            completed_day=day,
            completion_count=data.get("completion_count") or 1,
            notes=data.get("notes"),
            mood=data.get("mood"),
            difficulty=data.get("difficulty"),
        )
        db.add(log)
        try:
            db.commit()
        except IntegrityError:
            # A concurrent request logged the same day first
            db.rollback()
            raise ValidationError("Habit already logged for this date")
        db.refresh(log)
        logger.info("Logged habit %s for user %s on %s", habit_id, user_id, day)
        return log

    @staticmethod
    def update(db: Session, user_id: str, log_id: str, data: dict) -> HabitLog:
        updates = {k: v for k, v in data.items() if k in UPDATABLE_FIELDS}
        if not updates:
            raise ValidationError("No valid updates provided")

        log = HabitLogService.get_by_id(db, user_id, log_id)
        for key, value in updates.items():
            setattr(log, key, value)
        db.commit()
        db.refresh(log)
        return log

    @staticmethod
    def delete(db: Session, user_id: str, log_id: str) -> None:
        log = HabitLogService.get_by_id(db, user_id, log_id)
        db.delete(log)
        db.commit()
        logger.info("Deleted habit log %s for user %s", log_id, user_id)
