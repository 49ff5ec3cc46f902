"""
store.py — read side of the document store used by the statistics engine.
"""

from datetime import datetime

from sqlalchemy.orm import Session

from trackstar.models.habit import Habit
from trackstar.models.habit_log import HabitLog


class HabitStore:
    def __init__(self, db: Session):
        self.db = db

    def find_habit(self, habit_id: str, user_id: str) -> Habit | None:
        return self.db.query(Habit).filter_by(id=habit_id, user_id=user_id).first()

    def list_logs(self, habit_id: str, user_id: str, start: datetime, end: datetime) -> list[HabitLog]:
        """Logs with start <= completed_date < end, oldest first."""
        return (
            self.db.query(HabitLog)
            .filter(
                HabitLog.habit_id == habit_id,
                HabitLog.user_id == user_id,
                HabitLog.completed_date >= start,
                HabitLog.completed_date < end,
            )
            .order_by(HabitLog.completed_date.asc())
            .all()
        )
