# Import all models so they register with SQLAlchemy Base.metadata
# This ensures Base.metadata.create_all() creates all tables

from trackstar.models.user import User
from trackstar.models.task import Task
from trackstar.models.habit import Habit
from trackstar.models.habit_log import HabitLog

__all__ = [
    "User",
    "Task",
    "Habit",
    "HabitLog",
]
