from sqlalchemy import Column, Integer, String, Text, Date, DateTime, ForeignKey, UniqueConstraint
from sqlalchemy.orm import relationship
from trackstar.database import Base, new_id, utcnow


class HabitLog(Base):
    __tablename__ = "habit_logs"

    id = Column(String(32), primary_key=True, default=new_id)
    habit_id = Column(String(32), ForeignKey("habits.id"), nullable=False, index=True)
    user_id = Column(String(32), ForeignKey("users.id"), nullable=False, index=True)
    completed_date = Column(DateTime, nullable=False, default=utcnow)
    completed_day = Column(Date, nullable=False)  # UTC calendar day of completed_date
    completion_count = Column(Integer, default=1)
    notes = Column(Text, nullable=True)
    mood = Column(String(20), nullable=True)  # excellent/good/okay/difficult/struggling
    difficulty = Column(Integer, nullable=True)  # 1-5
    created_at = Column(DateTime, default=utcnow)
    updated_at = Column(DateTime, default=utcnow, onupdate=utcnow)

    habit = relationship("Habit", back_populates="logs")

    __table_args__ = (
        UniqueConstraint("habit_id", "user_id", "completed_day", name="uq_habit_user_day"),
    )
