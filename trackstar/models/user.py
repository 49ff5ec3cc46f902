from sqlalchemy import Column, String, DateTime, Boolean, UniqueConstraint
from sqlalchemy.orm import relationship
from trackstar.database import Base, new_id, utcnow


class User(Base):
    __tablename__ = "users"

    id = Column(String(32), primary_key=True, default=new_id)
    provider_id = Column(String(100), nullable=False)
    provider = Column(String(20), nullable=False)  # github/google
    name = Column(String(200), nullable=False)
    email = Column(String(255), unique=True, nullable=False)
    username = Column(String(50), nullable=True)
    avatar = Column(String(500), nullable=True)  # URL
    timezone = Column(String(64), default="UTC")
    is_active = Column(Boolean, default=True)
    last_login = Column(DateTime, nullable=True)
    created_at = Column(DateTime, default=utcnow)
    updated_at = Column(DateTime, default=utcnow, onupdate=utcnow)

    tasks = relationship("Task", back_populates="user", cascade="all, delete-orphan")
    habits = relationship("Habit", back_populates="user", cascade="all, delete-orphan")

    __table_args__ = (
        UniqueConstraint("provider", "provider_id", name="uq_user_provider"),
    )
