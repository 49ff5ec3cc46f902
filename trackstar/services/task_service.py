"""
task_service.py — Task management
Handles CRUD for Tasks and keeps completed_at in step with the status.
"""

from sqlalchemy.orm import Session
from sqlalchemy import desc

from trackstar.database import to_utc_naive, utcnow
from trackstar.errors import NotFound, ValidationError
from trackstar.models.task import Task
from trackstar.services.user_service import UserService


def _sync_completed_at(task: Task) -> None:
    if task.status == "completed" and not task.completed_at:
        task.completed_at = utcnow()
    elif task.status != "completed":
        task.completed_at = None


class TaskService:
    @staticmethod
    def create(db: Session, user_id: str, data: dict) -> Task:
        UserService.get_active(db, user_id)
        due = data.get("due_date")
        task = Task(
            user_id=user_id,
            title=data.get("title"),
            description=data.get("description"),
            status=data.get("status", "pending"),
            priority=data.get("priority", "medium"),
            due_date=to_utc_naive(due) if due else None,
            category=data.get("category"),
        )
        _sync_completed_at(task)
        db.add(task)
        db.commit()
        db.refresh(task)
        return task

    @staticmethod
    def get_all(db: Session, user_id: str, filters: dict = None) -> list[Task]:
        """Query with filters."""
        query = db.query(Task).filter(Task.user_id == user_id)
        filters = filters or {}
        if filters.get("status"):
            query = query.filter(Task.status == filters["status"])
        if filters.get("priority"):
            query = query.filter(Task.priority == filters["priority"])
        return query.order_by(desc(Task.created_at)).all()

    @staticmethod
    def get_by_id(db: Session, user_id: str, task_id: str) -> Task:
        task = db.query(Task).filter_by(id=task_id, user_id=user_id).first()
        if not task:
            raise NotFound("Task not found")
        return task

    @staticmethod
    def update(db: Session, user_id: str, task_id: str, data: dict) -> Task:
        """Update task and handle side-effects."""
        if not data:
            raise ValidationError("No valid updates provided")
        task = TaskService.get_by_id(db, user_id, task_id)

        for key, value in data.items():
            if hasattr(task, key):
                if key == "due_date" and value is not None:
                    value = to_utc_naive(value)
                setattr(task, key, value)

        _sync_completed_at(task)
        db.commit()
        db.refresh(task)
        return task

    @staticmethod
    def delete(db: Session, user_id: str, task_id: str) -> None:
        task = TaskService.get_by_id(db, user_id, task_id)
        db.delete(task)
        db.commit()
