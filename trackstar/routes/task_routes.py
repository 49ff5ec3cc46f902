from typing import Optional

from fastapi import APIRouter, Depends, Query, status
from sqlalchemy.orm import Session

from trackstar.auth import get_current_user
from trackstar.database import get_db
from trackstar.schemas.common import Envelope, ListEnvelope, MessageResponse
from trackstar.schemas.task_schemas import TaskCreate, TaskOut, TaskPriority, TaskStatus, TaskUpdate
from trackstar.services.task_service import TaskService

router = APIRouter(prefix="/tasks", tags=["Tasks"])


@router.get("", response_model=ListEnvelope[TaskOut], summary="Get all tasks for current user")
def list_tasks(
    status_filter: Optional[TaskStatus] = Query(None, alias="status"),
    priority: Optional[TaskPriority] = None,
    user_id: str = Depends(get_current_user),
    db: Session = Depends(get_db),
):
    tasks = TaskService.get_all(db, user_id, {"status": status_filter, "priority": priority})
    return ListEnvelope[TaskOut](count=len(tasks), data=[TaskOut.model_validate(t) for t in tasks])


@router.post("", response_model=Envelope[TaskOut], status_code=status.HTTP_201_CREATED, summary="Create a task")
def create_task(task_data: TaskCreate, user_id: str = Depends(get_current_user), db: Session = Depends(get_db)):
    task = TaskService.create(db, user_id, task_data.model_dump())
    return Envelope[TaskOut](data=TaskOut.model_validate(task), message="Task created successfully")


@router.get("/{task_id}", response_model=Envelope[TaskOut], summary="Get a task by ID")
def get_task(task_id: str, user_id: str = Depends(get_current_user), db: Session = Depends(get_db)):
    task = TaskService.get_by_id(db, user_id, task_id)
    return Envelope[TaskOut](data=TaskOut.model_validate(task))


@router.put("/{task_id}", response_model=Envelope[TaskOut], summary="Update a task")
def update_task(task_id: str, task_data: TaskUpdate, user_id: str = Depends(get_current_user),
                db: Session = Depends(get_db)):
    task = TaskService.update(db, user_id, task_id, task_data.model_dump(exclude_unset=True, exclude_none=True))
    return Envelope[TaskOut](data=TaskOut.model_validate(task), message="Task updated successfully")


@router.delete("/{task_id}", response_model=MessageResponse, summary="Delete a task")
def delete_task(task_id: str, user_id: str = Depends(get_current_user), db: Session = Depends(get_db)):
    TaskService.delete(db, user_id, task_id)
    return MessageResponse(message="Task deleted successfully")
