from fastapi import APIRouter, Body, Depends, status
from typing import Any, Dict, List
import uuid

from ....schemas.reminder import ReminderRead
from ....schemas.task import TaskRead, validate_task
from ....stores.reminder_store import ReminderStore
from ....stores.task_store import TaskStore
from ...deps import get_current_owner_id, get_reminder_store, get_task_store

router = APIRouter()


@router.get("/", response_model=List[TaskRead])
def list_user_tasks(
    owner_id: uuid.UUID = Depends(get_current_owner_id),
    tasks: TaskStore = Depends(get_task_store),
):
    return [TaskRead.from_task(task) for task in tasks.list_for_owner(owner_id)]


@router.post("/", response_model=TaskRead, status_code=status.HTTP_201_CREATED)
def create_task(
    payload: Dict[str, Any] = Body(...),
    owner_id: uuid.UUID = Depends(get_current_owner_id),
    tasks: TaskStore = Depends(get_task_store),
):
    task = tasks.create(validate_task(payload), owner_id)
    return TaskRead.from_task(task)


@router.get("/{task_id}", response_model=TaskRead)
def get_task(
    task_id: uuid.UUID,
    owner_id: uuid.UUID = Depends(get_current_owner_id),
    tasks: TaskStore = Depends(get_task_store),
):
    return TaskRead.from_task(tasks.get_for_owner(task_id, owner_id))


@router.put("/{task_id}", response_model=TaskRead)
def update_task(
    task_id: uuid.UUID,
    payload: Dict[str, Any] = Body(...),
    owner_id: uuid.UUID = Depends(get_current_owner_id),
    tasks: TaskStore = Depends(get_task_store),
):
    patch = validate_task(payload)
    return TaskRead.from_task(tasks.update_for_owner(task_id, owner_id, patch))


@router.delete("/{task_id}", response_model=TaskRead)
def delete_task(
    task_id: uuid.UUID,
    owner_id: uuid.UUID = Depends(get_current_owner_id),
    tasks: TaskStore = Depends(get_task_store),
    reminders: ReminderStore = Depends(get_reminder_store),
):
    return TaskRead.from_task(tasks.delete_for_owner(task_id, owner_id, reminders))


@router.get("/{task_id}/reminders", response_model=List[ReminderRead])
def list_task_reminders(
    task_id: uuid.UUID,
    owner_id: uuid.UUID = Depends(get_current_owner_id),
    tasks: TaskStore = Depends(get_task_store),
    reminders: ReminderStore = Depends(get_reminder_store),
):
    tasks.get_for_owner(task_id, owner_id)
    return reminders.list_for_task(task_id, owner_id)
