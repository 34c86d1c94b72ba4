from fastapi import APIRouter, Depends, status
import uuid

from ....schemas.reminder import ReminderCreate, ReminderRead
from ....stores.reminder_store import ReminderStore
from ....stores.task_store import TaskStore
from ...deps import get_current_owner_id, get_reminder_store, get_task_store

router = APIRouter()


@router.post("/", response_model=ReminderRead, status_code=status.HTTP_201_CREATED)
def create_reminder(
    reminder_create: ReminderCreate,
    owner_id: uuid.UUID = Depends(get_current_owner_id),
    tasks: TaskStore = Depends(get_task_store),
    reminders: ReminderStore = Depends(get_reminder_store),
):
    return reminders.create(reminder_create, owner_id, tasks)
