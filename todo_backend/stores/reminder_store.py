from typing import List
import logging
import uuid

from sqlalchemy import delete
from sqlmodel import select

from ..db.session import Database
from ..db.transaction import UnitOfWork
from ..models.reminder import Reminder
from ..schemas.reminder import ReminderCreate
from .task_store import TaskStore

logger = logging.getLogger(__name__)


class ReminderStore:
    def __init__(self, database: Database):
        self._database = database

    def create(self, payload: ReminderCreate, owner_id: uuid.UUID, tasks: TaskStore) -> Reminder:
        # Raises InvalidReferenceError (400) rather than NotFoundError (404)
        tasks.verify_task_id(payload.task_id, owner_id)

        reminder = Reminder(
            task_id=payload.task_id,
            owner_id=owner_id,
            remind_at=payload.remind_at,
            note=payload.note,
        )
        with self._database.session() as session:
            session.add(reminder)
            session.commit()
            session.refresh(reminder)
        logger.info("Reminder created id=%s task=%s", reminder.id, reminder.task_id)
        return reminder

    def list_for_task(self, task_id: uuid.UUID, owner_id: uuid.UUID) -> List[Reminder]:
        with self._database.session() as session:
            reminders = session.exec(
                select(Reminder)
                .where(Reminder.task_id == task_id, Reminder.owner_id == owner_id)
                .order_by(Reminder.remind_at)
            ).all()
        return list(reminders)

    def delete_for_task(self, task_id: uuid.UUID, uow: UnitOfWork) -> int:
        """Bulk-delete the reminders of a task inside the caller's transaction."""
        result = uow.session.exec(
            delete(Reminder)
            .where(Reminder.task_id == task_id)
            .execution_options(synchronize_session=False)
        )
        return result.rowcount
