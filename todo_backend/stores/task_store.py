"""Ownership-scoped task persistence.

Every lookup filters on ``(id, owner_id)`` together, so a task owned by
someone else is indistinguishable from a task that does not exist.

Concurrency: ``update_for_owner`` and the task delete are single conditional
statements. Two concurrent deletes of the same task race on the DELETE row
count and exactly one of them wins. Two concurrent updates are last-writer-wins;
there is no version column.
"""

from typing import Any, List, Mapping, Protocol, Union
import logging
import uuid

from sqlalchemy import delete, update
from sqlmodel import select

from ..core.exceptions import InvalidReferenceError, NotFoundError
from ..db.session import Database
from ..db.transaction import TransactionCoordinator, UnitOfWork
from ..models.task import Task, utcnow
from ..schemas.task import TaskPatch, TaskPayload, validate_task_patch
from . import integrity

logger = logging.getLogger(__name__)


class DependentStore(Protocol):
    """A store whose rows must not outlive the task they point at."""

    def delete_for_task(self, task_id: uuid.UUID, uow: UnitOfWork) -> int:
        ...


def _patch_values(patch: Union[TaskPayload, TaskPatch, Mapping[str, Any]]) -> dict:
    if isinstance(patch, (TaskPayload, TaskPatch)):
        return patch.to_task_fields()
    # Raises ValidationError before anything is written
    return validate_task_patch(patch).to_task_fields()


class TaskStore:
    def __init__(self, database: Database):
        self._database = database
        self._transactions = TransactionCoordinator(database)

    @property
    def transactions(self) -> TransactionCoordinator:
        return self._transactions

    def _owned(self, task_id: uuid.UUID, owner_id: uuid.UUID):
        return select(Task).where(Task.id == task_id, Task.owner_id == owner_id)

    def list_for_owner(self, owner_id: uuid.UUID) -> List[Task]:
        with self._database.session() as session:
            tasks = session.exec(
                select(Task).where(Task.owner_id == owner_id).order_by(Task.created_at)
            ).all()
        if not tasks:
            raise NotFoundError("No tasks found for current user")
        return list(tasks)

    def get_for_owner(self, task_id: uuid.UUID, owner_id: uuid.UUID) -> Task:
        with self._database.session() as session:
            task = session.exec(self._owned(task_id, owner_id)).first()
        if task is None:
            raise NotFoundError()
        return task

    def create(self, payload: TaskPayload, owner_id: uuid.UUID) -> Task:
        task = Task(owner_id=owner_id, **payload.to_task_fields())
        with self._database.session() as session:
            session.add(task)
            session.commit()
            session.refresh(task)
        logger.info("Task created id=%s owner=%s", task.id, owner_id)
        return task

    def update_for_owner(self, task_id: uuid.UUID, owner_id: uuid.UUID,
                         patch: Union[TaskPayload, TaskPatch, Mapping[str, Any]]) -> Task:
        values = _patch_values(patch)
        values["updated_at"] = utcnow()

        with self._database.session() as session:
            result = session.exec(
                update(Task)
                .where(Task.id == task_id, Task.owner_id == owner_id)
                .values(**values)
                .execution_options(synchronize_session=False)
            )
            if result.rowcount == 0:
                session.rollback()
                raise NotFoundError()
            task = session.exec(self._owned(task_id, owner_id)).one()
            session.commit()

        logger.debug("Task updated id=%s fields=%s", task_id, sorted(values))
        return task

    def delete_for_owner(self, task_id: uuid.UUID, owner_id: uuid.UUID,
                         reminders: DependentStore) -> Task:
        """Delete the task and every reminder pointing at it, atomically.

        Raises NotFoundError (nothing changed) when the task does not exist for
        this owner, and TransactionError (nothing changed) when the database
        fails part-way or at commit.
        """
        with self._transactions.transaction() as uow:
            session = uow.session
            task = session.exec(self._owned(task_id, owner_id)).first()
            if task is None:
                raise NotFoundError()
            # Keep the loaded row as the return value once the DELETE runs
            session.expunge(task)

            result = session.exec(
                delete(Task)
                .where(Task.id == task_id, Task.owner_id == owner_id)
                .execution_options(synchronize_session=False)
            )
            # A concurrent delete got here first
            if result.rowcount == 0:
                raise NotFoundError()

            removed = reminders.delete_for_task(task.id, uow)

        logger.info("Task deleted id=%s owner=%s reminders_removed=%d", task_id, owner_id, removed)
        return task

    def verify_ownership(self, task_id: uuid.UUID, owner_id: uuid.UUID) -> None:
        """Check a foreign task reference before another record is allowed to hold it."""
        with self._database.session() as session:
            task = session.exec(self._owned(task_id, owner_id)).first()
        if task is None:
            raise InvalidReferenceError()

    verify_task_id = verify_ownership

    def remove_label_reference(self, label_id: uuid.UUID, owner_id: uuid.UUID,
                               uow: UnitOfWork) -> int:
        """Prune a deleted label from the owner's tasks; returns how many tasks changed."""
        return integrity.remove_label_reference(label_id, owner_id, uow)
