from typing import List
import logging
import uuid

from sqlalchemy import delete
from sqlmodel import select

from ..core.exceptions import NotFoundError
from ..db.session import Database
from ..db.transaction import TransactionCoordinator
from ..models.label import Label
from .task_store import TaskStore

logger = logging.getLogger(__name__)


class LabelStore:
    def __init__(self, database: Database):
        self._database = database
        self._transactions = TransactionCoordinator(database)

    def create(self, name: str, owner_id: uuid.UUID) -> Label:
        label = Label(name=name, owner_id=owner_id)
        with self._database.session() as session:
            session.add(label)
            session.commit()
            session.refresh(label)
        return label

    def list_for_owner(self, owner_id: uuid.UUID) -> List[Label]:
        with self._database.session() as session:
            labels = session.exec(
                select(Label).where(Label.owner_id == owner_id).order_by(Label.created_at)
            ).all()
        return list(labels)

    def delete_for_owner(self, label_id: uuid.UUID, owner_id: uuid.UUID, tasks: TaskStore) -> Label:
        """Delete a label and prune it from the owner's tasks in one transaction."""
        with self._transactions.transaction() as uow:
            session = uow.session
            label = session.exec(
                select(Label).where(Label.id == label_id, Label.owner_id == owner_id)
            ).first()
            if label is None:
                raise NotFoundError("Label with the given id was not found")
            session.expunge(label)

            tasks.remove_label_reference(label_id, owner_id, uow)

            result = session.exec(
                delete(Label)
                .where(Label.id == label_id, Label.owner_id == owner_id)
                .execution_options(synchronize_session=False)
            )
            if result.rowcount == 0:
                raise NotFoundError("Label with the given id was not found")

        logger.info("Label deleted id=%s owner=%s", label_id, owner_id)
        return label
