import logging
import uuid

from sqlmodel import select

from ..db.transaction import UnitOfWork
from ..models.task import Task, utcnow

logger = logging.getLogger(__name__)


def remove_label_reference(label_id: uuid.UUID, owner_id: uuid.UUID, uow: UnitOfWork) -> int:
    """Drop ``label_id`` from the label list of every task owned by ``owner_id``.

    Runs inside the caller's unit of work so the pruning commits together with
    the label's own removal. Every other id keeps its position. Returns the
    number of tasks touched; zero is normal and running it again is a no-op.
    """
    session = uow.session
    target = str(label_id)

    tasks = session.exec(select(Task).where(Task.owner_id == owner_id)).all()
    touched = 0
    for task in tasks:
        if target not in task.label_ids:
            continue
        # Assign a new list so the JSON column is flagged dirty
        task.label_ids = [existing for existing in task.label_ids if existing != target]
        task.updated_at = utcnow()
        session.add(task)
        touched += 1

    session.flush()
    logger.debug("Pruned label %s from %d task(s) of owner %s", target, touched, owner_id)
    return touched
