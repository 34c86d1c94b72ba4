"""Unit-of-work transactions spanning more than one table.

A ``UnitOfWork`` is handed to every store method that must join the caller's
transaction. Stores never commit it: the coordinator commits exactly once when
the ``with`` block completes and rolls back on any exception.
"""

import logging
from contextlib import contextmanager
from typing import Callable, Iterator, TypeVar

from sqlalchemy.exc import SQLAlchemyError
from sqlmodel import Session

from ..core.exceptions import TransactionError
from .session import Database

logger = logging.getLogger(__name__)

T = TypeVar("T")


class UnitOfWork:
    def __init__(self, session: Session):
        self._session = session
        self._active = True

    @property
    def active(self) -> bool:
        return self._active

    @property
    def session(self) -> Session:
        if not self._active:
            raise TransactionError("Unit of work is already closed")
        return self._session

    def _commit(self) -> None:
        self._session.commit()
        self._active = False

    def _rollback(self) -> None:
        self._active = False
        self._session.rollback()


class TransactionCoordinator:
    def __init__(self, database: Database):
        self._database = database

    @contextmanager
    def transaction(self) -> Iterator[UnitOfWork]:
        """Open a unit of work; commit on success, roll back on any error.

        Database failures, including a failed commit, surface as
        TransactionError. Domain errors raised inside the block are re-raised
        unchanged after the rollback.
        """
        with self._database.session() as session:
            uow = UnitOfWork(session)
            try:
                yield uow
                uow._commit()
            except SQLAlchemyError as exc:
                logger.warning("Rolling back transaction after database error: %s", exc)
                uow._rollback()
                raise TransactionError() from exc
            except BaseException:
                logger.info("Rolling back transaction")
                uow._rollback()
                raise

    def with_transaction(self, fn: Callable[[UnitOfWork], T]) -> T:
        with self.transaction() as uow:
            return fn(uow)
