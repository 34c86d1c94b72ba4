from sqlmodel import SQLModel, Field
from typing import Optional
from datetime import datetime
import uuid

from .task import utcnow


class Reminder(SQLModel, table=True):
    __tablename__ = "reminders"

    id: uuid.UUID = Field(default_factory=uuid.uuid4, primary_key=True)
    # Integrity with tasks.id is kept by the cascading delete, not by a DB constraint
    task_id: uuid.UUID = Field(index=True, nullable=False)
    owner_id: uuid.UUID = Field(index=True, nullable=False)
    remind_at: datetime = Field(nullable=False)
    note: Optional[str] = Field(default=None, max_length=500)
    created_at: datetime = Field(default_factory=utcnow)
