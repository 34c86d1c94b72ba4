from sqlmodel import SQLModel, Field, Column, JSON
from typing import List
from datetime import datetime, timezone
import uuid
from enum import Enum


MAX_TITLE_LENGTH = 100
MAX_CONTENT_LENGTH = 5000
MAX_LABELS = 50


class TaskStatus(str, Enum):
    unset = ""
    todo = "todo"
    doing = "doing"
    complete = "complete"


class TaskPriority(str, Enum):
    unset = ""
    low = "low"
    medium = "medium"
    high = "high"
    urgent = "urgent"


def utcnow() -> datetime:
    return datetime.now(timezone.utc)


class Task(SQLModel, table=True):
    __tablename__ = "tasks"

    id: uuid.UUID = Field(default_factory=uuid.uuid4, primary_key=True)
    # Users live in another service; ownership is a plain indexed reference
    owner_id: uuid.UUID = Field(index=True, nullable=False)
    title: str = Field(max_length=MAX_TITLE_LENGTH, nullable=False)
    content: str = Field(default="", max_length=MAX_CONTENT_LENGTH, nullable=False)
    status: str = Field(default=TaskStatus.unset.value, max_length=20)
    priority: str = Field(default=TaskPriority.unset.value, max_length=20)

    # Ordered label ids as canonical UUID strings; duplicates are kept
    label_ids: List[str] = Field(default_factory=list, sa_column=Column(JSON, nullable=False))

    created_at: datetime = Field(default_factory=utcnow)
    updated_at: datetime = Field(default_factory=utcnow, nullable=False)
