from sqlmodel import SQLModel, Field
from datetime import datetime
import uuid

from .task import utcnow


class Label(SQLModel, table=True):
    __tablename__ = "labels"

    id: uuid.UUID = Field(default_factory=uuid.uuid4, primary_key=True)
    owner_id: uuid.UUID = Field(index=True, nullable=False)
    name: str = Field(max_length=50, nullable=False)
    created_at: datetime = Field(default_factory=utcnow)
