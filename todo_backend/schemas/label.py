from pydantic import BaseModel, ConfigDict, Field
from datetime import datetime
import uuid


class LabelCreate(BaseModel):
    name: str = Field(min_length=1, max_length=50)


class LabelRead(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: uuid.UUID
    name: str
    created_at: datetime
