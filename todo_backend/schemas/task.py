"""Task payload validation.

``validate_task`` runs once at the boundary, before any store call, and
either returns a normalized ``TaskPayload`` or raises ``ValidationError``
listing every failing field.
"""

from typing import Annotated, Any, Dict, List, Optional
from datetime import datetime
import uuid

from pydantic import BaseModel, ConfigDict, Field, StrictStr, field_validator
from pydantic import ValidationError as PydanticValidationError

from ..core.exceptions import ValidationError
from ..models.task import (
    MAX_CONTENT_LENGTH,
    MAX_LABELS,
    MAX_TITLE_LENGTH,
    Task,
    TaskPriority,
    TaskStatus,
)

LabelIds = Annotated[List[uuid.UUID], Field(max_length=MAX_LABELS)]


class TaskPayload(BaseModel):
    model_config = ConfigDict(extra="forbid")

    title: Annotated[StrictStr, Field(max_length=MAX_TITLE_LENGTH)]
    content: Annotated[StrictStr, Field(max_length=MAX_CONTENT_LENGTH)]
    status: TaskStatus
    priority: TaskPriority
    # The key is required but null is accepted and means "no labels"
    labels: Optional[LabelIds]

    @field_validator("labels")
    @classmethod
    def null_labels_to_empty(cls, v):
        return [] if v is None else v

    def to_task_fields(self) -> Dict[str, Any]:
        """Column values for a Task row, keyed by model field name."""
        return {
            "title": self.title,
            "content": self.content,
            "status": self.status.value,
            "priority": self.priority.value,
            "label_ids": [str(label_id) for label_id in self.labels],
        }


class TaskPatch(BaseModel):
    """Partial update keyed by Task field name; only the given keys are applied."""

    model_config = ConfigDict(extra="forbid")

    # Defaults are not validated, so an explicit null for a text or enum field is rejected
    title: Annotated[StrictStr, Field(max_length=MAX_TITLE_LENGTH)] = None
    content: Annotated[StrictStr, Field(max_length=MAX_CONTENT_LENGTH)] = None
    status: TaskStatus = None
    priority: TaskPriority = None
    label_ids: Optional[LabelIds] = None

    @field_validator("label_ids")
    @classmethod
    def null_labels_to_empty(cls, v):
        return [] if v is None else v

    def to_task_fields(self) -> Dict[str, Any]:
        fields = self.model_dump(exclude_unset=True)
        for key in ("status", "priority"):
            if key in fields:
                fields[key] = fields[key].value
        if "label_ids" in fields:
            fields["label_ids"] = [str(label_id) for label_id in fields["label_ids"]]
        return fields


def _describe(error: Dict[str, Any]) -> Dict[str, Any]:
    return {
        "field": ".".join(str(part) for part in error["loc"]),
        "message": error["msg"],
        "type": error["type"],
    }


def validate_task(payload: Any) -> TaskPayload:
    try:
        return TaskPayload.model_validate(payload)
    except PydanticValidationError as exc:
        raise ValidationError([_describe(error) for error in exc.errors()]) from None


def validate_task_patch(patch: Any) -> TaskPatch:
    try:
        return TaskPatch.model_validate(patch)
    except PydanticValidationError as exc:
        raise ValidationError([_describe(error) for error in exc.errors()]) from None


class TaskRead(BaseModel):
    id: uuid.UUID
    title: str
    content: str
    status: str
    priority: str
    labels: List[uuid.UUID]
    created_at: datetime
    updated_at: datetime

    @classmethod
    def from_task(cls, task: Task) -> "TaskRead":
        return cls(
            id=task.id,
            title=task.title,
            content=task.content,
            status=task.status,
            priority=task.priority,
            labels=task.label_ids,
            created_at=task.created_at,
            updated_at=task.updated_at,
        )
