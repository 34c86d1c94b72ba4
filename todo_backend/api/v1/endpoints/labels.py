from fastapi import APIRouter, Depends, status
from typing import List
import uuid

from ....schemas.label import LabelCreate, LabelRead
from ....stores.label_store import LabelStore
from ....stores.task_store import TaskStore
from ...deps import get_current_owner_id, get_label_store, get_task_store

router = APIRouter()


@router.get("/", response_model=List[LabelRead])
def list_labels(
    owner_id: uuid.UUID = Depends(get_current_owner_id),
    labels: LabelStore = Depends(get_label_store),
):
    return labels.list_for_owner(owner_id)


@router.post("/", response_model=LabelRead, status_code=status.HTTP_201_CREATED)
def create_label(
    label_create: LabelCreate,
    owner_id: uuid.UUID = Depends(get_current_owner_id),
    labels: LabelStore = Depends(get_label_store),
):
    return labels.create(label_create.name, owner_id)


@router.delete("/{label_id}", response_model=LabelRead)
def delete_label(
    label_id: uuid.UUID,
    owner_id: uuid.UUID = Depends(get_current_owner_id),
    labels: LabelStore = Depends(get_label_store),
    tasks: TaskStore = Depends(get_task_store),
):
    return labels.delete_for_owner(label_id, owner_id, tasks)
