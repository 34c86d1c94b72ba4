# tests/test_task_store.py

from __future__ import annotations

import uuid

import pytest

from todo_backend.core.exceptions import InvalidReferenceError, NotFoundError, ValidationError
from todo_backend.stores.task_store import TaskStore

from .factories import make_payload


def test_create_then_get_returns_same_fields(task_store: TaskStore, owner_id: uuid.UUID) -> None:
    label = uuid.uuid4()
    payload = make_payload(title="Write report", content="Q3 numbers", status="doing",
                           priority="urgent", labels=[str(label)])

    created = task_store.create(payload, owner_id)
    fetched = task_store.get_for_owner(created.id, owner_id)

    assert isinstance(fetched.id, uuid.UUID)
    assert fetched.owner_id == owner_id
    assert fetched.title == "Write report"
    assert fetched.content == "Q3 numbers"
    assert fetched.status == "doing"
    assert fetched.priority == "urgent"
    assert fetched.label_ids == [str(label)]
    assert fetched.created_at is not None
    assert fetched.updated_at is not None


def test_list_for_owner_only_returns_own_tasks(
    task_store: TaskStore, owner_id: uuid.UUID, other_owner_id: uuid.UUID
) -> None:
    first = task_store.create(make_payload(title="one"), owner_id)
    second = task_store.create(make_payload(title="two"), owner_id)
    task_store.create(make_payload(title="not mine"), other_owner_id)

    tasks = task_store.list_for_owner(owner_id)
    assert {t.id for t in tasks} == {first.id, second.id}


def test_list_for_owner_without_tasks_is_not_found(task_store: TaskStore, owner_id: uuid.UUID) -> None:
    with pytest.raises(NotFoundError) as excinfo:
        task_store.list_for_owner(owner_id)
    assert excinfo.value.status_code == 404


def test_get_unknown_task_is_not_found(task_store: TaskStore, owner_id: uuid.UUID) -> None:
    with pytest.raises(NotFoundError):
        task_store.get_for_owner(uuid.uuid4(), owner_id)


def test_update_applies_patch_and_refreshes_updated_at(task_store: TaskStore, owner_id: uuid.UUID) -> None:
    task = task_store.create(make_payload(), owner_id)

    updated = task_store.update_for_owner(
        task.id, owner_id, make_payload(title="Buy oat milk", status="complete")
    )

    assert updated.id == task.id
    assert updated.title == "Buy oat milk"
    assert updated.status == "complete"
    assert updated.priority == "low"
    assert updated.updated_at >= task.updated_at
    assert task_store.get_for_owner(task.id, owner_id).title == "Buy oat milk"


def test_update_with_partial_mapping_leaves_other_fields(task_store: TaskStore, owner_id: uuid.UUID) -> None:
    task = task_store.create(make_payload(content="2 litres"), owner_id)

    updated = task_store.update_for_owner(task.id, owner_id, {"priority": "high"})

    assert updated.priority == "high"
    assert updated.title == "Buy milk"
    assert updated.content == "2 litres"


def test_update_rejects_identity_fields(task_store: TaskStore, owner_id: uuid.UUID) -> None:
    task = task_store.create(make_payload(), owner_id)

    with pytest.raises(ValidationError) as excinfo:
        task_store.update_for_owner(
            task.id, owner_id, {"owner_id": uuid.uuid4(), "id": uuid.uuid4(), "title": "kept"}
        )
    assert {e["field"] for e in excinfo.value.errors} == {"owner_id", "id"}

    stored = task_store.get_for_owner(task.id, owner_id)
    assert stored.owner_id == owner_id
    assert stored.title == "Buy milk"


def test_invalid_mapping_patch_is_rejected_and_row_unchanged(
    task_store: TaskStore, owner_id: uuid.UUID
) -> None:
    label = str(uuid.uuid4())
    task = task_store.create(make_payload(labels=[label]), owner_id)

    with pytest.raises(ValidationError) as excinfo:
        task_store.update_for_owner(task.id, owner_id, {
            "status": "bogus",
            "priority": "x" * 20,
            "title": "t" * 101,
            "label_ids": [uuid.uuid4() for _ in range(60)],
        })
    assert {e["field"] for e in excinfo.value.errors} == {"status", "priority", "title", "label_ids"}

    stored = task_store.get_for_owner(task.id, owner_id)
    assert (stored.title, stored.status, stored.priority) == ("Buy milk", "todo", "low")
    assert stored.label_ids == [label]
    assert stored.updated_at == task.updated_at


def test_mapping_patch_rejects_null_text_fields(task_store: TaskStore, owner_id: uuid.UUID) -> None:
    task = task_store.create(make_payload(), owner_id)

    with pytest.raises(ValidationError):
        task_store.update_for_owner(task.id, owner_id, {"title": None, "status": None})
    assert task_store.get_for_owner(task.id, owner_id).title == "Buy milk"


def test_mapping_patch_with_null_labels_clears_them(task_store: TaskStore, owner_id: uuid.UUID) -> None:
    task = task_store.create(make_payload(labels=[str(uuid.uuid4())]), owner_id)

    updated = task_store.update_for_owner(task.id, owner_id, {"label_ids": None})

    assert updated.label_ids == []
    assert updated.title == "Buy milk"


def test_update_unknown_task_is_not_found(task_store: TaskStore, owner_id: uuid.UUID) -> None:
    with pytest.raises(NotFoundError):
        task_store.update_for_owner(uuid.uuid4(), owner_id, make_payload())


def test_other_owner_cannot_read_update_or_delete(
    task_store: TaskStore, reminder_store, owner_id: uuid.UUID, other_owner_id: uuid.UUID
) -> None:
    task = task_store.create(make_payload(), owner_id)

    with pytest.raises(NotFoundError):
        task_store.get_for_owner(task.id, other_owner_id)
    with pytest.raises(NotFoundError):
        task_store.update_for_owner(task.id, other_owner_id, make_payload(title="hijacked"))
    with pytest.raises(NotFoundError):
        task_store.delete_for_owner(task.id, other_owner_id, reminder_store)

    # untouched for the real owner
    assert task_store.get_for_owner(task.id, owner_id).title == "Buy milk"


def test_verify_task_id(task_store: TaskStore, owner_id: uuid.UUID, other_owner_id: uuid.UUID) -> None:
    task = task_store.create(make_payload(), owner_id)

    assert task_store.verify_task_id(task.id, owner_id) is None

    with pytest.raises(InvalidReferenceError) as excinfo:
        task_store.verify_task_id(task.id, other_owner_id)
    assert excinfo.value.status_code == 400
    assert excinfo.value.error_code == "INVALID_REFERENCE"

    with pytest.raises(InvalidReferenceError):
        task_store.verify_ownership(uuid.uuid4(), owner_id)
