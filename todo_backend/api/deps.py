from fastapi import Depends, HTTPException, Request, status
from fastapi.security import HTTPBearer, HTTPAuthorizationCredentials
import uuid

from ..core.security import decode_owner_id
from ..stores.label_store import LabelStore
from ..stores.reminder_store import ReminderStore
from ..stores.task_store import TaskStore


security = HTTPBearer()


def get_current_owner_id(token: HTTPAuthorizationCredentials = Depends(security)) -> uuid.UUID:
    owner_id = decode_owner_id(token.credentials)
    if owner_id is None:
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Could not validate credentials",
            headers={"WWW-Authenticate": "Bearer"},
        )
    return owner_id


# Stores are built once in the app lifespan and kept on app.state
def get_task_store(request: Request) -> TaskStore:
    return request.app.state.task_store


def get_reminder_store(request: Request) -> ReminderStore:
    return request.app.state.reminder_store


def get_label_store(request: Request) -> LabelStore:
    return request.app.state.label_store
