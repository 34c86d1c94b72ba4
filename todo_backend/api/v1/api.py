from fastapi import APIRouter
from .endpoints import labels, reminders, tasks

router = APIRouter()

# Include all API endpoints
router.include_router(tasks.router, prefix="/tasks", tags=["tasks"])
router.include_router(reminders.router, prefix="/reminders", tags=["reminders"])
router.include_router(labels.router, prefix="/labels", tags=["labels"])
