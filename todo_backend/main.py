from contextlib import asynccontextmanager
from typing import Optional

from fastapi import FastAPI

from .api.v1.api import router as api_router
from .core.config import settings
from .core.exceptions import AppException, app_exception_handler
from .core.logging import setup_logging
from .db.session import Database
from .stores.label_store import LabelStore
from .stores.reminder_store import ReminderStore
from .stores.task_store import TaskStore


def create_app(database: Optional[Database] = None) -> FastAPI:
    @asynccontextmanager
    async def lifespan(app: FastAPI):
        setup_logging(settings.LOG_LEVEL)
        db = database or Database()
        # Create tables on startup
        db.create_all()
        app.state.database = db
        app.state.task_store = TaskStore(db)
        app.state.reminder_store = ReminderStore(db)
        app.state.label_store = LabelStore(db)
        yield
        db.dispose()

    app = FastAPI(
        title=settings.PROJECT_NAME,
        description="Ownership-scoped task store with cascading reminder cleanup",
        version="1.0.0",
        lifespan=lifespan,
    )
    app.add_exception_handler(AppException, app_exception_handler)

    # Include API routers
    app.include_router(api_router, prefix=settings.API_V1_STR)

    @app.get("/health")
    def health_check():
        return {"status": "healthy"}

    return app


app = create_app()
