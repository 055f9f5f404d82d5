"""
FastAPI application factory
"""
import logging
from contextlib import asynccontextmanager
from typing import Optional

from fastapi import FastAPI

from ecodamage.api.errors import register_error_handlers
from ecodamage.api.routes import calculator, categories, dashboard, reports
from ecodamage.database.base import Database
from ecodamage.database.factories import create_database

logger = logging.getLogger(__name__)


def create_app(db: Optional[Database] = None) -> FastAPI:
    """Build the HTTP application.

    Args:
        db: Database to serve from. If None, the database configured by
            ECODAMAGE_DATABASE_URL or ECODAMAGE_DB_PATH (or the default path) is opened.

    Returns:
        FastAPI application
    """
    if db is None:
        db = create_database()
        db.connect()
        db.initialize_schema()

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        logger.info("Serving environmental damage API")
        yield
        app.state.db.disconnect()

    app = FastAPI(
        title="ecodamage",
        description="Environmental damage reports and damage calculation",
        lifespan=lifespan,
    )
    app.state.db = db

    register_error_handlers(app)
    app.include_router(dashboard.router)
    app.include_router(calculator.router)
    app.include_router(categories.router)
    app.include_router(reports.router)
    return app
