"""Shared pytest fixtures for ecodamage tests."""

import logging
import tempfile
import os
from datetime import datetime, timedelta, UTC
import pytest

from ecodamage.database.factories import create_sqlite_database
from ecodamage.domain.category import CategoryService
from ecodamage.domain.dashboard import DashboardService
from ecodamage.domain.report import ReportService


@pytest.fixture(autouse=True)
def package_logger():
    """Restore the ecodamage logger after tests that configure logging."""
    logger = logging.getLogger("ecodamage")
    level, handlers = logger.level, list(logger.handlers)
    yield logger
    logger.setLevel(level)
    logger.handlers = handlers


@pytest.fixture
def temp_db():
    """Create a temporary database for testing."""
    # Create a temporary file for the database
    fd, db_path = tempfile.mkstemp(suffix=".db")
    os.close(fd)

    # Create database
    db = create_sqlite_database(database_path=db_path)
    # Store the path for tests that need it
    db.database_path = db_path
    db.connect()
    db.initialize_schema()

    yield db

    # Cleanup
    db.disconnect()
    if os.path.exists(db_path):
        os.unlink(db_path)


class SteppingClock:
    """Clock that advances one minute on every call."""

    def __init__(self, start: datetime):
        self.current = start

    def __call__(self) -> datetime:
        now = self.current
        self.current = now + timedelta(minutes=1)
        return now


@pytest.fixture
def clock():
    """A deterministic clock starting mid-January 2025."""
    return SteppingClock(datetime(2025, 1, 15, 9, 0, tzinfo=UTC))


@pytest.fixture
def category_service(temp_db):
    """Create a CategoryService with a temporary database."""
    return CategoryService(temp_db)


@pytest.fixture
def report_service(temp_db, clock):
    """Create a ReportService with a temporary database and fixed clock."""
    return ReportService(temp_db, clock=clock)


@pytest.fixture
def dashboard_service(temp_db):
    """Create a DashboardService with a temporary database."""
    return DashboardService(temp_db)


@pytest.fixture
def sample_categories(category_service):
    """Create the default damage categories and return their IDs by name."""
    from ecodamage.cli.commands.init_categories import DEFAULT_CATEGORIES

    category_ids = {}
    for name, description, cost, unit_type, multiplier in DEFAULT_CATEGORIES:
        category_ids[name] = category_service.create_category(
            name=name,
            base_cost_per_unit=cost,
            unit_type=unit_type,
            severity_multiplier=multiplier,
            description=description,
        )
    return category_ids


@pytest.fixture
def sample_report(report_service, sample_categories):
    """Create a critical water pollution report (100 cubic meters)."""
    from decimal import Decimal

    report_id = report_service.create_report(
        user_id=7,
        damage_category_id=sample_categories["Water Pollution"],
        location="Riverside industrial park",
        severity_level="critical",
        pollutant_volume=Decimal("100"),
        latitude=Decimal("51.5072"),
        longitude=Decimal("-0.1276"),
    )
    return report_service.require_report(report_id)


@pytest.fixture
def cli_runner():
    """Create a Click CLI test runner."""
    from click.testing import CliRunner

    return CliRunner()


@pytest.fixture
def api_client(temp_db):
    """Create a FastAPI test client serving the temporary database."""
    from fastapi.testclient import TestClient
    from ecodamage.api.app import create_app

    return TestClient(create_app(temp_db))
