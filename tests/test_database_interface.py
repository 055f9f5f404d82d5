"""Tests for the SQLAlchemy implementation of the Database interface."""

from datetime import datetime
from decimal import Decimal

import pytest
from sqlalchemy import text
from sqlalchemy.exc import SQLAlchemyError

from ecodamage.database.base import Database
from ecodamage.database.factories import create_database
from ecodamage.database.models import DamageCategory as ORMDamageCategory
from ecodamage.database.sqlalchemy_db import SQLAlchemyDatabase
from ecodamage.domain.entities import ReportStatus, SeverityLevel, UnitType
from ecodamage.domain.errors import ConflictError, NotFoundError


def _category(db, name="Water Pollution", unit_type=UnitType.VOLUME, active=True):
    return db.create_category(
        name=name,
        base_cost_per_unit=Decimal("150.00"),
        unit_type=unit_type,
        severity_multiplier=Decimal("1.5"),
        active=active,
    )


def _report(db, category_id, case_number="ENV-202501-0001", **overrides):
    values = dict(
        case_number=case_number,
        user_id=1,
        damage_category_id=category_id,
        location="River",
        severity_level=SeverityLevel.MEDIUM,
        calculated_damage=Decimal("100.00"),
    )
    values.update(overrides)
    return db.create_report(**values)


def test_implements_interface(temp_db):
    assert isinstance(temp_db, Database)
    assert isinstance(temp_db, SQLAlchemyDatabase)


def test_category_round_trip(temp_db):
    category_id = _category(temp_db)

    category = temp_db.get_category(category_id)

    assert category.id == category_id
    assert category.unit_type is UnitType.VOLUME
    assert isinstance(category.base_cost_per_unit, Decimal)
    assert category.severity_multiplier == Decimal("1.50")
    assert temp_db.get_category_by_name("Water Pollution").id == category_id
    assert temp_db.get_category_by_name("Nope") is None
    assert temp_db.get_category(999) is None


def test_legacy_and_unknown_unit_rows(temp_db):
    """Rows written by older versions keep pricing."""
    session = temp_db._get_session()
    session.add_all(
        [
            ORMDamageCategory(
                name="Legacy", base_cost_per_unit=Decimal("10"), unit_type="cubic_meter"
            ),
            ORMDamageCategory(
                name="Odd", base_cost_per_unit=Decimal("10"), unit_type="hectare"
            ),
        ]
    )
    session.commit()

    by_name = {c.name: c for c in temp_db.list_categories()}
    assert by_name["Legacy"].unit_type is UnitType.VOLUME
    assert by_name["Odd"].unit_type == "hectare"
    assert by_name["Odd"].severity_multiplier == Decimal("1.00")
    assert by_name["Odd"].active is True


def test_list_and_count_categories(temp_db):
    _category(temp_db, name="B")
    _category(temp_db, name="A")
    hidden = _category(temp_db, name="C", active=False)

    assert [c.name for c in temp_db.list_categories()] == ["A", "B", "C"]
    assert [c.name for c in temp_db.list_categories(active_only=True)] == ["A", "B"]
    assert temp_db.count_categories() == 3
    assert temp_db.count_categories(active_only=True) == 2

    temp_db.set_category_active(hidden, True)
    assert temp_db.count_categories(active_only=True) == 3


def test_set_category_active_missing(temp_db):
    with pytest.raises(NotFoundError):
        temp_db.set_category_active(999, False)


def test_report_round_trip(temp_db):
    category_id = _category(temp_db)
    created_at = datetime(2025, 3, 2, 10, 30)
    report_id = _report(
        temp_db,
        category_id,
        latitude=Decimal("45.12345678"),
        longitude=Decimal("-122.12345678"),
        pollutant_volume=Decimal("12.5"),
        ecological_data={"ph": 6.5},
        status=ReportStatus.SUBMITTED,
        created_at=created_at,
    )

    report = temp_db.get_report(report_id)

    assert report.case_number == "ENV-202501-0001"
    assert report.severity_level is SeverityLevel.MEDIUM
    assert report.status is ReportStatus.SUBMITTED
    assert report.latitude == Decimal("45.12345678")
    assert report.longitude == Decimal("-122.12345678")
    assert report.pollutant_volume == Decimal("12.50")
    assert report.affected_area is None
    assert report.ecological_data == {"ph": 6.5}
    assert report.created_at == created_at
    assert report.updated_at == created_at
    assert temp_db.get_report(999) is None


def test_duplicate_case_number(temp_db):
    category_id = _category(temp_db)
    _report(temp_db, category_id)

    with pytest.raises(ConflictError, match="ENV-202501-0001"):
        _report(temp_db, category_id)

    # The session is still usable after the rollback
    _report(temp_db, category_id, case_number="ENV-202501-0002")
    assert temp_db.count_reports() == 2


def test_update_report(temp_db):
    category_id = _category(temp_db)
    report_id = _report(temp_db, category_id, status=ReportStatus.SUBMITTED)

    temp_db.update_report(
        report_id=report_id,
        damage_category_id=category_id,
        location="Delta",
        severity_level=SeverityLevel.HIGH,
        calculated_damage=Decimal("200.00"),
        affected_area=Decimal("3"),
    )

    report = temp_db.get_report(report_id)
    assert report.location == "Delta"
    assert report.severity_level is SeverityLevel.HIGH
    assert report.calculated_damage == Decimal("200.00")
    assert report.status is ReportStatus.SUBMITTED

    temp_db.update_report(
        report_id=report_id,
        damage_category_id=category_id,
        location="Delta",
        severity_level=SeverityLevel.HIGH,
        calculated_damage=Decimal("200.00"),
        status=ReportStatus.CLOSED,
    )
    assert temp_db.get_report(report_id).status is ReportStatus.CLOSED


def test_failed_write_leaves_session_usable(temp_db):
    category_id = _category(temp_db)
    report_id = _report(temp_db, category_id)
    session = temp_db._get_session()
    session.execute(text(
        "CREATE TRIGGER block_report_updates BEFORE UPDATE ON environmental_reports "
        "BEGIN SELECT RAISE(ABORT, 'reports are read-only'); END;"
    ))
    session.commit()

    with pytest.raises(SQLAlchemyError):
        temp_db.update_report(
            report_id=report_id,
            damage_category_id=category_id,
            location="Delta",
            severity_level=SeverityLevel.HIGH,
            calculated_damage=Decimal("200.00"),
        )

    report = temp_db.get_report(report_id)
    assert report.location == "River"
    assert report.calculated_damage == Decimal("100.00")
    assert temp_db.count_reports() == 1


def test_update_and_delete_missing_report(temp_db):
    category_id = _category(temp_db)
    with pytest.raises(NotFoundError):
        temp_db.update_report(
            report_id=999,
            damage_category_id=category_id,
            location="Nowhere",
            severity_level=SeverityLevel.LOW,
            calculated_damage=Decimal("0"),
        )
    with pytest.raises(NotFoundError):
        temp_db.delete_report(999)


def test_delete_report(temp_db):
    category_id = _category(temp_db)
    report_id = _report(temp_db, category_id)
    temp_db.delete_report(report_id)
    assert temp_db.get_report(report_id) is None
    assert temp_db.count_reports() == 0


def test_list_reports_order_and_window(temp_db):
    category_id = _category(temp_db)
    _report(temp_db, category_id, case_number="A", created_at=datetime(2025, 1, 10))
    _report(temp_db, category_id, case_number="B", created_at=datetime(2025, 2, 10))
    _report(temp_db, category_id, case_number="C", created_at=datetime(2025, 1, 20))

    assert [r.case_number for r in temp_db.list_reports()] == ["B", "C", "A"]
    assert [r.case_number for r in temp_db.list_reports(offset=1, limit=1)] == ["C"]
    assert (
        temp_db.count_reports(created_from=datetime(2025, 1, 1), created_before=datetime(2025, 2, 1))
        == 2
    )


def test_count_reports_by_severity(temp_db):
    category_id = _category(temp_db)
    _report(temp_db, category_id, case_number="A", severity_level=SeverityLevel.CRITICAL)
    _report(temp_db, category_id, case_number="B", severity_level="critical")
    _report(temp_db, category_id, case_number="C", severity_level=SeverityLevel.LOW)

    assert temp_db.count_reports(severity_level=SeverityLevel.CRITICAL) == 2
    assert temp_db.count_reports(severity_level="low") == 1


def test_total_damage(temp_db):
    assert temp_db.get_total_damage() == Decimal("0.00")

    category_id = _category(temp_db)
    _report(temp_db, category_id, case_number="A", calculated_damage=Decimal("112500.00"))
    _report(temp_db, category_id, case_number="B", calculated_damage=Decimal("0.45"))

    assert temp_db.get_total_damage() == Decimal("112500.45")


def test_create_database_prefers_explicit_path(tmp_path, monkeypatch):
    monkeypatch.setenv("ECODAMAGE_DATABASE_URL", "sqlite:///" + str(tmp_path / "from_url.db"))

    db = create_database(str(tmp_path / "explicit.db"))

    assert db.database_url.endswith("explicit.db")


def test_create_database_from_url(tmp_path, monkeypatch):
    monkeypatch.setenv("ECODAMAGE_DATABASE_URL", "sqlite:///" + str(tmp_path / "from_url.db"))

    db = create_database()

    assert db.database_url.endswith("from_url.db")
    assert (tmp_path / "from_url.db").exists()


def test_create_sqlite_database_from_env(tmp_path, monkeypatch):
    monkeypatch.delenv("ECODAMAGE_DATABASE_URL", raising=False)
    monkeypatch.setenv("ECODAMAGE_DB_PATH", str(tmp_path / "env.db"))

    db = create_database()

    assert db.database_url == f"sqlite:///{tmp_path / 'env.db'}"
