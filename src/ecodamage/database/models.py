"""SQLAlchemy models for ecodamage database."""

from datetime import datetime, UTC
from decimal import Decimal
from sqlalchemy import (
    Column,
    Integer,
    String,
    Text,
    ForeignKey,
    DateTime,
    Numeric,
    Boolean,
    JSON,
    Index,
    create_engine,
)
from sqlalchemy.orm import declarative_base, relationship, sessionmaker, Session

Base = declarative_base()


def _utcnow() -> datetime:
    return datetime.now(UTC)


class DamageCategory(Base):
    """Damage category pricing model."""

    __tablename__ = "damage_categories"

    id = Column(Integer, primary_key=True)
    name = Column(String(255), nullable=False, index=True)
    description = Column(Text, nullable=True)
    base_cost_per_unit = Column(Numeric(10, 2), nullable=False)
    unit_type = Column(String, nullable=False)
    severity_multiplier = Column(Numeric(5, 2), default=Decimal("1.00"), nullable=False)
    active = Column(Boolean, default=True, nullable=False, index=True)
    created_at = Column(DateTime, default=_utcnow, nullable=False)
    updated_at = Column(DateTime, default=_utcnow, onupdate=_utcnow, nullable=False)

    # Relationships
    reports = relationship("EnvironmentalReport", back_populates="damage_category")


class EnvironmentalReport(Base):
    """Environmental incident report model."""

    __tablename__ = "environmental_reports"

    id = Column(Integer, primary_key=True)
    case_number = Column(String, unique=True, nullable=False)
    user_id = Column(Integer, nullable=False, index=True)
    damage_category_id = Column(
        Integer, ForeignKey("damage_categories.id"), nullable=False, index=True
    )
    location = Column(String(255), nullable=False)
    latitude = Column(Numeric(10, 8), nullable=True)
    longitude = Column(Numeric(11, 8), nullable=True)
    affected_area = Column(Numeric(12, 2), nullable=True)
    pollutant_volume = Column(Numeric(12, 2), nullable=True)
    affected_animals = Column(Integer, nullable=True)
    severity_level = Column(String, default="medium", nullable=False, index=True)
    calculated_damage = Column(Numeric(15, 2), nullable=False)
    ecological_data = Column(JSON, nullable=True)
    notes = Column(Text, nullable=True)
    ai_analysis = Column(JSON, nullable=True)
    status = Column(String, default="draft", nullable=False, index=True)
    created_at = Column(DateTime, default=_utcnow, nullable=False)
    updated_at = Column(DateTime, default=_utcnow, onupdate=_utcnow, nullable=False)

    __table_args__ = (Index("ix_environmental_reports_status_created_at", "status", "created_at"),)

    # Relationships
    damage_category = relationship("DamageCategory", back_populates="reports")


def create_session_factory(database_url: str) -> sessionmaker[Session]:
    """Create a SQLAlchemy session factory."""
    engine = create_engine(database_url, echo=False)
    Base.metadata.create_all(engine)
    return sessionmaker(bind=engine)
