"""SQLAlchemy ORM models for Job Search.

Table and column names match the ``jobsearch.sqlite`` layout so an existing
database file opens without conversion.
"""

from datetime import datetime, timezone
from typing import Optional, List

from sqlalchemy import String, Text, ForeignKey, text
from sqlalchemy.orm import DeclarativeBase, Mapped, mapped_column, relationship
from sqlalchemy.types import TypeDecorator


TIMESTAMP_FORMAT = "%Y-%m-%dT%H:%M:%SZ"


def utc_now() -> datetime:
    """Current UTC time truncated to whole seconds."""
    return datetime.now(timezone.utc).replace(microsecond=0)


def format_utc(value: datetime) -> str:
    """Render a datetime as ``yyyy-MM-ddTHH:mm:ssZ``. Naive values are taken as UTC."""
    if value.tzinfo is None:
        value = value.replace(tzinfo=timezone.utc)
    return value.astimezone(timezone.utc).strftime(TIMESTAMP_FORMAT)


def parse_utc(value: str) -> datetime:
    """
    Parse a stored timestamp into an aware UTC datetime.

    Accepts the ``Z``-suffixed form written by the application as well as
    the ``YYYY-MM-DD HH:MM:SS`` form produced by SQLite's ``datetime('now')``.
    """
    raw = value.strip()
    if raw.endswith("Z"):
        raw = raw[:-1]
    parsed = datetime.fromisoformat(raw)
    if parsed.tzinfo is None:
        return parsed.replace(tzinfo=timezone.utc)
    return parsed.astimezone(timezone.utc)


class DatetimeText(String):
    """Text storage that is declared as DATETIME in CREATE TABLE."""

    __visit_name__ = "DATETIME"


class UtcTimestamp(TypeDecorator):
    """UTC timestamp persisted as ISO-8601 text with second precision."""

    impl = DatetimeText
    cache_ok = True

    def process_bind_param(self, value, dialect):
        if value is None:
            return None
        if isinstance(value, str):
            return format_utc(parse_utc(value))
        return format_utc(value)

    def process_result_value(self, value, dialect):
        if value is None:
            return None
        return parse_utc(value)


class Base(DeclarativeBase):
    """Base class for all models."""
    pass


class Company(Base):
    """An employer that roles are tracked against."""
    __tablename__ = "Companies"
    __table_args__ = {"sqlite_autoincrement": True}

    id: Mapped[int] = mapped_column("CompanyID", primary_key=True)
    name: Mapped[str] = mapped_column("Name", Text, unique=True)

    roles: Mapped[List["Role"]] = relationship(back_populates="company")

    def __repr__(self) -> str:
        return f"<Company {self.id}: {self.name}>"


class Status(Base):
    """One stage of the application pipeline. Seeded, never user-created."""
    __tablename__ = "Statuses"
    __table_args__ = {"sqlite_autoincrement": True}

    id: Mapped[int] = mapped_column("StatusID", primary_key=True)
    name: Mapped[str] = mapped_column("Name", Text, unique=True)

    roles: Mapped[List["Role"]] = relationship(back_populates="status")

    def __repr__(self) -> str:
        return f"<Status {self.id}: {self.name}>"


class Role(Base):
    """A tracked job application."""
    __tablename__ = "Roles"
    __table_args__ = {"sqlite_autoincrement": True}

    id: Mapped[int] = mapped_column("RoleID", primary_key=True)
    company_id: Mapped[int] = mapped_column("CompanyID", ForeignKey("Companies.CompanyID"))
    status_id: Mapped[int] = mapped_column("StatusID", ForeignKey("Statuses.StatusID"))
    role_name: Mapped[str] = mapped_column("RoleName", Text)
    notes: Mapped[Optional[str]] = mapped_column("Notes", Text, nullable=True, default="")

    # Timestamps
    created_at: Mapped[datetime] = mapped_column(
        "CreatedUTC", UtcTimestamp, default=utc_now,
        server_default=text("(datetime('now'))"),
    )
    modified_at: Mapped[datetime] = mapped_column(
        "ModifiedUTC", UtcTimestamp, default=utc_now,
        server_default=text("(datetime('now'))"),
    )

    # Relationships
    company: Mapped["Company"] = relationship(back_populates="roles")
    status: Mapped["Status"] = relationship(back_populates="roles")

    def __repr__(self) -> str:
        return f"<Role {self.id}: {self.role_name} (Company {self.company_id})>"
