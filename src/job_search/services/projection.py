"""Projection of stored rows into what the list views display."""

from datetime import datetime, timezone, tzinfo
from typing import Iterable, List, Optional

from ..core.schemas import CompanyItem, CompanyProjection, CompanyRead, RoleRead, RoleRow


def format_local_timestamp(value: datetime, tz: Optional[tzinfo] = None) -> str:
    """
    Render a UTC timestamp in local time as ``<short date> <short time>``.

    The date uses the locale's ``%x`` format; the time shows hours and
    minutes. ``tz`` overrides the host time zone.
    """
    if value.tzinfo is None:
        value = value.replace(tzinfo=timezone.utc)
    local = value.astimezone(tz)
    return f"{local.strftime('%x')} {local.strftime('%H:%M')}"


def project_roles(roles: Iterable[RoleRead], tz: Optional[tzinfo] = None) -> List[RoleRow]:
    """Add local display timestamps to roles. Stored UTC values pass through unchanged."""
    return [
        RoleRow(
            **role.model_dump(),
            created=format_local_timestamp(role.created_at, tz),
            modified=format_local_timestamp(role.modified_at, tz),
        )
        for role in roles
    ]


def project_companies(companies: Iterable[CompanyRead]) -> CompanyProjection:
    """Split companies into table rows and a name-sorted selector list."""
    rows = list(companies)
    lookup = sorted(
        (CompanyItem(id=c.id, name=c.name) for c in rows),
        key=lambda item: item.name,
    )
    return CompanyProjection(rows=rows, lookup=lookup)
