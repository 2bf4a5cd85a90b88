"""Role service for tracking job applications."""

import logging
from datetime import datetime
from typing import Callable, List, Optional

from sqlalchemy import func, select
from sqlalchemy.orm import Session

from ..core.models import Company, Role, Status, utc_now
from ..core.schemas import RoleCreate, RoleRead, RoleUpdate
from ..data.database import get_db

logger = logging.getLogger(__name__)


class RoleService:
    """Service for managing roles."""

    def __init__(
        self,
        session: Optional[Session] = None,
        clock: Callable[[], datetime] = utc_now,
    ):
        self._session = session
        self._clock = clock

    @property
    def session(self) -> Session:
        if self._session is None:
            self._session = get_db().get_session()
        return self._session

    def _now(self) -> datetime:
        return self._clock().replace(microsecond=0)

    def _joined(self):
        """Roles joined with company and status names."""
        return (
            select(
                Role.id.label("id"),
                Role.role_name.label("role_name"),
                Company.id.label("company_id"),
                Company.name.label("company_name"),
                Status.id.label("status_id"),
                Status.name.label("status_name"),
                Role.notes.label("notes"),
                Role.created_at.label("created_at"),
                Role.modified_at.label("modified_at"),
            )
            .join(Company, Role.company_id == Company.id)
            .join(Status, Role.status_id == Status.id)
        )

    @staticmethod
    def _to_read(row) -> RoleRead:
        return RoleRead(
            id=row.id,
            role_name=row.role_name,
            company_id=row.company_id,
            company_name=row.company_name,
            status_id=row.status_id,
            status_name=row.status_name,
            notes=row.notes or "",
            created_at=row.created_at,
            modified_at=row.modified_at,
        )

    def list_roles(self) -> List[RoleRead]:
        """Get all roles, newest first."""
        # datetime() puts the Z-suffixed and column-default text forms on one scale
        stmt = self._joined().order_by(func.datetime(Role.created_at).desc(), Role.id.desc())
        return [self._to_read(row) for row in self.session.execute(stmt)]

    def get(self, role_id: int) -> Optional[RoleRead]:
        """Get a role by ID."""
        row = self.session.execute(
            self._joined().where(Role.id == role_id)
        ).one_or_none()
        return self._to_read(row) if row else None

    def add_role(self, data: RoleCreate) -> RoleRead:
        """Add a role. Created and modified times are both set to now."""
        now = self._now()
        role = Role(
            company_id=data.company_id,
            status_id=data.status_id,
            role_name=data.role_name,
            notes=data.notes,
            created_at=now,
            modified_at=now,
        )
        self.session.add(role)
        self.session.commit()
        logger.info(f"Added role {role.id}: {data.role_name!r}")
        return self.get(role.id)

    def update_role(self, role_id: int, data: RoleUpdate) -> RoleRead:
        """
        Update a role's status and notes.

        The modified time advances only when the status changes; a notes-only
        edit leaves it as it was.

        Raises:
            ValueError: If the role does not exist.
        """
        role = self.session.get(Role, role_id)
        if role is None:
            raise ValueError(f"Role {role_id} not found")

        if role.status_id != data.status_id:
            logger.info(f"Role {role_id} status {role.status_id} -> {data.status_id}")
            role.status_id = data.status_id
            role.modified_at = self._now()
        role.notes = data.notes

        self.session.commit()
        return self.get(role_id)

    def close(self):
        """Close the session if we own it."""
        if self._session:
            self._session.close()
            self._session = None
