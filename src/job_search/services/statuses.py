"""Status service for reading the seeded statuses."""

from typing import List, Optional

from sqlalchemy import case, select
from sqlalchemy.orm import Session

from ..core.enums import StatusName
from ..core.models import Status
from ..core.schemas import StatusRead
from ..data.database import get_db


class StatusService:
    """Service for reading statuses."""

    def __init__(self, session: Optional[Session] = None):
        self._session = session

    @property
    def session(self) -> Session:
        if self._session is None:
            self._session = get_db().get_session()
        return self._session

    def list_statuses(self) -> List[StatusRead]:
        """
        Get all statuses in canonical pipeline order.

        The order comes from StatusName, not from physical row order, so it
        holds however the rows were inserted. Unknown names sort last by id.
        """
        order = StatusName.canonical_order()
        position = case(
            {name: index for index, name in enumerate(order)},
            value=Status.name,
            else_=len(order),
        )
        stmt = select(Status).order_by(position, Status.id)
        statuses = self.session.execute(stmt).scalars().all()
        return [StatusRead.model_validate(s) for s in statuses]

    def close(self):
        """Close the session if we own it."""
        if self._session:
            self._session.close()
            self._session = None
