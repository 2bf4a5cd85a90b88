"""Company service for listing and adding companies."""

import logging
from typing import List, Optional

from sqlalchemy import func, select
from sqlalchemy.dialects.sqlite import insert
from sqlalchemy.orm import Session

from ..core.models import Company
from ..core.schemas import CompanyCreate, CompanyRead
from ..data.database import get_db

logger = logging.getLogger(__name__)


class CompanyService:
    """Service for managing companies."""

    def __init__(self, session: Optional[Session] = None):
        self._session = session

    @property
    def session(self) -> Session:
        if self._session is None:
            self._session = get_db().get_session()
        return self._session

    def list_companies(self) -> List[CompanyRead]:
        """Get all companies ordered by name (binary collation, locale independent)."""
        stmt = select(Company).order_by(Company.name, Company.id)
        companies = self.session.execute(stmt).scalars().all()
        return [CompanyRead.model_validate(c) for c in companies]

    def get_by_name(self, name: str) -> Optional[CompanyRead]:
        """Get a company by its exact name."""
        stmt = select(Company).where(Company.name == name)
        company = self.session.execute(stmt).scalar_one_or_none()
        return CompanyRead.model_validate(company) if company else None

    def add_company(self, data: CompanyCreate) -> CompanyRead:
        """
        Add a company unless one with the same name exists.

        Duplicates are not an error: the existing company is returned and
        no row is written.
        """
        name_column = Company.__mapper__.columns["name"]
        stmt = (
            insert(Company.__table__)
            .values({name_column: data.name})
            .on_conflict_do_nothing(index_elements=[name_column])
        )
        result = self.session.execute(stmt)
        self.session.commit()

        if result.rowcount:
            logger.info(f"Added company {data.name!r}")
        else:
            logger.debug(f"Company {data.name!r} already exists")

        return self.get_by_name(data.name)

    def count(self) -> int:
        """Number of stored companies."""
        return self.session.execute(select(func.count()).select_from(Company)).scalar_one()

    def close(self):
        """Close the session if we own it."""
        if self._session:
            self._session.close()
            self._session = None
