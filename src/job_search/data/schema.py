"""Schema creation and status seeding."""

import logging

from sqlalchemy.dialects.sqlite import insert
from sqlalchemy.engine import Connection

from ..core.enums import StatusName
from ..core.models import Base, Status

logger = logging.getLogger(__name__)


def initialize_schema(connection: Connection):
    """
    Ensure the Companies, Roles and Statuses tables exist and that every
    canonical status is present.

    Safe to run on every start: tables are created only when missing and
    statuses are inserted only when no row with the same name exists.
    """
    Base.metadata.create_all(bind=connection, checkfirst=True)

    name_column = Status.__mapper__.columns["name"]
    seeded = 0
    for name in StatusName.canonical_order():
        stmt = (
            insert(Status.__table__)
            .values({name_column: name})
            .on_conflict_do_nothing(index_elements=[name_column])
        )
        seeded += connection.execute(stmt).rowcount

    if seeded:
        logger.info(f"Seeded {seeded} statuses")
