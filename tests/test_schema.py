from sqlalchemy import DateTime, func, inspect, select, text
from sqlalchemy.pool import StaticPool

from job_search.core.enums import StatusName
from job_search.core.models import Base, Status
from job_search.data.database import Database
from job_search.data.schema import initialize_schema
from job_search.services.statuses import StatusService


def test_initialize_creates_tables(db):
    tables = set(inspect(db.engine).get_table_names())
    assert {"Companies", "Roles", "Statuses"} <= tables


def test_initialize_twice_keeps_seven_statuses(db):
    db.initialize()
    db.initialize()

    with db.session_scope() as session:
        count = session.execute(select(func.count()).select_from(Status)).scalar_one()

    assert count == 7


def test_statuses_listed_in_canonical_order(session):
    names = [s.name for s in StatusService(session).list_statuses()]
    assert names == StatusName.canonical_order()
    assert names[0] == "Applied"
    assert names[-1] == "Accepted"


def test_status_order_ignores_insertion_order():
    database = Database(
        "sqlite://",
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )
    with database.engine.begin() as connection:
        Base.metadata.create_all(bind=connection)
        connection.execute(
            text("INSERT INTO Statuses (Name) VALUES (:name)"),
            [{"name": "Rejected"}, {"name": "Offer"}, {"name": "Applied"}],
        )
        initialize_schema(connection)

    with database.session_scope() as session:
        statuses = StatusService(session).list_statuses()

    assert [s.name for s in statuses] == StatusName.canonical_order()
    database.dispose()


def test_foreign_keys_are_enforced(db):
    with db.engine.connect() as connection:
        assert connection.exec_driver_sql("PRAGMA foreign_keys").scalar() == 1


def test_timestamp_columns_declared_as_datetime(db):
    with db.engine.connect() as connection:
        ddl = connection.execute(
            text("SELECT sql FROM sqlite_master WHERE type = 'table' AND name = 'Roles'")
        ).scalar_one()
    assert '"CreatedUTC" DATETIME' in ddl
    assert '"ModifiedUTC" DATETIME' in ddl

    columns = {c["name"]: c["type"] for c in inspect(db.engine).get_columns("Roles")}
    assert isinstance(columns["CreatedUTC"], DateTime)
    assert isinstance(columns["ModifiedUTC"], DateTime)
