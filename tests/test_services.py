from datetime import datetime, timezone

import pytest
from pydantic import ValidationError
from sqlalchemy import text
from sqlalchemy.exc import IntegrityError

from job_search.core.schemas import CompanyCreate, RoleCreate, RoleUpdate
from job_search.services.companies import CompanyService
from job_search.services.roles import RoleService
from job_search.services.statuses import StatusService


@pytest.fixture
def statuses(session):
    return {s.name: s for s in StatusService(session).list_statuses()}


@pytest.fixture
def acme(session):
    return CompanyService(session).add_company(CompanyCreate(name="Acme"))


# ============================================================================
# Companies
# ============================================================================

def test_add_company_is_idempotent(session):
    service = CompanyService(session)

    first = service.add_company(CompanyCreate(name="Acme"))
    second = service.add_company(CompanyCreate(name="Acme"))

    assert first.id == second.id
    assert service.count() == 1
    assert [c.name for c in service.list_companies()] == ["Acme"]


def test_company_names_are_case_sensitive(session):
    service = CompanyService(session)
    service.add_company(CompanyCreate(name="Acme"))
    service.add_company(CompanyCreate(name="ACME"))

    assert service.count() == 2


def test_list_companies_sorted_by_name(session):
    service = CompanyService(session)
    for name in ["Cobalt", "Acme", "Beta"]:
        service.add_company(CompanyCreate(name=name))

    assert [c.name for c in service.list_companies()] == ["Acme", "Beta", "Cobalt"]


def test_company_name_is_trimmed_and_required():
    assert CompanyCreate(name="  Acme ").name == "Acme"
    with pytest.raises(ValidationError):
        CompanyCreate(name="   ")


# ============================================================================
# Roles
# ============================================================================

def test_add_role_sets_equal_timestamps(session, clock, acme, statuses):
    service = RoleService(session, clock=clock)

    role = service.add_role(RoleCreate(
        company_id=acme.id, status_id=statuses["Applied"].id, role_name="Engineer"
    ))

    assert role.created_at == role.modified_at == clock.now
    assert role.notes == ""


def test_add_role_lists_joined_names(session, clock, acme, statuses):
    service = RoleService(session, clock=clock)
    service.add_role(RoleCreate(
        company_id=acme.id, status_id=statuses["Applied"].id, role_name="Engineer", notes=""
    ))

    roles = service.list_roles()

    assert len(roles) == 1
    assert roles[0].role_name == "Engineer"
    assert roles[0].company_name == "Acme"
    assert roles[0].status_name == "Applied"
    assert roles[0].notes == ""


def test_list_roles_newest_first(session, clock, acme, statuses):
    service = RoleService(session, clock=clock)
    for name in ["First", "Second", "Third"]:
        service.add_role(RoleCreate(
            company_id=acme.id, status_id=statuses["Applied"].id, role_name=name
        ))
        clock.advance(minutes=5)

    roles = service.list_roles()

    assert [r.role_name for r in roles] == ["Third", "Second", "First"]
    assert all(a.created_at >= b.created_at for a, b in zip(roles, roles[1:]))


def test_list_roles_orders_mixed_timestamp_formats(session, clock, acme, statuses):
    clock.now = datetime(2024, 3, 1, 1, 0, 0, tzinfo=timezone.utc)
    RoleService(session, clock=clock).add_role(RoleCreate(
        company_id=acme.id, status_id=statuses["Applied"].id, role_name="Early"
    ))
    session.execute(
        text(
            "INSERT INTO Roles (CompanyID, StatusID, RoleName, CreatedUTC, ModifiedUTC) "
            "VALUES (:c, :s, 'Late', '2024-03-01 23:00:00', '2024-03-01 23:00:00')"
        ),
        {"c": acme.id, "s": statuses["Applied"].id},
    )
    session.commit()

    roles = RoleService(session).list_roles()

    assert [r.role_name for r in roles] == ["Late", "Early"]
    assert roles[0].created_at == datetime(2024, 3, 1, 23, 0, 0, tzinfo=timezone.utc)


def test_notes_only_update_keeps_modified_time(session, clock, acme, statuses):
    service = RoleService(session, clock=clock)
    role = service.add_role(RoleCreate(
        company_id=acme.id, status_id=statuses["Applied"].id, role_name="Engineer"
    ))

    clock.advance(hours=1)
    updated = service.update_role(role.id, RoleUpdate(
        status_id=statuses["Applied"].id, notes="Sent portfolio"
    ))

    assert updated.notes == "Sent portfolio"
    assert updated.modified_at == role.modified_at


def test_status_change_advances_modified_time(session, clock, acme, statuses):
    service = RoleService(session, clock=clock)
    role = service.add_role(RoleCreate(
        company_id=acme.id, status_id=statuses["Applied"].id, role_name="Engineer"
    ))

    clock.advance(days=2)
    updated = service.update_role(role.id, RoleUpdate(
        status_id=statuses["Interviewing"].id, notes="Phone screen Tuesday"
    ))

    assert updated.status_name == "Interviewing"
    assert updated.notes == "Phone screen Tuesday"
    assert updated.modified_at == clock.now
    assert updated.modified_at > updated.created_at
    assert updated.created_at == role.created_at


def test_update_unknown_role_raises(session, statuses):
    with pytest.raises(ValueError):
        RoleService(session).update_role(999, RoleUpdate(status_id=statuses["Offer"].id))


def test_duplicate_role_names_are_allowed(session, clock, acme, statuses):
    service = RoleService(session, clock=clock)
    for _ in range(2):
        service.add_role(RoleCreate(
            company_id=acme.id, status_id=statuses["Applied"].id, role_name="Engineer"
        ))

    assert len(service.list_roles()) == 2


def test_role_with_missing_company_is_rejected(session, statuses):
    with pytest.raises(IntegrityError):
        RoleService(session).add_role(RoleCreate(
            company_id=404, status_id=statuses["Applied"].id, role_name="Engineer"
        ))


def test_role_name_required():
    with pytest.raises(ValidationError):
        RoleCreate(company_id=1, status_id=1, role_name="  ")
