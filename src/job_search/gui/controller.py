"""Form controller: the role/company form's state and action handlers.

The controller is the source of truth for what the window shows. Widgets
read from it after each action; they never hold state of their own.
"""

import logging
from dataclasses import dataclass
from datetime import datetime, tzinfo
from typing import Callable, List, Optional

from sqlalchemy.orm import Session

from ..core.enums import FormAction, FormState
from ..core.models import utc_now
from ..core.schemas import (
    CompanyCreate, CompanyProjection, RoleCreate, RoleRow, RoleUpdate, StatusRead
)
from ..core.state_machine import FormStateMachine
from ..data.database import Database, get_db
from ..data.schema import initialize_schema
from ..services.companies import CompanyService
from ..services.projection import project_companies, project_roles
from ..services.roles import RoleService
from ..services.statuses import StatusService

logger = logging.getLogger(__name__)

PRIMARY_TAB = 0
COMPANIES_TAB = 1


@dataclass
class FormFields:
    """Contents of the role form."""
    role_name: str = ""
    notes: str = ""
    company_id: Optional[int] = None
    status_id: Optional[int] = None


class FormController:
    """Handles user actions and keeps the form state and list data current."""

    def __init__(
        self,
        db: Optional[Database] = None,
        clock: Callable[[], datetime] = utc_now,
        tz: Optional[tzinfo] = None,
    ):
        self._db = db
        self._clock = clock
        self._tz = tz

        self.state = FormState.IDLE
        self.fields = FormFields()
        self.selected_role_id: Optional[int] = None
        self.active_tab = PRIMARY_TAB

        self.companies = CompanyProjection(rows=[], lookup=[])
        self.statuses: List[StatusRead] = []
        self.roles: List[RoleRow] = []

    @property
    def db(self) -> Database:
        if self._db is None:
            self._db = get_db()
        return self._db

    # =========================================================================
    # Derived state
    # =========================================================================

    @property
    def can_add_role(self) -> bool:
        return FormStateMachine.is_enabled(self.state, FormAction.ADD_ROLE)

    @property
    def can_update_role(self) -> bool:
        return (
            FormStateMachine.is_enabled(self.state, FormAction.UPDATE_ROLE)
            and self.selected_role_id is not None
            and self.fields.status_id is not None
        )

    @property
    def role_name_editable(self) -> bool:
        return FormStateMachine.is_role_name_editable(self.state)

    @property
    def default_status_id(self) -> Optional[int]:
        """The first canonical status, used when the form is cleared."""
        return self.statuses[0].id if self.statuses else None

    def get_role(self, role_id: int) -> Optional[RoleRow]:
        return next((r for r in self.roles if r.id == role_id), None)

    def get_status(self, status_id: Optional[int]) -> Optional[StatusRead]:
        return next((s for s in self.statuses if s.id == status_id), None)

    def find_status(self, name: str) -> Optional[StatusRead]:
        return next((s for s in self.statuses if s.name == name), None)

    # =========================================================================
    # Loading
    # =========================================================================

    def load(self):
        """Initialize the schema and load all three lists."""
        with self.db.session_scope() as session:
            initialize_schema(session.connection())
            self._load_companies(session)
            self._load_statuses(session)
            self._load_roles(session)
        self._clear_fields()

    def _load_companies(self, session: Session):
        self.companies = project_companies(CompanyService(session).list_companies())

    def _load_statuses(self, session: Session):
        self.statuses = StatusService(session).list_statuses()

    def _load_roles(self, session: Session):
        roles = RoleService(session, clock=self._clock).list_roles()
        self.roles = project_roles(roles, self._tz)

    # =========================================================================
    # Field edits
    # =========================================================================

    def select_company(self, company_id: Optional[int]):
        self.fields.company_id = company_id

    def select_status(self, status_id: Optional[int]):
        self.fields.status_id = status_id

    def _clear_fields(self):
        self.fields = FormFields(status_id=self.default_status_id)

    def _decline(self, action: FormAction, reason: str) -> bool:
        logger.debug(f"Declined {action.value}: {reason}")
        return False

    # =========================================================================
    # Actions
    # =========================================================================

    def select_role(self, role_id: Optional[int]) -> bool:
        """
        Handle a change of the roles table selection.

        A role fills the form for editing; None returns the form to add mode.
        """
        role = self.get_role(role_id) if role_id is not None else None
        if role is None:
            self.state = FormStateMachine.transition(self.state, FormAction.CLEAR_SELECTION)
            self.selected_role_id = None
            self._clear_fields()
            return role_id is None

        company = self.companies.find(role.company_name)
        status = self.find_status(role.status_name)

        self.state = FormStateMachine.transition(self.state, FormAction.SELECT_ROLE)
        self.selected_role_id = role.id
        self.fields = FormFields(
            role_name=role.role_name,
            notes=role.notes,
            company_id=company.id if company else None,
            status_id=status.id if status else None,
        )
        return True

    def add_role(
        self,
        company_id: Optional[int],
        status_id: Optional[int],
        role_name: str,
        notes: str = "",
    ) -> bool:
        """Add a role from the form. Returns False if the input was declined."""
        if company_id is None or status_id is None:
            return self._decline(FormAction.ADD_ROLE, "company and status are required")

        role_name = role_name.strip()
        if not role_name:
            return self._decline(FormAction.ADD_ROLE, "role name is empty")

        with self.db.session_scope() as session:
            RoleService(session, clock=self._clock).add_role(RoleCreate(
                company_id=company_id,
                status_id=status_id,
                role_name=role_name,
                notes=notes.strip(),
            ))
            self._load_roles(session)

        self.state = FormStateMachine.transition(self.state, FormAction.ADD_ROLE)
        self.selected_role_id = None
        self._clear_fields()
        return True

    def update_role(self, status_id: Optional[int], notes: str = "") -> bool:
        """Update the selected role's status and notes. Returns False if declined."""
        if self.selected_role_id is None or status_id is None:
            return self._decline(FormAction.UPDATE_ROLE, "no role or status selected")
        if not FormStateMachine.can_apply(self.state, FormAction.UPDATE_ROLE):
            return self._decline(FormAction.UPDATE_ROLE, f"form is in {self.state.value} mode")

        with self.db.session_scope() as session:
            RoleService(session, clock=self._clock).update_role(
                self.selected_role_id,
                RoleUpdate(status_id=status_id, notes=notes.strip()),
            )
            self._load_roles(session)

        self.state = FormStateMachine.transition(self.state, FormAction.UPDATE_ROLE)
        self.fields.role_name = ""
        self.fields.notes = ""
        self.fields.status_id = status_id
        return True

    def add_company(self, name: str) -> bool:
        """
        Add a company and select it in the company selector.

        An existing name is selected without adding a row.
        """
        name = name.strip()
        if not name:
            return self._decline(FormAction.ADD_COMPANY, "company name is empty")

        with self.db.session_scope() as session:
            CompanyService(session).add_company(CompanyCreate(name=name))
            self._load_companies(session)

        self.state = FormStateMachine.transition(self.state, FormAction.ADD_COMPANY)
        self.active_tab = PRIMARY_TAB
        item = self.companies.find(name)
        self.fields.company_id = item.id if item else None
        return True
