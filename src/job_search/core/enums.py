"""Enumerations for Job Search."""

from enum import Enum
from typing import List


class StatusName(str, Enum):
    """Canonical application statuses, in pipeline order."""
    APPLIED = "Applied"
    ACKNOWLEDGED = "Acknowledged"
    CONTACTED = "Contacted"
    INTERVIEWING = "Interviewing"
    OFFER = "Offer"
    REJECTED = "Rejected"
    ACCEPTED = "Accepted"

    @classmethod
    def canonical_order(cls) -> List[str]:
        """Status names in the order they are seeded and listed."""
        return [s.value for s in cls]


class FormState(str, Enum):
    """Mode of the role form."""
    IDLE = "idle"
    ROLE_SELECTED = "role_selected"

    @property
    def display_name(self) -> str:
        names = {
            "idle": "Add Role",
            "role_selected": "Edit Role",
        }
        return names.get(self.value, self.value)


class FormAction(str, Enum):
    """User actions handled by the form controller."""
    SELECT_ROLE = "select_role"
    CLEAR_SELECTION = "clear_selection"
    ADD_ROLE = "add_role"
    UPDATE_ROLE = "update_role"
    ADD_COMPANY = "add_company"
