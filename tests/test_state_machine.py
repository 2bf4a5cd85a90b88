import pytest

from job_search.core.enums import FormAction, FormState
from job_search.core.state_machine import FormStateMachine, TransitionError


def test_selecting_role_enters_edit_mode():
    assert FormStateMachine.transition(FormState.IDLE, FormAction.SELECT_ROLE) == FormState.ROLE_SELECTED


def test_clearing_selection_returns_to_idle():
    assert FormStateMachine.transition(
        FormState.ROLE_SELECTED, FormAction.CLEAR_SELECTION
    ) == FormState.IDLE


def test_update_keeps_selection():
    assert FormStateMachine.transition(
        FormState.ROLE_SELECTED, FormAction.UPDATE_ROLE
    ) == FormState.ROLE_SELECTED


def test_update_needs_a_selected_role():
    assert not FormStateMachine.can_apply(FormState.IDLE, FormAction.UPDATE_ROLE)
    with pytest.raises(TransitionError) as exc_info:
        FormStateMachine.transition(FormState.IDLE, FormAction.UPDATE_ROLE)
    assert exc_info.value.state == FormState.IDLE


def test_buttons_per_state():
    assert FormStateMachine.is_enabled(FormState.IDLE, FormAction.ADD_ROLE)
    assert not FormStateMachine.is_enabled(FormState.IDLE, FormAction.UPDATE_ROLE)
    assert FormStateMachine.is_enabled(FormState.ROLE_SELECTED, FormAction.UPDATE_ROLE)
    assert not FormStateMachine.is_enabled(FormState.ROLE_SELECTED, FormAction.ADD_ROLE)


def test_role_name_fixed_in_edit_mode():
    assert FormStateMachine.is_role_name_editable(FormState.IDLE)
    assert not FormStateMachine.is_role_name_editable(FormState.ROLE_SELECTED)
