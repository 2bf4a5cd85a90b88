"""Form state machine for the role editor."""

from typing import Dict, Optional, Set

from .enums import FormAction, FormState


class FormStateMachine:
    """Manages the add/edit mode of the role form."""

    # Define transitions: (current_state, action) -> next state
    TRANSITIONS: Dict[FormState, Dict[FormAction, FormState]] = {
        FormState.IDLE: {
            FormAction.SELECT_ROLE: FormState.ROLE_SELECTED,
            FormAction.CLEAR_SELECTION: FormState.IDLE,
            FormAction.ADD_ROLE: FormState.IDLE,
            FormAction.ADD_COMPANY: FormState.IDLE,
        },
        FormState.ROLE_SELECTED: {
            FormAction.SELECT_ROLE: FormState.ROLE_SELECTED,
            FormAction.CLEAR_SELECTION: FormState.IDLE,
            # Add is not gated by state; a successful add clears the selection
            FormAction.ADD_ROLE: FormState.IDLE,
            # The selection is kept until the reloaded table reports its own change
            FormAction.UPDATE_ROLE: FormState.ROLE_SELECTED,
            FormAction.ADD_COMPANY: FormState.ROLE_SELECTED,
        },
    }

    # Buttons enabled in each state
    ENABLED_ACTIONS: Dict[FormState, Set[FormAction]] = {
        FormState.IDLE: {FormAction.ADD_ROLE, FormAction.ADD_COMPANY},
        FormState.ROLE_SELECTED: {FormAction.UPDATE_ROLE, FormAction.ADD_COMPANY},
    }

    @classmethod
    def next_state(cls, state: FormState, action: FormAction) -> Optional[FormState]:
        """Get the state after an action, or None if the action does not apply."""
        return cls.TRANSITIONS.get(state, {}).get(action)

    @classmethod
    def can_apply(cls, state: FormState, action: FormAction) -> bool:
        """Check if an action is valid in the given state."""
        return cls.next_state(state, action) is not None

    @classmethod
    def transition(cls, state: FormState, action: FormAction) -> FormState:
        """
        Apply an action to a state.

        Raises:
            TransitionError: If the action is not valid in the state.
        """
        new_state = cls.next_state(state, action)
        if new_state is None:
            raise TransitionError(
                state, action,
                f"Cannot {action.value.replace('_', ' ')} in {state.display_name} mode",
            )
        return new_state

    @classmethod
    def is_enabled(cls, state: FormState, action: FormAction) -> bool:
        """Check if the button for an action should be enabled."""
        return action in cls.ENABLED_ACTIONS.get(state, set())

    @classmethod
    def is_role_name_editable(cls, state: FormState) -> bool:
        """Role names are fixed once the role exists."""
        return state == FormState.IDLE


class TransitionError(Exception):
    """Exception raised when an action does not apply to the current form state."""

    def __init__(self, state: FormState, action: FormAction, message: str):
        self.state = state
        self.action = action
        self.message = message
        super().__init__(message)
