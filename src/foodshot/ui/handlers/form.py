"""Style form handlers."""

import logging
from collections.abc import Callable

from ..models import UIState
from ..state import add_inspiration, update_form_field

logger = logging.getLogger(__name__)


def update_field(field_id: str, value: str, state: UIState) -> UIState:
    """Store an edited field value in the session state.

    Args:
        field_id: Identifier of the edited field
        value: New component value
        state: UI state

    Returns:
        Updated state
    """
    return update_form_field(state, field_id, value or "")


def make_field_handler(field_id: str) -> Callable[[str, UIState], UIState]:
    """Bind ``update_field`` to one field for use as a change event handler."""

    def handler(value: str, state: UIState) -> UIState:
        return update_field(field_id, value, state)

    return handler


def apply_inspiration(idea: str, props: str, state: UIState) -> tuple[str, UIState]:
    """Append a styling idea to the props field.

    The props textbox value is taken as the current props so that text typed
    but not yet committed by a change event is kept.

    Args:
        idea: Styling idea text
        props: Current props textbox value
        state: UI state

    Returns:
        Tuple of (new_props_value, updated_state)
    """
    state = update_form_field(state, "props", props or "")
    state = add_inspiration(state, idea)
    return state.form.props, state


def make_inspiration_handler(idea: str) -> Callable[[str, UIState], tuple[str, UIState]]:
    """Bind ``apply_inspiration`` to one styling idea button."""

    def handler(props: str, state: UIState) -> tuple[str, UIState]:
        return apply_inspiration(idea, props, state)

    return handler
