"""Translate key tokens into dispatcher events.

Action keys take precedence over widget input, except that plain ``q`` and
``?`` are typed while a text entry (search fields or the results filter
prompt) is active. While the filter prompt is open, Enter and Esc belong to
the prompt.
"""

from __future__ import annotations

from ..events import (
    Back,
    Confirm,
    Event,
    FocusSearch,
    KeyInput,
    NextField,
    NextTab,
    PrevField,
    Quit,
    ToggleHelp,
)
from ..state import AppState, View

ALWAYS_BOUND: dict[str, type] = {
    "CTRL_C": Quit,
    "CTRL_QUESTION": ToggleHelp,
    "CTRL_T": NextTab,
    "CTRL_F": FocusSearch,
    "CTRL_S": FocusSearch,
}

NAVIGATION_BOUND: dict[str, type] = {
    "ESC": Back,
    "ENTER": Confirm,
    "TAB": NextField,
    "SHIFT_TAB": PrevField,
}

COMMAND_BOUND: dict[str, type] = {
    "q": Quit,
    "?": ToggleHelp,
}


def text_entry_active(state: AppState) -> bool:
    if state.active_view is View.SEARCH:
        return True
    return state.active_view is View.RESULTS and state.results.filter_editing


def key_to_event(key: str, state: AppState) -> Event:
    bound = ALWAYS_BOUND.get(key)
    if bound is not None:
        return bound()
    filter_prompt_open = state.active_view is View.RESULTS and state.results.filter_editing
    if not filter_prompt_open:
        bound = NAVIGATION_BOUND.get(key)
        if bound is not None:
            return bound()
    if not text_entry_active(state):
        bound = COMMAND_BOUND.get(key)
        if bound is not None:
            return bound()
    return KeyInput(key)
