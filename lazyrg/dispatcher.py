"""State-transition function for the whole application.

``dispatch`` maps ``(state, event)`` to a ``Transition`` holding the next
state and any commands to run in the background. It performs no I/O, so
folding a recorded event log with ``replay`` reproduces a session exactly.
"""

from __future__ import annotations

from collections.abc import Callable, Iterable
from dataclasses import dataclass, replace

from .commands import Command, FileLoadCommand, SearchCommand
from .events import (
    Back,
    Confirm,
    Event,
    FileLoaded,
    FocusSearch,
    KeyInput,
    NextField,
    NextTab,
    PrevField,
    Quit,
    SearchCompleted,
    ToggleHelp,
    WindowResize,
)
from .layout import compute_viewports
from .state import TAB_ORDER, AppState, Focus, Severity, View


@dataclass(frozen=True)
class Transition:
    state: AppState
    commands: tuple[Command, ...] = ()
    quit: bool = False


def _info(state: AppState, message: str) -> AppState:
    return replace(state, status_message=message, status_severity=Severity.INFO)


def _error(state: AppState, message: str) -> AppState:
    return replace(state, status_message=message, status_severity=Severity.ERROR)


def _on_quit(state: AppState, _event: Quit) -> Transition:
    return Transition(state, quit=True)


def _on_toggle_help(state: AppState, _event: ToggleHelp) -> Transition:
    return Transition(replace(state, help_expanded=not state.help_expanded))


def _on_next_tab(state: AppState, _event: NextTab) -> Transition:
    next_view = TAB_ORDER[(TAB_ORDER.index(state.active_view) + 1) % len(TAB_ORDER)]
    new_state = replace(state, active_view=next_view)
    if next_view is View.SEARCH:
        new_state = replace(new_state, focus=Focus.PATTERN)
    elif next_view is View.RESULTS and state.results.items:
        new_state = replace(new_state, results=state.results.start_loading())
    return Transition(new_state)


def _on_focus_search(state: AppState, _event: FocusSearch) -> Transition:
    return Transition(replace(state, active_view=View.SEARCH, focus=Focus.PATTERN))


def _on_back(state: AppState, _event: Back) -> Transition:
    if state.active_view is View.FILE:
        return Transition(replace(state, active_view=View.RESULTS))
    if state.active_view is View.RESULTS:
        return Transition(replace(state, active_view=View.SEARCH, focus=Focus.PATTERN))
    return Transition(state)


def _confirm_search(state: AppState) -> Transition:
    pattern = state.search_pattern
    if not pattern:
        return Transition(state)
    root = state.search_root()
    new_state = replace(state, current_pattern=pattern, active_view=View.RESULTS)
    new_state = _info(new_state, f"Searching for: {pattern} in {root}")
    return Transition(new_state, commands=(SearchCommand(pattern=pattern, root=root),))


def _confirm_result(state: AppState) -> Transition:
    record = state.results.selected()
    if record is None:
        return Transition(state)
    new_state = replace(state, active_view=View.FILE, viewing_path=record.full_path)
    new_state = _info(new_state, f"Viewing file: {record.full_path}")
    command = FileLoadCommand(path=record.full_path, line_number=record.line_number)
    return Transition(new_state, commands=(command,))


def _on_confirm(state: AppState, _event: Confirm) -> Transition:
    if state.active_view is View.SEARCH:
        return _confirm_search(state)
    if state.active_view is View.RESULTS:
        return _confirm_result(state)
    return Transition(state)


def _on_toggle_field(state: AppState, _event: NextField | PrevField) -> Transition:
    # Two fields, so next and previous are the same move.
    if state.active_view is not View.SEARCH:
        return Transition(state)
    focus = Focus.DIRECTORY if state.focus is Focus.PATTERN else Focus.PATTERN
    return Transition(replace(state, focus=focus))


def _on_resize(state: AppState, event: WindowResize) -> Transition:
    viewports = compute_viewports(event.width, event.height, state.help_expanded)
    return Transition(
        replace(
            state,
            width=event.width,
            height=event.height,
            ready=True,
            pattern_input=state.pattern_input.resize(viewports.input_width),
            directory_input=state.directory_input.resize(viewports.input_width),
            results=state.results.set_size(viewports.list_width, viewports.list_height),
            viewer=state.viewer.set_size(viewports.viewer_width, viewports.viewer_height).goto_top(),
        )
    )


def _on_search_completed(state: AppState, event: SearchCompleted) -> Transition:
    if event.error is not None:
        return Transition(_error(state, f"Error: {event.error}"))
    new_state = replace(state, results=state.results.set_items(event.matches))
    if not event.matches:
        return Transition(_info(new_state, "No results found"))
    return Transition(_info(new_state, f"Found {len(event.matches)} results"))


def _on_file_loaded(state: AppState, event: FileLoaded) -> Transition:
    if event.error is not None:
        new_state = _error(state, f"Error loading file: {event.error}")
        return Transition(replace(new_state, active_view=View.RESULTS))
    return Transition(replace(state, viewer=state.viewer.set_content(event.content)))


def _on_key_input(state: AppState, event: KeyInput) -> Transition:
    key = event.key
    if state.active_view is View.SEARCH:
        if state.focus is Focus.PATTERN:
            return Transition(replace(state, pattern_input=state.pattern_input.handle_key(key)))
        return Transition(replace(state, directory_input=state.directory_input.handle_key(key)))
    if state.active_view is View.RESULTS:
        return Transition(replace(state, results=state.results.handle_key(key)))
    return Transition(replace(state, viewer=state.viewer.handle_key(key)))


_HANDLERS: dict[type, Callable[[AppState, object], Transition]] = {
    Quit: _on_quit,
    ToggleHelp: _on_toggle_help,
    NextTab: _on_next_tab,
    FocusSearch: _on_focus_search,
    Back: _on_back,
    Confirm: _on_confirm,
    NextField: _on_toggle_field,
    PrevField: _on_toggle_field,
    WindowResize: _on_resize,
    SearchCompleted: _on_search_completed,
    FileLoaded: _on_file_loaded,
    KeyInput: _on_key_input,
}


def dispatch(state: AppState, event: Event) -> Transition:
    """Apply one event. Unknown event types leave the state untouched."""
    handler = _HANDLERS.get(type(event))
    if handler is None:
        return Transition(state)
    return handler(state, event)


def replay(state: AppState, events: Iterable[Event]) -> tuple[AppState, list[Command]]:
    """Fold ``events`` over ``state``; stops early at a quit transition."""
    commands: list[Command] = []
    for event in events:
        transition = dispatch(state, event)
        state = transition.state
        commands.extend(transition.commands)
        if transition.quit:
            break
    return state, commands
