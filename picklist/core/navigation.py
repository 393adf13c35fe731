"""The module contains the implementation of the navigation use case,
i.e. the state machine of a dropdown.

The use case never keeps a copy of the state. Every intent reads
the latest state from the state port, so subscribers calling back into
the use case while being notified always see fresh data.
"""

import logging
from typing import TYPE_CHECKING

from picklist.core.constants import COMMIT_KEYS, Key
from picklist.types import NOT_FOUND

if TYPE_CHECKING:
    from typing_extensions import Self

    from picklist.core.ports import ScrollPort, StatePort
    from picklist.types import Options, WidgetState

LOGGER = logging.getLogger(__name__)


class NavigationUseCase:
    """The class implements the transitions of a dropdown between states
    in response to the user intents.
    """

    def __init__(
        self: 'Self',
        state_port: 'StatePort',
        scroll_port: 'ScrollPort',
        *,
        clamp_focused_index: bool = False,
    ) -> None:
        """Initialize a navigation use case object."""
        self.state_port = state_port
        self.scroll_port = scroll_port
        self.clamp_focused_index = clamp_focused_index

    #
    # Private methods
    #

    @staticmethod
    def _get_initial_focused_index(state: 'WidgetState', *, from_end: bool = False) -> int:
        """Return the index to be focused when the dropdown opens."""
        if not state.options:
            return NOT_FOUND

        index = state.index_of(state.value)
        if index != NOT_FOUND:
            return index

        return len(state.options) - 1 if from_end else 0

    def _open(self: 'Self', *, from_end: bool = False) -> None:
        state = self.state_port.get_state()
        self.state_port.set_state(
            is_open=True,
            focused_index=self._get_initial_focused_index(state, from_end=from_end),
        )

    def _move_focus(self: 'Self', step: int) -> None:
        """Move the focus by the specified step, wrapping around the list."""
        state = self.state_port.get_state()
        options_number = len(state.options)
        if not options_number:
            return

        next_index = (state.focused_index + step + options_number) % options_number
        self.set_focused_index(next_index)

        # Subscribers notified above may have closed the dropdown.
        if next_index != state.focused_index and self.state_port.get_state().is_open:
            self.scroll_port.scroll_into_view(next_index)

    def _commit_focused(self: 'Self') -> None:
        state = self.state_port.get_state()
        if 0 <= state.focused_index < len(state.options):
            self.select_option(state.options[state.focused_index].value)
        else:
            LOGGER.debug('Nothing to commit, the focused index is %d', state.focused_index)

    #
    # Public methods
    #

    def get_current_state(self: 'Self') -> 'WidgetState':
        """Return the current state of the dropdown."""
        return self.state_port.get_state()

    def handle_key_navigation(self: 'Self', key: str) -> None:
        """Switch the dropdown to the next state depending on the pressed key.
        Unknown keys are ignored.
        """
        is_open = self.state_port.get_state().is_open

        if key in COMMIT_KEYS:
            if is_open:
                self._commit_focused()
            else:
                self._open()
        elif key == Key.ARROW_DOWN:
            if is_open:
                self._move_focus(1)
            else:
                self._open()
        elif key == Key.ARROW_UP:
            if is_open:
                self._move_focus(-1)
            else:
                self._open(from_end=True)
        elif key == Key.ESCAPE:
            if is_open:
                self.state_port.set_state(is_open=False)
        else:
            LOGGER.debug('Ignoring the unknown key %r', key)

    def replace_options(self: 'Self', options: 'Options') -> None:
        """Replace the options of the dropdown. The focused index is left as is
        unless the use case is configured to clamp it into the new range.
        """
        if not self.clamp_focused_index:
            self.state_port.set_state(options=options)
            return

        focused_index = self.state_port.get_state().focused_index
        self.state_port.set_state(
            options=options,
            focused_index=max(NOT_FOUND, min(focused_index, len(options) - 1)),
        )

    def select_option(self: 'Self', option_value: str) -> None:
        """Commit the specified value and close the dropdown."""
        self.state_port.set_state(value=option_value, is_open=False)

    def set_focused_index(self: 'Self', index: int) -> None:
        """Focus the option with the specified index."""
        self.state_port.set_state(focused_index=index)

    def toggle_dropdown(self: 'Self') -> None:
        """Open the dropdown if it's closed and close it if it's open."""
        if self.state_port.get_state().is_open:
            self.state_port.set_state(is_open=False)
        else:
            self._open()
