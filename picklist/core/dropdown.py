"""The module contains the composition root of a dropdown, i.e. the class
wiring a state store, a scroll port and a navigation use case together
for a single widget instance.
"""

import logging
from typing import TYPE_CHECKING

from picklist.core.exceptions import ImproperlyConfigured, OptionsFormatIsInvalid
from picklist.core.navigation import NavigationUseCase
from picklist.core.store import StateStore
from picklist.types import NOT_FOUND, Option, WidgetState
from picklist.utils.module_loading import import_string

if TYPE_CHECKING:
    from collections.abc import Callable

    from typing_extensions import Self

    from picklist.core.ports import ScrollPort
    from picklist.types import Options, OptionsInput, Subscriber, Unsubscribe

LOGGER = logging.getLogger(__name__)


def normalize_options(options: 'OptionsInput') -> 'Options':
    """Turn the specified options into a tuple of Option objects.
    Raise `OptionsFormatIsInvalid` if an entry is malformed or
    a value occurs more than once.
    """
    normalized = []
    seen_values = set()
    for entry in options:
        if isinstance(entry, Option):
            option = entry
        elif isinstance(entry, tuple | list) and len(entry) == 2:  # noqa: PLR2004
            option = Option.from_choice((entry[0], entry[1]))
        else:
            msg = f'The option {entry!r} must be either an Option or a (value, label) pair'
            raise OptionsFormatIsInvalid(msg)

        if not isinstance(option.value, str) or not isinstance(option.label, str):
            msg = f'Both the value and the label of the option {option!r} must be strings'
            raise OptionsFormatIsInvalid(msg)

        if option.value in seen_values:
            msg = f'The option value {option.value!r} is duplicated'
            raise OptionsFormatIsInvalid(msg)

        seen_values.add(option.value)
        normalized.append(option)

    return tuple(normalized)


class Dropdown:
    """The class implements a dropdown widget instance."""

    def __init__(
        self: 'Self',
        options: 'OptionsInput',
        value: str = '',
        *,
        on_change: 'Callable[[str], None] | None' = None,
        placeholder: str | None = None,
        disabled: bool = False,
        scroll_port: 'ScrollPort | None' = None,
        clamp_focused_index: bool | None = None,
    ) -> None:
        """Initialize a dropdown object."""
        from picklist.conf import settings

        self.disabled = disabled
        self.on_change = on_change
        self.placeholder = (
            settings.DEFAULT_PLACEHOLDER if placeholder is None else placeholder
        )
        if clamp_focused_index is None:
            clamp_focused_index = settings.CLAMP_FOCUSED_INDEX

        self.store = StateStore(WidgetState(
            is_open=False,
            focused_index=NOT_FOUND,
            value=value,
            options=normalize_options(options),
        ))
        self.scroll_port = (
            self._get_default_scroll_port() if scroll_port is None else scroll_port
        )
        self.use_case = NavigationUseCase(
            self.store,
            self.scroll_port,
            clamp_focused_index=clamp_focused_index,
        )

        self._last_value = value
        self._unsubscribe: 'Unsubscribe | None' = self.store.subscribe(
            self._track_value,
        )

    #
    # Private methods
    #

    @staticmethod
    def _get_default_scroll_port() -> 'ScrollPort':
        from picklist.conf import settings

        try:
            scroll_port_class = import_string(settings.SCROLL_PORT)
        except ImportError as exc:
            msg = (
                f"The 'SCROLL_PORT' setting points to {settings.SCROLL_PORT!r}, "
                f"which is not importable"
            )
            raise ImproperlyConfigured(msg) from exc

        return scroll_port_class()

    def _track_value(self: 'Self', state: 'WidgetState') -> None:
        """Invoke the change callback when the committed value changes."""
        if state.value == self._last_value:
            return

        self._last_value = state.value
        if self.on_change is not None:
            self.on_change(state.value)

    def _is_enabled(self: 'Self', intent: str) -> bool:
        if self.disabled:
            LOGGER.debug('Ignoring %s since the dropdown is disabled', intent)

        return not self.disabled

    #
    # Public methods
    #

    @property
    def display_text(self: 'Self') -> str:
        """Return the label of the selected option or the placeholder."""
        option = self.selected_option
        return option.label if option else self.placeholder

    @property
    def selected_option(self: 'Self') -> 'Option | None':
        """Return the option matching the committed value, if any."""
        state = self.state
        index = state.index_of(state.value)
        return state.options[index] if index >= 0 else None

    @property
    def state(self: 'Self') -> 'WidgetState':
        """Return the current state of the dropdown."""
        return self.use_case.get_current_state()

    def choose(self: 'Self', value: str) -> None:
        """Commit the specified value (e.g., an option was clicked)."""
        if self._is_enabled('choose'):
            self.use_case.select_option(value)

    def dismiss(self: 'Self') -> None:
        """Close the dropdown if it's open (e.g., a click outside of it)."""
        if self._is_enabled('dismiss') and self.state.is_open:
            self.use_case.toggle_dropdown()

    def hover(self: 'Self', index: int) -> None:
        """Focus the option the pointer is over."""
        if self._is_enabled('hover'):
            self.use_case.set_focused_index(index)

    def press(self: 'Self', key: str) -> None:
        """Forward the pressed key to the navigation use case."""
        if self._is_enabled('press'):
            self.use_case.handle_key_navigation(key)

    def set_options(self: 'Self', options: 'OptionsInput') -> None:
        """Replace the options of the dropdown."""
        self.use_case.replace_options(normalize_options(options))

    def subscribe(self: 'Self', callback: 'Subscriber') -> 'Unsubscribe':
        """Register the callback to be invoked on every state change."""
        return self.store.subscribe(callback)

    def teardown(self: 'Self') -> None:
        """Detach the change callback from the store."""
        if self._unsubscribe is not None:
            self._unsubscribe()
            self._unsubscribe = None

    def toggle(self: 'Self') -> None:
        """Open or close the dropdown (e.g., the trigger was clicked)."""
        if self._is_enabled('toggle'):
            self.use_case.toggle_dropdown()
