"""The module contains the interfaces the navigation use case depends on.

Any object providing the methods below satisfies a port, so the use case
can be driven by an in-memory store, a test double or a framework-bound
adapter alike.
"""

from typing import TYPE_CHECKING, Protocol, runtime_checkable

if TYPE_CHECKING:
    from typing_extensions import Self, Unpack

    from picklist.types import StatePatch, Subscriber, Unsubscribe, WidgetState


@runtime_checkable
class StatePort(Protocol):
    """The class describes the interface of a widget state store."""

    def get_state(self: 'Self') -> 'WidgetState':
        """Return the current state."""
        ...

    def set_state(self: 'Self', **partial: 'Unpack[StatePatch]') -> None:
        """Merge the specified fields into the state and notify the subscribers."""
        ...

    def subscribe(self: 'Self', callback: 'Subscriber') -> 'Unsubscribe':
        """Register a callback invoked on every state change."""
        ...


@runtime_checkable
class ScrollPort(Protocol):
    """The class describes the interface for bringing an option into view."""

    def scroll_into_view(self: 'Self', index: int) -> None:
        """Make the option with the specified index visible, if possible."""
        ...


@runtime_checkable
class DropdownUseCasePort(Protocol):
    """The class describes the intents a presentation adapter can forward."""

    def toggle_dropdown(self: 'Self') -> None:
        """Open the dropdown if it's closed and close it if it's open."""
        ...

    def select_option(self: 'Self', option_value: str) -> None:
        """Commit the specified value and close the dropdown."""
        ...

    def handle_key_navigation(self: 'Self', key: str) -> None:
        """Switch the dropdown to the next state depending on the pressed key."""
        ...

    def set_focused_index(self: 'Self', index: int) -> None:
        """Focus the option with the specified index."""
        ...

    def get_current_state(self: 'Self') -> 'WidgetState':
        """Return the current state of the dropdown."""
        ...
