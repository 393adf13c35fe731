"""The module contains the in-memory implementation of the state store."""

import dataclasses
import itertools
import logging
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from typing_extensions import Self, Unpack

    from picklist.types import StatePatch, Subscriber, Unsubscribe, WidgetState

LOGGER = logging.getLogger(__name__)


class StateStore:
    """The class implements the single source of truth for the state
    of a dropdown instance.
    """

    def __init__(self: 'Self', initial_state: 'WidgetState') -> None:
        """Initialize a state store object."""
        self._state = initial_state
        self._subscribers: dict[int, 'Subscriber'] = {}
        self._subscription_ids = itertools.count()

    #
    # Private methods
    #

    def _notify_subscribers(self: 'Self') -> None:
        # Callbacks removed during the round still receive it, callbacks
        # added during the round wait for the next one.
        for callback in tuple(self._subscribers.values()):
            callback(self._state)

    #
    # Public methods
    #

    def get_state(self: 'Self') -> 'WidgetState':
        """Return the current state."""
        return self._state

    def set_state(self: 'Self', **partial: 'Unpack[StatePatch]') -> None:
        """Merge the specified fields into the current state and notify
        every subscriber about the change.
        """
        self._state = dataclasses.replace(self._state, **partial)
        LOGGER.debug('State changed (%s): %s', ', '.join(partial), self._state)

        self._notify_subscribers()

    def subscribe(self: 'Self', callback: 'Subscriber') -> 'Unsubscribe':
        """Register the callback to be invoked on every state change.
        Return a function removing exactly this registration.
        """
        subscription_id = next(self._subscription_ids)
        self._subscribers[subscription_id] = callback

        def unsubscribe() -> None:
            self._subscribers.pop(subscription_id, None)

        return unsubscribe
