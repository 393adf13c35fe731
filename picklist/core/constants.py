"""The module contains the constants used in the core."""

from enum import Enum

CALLBACK_DATA_SEPARATOR = ':'


class Key(str, Enum):
    """The class enumerates the keys the navigation use case recognizes."""

    ENTER = 'Enter'
    SPACE = ' '
    ARROW_DOWN = 'ArrowDown'
    ARROW_UP = 'ArrowUp'
    ESCAPE = 'Escape'


COMMIT_KEYS = (Key.ENTER, Key.SPACE)


class Intent(str, Enum):
    """The class enumerates the intents a presentation adapter can
    forward to the core via callback data.
    """

    TOGGLE = 'toggle'
    SELECT = 'select'
    KEY = 'key'
