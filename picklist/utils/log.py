"""The module contains facilities for configuring logging in picklist.

Every state change of a dropdown is logged by the store at the DEBUG
level, so lowering the level of the picklist logger to DEBUG via
the LOGGING setting is enough to trace the intents and the transitions
they cause.
"""

import logging.config
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from typing import Any

PICKLIST_LOGGER_NAME = 'picklist'

DEFAULT_LOGGING_LEVEL = 'INFO'


def get_default_logging() -> dict[str, 'Any']:
    """Return the logging configuration picklist starts with. A new dict
    is built each time since dictConfig is free to modify the one it gets.
    """
    return {
        'version': 1,
        'disable_existing_loggers': False,
        'formatters': {
            'dropdown': {
                'format': '[{asctime}] {levelname} {name}: {message}',
                'style': '{',
            },
        },
        'handlers': {
            'stderr': {
                'class': 'logging.StreamHandler',
                'formatter': 'dropdown',
            },
        },
        'loggers': {
            PICKLIST_LOGGER_NAME: {
                'handlers': ['stderr'],
                'level': DEFAULT_LOGGING_LEVEL,
            },
        },
    }


def configure_logging(logging_settings: dict[str, 'Any']) -> None:
    """Apply the default logging configuration and then the one from
    the LOGGING setting on top of it, if the setting isn't empty.
    """
    logging.config.dictConfig(get_default_logging())

    if logging_settings:
        logging.config.dictConfig(logging_settings)
