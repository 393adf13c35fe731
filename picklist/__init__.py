"""picklist is a framework-agnostic dropdown (select box) state machine
with ports for the state store and the scroll side effect.
"""

__version__ = '0.1.0'


def setup() -> None:
    """Configure logging according to the project settings."""
    from picklist.conf import settings
    from picklist.utils.log import configure_logging

    configure_logging(settings.LOGGING)
