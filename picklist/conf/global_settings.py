"""
Default picklist settings. Override these using the module specified via
the PICKLIST_SETTINGS_MODULE environment variable.
"""

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from typing import Any

CLAMP_FOCUSED_INDEX = False

DEFAULT_PLACEHOLDER = 'Select an option'

KEYBOARD_PAGE_SIZE = 5

LOGGING: dict[str, 'Any'] = {}

PAYLOAD_NAMESPACE = 'picklist'

SCROLL_PORT = 'picklist.core.scroll.NullScrollPort'
