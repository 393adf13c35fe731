"""The package contains the presentation adapters rendering dropdowns
as Telegram inline keyboards.
"""

__all__ = (
    'KeyboardDropdownWidget',
)

from picklist.widgets.keyboard import KeyboardDropdownWidget
