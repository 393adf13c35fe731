"""The module contains the implementation of the keyboard dropdown widget,
i.e. a dropdown rendered as a Telegram inline keyboard.

The callback data of the widget buttons looks like
`<namespace>:<intent>[:<argument>]`. Options are addressed by index,
so the data fits into the 64 bytes Telegram allows regardless of
the option values.
"""

import logging
from typing import TYPE_CHECKING

from telegram import InlineKeyboardButton, InlineKeyboardMarkup

from picklist.core.constants import CALLBACK_DATA_SEPARATOR, Intent, Key
from picklist.core.dropdown import Dropdown
from picklist.core.scroll import ViewportScrollAdapter

if TYPE_CHECKING:
    from typing import Any

    from telegram import Update
    from telegram.ext import CallbackContext
    from telegram.ext._utils.types import BD, BT, CD, UD
    from typing_extensions import Self

    from picklist.types import OptionsInput

LOGGER = logging.getLogger(__name__)


class KeyboardDropdownWidget:
    """The class implements a dropdown rendered as an inline keyboard."""

    chosen_emoji = '🔘'
    unchosen_emoji = '◯'
    focus_marker = '▸'
    closed_chevron = '▼'
    opened_chevron = '▲'
    navigation_buttons: tuple[tuple[Key, str], ...] = (
        (Key.ARROW_UP, '⬆️'),
        (Key.ARROW_DOWN, '⬇️'),
        (Key.ESCAPE, '✖️'),
    )

    def __init__(
        self: 'Self',
        options: 'OptionsInput',
        value: str = '',
        *,
        page_size: int | None = None,
        namespace: str | None = None,
        **dropdown_kwargs: 'Any',
    ) -> None:
        """Initialize a keyboard dropdown widget object."""
        from picklist.conf import settings

        self.namespace = settings.PAYLOAD_NAMESPACE if namespace is None else namespace
        self.viewport = ViewportScrollAdapter(
            settings.KEYBOARD_PAGE_SIZE if page_size is None else page_size,
        )
        self.dropdown = Dropdown(
            options,
            value,
            scroll_port=self.viewport,
            **dropdown_kwargs,
        )

    #
    # Private methods
    #

    def _create_button(
        self: 'Self',
        caption: str,
        intent: 'Intent',
        argument: str | None = None,
    ) -> InlineKeyboardButton:
        parts = [self.namespace, intent.value]
        if argument is not None:
            parts.append(argument)

        return InlineKeyboardButton(
            caption,
            callback_data=CALLBACK_DATA_SEPARATOR.join(parts),
        )

    def _select_by_index(self: 'Self', argument: str) -> bool:
        try:
            index = int(argument)
        except ValueError:
            LOGGER.warning('The option index %r is not an integer', argument)
            return False

        options = self.dropdown.state.options
        if not 0 <= index < len(options):
            LOGGER.warning(
                'The option index %d is out of range (the dropdown has %d options)',
                index,
                len(options),
            )
            return False

        self.dropdown.choose(options[index].value)
        return True

    #
    # Public methods
    #

    def handle(self: 'Self', data: str | None) -> bool:
        """Dispatch the specified callback data to the dropdown.
        Return False if the data is not meant for the widget or is malformed.
        """
        if not isinstance(data, str):
            LOGGER.warning('The callback data %r is not a string', data)
            return False

        namespace, _, payload = data.partition(CALLBACK_DATA_SEPARATOR)
        if namespace != self.namespace:
            LOGGER.debug('Ignoring the callback data %r from another namespace', data)
            return False

        intent, _, argument = payload.partition(CALLBACK_DATA_SEPARATOR)
        if intent == Intent.TOGGLE:
            self.dropdown.toggle()
            return True

        if intent == Intent.KEY:
            self.dropdown.press(argument)
            return True

        if intent == Intent.SELECT:
            return self._select_by_index(argument)

        LOGGER.warning('The callback data %r contains the unknown intent %r', data, intent)
        return False

    async def handle_callback_query(
        self: 'Self',
        update: 'Update',
        _context: 'CallbackContext[BT, UD, CD, BD]',
    ) -> None:
        """Handle a press on one of the widget buttons and update
        the keyboard of the message if the dropdown state changed.
        """
        query = update.callback_query
        if query is None:
            return

        # Telegram clients keep showing a progress indicator on the button
        # until the query is answered, whether the state changes or not.
        await query.answer()

        previous_state = self.dropdown.state
        if not self.handle(query.data) or self.dropdown.state == previous_state:
            return

        await query.edit_message_reply_markup(reply_markup=self.render())

    def render(self: 'Self') -> InlineKeyboardMarkup:
        """Render the current state of the dropdown as an inline keyboard."""
        state = self.dropdown.state
        chevron = self.opened_chevron if state.is_open else self.closed_chevron
        keyboard = [
            [self._create_button(f'{self.dropdown.display_text} {chevron}', Intent.TOGGLE)],
        ]
        if not state.is_open:
            return InlineKeyboardMarkup(keyboard)

        # The focus may come from opening or hovering, which don't scroll.
        if 0 <= state.focused_index < len(state.options):
            self.viewport.scroll_into_view(state.focused_index)

        for index in self.viewport.visible_range(len(state.options)):
            option = state.options[index]
            emoji = self.chosen_emoji if option.value == state.value else self.unchosen_emoji
            marker = f'{self.focus_marker} ' if index == state.focused_index else ''
            keyboard.append([
                self._create_button(f'{marker}{emoji} {option.label}', Intent.SELECT, str(index)),
            ])

        keyboard.append([
            self._create_button(caption, Intent.KEY, key.value)
            for key, caption in self.navigation_buttons
        ])

        return InlineKeyboardMarkup(keyboard)
