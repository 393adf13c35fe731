"""The module contains the tests for the keyboard dropdown widget."""

# ruff: noqa: ANN001, ANN101, ANN201, ANN202

from unittest import mock

from telegram import InlineKeyboardMarkup

from picklist.test.base import BaseTestCase
from picklist.widgets import KeyboardDropdownWidget

_NAVIGATION_DATA = [
    'fruits:key:ArrowUp',
    'fruits:key:ArrowDown',
    'fruits:key:Escape',
]


def _create_update(data):
    query = mock.AsyncMock()
    query.data = data
    return mock.Mock(callback_query=query)


class KeyboardDropdownWidgetTests(BaseTestCase):
    """The class implements the tests for the keyboard dropdown widget."""

    @staticmethod
    def _get_rows(markup):
        return [
            [(button.text, button.callback_data) for button in row]
            for row in markup.inline_keyboard
        ]

    def test_closed_dropdown(self):
        """Tests rendering the dropdown while it's closed."""

        widget = KeyboardDropdownWidget(self.options)
        markup = widget.render()

        self.assertIsInstance(markup, InlineKeyboardMarkup)
        self.assertEqual(self._get_rows(markup), [
            [('Select a fruit ▼', 'fruits:toggle')],
        ])

    def test_open_dropdown(self):
        """Tests rendering the dropdown while it's open."""

        widget = KeyboardDropdownWidget(self.options)
        self.assertTrue(widget.handle('fruits:toggle'))

        rows = self._get_rows(widget.render())

        self.assertEqual(rows[:3], [
            [('Select a fruit ▲', 'fruits:toggle')],
            [('▸ ◯ Apple', 'fruits:select:0')],
            [('◯ Banana', 'fruits:select:1')],
        ])
        self.assertEqual([data for _, data in rows[3]], _NAVIGATION_DATA)
        self.assertEqual(len(rows), 4)

    def test_focused_option_is_always_visible(self):
        """Tests the case when the dropdown opens on an option outside the first page."""

        widget = KeyboardDropdownWidget(self.options, 'orange')
        widget.handle('fruits:toggle')

        rows = self._get_rows(widget.render())

        self.assertEqual(rows[0], [('Orange ▲', 'fruits:toggle')])
        self.assertEqual(rows[1:3], [
            [('◯ Banana', 'fruits:select:1')],
            [('▸ 🔘 Orange', 'fruits:select:2')],
        ])

    def test_arrow_buttons_scroll_the_viewport(self):
        """Tests that the arrows move the focus and the visible window."""

        widget = KeyboardDropdownWidget(self.options)
        widget.handle('fruits:toggle')
        widget.handle('fruits:key:ArrowUp')

        self.assertEqual(widget.dropdown.state.focused_index, 2)
        self.assertEqual(widget.viewport.offset, 1)

        widget.handle('fruits:key:ArrowDown')
        rows = self._get_rows(widget.render())

        self.assertEqual(widget.dropdown.state.focused_index, 0)
        self.assertEqual(rows[1], [('▸ ◯ Apple', 'fruits:select:0')])

    def test_page_size_and_namespace_arguments(self):
        """Tests the case when the page size and the namespace are specified explicitly."""

        widget = KeyboardDropdownWidget(self.options, page_size=3, namespace='menu')
        widget.handle('menu:toggle')

        rows = self._get_rows(widget.render())

        self.assertEqual(len(rows), 5)
        self.assertEqual(rows[3], [('◯ Orange', 'menu:select:2')])

    def test_select_button(self):
        """Tests pressing an option button."""

        widget = KeyboardDropdownWidget(self.options)
        widget.handle('fruits:toggle')

        self.assertTrue(widget.handle('fruits:select:1'))

        state = widget.dropdown.state
        self.assertEqual(state.value, 'banana')
        self.assertFalse(state.is_open)

    def test_escape_button(self):
        """Tests pressing the button closing the dropdown."""

        widget = KeyboardDropdownWidget(self.options)
        widget.handle('fruits:toggle')
        widget.handle('fruits:key:Escape')

        self.assertFalse(widget.dropdown.state.is_open)

    def test_invalid_callback_data(self):
        """Tests the case when the callback data is foreign or malformed."""

        widget = KeyboardDropdownWidget(self.options)
        invalid_data = (
            None,
            'fruits',
            'fruits:unknown',
            'fruits:select:x',
            'fruits:select:3',
            'fruits:select:-1',
            'vegetables:toggle',
        )
        for data in invalid_data:
            self.assertFalse(widget.handle(data))

        self.assertFalse(widget.dropdown.state.is_open)
        self.assertEqual(widget.dropdown.state.value, '')

    def test_disabled_widget(self):
        """Tests the case when the dropdown of the widget is disabled."""

        widget = KeyboardDropdownWidget(self.options, disabled=True)

        self.assertTrue(widget.handle('fruits:toggle'))
        self.assertFalse(widget.dropdown.state.is_open)

    async def test_callback_query_updates_keyboard(self):
        """Tests handling a callback query that changes the state."""

        widget = KeyboardDropdownWidget(self.options)
        update = _create_update('fruits:toggle')

        await widget.handle_callback_query(update, None)

        query = update.callback_query
        query.answer.assert_awaited_once()
        query.edit_message_reply_markup.assert_awaited_once()
        markup = query.edit_message_reply_markup.await_args.kwargs['reply_markup']
        self.assertEqual(len(markup.inline_keyboard), 4)

    async def test_callback_query_without_changes(self):
        """Tests handling a callback query that doesn't change the state."""

        widget = KeyboardDropdownWidget(self.options)
        update = _create_update('fruits:key:Escape')

        await widget.handle_callback_query(update, None)

        update.callback_query.answer.assert_awaited_once()
        update.callback_query.edit_message_reply_markup.assert_not_awaited()

    async def test_callback_query_with_foreign_data(self):
        """Tests handling a callback query meant for another widget."""

        widget = KeyboardDropdownWidget(self.options)
        update = _create_update('vegetables:toggle')

        await widget.handle_callback_query(update, None)

        update.callback_query.answer.assert_awaited_once()
        update.callback_query.edit_message_reply_markup.assert_not_awaited()

    async def test_update_without_callback_query(self):
        """Tests handling an update which doesn't carry a callback query."""

        widget = KeyboardDropdownWidget(self.options)

        await widget.handle_callback_query(mock.Mock(callback_query=None), None)

        self.assertFalse(widget.dropdown.state.is_open)
