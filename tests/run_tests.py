"""The module runs all the tests."""

# ruff: noqa: F401

import os
import unittest

from tests.test_dropdown import DropdownTests
from tests.test_keyboard_widget import KeyboardDropdownWidgetTests
from tests.test_navigation import NavigationUseCaseTests
from tests.test_scroll import ViewportScrollAdapterTests
from tests.test_settings import SettingsTests
from tests.test_store import StateStoreTests

if __name__ == '__main__':
    os.environ.setdefault('PICKLIST_SETTINGS_MODULE', 'tests.settings')

    unittest.main()
