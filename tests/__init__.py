"""The package contains the picklist tests."""

import os

os.environ.setdefault('PICKLIST_SETTINGS_MODULE', 'tests.settings')
