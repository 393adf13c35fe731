"""The core of picklist: the state store, the navigation use case and
the composition root wiring them together.
"""

from picklist.core.dropdown import Dropdown
from picklist.core.navigation import NavigationUseCase
from picklist.core.store import StateStore

__all__ = ('Dropdown', 'NavigationUseCase', 'StateStore')
