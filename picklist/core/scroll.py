"""The module contains the implementations of the scroll port."""

from typing import TYPE_CHECKING

from picklist.core.exceptions import ImproperlyConfigured

if TYPE_CHECKING:
    from typing_extensions import Self


class NullScrollPort:
    """The class implements the scroll port for environments
    where there is nothing to scroll.
    """

    def scroll_into_view(self: 'Self', index: int) -> None:
        """Do nothing."""


class ViewportScrollAdapter:
    """The class implements the scroll port as a fixed-size window
    over the option list.
    """

    def __init__(self: 'Self', page_size: int) -> None:
        """Initialize a viewport scroll adapter object."""
        if page_size < 1:
            msg = f'The page size must be a positive integer, got {page_size}'
            raise ImproperlyConfigured(msg)

        self.page_size = page_size
        self.offset = 0

    def scroll_into_view(self: 'Self', index: int) -> None:
        """Shift the window so that it contains the specified index."""
        if index < 0:
            return

        if index >= self.offset + self.page_size:
            self.offset = index - self.page_size + 1
        elif index < self.offset:
            self.offset = index

    def visible_range(self: 'Self', total: int) -> range:
        """Return the indices of the options to be shown
        if the list consists of `total` options.
        """
        self.offset = max(0, min(self.offset, total - self.page_size))
        return range(self.offset, min(self.offset + self.page_size, total))
