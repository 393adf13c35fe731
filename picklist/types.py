"""The module contains the types used throughout the package."""

from collections.abc import Callable, Iterable
from dataclasses import dataclass, field
from typing import TYPE_CHECKING, Any, TypedDict, TypeVar

if TYPE_CHECKING:
    from typing_extensions import Self

Choice = tuple[str, str]

Func = TypeVar('Func', bound=Callable[..., Any])

NOT_FOUND = -1


@dataclass(frozen=True)
class Option:
    """The class represents a single selectable item of a dropdown."""

    value: str
    label: str

    @classmethod
    def from_choice(cls: type['Self'], choice: 'Choice') -> 'Self':
        """Create an option from a (value, label) pair."""
        value, label = choice
        return cls(value, label)


Options = tuple[Option, ...]

OptionsInput = Iterable['Option | Choice']


@dataclass
class WidgetState:
    """The class represents the state of a single dropdown instance."""

    is_open: bool = False
    focused_index: int = NOT_FOUND
    value: str = ''
    options: Options = field(default_factory=tuple)

    def index_of(self: 'Self', value: str) -> int:
        """Return the index of the option with the specified value,
        or -1 if there is no such option.
        """
        for index, option in enumerate(self.options):
            if option.value == value:
                return index

        return NOT_FOUND


class StatePatch(TypedDict, total=False):
    """The class represents a partial update of the widget state."""

    is_open: bool
    focused_index: int
    value: str
    options: Options


Subscriber = Callable[[WidgetState], None]

Unsubscribe = Callable[[], None]
