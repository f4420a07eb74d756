"""
Ordering and state for the dropdown language selection.

The engine owns a list of uniquely keyed options with exactly one current
option, always ordered current-first and then by id. The list is replaced
wholesale on every change, never mutated in place.
"""

from __future__ import annotations

import dataclasses
import logging
from collections.abc import Callable, Iterable, Sequence
from enum import Enum
from typing import Any

from ui.errors import DuplicateKeyError, InvariantViolation, NotFoundError, ShapeError


@dataclasses.dataclass(frozen=True)
class SelectOption:
    """An option in the selection list."""

    id: str
    display_name: str
    style_variant: str = ''
    is_current: bool = False


class SelectionState(Enum):
    CLOSED = 'closed'
    OPEN = 'open'


OnChange = Callable[[list[Any]], None]


def is_select_option(option: object) -> bool:
    """Return True if the object is a dataclass instance with the option fields."""
    if not dataclasses.is_dataclass(option) or isinstance(option, type):
        return False
    return (
        isinstance(getattr(option, 'id', None), str)
        and isinstance(getattr(option, 'display_name', None), str)
        and isinstance(getattr(option, 'style_variant', ''), str)
        and isinstance(getattr(option, 'is_current', None), bool)
    )


def validate_options(options: Sequence[Any]) -> None:
    """
    Check option shapes and id uniqueness.

    Raises:
        ShapeError: If an option is malformed.
        DuplicateKeyError: If two options share an id.
    """
    seen: set[str] = set()
    for option in options:
        if not is_select_option(option):
            raise ShapeError(f'Expected a select option, got {option!r}')
        if option.id in seen:
            raise DuplicateKeyError(f'Duplicate option id: {option.id!r}')
        seen.add(option.id)


def count_current(options: Iterable[Any]) -> int:
    return sum(1 for o in options if o.is_current)


def normalize_order(options: Sequence[Any]) -> list[Any]:
    """
    Sort options by id, then move the current option to the front.

    Args:
        options: Options with unique ids.

    Returns:
        New ordered list.

    Raises:
        ShapeError: If an option is malformed.
        DuplicateKeyError: If two options share an id.
    """
    validate_options(options)
    by_id = sorted(options, key=lambda o: o.id)
    return sorted(by_id, key=lambda o: not o.is_current)


class SelectionEngine:
    """
    Normalized option list plus open/closed state of the dropdown.

    Args:
        options: Options to choose from. If not exactly one is current, the
            first one becomes current.
        on_change: Called with the new list after every set_current.

    Raises:
        ShapeError: If the list is empty, an option is malformed, or
            on_change is not callable.
        DuplicateKeyError: If two options share an id.
    """

    def __init__(self, options: Iterable[Any], on_change: OnChange | None = None) -> None:
        options = list(options)
        if not options:
            raise ShapeError('Expected at least one option.')
        validate_options(options)
        if on_change is not None and not callable(on_change):
            raise ShapeError('Expected on_change to be callable.')

        if count_current(options) != 1:
            options = [dataclasses.replace(o, is_current=i == 0) for i, o in enumerate(options)]

        self._on_change = on_change
        self._state = SelectionState.CLOSED
        self._options: list[Any] = normalize_order(options)

    @property
    def options(self) -> tuple[Any, ...]:
        return tuple(self._options)

    @property
    def current(self) -> Any:
        return self._options[0]

    @property
    def rest(self) -> tuple[Any, ...]:
        """Options shown as selectable rows when the list is open."""
        return tuple(self._options[1:])

    @property
    def state(self) -> SelectionState:
        return self._state

    @property
    def is_open(self) -> bool:
        return self._state is SelectionState.OPEN

    def find(self, option_id: str) -> Any:
        """
        Return the stored option with this id.

        Raises:
            NotFoundError: If no option has this id.
        """
        for option in self._options:
            if option.id == option_id:
                return option
        raise NotFoundError(f'No option with id {option_id!r}')

    def set_current(self, option_id: str, replacement: Any | None = None) -> None:
        """
        Make an option current and notify on_change.

        Args:
            option_id: Id of the option to make current.
            replacement: Optional new data for that option (same type and id).

        Raises:
            NotFoundError: If option_id is unknown.
            ShapeError: If replacement is malformed, of another type or has another id.
            InvariantViolation: If the new list does not have exactly one current option.
        """
        target = self.find(option_id)
        if replacement is not None:
            if (
                not is_select_option(replacement)
                or type(replacement) is not type(target)
                or replacement.id != option_id
            ):
                raise ShapeError(
                    f'Replacement must be a {type(target).__name__} with id {option_id!r}'
                )
            target = replacement

        updated = [
            dataclasses.replace(target, is_current=True)
            if o.id == option_id
            else dataclasses.replace(o, is_current=False)
            for o in self._options
        ]
        updated = normalize_order(updated)
        if count_current(updated) != 1 or not updated[0].is_current:
            raise InvariantViolation('Selection must have exactly one current option.')

        self._options = updated
        logging.debug('Selection current option set to %r', option_id)

        if self._on_change is not None:
            self._on_change(list(updated))

    def toggle_open(self) -> None:
        if self._state is SelectionState.OPEN:
            self._state = SelectionState.CLOSED
        else:
            self._state = SelectionState.OPEN

    def select(self, option_id: str) -> None:
        """Make an option current, then collapse the list."""
        self.set_current(option_id)
        if self.is_open:
            self.toggle_open()
