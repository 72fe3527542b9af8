"""
Selection Set
=============
Indices of the points the user has checked for forgetting.

Members are kept in insertion order (the order the user clicked them), but the
only observable property is membership.
"""
from __future__ import annotations

import logging
import operator
from typing import Iterable, Iterator

logger = logging.getLogger(__name__)


class SelectionSet:
    def __init__(self, indices: Iterable[int] = ()) -> None:
        self._order: list[int] = []
        for index in map(self._validate, indices):
            if index not in self._order:
                self._order.append(index)

    @staticmethod
    def _validate(index: int) -> int:
        # operator.index accepts Python and numpy integers, rejects 1.5
        try:
            value = operator.index(index)
        except TypeError as e:
            raise ValueError(f"Selection index must be an integer, got {index!r}.") from e
        if value < 0:
            raise ValueError(f"Selection index must be non-negative, got {value}.")
        return value

    def __contains__(self, index: object) -> bool:
        return index in self._order

    def __len__(self) -> int:
        return len(self._order)

    def __iter__(self) -> Iterator[int]:
        return iter(self._order)

    def __eq__(self, other: object) -> bool:
        if isinstance(other, SelectionSet):
            return set(self._order) == set(other._order)
        if isinstance(other, (set, frozenset)):
            return set(self._order) == other
        return NotImplemented

    def __repr__(self) -> str:
        return f"SelectionSet({sorted(self._order)})"

    def indices(self) -> tuple[int, ...]:
        """Members in ascending order."""
        return tuple(sorted(self._order))

    def toggle(self, index: int) -> bool:
        """
        Flip membership of `index`.

        Returns:
            True if the index is selected after the call, False otherwise.
        """
        index = self._validate(index)
        try:
            position = self._order.index(index)
        except ValueError:
            self._order = [*self._order, index]
            logger.debug(f"Selected point {index}.")
            return True

        self._order = self._without_position(position)
        logger.debug(f"Deselected point {index}.")
        return False

    def _without_position(self, position: int) -> list[int]:
        """Rebuild the member list without the entry at `position`."""
        if len(self._order) == 1:
            return []
        if position == 0:
            return self._order[1:]
        if position == len(self._order) - 1:
            return self._order[:-1]
        return self._order[:position] + self._order[position + 1:]

    def clear(self) -> None:
        self._order = []

    def is_empty(self) -> bool:
        return not self._order
