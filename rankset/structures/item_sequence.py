"""
Immutable singly linked sequence of items.

A sequence is either empty or a cell holding one item and the rest of the
sequence. Cells are frozen and tails are shared, so a sequence can be
handed to any number of readers.
"""

from collections.abc import Callable, Iterable, Iterator
from dataclasses import dataclass
from typing import Optional

from ..data.models import Item
from ..errors import EmptyCollectionError


@dataclass(frozen=True, eq=False, repr=False)
class _Cell:
    item: Item
    next: Optional["_Cell"]


@dataclass(frozen=True, eq=False)
class ItemSequence:
    """Forward-only immutable list of items; ``_cell is None`` means empty."""

    _cell: Optional[_Cell] = None

    @classmethod
    def empty(cls) -> "ItemSequence":
        return _EMPTY

    @classmethod
    def cons(cls, item: Item, tail: "ItemSequence") -> "ItemSequence":
        """Prepend ``item`` to ``tail`` without copying it."""
        return cls(_Cell(item, tail._cell))

    @classmethod
    def from_items(cls, items: Iterable[Item]) -> "ItemSequence":
        """Build a sequence holding ``items`` in iteration order."""
        cell = None
        for item in reversed(list(items)):
            cell = _Cell(item, cell)
        return cls(cell) if cell is not None else _EMPTY

    @property
    def is_empty(self) -> bool:
        return self._cell is None

    @property
    def head(self) -> Item:
        if self._cell is None:
            raise EmptyCollectionError(
                "head of empty sequence",
                operation="head",
                collection="ItemSequence",
            )
        return self._cell.item

    @property
    def tail(self) -> "ItemSequence":
        if self._cell is None:
            raise EmptyCollectionError(
                "tail of empty sequence",
                operation="tail",
                collection="ItemSequence",
            )
        if self._cell.next is None:
            return _EMPTY
        return ItemSequence(self._cell.next)

    def foreach(self, action: Callable[[Item], None]) -> None:
        """Apply ``action`` to every item from head to tail."""
        for item in self:
            action(item)

    def to_list(self) -> list[Item]:
        return list(self)

    def __iter__(self) -> Iterator[Item]:
        cell = self._cell
        while cell is not None:
            yield cell.item
            cell = cell.next

    def __len__(self) -> int:
        count = 0
        cell = self._cell
        while cell is not None:
            count += 1
            cell = cell.next
        return count

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, ItemSequence):
            return NotImplemented
        return self.to_list() == other.to_list()

    def __hash__(self) -> int:
        return hash(tuple(self))

    def __repr__(self) -> str:
        return f"ItemSequence([{', '.join(repr(item) for item in self)}])"


_EMPTY = ItemSequence()
