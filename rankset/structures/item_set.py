"""
Persistent ordered set of items backed by an unbalanced binary search tree.

The tree is ordered by ``Item.key``: for every branch, keys in the left
subtree are strictly smaller and keys in the right subtree strictly larger
than the branch key. Every operation returns a new set and shares the
untouched subtrees with the receiver; nodes are frozen and never modified
after construction.

Ranking works on ``Item.weight``, which is unrelated to the tree order, so
``to_descending_by_weight`` repeatedly extracts the heaviest item instead of
walking the tree.

The tree is not rebalanced and may degenerate into a chain, so all
traversals use explicit stacks rather than recursion.
"""

from collections.abc import Callable, Iterable, Iterator
from dataclasses import dataclass
from typing import Optional

import structlog

from ..data.models import Item
from ..errors import EmptyCollectionError
from .item_sequence import ItemSequence

logger = structlog.get_logger(__name__)


@dataclass(frozen=True, eq=False, repr=False)
class _Branch:
    item: Item
    left: Optional["_Branch"]
    right: Optional["_Branch"]


# (ancestor, descended_left) pairs from the root down to the edited position
_Path = list[tuple[_Branch, bool]]


def _rebuild(path: _Path, child: Optional[_Branch]) -> Optional[_Branch]:
    """Copy the ancestors on ``path`` so they point at ``child``; siblings are shared."""
    for node, went_left in reversed(path):
        if went_left:
            child = _Branch(node.item, child, node.right)
        else:
            child = _Branch(node.item, node.left, child)
    return child


def _pre_order(root: Optional[_Branch]) -> Iterator[Item]:
    # Re-inserting items in this order reproduces the subtree shape.
    stack = [root] if root is not None else []
    while stack:
        node = stack.pop()
        yield node.item
        if node.right is not None:
            stack.append(node.right)
        if node.left is not None:
            stack.append(node.left)


def _in_order(root: Optional[_Branch]) -> Iterator[Item]:
    stack: list[_Branch] = []
    node = root
    while stack or node is not None:
        while node is not None:
            stack.append(node)
            node = node.left
        node = stack.pop()
        yield node.item
        node = node.right


@dataclass(frozen=True, eq=False)
class OrderedItemSet:
    """Immutable set of items keyed by ``Item.key``; ``_root is None`` means empty."""

    _root: Optional[_Branch] = None

    @classmethod
    def empty(cls) -> "OrderedItemSet":
        return _EMPTY

    @classmethod
    def from_items(cls, items: Iterable[Item]) -> "OrderedItemSet":
        """Fold ``insert`` over ``items``; later duplicates of a key are ignored."""
        result = _EMPTY
        for item in items:
            result = result.insert(item)
        return result

    @property
    def is_empty(self) -> bool:
        return self._root is None

    def contains(self, item: Item) -> bool:
        """Test whether an item with the same key is in the set."""
        return self.find(item.key) is not None

    def find(self, key: str) -> Optional[Item]:
        """Return the stored item for ``key``, or None."""
        node = self._root
        while node is not None:
            if key < node.item.key:
                node = node.left
            elif node.item.key < key:
                node = node.right
            else:
                return node.item
        return None

    def insert(self, item: Item) -> "OrderedItemSet":
        """
        Return a set that also holds ``item``.

        If the key is already present the receiver itself is returned and
        the stored item is kept.
        """
        path: _Path = []
        node = self._root
        while node is not None:
            if item.key < node.item.key:
                path.append((node, True))
                node = node.left
            elif node.item.key < item.key:
                path.append((node, False))
                node = node.right
            else:
                return self
        return OrderedItemSet(_rebuild(path, _Branch(item, None, None)))

    def remove(self, item: Item) -> "OrderedItemSet":
        """
        Return a set without the element keyed like ``item``.

        The removed branch is replaced by the union of its two subtrees.
        """
        path: _Path = []
        node = self._root
        while node is not None:
            if item.key < node.item.key:
                path.append((node, True))
                node = node.left
            elif node.item.key < item.key:
                path.append((node, False))
                node = node.right
            else:
                break
        if node is None:
            return self

        merged = OrderedItemSet(node.left).union(OrderedItemSet(node.right))
        root = _rebuild(path, merged._root)
        return OrderedItemSet(root) if root is not None else _EMPTY

    def filter(self, predicate: Callable[[Item], bool]) -> "OrderedItemSet":
        """
        Return the subset of items for which ``predicate`` holds.

        The result is built by inserting into a fresh set; the predicate is
        unrelated to key order so subtrees cannot be pruned.
        """
        acc = _EMPTY
        for item in _pre_order(self._root):
            if predicate(item):
                acc = acc.insert(item)
        return acc

    def union(self, other: "OrderedItemSet") -> "OrderedItemSet":
        """
        Return the union by key of this set and ``other``.

        Items of the receiver are folded into ``other``; for a key held by
        both, the item from ``other`` is kept.
        """
        acc = other
        for item in _pre_order(self._root):
            if not acc.contains(item):
                acc = acc.insert(item)
        return acc

    def max_by_weight(self) -> Item:
        """
        Return an item with the greatest weight.

        Raises:
            EmptyCollectionError: If the set is empty

        Which of several equally heavy items is returned is unspecified.
        """
        if self._root is None:
            raise EmptyCollectionError(
                "max_by_weight of empty set",
                operation="max_by_weight",
                collection="OrderedItemSet",
            )
        best = self._root.item
        for item in _pre_order(self._root):
            if item.weight > best.weight:
                best = item
        return best

    def to_descending_by_weight(self) -> ItemSequence:
        """
        Rank all items by weight, heaviest first.

        Each round takes the current maximum and continues on the set with
        that item removed, so the cost is quadratic in the set size.
        """
        extracted = []
        remaining = self
        while not remaining.is_empty:
            heaviest = remaining.max_by_weight()
            extracted.append(heaviest)
            remaining = remaining.remove(heaviest)

        logger.debug("Extracted descending ranking", size=len(extracted))
        return ItemSequence.from_items(extracted)

    def sorted_by_weight(self) -> ItemSequence:
        """Rank all items by weight with a single sort; ties are unspecified."""
        ranked = sorted(_pre_order(self._root), key=lambda item: item.weight, reverse=True)
        return ItemSequence.from_items(ranked)

    def foreach(self, action: Callable[[Item], None]) -> None:
        """Apply ``action`` to every item in ascending key order."""
        for item in self:
            action(item)

    def keys(self) -> tuple[str, ...]:
        return tuple(item.key for item in self)

    def __iter__(self) -> Iterator[Item]:
        return _in_order(self._root)

    def __len__(self) -> int:
        return sum(1 for _ in _pre_order(self._root))

    def __contains__(self, item: object) -> bool:
        return isinstance(item, Item) and self.contains(item)

    def __eq__(self, other: object) -> bool:
        # Set identity is by key only
        if not isinstance(other, OrderedItemSet):
            return NotImplemented
        return self.keys() == other.keys()

    def __hash__(self) -> int:
        return hash(self.keys())

    def __repr__(self) -> str:
        return f"OrderedItemSet([{', '.join(repr(item) for item in self)}])"


_EMPTY = OrderedItemSet()
