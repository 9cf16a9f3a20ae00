"""Tests for the immutable item sequence."""

import pytest

from rankset.data.models import Item
from rankset.errors import EmptyCollectionError
from rankset.structures.item_sequence import ItemSequence


class TestEmptySequence:
    """Test the empty terminator."""

    def test_is_empty(self):
        empty = ItemSequence.empty()

        assert empty.is_empty is True
        assert len(empty) == 0
        assert empty.to_list() == []

    def test_head_raises(self):
        with pytest.raises(EmptyCollectionError) as exc_info:
            ItemSequence.empty().head

        assert exc_info.value.operation == "head"
        assert exc_info.value.collection == "ItemSequence"

    def test_tail_raises(self):
        with pytest.raises(EmptyCollectionError) as exc_info:
            ItemSequence.empty().tail

        assert exc_info.value.operation == "tail"

    def test_foreach_does_nothing(self):
        seen = []
        ItemSequence.empty().foreach(seen.append)
        assert seen == []


class TestSequence:
    """Test non-empty sequences."""

    def test_cons_head_and_tail(self):
        first = Item("a", "k1", 5)
        second = Item("b", "k2", 3)
        sequence = ItemSequence.cons(first, ItemSequence.cons(second, ItemSequence.empty()))

        assert sequence.is_empty is False
        assert sequence.head == first
        assert sequence.tail.head == second
        assert sequence.tail.tail.is_empty

    def test_from_items_preserves_order(self, sample_items):
        sequence = ItemSequence.from_items(sample_items)

        assert sequence.to_list() == sample_items
        assert len(sequence) == 3

    def test_from_empty_iterable(self):
        assert ItemSequence.from_items([]) is ItemSequence.empty()

    def test_foreach_head_to_tail(self, sample_items):
        seen = []
        ItemSequence.from_items(sample_items).foreach(seen.append)
        assert seen == sample_items

    def test_cons_shares_tail(self, sample_items):
        tail = ItemSequence.from_items(sample_items)
        extended = ItemSequence.cons(Item("z", "k0", 0), tail)

        assert extended.tail == tail
        assert extended.tail._cell is tail._cell
        assert tail.to_list() == sample_items

    def test_equality_and_hash(self, sample_items):
        one = ItemSequence.from_items(sample_items)
        two = ItemSequence.from_items(list(sample_items))

        assert one == two
        assert hash(one) == hash(two)
        assert one != one.tail

    def test_sequence_is_frozen(self, sample_items):
        sequence = ItemSequence.from_items(sample_items)
        with pytest.raises(AttributeError):
            sequence._cell = None

    def test_long_sequence(self):
        items = [Item("o", f"k{i}", i) for i in range(5000)]
        sequence = ItemSequence.from_items(items)

        assert len(sequence) == 5000
        assert sequence == ItemSequence.from_items(items)
