"""Persistent collections: the ordered item set and the item sequence."""

from .item_sequence import ItemSequence
from .item_set import OrderedItemSet

__all__ = ["ItemSequence", "OrderedItemSet"]
