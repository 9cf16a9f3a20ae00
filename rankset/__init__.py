"""
RankSet - persistent ordered item sets with weight ranking

An immutable binary search tree of items keyed by a string field, with set
algebra and a ranking extraction that orders items by their integer weight.
"""

from .data.models import Item
from .structures.item_sequence import ItemSequence
from .structures.item_set import OrderedItemSet

__version__ = "0.1.0"
__author__ = "RankSet Team"

__all__ = ["Item", "ItemSequence", "OrderedItemSet"]
