"""Item records and parsing of raw item mappings."""

from .models import Item
from .parsers import parse_item, parse_items

__all__ = ["Item", "parse_item", "parse_items"]
