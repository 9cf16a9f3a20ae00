"""
Canonical item record stored in ordered item sets.

An item carries two independent orderings: its key defines set identity and
the tree order, its weight defines the ranking order.
"""

from dataclasses import dataclass


@dataclass(frozen=True)
class Item:
    """Immutable record keyed by ``key`` and ranked by ``weight``."""
    owner: str          # Informational only
    key: str            # Set identity and tree ordering
    weight: int         # Ranking order, may be negative

    def same_key(self, other: "Item") -> bool:
        """True when both items denote the same set element."""
        return self.key == other.key

    def __str__(self) -> str:
        return f"{self.owner}: {self.key} [{self.weight}]"
