"""
Ranking facade over ordered item sets.

The ranker picks how a set is turned into a descending-weight sequence:
``selection`` uses the repeated max extraction of the set itself,
``sorted`` collects the items and sorts them once. Both leave the order of
equally weighted items unspecified.
"""

from collections.abc import Iterable
from enum import Enum
from typing import Any, Optional

from ..config.validation import ConfigValidator
from ..data.models import Item
from ..errors import ConfigurationError
from ..logging.config import get_ranking_logger, log_ranking
from ..structures.item_sequence import ItemSequence
from ..structures.item_set import OrderedItemSet


class RankingStrategy(str, Enum):
    """Available ranking extraction strategies."""
    SELECTION = "selection"
    SORTED = "sorted"


class ItemRanker:
    """Turns item sets into sequences ordered by descending weight."""

    def __init__(self, strategy: RankingStrategy = RankingStrategy.SELECTION):
        self.strategy = RankingStrategy(strategy)
        self.logger = get_ranking_logger(__name__)

    @classmethod
    def from_config(cls, config: Optional[dict[str, Any]] = None) -> "ItemRanker":
        """Create a ranker from a merged configuration dict."""
        config = config or {}
        errors = ConfigValidator.validate_config(config)
        if errors:
            raise ConfigurationError(
                f"Invalid ranking configuration: {len(errors)} error(s)",
                errors=errors,
            )
        ranking = config.get("ranking") or {}
        return cls(RankingStrategy(ranking.get("strategy", RankingStrategy.SELECTION.value)))

    def rank(self, item_set: OrderedItemSet) -> ItemSequence:
        """Rank every item of ``item_set``, heaviest first."""
        if self.strategy is RankingStrategy.SORTED:
            ranked = item_set.sorted_by_weight()
        else:
            ranked = item_set.to_descending_by_weight()

        log_ranking(
            self.logger,
            strategy=self.strategy.value,
            size=len(ranked),
            top_key=None if ranked.is_empty else ranked.head.key,
        )
        return ranked

    def rank_items(self, items: Iterable[Item]) -> ItemSequence:
        """Build a set from ``items`` (first item per key wins) and rank it."""
        return self.rank(OrderedItemSet.from_items(items))
