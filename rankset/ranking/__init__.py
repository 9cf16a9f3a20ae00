"""Ranking of item sets by weight."""

from .ranker import ItemRanker, RankingStrategy

__all__ = ["ItemRanker", "RankingStrategy"]
