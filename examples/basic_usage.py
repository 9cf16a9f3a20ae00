#!/usr/bin/env python3
"""
Basic Usage Example - RankSet

This script demonstrates how a caller uses RankSet:
- Parse raw records into items
- Build a persistent set and derive filtered subsets
- Combine subsets with union
- Rank the result by weight and walk the sequence

Run: python examples/basic_usage.py
"""

from rankset.config.loader import ConfigLoader
from rankset.data import parse_items
from rankset.logging.config import configure_from_settings
from rankset.ranking import ItemRanker
from rankset.structures.item_set import OrderedItemSet

RECORDS = [
    {"owner": "gizmodo", "key": "Galaxy Nexus hands-on", "weight": 31},
    {"owner": "engadget", "key": "iPhone 4S battery fix", "weight": 44},
    {"owner": "mashable", "key": "Android 4.0 source released", "weight": 12},
    {"owner": "techcrunch", "key": "Startup raises seed round", "weight": 90},
    {"owner": "cnet", "key": "iPad sales slow down", "weight": 7},
]

GOOGLE_KEYWORDS = ["android", "Android", "galaxy", "Galaxy", "nexus", "Nexus"]
APPLE_KEYWORDS = ["ios", "iOS", "iphone", "iPhone", "ipad", "iPad"]


def mentions_any(keywords):
    return lambda item: any(keyword in item.key for keyword in keywords)


def main():
    config = ConfigLoader.create().load()
    configure_from_settings(config)

    all_items = OrderedItemSet.from_items(parse_items(RECORDS))
    google = all_items.filter(mentions_any(GOOGLE_KEYWORDS))
    apple = all_items.filter(mentions_any(APPLE_KEYWORDS))

    print(f"📦 {len(all_items)} items, {len(google)} google, {len(apple)} apple")

    trending = ItemRanker.from_config(config).rank(google.union(apple))
    print("\n🔥 Trending:")
    trending.foreach(lambda item: print(f"   {item}"))


if __name__ == "__main__":
    main()
