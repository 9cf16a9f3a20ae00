#!/usr/bin/env python3
"""Ranking strategy benchmark script for RankSet."""

import random
import sys
import time
from pathlib import Path
from typing import Any, Dict, List

# Add the project root to the Python path
project_root = Path(__file__).parent.parent
sys.path.insert(0, str(project_root))

from rankset.data.models import Item
from rankset.ranking import ItemRanker, RankingStrategy
from rankset.structures.item_set import OrderedItemSet


def generate_sample_items(count: int, seed: int = 7) -> List[Item]:
    """Generate items with shuffled keys and random weights."""
    rng = random.Random(seed)
    keys = [f"item-{i:06d}" for i in range(count)]
    rng.shuffle(keys)
    return [Item(owner=f"user{i % 10}", key=key, weight=rng.randint(0, 10_000))
            for i, key in enumerate(keys)]


def benchmark_strategy(item_set: OrderedItemSet, strategy: RankingStrategy) -> Dict[str, Any]:
    """Time one ranking of ``item_set``."""
    ranker = ItemRanker(strategy)

    start_time = time.perf_counter()
    ranked = ranker.rank(item_set)
    total_time = time.perf_counter() - start_time

    return {
        "strategy": strategy.value,
        "total_time": total_time,
        "size": len(ranked),
    }


def main():
    """Main benchmark function."""
    print("⚡ RankSet Ranking Benchmark")
    print("=" * 40)

    for size in [100, 500, 1000, 2000]:
        start_time = time.perf_counter()
        item_set = OrderedItemSet.from_items(generate_sample_items(size))
        build_time = time.perf_counter() - start_time

        print(f"\n📊 {size} items (build {build_time*1000:.1f}ms):")
        for strategy in RankingStrategy:
            results = benchmark_strategy(item_set, strategy)
            print(f"   {results['strategy']:>9}: {results['total_time']*1000:.1f}ms")


if __name__ == "__main__":
    main()
