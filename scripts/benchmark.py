#!/usr/bin/env python3
"""
Benchmark Script for recurve-cache

Measures the performance characteristics of the Cache implementation,
with and without eviction pressure. Useful for profiling and optimization.

Usage:
    python scripts/benchmark.py                    # Run all benchmarks
    python scripts/benchmark.py --operations 5000  # Custom operation count
    python scripts/benchmark.py --profile          # Enable cProfile
    python scripts/benchmark.py --debug            # Log every eviction
"""

import argparse
import logging
import random
import statistics
import string
import time
from typing import Any, Callable, Dict, List
import sys
import os

# Add project root to path
sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

from recurve_cache.cache.cache import Cache
from recurve_cache.config.log import setup_logging

logger = logging.getLogger(__name__)


def random_string(length: int) -> str:
    """Generate a random alphanumeric string."""
    return ''.join(random.choices(string.ascii_letters + string.digits, k=length))


def measure_time(func: Callable, iterations: int = 1) -> Dict[str, float]:
    """Measure execution time statistics."""
    times = []

    for _ in range(iterations):
        start = time.perf_counter()
        func()
        elapsed = (time.perf_counter() - start) * 1000  # Convert to ms
        times.append(elapsed)

    return {
        "min_ms": min(times),
        "max_ms": max(times),
        "mean_ms": statistics.mean(times),
        "median_ms": statistics.median(times),
        "total_ms": sum(times),
    }


class Benchmark:
    """Collection of benchmarks for the cache."""

    def __init__(self, operations: int = 10000, key_size: int = 16, max_cost: int = 100):
        self.operations = operations
        self.key_size = key_size
        self.max_cost = max_cost

        # Pre-generate test data
        self.keys = [random_string(key_size) for _ in range(operations)]
        self.costs = [random.randint(0, max_cost) for _ in range(operations)]

    def _finish(self, stats: Dict[str, Any], operation: str) -> Dict[str, Any]:
        stats["ops_per_second"] = self.operations / (stats["total_ms"] / 1000)
        stats["operation"] = operation
        stats["count"] = self.operations
        return stats

    def _filled_cache(self) -> Cache:
        cache = Cache(0, 0)
        for i in range(self.operations):
            cache.set(self.keys[i], i, self.costs[i])
        return cache

    def benchmark_set(self) -> Dict[str, Any]:
        """Benchmark set operations on an unlimited cache."""
        cache = Cache(0, 0)

        def run():
            for i in range(self.operations):
                cache.set(self.keys[i], i, self.costs[i])

        return self._finish(measure_time(run), "SET")

    def benchmark_get(self) -> Dict[str, Any]:
        """Benchmark get operations (cache hits)."""
        cache = self._filled_cache()

        def run():
            for i in range(self.operations):
                cache.get(self.keys[i])

        return self._finish(measure_time(run), "GET (hit)")

    def benchmark_get_miss(self) -> Dict[str, Any]:
        """Benchmark get operations (cache misses)."""
        cache = self._filled_cache()
        miss_keys = [random_string(self.key_size + 1) for _ in range(self.operations)]

        def run():
            for key in miss_keys:
                cache.get(key)

        return self._finish(measure_time(run), "GET (miss)")

    def benchmark_remove(self) -> Dict[str, Any]:
        """Benchmark remove operations."""
        cache = self._filled_cache()

        def run():
            for i in range(self.operations):
                cache.remove(self.keys[i])

        return self._finish(measure_time(run), "REMOVE")

    def benchmark_exists(self) -> Dict[str, Any]:
        """Benchmark exists operations."""
        cache = Cache(0, 0)

        # Pre-populate half
        for i in range(self.operations // 2):
            cache.set(self.keys[i], i, self.costs[i])

        def run():
            for i in range(self.operations):
                cache.exists(self.keys[i])

        return self._finish(measure_time(run), "EXISTS")

    def benchmark_count_eviction(self) -> Dict[str, Any]:
        """Benchmark set with the count limit forcing eviction."""
        # Small cache to force eviction
        count_limit = max(1, self.operations // 100)
        cache = Cache(count_limit=count_limit)

        def run():
            for i in range(self.operations):
                cache.set(self.keys[i], i, self.costs[i])

        stats = self._finish(measure_time(run), "SET (count eviction)")
        stats["count_limit"] = count_limit
        stats["evictions"] = cache.get_stats()["evictions"]
        return stats

    def benchmark_cost_eviction(self) -> Dict[str, Any]:
        """Benchmark set with the total cost limit forcing eviction."""
        total_cost_limit = max(1, self.max_cost * self.operations // 200)
        cache = Cache(total_cost_limit=total_cost_limit)

        def run():
            for i in range(self.operations):
                cache.set(self.keys[i], i, self.costs[i])

        stats = self._finish(measure_time(run), "SET (cost eviction)")
        stats["total_cost_limit"] = total_cost_limit
        stats["evictions"] = cache.get_stats()["evictions"]
        return stats

    def benchmark_mixed_workload(self) -> Dict[str, Any]:
        """Benchmark mixed set/get workload (50/50) under a count limit."""
        cache = Cache(count_limit=max(1, self.operations // 100))

        # Pre-populate half
        for i in range(self.operations // 2):
            cache.set(self.keys[i], i, self.costs[i])

        def run():
            for i in range(self.operations):
                if i % 2 == 0:
                    cache.set(self.keys[i], i, self.costs[i])
                else:
                    cache.get(self.keys[i % (self.operations // 2)])

        return self._finish(measure_time(run), "Mixed (50% SET, 50% GET)")

    def benchmark_for_each(self) -> Dict[str, Any]:
        """Benchmark a full for_each traversal."""
        cache = self._filled_cache()
        visited = []

        def run():
            cache.for_each(lambda value, key: visited.append(key))

        return self._finish(measure_time(run), "FOR_EACH (full)")

    def run_all(self) -> List[Dict[str, Any]]:
        """Run all benchmarks."""
        benchmarks = [
            ("SET", self.benchmark_set),
            ("GET (hit)", self.benchmark_get),
            ("GET (miss)", self.benchmark_get_miss),
            ("REMOVE", self.benchmark_remove),
            ("EXISTS", self.benchmark_exists),
            ("SET (count eviction)", self.benchmark_count_eviction),
            ("SET (cost eviction)", self.benchmark_cost_eviction),
            ("Mixed workload", self.benchmark_mixed_workload),
            ("FOR_EACH", self.benchmark_for_each),
        ]

        results = []
        for name, func in benchmarks:
            logger.debug(f"Starting benchmark {name}")
            print(f"Running: {name}...", end=" ", flush=True)
            result = func()
            print(f"{result['ops_per_second']:,.0f} ops/sec")
            results.append(result)

        return results


def print_results(results: List[Dict[str, Any]]):
    """Print benchmark results in a table."""
    print()
    print("=" * 70)
    print("                        BENCHMARK RESULTS")
    print("=" * 70)
    print(f"{'Operation':<30} {'Ops/sec':>12} {'Mean (ms)':>12} {'Total (ms)':>12}")
    print("-" * 70)

    for r in results:
        print(f"{r['operation']:<30} {r['ops_per_second']:>12,.0f} "
              f"{r['mean_ms']:>12.3f} {r['total_ms']:>12.1f}")

    print("=" * 70)

    # Summary
    total_ops = sum(r['count'] for r in results)
    total_time = sum(r['total_ms'] for r in results)
    avg_ops = total_ops / (total_time / 1000)

    print()
    print(f"Total operations: {total_ops:,}")
    print(f"Total time: {total_time / 1000:.2f} seconds")
    print(f"Average throughput: {avg_ops:,.0f} ops/sec")


def main():
    parser = argparse.ArgumentParser(
        description="Benchmark recurve-cache",
        formatter_class=argparse.ArgumentDefaultsHelpFormatter,
    )

    parser.add_argument(
        "--operations", "-n",
        type=int,
        default=10000,
        help="Number of operations per benchmark"
    )
    parser.add_argument(
        "--key-size",
        type=int,
        default=16,
        help="Size of keys"
    )
    parser.add_argument(
        "--max-cost",
        type=int,
        default=100,
        help="Upper bound of the random per-entry cost"
    )
    parser.add_argument(
        "--profile",
        action="store_true",
        help="Enable cProfile profiling"
    )
    parser.add_argument(
        "--debug",
        action="store_true",
        help="Enable debug logging (logs every eviction)"
    )

    args = parser.parse_args()

    setup_logging(debug=args.debug)

    print(f"recurve-cache Benchmark")
    print(f"=======================")
    print(f"Operations per test: {args.operations:,}")
    print(f"Key size: {args.key_size}")
    print(f"Max cost: {args.max_cost}")
    print()

    benchmark = Benchmark(
        operations=args.operations,
        key_size=args.key_size,
        max_cost=args.max_cost,
    )

    if args.profile:
        import cProfile
        import pstats

        profiler = cProfile.Profile()
        profiler.enable()
        results = benchmark.run_all()
        profiler.disable()

        print_results(results)

        print()
        print("Profiling Results (top 20):")
        print("-" * 70)
        stats = pstats.Stats(profiler)
        stats.sort_stats('cumulative')
        stats.print_stats(20)
    else:
        results = benchmark.run_all()
        print_results(results)


if __name__ == "__main__":
    main()
