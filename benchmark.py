#!/usr/bin/env python3
"""
Performance Script for the AVL Record Index

Tests:
1. Sequential insert throughput
2. Random insert throughput
3. Random search throughput and comparison counts
4. Value-range query performance
5. Delete throughput

Metrics:
- Operations per second (ops/sec)
- Latency (p50, p95, p99)
- Tree height against the AVL bound 1.44 * log2(n + 2)
"""

import math
import random
import statistics
import sys
import time
from typing import List

from avldb import IndexedDatabase, Record


class PerformanceTest:
    def __init__(self, seed: int = 0):
        self.rng = random.Random(seed)
        self.db = IndexedDatabase()

    @staticmethod
    def generate_key(i: int, prefix: str = "key") -> str:
        """Generate a key whose order matches i."""
        return f"{prefix}{i:08d}"

    @staticmethod
    def calculate_stats(latencies: List[int]) -> dict:
        """Calculate latency statistics (latencies in nanoseconds)."""
        if not latencies:
            return {}

        sorted_latencies = sorted(latencies)
        return {
            "mean_ms": statistics.mean(latencies) / 1_000_000,
            "median_ms": statistics.median(latencies) / 1_000_000,
            "p95_ms": sorted_latencies[int(len(sorted_latencies) * 0.95)] / 1_000_000,
            "p99_ms": sorted_latencies[int(len(sorted_latencies) * 0.99)] / 1_000_000,
        }

    @staticmethod
    def avl_height_bound(n: int) -> float:
        return 1.44 * math.log2(n + 2)

    def _timed(self, name: str, count: int, op) -> dict:
        print(f"\n{'='*60}")
        print(f"{name} Test: {count} operations")
        print(f"{'='*60}")

        latencies = []
        start_time = time.perf_counter()
        for i in range(count):
            op_start = time.perf_counter_ns()
            op(i)
            latencies.append(time.perf_counter_ns() - op_start)
        elapsed = time.perf_counter() - start_time

        results = {
            "test": name,
            "count": count,
            "elapsed_sec": elapsed,
            "ops_per_sec": count / elapsed if elapsed > 0 else 0.0,
            "latency": self.calculate_stats(latencies),
            "height": self.db.get_tree_height(),
            "records": len(self.db),
        }
        self.print_results(results)
        return results

    def test_sequential_insert(self, count: int) -> dict:
        self.db.clear_database()
        return self._timed(
            "Sequential Insert",
            count,
            lambda i: self.db.insert(Record(self.generate_key(i), i)),
        )

    def test_random_insert(self, count: int) -> dict:
        self.db.clear_database()
        order = list(range(count))
        self.rng.shuffle(order)
        return self._timed(
            "Random Insert",
            count,
            lambda i: self.db.insert(Record(self.generate_key(order[i]), order[i])),
        )

    def test_random_search(self, count: int, key_range: int) -> dict:
        comparisons = []

        def op(_):
            comparisons.append(
                self.db.get_search_comparisons(self.generate_key(self.rng.randrange(key_range)))
            )

        results = self._timed("Random Search", count, op)
        results["mean_comparisons"] = statistics.mean(comparisons)
        results["max_comparisons"] = max(comparisons)
        print(f"  Comparisons (mean/max): {results['mean_comparisons']:.2f}/{results['max_comparisons']}")
        return results

    def test_range_query(self, num_queries: int, range_size: int, key_range: int) -> dict:
        returned = []

        def op(_):
            start = self.rng.randrange(key_range)
            returned.append(len(self.db.range_query(start, start + range_size - 1)))

        results = self._timed("Range Query", num_queries, op)
        results["mean_results"] = statistics.mean(returned)
        print(f"  Mean records returned: {results['mean_results']:.1f}")
        return results

    def test_delete(self, count: int, key_range: int) -> dict:
        victims = self.rng.sample(range(key_range), count)
        return self._timed(
            "Delete",
            count,
            lambda i: self.db.delete_record(self.generate_key(victims[i]), victims[i]),
        )

    def print_results(self, results: dict):
        """Print test results in a formatted way."""
        print(f"\nResults:")
        print(f"  Operations: {results['count']}")
        print(f"  Elapsed: {results['elapsed_sec']:.2f}s")
        print(f"  Throughput: {results['ops_per_sec']:.2f} ops/sec")
        latency = results["latency"]
        if latency:
            print(
                f"  Latency (p50/p95/p99): {latency['median_ms']:.4f}/"
                f"{latency['p95_ms']:.4f}/{latency['p99_ms']:.4f} ms"
            )
        bound = self.avl_height_bound(results["records"])
        print(f"  Records: {results['records']}, height: {results['height']} (bound {bound:.2f})")
        if results["height"] > bound:
            print(f"  WARNING: height exceeds AVL bound")


def run_tests(size: int):
    test = PerformanceTest()
    all_results = [
        test.test_sequential_insert(size),
        test.test_random_insert(size),
        test.test_random_search(size, size),
        test.test_range_query(max(size // 10, 1), 100, size),
        test.test_delete(size // 2, size),
    ]

    print(f"\n{'#'*60}")
    print(f"# SUMMARY")
    print(f"{'#'*60}")
    for i, result in enumerate(all_results, 1):
        print(f"{i}. {result['test']}: {result['ops_per_sec']:.0f} ops/sec, height {result['height']}")


if __name__ == "__main__":
    if len(sys.argv) > 1 and sys.argv[1] == "quick":
        run_tests(10_000)
    else:
        run_tests(200_000)
