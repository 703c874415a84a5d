#!/usr/bin/env python3
"""Per-decision overhead benchmark.

Measures the hot-path cost of:
  1. decide() for rate 1 (short circuit, no hashing)
  2. decide() for a hashing rate (SHA-1 + one comparison)
  3. should_sample() end to end (int id formatting + SamplingResult)

Target: a few microseconds per span start at most.

Usage:
    uv run python benchmarks/bench_overhead.py
"""

from __future__ import annotations

import time

from honeycomb_sampler import DeterministicSampler

_TRACE_IDS = [f"{i:032x}" for i in range(1024)]


def bench_decide(rate: int, iterations: int = 500_000) -> float:
    """Benchmark: decide() on pre-formatted string ids."""
    sampler = DeterministicSampler(rate)
    ids = _TRACE_IDS
    mask = len(ids) - 1

    # Warmup
    for i in range(5000):
        sampler.decide(ids[i & mask])

    start = time.perf_counter_ns()
    for i in range(iterations):
        sampler.decide(ids[i & mask])
    elapsed = time.perf_counter_ns() - start

    return elapsed / iterations


def bench_should_sample(rate: int, iterations: int = 200_000) -> float:
    """Benchmark: should_sample() with SDK-style integer trace ids."""
    sampler = DeterministicSampler(rate)
    ids = [int(tid, 16) for tid in _TRACE_IDS]
    mask = len(ids) - 1

    # Warmup
    for i in range(1000):
        sampler.should_sample(None, ids[i & mask], "bench")

    start = time.perf_counter_ns()
    for i in range(iterations):
        sampler.should_sample(None, ids[i & mask], "bench")
    elapsed = time.perf_counter_ns() - start

    return elapsed / iterations


def main() -> None:
    print("=" * 60)
    print("Deterministic Sampler Overhead Benchmark")
    print("=" * 60)

    results: list[tuple[str, float, str]] = []

    # 1. Short circuit
    ns = bench_decide(1)
    target = "< 200ns"
    status = "PASS" if ns < 200 else "WARN" if ns < 1000 else "FAIL"
    results.append(("decide (rate=1, no hashing)", ns, f"{status} (target {target})"))

    # 2. Hashing path
    ns = bench_decide(10)
    target = "< 1μs"
    status = "PASS" if ns < 1000 else "WARN" if ns < 2000 else "FAIL"
    results.append(("decide (rate=10, SHA-1)", ns, f"{status} (target {target})"))

    # 3. Full sampler interface
    ns = bench_should_sample(10)
    target = "< 5μs"
    status = "PASS" if ns < 5000 else "WARN" if ns < 10000 else "FAIL"
    results.append(("should_sample (rate=10)", ns, f"{status} (target {target})"))

    print()
    for name, ns_val, note in results:
        if ns_val >= 1000:
            display = f"{ns_val / 1000:.2f}μs"
        else:
            display = f"{ns_val:.0f}ns"
        print(f"  {name:40s}  {display:>10s}   {note}")

    print()
    all_pass = all("PASS" in r[2] or "WARN" in r[2] for r in results)
    if all_pass:
        print("All benchmarks within acceptable range.")
    else:
        print("WARNING: Some benchmarks exceeded target. Review above.")


if __name__ == "__main__":
    main()
