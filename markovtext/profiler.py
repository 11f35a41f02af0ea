#!/usr/bin/env python3
"""
Profiler
========
Lightweight stage timing for benchmarking model builds and generation.

Usage:
    profiler = Profiler(enabled=True)
    profiler.start()

    with profiler.stage("build"):
        model = build_model(corpus)

    for _ in range(100):
        with profiler.stage("generate"):
            generator.generate(rng)

    profiler.to_dict()
"""

import statistics
import time
from collections import defaultdict
from contextlib import contextmanager
from dataclasses import dataclass, field
from typing import Optional


@dataclass
class StageStats:
    """Timings recorded under one stage name."""
    times: list = field(default_factory=list)
    items: int = 0

    @property
    def total(self) -> float:
        return sum(self.times)

    @property
    def count(self) -> int:
        return len(self.times)

    @property
    def mean(self) -> float:
        return self.total / self.count if self.times else 0

    @property
    def median(self) -> float:
        return statistics.median(self.times) if self.times else 0

    @property
    def per_item(self) -> float:
        """Seconds per processed item."""
        return self.total / self.items if self.items else 0

    def to_dict(self) -> dict:
        return {
            'total_seconds': self.total,
            'count': self.count,
            'items': self.items,
            'mean_us': self.mean * 1_000_000,
            'median_us': self.median * 1_000_000,
            'per_item_us': self.per_item * 1_000_000,
        }


class Profiler:
    """Collects wall-clock timings per named stage."""

    def __init__(self, enabled: bool = True):
        self.enabled = enabled
        self.stages: dict[str, StageStats] = defaultdict(StageStats)
        self.start_time: Optional[float] = None
        self.end_time: Optional[float] = None

    def start(self):
        if self.enabled:
            self.start_time = time.perf_counter()
            self.end_time = None

    def stop(self):
        if self.enabled and self.start_time is not None and self.end_time is None:
            self.end_time = time.perf_counter()

    @property
    def total_time(self) -> float:
        if not self.start_time:
            return 0
        end = self.end_time or time.perf_counter()
        return end - self.start_time

    @contextmanager
    def stage(self, name: str, items: int = 1):
        """Time the enclosed block under ``name``."""
        if not self.enabled:
            yield
            return

        start = time.perf_counter()
        try:
            yield
        finally:
            self.record(name, time.perf_counter() - start, items)

    def record(self, name: str, elapsed: float, items: int = 1):
        """Manually record a timing."""
        if not self.enabled:
            return
        self.stages[name].times.append(elapsed)
        self.stages[name].items += items

    def to_dict(self) -> dict:
        self.stop()
        return {
            'total_seconds': self.total_time,
            'stages': {name: stats.to_dict() for name, stats in self.stages.items()},
        }
