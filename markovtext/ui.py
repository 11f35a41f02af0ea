#!/usr/bin/env python3
"""
Terminal UI
===========
Rich-based rendering for the CLI: logging handler, model statistics and
benchmark reports.
"""

import logging
from typing import Optional

from rich import box
from rich.console import Console
from rich.logging import RichHandler
from rich.table import Table

from .model import ModelStats
from .profiler import Profiler
from .settings import get_setting


def setup_logging(level: str = "WARNING", console: Optional[Console] = None):
    """Route log records through Rich on stderr."""
    console = console or Console(stderr=True)
    logging.basicConfig(
        level=getattr(logging, str(level).upper(), logging.WARNING),
        format=get_setting("logging.format", "%(message)s"),
        datefmt="[%X]",
        handlers=[RichHandler(console=console, show_path=False)],
        force=True,
    )


def stats_table(stats: ModelStats) -> Table:
    """Build a two-column table of model statistics."""
    table = Table(title="Markov Model", box=box.SIMPLE_HEAVY, show_header=False)
    table.add_column("Metric", style="bold")
    table.add_column("Value", justify="right")

    table.add_row("Order", str(stats.order))
    if stats.tokens:
        table.add_row("Tokens", f"{stats.tokens:,}")
    table.add_row("Starter phrases", f"{stats.starter_phrases:,}")
    table.add_row("Unique starters", f"{stats.unique_starter_phrases:,}")
    table.add_row("Transition keys", f"{stats.transition_keys:,}")
    table.add_row("Total transitions", f"{stats.total_transitions:,}")
    table.add_row("Branching phrases", f"{stats.branching_phrases:,}")
    return table


def bench_table(profiler: Profiler) -> Table:
    """Build a per-stage timing table, slowest stage first."""
    profiler.stop()
    total = profiler.total_time

    table = Table(title=f"Benchmark ({total:.3f}s total)", box=box.SIMPLE_HEAVY)
    table.add_column("Stage", style="bold")
    table.add_column("Total", justify="right")
    table.add_column("%", justify="right")
    table.add_column("Calls", justify="right")
    table.add_column("Mean", justify="right")
    table.add_column("Median", justify="right")
    table.add_column("Per-item", justify="right")

    for name, stats in sorted(profiler.stages.items(), key=lambda x: -x[1].total):
        pct = (stats.total / total) * 100 if total > 0 else 0
        table.add_row(
            name,
            f"{stats.total:.4f}s",
            f"{pct:.1f}",
            str(stats.count),
            f"{stats.mean * 1_000_000:.1f}us",
            f"{stats.median * 1_000_000:.1f}us",
            f"{stats.per_item * 1_000_000:.1f}us" if stats.items else "-",
        )
    return table
