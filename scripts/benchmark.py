#!/usr/bin/env python3
"""
selector_subscribe Performance Benchmarks

Measures how quickly a binding re-evaluates its selectors and fires handlers as
the store changes, and renders the results with rich.

Usage:
    python scripts/benchmark.py                        # Default sizes
    python scripts/benchmark.py --subscribers 500      # More selectors per binding
    python scripts/benchmark.py --changes 1000         # More store notifications
    python scripts/benchmark.py --config               # Show configuration

Configuration:
    Adjust the constants at the top of the file to change the default sizes.
"""

import argparse
import time
from dataclasses import dataclass
from typing import Callable, List

from rich.console import Console
from rich.panel import Panel
from rich.table import Table, box

from selector_subscribe import SelectorSubscriber, collect_subscribers, create_store

SUBSCRIBERS = 100
CHANGES = 100


@dataclass
class BenchmarkResult:
    """Timing for one benchmark scenario."""

    name: str
    notifications: int
    selector_calls: int
    handler_calls: int
    elapsed: float

    @property
    def selectors_per_second(self) -> float:
        return self.selector_calls / self.elapsed if self.elapsed else float("inf")


def _increment(state, action):
    return state + 1


def _run(name: str, make_selector: Callable[[int], Callable], subscribers: int, changes: int):
    handler_calls = 0

    def on_change(new, old):
        nonlocal handler_calls
        handler_calls += 1

    store = create_store(_increment, 0)
    collect_subscribers(
        *(SelectorSubscriber(make_selector(i), on_change) for i in range(1, subscribers + 1))
    )(store)

    start_time = time.perf_counter()
    for _ in range(changes):
        store.dispatch("increment")
    elapsed = time.perf_counter() - start_time

    return BenchmarkResult(
        name=name,
        notifications=changes,
        selector_calls=subscribers * changes,
        handler_calls=handler_calls,
        elapsed=elapsed,
    )


def run_benchmarks(subscribers: int, changes: int) -> List[BenchmarkResult]:
    """Run every scenario with the given sizes."""
    return [
        # Every selector yields a new value on every change
        _run("All changing", lambda i: (lambda x: x * i), subscribers, changes),
        # No selector ever yields a new value
        _run("None changing", lambda i: (lambda x: i), subscribers, changes),
        # Half of the selectors flip on each change
        _run(
            "Half changing",
            lambda i: (lambda x: x % 2) if i % 2 else (lambda x: i),
            subscribers,
            changes,
        ),
    ]


def render(results: List[BenchmarkResult], console: Console) -> None:
    table = Table(title="Selector Subscription Throughput", box=box.ROUNDED)
    table.add_column("Scenario", style="cyan")
    table.add_column("Notifications", justify="right")
    table.add_column("Selector calls", justify="right")
    table.add_column("Handler calls", justify="right")
    table.add_column("Time (ms)", justify="right")
    table.add_column("Selectors/sec", justify="right", style="green")

    for result in results:
        table.add_row(
            result.name,
            f"{result.notifications:,}",
            f"{result.selector_calls:,}",
            f"{result.handler_calls:,}",
            f"{result.elapsed * 1000:.2f}",
            f"{result.selectors_per_second:,.0f}",
        )

    console.print(table)


def print_config(subscribers: int, changes: int) -> None:
    """Print the current benchmark configuration."""
    print("selector_subscribe Benchmark Configuration:")
    print(f"  SUBSCRIBERS: {subscribers}")
    print(f"  CHANGES: {changes}")


def main():
    """Main entry point for the benchmark script."""
    parser = argparse.ArgumentParser(description="selector_subscribe Benchmarks")
    parser.add_argument(
        "--subscribers",
        type=int,
        default=SUBSCRIBERS,
        help="Number of subscribers in the binding",
    )
    parser.add_argument(
        "--changes", type=int, default=CHANGES, help="Number of store notifications"
    )
    parser.add_argument(
        "--config", action="store_true", help="Show current benchmark configuration"
    )
    args = parser.parse_args()

    if args.config:
        print_config(args.subscribers, args.changes)
        return

    console = Console()
    console.print(
        Panel.fit(
            f"{args.subscribers} subscribers x {args.changes} changes",
            title="selector_subscribe",
        )
    )
    render(run_benchmarks(args.subscribers, args.changes), console)


if __name__ == "__main__":
    main()
