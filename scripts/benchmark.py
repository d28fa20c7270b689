#!/usr/bin/env python3
"""Benchmark script for tagfilter performance testing.

Outputs results in JSON format compatible with github-action-benchmark.
"""

from __future__ import annotations

import argparse
import json
import time
from pathlib import Path


def benchmark_import_time() -> float:
    """Measure import time of tagfilter package."""
    start = time.perf_counter()
    import tagfilter  # noqa: F401

    return time.perf_counter() - start


def benchmark_filter_construction() -> float:
    """Measure creation time of filters, including pattern compilation."""
    from tagfilter.domain.model.enums import Matcher, Operator
    from tagfilter.domain.model.filter import Filter
    from tagfilter.domain.model.pattern import GlobPattern, RegexPattern

    start = time.perf_counter()
    for i in range(10000):
        Filter(on=Matcher.SOURCE, op=Operator.REGEX, pat=RegexPattern(f"^src{i}"))
        Filter(on=Matcher.FILE_EVENT_KIND, op=Operator.GLOB, pat=GlobPattern(f"Create{i}*"))
    return time.perf_counter() - start


def benchmark_check_event() -> float:
    """Measure check_event over a mixed registry."""
    from tagfilter.application.services.filterer import TaggedFilterer
    from tagfilter.domain.model.enums import FileEventKind, Matcher, Operator, Source
    from tagfilter.domain.model.event import Event
    from tagfilter.domain.model.filter import Filter
    from tagfilter.domain.model.pattern import ExactPattern, GlobPattern, RegexPattern, SetPattern
    from tagfilter.domain.model.registry import FilterRegistry
    from tagfilter.domain.model.tags import FileEventKindTag, ProcessTag, SourceTag

    registry = FilterRegistry.from_filters(
        [
            Filter(on=Matcher.SOURCE, op=Operator.IN_SET, pat=SetPattern.of("filesystem", "keyboard")),
            Filter(on=Matcher.SOURCE, op=Operator.EQUAL, pat=ExactPattern("time"), negate=True),
            Filter(on=Matcher.FILE_EVENT_KIND, op=Operator.GLOB, pat=GlobPattern("Modify*")),
            Filter(on=Matcher.PROCESS, op=Operator.REGEX, pat=RegexPattern(r"^\d{3,}$")),
        ]
    )
    filterer = TaggedFilterer(registry)
    event = Event.of(
        FileEventKindTag(FileEventKind.MODIFY, "Data"),
        SourceTag(Source.FILESYSTEM),
        ProcessTag(1234),
    )

    start = time.perf_counter()
    for _ in range(100000):
        filterer.check_event(event)
    return time.perf_counter() - start


def main() -> None:
    """Run benchmarks and output results."""
    parser = argparse.ArgumentParser(description="Run tagfilter benchmarks")
    parser.add_argument(
        "--output",
        type=Path,
        default=Path("benchmark-results.json"),
        help="Output file for benchmark results",
    )
    args = parser.parse_args()

    results = [
        {
            "name": "Import Time",
            "unit": "seconds",
            "value": benchmark_import_time(),
        },
        {
            "name": "Filter Construction (10k iterations)",
            "unit": "seconds",
            "value": benchmark_filter_construction(),
        },
        {
            "name": "check_event (100k iterations)",
            "unit": "seconds",
            "value": benchmark_check_event(),
        },
    ]

    # Write results
    args.output.write_text(json.dumps(results, indent=2))
    print(f"Benchmark results written to {args.output}")
    for r in results:
        print(f"  {r['name']}: {r['value']:.4f} {r['unit']}")


if __name__ == "__main__":
    main()
