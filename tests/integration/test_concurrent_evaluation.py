"""Concurrent evaluation tests.

One frozen registry shared by many threads, no locking.
Results must equal the sequential results, on GIL and free-threaded builds.
"""

from __future__ import annotations

import sys
import threading
from concurrent.futures import ThreadPoolExecutor

from tagfilter.application.services.filterer import TaggedFilterer
from tagfilter.domain.model.enums import Matcher, Operator, Source
from tagfilter.domain.model.event import Event
from tagfilter.domain.model.filter import Filter
from tagfilter.domain.model.pattern import GlobPattern, RegexPattern, SetPattern
from tagfilter.domain.model.tags import ProcessTag, SourceTag
from tests.factories import make_filterer, source_filter

EVENTS: tuple[Event, ...] = tuple(
    Event.of(SourceTag(source), ProcessTag(pid)) for source in Source for pid in (1, 42, 100, 4242)
)


def _make_shared_filterer() -> TaggedFilterer:
    return make_filterer(
        Filter(on=Matcher.SOURCE, op=Operator.GLOB, pat=GlobPattern("*o*")),
        source_filter("time", negate=True),
        Filter(on=Matcher.PROCESS, op=Operator.REGEX, pat=RegexPattern("^4")),
        Filter(on=Matcher.PROCESS, op=Operator.IN_SET, pat=SetPattern.of("1"), negate=True),
    )


class TestConcurrentEvaluation:
    """Many threads, one filterer."""

    def test_matches_sequential(self) -> None:
        filterer = _make_shared_filterer()
        expected = [filterer.check_event(e) for e in EVENTS]

        with ThreadPoolExecutor(max_workers=8) as pool:
            runs = list(pool.map(lambda _: [filterer.check_event(e) for e in EVENTS], range(64)))

        assert all(run == expected for run in runs)

    def test_expected_decisions(self) -> None:
        """Spot-check the shared rules so the concurrent run compares real decisions."""
        filterer = _make_shared_filterer()
        assert filterer.check_event(Event.of(SourceTag(Source.KEYBOARD), ProcessTag(42))) is True
        assert filterer.check_event(Event.of(SourceTag(Source.TIME), ProcessTag(1))) is True
        assert filterer.check_event(Event.of(SourceTag(Source.INTERNAL), ProcessTag(42))) is False
        assert filterer.check_event(Event.of(SourceTag(Source.MOUSE), ProcessTag(100))) is False

    def test_barrier_start(self) -> None:
        """All threads start evaluating at once."""
        filterer = _make_shared_filterer()
        expected = [filterer.check_event(e) for e in EVENTS]
        n_threads = 8
        barrier = threading.Barrier(n_threads)
        results: list[list[bool]] = [[] for _ in range(n_threads)]

        def worker(index: int) -> None:
            barrier.wait()
            for _ in range(50):
                results[index] = [filterer.check_event(e) for e in EVENTS]

        threads = [threading.Thread(target=worker, args=(i,)) for i in range(n_threads)]
        for t in threads:
            t.start()
        for t in threads:
            t.join()

        assert all(r == expected for r in results)

    def test_switch_interval_stress(self) -> None:
        """Frequent thread switches do not change outcomes."""
        filterer = _make_shared_filterer()
        expected = [filterer.check_event(e) for e in EVENTS]
        old = sys.getswitchinterval()
        sys.setswitchinterval(1e-6)
        try:
            with ThreadPoolExecutor(max_workers=4) as pool:
                runs = list(pool.map(lambda _: [filterer.check_event(e) for e in EVENTS], range(16)))
        finally:
            sys.setswitchinterval(old)

        assert all(run == expected for run in runs)
