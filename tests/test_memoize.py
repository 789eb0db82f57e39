"""Tests for the compute-once cell."""
import threading
from concurrent.futures import ThreadPoolExecutor

import pytest

from mvnrepository.application.memoize import Memoized


def test_computes_once():
    """The computation runs on first call only."""
    calls = []
    cell = Memoized(lambda: calls.append(1) or len(calls))

    assert not cell.is_computed
    assert cell() == 1
    assert cell() == 1
    assert cell.is_computed
    assert calls == [1]


def test_failure_is_not_cached():
    """A raising computation is retried on the next call."""
    attempts = []

    def compute():
        attempts.append(1)
        if len(attempts) == 1:
            raise RuntimeError("boom")
        return "ok"

    cell = Memoized(compute)

    with pytest.raises(RuntimeError):
        cell()
    assert not cell.is_computed
    assert cell() == "ok"
    assert len(attempts) == 2


def test_concurrent_callers_share_one_computation():
    """Callers racing on the first call all get the single result."""
    started = threading.Event()
    release = threading.Event()
    calls = []

    def compute():
        calls.append(1)
        started.set()
        release.wait(timeout=5)
        return object()

    cell = Memoized(compute)

    with ThreadPoolExecutor(max_workers=4) as executor:
        futures = [executor.submit(cell) for _ in range(4)]
        started.wait(timeout=5)
        release.set()
        results = [future.result(timeout=5) for future in futures]

    assert len(calls) == 1
    assert all(result is results[0] for result in results)
