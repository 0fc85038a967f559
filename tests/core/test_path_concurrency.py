"""Concurrent first access to a Path's component cache."""

from __future__ import annotations

import threading

from lexpath.core.path import Path
from lexpath.core.platform import Platform


def test_concurrent_first_access_sees_one_tuple():
    raw = "\\\\?\\UNC\\server\\share\\" + "\\".join(f"d{i}" for i in range(200))
    path = Path(raw, Platform.WINDOWS)
    workers = 16
    barrier = threading.Barrier(workers)
    results = []
    lock = threading.Lock()

    def worker():
        barrier.wait()
        components = path.get_components()
        with lock:
            results.append(components)

    threads = [threading.Thread(target=worker) for _ in range(workers)]
    for t in threads:
        t.start()
    for t in threads:
        t.join()

    assert len(results) == workers
    first = results[0]
    assert all(r is first for r in results)
    assert len(first) == 202


def test_shared_paths_across_threads_compare_equal():
    paths = [Path("a/b/c", Platform.UNIX) for _ in range(8)]
    errors = []

    def worker(p: Path):
        try:
            assert p.join("d") == Path("a/b/c/d", Platform.UNIX)
        except AssertionError as exc:  # pragma: no cover - reported below
            errors.append(exc)

    threads = [threading.Thread(target=worker, args=(p,)) for p in paths]
    for t in threads:
        t.start()
    for t in threads:
        t.join()
    assert errors == []
