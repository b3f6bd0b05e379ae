from __future__ import annotations

from concurrent.futures import ThreadPoolExecutor
from typing import Any, Callable, Mapping


def run_concurrently(calls: Mapping[str, Callable[[], Any]], *, max_workers: int | None = None) -> dict[str, Any]:
    """Run independent loads in a thread pool and wait for all of them.

    Results come back keyed like ``calls``. An exception raised by any call
    propagates after every call has finished.
    """

    if not calls:
        return {}
    workers = max_workers or len(calls)
    with ThreadPoolExecutor(max_workers=workers, thread_name_prefix="school-records-load") as pool:
        futures = {name: pool.submit(fn) for name, fn in calls.items()}
    return {name: future.result() for name, future in futures.items()}
