"""
Per-pass secret cache.

Maps backend path to resolved value for the lifetime of one resolution pass.
There is no TTL and no eviction; a new pass gets a new cache.

Concurrent misses for the same path are coalesced: the first caller loads,
the rest wait for its result. A failed load is never stored, so the next
request for that path performs a fresh fetch.
"""

import threading
from concurrent.futures import Future
from typing import Callable, Optional


class SecretCache:
    """Thread-safe path -> value mapping with single-flight loading."""

    def __init__(self):
        self._values: dict[str, str] = {}
        self._inflight: dict[str, Future] = {}
        self._lock = threading.Lock()

    def get(self, path: str) -> Optional[str]:
        with self._lock:
            return self._values.get(path)

    def put(self, path: str, value: str) -> None:
        with self._lock:
            self._values[path] = value

    def get_or_load(self, path: str, loader: Callable[[str], str]) -> tuple[str, bool]:
        """
        Return the cached value for path, loading it at most once at a time.

        Args:
            path: Backend path (cache key)
            loader: Called with path on a miss; its exception propagates
                to every caller waiting on the same load

        Returns:
            (value, hit) where hit is True if no load was performed by this call
        """
        with self._lock:
            if path in self._values:
                return self._values[path], True
            future = self._inflight.get(path)
            owner = future is None
            if owner:
                future = Future()
                self._inflight[path] = future

        if not owner:
            return future.result(), True

        try:
            value = loader(path)
        except BaseException as exc:
            with self._lock:
                del self._inflight[path]
            future.set_exception(exc)
            raise

        with self._lock:
            self._values[path] = value
            del self._inflight[path]
        future.set_result(value)
        return value, False

    def keys(self) -> list[str]:
        with self._lock:
            return list(self._values)

    def clear(self) -> None:
        with self._lock:
            self._values.clear()

    def __contains__(self, path: str) -> bool:
        with self._lock:
            return path in self._values

    def __len__(self) -> int:
        with self._lock:
            return len(self._values)
