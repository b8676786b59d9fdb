import threading
import time
from concurrent.futures import ThreadPoolExecutor
from unittest.mock import Mock

import pytest

from services.cache import SecretCache


def test_get_or_load_loads_once():
    cache = SecretCache()
    loader = Mock(return_value="value")

    assert cache.get_or_load("a", loader) == ("value", False)
    assert cache.get_or_load("a", loader) == ("value", True)
    loader.assert_called_once_with("a")
    assert "a" in cache
    assert len(cache) == 1


def test_failed_load_is_not_stored():
    cache = SecretCache()
    loader = Mock(side_effect=[IOError("down"), "value"])

    with pytest.raises(IOError):
        cache.get_or_load("a", loader)

    assert "a" not in cache
    assert cache.get_or_load("a", loader) == ("value", False)
    assert loader.call_count == 2


def test_concurrent_loads_of_same_key_are_coalesced():
    cache = SecretCache()
    calls = []
    start = threading.Barrier(10)

    def loader(key):
        calls.append(key)
        time.sleep(0.05)
        return "value"

    def load():
        start.wait()
        return cache.get_or_load("a", loader)[0]

    with ThreadPoolExecutor(max_workers=10) as pool:
        values = list(pool.map(lambda _: load(), range(10)))

    assert values == ["value"] * 10
    assert calls == ["a"]


def test_waiters_see_the_loader_failure():
    cache = SecretCache()
    started = threading.Event()
    release = threading.Event()

    def loader(key):
        started.set()
        release.wait(timeout=5)
        raise IOError("backend down")

    with ThreadPoolExecutor(max_workers=2) as pool:
        first = pool.submit(cache.get_or_load, "a", loader)
        started.wait(timeout=5)
        second = pool.submit(cache.get_or_load, "a", Mock(return_value="unused"))
        time.sleep(0.05)
        release.set()

        with pytest.raises(IOError):
            first.result()
        with pytest.raises(IOError):
            second.result()

    assert "a" not in cache


def test_distinct_keys_load_independently():
    cache = SecretCache()
    cache.put("a", "1")

    assert cache.get("a") == "1"
    assert cache.get("b") is None
    assert cache.get_or_load("b", lambda key: "2") == ("2", False)
    assert sorted(cache.keys()) == ["a", "b"]

    cache.clear()
    assert len(cache) == 0
