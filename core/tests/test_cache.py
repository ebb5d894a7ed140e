import threading
import time
from unittest.mock import MagicMock

import pytest

from core.aggregators.utils import cache


class TestTryGet:
    def test_computes_on_miss_and_reuses(self):
        producer = MagicMock(return_value={"value": 1})

        assert cache.try_get("test:1", producer) == {"value": 1}
        assert cache.try_get("test:1", producer) == {"value": 1}
        producer.assert_called_once()

    def test_none_is_cached(self):
        producer = MagicMock(return_value=None)

        assert cache.try_get("test:none", producer) is None
        assert cache.try_get("test:none", producer) is None
        producer.assert_called_once()

    def test_keys_are_independent(self):
        assert cache.try_get("test:a", lambda: "a") == "a"
        assert cache.try_get("test:b", lambda: "b") == "b"

    def test_clear(self):
        cache.try_get("test:clear", lambda: "old")
        cache.clear()

        assert cache.try_get("test:clear", lambda: "new") == "new"

    def test_concurrent_callers_share_one_computation(self):
        calls = []

        def slow_producer():
            calls.append(1)
            time.sleep(0.05)
            return "computed"

        results = []
        threads = [
            threading.Thread(target=lambda: results.append(cache.try_get("test:slow", slow_producer)))
            for _ in range(8)
        ]
        for thread in threads:
            thread.start()
        for thread in threads:
            thread.join()

        assert results == ["computed"] * 8
        assert len(calls) == 1

    def test_producer_error_is_not_cached(self):
        def failing():
            raise RuntimeError("boom")

        try:
            cache.try_get("test:error", failing)
        except RuntimeError:
            pass

        assert cache.try_get("test:error", lambda: "recovered") == "recovered"

    def test_key_locks_are_released_after_use(self):
        for i in range(500):
            cache.try_get(f"test:many:{i}", lambda: i)

        assert cache._key_locks == {}

    def test_key_locks_are_released_after_error_and_contention(self):
        def failing():
            raise RuntimeError("boom")

        with pytest.raises(RuntimeError):
            cache.try_get("test:locks:error", failing)

        def slow_producer():
            time.sleep(0.05)
            return "computed"

        threads = [
            threading.Thread(target=cache.try_get, args=("test:locks:shared", slow_producer))
            for _ in range(4)
        ]
        for thread in threads:
            thread.start()
        for thread in threads:
            thread.join()

        assert cache._key_locks == {}
