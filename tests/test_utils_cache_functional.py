from __future__ import annotations
import threading
import time
import pytest

from helpers_br.utils.cache import memoize, MemoryStore
from helpers_br.utils.functional import debounce, throttle, once, pipe, compose, retry, sleep

def test_memoize_caches_hashable_and_unhashable_args():
    calls = []

    @memoize
    def soma(*nums):
        calls.append(nums)
        return sum(nums)

    assert soma(1, 2) == 3 and soma(1, 2) == 3
    assert len(calls) == 1

    @memoize(maxsize=8)
    def total(items):
        calls.append(items)
        return sum(items)

    assert total([1, 2, 3]) == 6 and total([1, 2, 3]) == 6
    assert len(calls) == 2
    total.clear()
    total([1, 2, 3])
    assert len(calls) == 3

def test_memory_store():
    MemoryStore.set("token", "abc")
    assert MemoryStore.get("token") == "abc"
    assert MemoryStore.get_all() == {"token": "abc"}
    MemoryStore.remove("token")
    assert MemoryStore.get("token") is None
    MemoryStore.set("x", 1)
    MemoryStore.clear()
    assert MemoryStore.get_all() == {}

def test_debounce_runs_only_last_call():
    done = threading.Event()
    got = []

    def fn(v):
        got.append(v)
        done.set()

    d = debounce(fn, 0.05)
    for i in range(5):
        d(i)
    assert done.wait(2)
    time.sleep(0.1)
    assert got == [4]

def test_debounce_cancel():
    got = []
    d = debounce(got.append, 0.05)
    d(1)
    d.cancel()
    time.sleep(0.15)
    assert got == []

def test_throttle_leading_and_trailing():
    got = []

    def fn(v):
        got.append(v)
        return v

    t = throttle(fn, 0.1)
    assert t(1) == 1
    assert t(2) == 1  # dentro da janela: resultado anterior
    assert t(3) == 1
    time.sleep(0.3)
    assert got == [1, 3]

def test_once():
    calls = []
    init = once(lambda: calls.append(1) or len(calls))
    assert init() == 1 and init() == 1
    assert calls == [1]

def test_pipe_and_compose():
    inc = lambda x: x + 1
    dbl = lambda x: x * 2
    assert pipe(inc, dbl)(3) == 8
    assert compose(inc, dbl)(3) == 7
    assert pipe(inc)(1) == 2
    with pytest.raises(ValueError):
        pipe()
    with pytest.raises(ValueError):
        compose()

def test_retry_succeeds_after_failures():
    attempts = []

    def flaky():
        attempts.append(1)
        if len(attempts) < 3:
            raise RuntimeError("falhou")
        return "ok"

    seen = []
    assert retry(flaky, retries=3, delay=0, on_retry=lambda e, n: seen.append(n)) == "ok"
    assert seen == [1, 2]

def test_retry_propagates_last_error():
    def boom():
        raise KeyError("x")

    with pytest.raises(KeyError):
        retry(boom, retries=2, delay=0)
    with pytest.raises(ValueError):
        retry(boom, retries=0)

def test_sleep_rejects_negative():
    with pytest.raises(ValueError):
        sleep(-1)
    sleep(0)
