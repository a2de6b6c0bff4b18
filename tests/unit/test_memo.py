import threading
from concurrent.futures import ThreadPoolExecutor

import pytest

from pymud.expr.expression import take
from pymud.expr.memo import ParticularizationCache
from pymud.fields.base import FieldFactory
from pymud.fields.double import DOUBLE, DoubleField
from pymud.units.universe import METER


class CountingFactory(FieldFactory):
    name = "counting"

    def __init__(self, failures: int = 0) -> None:
        self.calls = 0
        self.failures = failures
        self._lock = threading.Lock()

    def _count(self) -> None:
        with self._lock:
            self.calls += 1
            if self.failures:
                self.failures -= 1
                raise RuntimeError("transient failure")

    def of_int(self, value: int) -> DoubleField:
        self._count()
        return DoubleField(float(value))

    def of_string(self, value: str) -> DoubleField:
        self._count()
        return DoubleField(float(value))


def test_scalar_is_evaluated_once_per_factory() -> None:
    factory = CountingFactory()
    product = take(3).multiply(4)

    first = product.using(factory)
    second = product.using(factory)

    assert first is second
    assert first.value == 12.0
    assert factory.calls == 2


def test_factories_do_not_share_results() -> None:
    one, other = CountingFactory(), CountingFactory()
    value = take("2.5").add(1)

    value.using(one)
    value.using(other)

    assert one.calls == 2
    assert other.calls == 2


def test_shared_subexpressions_reuse_their_cache() -> None:
    factory = CountingFactory()
    shared = take("1.5").multiply(2)
    left = shared.add(shared)

    assert left.using(factory).value == 6.0
    assert factory.calls == 2


def test_expression_is_evaluated_once() -> None:
    factory = CountingFactory()
    length = take(7, METER)

    assert length.using(factory) is length.using(factory)
    assert factory.calls == 1


def test_failed_computation_is_retried() -> None:
    factory = CountingFactory(failures=1)
    value = take(5).negate()

    with pytest.raises(RuntimeError):
        value.using(factory)

    assert value.using(factory).value == -5.0


def test_concurrent_callers_compute_once() -> None:
    factory = CountingFactory()
    value = take(6).divide(4).multiply(10)

    with ThreadPoolExecutor(max_workers=8) as pool:
        results = list(pool.map(lambda _: value.using(factory), range(64)))

    assert all(r is results[0] for r in results)
    assert results[0].value == 15.0
    assert factory.calls == 3


def test_cache_bookkeeping() -> None:
    cache: ParticularizationCache[int] = ParticularizationCache()

    assert not cache.is_cached(DOUBLE)
    assert cache.get_or_compute(DOUBLE, lambda: 42) == 42
    assert cache.get_or_compute(DOUBLE, lambda: 0) == 42
    assert cache.is_cached(DOUBLE)
    assert len(cache) == 1
