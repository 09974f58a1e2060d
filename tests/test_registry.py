import threading

import pytest

from metricskit.metrics import AverageMetric, CountMetric
from metricskit.registry import Registry, get_metrics, register_metric


@pytest.fixture
def shared():
    registry = Registry.instance()
    registry.clear()
    yield registry
    registry.clear()


def test_instance_is_shared(shared):
    metric = Registry.instance().register(CountMetric, "shared_one")
    assert [m.name for m in Registry.instance().metrics] == ["shared_one"]
    assert get_metrics() == [metric]


def test_registry_registration(shared):
    count = shared.register(CountMetric, "reg_count")
    count.record(10)

    avg = shared.register(AverageMetric, "reg_avg")
    avg.record(5.0)
    avg.record(15.0)

    metrics = shared.metrics
    assert len(metrics) == 2
    assert metrics[0].name == "reg_count"
    assert metrics[1].name == "reg_avg"

    assert count.aggregate_and_reset() == "10"
    assert float(avg.aggregate_and_reset()) == 10.0


def test_module_helpers_use_shared_registry(shared):
    metric = register_metric(CountMetric, "helper")
    assert get_metrics() == [metric]
    assert shared.metrics == [metric]


def test_register_passes_keyword_arguments():
    registry = Registry()
    metric = registry.register(AverageMetric, "ints", value_type=int)
    metric.record(3)
    metric.record(4)
    assert metric.aggregate_and_reset() == "3"


def test_separate_registry_is_independent(shared):
    local = Registry()
    local.register(CountMetric, "local")
    assert len(local) == 1
    assert len(shared) == 0


def test_clear_empties_registry():
    registry = Registry()
    registry.register(CountMetric, "a")
    registry.register(CountMetric, "b")
    registry.clear()
    assert list(registry) == []


def test_metrics_is_a_snapshot():
    registry = Registry()
    registry.register(CountMetric, "a")
    snapshot = registry.metrics
    snapshot.clear()
    assert [m.name for m in registry] == ["a"]


def test_concurrent_registration():
    registry = Registry()
    threads_count, per_thread = 8, 200

    def work(i):
        for j in range(per_thread):
            registry.register(CountMetric, f"m_{i}_{j}")

    threads = [threading.Thread(target=work, args=(i,)) for i in range(threads_count)]
    for t in threads:
        t.start()
    for t in threads:
        t.join()

    names = {m.name for m in registry}
    assert len(registry) == threads_count * per_thread
    assert len(names) == threads_count * per_thread