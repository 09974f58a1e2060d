# metricskit

Small, thread-safe metrics for a running Python process. Threads record
values into named metrics; a background writer wakes up at a fixed interval,
aggregates every registered metric (which also resets it) and appends one
line per tick to a log file.

The package root exports nothing; import from the submodules
`metricskit.metrics`, `metricskit.registry`, `metricskit.writer`,
`metricskit.buffers`, `metricskit.intrusive_list` and `metricskit.examples`.

## Metrics

`metricskit.metrics` provides:

- `Metric`, the abstract base: every metric has a `name` and an
  `aggregate_and_reset()` method that returns the aggregate of the values
  recorded since the last call, as a string, and forgets them.
- `UnorderedMetric` and `OrderedMetric`, bases for your own metrics. Both
  have `record(value)` and a `buffer` property. The unordered base keeps
  values in a `ConcurrentStack`; the ordered base keeps them in a
  `ConcurrentQueue`, so they come back in the order they were recorded.
- `CountMetric` reports the sum of the recorded values (`"0"` when none).
- `AverageMetric` reports the mean of the recorded values, or zero when
  none were recorded. Its `value_type` argument defaults to `float`; with
  `value_type=int` the mean is an integer truncated toward zero.

Floats are rendered with six decimals, integers as plain numbers.

```python
from metricskit.metrics import AverageMetric, CountMetric

requests = CountMetric("HTTP requests")
requests.record(3)
requests.record(4)
print(requests.aggregate_and_reset())  # 7
print(requests.aggregate_and_reset())  # 0

cpu = AverageMetric("CPU")
cpu.record(1.0)
cpu.record(2.0)
print(cpu.aggregate_and_reset())  # 1.500000
```

## Buffers

`metricskit.buffers` holds the two unbounded buffers the metrics use:
`ConcurrentQueue` (FIFO) and `ConcurrentStack` (LIFO). Each has `push(value)`,
`try_pop()`, which returns `None` when empty, and `drain()`, a generator that
pops values until the buffer is empty.

## The registry

`metricskit.registry.Registry` keeps metrics in registration order;
registration is safe from several threads. `Registry.instance()` always
returns the same shared registry, and separate registries can be created
with `Registry()`.

```python
from metricskit.metrics import AverageMetric, CountMetric
from metricskit.registry import Registry, get_metrics, register_metric

cpu = register_metric(AverageMetric, "CPU1")
rps = register_metric(CountMetric, "HTTP requests RPS")

print([metric.name for metric in get_metrics()])  # ['CPU1', 'HTTP requests RPS']

Registry.instance().clear()
```

`register(metric_type, *args, **kwargs)` builds the metric and returns it;
the `metrics` property gives a snapshot list; `len()` and iteration work on
a registry; `clear()` forgets every registered metric.

## Writing to a file

`metricskit.writer.MetricsWriter(path, interval=1.0, registry=None)` opens
`path` for appending and reports the metrics of `registry` (the shared one
by default) every `interval` seconds. A non-positive interval raises
`ValueError`. It runs in its own thread between `start()` and `stop()`,
both of which do nothing when called twice; `close()` stops it and closes
the file. Used as a context manager it starts on entry and closes on exit:

```python
from metricskit.writer import MetricsWriter

with MetricsWriter("metrics.log", interval=0.5):
    ...  # record values from any number of threads
```

Each line holds the local time with milliseconds, followed by the quoted
name and aggregated value of every registered metric:

```
2024-05-01 12:00:00.123 "CPU1" 1.012345 "HTTP requests RPS" 412
```

`write_once()` aggregates and appends a single line immediately and returns
it; `format_line(metrics, now)` builds such a line for a `datetime` without
touching a file (it still aggregates and resets the metrics).

## Custom metrics

Derive from `OrderedMetric` or `UnorderedMetric` and implement
`aggregate_and_reset()`. `metricskit.examples.SequenceMetric` is one such
metric: it reports every value recorded since the last call, oldest first,
as a bracketed list such as `[2, 4, 6]`.

## Intrusive list

`metricskit.intrusive_list` offers `IntrusiveList` and `IntrusiveListNode`,
a circular doubly-linked list whose items are their own links. It supports
pushing and popping at both ends (`pop_*` raise `IndexError` when empty,
`try_*` return `None`), `front`/`back`, constant-time `append` and `swap`,
iteration, `len()` and truth testing. The metrics do not depend on it.

## Demo

The `metricskit-demo` command runs one of two demonstrations, each with its
own registry and a writer logging once a second:

```
metricskit-demo cpu
metricskit-demo sequence -o sequences.log -d 5 -w 2
```

- `cpu` records random CPU loads into two `AverageMetric`s and request
  counts into a `CountMetric`.
- `sequence` has each worker count upward from a different thousand and
  record even values into one `SequenceMetric` and odd ones into another.

Options: `-o/--output` (default `example.log`), `-d/--duration` in seconds
(default 15), `-w/--workers` (default 4). The same runs are available as
`run_cpu_and_http(path, duration, workers)` and
`run_sequences(path, duration, workers)`.

## What it does not do

metricskit only appends plain text lines to a local file. It does not
rotate or trim that file, expose metrics over the network, or keep any
history beyond what has been written.