import threading

import pytest

from metricskit.buffers import ConcurrentQueue, ConcurrentStack


class MoveOnly:
    pass


class NonDefaultConstructible:
    def __init__(self, value):
        self.value = value


# Queue


def test_queue_just_works():
    queue = ConcurrentQueue()
    queue.push("Payload")
    assert queue.try_pop() == "Payload"
    assert queue.try_pop() is None


def test_queue_fifo():
    queue = ConcurrentQueue()
    queue.push(1)
    queue.push(2)
    queue.push(3)
    assert queue.try_pop() == 1
    assert queue.try_pop() == 2
    assert queue.try_pop() == 3
    assert queue.try_pop() is None


def test_queue_object_values():
    queue = ConcurrentQueue()
    obj = MoveOnly()
    queue.push(obj)
    assert queue.try_pop() is obj

    queue.push(NonDefaultConstructible(7))
    assert queue.try_pop().value == 7


def test_two_queues_independent():
    q1, q2 = ConcurrentQueue(), ConcurrentQueue()
    q1.push(3)
    q2.push(11)
    assert q1.try_pop() == 3
    assert q2.try_pop() == 11


def test_queue_drain_order_and_empties():
    queue = ConcurrentQueue()
    for v in ("Hello", "World", "!"):
        queue.push(v)
    assert list(queue.drain()) == ["Hello", "World", "!"]
    assert queue.try_pop() is None


# Stack


def test_stack_just_works():
    stack = ConcurrentStack()
    stack.push("Data")
    assert stack.try_pop() == "Data"
    assert stack.try_pop() is None


def test_stack_lifo():
    stack = ConcurrentStack()
    stack.push(1)
    stack.push(2)
    stack.push(3)
    assert stack.try_pop() == 3
    assert stack.try_pop() == 2
    assert stack.try_pop() == 1
    assert stack.try_pop() is None


def test_stack_object_values():
    stack = ConcurrentStack()
    obj = MoveOnly()
    stack.push(obj)
    assert stack.try_pop() is obj

    stack.push(NonDefaultConstructible(7))
    assert stack.try_pop().value == 7


def test_two_stacks_independent():
    s1, s2 = ConcurrentStack(), ConcurrentStack()
    s1.push(3)
    s2.push(11)
    assert s1.try_pop() == 3
    assert s2.try_pop() == 11


def test_stack_drain_order_and_empties():
    stack = ConcurrentStack()
    for v in ("Hello", "World", "!"):
        stack.push(v)
    assert list(stack.drain()) == ["!", "World", "Hello"]
    assert stack.try_pop() is None


# Stress


@pytest.mark.parametrize("buffer_type", [ConcurrentQueue, ConcurrentStack])
def test_many_producers_consumers(buffer_type):
    num_producers = 8
    num_consumers = 8
    ops_per_producer = 5_000
    total_pushes = num_producers * ops_per_producer

    buffer = buffer_type()
    lock = threading.Lock()
    state = {"pushed_sum": 0, "popped_sum": 0, "pops": 0}

    def producer():
        local_sum = 0
        for i in range(1, ops_per_producer + 1):
            buffer.push(i)
            local_sum += i
        with lock:
            state["pushed_sum"] += local_sum

    def consumer():
        while True:
            with lock:
                if state["pops"] >= total_pushes:
                    return
            value = buffer.try_pop()
            if value is None:
                continue
            with lock:
                state["popped_sum"] += value
                state["pops"] += 1

    producers = [threading.Thread(target=producer) for _ in range(num_producers)]
    consumers = [threading.Thread(target=consumer) for _ in range(num_consumers)]
    for t in producers + consumers:
        t.start()
    for t in producers + consumers:
        t.join(timeout=60)

    assert not any(t.is_alive() for t in producers + consumers)
    assert state["pops"] == total_pushes
    assert state["popped_sum"] == state["pushed_sum"]
    assert buffer.try_pop() is None


def test_queue_preserves_per_producer_order():
    queue = ConcurrentQueue()

    def producer(tag):
        for i in range(2_000):
            queue.push((tag, i))

    threads = [threading.Thread(target=producer, args=(tag,)) for tag in range(4)]
    for t in threads:
        t.start()
    for t in threads:
        t.join()

    last_seen = {}
    for tag, i in queue.drain():
        assert i == last_seen.get(tag, -1) + 1
        last_seen[tag] = i
    assert last_seen == {tag: 1_999 for tag in range(4)}