import threading

import pytest

from rdtcore.data_types import TrajectoryPoint
from rdtcore.trajectory_queue import DEFAULT_CAPACITY, TrajectoryQueue
from rdtcore.units import Meters


def test_new_queue_is_empty():
    q = TrajectoryQueue(8)
    assert q.is_empty()
    assert len(q) == 0
    assert q.try_pop() is None
    assert q.try_peek() is None


def test_default_capacity():
    q = TrajectoryQueue()
    assert q.capacity == DEFAULT_CAPACITY == 256


@pytest.mark.parametrize("bad", [0, -2, 3, 6, 100])
def test_invalid_capacity_rejected(bad):
    with pytest.raises(ValueError):
        TrajectoryQueue(bad)


def test_fifo_order():
    q = TrajectoryQueue(8)
    for item in ["a", "b", "c"]:
        assert q.try_push(item)
    assert len(q) == 3
    assert [q.try_pop() for _ in range(3)] == ["a", "b", "c"]
    assert q.is_empty()


def test_full_holds_capacity_minus_one():
    q = TrajectoryQueue(4)
    results = [q.try_push(i) for i in range(q.capacity)]
    assert results == [True] * (q.capacity - 1) + [False]
    assert len(q) == q.capacity - 1
    assert [q.try_pop() for _ in range(q.capacity - 1)] == list(range(q.capacity - 1))


def test_default_queue_fills_to_capacity_minus_one():
    q = TrajectoryQueue()
    pushed = 0
    while q.try_push(pushed):
        pushed += 1
    assert pushed == q.capacity - 1
    assert len(q) == pushed


def test_push_after_pop_frees_slot():
    q = TrajectoryQueue(2)
    assert q.try_push(1)
    assert not q.try_push(2)
    assert q.try_pop() == 1
    assert q.try_push(2)
    assert q.try_pop() == 2


def test_wraparound_keeps_order_and_size():
    q = TrajectoryQueue(4)
    expected = []
    popped = []
    for i in range(50):
        assert q.try_push(i)
        expected.append(i)
        if i % 2:
            popped.append(q.try_pop())
            popped.append(q.try_pop())
        assert 0 <= len(q) < q.capacity
    while not q.is_empty():
        popped.append(q.try_pop())
    assert popped == expected


def test_peek_does_not_remove():
    q = TrajectoryQueue(8)
    q.try_push("x")
    q.try_push("y")
    assert q.try_peek() == "x"
    assert len(q) == 2
    assert q.try_pop() == "x"
    assert q.try_peek() == "y"


def test_peek_returns_independent_copy():
    q = TrajectoryQueue(8)
    point = TrajectoryPoint()
    point.command.cartesian_target.x = Meters(0.5)
    q.try_push(point)
    peeked = q.try_peek()
    peeked.command.cartesian_target.x = Meters(2.0)
    popped = q.try_pop()
    assert popped.command.cartesian_target.x == Meters(0.5)
    assert popped is point


def test_clear_empties_queue():
    q = TrajectoryQueue(8)
    for i in range(5):
        q.try_push(i)
    q.clear()
    assert q.is_empty()
    assert len(q) == 0
    assert q.try_pop() is None
    assert q.try_push("again")
    assert q.try_pop() == "again"


def test_bool_reflects_contents():
    q = TrajectoryQueue(4)
    assert not q
    q.try_push(1)
    assert q


def test_single_producer_single_consumer_threads():
    q = TrajectoryQueue(16)
    total = 2000
    received = []

    def produce():
        for i in range(total):
            while not q.try_push(i):
                pass

    def consume():
        while len(received) < total:
            item = q.try_pop()
            if item is not None:
                received.append(item)

    producer = threading.Thread(target=produce)
    consumer = threading.Thread(target=consume)
    consumer.start()
    producer.start()
    producer.join(timeout=30)
    consumer.join(timeout=30)
    assert received == list(range(total))
    assert q.is_empty()