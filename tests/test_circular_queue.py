import pytest

from algolab.circular_queue import CircularQueue, QueueEmpty, QueueFull


def test_capacity_keeps_one_slot_free():
    queue = CircularQueue(10)
    for value in range(10, 19):
        queue.enqueue(value)
    with pytest.raises(QueueFull):
        queue.enqueue(19)


def test_fifo_order():
    queue = CircularQueue(5)
    values = [3, 1, 4, 1]
    for value in values:
        queue.enqueue(value)
    assert [queue.dequeue() for _ in values] == values


def test_empty_dequeue_raises():
    queue = CircularQueue()
    with pytest.raises(QueueEmpty):
        queue.dequeue()
    queue.enqueue(5)
    assert queue.dequeue() == 5
    with pytest.raises(QueueEmpty):
        queue.dequeue()


def test_wraps_around_after_dequeues():
    queue = CircularQueue(10)
    for value in range(10, 22):
        try:
            queue.enqueue(value)
        except QueueFull:
            pass
    assert [queue.dequeue() for _ in range(4)] == [10, 11, 12, 13]
    queue.enqueue(9)
    assert "rear: 0, front: 4" in queue.status()
    remaining = [queue.dequeue() for _ in range(6)]
    assert remaining == [14, 15, 16, 17, 18, 9]


def test_status_header_and_empty_slots():
    lines = CircularQueue(10).status().splitlines()
    assert lines[0] == "|  0 |  1 |  2 |  3 |  4 |  5 |  6 |  7 |  8 |  9 |"
    assert lines[1] == "---------------------------------------------------"
    assert lines[2].count("-1") == 10
    assert lines[-1] == "============="


def test_status_shows_stored_value():
    queue = CircularQueue(4)
    queue.enqueue(42)
    assert " 42 |" in queue.status().splitlines()[2]


def test_invalid_capacity():
    with pytest.raises(ValueError):
        CircularQueue(0)