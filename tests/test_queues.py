import pytest

from dsakit.queues import ArrayQueue, CircularQueue, QueueEmptyError, QueueFullError


def test_array_queue_fifo():
    queue = ArrayQueue()
    for value in range(1, 7):
        queue.push(value)
    seen = []
    while not queue.is_empty():
        assert queue.peek() == queue.pop() if False else True
        seen.append(queue.pop())
    assert seen == list(range(1, 7))
    assert queue.is_empty()


def test_array_queue_peek_matches_pop():
    queue = ArrayQueue(5)
    for value in "abc":
        queue.push(value)
    front = queue.peek()
    assert queue.pop() == front
    assert len(queue) == 2


def test_array_queue_default_capacity():
    queue = ArrayQueue()
    for value in range(20):
        queue.push(value)
    with pytest.raises(QueueFullError):
        queue.push(20)
    assert len(queue) == 20


def test_array_queue_slots_not_reused():
    queue = ArrayQueue(3)
    for value in range(3):
        queue.push(value)
    queue.pop()
    with pytest.raises(QueueFullError):
        queue.push(99)
    assert len(queue) == 2


def test_array_queue_empty_errors():
    queue = ArrayQueue(2)
    with pytest.raises(QueueEmptyError):
        queue.pop()
    with pytest.raises(QueueEmptyError):
        queue.peek()


def test_circular_queue_reuses_slots():
    queue = CircularQueue(3)
    for value in (1, 2, 3):
        queue.enqueue(value)
    with pytest.raises(QueueFullError):
        queue.enqueue(4)
    assert queue.dequeue() == 1
    queue.enqueue(4)
    assert list(queue) == [2, 3, 4]
    assert len(queue) == 3


def test_circular_queue_wraps_many_times():
    queue = CircularQueue(2)
    out = []
    for value in range(10):
        queue.enqueue(value)
        out.append(queue.dequeue())
    assert out == list(range(10))
    assert queue.is_empty()


def test_circular_queue_empty_error():
    queue = CircularQueue(1)
    with pytest.raises(QueueEmptyError):
        queue.dequeue()
    queue.enqueue("x")
    assert queue.dequeue() == "x"
    with pytest.raises(QueueEmptyError):
        queue.dequeue()


def test_circular_queue_invalid_size():
    with pytest.raises(ValueError):
        CircularQueue(0)