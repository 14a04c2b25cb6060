import pytest

from dsakit.linked_list import LinkedList, Node, merge_sorted

A = [3, 5, 7, 10, 55, 66]
B = [20, 30, 40, 50, 60]


def test_construction_keeps_order():
    linked = LinkedList(A)
    assert list(linked) == A
    assert len(linked) == len(A)


def test_empty_list():
    linked = LinkedList()
    assert list(linked) == []
    assert len(linked) == 0


def test_add_prepends():
    linked = LinkedList(A)
    linked.add(1)
    assert list(linked) == [1, *A]
    assert len(linked) == len(A) + 1


def test_get_by_index():
    linked = LinkedList(A)
    assert [linked.get(i) for i in range(len(A))] == A


@pytest.mark.parametrize("index", [-1, len(A), 100])
def test_get_out_of_range(index):
    with pytest.raises(IndexError):
        LinkedList(A).get(index)


def test_remove_last_until_empty():
    linked = LinkedList(A)
    removed = [linked.remove_last() for _ in range(len(A))]
    assert removed == A[::-1]
    assert len(linked) == 0
    with pytest.raises(IndexError):
        linked.remove_last()


def test_remove_last_single():
    linked = LinkedList([B[0]])
    assert linked.remove_last() == B[0]
    assert list(linked) == []


def test_merge_sorted():
    first, second = LinkedList(A), LinkedList(B)
    merged = merge_sorted(first, second)
    assert list(merged) == sorted(A + B)
    assert len(merged) == len(A) + len(B)
    assert list(first) == A
    assert list(second) == B


def test_merge_with_empty():
    assert list(merge_sorted(LinkedList(), LinkedList(B))) == B
    assert list(merge_sorted(A, [])) == A
    assert list(merge_sorted([], [])) == []


def test_node_links():
    tail = Node(B[1])
    head = Node(B[0], tail)
    assert head.next is tail
    assert tail.next is None