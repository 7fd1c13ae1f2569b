from LinkedList import LinkedList

import pytest


def assertConsistent(llist):
    count = 0
    last = None
    nodei = llist.headNode
    while nodei is not None:
        count += 1
        last = nodei
        nodei = nodei.nextNode

    assert count == len(llist)
    assert llist.tailNode is last


def test_AppendPrepend():
    llist = LinkedList([10, 17, 3])
    llist.prepend(0)
    llist.append(100)

    assert list(llist) == [0, 10, 17, 3, 100]
    assertConsistent(llist)


def test_InsertAfterTail():
    llist = LinkedList([1, 2])
    llist.insertAfter(llist.tailNode, 3)
    assert llist.tailNode.value == 3

    llist.insertAfter(llist.headNode, 5)
    assert list(llist) == [1, 5, 2, 3]
    assertConsistent(llist)


def test_PopFrontToEmpty():
    llist = LinkedList([1, 2])
    assert llist.popFront() == 1
    assert llist.popFront() == 2
    assert llist.headNode is None
    assert llist.tailNode is None
    assert len(llist) == 0

    with pytest.raises(IndexError):
        llist.popFront()


def test_RemoveAfterMovesTail():
    llist = LinkedList([1, 2, 3])
    middle = llist.headNode.nextNode

    assert llist.removeAfter(middle) == 3
    assert llist.tailNode is middle
    assert llist.removeAfter(llist.headNode) == 2
    assert list(llist) == [1]
    assertConsistent(llist)


def test_IterationIsRestartable():
    llist = LinkedList("abc")
    assert list(llist) == list(llist) == ["a", "b", "c"]

    llist.clear()
    assert list(llist) == []
    assertConsistent(llist)


if __name__ == "__main__":
    test_AppendPrepend()
    test_InsertAfterTail()
    test_PopFrontToEmpty()
    test_RemoveAfterMovesTail()
    test_IterationIsRestartable()
