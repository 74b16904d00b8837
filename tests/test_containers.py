import pytest

from algorithmics.containers import IntHashMap, LifoStack


def test_stack_is_lifo():
    stack = LifoStack()
    for value in (1, 2, 3):
        stack.push(value)
    assert stack.top() == 3
    assert [stack.pop() for _ in range(3)] == [3, 2, 1]
    assert len(stack) == 0


def test_stack_interleaved():
    stack = LifoStack()
    stack.push(1)
    stack.push(2)
    assert stack.pop() == 2
    stack.push(5)
    assert stack.top() == 5
    assert len(stack) == 2
    assert stack.pop() == 5
    assert stack.pop() == 1


def test_stack_empty_truthiness():
    stack = LifoStack()
    assert not stack
    stack.push(4)
    assert stack


def test_stack_pop_empty():
    with pytest.raises(IndexError):
        LifoStack().pop()


def test_stack_top_empty():
    with pytest.raises(IndexError):
        LifoStack().top()


def test_map_put_get():
    table = IntHashMap()
    table.put(1, 1)
    table.put(2, 2)
    assert table.get(1) == 1
    assert table.get(3) == IntHashMap.MISSING
    assert table.get(3) == -1


def test_map_overwrite_and_remove():
    table = IntHashMap()
    table.put(2, 1)
    table.put(2, 7)
    assert table.get(2) == 7
    table.remove(2)
    assert table.get(2) == -1
    assert 2 not in table


def test_map_remove_missing_keeps_others():
    table = IntHashMap()
    table.put(10, 20)
    table.remove(99)
    assert table.get(10) == 20
    assert len(table) == 1