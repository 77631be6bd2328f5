import pytest

from practicum.min_stack import MinStack


def test_new_stack_is_empty():
    stack = MinStack()
    assert stack.is_empty()
    assert len(stack) == 0


@pytest.mark.parametrize("capacity", [-5, 0])
def test_invalid_capacity_raises(capacity):
    with pytest.raises(ValueError):
        MinStack(capacity)


def test_copy_equals_source():
    source = MinStack()
    for value in (3, 6, 7, 9):
        source.push(value)
    duplicate = source.copy()
    assert duplicate == source
    while not source.is_empty():
        assert duplicate.top() == source.top()
        duplicate.pop()
        source.pop()
    assert duplicate.is_empty()


def test_copy_is_independent():
    source = MinStack()
    source.push(1)
    duplicate = source.copy()
    duplicate.push(2)
    assert len(source) == 1
    assert len(duplicate) == 2


def test_push_increments_size():
    stack = MinStack()
    start = len(stack)
    stack.push(1)
    assert len(stack) == start + 1


def test_top_of_empty_raises():
    with pytest.raises(IndexError):
        MinStack().top()


def test_top_is_last_pushed():
    stack = MinStack()
    stack.push(1234)
    stack.push(5678)
    assert stack.top() == 5678


def test_pop_of_empty_raises():
    with pytest.raises(IndexError):
        MinStack().pop()


def test_top_after_pop():
    stack = MinStack()
    stack.push(12)
    stack.push(34)
    assert stack.pop() == 34
    assert stack.top() == 12


def test_full_stack():
    stack = MinStack(1)
    stack.push(2)
    assert stack.is_full()


def test_push_into_full_stack_grows():
    stack = MinStack(1)
    stack.push(2)
    stack.push(7)
    assert stack.top() == 7
    assert len(stack) == 2
    assert stack.is_full()


def test_push_into_full_stack_of_two():
    stack = MinStack(2)
    stack.push(2)
    stack.push(7)
    assert stack.top() == 7


def test_min_of_empty_raises():
    with pytest.raises(IndexError):
        MinStack().min()


def test_min_is_correct():
    stack = MinStack()
    for value in (7, 2, 5):
        stack.push(value)
    assert stack.min() == 2


def test_min_restored_after_pop():
    stack = MinStack()
    for value in (5, 3, 1):
        stack.push(value)
    stack.pop()
    assert stack.min() == 3


def test_clear_empties_stack():
    stack = MinStack()
    stack.push(4)
    stack.clear()
    assert len(stack) == 0


def test_empty_stacks_are_equal():
    first, second = MinStack(), MinStack()
    first.push(1)
    assert (first == second) is False
    first.pop()
    assert (first == second) is True


def test_equal_stacks():
    first, second = MinStack(), MinStack()
    first.push(5)
    second.push(5)
    assert first == second


def test_different_sizes_not_equal():
    first, second = MinStack(), MinStack()
    first.push(5)
    assert first != second


def test_different_elements_not_equal():
    first, second = MinStack(), MinStack()
    first.push(5)
    first.push(6)
    second.push(5)
    second.push(4)
    assert first != second


def test_capacity_does_not_affect_equality():
    first, second = MinStack(3), MinStack(5)
    first.push(1)
    second.push(1)
    assert first == second