import pytest

import prefixtrie.trie
from prefixtrie import AllocationCounter, AllocationError, NodeList, Trie, TrieNode
from prefixtrie.hooks import (
    get_allocation_listener,
    get_deallocation_listener,
    set_allocation_listener,
    set_deallocation_listener,
)


@pytest.fixture(autouse=True)
def clear_listeners():
    yield
    set_allocation_listener(None)
    set_deallocation_listener(None)


def test_create_add_destroy_is_balanced():
    counter = AllocationCounter()
    trie = Trie(on_allocate=counter.on_allocate, on_deallocate=counter.on_deallocate)
    trie.add_words(["aardvark", "wolf", "aardwolf", "bone", "body"])

    assert counter.allocations == 1 + trie.node_count
    assert counter.deallocations == 0

    trie.destroy()

    assert counter.balanced
    assert counter.allocations == counter.deallocations


def test_empty_trie_is_balanced():
    counter = AllocationCounter()
    trie = Trie(on_allocate=counter.on_allocate, on_deallocate=counter.on_deallocate)
    assert counter.outstanding == 1

    trie.destroy()
    assert counter.balanced


def test_duplicate_words_allocate_nothing():
    counter = AllocationCounter()
    trie = Trie(on_allocate=counter.on_allocate, on_deallocate=counter.on_deallocate)
    trie.add_word("hello")
    allocated = counter.allocations

    trie.add_word("hello")
    trie.add_word("hell")

    assert counter.allocations == allocated
    trie.destroy()
    assert counter.balanced


def test_process_wide_listeners():
    with AllocationCounter() as counter:
        assert get_allocation_listener() == counter.on_allocate
        trie = Trie()
        trie.add_word("hi")
        trie.destroy()

    assert counter.allocations == 3
    assert counter.balanced
    assert get_allocation_listener() is None
    assert get_deallocation_listener() is None


def test_listeners_are_captured_at_creation():
    counter = AllocationCounter()
    set_allocation_listener(counter.on_allocate)
    set_deallocation_listener(counter.on_deallocate)
    trie = Trie()
    set_allocation_listener(None)
    set_deallocation_listener(None)

    trie.add_word("late")
    trie.destroy()

    assert counter.allocations == 5
    assert counter.balanced


def test_instance_listeners_do_not_interfere():
    first = AllocationCounter()
    second = AllocationCounter()
    a = Trie(on_allocate=first.on_allocate, on_deallocate=first.on_deallocate)
    b = Trie(on_allocate=second.on_allocate, on_deallocate=second.on_deallocate)

    a.add_word("abc")
    b.add_word("x")
    a.destroy()

    assert first.balanced
    assert second.allocations == 2
    assert second.outstanding == 2
    b.destroy()
    assert second.balanced


def test_children_released_before_parents():
    released = []
    trie = Trie(on_deallocate=released.append)
    trie.add_words(["ab", "ac"])
    trie.destroy()

    chars = [obj.char for obj in released if isinstance(obj, TrieNode)]
    assert chars.index("b") < chars.index("a")
    assert chars.index("c") < chars.index("a")
    assert released[-1] is trie


def test_allocation_failure_keeps_partial_path(monkeypatch):
    counter = AllocationCounter()
    trie = Trie(on_allocate=counter.on_allocate, on_deallocate=counter.on_deallocate)
    trie.add_word("car")

    created = []

    def failing_node(ch):
        if len(created) == 2:
            raise MemoryError
        node = TrieNode(ch)
        created.append(node)
        return node

    monkeypatch.setattr(prefixtrie.trie, "TrieNode", failing_node)

    with pytest.raises(AllocationError) as excinfo:
        trie.add_word("carpet")

    assert isinstance(excinfo.value.__cause__, MemoryError)
    assert trie.contains_word("carpet") is False
    assert trie.contains_word("carp") is False
    assert trie.node_count == 5
    assert trie.words_matching_prefix("car", 5) == ["car"]

    monkeypatch.undo()
    trie.add_word("carpet")
    assert trie.contains_word("carpet") is True
    assert trie.node_count == 6

    trie.destroy()
    assert counter.balanced


def test_failed_append_is_not_counted(monkeypatch):
    counter = AllocationCounter()
    trie = Trie(on_allocate=counter.on_allocate, on_deallocate=counter.on_deallocate)

    def no_room(self, node):
        raise MemoryError

    monkeypatch.setattr(NodeList, "append", no_room)

    with pytest.raises(AllocationError) as excinfo:
        trie.add_word("ab")

    assert isinstance(excinfo.value.__cause__, MemoryError)
    assert trie.node_count == 0
    assert counter.allocations == 1

    monkeypatch.undo()
    assert trie.contains_word("ab") is False
    trie.destroy()
    assert counter.balanced


def test_create_failure_returns_no_trie(monkeypatch):
    counter = AllocationCounter()

    def no_memory():
        raise MemoryError

    monkeypatch.setattr(prefixtrie.trie, "NodeList", no_memory)

    with pytest.raises(AllocationError) as excinfo:
        Trie(on_allocate=counter.on_allocate, on_deallocate=counter.on_deallocate)

    assert isinstance(excinfo.value.__cause__, MemoryError)
    assert counter.allocations == 0
