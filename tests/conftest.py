"""Shared fixtures for ringlist tests."""

from collections.abc import Callable

import pytest

from ringlist import CircularDoublyLinkedList
from ringlist.types import NIL


def _assert_ring_invariant(lst: CircularDoublyLinkedList) -> None:
    nodes = lst._nodes
    size = len(lst)
    assert len(nodes) == size

    if size == 0:
        assert lst._anchor == NIL
        return

    anchor = lst._anchor
    seen = set()
    handle = anchor
    for _ in range(size):
        assert handle not in seen
        seen.add(handle)
        node = nodes[handle]
        assert nodes[node.next].prev == handle
        assert nodes[node.prev].next == handle
        handle = node.next
    assert handle == anchor

    handle = anchor
    for _ in range(size):
        handle = nodes[handle].prev
    assert handle == anchor


@pytest.fixture
def check_ring() -> Callable[[CircularDoublyLinkedList], None]:
    """Check cycle closure in both directions, link symmetry and the node count."""
    return _assert_ring_invariant
