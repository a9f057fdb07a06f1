"""Node arena backing the circular list, with links expressed as integer handles."""

from typing import Generic

from ringlist.errors import InvalidHandleError
from ringlist.types import NIL, T


class Node(Generic[T]):
    """A node in the ring. ``prev`` and ``next`` are handles into the owning arena."""

    __slots__ = ("value", "prev", "next")

    def __init__(self, value: T) -> None:
        self.value = value
        self.prev: int = NIL
        self.next: int = NIL


class NodeArena(Generic[T]):
    """Owns the nodes of a single list. Freed slots are recycled. O(1) alloc/free."""

    def __init__(self) -> None:
        self._slots: list[Node[T] | None] = []
        self._free: list[int] = []
        self._live = 0

    def alloc(self, value: T) -> int:
        """Create a detached node holding ``value`` and return its handle."""
        node = Node(value)
        if self._free:
            handle = self._free.pop()
            self._slots[handle] = node
        else:
            handle = len(self._slots)
            self._slots.append(node)
        self._live += 1
        return handle

    def free(self, handle: int) -> T:
        """Release the node at ``handle`` and return the value it held."""
        node = self.node(handle)
        self._slots[handle] = None
        self._free.append(handle)
        self._live -= 1
        node.prev = NIL
        node.next = NIL
        return node.value

    def node(self, handle: int) -> Node[T]:
        """Return the live node at ``handle``."""
        if not 0 <= handle < len(self._slots):
            raise InvalidHandleError(f"Unknown node handle: {handle}")
        node = self._slots[handle]
        if node is None:
            raise InvalidHandleError(f"Node handle {handle} has been freed")
        return node

    def is_live(self, handle: int) -> bool:
        """Return True if ``handle`` refers to a live node."""
        return 0 <= handle < len(self._slots) and self._slots[handle] is not None

    def clear(self) -> None:
        """Release every node at once."""
        self._slots.clear()
        self._free.clear()
        self._live = 0

    def __getitem__(self, handle: int) -> Node[T]:
        return self.node(handle)

    def __len__(self) -> int:
        """Return the number of live nodes."""
        return self._live

    def __bool__(self) -> bool:
        """Return True if any node is live."""
        return self._live > 0
