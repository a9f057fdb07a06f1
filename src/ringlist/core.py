"""Main CircularDoublyLinkedList implementation."""

import logging
import sys
from collections.abc import Iterable, Iterator
from typing import Generic, TextIO

from ringlist.errors import (
    IndexOutOfRangeError,
    InvalidArgumentError,
    RingListError,
    SingleElementError,
    UnderflowError,
    ValueNotFoundError,
)
from ringlist.linkedlist import NodeArena
from ringlist.types import NIL, Side, SideLike, T

logger = logging.getLogger(__name__)


def _coerce_side(side: object) -> Side:
    if isinstance(side, Side):
        return side
    if isinstance(side, str):
        try:
            return Side(side)
        except ValueError:
            pass
    raise InvalidArgumentError(f"Invalid side {side!r}: use Side.LEFT or Side.RIGHT")


def _check_index(index: object) -> int:
    if isinstance(index, bool) or not isinstance(index, int):
        raise TypeError(f"List indices must be integers, not {type(index).__name__}")
    return index


class CircularDoublyLinkedList(Generic[T]):
    """
    Generic circular doubly-linked list.

    Nodes live in a per-list arena and link to each other through integer
    handles, so a node can never be reachable from two lists. Index 0 is the
    anchor; index ``len - 1`` is the anchor's predecessor (the tail). End
    operations are O(1), positional access is O(n).

    Not safe for concurrent mutation; callers must provide their own locking.
    """

    def __init__(self, iterable: Iterable[T] | None = None, *, separator: str = " -> ") -> None:
        """
        Initialize the list.

        Args:
            iterable: Optional values appended in order.
            separator: String placed between elements by ``str()`` and ``print_all()``.
        """
        self._nodes = NodeArena[T]()
        self._anchor = NIL
        self._size = 0
        self.separator = separator
        if iterable is not None:
            for value in iterable:
                self.push_back(value)

    # -- internal helpers (never leave the ring half-linked) ----------------

    def _handle_at(self, index: int) -> int:
        """Return the handle at an existing position, walking the shorter way round."""
        index = _check_index(index)
        if index < 0 or index >= self._size:
            raise IndexOutOfRangeError(
                f"Index {index} out of range for list of length {self._size}"
            )
        nodes = self._nodes
        if index <= self._size // 2:
            handle = self._anchor
            for _ in range(index):
                handle = nodes[handle].next
        else:
            handle = nodes[self._anchor].prev
            for _ in range(self._size - 1 - index):
                handle = nodes[handle].prev
        return handle

    def _find(self, value: T) -> int:
        """Return the handle of the first node equal to ``value``, or NIL."""
        handle = self._anchor
        for _ in range(self._size):
            node = self._nodes[handle]
            if node.value == value:
                return handle
            handle = node.next
        return NIL

    def _find_or_raise(self, value: T) -> int:
        handle = self._find(value)
        if handle == NIL:
            raise ValueNotFoundError(f"Value {value!r} not found in list")
        return handle

    def _link_before(self, handle: int, ref: int) -> None:
        """Link a detached node immediately before ``ref``. Anchor is left alone."""
        nodes = self._nodes
        node = nodes[handle]
        ref_node = nodes[ref]
        node.prev = ref_node.prev
        node.next = ref
        nodes[ref_node.prev].next = handle
        ref_node.prev = handle
        self._size += 1

    def _link_after(self, handle: int, ref: int) -> None:
        """Link a detached node immediately after ``ref``."""
        self._link_before(handle, self._nodes[ref].next)

    def _link_sole(self, handle: int) -> None:
        node = self._nodes[handle]
        node.prev = handle
        node.next = handle
        self._anchor = handle
        self._size = 1

    def _link_at(self, handle: int, index: int) -> None:
        """Link a detached node into a non-empty ring so that it ends up at ``index`` (0..len)."""
        if index == self._size:
            self._link_before(handle, self._anchor)
        else:
            ref = self._handle_at(index)
            self._link_before(handle, ref)
            if ref == self._anchor:
                self._anchor = handle

    def _unlink(self, handle: int) -> None:
        """Detach a node from the ring without freeing it."""
        nodes = self._nodes
        node = nodes[handle]
        if self._size == 1:
            self._anchor = NIL
        else:
            nodes[node.prev].next = node.next
            nodes[node.next].prev = node.prev
            if handle == self._anchor:
                self._anchor = node.next
        node.prev = NIL
        node.next = NIL
        self._size -= 1

    def _release(self, handle: int) -> T:
        """Detach and free a node, returning its value."""
        self._unlink(handle)
        return self._nodes.free(handle)

    def _check_insert_index(self, index: int) -> int:
        index = _check_index(index)
        if index < 0 or index > self._size:
            raise IndexOutOfRangeError(
                f"Insert position {index} out of range 0..{self._size}"
            )
        return index

    def _insert_adjacent(self, ref: int, value: T, side: Side) -> None:
        handle = self._nodes.alloc(value)
        if side is Side.RIGHT:
            self._link_after(handle, ref)
        else:
            self._link_before(handle, ref)
            if ref == self._anchor:
                self._anchor = handle

    def _neighbour(self, ref: int, side: Side) -> int:
        node = self._nodes[ref]
        return node.next if side is Side.RIGHT else node.prev

    # -- insertion ----------------------------------------------------------

    def push_back(self, value: T) -> None:
        """Append ``value`` after the current tail. O(1)."""
        handle = self._nodes.alloc(value)
        if self._size == 0:
            self._link_sole(handle)
        else:
            self._link_before(handle, self._anchor)

    def push_front(self, value: T) -> None:
        """Insert ``value`` before the anchor and make it the new anchor. O(1)."""
        self.push_back(value)
        self._anchor = self._nodes[self._anchor].prev

    def insert_adjacent_to_value(self, ref_value: T, new_value: T, side: SideLike) -> None:
        """
        Insert ``new_value`` next to the first element equal to ``ref_value``.

        Args:
            ref_value: Value to look for, scanning from the anchor
            new_value: Value to insert
            side: Side.LEFT inserts before the match, Side.RIGHT after it

        Raises:
            InvalidArgumentError: If side is not a valid selector
            ValueNotFoundError: If no element equals ref_value
        """
        side = _coerce_side(side)
        ref = self._find_or_raise(ref_value)
        self._insert_adjacent(ref, new_value, side)

    def insert_adjacent_to_index(self, index: int, value: T, side: SideLike) -> None:
        """
        Insert ``value`` next to the element at ``index``.

        Raises:
            InvalidArgumentError: If side is not a valid selector
            IndexOutOfRangeError: If index does not name an existing element
        """
        side = _coerce_side(side)
        ref = self._handle_at(index)
        self._insert_adjacent(ref, value, side)

    def insert_at(self, index: int, value: T) -> None:
        """
        Insert ``value`` so that it occupies ``index`` afterwards.

        ``index == len`` appends and ``index == 0`` prepends.

        Raises:
            IndexOutOfRangeError: If index is outside 0..len
        """
        index = self._check_insert_index(index)
        if index == 0:
            self.push_front(value)
        elif index == self._size:
            self.push_back(value)
        else:
            ref = self._handle_at(index)
            self._link_before(self._nodes.alloc(value), ref)

    # -- removal ------------------------------------------------------------

    def pop_back(self) -> T:
        """
        Remove and return the tail value.

        Raises:
            UnderflowError: If the list is empty
        """
        if self._size == 0:
            raise UnderflowError("Cannot pop from an empty list")
        return self._release(self._nodes[self._anchor].prev)

    def pop_front(self) -> T:
        """
        Remove and return the anchor value; its successor becomes the anchor.

        Raises:
            UnderflowError: If the list is empty
        """
        if self._size == 0:
            raise UnderflowError("Cannot pop from an empty list")
        return self._release(self._anchor)

    def remove_by_value(self, value: T) -> None:
        """
        Remove the first element equal to ``value``.

        Raises:
            ValueNotFoundError: If no element equals value
        """
        self._release(self._find_or_raise(value))

    def remove_adjacent_to_value(self, ref_value: T, side: SideLike) -> T:
        """
        Remove and return the neighbour of the first element equal to ``ref_value``.

        Args:
            ref_value: Value to look for, scanning from the anchor
            side: Side.LEFT removes the predecessor, Side.RIGHT the successor

        Raises:
            InvalidArgumentError: If side is not a valid selector
            ValueNotFoundError: If no element equals ref_value
            SingleElementError: If the list holds fewer than two elements
        """
        side = _coerce_side(side)
        ref = self._find_or_raise(ref_value)
        if self._size < 2:
            raise SingleElementError("Cannot remove a neighbour of the only element")
        return self._release(self._neighbour(ref, side))

    def remove_adjacent_to_index(self, index: int, side: SideLike) -> T:
        """
        Remove and return the neighbour of the element at ``index``.

        Raises:
            InvalidArgumentError: If side is not a valid selector
            SingleElementError: If the list holds fewer than two elements
            IndexOutOfRangeError: If index does not name an existing element
        """
        side = _coerce_side(side)
        if self._size < 2:
            raise SingleElementError("Cannot remove a neighbour of the only element")
        ref = self._handle_at(index)
        return self._release(self._neighbour(ref, side))

    def remove_at(self, index: int) -> T:
        """
        Remove and return the value at ``index``.

        Raises:
            IndexOutOfRangeError: If index does not name an existing element
        """
        return self._release(self._handle_at(index))

    def clear(self) -> None:
        """Release every node, leaving an empty list."""
        logger.debug("Clearing list of %d elements", self._size)
        self._nodes.clear()
        self._anchor = NIL
        self._size = 0

    # -- access -------------------------------------------------------------

    def get(self, index: int) -> T:
        """Return the value at ``index``. O(n)."""
        return self._nodes[self._handle_at(index)].value

    def set(self, index: int, value: T) -> None:
        """Replace the value at ``index``. O(n)."""
        self._nodes[self._handle_at(index)].value = value

    def length(self) -> int:
        """Return the number of elements. O(1)."""
        return self._size

    def index_of(self, value: T) -> int:
        """
        Return the position of the first element equal to ``value``.

        Raises:
            ValueNotFoundError: If no element equals value
        """
        handle = self._anchor
        for index in range(self._size):
            node = self._nodes[handle]
            if node.value == value:
                return index
            handle = node.next
        raise ValueNotFoundError(f"Value {value!r} not found in list")

    def to_list(self) -> list[T]:
        """Return the elements from the anchor once around the ring."""
        return list(self)

    # -- relocation ---------------------------------------------------------

    def move(self, index: int, new_index: int) -> None:
        """
        Relocate the element at ``index`` so that it ends up at ``new_index``.

        The node itself is relinked; nothing is allocated or freed. The result
        equals ``insert_at(new_index, remove_at(index))``, so moving to the end
        is ``new_index == len - 1``.

        Raises:
            IndexOutOfRangeError: If index is outside 0..len-1 or new_index
                is outside 0..len-1
        """
        index = _check_index(index)
        new_index = _check_index(new_index)
        if index < 0 or index >= self._size:
            raise IndexOutOfRangeError(
                f"Source index {index} out of range for list of length {self._size}"
            )
        if new_index < 0 or new_index > self._size - 1:
            raise IndexOutOfRangeError(
                f"Target index {new_index} out of range for list of length {self._size}"
            )
        if index == new_index:
            return

        # Both indices are valid for the shortened ring, so relinking cannot fail
        handle = self._handle_at(index)
        self._unlink(handle)
        self._link_at(handle, new_index)
        logger.debug("Moved element from index %d to %d", index, new_index)

    # -- protocol methods ---------------------------------------------------

    def __len__(self) -> int:
        """Return the number of elements."""
        return self._size

    def __bool__(self) -> bool:
        """Return True if the list is non-empty."""
        return self._size > 0

    def __iter__(self) -> Iterator[T]:
        """Yield values from the anchor once around the ring."""
        handle = self._anchor
        for _ in range(self._size):
            node = self._nodes[handle]
            yield node.value
            handle = node.next

    def __contains__(self, value: object) -> bool:
        return self._find(value) != NIL  # type: ignore[arg-type]

    def __getitem__(self, index: int) -> T:
        return self.get(index)

    def __setitem__(self, index: int, value: T) -> None:
        self.set(index, value)

    def __str__(self) -> str:
        return self.separator.join(str(value) for value in self)

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self.to_list()!r})"

    # -- diagnostics --------------------------------------------------------

    def print_at(self, index: int, file: TextIO | None = None) -> None:
        """Print the element at ``index``, or a failure message instead of raising."""
        out = file if file is not None else sys.stdout
        try:
            value = self.get(index)
        except (RingListError, TypeError) as exc:
            print(f"Failed to print: {exc}", file=out)
            return
        print(f"Element at index {index}: {value}", file=out)

    def print_all(self, file: TextIO | None = None) -> None:
        """Print every element joined by the configured separator."""
        out = file if file is not None else sys.stdout
        if not self._size:
            print("Empty list.", file=out)
            return
        print(f"Elements: {self}", file=out)


def transfer(
    source: CircularDoublyLinkedList[T],
    dest: CircularDoublyLinkedList[T],
    index: int,
    new_index: int,
) -> T:
    """
    Move the value at ``index`` of ``source`` to position ``new_index`` of ``dest``.

    The source node is freed and ``dest`` allocates a new one, so no node is
    ever shared between lists. Both positions are checked before either list
    changes.

    Args:
        source: List to remove from
        dest: List to insert into (may be ``source`` itself)
        index: Existing position in source
        new_index: Insert position in dest, 0..len(dest) after the removal

    Returns:
        The transferred value

    Raises:
        IndexOutOfRangeError: If either position is out of range
    """
    index = _check_index(index)
    new_index = _check_index(new_index)
    if index < 0 or index >= len(source):
        raise IndexOutOfRangeError(
            f"Source index {index} out of range for list of length {len(source)}"
        )
    dest_len = len(dest) - 1 if dest is source else len(dest)
    if new_index < 0 or new_index > dest_len:
        raise IndexOutOfRangeError(f"Target position {new_index} out of range 0..{dest_len}")

    value = source.remove_at(index)
    dest.insert_at(new_index, value)
    logger.debug("Transferred element from source index %d to destination index %d", index, new_index)
    return value
