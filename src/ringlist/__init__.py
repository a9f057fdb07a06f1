"""ringlist - Generic circular doubly-linked list with move and cross-list transfer."""

from ringlist.core import CircularDoublyLinkedList, transfer
from ringlist.errors import (
    IndexOutOfRangeError,
    InvalidArgumentError,
    InvalidHandleError,
    RingListError,
    SingleElementError,
    UnderflowError,
    ValueNotFoundError,
)
from ringlist.types import Side

__version__ = "0.0.1"

__all__ = [
    "CircularDoublyLinkedList",
    "transfer",
    "Side",
    "RingListError",
    "IndexOutOfRangeError",
    "UnderflowError",
    "ValueNotFoundError",
    "InvalidArgumentError",
    "SingleElementError",
    "InvalidHandleError",
]
