"""Exception classes for ringlist."""


class RingListError(Exception):
    """Base exception for all ringlist errors."""


class IndexOutOfRangeError(RingListError, IndexError):
    """Raised when a position lies outside the valid range for the operation."""


class UnderflowError(RingListError, IndexError):
    """Raised when removing from an empty list."""


class ValueNotFoundError(RingListError, ValueError):
    """Raised when a value-based lookup finds no matching element."""


class InvalidArgumentError(RingListError, ValueError):
    """Raised when a side selector is neither left nor right."""


class SingleElementError(RingListError):
    """Raised when removing a neighbour while the list holds fewer than two elements."""


class InvalidHandleError(RingListError, LookupError):
    """Raised when a node handle does not refer to a live node."""
