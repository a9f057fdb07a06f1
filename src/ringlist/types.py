"""Type definitions for ringlist."""

from enum import Enum
from typing import Literal, TypeAlias, TypeVar

# Element type
T = TypeVar("T")

# Handle value meaning "no node"
NIL = -1


class Side(str, Enum):
    """Which neighbour of a reference node an adjacency operation targets."""

    LEFT = "left"  # predecessor, insert before
    RIGHT = "right"  # successor, insert after


# Accepted wherever a side selector is expected
SideLike: TypeAlias = Side | Literal["left", "right"]
