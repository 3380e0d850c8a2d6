"""Occupancy states of a :class:`~slotvec.SlotVec`.

The occupancy summarizes the backing storage without looking at it:

- ``Empty()``: nothing was ever inserted.
- ``Full(count)``: the first ``count`` slots are occupied and there are no
  others.
- ``PartiallyFull(count, free)``: ``count`` slots are occupied and ``free``
  slots below the watermark are vacant.

Transitions are pure functions, so the bookkeeping can be checked on its own:

>>> state = after_insert(after_insert(Empty()))
>>> state
Full(count=2)
>>> state = after_remove(state)
>>> state
PartiallyFull(count=1, free=1)
>>> after_insert(state)
Full(count=2)
>>> after_remove(state)
PartiallyFull(count=0, free=2)
"""
from __future__ import annotations

from dataclasses import dataclass
from typing import Union

from typing_extensions import Literal

OccupancyKind = Literal["empty", "full", "partially_full"]


@dataclass(frozen=True)
class Empty:
    @property
    def count(self) -> int:
        return 0

    @property
    def free(self) -> int:
        return 0


@dataclass(frozen=True)
class Full:
    count: int

    @property
    def free(self) -> int:
        return 0


@dataclass(frozen=True)
class PartiallyFull:
    count: int
    free: int


Occupancy = Union[Empty, Full, PartiallyFull]


def after_insert(state: Occupancy) -> Occupancy:
    if isinstance(state, Empty):
        return Full(1)
    elif isinstance(state, Full):
        return Full(state.count + 1)
    elif isinstance(state, PartiallyFull):
        free = state.free - 1
        if free > 0:
            return PartiallyFull(state.count + 1, free)
        return Full(state.count + 1)
    raise TypeError(f"Not an occupancy state: {state!r}")


def after_remove(state: Occupancy) -> Occupancy:
    # once populated, the collection never goes back to `Empty`
    if isinstance(state, Full):
        return PartiallyFull(state.count - 1, 1)
    elif isinstance(state, PartiallyFull):
        return PartiallyFull(state.count - 1, state.free + 1)
    elif isinstance(state, Empty):
        raise AssertionError("Cannot remove from an Empty collection")
    raise TypeError(f"Not an occupancy state: {state!r}")


def kind(state: Occupancy) -> OccupancyKind:
    """Label of the state.

    >>> kind(Empty()), kind(Full(3)), kind(PartiallyFull(0, 1))
    ('empty', 'full', 'partially_full')
    """
    if isinstance(state, Empty):
        return "empty"
    elif isinstance(state, Full):
        return "full"
    return "partially_full"


def watermark(state: Occupancy) -> int:
    """Physical storage length implied by the state."""
    return state.count + state.free
