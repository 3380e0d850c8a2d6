from __future__ import annotations

import functools
import itertools
import logging
import operator
from typing import cast
from typing import Generic
from typing import Iterable
from typing import List
from typing import Optional
from typing import TypeVar
from typing import Union

from ._utils import describe_index
from ._utils import log_obj
from .errors import SlotVecError
from .iterators import IntoIter
from .iterators import ItemsIter
from .iterators import Iter
from .iterators import IterMut
from .iterators import RevIter
from .occupancy import after_insert
from .occupancy import after_remove
from .occupancy import Empty
from .occupancy import Occupancy
from .occupancy import PartiallyFull
from .slot import Slot
from .slot import SlotRef
from .slot import VACANT

_logger = logging.getLogger(__name__)
_log_obj = functools.partial(log_obj, _logger)

T = TypeVar("T")
D = TypeVar("D")


class SlotVec(Generic[T]):
    """A growable sequence of slots that hands out stable indices.

    `insert()` returns the index of the slot that now holds the value, and
    that index refers to the same value until it is passed to `remove()`.
    Removal leaves a vacant slot behind; the storage never shrinks. Later
    insertions refill vacant slots, lowest index first, before the storage
    grows.

    Iteration skips vacant slots and runs in ascending index order:

    - ``iter(vec)`` and `items()` borrow the collection for reading
      (``reversed(vec)`` does the same from the highest index down),
    - `iter_mut()` yields a `SlotRef` per occupied slot for in-place updates,
    - `drain()` takes the storage away and leaves the collection empty.

    Inserting, removing or draining while a borrowing traversal is alive
    makes that traversal raise `RuntimeError` on its next step.

    >>> vec = SlotVec([10, 20, 30])
    >>> vec.remove(1)
    20
    >>> vec.insert(40)
    1
    >>> list(vec)
    [10, 40, 30]
    """

    _storage: List[Slot[T]]
    _occupancy: Occupancy
    _version: int
    __slots__ = ["_storage", "_occupancy", "_version"]

    def __init__(self, values: Optional[Iterable[T]] = None) -> None:
        self._storage = []
        self._occupancy = Empty()
        self._version = 0
        if values is not None:
            for value in values:
                self.insert(value)

    @property
    def _log_prefix(self) -> str:
        return f"<{self.__class__.__name__} at {id(self):#x}>: "

    def _log(self, level: int, msg: str, *args: object) -> None:
        _log_obj(self, level, msg, *args)

    _dbg = functools.partialmethod(_log, logging.DEBUG)
    _err = functools.partialmethod(_log, logging.ERROR)

    @property
    def occupancy(self) -> Occupancy:
        return self._occupancy

    @property
    def watermark(self) -> int:
        """Physical length of the storage, vacant slots included."""
        return len(self._storage)

    def __len__(self) -> int:
        return self._occupancy.count

    def is_empty(self) -> bool:
        return self._occupancy.count == 0

    def insert(self, value: T) -> int:
        """Store `value` and return its index.

        Fills the lowest vacant slot if there is one, otherwise appends.
        """
        state = self._occupancy
        if isinstance(state, PartiallyFull):
            index = self._find_vacant(state)
            self._storage[index] = value
        else:
            index = len(self._storage)
            self._storage.append(value)

        self._occupancy = after_insert(state)
        self._version += 1
        self._dbg("inserted at %d, occupancy %r", index, self._occupancy)
        return index

    def _find_vacant(self, state: PartiallyFull) -> int:
        # With `count` occupied slots and at least one vacancy below the
        # watermark, the lowest vacancy is among the first `count + 1` slots.
        limit = state.count + 1
        for index, slot in enumerate(itertools.islice(self._storage, limit)):
            if slot is VACANT:
                return index

        self._err(
            "occupancy is %r but no vacant slot in the first %d of %d",
            state,
            limit,
            len(self._storage),
        )
        raise AssertionError(
            f"SlotVec occupancy is {state!r}, but no vacant slot was found"
        )

    def remove(self, index: int) -> T:
        """Take the value out of slot `index`, leaving the slot vacant.

        Raises `SlotVecError` with code ``INDEX_OUT_OF_BOUNDS`` or
        ``SLOT_VACANT``; the collection is left untouched in both cases.
        """
        index = self._check_occupied(index)
        value = cast(T, self._storage[index])
        self._storage[index] = VACANT

        self._occupancy = after_remove(self._occupancy)
        self._version += 1
        self._dbg("removed from %d, occupancy %r", index, self._occupancy)
        return value

    def get(self, index: int, default: Optional[D] = None) -> Union[T, D, None]:
        """Value at `index`, or `default` if the slot is vacant or out of range."""
        index = operator.index(index)
        if index < 0 or index >= len(self._storage):
            return default
        slot = self._storage[index]
        if slot is VACANT:
            return default
        return cast(T, slot)

    def slot(self, index: int) -> Optional[SlotRef[T]]:
        """Writable handle to the occupied slot at `index`, or `None`."""
        index = operator.index(index)
        if index < 0 or index >= len(self._storage):
            return None
        if self._storage[index] is VACANT:
            return None
        return SlotRef(self, index)

    def __getitem__(self, index: int) -> T:
        index = self._check_occupied(index)
        return cast(T, self._storage[index])

    def __setitem__(self, index: int, value: T) -> None:
        index = self._check_occupied(index)
        self._storage[index] = value

    def __delitem__(self, index: int) -> None:
        self.remove(index)

    def _check_occupied(self, index: int) -> int:
        index = operator.index(index)
        if index < 0 or index >= len(self._storage):
            raise SlotVecError(
                f"{describe_index(index, len(self._storage))} is out of bounds",
                "INDEX_OUT_OF_BOUNDS",
            )
        if self._storage[index] is VACANT:
            raise SlotVecError(
                f"{describe_index(index, len(self._storage))} is vacant",
                "SLOT_VACANT",
            )
        return index

    def __iter__(self) -> Iter[T]:
        return Iter(self)

    def __reversed__(self) -> RevIter[T]:
        return RevIter(self)

    def items(self) -> ItemsIter[T]:
        """Iterate over ``(index, value)`` pairs of the occupied slots."""
        return ItemsIter(self)

    def iter_mut(self) -> IterMut[T]:
        return IterMut(self)

    def drain(self) -> IntoIter[T]:
        """Hand the storage over to a one-shot iterator.

        The collection is reset to its initial empty state right away; the
        returned iterator yields the values that were stored, in index order.
        """
        storage = self._storage
        self._storage = []
        self._occupancy = Empty()
        self._version += 1
        self._dbg("drained %d slots", len(storage))
        return IntoIter(storage)

    def __copy__(self) -> SlotVec[T]:
        # the copy gets its own storage; occupancy states are immutable
        other: SlotVec[T] = self.__class__()
        other._storage = list(self._storage)
        other._occupancy = self._occupancy
        return other

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}({self._storage!r})"
