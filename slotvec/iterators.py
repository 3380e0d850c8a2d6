from __future__ import annotations

import itertools
from typing import cast
from typing import Generic
from typing import Iterator
from typing import List
from typing import Tuple
from typing import TYPE_CHECKING
from typing import TypeVar

from .slot import Slot
from .slot import SlotRef
from .slot import VACANT

if TYPE_CHECKING:
    from .slotvec import SlotVec

T = TypeVar("T")


def _next_occupied(storage: List[Slot[T]], pos: int) -> int:
    # Returns the first occupied index at or after `pos`, or -1 when the
    # watermark is reached.
    end = len(storage)
    while pos < end:
        if storage[pos] is not VACANT:
            return pos
        pos += 1
    return -1


def _prev_occupied(storage: List[Slot[T]], pos: int) -> int:
    while pos >= 0:
        if storage[pos] is not VACANT:
            return pos
        pos -= 1
    return -1


class _BorrowIter(Generic[T]):
    """Cursor over the occupied slots of a live `SlotVec`.

    Every step checks that the collection was not structurally modified
    since the traversal began.
    """

    _vec: SlotVec[T]
    _version: int
    _pos: int
    _done: bool
    __slots__ = ["_vec", "_version", "_pos", "_done"]

    def __init__(self, vec: SlotVec[T]) -> None:
        self._vec = vec
        self._version = vec._version
        self._pos = 0
        self._done = False

    def _next_index(self) -> int:
        if self._done:
            raise StopIteration
        if self._vec._version != self._version:
            self._done = True
            raise RuntimeError("SlotVec changed during iteration")

        index = self._seek(self._vec._storage)
        if index < 0:
            self._done = True
            raise StopIteration
        return index

    def _seek(self, storage: List[Slot[T]]) -> int:
        index = _next_occupied(storage, self._pos)
        # strictly forward: no slot is visited twice in one traversal
        self._pos = index + 1
        return index


class Iter(_BorrowIter[T], Iterator[T]):
    __slots__ = ()

    def __iter__(self) -> Iter[T]:
        return self

    def __next__(self) -> T:
        index = self._next_index()
        return cast(T, self._vec._storage[index])


class RevIter(_BorrowIter[T], Iterator[T]):
    """Values of the occupied slots, highest index first."""

    __slots__ = ()

    def __init__(self, vec: SlotVec[T]) -> None:
        super().__init__(vec)
        self._pos = len(vec._storage) - 1

    def __iter__(self) -> RevIter[T]:
        return self

    def __next__(self) -> T:
        index = self._next_index()
        return cast(T, self._vec._storage[index])

    def _seek(self, storage: List[Slot[T]]) -> int:
        index = _prev_occupied(storage, self._pos)
        self._pos = index - 1
        return index


class ItemsIter(_BorrowIter[T], Iterator[Tuple[int, T]]):
    __slots__ = ()

    def __iter__(self) -> ItemsIter[T]:
        return self

    def __next__(self) -> Tuple[int, T]:
        index = self._next_index()
        return index, cast(T, self._vec._storage[index])


class IterMut(_BorrowIter[T], Iterator[SlotRef[T]]):
    """Yields a `SlotRef` for every occupied slot, in ascending order.

    No two references yielded by one traversal point at the same slot.
    """

    __slots__ = ()

    def __iter__(self) -> IterMut[T]:
        return self

    def __next__(self) -> SlotRef[T]:
        index = self._next_index()
        return SlotRef(self._vec, index)


class IntoIter(Iterator[T]):
    """One-shot iterator that owns the storage it was given."""

    _storage: List[Slot[T]]
    _pos: int
    __slots__ = ["_storage", "_pos"]

    def __init__(self, storage: List[Slot[T]]) -> None:
        self._storage = storage
        self._pos = 0

    def __iter__(self) -> IntoIter[T]:
        return self

    def __next__(self) -> T:
        index = _next_occupied(self._storage, self._pos)
        if index < 0:
            # release the storage once the watermark is reached
            self._storage = []
            self._pos = 0
            raise StopIteration
        value = self._storage[index]
        self._storage[index] = VACANT
        self._pos = index + 1
        return cast(T, value)

    def __length_hint__(self) -> int:
        return sum(
            1
            for slot in itertools.islice(self._storage, self._pos, None)
            if slot is not VACANT
        )
