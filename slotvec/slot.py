from __future__ import annotations

from typing import cast
from typing import Generic
from typing import TYPE_CHECKING
from typing import TypeVar
from typing import Union

if TYPE_CHECKING:
    from .slotvec import SlotVec

T = TypeVar("T")


class _Vacant:
    __slots__ = ()

    def __repr__(self) -> str:
        return "<vacant>"

    def __reduce__(self) -> str:
        # copies and unpickled storage must keep pointing at the one sentinel
        return "VACANT"


# Marks a vacant slot; compared by identity, so `None` stays a valid element
VACANT = _Vacant()

Slot = Union[T, _Vacant]


class SlotRef(Generic[T]):
    """Exclusive handle to one occupied slot of a `SlotVec`.

    The value can be read and assigned through the handle. The handle is
    valid until the collection is structurally modified (an insert, a remove
    or a drain); after that every access raises `RuntimeError`. Assigning a
    value is not a structural modification.
    """

    _vec: SlotVec[T]
    _index: int
    _version: int
    __slots__ = ["_vec", "_index", "_version"]

    def __init__(self, vec: SlotVec[T], index: int) -> None:
        self._vec = vec
        self._index = index
        self._version = vec._version

    @property
    def index(self) -> int:
        return self._index

    @property
    def value(self) -> T:
        self._check_live()
        return cast(T, self._vec._storage[self._index])

    @value.setter
    def value(self, value: T) -> None:
        self._check_live()
        self._vec._storage[self._index] = value

    def _check_live(self) -> None:
        if self._vec._version != self._version:
            raise RuntimeError(
                f"SlotVec changed since the reference to slot {self._index} was taken"
            )

    def __repr__(self) -> str:
        return f"SlotRef(index={self._index})"
