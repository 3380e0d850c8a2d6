from .errors import SlotVecError
from .iterators import IntoIter, ItemsIter, Iter, IterMut, RevIter
from .occupancy import (
    Empty, Full, PartiallyFull,
    Occupancy, OccupancyKind,
    kind, watermark,
)
from .slot import SlotRef
from .slotvec import SlotVec
