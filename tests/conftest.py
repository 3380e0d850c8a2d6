import pytest

import slotvec


@pytest.fixture
def vec():
    return slotvec.SlotVec()


@pytest.fixture
def abc_vec():
    v = slotvec.SlotVec()
    for value in ("a", "b", "c"):
        v.insert(value)
    return v


@pytest.fixture
def holey_vec():
    # [1, <vacant>, 3, <vacant>, 5]
    v = slotvec.SlotVec([1, 2, 3, 4, 5])
    v.remove(1)
    v.remove(3)
    return v
