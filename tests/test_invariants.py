import random

import pytest

import slotvec
from slotvec import Full, PartiallyFull, kind, watermark


def _check(v, model):
    state = v.occupancy
    assert len(v) == len(model)
    assert v.is_empty() == (not model)
    assert watermark(state) == v.watermark
    if isinstance(state, Full):
        assert sorted(model) == list(range(v.watermark))
    elif isinstance(state, PartiallyFull):
        assert state.free >= 1
    assert list(v.items()) == sorted(model.items())
    assert list(v) == [model[i] for i in sorted(model)]


@pytest.mark.parametrize("seed", range(20))
def test_random_operations(seed):
    rng = random.Random(seed)
    v = slotvec.SlotVec()
    model = {}
    high_water = 0

    for step in range(300):
        if model and rng.random() < 0.45:
            index = rng.choice(sorted(model))
            assert v.remove(index) == model.pop(index)
        else:
            vacant = [i for i in range(high_water) if i not in model]
            expected = vacant[0] if vacant else high_water
            index = v.insert(step)
            assert index == expected
            model[index] = step
            high_water = max(high_water, index + 1)

        assert v.watermark == high_water
        _check(v, model)


@pytest.mark.parametrize("seed", range(5))
def test_random_rejected_removes_leave_state(seed):
    rng = random.Random(seed)
    v = slotvec.SlotVec(range(8))
    for index in rng.sample(range(8), 4):
        v.remove(index)
    before = (v.occupancy, repr(v))

    for index in list(range(-2, 12)):
        if v.get(index) is None:
            with pytest.raises(slotvec.SlotVecError):
                v.remove(index)
            assert (v.occupancy, repr(v)) == before


def test_every_kind_is_reached(vec):
    seen = {kind(vec.occupancy)}
    vec.insert(1)
    seen.add(kind(vec.occupancy))
    vec.insert(2)
    vec.remove(0)
    seen.add(kind(vec.occupancy))
    assert seen == {"empty", "full", "partially_full"}
