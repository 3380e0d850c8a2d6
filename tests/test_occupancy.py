import pytest

from slotvec import Empty, Full, PartiallyFull, kind, watermark
from slotvec.occupancy import after_insert, after_remove


def test_empty_counters():
    assert Empty().count == 0
    assert Empty().free == 0
    assert watermark(Empty()) == 0


def test_full_counters():
    assert Full(4).count == 4
    assert Full(4).free == 0
    assert watermark(Full(4)) == 4


def test_partially_full_counters():
    state = PartiallyFull(3, 2)
    assert state.count == 3
    assert state.free == 2
    assert watermark(state) == 5


def test_insert_transitions():
    assert after_insert(Empty()) == Full(1)
    assert after_insert(Full(3)) == Full(4)
    assert after_insert(PartiallyFull(3, 2)) == PartiallyFull(4, 1)
    assert after_insert(PartiallyFull(3, 1)) == Full(4)


def test_remove_transitions():
    assert after_remove(Full(3)) == PartiallyFull(2, 1)
    assert after_remove(PartiallyFull(2, 1)) == PartiallyFull(1, 2)


def test_remove_last_does_not_return_to_empty():
    assert after_remove(PartiallyFull(1, 4)) == PartiallyFull(0, 5)
    assert after_remove(Full(1)) == PartiallyFull(0, 1)


def test_remove_from_empty_is_a_bug():
    with pytest.raises(AssertionError):
        after_remove(Empty())


def test_transitions_preserve_watermark_growth():
    state = Full(2)
    assert watermark(after_remove(state)) == watermark(state)
    assert watermark(after_insert(state)) == watermark(state) + 1
    partial = PartiallyFull(2, 2)
    assert watermark(after_insert(partial)) == watermark(partial)


def test_kind():
    assert kind(Empty()) == "empty"
    assert kind(Full(1)) == "full"
    assert kind(PartiallyFull(0, 1)) == "partially_full"


def test_states_are_immutable():
    with pytest.raises(AttributeError):
        Full(1).count = 2  # type: ignore[misc]


def test_unknown_state_rejected():
    with pytest.raises(TypeError):
        after_insert("full")  # type: ignore[arg-type]
    with pytest.raises(TypeError):
        after_remove(3)  # type: ignore[arg-type]
