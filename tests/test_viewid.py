import pytest

from reactui.viewid import ViewId, hh


def test_default_view_id():
    assert ViewId().is_default()
    assert ViewId(0) == ViewId()
    assert not ViewId(3).is_default()


def test_access_id_matches_id():
    assert ViewId(42).access_id() == 42


def test_access_id_of_default_raises():
    with pytest.raises(ValueError):
        ViewId().access_id()


def test_view_ids_are_hashable_keys():
    table = {ViewId(1): "a", ViewId(2): "b"}
    assert table[ViewId(1)] == "a"
    assert len(table) == 2


@pytest.mark.parametrize("value", [0, 7, -1, "label", (1, 2, 3)])
def test_hh_is_deterministic_and_u64(value):
    first = hh(value)
    assert first == hh(value)
    assert 0 <= first < 2**64


def test_hh_distinguishes_values():
    results = {hh(i) for i in range(100)}
    assert len(results) == 100


def test_hh_rejects_unhashable():
    with pytest.raises(TypeError):
        hh([1, 2])