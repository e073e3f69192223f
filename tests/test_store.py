import pytest

from onde_estou.errors import ValidationError
from onde_estou.model.models import Coordinate
from onde_estou.model.store import MarkerStore

HOME = Coordinate(10.0, 20.0)


def test_add_appends_marker_with_submitted_fields(store):
    m = store.add(HOME, "Home", "where I live")

    assert len(store) == 1
    assert store.list() == (m,)
    assert m.coordinate == HOME
    assert m.title == "Home"
    assert m.description == "where I live"
    assert m.created_at == "17/05/2024, 09:30:15"


@pytest.mark.parametrize("title", ["", "   ", "\t\n"])
def test_add_rejects_blank_title(store, title):
    with pytest.raises(ValidationError):
        store.add(HOME, title)
    assert len(store) == 0


def test_ids_unique_when_created_in_same_millisecond(store):
    ids = [store.add(HOME, f"m{i}").id for i in range(50)]
    assert len(set(ids)) == 50


def test_ids_stay_unique_after_removal(store):
    first = store.add(HOME, "a")
    store.remove(first.id)
    second = store.add(HOME, "b")
    assert second.id != first.id


def test_list_preserves_insertion_order(store):
    titles = ["a", "b", "c"]
    for t in titles:
        store.add(HOME, t)
    assert [m.title for m in store.list()] == titles


def test_list_is_a_snapshot(store):
    snapshot = store.list()
    store.add(HOME, "later")
    assert snapshot == ()


def test_remove_only_the_matching_marker(store):
    a = store.add(HOME, "a")
    b = store.add(HOME, "b")
    c = store.add(HOME, "c")

    assert store.remove(b.id) is True
    assert store.list() == (a, c)
    assert b.id not in store
    assert store.get(b.id) is None


def test_remove_unknown_id_is_noop(store):
    a = store.add(HOME, "a")
    assert store.remove("does-not-exist") is False
    assert store.list() == (a,)


def test_marker_is_immutable(store):
    m = store.add(HOME, "a")
    with pytest.raises(AttributeError):
        m.coordinate = Coordinate(0.0, 0.0)


def test_default_clock_produces_timestamp():
    m = MarkerStore().add(HOME, "now")
    assert m.created_at
    assert m.id.isdigit()


@pytest.mark.parametrize("lat,lon", [(91.0, 0.0), (-90.5, 0.0), (0.0, 180.1)])
def test_coordinate_range_checked(lat, lon):
    with pytest.raises(ValueError):
        Coordinate(lat, lon)
