import pytest

from antsim.graph import Graphic


def make(count=4):
    return Graphic(count, (40.0, 100.0), (10.0, 20.0))


def test_add_value_tracks_last_and_max():
    g = make()
    g.add_value(3.0)
    g.add_value(1.0)
    assert g.last_value == 1.0
    assert g.max_value == 3.0
    assert g.values[:2] == [3.0, 1.0]


def test_full_after_filling():
    g = make(3)
    for v in (1.0, 2.0):
        g.add_value(v)
    assert not g.full
    g.add_value(3.0)
    assert g.full


def test_next_wraps():
    g = make(2)
    g.next()
    assert not g.full
    g.next()
    assert g.full
    assert g.current_index == 0


def test_set_last_value_overwrites_current_slot():
    g = make()
    g.next()
    g.set_last_value(7.0)
    g.set_last_value(5.0)
    assert g.values[1] == 5.0
    assert g.max_value == 7.0


def test_vertices_layout():
    g = make(4)
    for v in (1.0, 5.0, 2.0, 0.0):
        g.add_value(v)
    g.full = False
    pts = g.vertices()
    assert len(pts) == 2 * len(g.values)
    bottoms = pts[0::2]
    tops = pts[1::2]
    assert all(y == g.y + g.height for _, y in bottoms)
    assert [x for x, _ in bottoms] == [x for x, _ in tops]
    assert bottoms[0][0] == g.x
    assert tops[1][1] == pytest.approx(g.y)
    assert tops[3][1] == pytest.approx(g.y + g.height)


def test_vertices_all_zero_stay_on_bottom():
    g = make(3)
    pts = g.vertices()
    assert all(y == g.y + g.height for _, y in pts)


def test_invalid_count():
    with pytest.raises(ValueError):
        Graphic(0, (1.0, 1.0), (0.0, 0.0))