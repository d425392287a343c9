import pytest

from antsim.world import (
    ColonyCell,
    Mode,
    World,
    WorldGrid,
    compute_distance,
    min_dist,
)


@pytest.fixture
def world():
    return World(40, 40, 4)


def test_grid_dimensions_in_cells(world):
    assert (world.map.width, world.map.height) == (10, 10)
    assert world.size == (40.0, 40.0)


def test_border_is_walled(world):
    assert world.map.get((0, 5)).wall == 1
    assert world.map.get((9, 9)).wall == 1
    assert world.map.get((5, 5)).wall == 0


def test_float_coords_map_to_cells(world):
    assert world.map.get((21.5, 22.0)) is world.map.get((5, 5))


def test_get_outside_raises(world):
    with pytest.raises(IndexError):
        world.map.get((10, 0))
    assert world.map.get_safe((-1, 0)) is None
    assert world.map.check_coords((-1.0, 3.0)) is False


def test_add_and_remove_wall(world):
    world.add_wall((20.0, 20.0))
    assert world.map.get((5, 5)).wall == 1
    world.remove_wall((20.0, 20.0))
    assert world.map.get((5, 5)).wall == 0


def test_add_wall_clears_food_and_markers(world):
    world.add_food_at(20.0, 20.0, 2)
    world.add_wall((20.0, 20.0))
    cell = world.map.get((5, 5))
    assert cell.food == 0
    assert all(c.intensity[Mode.TO_FOOD] == 0.0 for c in cell.markers)


def test_food_marker_is_permanent_for_all_colonies(world):
    world.add_food_at(20.0, 20.0, 2)
    cell = world.map.get((5, 5))
    assert cell.food == 2
    assert all(c.permanent and c.intensity[Mode.TO_FOOD] == 1.0 for c in cell.markers)


def test_pick_food_reports_exhaustion(world):
    world.add_food_at(20.0, 20.0, 2)
    assert world.map.is_on_food((20.0, 20.0))
    assert world.map.pick_food((20.0, 20.0)) is False
    assert world.map.pick_food((20.0, 20.0)) is True
    assert not world.map.is_on_food((20.0, 20.0))


def test_marker_fades_with_update(world):
    world.add_marker((20.0, 20.0), Mode.TO_HOME, 8000.0, 0)
    before = world.map.get((5, 5)).markers[0].intensity[Mode.TO_HOME]
    world.update(1.0)
    after = world.map.get((5, 5)).markers[0].intensity[Mode.TO_HOME]
    assert before == 8000.0
    assert after < before


def test_marker_invalid_mode_rejected(world):
    with pytest.raises(ValueError):
        world.add_marker((20.0, 20.0), Mode.DEAD, 1.0, 0)


def test_repellent_accumulates(world):
    world.add_marker_repellent((20.0, 20.0), 1, 300.0)
    world.add_marker_repellent((20.0, 20.0), 1, 300.0)
    assert world.map.get((5, 5)).markers[1].repellent == 600.0


def test_clear_markers_only_affects_colony(world):
    world.add_marker((20.0, 20.0), Mode.TO_HOME, 5.0, 0)
    world.add_marker((20.0, 20.0), Mode.TO_HOME, 5.0, 1)
    world.clear_markers(0)
    markers = world.map.get((5, 5)).markers
    assert markers[0].intensity[Mode.TO_HOME] == 0.0
    assert markers[1].intensity[Mode.TO_HOME] == 5.0


def test_colony_cell_clear():
    cell = ColonyCell()
    cell.intensity[0] = 3.0
    cell.repellent = 2.0
    cell.permanent = True
    cell.clear()
    assert cell.intensity == [0.0, 0.0, 0.0]
    assert cell.repellent == 0.0 and cell.permanent is False


def test_clear_cell(world):
    world.add_wall_cell((4, 4))
    world.map.clear_cell((4, 4))
    assert world.map.get((4, 4)).wall == 0


def test_first_hit_finds_border(world):
    hit = world.map.first_hit((20.0, 20.0), (1.0, 0.0), 100.0)
    assert hit.cell is world.map.get((9, 5))
    assert hit.normal[0] < 0.0 and hit.normal[1] == 0.0


def test_first_hit_none_when_short(world):
    hit = world.map.first_hit((20.0, 20.0), (1.0, 0.0), 1.0)
    assert hit.cell is None


def test_min_dist_open_cell_is_one(world):
    assert min_dist(5, 5, world.map, True, 3) == 1.0


def test_compute_distance_ranges(world):
    compute_distance(world.map)
    border = world.map.get((0, 5)).wall_dist
    inner = world.map.get((1, 5)).wall_dist
    assert 0.0 < border <= 1.0
    assert 0.0 < inner < 1.0
    assert world.map.get((5, 5)).wall_dist == 1.0


def test_grid_rejects_bad_cell_size():
    with pytest.raises(ValueError):
        WorldGrid(10, 10, 0)