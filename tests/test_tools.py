from antsim.tools import Tool, ToolSelector
from antsim.world import Mode, World


def make_selector():
    calls = []
    world = World(100, 100)
    selector = ToolSelector(world, on_walls_changed=lambda: calls.append(1))
    return world, selector, calls


def test_default_tool_is_wall():
    _, selector, _ = make_selector()
    assert selector.current_tool is Tool.BRUSH_WALL
    assert selector.edit_mode is False


def test_apply_outside_edit_mode_does_nothing():
    world, selector, calls = make_selector()
    assert selector.apply((40.0, 40.0)) == []
    assert world.map.get((10, 10)).wall == 0
    selector.end_action()
    assert calls == []


def test_brush_covers_square():
    _, selector, _ = make_selector()
    cells = selector.brush_cells((40.0, 40.0))
    side = 2 * selector.brush_size + 1
    assert len(cells) == side * side
    assert (10, 10) in cells
    assert len(set(cells)) == len(cells)


def test_brush_clamped_to_interior():
    world, selector, _ = make_selector()
    for pos in ((0.0, 0.0), (99.0, 99.0), (-20.0, 50.0)):
        for x, y in selector.brush_cells(pos):
            assert 1 <= x < world.map.width - 1
            assert 1 <= y < world.map.height - 1


def test_wall_brush():
    world, selector, calls = make_selector()
    selector.set_edit_mode(True)
    cells = selector.apply((40.0, 40.0))
    assert all(world.map.get(c).wall == 1 for c in cells)
    selector.end_action()
    assert len(calls) == 1


def test_food_brush():
    world, selector, calls = make_selector()
    selector.set_edit_mode(True)
    selector.select(Tool.BRUSH_FOOD)
    cells = selector.apply((40.0, 40.0))
    for c in cells:
        cell = world.map.get(c)
        assert cell.food == 2
        assert cell.markers[0].intensity[Mode.TO_FOOD] == 1.0
    selector.end_action()
    assert calls == []


def test_delete_brush_clears_walls():
    world, selector, calls = make_selector()
    selector.set_edit_mode(True)
    selector.apply((40.0, 40.0))
    selector.select(Tool.BRUSH_DELETE)
    cells = selector.apply((40.0, 40.0))
    assert all(world.map.get(c).wall == 0 for c in cells)
    assert len(calls) == 1
    selector.end_action()
    assert len(calls) == 2


def test_border_walls_survive_delete():
    world, selector, _ = make_selector()
    selector.set_edit_mode(True)
    selector.select(Tool.BRUSH_DELETE)
    selector.apply((0.0, 0.0))
    assert world.map.get((0, 0)).wall == 1
    assert world.map.get((0, 2)).wall == 1