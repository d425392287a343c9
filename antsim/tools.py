"""Editing brushes that paint walls or food onto the world, or erase them."""

from enum import Enum
from typing import Callable, List, Optional, Tuple

from antsim.world import World

Vec2 = Tuple[float, float]


class Tool(Enum):
    BRUSH_WALL = "wall"
    BRUSH_FOOD = "food"
    BRUSH_DELETE = "delete"


def _trunc_div(a: int, b: int) -> int:
    q = abs(a) // abs(b)
    return q if (a >= 0) == (b > 0) else -q


class ToolSelector:
    """Holds the current brush and applies it to the world in edit mode.

    ``on_walls_changed`` is called whenever walls may have changed, so that
    derived data such as the wall distance field can be rebuilt.
    """

    def __init__(
        self,
        world: World,
        on_walls_changed: Optional[Callable[[], None]] = None,
        brush_size: int = 3,
    ) -> None:
        self.world = world
        self.on_walls_changed = on_walls_changed or (lambda: None)
        self.brush_size = brush_size
        self.current_tool = Tool.BRUSH_WALL
        self.edit_mode = False

    def select(self, tool: Tool) -> None:
        self.current_tool = tool

    def set_edit_mode(self, enabled: bool) -> None:
        self.edit_mode = enabled

    def brush_cells(self, mouse_position: Vec2) -> List[Tuple[int, int]]:
        """Cells covered by the brush centred under ``mouse_position``.

        The outer border of the grid is never included.
        """
        grid = self.world.map
        x = _trunc_div(int(mouse_position[0]), grid.cell_size)
        y = _trunc_div(int(mouse_position[1]), grid.cell_size)
        min_x = max(1, x - self.brush_size)
        max_x = min(grid.width - 1, x + self.brush_size + 1)
        min_y = max(1, y - self.brush_size)
        max_y = min(grid.height - 1, y + self.brush_size + 1)
        return [(px, py) for px in range(min_x, max_x) for py in range(min_y, max_y)]

    def apply(self, mouse_position: Vec2) -> List[Tuple[int, int]]:
        """Paint with the current tool; returns the cells touched.

        Outside edit mode nothing happens and an empty list is returned.
        """
        if not self.edit_mode:
            return []
        cells = self.brush_cells(mouse_position)
        if self.current_tool is Tool.BRUSH_WALL:
            for coords in cells:
                self.world.add_wall_cell(coords)
        elif self.current_tool is Tool.BRUSH_FOOD:
            for coords in cells:
                self.world.add_food_at_cell(coords, 2)
        else:
            for coords in cells:
                self.world.map.clear_cell(coords)
            self.on_walls_changed()
        return cells

    def end_action(self) -> None:
        """Finish a stroke; wall and erase brushes report wall changes."""
        if self.edit_mode and self.current_tool in (Tool.BRUSH_WALL, Tool.BRUSH_DELETE):
            self.on_walls_changed()