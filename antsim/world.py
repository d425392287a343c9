"""The world grid: walls, food, pheromone markers, and wall distances."""

import math
from dataclasses import dataclass, field
from enum import Enum, IntEnum
from typing import List, Optional, Sequence, Tuple

from antsim.config import MAX_COLONIES_COUNT

Vec2 = Tuple[float, float]

_MARKER_KINDS = 3


class Mode(IntEnum):
    """What an ant is doing; the first three also index marker kinds."""

    TO_FOOD = 0
    TO_HOME = 1
    TO_ENEMY = 2
    REFILL = 3
    TO_HOME_NO_FOOD = 4
    DEAD = 5


class FightMode(Enum):
    NO_FIGHT = "no_fight"
    TO_FIGHT = "to_fight"
    FIGHTING = "fighting"


@dataclass
class ColonyCell:
    """Markers and occupancy of one cell as seen by one colony."""

    intensity: List[float] = field(default_factory=lambda: [0.0] * _MARKER_KINDS)
    repellent: float = 0.0
    permanent: bool = False
    current_ant: int = -1
    fighting: bool = False

    def clear(self) -> None:
        """Remove every marker left by the colony."""
        self.intensity = [0.0] * _MARKER_KINDS
        self.repellent = 0.0
        self.permanent = False


@dataclass
class WorldCell:
    markers: List[ColonyCell] = field(
        default_factory=lambda: [ColonyCell() for _ in range(MAX_COLONIES_COUNT)]
    )
    food: int = 0
    wall: int = 0
    wall_dist: float = 0.0
    density: float = 0.0


@dataclass(frozen=True)
class HitPoint:
    """Result of a ray cast: the wall cell hit, if any, and its face normal."""

    cell: Optional[WorldCell] = None
    normal: Vec2 = (0.0, 0.0)
    distance: float = 0.0


class WorldGrid:
    """Grid of square cells covering a world of ``width`` x ``height`` units.

    Coordinates given as a pair of ints are cell coordinates; any other pair
    is a position in world units.
    """

    def __init__(self, width: int, height: int, cell_size: int) -> None:
        if cell_size <= 0:
            raise ValueError("cell_size must be positive")
        self.cell_size = cell_size
        self.width = width // cell_size
        self.height = height // cell_size
        self.cells: List[WorldCell] = [WorldCell() for _ in range(self.width * self.height)]

    def _cell_coords(self, coords: Sequence) -> Tuple[int, int]:
        x, y = coords
        if isinstance(x, int) and isinstance(y, int):
            return x, y
        return int(math.floor(x / self.cell_size)), int(math.floor(y / self.cell_size))

    def check_coords(self, coords: Sequence) -> bool:
        x, y = self._cell_coords(coords)
        return 0 <= x < self.width and 0 <= y < self.height

    def get(self, coords: Sequence) -> WorldCell:
        """The cell at ``coords``; raises ``IndexError`` outside the grid."""
        x, y = self._cell_coords(coords)
        if not (0 <= x < self.width and 0 <= y < self.height):
            raise IndexError(f"cell ({x}, {y}) outside the grid")
        return self.cells[y * self.width + x]

    def get_safe(self, coords: Sequence) -> Optional[WorldCell]:
        x, y = self._cell_coords(coords)
        if 0 <= x < self.width and 0 <= y < self.height:
            return self.cells[y * self.width + x]
        return None

    def add_marker(
        self,
        coords: Sequence,
        mode: Mode,
        intensity: float,
        colony_id: Optional[int] = None,
        permanent: bool = False,
    ) -> None:
        """Deposit a marker; with no ``colony_id`` it is laid for every colony."""
        if mode > Mode.TO_ENEMY:
            raise ValueError(f"{mode.name} does not leave markers")
        cell = self.get(coords)
        targets = cell.markers if colony_id is None else [cell.markers[colony_id]]
        for colony_cell in targets:
            colony_cell.intensity[mode] = max(colony_cell.intensity[mode], intensity)
            colony_cell.permanent = colony_cell.permanent or permanent

    def add_food(self, coords: Sequence, quantity: int) -> None:
        self.get(coords).food += quantity

    def is_on_food(self, position: Sequence) -> bool:
        cell = self.get_safe(position)
        return cell is not None and cell.food > 0

    def pick_food(self, position: Sequence) -> bool:
        """Take one unit of food; True when the cell is left empty."""
        cell = self.get(position)
        if cell.food <= 0:
            return False
        cell.food -= 1
        if cell.food:
            return False
        for colony_cell in cell.markers:
            colony_cell.permanent = False
            colony_cell.intensity[Mode.TO_FOOD] = 0.0
        return True

    def clear_cell(self, coords: Sequence) -> None:
        """Remove walls, food and markers from a cell."""
        cell = self.get(coords)
        cell.food = 0
        cell.wall = 0
        for colony_cell in cell.markers:
            colony_cell.clear()

    def first_hit(self, position: Vec2, direction: Vec2, max_dist: float) -> HitPoint:
        """First wall cell crossed by a ray from ``position`` within ``max_dist``."""
        cs = self.cell_size
        px, py = position[0] / cs, position[1] / cs
        dx, dy = direction
        cx, cy = int(math.floor(px)), int(math.floor(py))
        max_t = max_dist / cs

        def axis(p: float, c: int, d: float) -> Tuple[int, float, float]:
            if d > 0.0:
                return 1, (c + 1 - p) / d, 1.0 / d
            if d < 0.0:
                return -1, (p - c) / -d, -1.0 / d
            return 0, math.inf, math.inf

        step_x, t_max_x, t_delta_x = axis(px, cx, dx)
        step_y, t_max_y, t_delta_y = axis(py, cy, dy)
        while True:
            if t_max_x < t_max_y:
                t = t_max_x
                if t > max_t:
                    break
                cx += step_x
                t_max_x += t_delta_x
                normal = (float(-step_x), 0.0)
            else:
                t = t_max_y
                if t > max_t:
                    break
                cy += step_y
                t_max_y += t_delta_y
                normal = (0.0, float(-step_y))
            cell = self.get_safe((cx, cy))
            if cell is None:
                break
            if cell.wall:
                return HitPoint(cell, normal, t * cs)
        return HitPoint(None, (0.0, 0.0), max_dist)

    def update(self, dt: float) -> None:
        """Let markers fade and clear per-frame ant occupancy."""
        for cell in self.cells:
            cell.density = max(0.0, cell.density - dt)
            for colony_cell in cell.markers:
                if not colony_cell.permanent:
                    colony_cell.intensity = [max(0.0, v - dt) for v in colony_cell.intensity]
                colony_cell.repellent = max(0.0, colony_cell.repellent - dt)
                colony_cell.current_ant = -1
                colony_cell.fighting = False


class World:
    """The simulated terrain, enclosed by a border of walls."""

    def __init__(self, width: int, height: int, cell_size: int = 4) -> None:
        self.size: Vec2 = (float(width), float(height))
        self.map = WorldGrid(width, height, cell_size)
        last_x, last_y = self.map.width - 1, self.map.height - 1
        for x in range(self.map.width):
            for y in range(self.map.height):
                if x in (0, last_x) or y in (0, last_y):
                    self.map.get((x, y)).wall = 1

    def update(self, dt: float) -> None:
        self.map.update(dt)

    def add_marker(
        self,
        position: Vec2,
        mode: Mode,
        intensity: float,
        colony_id: int,
        permanent: bool = False,
    ) -> None:
        self.map.add_marker(position, mode, intensity, colony_id, permanent)

    def add_marker_repellent(self, position: Vec2, colony_id: int, amount: float) -> None:
        self.map.get(position).markers[colony_id].repellent += amount

    def _to_cell(self, x: float, y: float) -> Tuple[int, int]:
        cs = self.map.cell_size
        return int(x) // cs, int(y) // cs

    def add_wall(self, position: Vec2) -> None:
        self.add_wall_cell(self._to_cell(*position))

    def add_wall_cell(self, coords: Tuple[int, int]) -> None:
        if self.map.check_coords(coords):
            cell = self.map.get(coords)
            cell.food = 0
            cell.wall = 1
            for colony_cell in cell.markers:
                colony_cell.clear()

    def remove_wall(self, position: Vec2) -> None:
        if self.map.check_coords(position):
            self.map.get(position).wall = 0

    def add_food_at(self, x: float, y: float, quantity: int) -> None:
        self.add_food_at_cell(self._to_cell(x, y), quantity)

    def add_food_at_cell(self, coords: Tuple[int, int], quantity: int) -> None:
        if self.map.check_coords(coords):
            self.map.add_marker(coords, Mode.TO_FOOD, 1.0, permanent=True)
            self.map.add_food(coords, quantity)

    def clear_markers(self, colony_id: int) -> None:
        for cell in self.map.cells:
            cell.markers[colony_id].clear()
            cell.density = 0.0


def min_dist(x: int, y: int, grid: WorldGrid, dist_to_wall: bool, max_iteration: int) -> float:
    """Distance to the nearest wall (or non-wall) cell, scaled into [0, 1]."""
    best = float(max_iteration)
    for dx in range(-max_iteration, max_iteration + 1):
        for dy in range(-max_iteration, max_iteration + 1):
            cell = grid.get_safe((x + dx, y + dy))
            if cell is not None and bool(cell.wall) == dist_to_wall:
                best = min(best, math.hypot(dx, dy))
    return min(1.0, best / float(max_iteration))


def compute_distance(grid: WorldGrid) -> None:
    """Fill every cell's ``wall_dist``."""
    for x in range(grid.width):
        for y in range(grid.height):
            cell = grid.get((x, y))
            if cell.wall:
                cell.wall_dist = min_dist(x, y, grid, False, 20)
            else:
                cell.wall_dist = min_dist(x, y, grid, True, 3)