"""A colony: its base, its ants and its population bookkeeping."""

import math
import random
from collections import deque
from dataclasses import dataclass
from typing import Deque, List, Optional, Tuple

from antsim.ant import Ant, AntType
from antsim.cooldown import Cooldown
from antsim.index_vector import IndexVector, Ref
from antsim.world import FightMode, World

Vec2 = Tuple[float, float]
Color = Tuple[int, int, int, int]

WHITE: Color = (255, 255, 255, 255)


@dataclass
class ColonyBase:
    """The nest: where food is stored and new ants are born."""

    position: Vec2
    radius: float
    food: float = 0.0
    max_food: float = 1000.0
    enemies_found_count: int = 0

    def add_food(self, amount: float) -> None:
        self.food += amount

    def use_food(self, amount: float) -> bool:
        """Spend ``amount`` of food if enough is stored."""
        if self.food < amount:
            return False
        self.food -= amount
        return True


class PopulationDiff:
    """Change between the oldest and newest of the last ``window`` samples."""

    def __init__(self, window: int) -> None:
        if window <= 0:
            raise ValueError("window must be positive")
        self._values: Deque[int] = deque(maxlen=window)

    def add_value(self, value: int) -> None:
        self._values.append(value)

    def get(self) -> int:
        if not self._values:
            return 0
        return self._values[-1] - self._values[0]


class Colony:
    """A colony base with its ants."""

    def __init__(
        self,
        x: float = 0.0,
        y: float = 0.0,
        max_ants_count: int = 0,
        rng: Optional[random.Random] = None,
    ) -> None:
        self._rng = rng if rng is not None else random.Random()
        self.base = ColonyBase((float(x), float(y)), 20.0)
        self.max_ants_count = max_ants_count
        self.ants: IndexVector[Ant] = IndexVector()
        self.ants_creation_cooldown = Cooldown(0.125)
        self.pop_diff_update = Cooldown(1.0)
        self.pop_diff = PopulationDiff(60)
        self.id = 0
        self.ants_color: Color = WHITE
        self.ant_creation_id = 0
        self.color_changed = False
        self.position_changed = False

    def initialize(self, colony_id: int, count: int = 1000) -> None:
        """Set the colony id, empty the food store and spawn ``count`` workers."""
        self.id = colony_id
        self.base.food = 0.0
        for _ in range(count):
            self.create_worker()

    def set_position(self, position: Vec2) -> None:
        """Move the base and every ant onto ``position``."""
        self.position_changed = True
        self.base.position = (float(position[0]), float(position[1]))
        for ant in self.ants:
            ant.position = self.base.position

    def create_worker(self) -> Ant:
        self.ant_creation_id += 1
        x, y = self.base.position
        ant = Ant(x, y, self._rng.random() * 2.0 * math.pi, self.id, rng=self._rng)
        ant_id = self.ants.append(ant)
        ant.id = ant_id & 0xFFFF
        ant.type = AntType.WORKER
        return ant

    def specialize_soldier(self, ant: Ant) -> None:
        """Turn ``ant`` into a larger, stronger soldier."""
        self.base.enemies_found_count -= 1
        scale = 2.0
        ant.type = AntType.SOLDIER
        ant.length *= scale
        ant.width *= scale
        ant.damage *= scale * 2.0
        ant.max_autonomy *= scale

    def must_create_soldier(self) -> bool:
        return bool(self.base.enemies_found_count) and self.ant_creation_id % 5 == 0

    def is_not_full(self) -> bool:
        return len(self.ants) < self.max_ants_count

    def create_new_ants(self, dt: float) -> None:
        ant_cost = 4.0
        if self.ants_creation_cooldown.update_auto_reset(dt) and self.is_not_full():
            if self.must_create_soldier():
                if self.base.use_food(3.0 * ant_cost):
                    self.specialize_soldier(self.create_worker())
            elif self.base.use_food(ant_cost):
                self.create_worker()

    def update(self, dt: float, world: World) -> None:
        if self.pop_diff_update.update_auto_reset(dt):
            self.pop_diff.add_value(len(self.ants))
        self.create_new_ants(dt)
        for ant in list(self.ants):
            ant.step(world, dt)
            ant.check_colony(self.base)

    def remove_dead_ants(self) -> None:
        for ant_id in [ant.id for ant in self.ants if ant.is_dead()]:
            self.ants.erase(ant_id)

    def kill_weak_ants(self, world: World) -> int:
        """Kill every ant that ran out of autonomy; return how many."""
        count = 0
        for ant in self.ants:
            if ant.is_done():
                ant.kill(world)
                count += 1
        return count

    def soldiers_count(self) -> int:
        return sum(1 for ant in self.ants if ant.type is AntType.SOLDIER)

    def set_color(self, color: Color) -> None:
        self.ants_color = color
        self.color_changed = True

    def stop_fights_with(self, colony_id: int) -> None:
        """End fights and drop targets belonging to colony ``colony_id``."""
        for ant in self.ants:
            if ant.target:
                ant.fight_mode = FightMode.NO_FIGHT
                if ant.target.get().col_id == colony_id:
                    ant.target = Ref()