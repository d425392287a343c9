"""A single ant: movement, foraging, marking and fighting."""

import math
import random
from enum import Enum
from typing import Any, List, Optional, Tuple

from antsim.config import Config
from antsim.cooldown import Cooldown
from antsim.index_vector import Ref
from antsim.world import FightMode, Mode, World

Vec2 = Tuple[float, float]

PI = math.pi
MARKER_INTENSITY = Config().marker_intensity


def marker_intensity(coef: float, count: float) -> float:
    """Marker strength decaying exponentially with elapsed time ``count``."""
    return MARKER_INTENSITY * math.exp(-coef * count)


def _normalized(v: Vec2) -> Vec2:
    length = math.hypot(v[0], v[1])
    if length == 0.0:
        return (0.0, 0.0)
    return (v[0] / length, v[1] / length)


class AntType(Enum):
    WORKER = "worker"
    SOLDIER = "soldier"


class Direction:
    """A heading stored as an angle in radians."""

    def __init__(self, angle: float = 0.0) -> None:
        self.angle = angle

    def vec(self) -> Vec2:
        return (math.cos(self.angle), math.sin(self.angle))

    def set_vec(self, v: Vec2) -> None:
        self.angle = math.atan2(v[1], v[0])

    def add(self, angle: float) -> None:
        self.angle += angle


class Ant:
    move_speed = 40.0
    marker_detection_max_dist = 40.0
    direction_update_period = 0.25
    marker_period = 0.25
    direction_noise_range = PI * 0.02
    repellent_period = 128.0

    def __init__(
        self,
        x: float = 0.0,
        y: float = 0.0,
        angle: float = 0.0,
        colony_id: int = 0,
        rng: Optional[random.Random] = None,
    ) -> None:
        self._rng = rng if rng is not None else random.Random()
        self.width = 3.0
        self.length = 4.7
        self.phase = Mode.TO_FOOD
        self.hits = 0
        self.position: Vec2 = (float(x), float(y))
        self.direction = Direction(angle)

        self.fight_mode = FightMode.NO_FIGHT
        self.damage = 10.0
        self.fight_dist = self.length * 0.25
        self.target: Ref = Ref()
        self.fight_pos: Vec2 = (0.0, 0.0)
        self.fight_vec: Vec2 = (0.0, 0.0)
        self.enemy_found = False
        self.enemy_intensity = 0.0
        self.to_fight_timeout = 1.0
        self.to_fight_time = 0.0
        self.fight_request: Optional[Any] = None

        self.attack_cooldown = Cooldown(1.5, 0.0)
        self.direction_update = Cooldown(
            self.direction_update_period, self._rng.random() * self.direction_update_period
        )
        self.marker_add = Cooldown(self.marker_period, self._rng.random() * self.marker_period)
        self.search_markers = Cooldown(5.0, 5.0)
        self.internal_clock = 0.0
        self.to_enemy_markers_count = 0.0
        self.max_autonomy = 300.0
        self.liberty_coef = self._rng.uniform(0.001, 0.01)
        self.autonomy = 0.0

        self.id = 0
        self.col_id = colony_id
        self.type = AntType.WORKER

    def add_to_world_grid(self, world: World) -> None:
        cell = world.map.get_safe(self.position)
        if cell is None:
            self.terminate()
            return
        colony_cell = cell.markers[self.col_id]
        if not colony_cell.fighting:
            colony_cell.current_ant = self.id
            colony_cell.fighting = self.is_fighting()

    def remove_from_world_grid(self, world: World) -> None:
        cell = world.map.get_safe(self.position)
        if cell is None:
            return
        colony_cell = cell.markers[self.col_id]
        if colony_cell.current_ant == self.id:
            colony_cell.current_ant = -1

    def is_fighting(self) -> bool:
        return self.fight_mode is FightMode.FIGHTING

    def attack(self, dt: float) -> None:
        if self.target:
            opponent = self.target.get()
            reach = 0.5 * self.length + self.attack_cooldown.ratio() * self.fight_dist
            self.position = (
                self.fight_pos[0] - self.fight_vec[0] * reach,
                self.fight_pos[1] - self.fight_vec[1] * reach,
            )
            self.attack_cooldown.update(dt)
            if self.attack_cooldown.ready():
                self.attack_cooldown.reset()
                opponent.autonomy += self.damage
        else:
            self.fight_mode = FightMode.NO_FIGHT
            if self.type is AntType.SOLDIER:
                self.autonomy = max(0.0, self.autonomy - 3.0)

    def update_position(self, world: World, dt: float) -> None:
        vx, vy = self.direction.vec()
        step = dt * self.move_speed
        hit = world.map.first_hit(self.position, (vx, vy), step)
        if hit.cell is not None:
            if self.hits > 4:
                self.terminate()
            else:
                if hit.normal[0] != 0.0:
                    vx = -vx
                if hit.normal[1] != 0.0:
                    vy = -vy
            self.hits += 1
            self.direction.set_vec((vx, vy))
        else:
            self.hits = 0
            x, y = self.position[0] + step * vx, self.position[1] + step * vy
            self.position = (x, y)
            width, height = world.size
            if x < 0.0 or x > width or y < 0.0 or y > height:
                self.terminate()

    def check_food(self, world: World) -> None:
        if world.map.is_on_food(self.position):
            self.phase = Mode.TO_HOME
            self.direction.add(PI)
            self.autonomy = 0.0
            self.internal_clock = 0.0
            if world.map.pick_food(self.position):
                self.phase = Mode.TO_HOME_NO_FOOD
                self.marker_add.target = self.repellent_period
                self.marker_add.value = self._rng.random() * self.marker_add.target
                world.add_marker_repellent(self.position, self.col_id, 300.0)

    def check_colony(self, base) -> None:
        """Handle reaching the colony base: drop food and set out again."""
        dx = self.position[0] - base.position[0]
        dy = self.position[1] - base.position[1]
        if math.hypot(dx, dy) >= base.radius:
            return
        self.marker_add.target = self.marker_period
        if self.phase in (Mode.TO_HOME, Mode.TO_HOME_NO_FOOD):
            base.add_food(1.0)
            self.direction.add(PI)
            base.enemies_found_count += int(self.enemy_found)
        if not self.is_fighting():
            self.autonomy = 0.0
        self.enemy_intensity = 0.0
        self.reset_markers()
        self.enemy_found = False
        self.phase = Mode.TO_ENEMY if self.type is AntType.SOLDIER else Mode.TO_FOOD

    def update_clocks(self, dt: float) -> None:
        self.autonomy += dt
        self.internal_clock += dt
        self.to_enemy_markers_count += dt

    def markers_sampling_type(self) -> Mode:
        if self.phase in (Mode.TO_HOME, Mode.REFILL, Mode.TO_HOME_NO_FOOD):
            return Mode.TO_HOME
        return self.phase

    def reset_markers(self) -> None:
        self.internal_clock = 0.0
        self.to_enemy_markers_count = 0.0

    def add_marker(self, world: World) -> None:
        if self.phase in (Mode.TO_HOME, Mode.TO_FOOD):
            intensity = marker_intensity(0.05, self.internal_clock)
            kind = Mode.TO_HOME if self.phase is Mode.TO_FOOD else Mode.TO_FOOD
            world.add_marker(self.position, kind, intensity, self.col_id)
        elif self.phase is Mode.TO_HOME_NO_FOOD:
            world.add_marker_repellent(
                self.position, self.col_id, marker_intensity(0.1, self.internal_clock)
            )
        if self.enemy_found:
            intensity = min(0.1, self.enemy_intensity) * marker_intensity(
                0.05, self.to_enemy_markers_count
            )
            world.add_marker(self.position, Mode.TO_ENEMY, intensity, self.col_id)

    def food_quad(self) -> List[Vec2]:
        """Corners of the carried-food sprite, far off-screen when empty-handed."""
        radius = 2.0
        fx, fy = -10000.0, -10000.0
        if self.phase in (Mode.TO_HOME, Mode.TO_HOME_NO_FOOD):
            dx, dy = self.direction.vec()
            fx = self.position[0] + self.length * 0.65 * dx
            fy = self.position[1] + self.length * 0.65 * dy
        return [
            (fx - radius, fy - radius),
            (fx + radius, fy - radius),
            (fx + radius, fy + radius),
            (fx - radius, fy + radius),
        ]

    def body_quad(self) -> List[Vec2]:
        """Corners of the ant's body sprite, oriented along its heading."""
        ratio = self.width / self.length
        vx, vy = self.direction.vec()
        dx, dy = vx * self.length, vy * self.length
        nx, ny = -dy * ratio, dx * ratio
        px, py = self.position
        return [
            (px - nx + dx, py - ny + dy),
            (px + nx + dx, py + ny + dy),
            (px + nx - dx, py + ny - dy),
            (px - nx - dx, py - ny - dy),
        ]

    def set_target(self, target: Ref) -> None:
        if self.fight_request is not None and hasattr(self.fight_request, "active"):
            self.fight_request.active = False
        self.fight_mode = FightMode.FIGHTING
        self.target = target
        other = target.get().position
        self.fight_pos = (
            0.5 * (other[0] + self.position[0]),
            0.5 * (other[1] + self.position[1]),
        )
        self.fight_vec = _normalized((other[0] - self.position[0], other[1] - self.position[1]))
        self.direction = Direction(math.atan2(self.fight_vec[1], self.fight_vec[0]))
        self.enemy_found = True

    def kill(self, world: World) -> None:
        if self.phase in (Mode.TO_HOME, Mode.TO_HOME_NO_FOOD):
            world.add_food_at(self.position[0], self.position[1], 1)
        self.phase = Mode.DEAD
        self.remove_from_world_grid(world)

    def detect_enemy(self) -> None:
        self.enemy_found = True
        self.to_enemy_markers_count = 0.0
        self.to_fight_time = 0.0
        self.enemy_intensity += 0.001

    def request_fight(self, ref: Any) -> None:
        self.fight_mode = FightMode.TO_FIGHT
        self.fight_request = ref

    def terminate(self) -> None:
        self.autonomy = self.max_autonomy + 1.0

    def is_done(self) -> bool:
        return self.autonomy >= self.max_autonomy

    def is_dead(self) -> bool:
        return self.phase is Mode.DEAD

    def step(self, world: World, dt: float) -> None:
        """One basic update: fight or wander, forage, and lay markers."""
        self.update_clocks(dt)
        if self.is_fighting():
            self.attack(dt)
            return
        if self.direction_update.update_auto_reset(dt):
            noise = self.direction_noise_range
            self.direction.add(self._rng.uniform(-noise, noise))
        self.update_position(world, dt)
        if self.phase is Mode.TO_FOOD:
            self.check_food(world)
        if self.marker_add.update_auto_reset(dt):
            self.add_marker(world)