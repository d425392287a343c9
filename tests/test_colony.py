import random

import pytest

from antsim.ant import Ant, AntType
from antsim.colony import Colony, ColonyBase, PopulationDiff
from antsim.world import FightMode, Mode, World


def make_colony(n=100, x=50.0, y=50.0):
    return Colony(x, y, n, rng=random.Random(1))


def test_base_use_food():
    base = ColonyBase((0.0, 0.0), 20.0, food=5.0)
    assert base.use_food(4.0) is True
    assert base.food == pytest.approx(1.0)
    assert base.use_food(4.0) is False
    assert base.food == pytest.approx(1.0)
    base.add_food(3.0)
    assert base.use_food(4.0) is True


def test_population_diff_window():
    diff = PopulationDiff(3)
    assert diff.get() == 0
    for v in (1, 2, 3, 4):
        diff.add_value(v)
    assert diff.get() == 2


def test_population_diff_rejects_bad_window():
    with pytest.raises(ValueError):
        PopulationDiff(0)


def test_initialize_spawns_ants_at_base():
    colony = make_colony()
    colony.initialize(2, 10)
    assert len(colony.ants) == 10
    assert colony.id == 2
    assert all(a.position == colony.base.position for a in colony.ants)
    assert all(a.col_id == 2 for a in colony.ants)
    assert sorted(a.id for a in colony.ants) == list(range(10))


def test_set_position_moves_ants():
    colony = make_colony()
    colony.initialize(0, 5)
    colony.set_position((30.0, 40.0))
    assert colony.position_changed
    assert colony.base.position == (30.0, 40.0)
    assert all(a.position == (30.0, 40.0) for a in colony.ants)


def test_create_new_ants_spends_food():
    colony = make_colony()
    colony.base.food = 4.0
    colony.create_new_ants(0.125)
    assert len(colony.ants) == 1
    assert colony.base.food == pytest.approx(0.0)
    colony.create_new_ants(0.125)
    assert len(colony.ants) == 1


def test_create_new_ants_respects_max():
    colony = make_colony(n=0)
    colony.base.food = 100.0
    colony.create_new_ants(0.125)
    assert len(colony.ants) == 0
    assert not colony.is_not_full()


def test_soldier_creation():
    colony = make_colony()
    colony.base.food = 12.0
    colony.base.enemies_found_count = 1
    assert colony.must_create_soldier()
    colony.create_new_ants(0.125)
    assert colony.soldiers_count() == 1
    assert colony.base.enemies_found_count == 0
    soldier = next(iter(colony.ants))
    assert soldier.type is AntType.SOLDIER
    assert soldier.length == pytest.approx(2 * Ant().length)
    assert soldier.max_autonomy == pytest.approx(2 * Ant().max_autonomy)


def test_kill_and_remove_dead_ants():
    world = World(100, 100)
    colony = make_colony()
    colony.initialize(0, 4)
    victim = next(iter(colony.ants))
    victim.terminate()
    assert colony.kill_weak_ants(world) == 1
    assert victim.is_dead()
    colony.remove_dead_ants()
    assert len(colony.ants) == 3
    assert all(not a.is_dead() for a in colony.ants)


def test_kill_ant_carrying_food_drops_it():
    world = World(100, 100)
    colony = make_colony()
    ant = colony.create_worker()
    ant.phase = Mode.TO_HOME
    ant.terminate()
    colony.kill_weak_ants(world)
    assert world.map.get(ant.position).food == 1


def test_set_color():
    colony = make_colony()
    colony.set_color((1, 2, 3, 255))
    assert colony.ants_color == (1, 2, 3, 255)
    assert colony.color_changed


def test_stop_fights_with():
    a = make_colony()
    b = Colony(60.0, 50.0, 10, rng=random.Random(2))
    a.initialize(0, 1)
    b.initialize(1, 1)
    ant = next(iter(a.ants))
    enemy_id = next(iter(b.ants)).id
    ant.set_target(b.ants.ref(enemy_id))
    assert ant.is_fighting()
    a.stop_fights_with(1)
    assert ant.fight_mode is FightMode.NO_FIGHT
    assert not ant.target


def test_update_records_population():
    world = World(100, 100)
    colony = make_colony()
    colony.initialize(0, 3)
    colony.update(1.0, world)
    assert len(colony.ants) == 3
    assert colony.pop_diff.get() == 0
    assert all(a.phase is Mode.TO_FOOD for a in colony.ants)