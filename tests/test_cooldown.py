import pytest

from antsim.cooldown import Cooldown


def test_defaults_are_zero_and_ready():
    c = Cooldown()
    assert c.value == 0.0
    assert c.ready()


def test_becomes_ready_after_target():
    c = Cooldown(1.0)
    c.update(0.5)
    assert not c.ready()
    c.update(0.5)
    assert c.ready()


def test_auto_reset():
    c = Cooldown(1.0)
    assert not c.update_auto_reset(0.75)
    assert c.value == pytest.approx(0.75)
    assert c.update_auto_reset(0.5)
    assert c.value == 0.0


def test_ready_next():
    c = Cooldown(1.0, 0.75)
    assert c.ready_next(0.5)
    assert not c.ready_next(0.125)
    c.update(0.5)
    assert not c.ready_next(0.5)


def test_ratio_and_reset():
    c = Cooldown(2.0)
    c.update(0.5)
    assert c.ratio() == pytest.approx(0.5 / 2.0)
    c.reset()
    assert c.ratio() == 0.0


def test_ratio_zero_target_raises():
    with pytest.raises(ZeroDivisionError):
        Cooldown().ratio()