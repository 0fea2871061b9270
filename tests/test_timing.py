import pytest

from blockfall.game import GravityTimer


def test_fires_once_interval_is_reached():
    timer = GravityTimer(0.5)
    assert not timer.advance(0.25)
    assert not timer.advance(0.125)
    assert timer.advance(0.125)
    assert timer.elapsed == 0.0


def test_excess_time_is_discarded_on_tick():
    timer = GravityTimer(0.5)
    assert timer.advance(1.7)
    assert timer.elapsed == 0.0
    assert not timer.advance(0.4)


def test_reset_and_validation():
    timer = GravityTimer(0.5)
    timer.advance(0.3)
    timer.reset()
    assert timer.elapsed == 0.0
    with pytest.raises(ValueError):
        timer.advance(-0.1)
    with pytest.raises(ValueError):
        GravityTimer(0)
