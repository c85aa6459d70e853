import pytest

from duds.components import (
    HighlightEvent,
    Layer,
    MapPosition,
    Moving,
    Target,
    Timer,
    Walkable,
)


def test_timer_not_finished_before_tick():
    timer = Timer(1.0)
    assert timer.finished() is False


def test_timer_finishes_after_full_duration():
    timer = Timer(1.0)
    timer.tick(0.5)
    assert timer.finished() is False
    timer.tick(0.5)
    assert timer.finished() is True


def test_zero_timer_finishes_on_first_tick():
    timer = Timer(0.0)
    timer.tick(0.0)
    assert timer.finished() is True


def test_timer_elapsed_is_clamped_to_duration():
    timer = Timer(1.0)
    timer.tick(5.0)
    assert timer.elapsed == timer.duration


def test_timer_rejects_negative_values():
    with pytest.raises(ValueError):
        Timer(-1.0)
    with pytest.raises(ValueError):
        Timer(1.0).tick(-0.1)


def test_moving_defaults():
    moving = Moving()
    assert moving.speed == 0.5
    assert moving.timer.duration == 0.0


def test_moving_instances_do_not_share_timers():
    a, b = Moving(), Moving()
    a.timer.tick(0.0)
    assert a.timer.finished() is True
    assert b.timer.finished() is False


def test_map_position_default_and_hash():
    assert MapPosition() == MapPosition(0, 0)
    assert len({MapPosition(1, 2), MapPosition(1, 2)}) == 1


def test_default_layer_and_walkable():
    assert Layer().value == 0
    assert Walkable().cost == 0


def test_target_defaults_empty():
    target = Target()
    assert target.path is None
    assert target.position is None


def test_highlight_event_fields():
    event = HighlightEvent(7, True)
    assert (event.entity, event.add) == (7, True)