import pytest

from blockfall.timer import GravityTimer
from blockfall.utils import GRAVITY_MS


def test_default_interval_is_half_a_second():
    assert GRAVITY_MS == 500
    assert GravityTimer().interval_ms == 500


def test_stopped_timer_reports_no_ticks():
    timer = GravityTimer()
    assert not timer.running
    assert timer.advance(10_000) == 0
    assert timer.elapsed_ms == 0


def test_ticks_accumulate_across_calls():
    timer = GravityTimer(500)
    timer.start()
    assert timer.advance(499) == 0
    assert timer.advance(1) == 1
    assert timer.advance(1200) == 2
    assert timer.elapsed_ms == pytest.approx(200)


def test_stop_discards_partial_interval():
    timer = GravityTimer(500)
    timer.start()
    timer.advance(400)
    timer.stop()
    timer.start()
    assert timer.advance(400) == 0


def test_suspended_restores_running_state():
    timer = GravityTimer()
    timer.start()
    with timer.suspended():
        assert not timer.running
        with timer.suspended():
            assert not timer.running
        assert not timer.running
    assert timer.running


def test_suspended_leaves_stopped_timer_stopped():
    timer = GravityTimer()
    with timer.suspended():
        pass
    assert not timer.running


def test_suspended_restores_on_error():
    timer = GravityTimer()
    timer.start()
    with pytest.raises(RuntimeError):
        with timer.suspended():
            raise RuntimeError("boom")
    assert timer.running


def test_interval_must_be_positive():
    with pytest.raises(ValueError):
        GravityTimer(0)
