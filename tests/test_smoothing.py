import pytest

from airink.core.config import InkConfig
from airink.core.smoothing import ExponentialMovingAverage, MovingAverage, PositionSmoother


def test_moving_average_evicts_oldest():
    avg = MovingAverage(size=5)
    for x in range(6):
        result = avg.push(float(x), 0.0)
    assert len(avg) == 5
    assert result == pytest.approx((3.0, 0.0))  # mean of 1..5


def test_moving_average_partial_history():
    avg = MovingAverage(size=5)
    avg.push(0.0, 0.0)
    assert avg.push(10.0, 4.0) == pytest.approx((5.0, 2.0))


def test_ema_first_value_passes_through():
    ema = ExponentialMovingAverage(factor=0.08)
    assert ema.update(10.0, 20.0) == (10.0, 20.0)


def test_ema_blends_by_factor():
    ema = ExponentialMovingAverage(factor=0.08)
    ema.update(0.0, 0.0)
    assert ema.update(10.0, -10.0) == pytest.approx((0.8, -0.8))
    assert ema.update(10.0, -10.0) == pytest.approx((0.8 + 0.08 * 9.2, -(0.8 + 0.08 * 9.2)))


def test_ema_reset():
    ema = ExponentialMovingAverage(factor=0.5)
    ema.update(4.0, 4.0)
    ema.reset()
    assert ema.value is None
    assert ema.update(1.0, 1.0) == (1.0, 1.0)


def test_smoother_first_observation_is_stage_one_output():
    smoother = PositionSmoother()
    pos = smoother.update(100.0, 50.0)
    assert (pos.x, pos.y) == pytest.approx((100.0, 50.0))
    assert (pos.raw_x, pos.raw_y) == (100.0, 50.0)


def test_smoother_composes_average_and_ema():
    smoother = PositionSmoother(history_size=5, factor=0.08)
    smoother.update(0.0, 0.0)
    pos = smoother.update(10.0, 0.0)
    # stage 1 mean is 5, stage 2 moves 8% of the way there
    assert pos.x == pytest.approx(0.4)
    assert pos.raw_x == 10.0
    assert smoother.position == pos


def test_smoother_damps_single_frame_spike():
    smoother = PositionSmoother()
    for _ in range(5):
        smoother.update(100.0, 100.0)
    pos = smoother.update(300.0, 100.0)
    assert pos.x == pytest.approx(100.0 + 0.08 * 40.0)


def test_smoother_reset_clears_both_stages():
    smoother = PositionSmoother()
    smoother.update(10.0, 10.0)
    smoother.update(20.0, 20.0)
    smoother.reset()
    assert smoother.position is None
    assert len(smoother.average) == 0
    pos = smoother.update(50.0, 60.0)
    assert (pos.x, pos.y) == pytest.approx((50.0, 60.0))


def test_from_config():
    smoother = PositionSmoother.from_config(InkConfig(history_size=2, smoothing_factor=0.5))
    assert smoother.average.size == 2
    assert smoother.ema.factor == 0.5
