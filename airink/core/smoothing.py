from collections import deque

import numpy as np

from airink.core.models import SmoothedPosition


class MovingAverage:
    """Stage 1: plain mean over the last `size` raw points."""

    def __init__(self, size=5):
        self.size = size
        self.history = deque(maxlen=size)

    def push(self, x, y):
        self.history.append((x, y))
        mx, my = np.mean(self.history, axis=0)
        return float(mx), float(my)

    def reset(self):
        self.history.clear()

    def __len__(self):
        return len(self.history)


class ExponentialMovingAverage:
    """Stage 2: nudges the running value toward each new input by `factor`."""

    def __init__(self, factor=0.08):
        self.factor = factor
        self.value = None

    def update(self, x, y):
        if self.value is None:
            self.value = (x, y)
            return self.value
        vx, vy = self.value
        self.value = (vx + self.factor * (x - vx), vy + self.factor * (y - vy))
        return self.value

    def reset(self):
        self.value = None


class PositionSmoother:
    """
    Two-stage jitter filter for the fingertip: a short moving average feeds
    a slow EMA. Low EMA factor = very smooth but laggy cursor.
    """

    def __init__(self, history_size=5, factor=0.08):
        self.average = MovingAverage(history_size)
        self.ema = ExponentialMovingAverage(factor)
        self._last = None

    @classmethod
    def from_config(cls, config):
        return cls(config.history_size, config.smoothing_factor)

    def update(self, raw_x, raw_y):
        mean_x, mean_y = self.average.push(raw_x, raw_y)
        x, y = self.ema.update(mean_x, mean_y)
        self._last = SmoothedPosition(x, y, raw_x, raw_y)
        return self._last

    @property
    def position(self):
        return self._last

    def reset(self):
        self.average.reset()
        self.ema.reset()
        self._last = None
