import math


class PointAdmissionFilter:
    """Keeps a smoothed point only if it moved far enough from the last kept one."""

    def __init__(self, min_distance=15.0):
        self.min_distance = min_distance
        self.last_point = None

    def admit(self, x, y):
        if self.last_point is not None:
            lx, ly = self.last_point
            if math.hypot(x - lx, y - ly) < self.min_distance:
                return False
        self.last_point = (x, y)
        return True

    def reset(self):
        self.last_point = None


class StrokeBuffer:
    """In-progress ink points of the current stroke, in drawing order."""

    def __init__(self):
        self._points = []

    def append(self, point):
        self._points.append(point)

    @property
    def points(self):
        return list(self._points)

    @property
    def first(self):
        return self._points[0] if self._points else None

    @property
    def last(self):
        return self._points[-1] if self._points else None

    def take(self):
        """Hand the points over and start empty."""
        points, self._points = self._points, []
        return points

    def clear(self):
        self._points = []

    def __len__(self):
        return len(self._points)

    def __bool__(self):
        return bool(self._points)
