import math
from typing import NamedTuple

import numpy as np


class Bounds(NamedTuple):
    x: float
    y: float
    width: float
    height: float


def as_array(points):
    """(N, 2) float array from anything exposing .x / .y."""
    return np.array([(p.x, p.y) for p in points], dtype=float).reshape(-1, 2)


def distance(a, b):
    return math.hypot(b.x - a.x, b.y - a.y)


def perpendicular_distance(point, start, end):
    """Distance from point to the segment start-end (projection clamped)."""
    dx = end.x - start.x
    dy = end.y - start.y
    length_sq = dx * dx + dy * dy
    if length_sq == 0:
        return distance(point, start)

    t = ((point.x - start.x) * dx + (point.y - start.y) * dy) / length_sq
    t = max(0.0, min(1.0, t))
    proj_x = start.x + t * dx
    proj_y = start.y + t * dy
    return math.hypot(point.x - proj_x, point.y - proj_y)


def centroid(points):
    cx, cy = as_array(points).mean(axis=0)
    return float(cx), float(cy)


def bounding_box(points):
    pts = as_array(points)
    (min_x, min_y), (max_x, max_y) = pts.min(axis=0), pts.max(axis=0)
    return Bounds(float(min_x), float(min_y), float(max_x - min_x), float(max_y - min_y))


def radii(points, center):
    """Distances from center to every point, as an array."""
    return np.linalg.norm(as_array(points) - np.asarray(center, dtype=float), axis=1)


def path_length(points):
    pts = as_array(points)
    if len(pts) < 2:
        return 0.0
    return float(np.linalg.norm(np.diff(pts, axis=0), axis=1).sum())


def direction(a, b):
    return math.atan2(b.y - a.y, b.x - a.x)


def turning_angle(angle_in, angle_out):
    """Absolute change of heading, folded into [0, pi]."""
    diff = abs(angle_out - angle_in) % (2 * math.pi)
    if diff > math.pi:
        diff = 2 * math.pi - diff
    return diff
