import math

from airink.core.config import DEFAULT_CONFIG
from airink.core.geometry import direction, distance, perpendicular_distance
from airink.core.models import InkPoint

# snap angle -> exact unit vector, so snapped lines are truly axis-aligned
_SNAP_AXES = (
    (0.0, (1.0, 0.0)),
    (math.pi / 2, (0.0, 1.0)),
    (math.pi, (-1.0, 0.0)),
    (-math.pi / 2, (0.0, -1.0)),
    (-math.pi, (-1.0, 0.0)),
)


def simplify_line(points, tolerance):
    """Ramer-Douglas-Peucker polyline reduction."""
    if len(points) <= 2:
        return list(points)

    start, end = points[0], points[-1]
    max_dist, max_index = 0.0, 0
    for i in range(1, len(points) - 1):
        d = perpendicular_distance(points[i], start, end)
        if d > max_dist:
            max_dist, max_index = d, i

    if max_dist > tolerance:
        left = simplify_line(points[:max_index + 1], tolerance)
        right = simplify_line(points[max_index:], tolerance)
        return left[:-1] + right

    return [start, end]


def snap_to_straight_line(points, config=DEFAULT_CONFIG):
    """
    Straighten strokes that were meant as lines.
    Returns (points, collapsed) where collapsed means the result is a
    deliberate two-point line.
    """
    if len(points) <= 2:
        return list(points), False

    start, end = points[0], points[-1]
    angle = direction(start, end)
    length = distance(start, end)

    for snap_angle, (ux, uy) in _SNAP_AXES:
        if abs(angle - snap_angle) < config.snap_angle_threshold:
            snapped_end = InkPoint(start.x + length * ux, start.y + length * uy, end.pressure)
            return [start, snapped_end], True

    if length < config.snap_min_length:
        return list(points), False

    max_deviation = max(perpendicular_distance(p, start, end) for p in points)
    if max_deviation < length * config.snap_deviation_ratio:
        return [start, end], True

    return list(points), False


def simplify_stroke(points, config=DEFAULT_CONFIG):
    """Fallback path for unrecognized strokes: snap, then RDP."""
    points, collapsed = snap_to_straight_line(points, config)
    if not collapsed and len(points) > 2:
        points = simplify_line(points, config.simplify_tolerance)
    return points, collapsed
