import logging
import math
from dataclasses import dataclass
from typing import Tuple

from airink.core.config import DEFAULT_CONFIG
from airink.core.geometry import (
    Bounds, bounding_box, centroid, direction, distance, path_length, radii,
    turning_angle,
)
from airink.core.models import InkPoint, StrokeKind

logger = logging.getLogger(__name__)


# ---------- recognized shapes (no match is plain None) ----------
@dataclass(frozen=True)
class RectangleShape:
    points: Tuple[InkPoint, ...]
    bounds: Bounds


@dataclass(frozen=True)
class CircleShape:
    center: Tuple[float, float]
    radius: float


@dataclass(frozen=True)
class TriangleShape:
    points: Tuple[InkPoint, ...]


@dataclass(frozen=True)
class LineShape:
    start: InkPoint
    end: InkPoint


class ShapeRecognizer:
    """
    Classifies a finished freehand path as circle / rectangle / triangle /
    line, or None.

    The circle test runs before corner detection. Rectangle, triangle and
    circle all require a closed path; line requires an open one.
    """

    def __init__(self, config=DEFAULT_CONFIG):
        self.config = config

    def is_closed(self, points):
        if len(points) < 3:
            return False
        return distance(points[0], points[-1]) < self.config.closure_threshold

    def circle_fit(self, points):
        """(center, avg_radius) if the path is round enough, else None."""
        cfg = self.config
        if len(points) < cfg.circle_min_points:
            return None
        center = centroid(points)
        r = radii(points, center)
        avg = float(r.mean())
        if avg < cfg.min_shape_size / 2:
            return None
        variance = float(abs(r - avg).max()) / avg
        if variance >= cfg.circle_variance_threshold:
            return None
        return center, avg

    def detect_corners(self, points):
        """
        Indices where the heading turns sharply, measured over a window of
        `corner_window` samples each side. First and last are always
        included, so a closed quad yields 5 indices.
        """
        w = self.config.corner_window
        n = len(points)
        corners = [0]
        for i in range(w, n - w):
            angle_in = direction(points[i - w], points[i])
            angle_out = direction(points[i], points[i + w])
            if turning_angle(angle_in, angle_out) <= self.config.corner_angle_threshold:
                continue
            if i - corners[-1] > 2 * w:
                corners.append(i)
        corners.append(n - 1)
        return corners

    def is_rectangle(self, points, corners):
        if len(corners) != 5:
            return False
        pts = [points[i] for i in corners]
        edges = [direction(pts[k], pts[k + 1]) for k in range(4)]
        # three turns at the inner corners plus the closing turn back into edge 0
        turns = [turning_angle(edges[k - 1], edges[k]) for k in range(1, 4)]
        turns.append(turning_angle(edges[3], edges[0]))
        tolerance = self.config.rectangle_angle_tolerance
        return all(abs(t - math.pi / 2) <= tolerance for t in turns)

    def recognize(self, points):
        cfg = self.config
        if len(points) < 3:
            return None

        bounds = bounding_box(points)
        if bounds.width < cfg.min_shape_size and bounds.height < cfg.min_shape_size:
            return None

        closed = self.is_closed(points)
        pressure = points[0].pressure

        if closed:
            fit = self.circle_fit(points)
            if fit is not None:
                center, radius = fit
                logger.debug("circle: center=(%.1f, %.1f) r=%.1f", center[0], center[1], radius)
                return CircleShape(center, radius)

        corners = self.detect_corners(points)

        if closed and self.is_rectangle(points, corners):
            x, y, w, h = bounds
            rect = (
                InkPoint(x, y, pressure),
                InkPoint(x + w, y, pressure),
                InkPoint(x + w, y + h, pressure),
                InkPoint(x, y + h, pressure),
                InkPoint(x, y, pressure),
            )
            logger.debug("rectangle: %s", bounds)
            return RectangleShape(rect, bounds)

        if closed and len(corners) == 4:
            tri = [InkPoint(points[i].x, points[i].y, pressure) for i in corners[:3]]
            logger.debug("triangle: corners=%s", corners[:3])
            return TriangleShape(tuple(tri + [tri[0]]))

        if not closed and len(corners) <= 2:
            start, end = points[0], points[-1]
            direct = distance(start, end)
            if direct >= cfg.min_shape_size and path_length(points) / direct < cfg.line_straightness_ratio:
                logger.debug("line: length=%.1f", direct)
                return LineShape(start, end)

        return None


def shape_to_points(shape, config=DEFAULT_CONFIG):
    if isinstance(shape, (RectangleShape, TriangleShape)):
        return list(shape.points)
    if isinstance(shape, CircleShape):
        cx, cy = shape.center
        n = config.circle_segments
        ring = [
            InkPoint(
                cx + shape.radius * math.cos(2 * math.pi * i / n),
                cy + shape.radius * math.sin(2 * math.pi * i / n),
                config.default_pressure,
            )
            for i in range(n)
        ]
        return ring + [ring[0]]
    if isinstance(shape, LineShape):
        return [shape.start, shape.end]
    return None


_KINDS = {
    RectangleShape: StrokeKind.RECTANGLE,
    CircleShape: StrokeKind.ELLIPSE,
    LineShape: StrokeKind.LINE,
    TriangleShape: StrokeKind.PEN,  # triangles are stored as closed pen strokes
}


def shape_kind(shape):
    return _KINDS[type(shape)]
