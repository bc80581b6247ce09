import logging
import time
import uuid

from airink.core.config import DEFAULT_CONFIG, InkSettings
from airink.core.models import FinishedStroke, StrokeKind
from airink.core.recognizer import ShapeRecognizer, shape_kind, shape_to_points
from airink.core.simplify import simplify_stroke

logger = logging.getLogger(__name__)


def _new_id():
    return uuid.uuid4().hex


def _now_ms():
    return int(time.time() * 1000)


class StrokeFinalizer:
    """
    Turns a finished point buffer into a FinishedStroke.

    Policy, first match wins:
      1. straight-line mode  -> line from first to last point
      2. shape recognition   -> rectangle / ellipse / line / pen(triangle)
      3. fallback            -> snap + RDP; line if the snap collapsed it
    """

    def __init__(self, config=DEFAULT_CONFIG, recognizer=None, id_factory=_new_id, clock=_now_ms):
        self.config = config
        self.recognizer = recognizer or ShapeRecognizer(config)
        self.id_factory = id_factory
        self.clock = clock

    def finalize(self, points, settings=None):
        settings = settings or InkSettings()
        if len(points) < 2:
            logger.debug("discarding stroke with %d point(s)", len(points))
            return None

        points = list(points)
        if settings.straight_line_mode:
            kind, out = StrokeKind.LINE, [points[0], points[-1]]
        else:
            kind, out = self._classify(points, settings)

        style = settings.style
        stroke = FinishedStroke(
            id=self.id_factory(),
            kind=kind,
            points=tuple(out),
            color=style.color,
            width=style.width,
            opacity=style.opacity,
            timestamp=self.clock(),
        )
        logger.debug("stroke %s: %s, %d -> %d points", stroke.id, kind.value, len(points), len(out))
        return stroke

    def _classify(self, points, settings):
        if settings.shape_recognition:
            shape = self.recognizer.recognize(points)
            if shape is not None:
                return shape_kind(shape), shape_to_points(shape, self.config)
            logger.debug("no shape matched, simplifying")

        simplified, collapsed = simplify_stroke(points, self.config)
        return (StrokeKind.LINE if collapsed else StrokeKind.PEN), simplified
