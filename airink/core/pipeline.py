import logging

from airink.core.config import DEFAULT_CONFIG, InkSettings
from airink.core.finalizer import StrokeFinalizer
from airink.core.gestures import GestureRecognizer, index_tip, is_complete
from airink.core.models import FrameResult, Gesture, InkPoint
from airink.core.smoothing import PositionSmoother
from airink.core.stabilizer import DrawStabilizer
from airink.core.stroke import PointAdmissionFilter, StrokeBuffer

logger = logging.getLogger(__name__)


def _identity(x, y):
    return x, y


class InkPipeline:
    """
    Per-frame driver: landmarks in, at most one finished stroke out.

    Per frame: classify -> smooth fingertip (cursor) -> on DRAW wait out the
    stabilization delay, map to canvas, admit, buffer. Leaving DRAW or losing
    the hand finalizes the buffer synchronously.

    One instance per ink surface; not thread-safe.
    """

    def __init__(self, config=DEFAULT_CONFIG, settings=None, to_canvas=None, finalizer=None):
        self.config = config
        self.settings = settings or InkSettings()
        self.to_canvas = to_canvas or _identity

        self.recognizer = GestureRecognizer.from_config(config)
        self.smoother = PositionSmoother.from_config(config)
        self.stabilizer = DrawStabilizer(config.draw_start_delay)
        self.admission = PointAdmissionFilter(config.min_point_distance)
        self.buffer = StrokeBuffer()
        self.finalizer = finalizer or StrokeFinalizer(config)

        self._drawing = False

    # ---------- views ----------
    @property
    def cursor(self):
        pos = self.smoother.position
        return None if pos is None else (pos.x, pos.y)

    @property
    def is_drawing(self):
        return self._drawing

    @property
    def pending_points(self):
        return self.buffer.points

    # ---------- helpers ----------
    def frame_to_screen(self, landmark):
        cfg = self.config
        x = (1.0 - landmark.x) if cfg.mirror else landmark.x
        return x * cfg.screen_width, landmark.y * cfg.screen_height

    def _end_stroke(self, settings):
        """Finalize (>= 2 points) or discard the buffer; reset admission."""
        points = self.buffer.take()
        self.admission.reset()
        return self.finalizer.finalize(points, settings)

    # ---------- main ----------
    def process(self, landmarks, settings=None):
        settings = settings or self.settings

        if not is_complete(landmarks):
            return self._hand_lost(settings)

        gesture = self.recognizer.detect(landmarks)
        smoothed = self.smoother.update(*self.frame_to_screen(index_tip(landmarks)))
        result = FrameResult(gesture=gesture, cursor=(smoothed.x, smoothed.y))

        if gesture is Gesture.DRAW:
            self._drawing = True
            result.is_drawing = True
            if not self.stabilizer.update(gesture):
                return result  # still stabilizing

            cx, cy = self.to_canvas(smoothed.x, smoothed.y)
            if self.admission.admit(cx, cy):
                self.buffer.append(InkPoint(cx, cy, self.config.default_pressure))
                result.admitted = 1
            return result

        self._drawing = False
        self.stabilizer.update(gesture)
        result.stroke = self._end_stroke(settings)
        if gesture is Gesture.STOP:
            self.smoother.reset()
        return result

    def _hand_lost(self, settings):
        stroke = self.abort_stroke(settings)
        return FrameResult(stroke=stroke)

    def abort_stroke(self, settings=None):
        """Finish whatever is buffered now and start the filters fresh."""
        settings = settings or self.settings
        stroke = self._end_stroke(settings)
        self.smoother.reset()
        self.stabilizer.reset()
        self._drawing = False
        if stroke is not None:
            logger.debug("stroke %s emitted on abort/hand loss", stroke.id)
        return stroke

    def reset(self):
        """Drop all state without emitting anything."""
        self.buffer.clear()
        self.admission.reset()
        self.smoother.reset()
        self.stabilizer.reset()
        self._drawing = False
