import os

import cv2
import numpy as np

from airink.core.models import StrokeKind


class AirCanvas:
    """
    Drawing-layer sink: owns finished strokes and rasterizes them with OpenCV.
    Strokes are kept as vectors so undo and re-render are exact.
    """

    def __init__(self, width=1280, height=720):
        self.width = width
        self.height = height
        self.strokes = []
        self.redo_stack = []

    def add_stroke(self, stroke):
        if stroke is None:
            return
        self.strokes.append(stroke)
        self.redo_stack.clear()

    def undo(self):
        if self.strokes:
            self.redo_stack.append(self.strokes.pop())
            return True
        return False

    def redo(self):
        if self.redo_stack:
            self.strokes.append(self.redo_stack.pop())
            return True
        return False

    def clear(self):
        self.strokes = []
        self.redo_stack = []

    @staticmethod
    def _polyline(points):
        return np.array([[int(round(p.x)), int(round(p.y))] for p in points], np.int32)

    def _draw_stroke(self, image, stroke):
        if len(stroke.points) < 2:
            return
        pts = self._polyline(stroke.points)
        thickness = max(1, int(round(stroke.width)))
        closed = stroke.kind in (StrokeKind.RECTANGLE, StrokeKind.ELLIPSE) or stroke.is_closed

        if stroke.opacity >= 1.0:
            cv2.polylines(image, [pts], closed, stroke.color, thickness, cv2.LINE_AA)
            return

        # translucent ink: draw on a copy and blend
        overlay = image.copy()
        cv2.polylines(overlay, [pts], closed, stroke.color, thickness, cv2.LINE_AA)
        alpha = max(0.0, stroke.opacity)
        cv2.addWeighted(overlay, alpha, image, 1 - alpha, 0, image)

    def render(self, background=None):
        """BGR image with every stored stroke drawn on top of background."""
        if background is None:
            image = np.zeros((self.height, self.width, 3), dtype=np.uint8)
        else:
            image = background.copy()
        for stroke in self.strokes:
            self._draw_stroke(image, stroke)
        return image

    def draw_preview(self, image, points, color=(200, 200, 200), thickness=2):
        """Thin line through the points of the stroke still being drawn."""
        if len(points) >= 2:
            cv2.polylines(image, [self._polyline(points)], False, color, thickness, cv2.LINE_AA)
        return image

    def save(self, filename="drawing.png"):
        full_path = os.path.abspath(filename)
        cv2.imwrite(full_path, self.render())
        return full_path
