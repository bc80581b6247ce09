import logging
import os
import sys
import warnings

import cv2

# Suppress warnings from dependencies
os.environ['TF_CPP_MIN_LOG_LEVEL'] = '2'  # Suppress TensorFlow warnings
warnings.filterwarnings('ignore', category=UserWarning)  # Suppress protobuf warnings

from airink.core.canvas import AirCanvas
from airink.core.config import InkConfig, InkSettings
from airink.core.models import Gesture, StrokeStyle
from airink.core.pipeline import InkPipeline
from airink.core.tracker import HandTracker

WINDOW_NAME = "AirInk"

GESTURE_COLORS = {
    Gesture.DRAW: (100, 255, 150),
    Gesture.MOVE: (255, 200, 100),
    Gesture.ERASE: (100, 100, 255),
    Gesture.STOP: (150, 150, 150),
}


def _draw_cursor(frame, result):
    if result.cursor is None:
        return
    x, y = int(result.cursor[0]), int(result.cursor[1])
    color = GESTURE_COLORS.get(result.gesture, (255, 255, 255))
    cv2.circle(frame, (x, y), 10 if result.is_drawing else 6, color, 2, cv2.LINE_AA)
    cv2.circle(frame, (x, y), 2, (255, 255, 255), -1, cv2.LINE_AA)


def _draw_status(frame, result, settings, last_kind):
    gesture = result.gesture.value.upper() if result.gesture else "NO HAND"
    lines = [
        f"Gesture: {gesture}",
        f"Straight lines [s]: {'ON' if settings.straight_line_mode else 'OFF'}",
        f"Shapes [r]: {'ON' if settings.shape_recognition else 'OFF'}",
    ]
    if last_kind:
        lines.append(f"Last stroke: {last_kind}")
    y = 30
    for line in lines:
        cv2.putText(frame, line, (15, y), cv2.FONT_HERSHEY_SIMPLEX, 0.6, (0, 0, 0), 3, cv2.LINE_AA)
        cv2.putText(frame, line, (15, y), cv2.FONT_HERSHEY_SIMPLEX, 0.6, (255, 255, 255), 1, cv2.LINE_AA)
        y += 25


def main():
    logging.basicConfig(level=os.environ.get("AIRINK_LOG_LEVEL", "INFO"),
                        format='%(asctime)s - %(levelname)s - %(message)s')

    cap = cv2.VideoCapture(0)
    cap.set(cv2.CAP_PROP_FRAME_WIDTH, 1280)
    cap.set(cv2.CAP_PROP_FRAME_HEIGHT, 720)
    if not cap.isOpened():
        print("❌ Could not open camera.")
        return 1

    ok, test_frame = cap.read()
    if not ok:
        print("❌ Could not read test frame.")
        cap.release()
        return 1
    H, W = test_frame.shape[:2]

    # frames are flipped before detection, so no extra mirroring in the mapping
    config = InkConfig.from_env().with_overrides(screen_width=W, screen_height=H, mirror=False)
    settings = InkSettings(style=StrokeStyle(color=(0, 0, 255), width=6))
    pipeline = InkPipeline(config, settings)
    canvas = AirCanvas(width=W, height=H)
    tracker = HandTracker()
    last_kind = None

    print(f"✅ AirInk ready ({W}x{H}) - index up = draw, two fingers = move, q = quit")

    try:
        while cap.isOpened():
            ok, frame = cap.read()
            if not ok:
                break
            frame = cv2.flip(frame, 1)

            result = pipeline.process(tracker.detect(frame))
            if result.stroke is not None:
                canvas.add_stroke(result.stroke)
                last_kind = result.stroke.kind.value
                print(f"✏️ {last_kind} ({len(result.stroke.points)} points)")

            view = canvas.render(background=frame)
            canvas.draw_preview(view, pipeline.pending_points)
            _draw_cursor(view, result)
            _draw_status(view, result, settings, last_kind)
            cv2.imshow(WINDOW_NAME, view)

            key = cv2.waitKey(1) & 0xFF
            if key == ord('q'):
                break
            elif key == ord('s'):
                settings.straight_line_mode = not settings.straight_line_mode
            elif key == ord('r'):
                settings.shape_recognition = not settings.shape_recognition
            elif key == ord('a'):
                canvas.add_stroke(pipeline.abort_stroke())
            elif key == ord('u'):
                canvas.undo()
            elif key == ord('y'):
                canvas.redo()
            elif key == ord('c'):
                canvas.clear()
                last_kind = None
            elif key == ord('w'):
                print(f"💾 Saved to {canvas.save()}")
    except KeyboardInterrupt:
        print("\n🛑 Stopped by user.")
    finally:
        tracker.close()
        cap.release()
        cv2.destroyAllWindows()
    return 0


if __name__ == "__main__":
    sys.exit(main())
