import numpy as np

from airink.core.models import Gesture, Landmark

NUM_LANDMARKS = 21

FINGER_TIPS = {"thumb": 4, "index": 8, "middle": 12, "ring": 16, "pinky": 20}
FINGER_PIPS = {"thumb": 3, "index": 6, "middle": 10, "ring": 14, "pinky": 18}


def to_landmark_frame(hand):
    """MediaPipe hand (has .landmark) -> list of Landmark tuples, or None."""
    if hand is None:
        return None
    return [Landmark(lm.x, lm.y, getattr(lm, "z", 0.0)) for lm in hand.landmark]


def is_complete(landmarks):
    """A usable frame has all 21 landmarks; anything else counts as no hand."""
    if landmarks is None or len(landmarks) < NUM_LANDMARKS:
        return False
    return all(landmarks[i] is not None for i in range(NUM_LANDMARKS))


def index_tip(landmarks):
    return landmarks[FINGER_TIPS["index"]]


class GestureRecognizer:
    """
    Maps one frame of 21 hand landmarks to a drawing intent:
      - DRAW  : index finger up, middle/ring/pinky folded
      - MOVE  : index + middle up (pointer without ink)
      - ERASE : thumb tip pinched against index tip
      - STOP  : fist, open palm, anything else

    Pure: no memory between frames. Debouncing happens in DrawStabilizer.
    """

    def __init__(self, pinch_threshold=0.05):
        self.pinch_threshold = pinch_threshold

    @classmethod
    def from_config(cls, config):
        return cls(config.pinch_threshold)

    # ---------- helpers ----------
    def fingers_up(self, landmarks):
        """Tip above pip (smaller y) means extended. Returns {name: bool}."""
        return {
            name: landmarks[tip].y < landmarks[FINGER_PIPS[name]].y
            for name, tip in FINGER_TIPS.items()
        }

    def pinch_distance(self, landmarks):
        thumb = landmarks[FINGER_TIPS["thumb"]]
        index = landmarks[FINGER_TIPS["index"]]
        return float(np.linalg.norm([thumb.x - index.x, thumb.y - index.y]))

    # ---------- main ----------
    def detect(self, landmarks):
        if not is_complete(landmarks):
            return Gesture.STOP

        up = self.fingers_up(landmarks)
        others_down = not up["ring"] and not up["pinky"]

        if up["index"] and not up["middle"] and others_down:
            return Gesture.DRAW

        # extension check wins over pinch
        if up["index"] and up["middle"] and others_down:
            return Gesture.MOVE

        if self.pinch_distance(landmarks) < self.pinch_threshold:
            return Gesture.ERASE

        return Gesture.STOP
