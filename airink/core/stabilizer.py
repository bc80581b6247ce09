from airink.core.models import Gesture


class DrawStabilizer:
    """
    Holds back ink for the first `start_delay` consecutive DRAW frames so a
    single misclassified frame at gesture start cannot open a stroke.
    """

    def __init__(self, start_delay=3):
        self.start_delay = start_delay
        self.frame_count = 0

    def update(self, gesture):
        """Returns True when this frame may commit an ink point."""
        if gesture is not Gesture.DRAW:
            self.frame_count = 0
            return False
        self.frame_count += 1
        return self.frame_count > self.start_delay

    @property
    def is_stable(self):
        return self.frame_count > self.start_delay

    def reset(self):
        self.frame_count = 0
